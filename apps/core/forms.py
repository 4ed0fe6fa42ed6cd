import re

from django import forms
from .models import SiteSettings, TeamMember, LLMConfig
from .security import encrypt_value

INPUT_CLASS = 'w-full px-3 py-2 border rounded-lg focus:outline-none focus:ring-2 focus:ring-blue-500'
CHECKBOX_CLASS = 'h-4 w-4 text-blue-600 focus:ring-blue-500 border-gray-300 rounded'
HEX_COLOR_PATTERN = r'#[0-9A-Fa-f]{6}'


class StyledFormMixin:
    """Tailwind classes for every widget, matching the dashboard look."""

    def _apply_styles(self):
        for field in self.fields.values():
            if isinstance(field.widget, forms.CheckboxInput):
                field.widget.attrs.update({'class': CHECKBOX_CLASS})
            else:
                field.widget.attrs.update({'class': INPUT_CLASS})


class LLMConfigForm(StyledFormMixin, forms.ModelForm):
    active_model = forms.ChoiceField(required=False)
    api_key = forms.CharField(
        required=False,
        widget=forms.PasswordInput(render_value=False),
        help_text="Enter OpenAI API key (stored encrypted). Leave blank to keep existing."
    )

    class Meta:
        model = LLMConfig
        fields = [
            'active_model',
            'system_prompt',
            'temperature',
            'max_output_tokens',
            'monthly_token_cap',
            'generation_enabled',
            'auto_disable_on_cap',
        ]
        widgets = {
            'system_prompt': forms.Textarea(attrs={'rows': 6}),
        }

    def __init__(self, *args, model_choices=None, **kwargs):
        super().__init__(*args, **kwargs)
        if model_choices is not None:
            self.fields['active_model'].choices = model_choices
        self._apply_styles()

    def clean_active_model(self):
        # Keep the stored model when the picker was left empty
        return self.cleaned_data.get('active_model') or self.instance.active_model

    def clean_temperature(self):
        temperature = self.cleaned_data['temperature']
        if temperature < 0 or temperature > 2:
            raise forms.ValidationError("Temperature must be between 0 and 2.")
        return temperature

    def save(self, commit=True):
        instance = super().save(commit=False)
        api_key = self.cleaned_data.get('api_key')
        if api_key:
            instance.encrypted_api_key = encrypt_value(api_key)
        if commit:
            instance.save()
        return instance


class SiteSettingsForm(StyledFormMixin, forms.ModelForm):
    class Meta:
        model = SiteSettings
        exclude = ['visible_sections']
        widgets = {
            'about_description': forms.Textarea(attrs={'rows': 4}),
            'address': forms.Textarea(attrs={'rows': 3}),
            'theme_color': forms.TextInput(attrs={'pattern': HEX_COLOR_PATTERN, 'placeholder': '#1d4ed8'}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._apply_styles()

    def clean_whatsapp_number(self):
        number = self.cleaned_data.get('whatsapp_number', '')
        digits = ''.join(ch for ch in number if ch.isdigit())
        if number and not digits:
            raise forms.ValidationError("Enter the number with country code, digits only.")
        return digits

    def clean_theme_color(self):
        color = self.cleaned_data.get('theme_color', '').strip()
        if color and not re.fullmatch(HEX_COLOR_PATTERN, color):
            raise forms.ValidationError("Use a hex colour such as #1d4ed8, or leave it blank.")
        return color.lower()


class TeamMemberForm(StyledFormMixin, forms.ModelForm):
    class Meta:
        model = TeamMember
        fields = '__all__'
        widgets = {
            'bio': forms.Textarea(attrs={'rows': 3}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._apply_styles()
