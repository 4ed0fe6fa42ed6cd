from django import forms

from config.constants import ASSISTANT_MAX_INPUT_LENGTH
from core.forms import StyledFormMixin


class AssistantMessageForm(StyledFormMixin, forms.Form):
    message = forms.CharField(
        max_length=ASSISTANT_MAX_INPUT_LENGTH,
        widget=forms.TextInput(attrs={
            'placeholder': "e.g. I like biology and want to work in a hospital",
            'autocomplete': 'off',
        }),
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._apply_styles()

    def clean_message(self):
        return self.cleaned_data['message'].strip()
