from django import forms

from catalog.services import ordered_services
from core.forms import StyledFormMixin
from .models import Consultation, Inquiry

PHONE_HELP = "Mobile number with country code, e.g. +91 70253 37762"


def _clean_phone(value):
    digits = [ch for ch in value if ch.isdigit()]
    if len(digits) < 7:
        raise forms.ValidationError("Enter a valid phone number.")
    return value.strip()


class ConsultationForm(StyledFormMixin, forms.ModelForm):
    class Meta:
        model = Consultation
        fields = [
            'name', 'phone', 'date', 'time', 'interest', 'selected_program',
            'last_attended_course', 'percentage', 'comment',
        ]
        widgets = {
            'date': forms.DateInput(attrs={'type': 'date'}),
            'phone': forms.TextInput(attrs={'type': 'tel', 'placeholder': '+91'}),
            'name': forms.TextInput(attrs={'placeholder': 'John Smith'}),
            'last_attended_course': forms.TextInput(attrs={'placeholder': 'e.g. 12th / Bachelors'}),
            'percentage': forms.TextInput(attrs={'placeholder': 'e.g. 85%'}),
            'selected_program': forms.HiddenInput(),
            'comment': forms.Textarea(attrs={'rows': 2}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        titles = [service.title for service in ordered_services()]
        if titles:
            self.fields['interest'] = forms.ChoiceField(
                choices=[(t, t) for t in titles],
                initial=titles[0],
                label="Interested pathway",
            )
        self._apply_styles()

    def clean_phone(self):
        return _clean_phone(self.cleaned_data['phone'])


class InquiryForm(StyledFormMixin, forms.ModelForm):
    class Meta:
        model = Inquiry
        fields = ['name', 'phone', 'subject', 'message']
        widgets = {
            'phone': forms.TextInput(attrs={'type': 'tel', 'placeholder': '+91'}),
            'message': forms.Textarea(attrs={'rows': 4}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._apply_styles()

    def clean_phone(self):
        return _clean_phone(self.cleaned_data['phone'])


class LeadForm(StyledFormMixin, forms.Form):
    """Extra details a student gives when registering interest in an institution."""
    phone = forms.CharField(max_length=20, help_text=PHONE_HELP)
    location = forms.CharField(max_length=200, required=False, label="Your location")
    course = forms.CharField(max_length=200, required=False, label="Last attended course")
    percentage = forms.CharField(max_length=20, required=False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._apply_styles()

    def clean_phone(self):
        return _clean_phone(self.cleaned_data['phone'])
