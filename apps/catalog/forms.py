from django import forms

from core.forms import StyledFormMixin
from .models import Service, College, University, Event, EducationInsight, Review, youtube_id


class ServiceForm(StyledFormMixin, forms.ModelForm):
    programs_text = forms.CharField(
        label="Programs",
        required=False,
        widget=forms.Textarea(attrs={'rows': 6}),
        help_text="One program per line, e.g. B.Sc. Nursing",
    )

    class Meta:
        model = Service
        fields = ['title', 'description', 'image_url', 'order']
        widgets = {
            'description': forms.Textarea(attrs={'rows': 3}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.instance.pk and not self.is_bound:
            self.fields['programs_text'].initial = "\n".join(self.instance.programs or [])
        self._apply_styles()

    def clean_programs_text(self):
        raw = self.cleaned_data.get('programs_text', '')
        programs = []
        for line in raw.splitlines():
            name = line.strip()
            if name and name not in programs:
                programs.append(name)
        return programs

    def save(self, commit=True):
        instance = super().save(commit=False)
        instance.programs = self.cleaned_data['programs_text']
        if commit:
            instance.save()
        return instance


class CollegeForm(StyledFormMixin, forms.ModelForm):
    class Meta:
        model = College
        fields = ['name', 'location', 'description', 'website_url', 'image_url']
        widgets = {
            'description': forms.Textarea(attrs={'rows': 4}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._apply_styles()


class UniversityForm(CollegeForm):
    class Meta(CollegeForm.Meta):
        model = University


class EventForm(StyledFormMixin, forms.ModelForm):
    class Meta:
        model = Event
        fields = ['title', 'date', 'time', 'location', 'type', 'registration_link', 'image_url', 'description']
        widgets = {
            'date': forms.DateInput(attrs={'type': 'date'}),
            'description': forms.Textarea(attrs={'rows': 3}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._apply_styles()


class EducationInsightForm(StyledFormMixin, forms.ModelForm):
    class Meta:
        model = EducationInsight
        fields = ['name', 'service_tag', 'youtube_link']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._apply_styles()

    def clean_youtube_link(self):
        link = self.cleaned_data['youtube_link']
        if not youtube_id(link):
            raise forms.ValidationError("Enter a valid YouTube video link.")
        return link


class ReviewForm(StyledFormMixin, forms.ModelForm):
    class Meta:
        model = Review
        fields = ['student_name', 'program', 'rating', 'content', 'image_url']
        widgets = {
            'content': forms.Textarea(attrs={'rows': 4}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._apply_styles()
