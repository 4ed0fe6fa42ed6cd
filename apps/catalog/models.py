import re

from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from config.constants import REVIEW_MIN_RATING, REVIEW_MAX_RATING

YOUTUBE_ID_RE = re.compile(r'^.*(youtu\.be/|v/|u/\w/|embed/|watch\?v=|&v=)([^#&?]*).*')


def youtube_id(url):
    """Return the 11-character video id of a YouTube URL, or None."""
    if not url:
        return None
    match = YOUTUBE_ID_RE.match(url)
    if match and len(match.group(2)) == 11:
        return match.group(2)
    return None


class Service(models.Model):
    """A course category (e.g. Nursing, Engineering) and its program names."""
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    image_url = models.CharField(max_length=500, blank=True)
    programs = models.JSONField(default=list, blank=True, help_text="List of program names")
    order = models.PositiveIntegerField(null=True, blank=True, help_text="Display order; blank sorts last")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = [models.F('order').asc(nulls_last=True), 'title']

    def __str__(self):
        return self.title


class Institution(models.Model):
    name = models.CharField(max_length=200)
    location = models.CharField(max_length=200, blank=True)
    description = models.TextField(blank=True)
    website_url = models.URLField(blank=True)
    image_url = models.CharField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
        ordering = ['name']

    def __str__(self):
        return self.name


class College(Institution):
    class Meta(Institution.Meta):
        pass


class University(Institution):
    class Meta(Institution.Meta):
        verbose_name_plural = "universities"


class Event(models.Model):
    class EventType(models.TextChoices):
        WEBINAR = 'Webinar', _('Webinar')
        ORIENTATION = 'Orientation', _('Orientation')
        CLASS = 'Class', _('Class')

    title = models.CharField(max_length=200)
    date = models.DateField()
    time = models.CharField(max_length=50, blank=True, help_text="e.g. 10:00 AM IST")
    location = models.CharField(max_length=200, blank=True)
    type = models.CharField(max_length=20, choices=EventType.choices, default=EventType.WEBINAR)
    registration_link = models.URLField(blank=True)
    image_url = models.CharField(max_length=500, blank=True)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.title


class EducationInsight(models.Model):
    name = models.CharField(max_length=200)
    service_tag = models.CharField(max_length=100, blank=True)
    youtube_link = models.URLField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    @property
    def youtube_id(self):
        return youtube_id(self.youtube_link)


class Review(models.Model):
    student_name = models.CharField(max_length=120)
    program = models.CharField(max_length=200, blank=True)
    rating = models.PositiveSmallIntegerField(
        default=REVIEW_MAX_RATING,
        validators=[MinValueValidator(REVIEW_MIN_RATING), MaxValueValidator(REVIEW_MAX_RATING)],
    )
    content = models.TextField()
    image_url = models.URLField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.student_name} ({self.rating}/5)"
