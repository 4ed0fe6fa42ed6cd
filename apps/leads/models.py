from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from catalog.models import College, University


class InboxRecord(models.Model):
    """Common fields of every captured record: admins read them, visitors never edit them."""
    read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
        ordering = ['-created_at']


class Consultation(InboxRecord):
    name = models.CharField(max_length=120)
    phone = models.CharField(max_length=20)
    date = models.DateField(help_text="Preferred consultation date")
    time = models.CharField(max_length=20, blank=True, help_text="Preferred time slot")
    interest = models.CharField(max_length=200, help_text="Course category of interest")
    selected_program = models.CharField(max_length=200, blank=True)
    last_attended_course = models.CharField(max_length=200, blank=True)
    percentage = models.CharField(max_length=20, blank=True)
    comment = models.TextField(blank=True)

    class Meta(InboxRecord.Meta):
        pass

    def __str__(self):
        return f"{self.name} - {self.interest} on {self.date}"


class Inquiry(InboxRecord):
    class Subject(models.TextChoices):
        NURSING = 'B.Sc. Nursing Admissions', _('B.Sc. Nursing Admissions')
        GNM = 'GNM Diploma Programs', _('GNM Diploma Programs')
        INTERNATIONAL = 'International IT & Eng', _('International IT & Eng')
        OTHER = 'General Inquiry', _('General Inquiry')

    name = models.CharField(max_length=120)
    phone = models.CharField(max_length=20)
    subject = models.CharField(max_length=100, choices=Subject.choices, default=Subject.NURSING)
    message = models.TextField()

    class Meta(InboxRecord.Meta):
        verbose_name_plural = "inquiries"

    def __str__(self):
        return f"{self.name} - {self.subject}"


class Lead(InboxRecord):
    class Kind(models.TextChoices):
        COLLEGE = 'college', _('College')
        UNIVERSITY = 'university', _('University')

    student = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='leads')
    kind = models.CharField(max_length=20, choices=Kind.choices)
    college = models.ForeignKey(College, on_delete=models.SET_NULL, null=True, blank=True, related_name='leads')
    university = models.ForeignKey(University, on_delete=models.SET_NULL, null=True, blank=True, related_name='leads')
    target_name = models.CharField(max_length=200)

    # Snapshot of the student at the time of registering interest
    student_name = models.CharField(max_length=200)
    student_email = models.EmailField(blank=True)
    student_phone = models.CharField(max_length=20)
    student_location = models.CharField(max_length=200, blank=True)
    last_attended_course = models.CharField(max_length=200, blank=True)
    percentage = models.CharField(max_length=20, blank=True)

    class Meta(InboxRecord.Meta):
        constraints = [
            models.UniqueConstraint(fields=['student', 'college'], name='unique_lead_per_college'),
            models.UniqueConstraint(fields=['student', 'university'], name='unique_lead_per_university'),
        ]

    def __str__(self):
        return f"{self.student_name} → {self.target_name}"

    @property
    def target(self):
        return self.college if self.kind == self.Kind.COLLEGE else self.university
