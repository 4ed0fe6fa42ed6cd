from django.contrib.auth.models import AbstractUser
from django.db import models
from django.utils.translation import gettext_lazy as _


class User(AbstractUser):
    class Role(models.TextChoices):
        ADMIN = 'ADMIN', _('Admin')
        STUDENT = 'STUDENT', _('Student')

    role = models.CharField(
        max_length=50,
        choices=Role.choices,
        default=Role.STUDENT
    )
    picture = models.URLField(blank=True, help_text="External URL to profile picture")

    def save(self, *args, **kwargs):
        if not self.pk and self.is_superuser:
            self.role = self.Role.ADMIN
        return super().save(*args, **kwargs)

    @property
    def is_site_admin(self):
        return self.is_superuser or self.role == self.Role.ADMIN

    @property
    def is_student(self):
        return self.role == self.Role.STUDENT and not self.is_superuser


class StudentProfile(models.Model):
    class Gender(models.TextChoices):
        FEMALE = 'FEMALE', _('Female')
        MALE = 'MALE', _('Male')
        OTHER = 'OTHER', _('Other')

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='student_profile')
    mobile = models.CharField(max_length=20, blank=True)
    dob = models.DateField(null=True, blank=True, verbose_name="Date of birth")
    gender = models.CharField(max_length=10, choices=Gender.choices, blank=True)
    address = models.TextField(blank=True)
    location = models.CharField(max_length=200, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.user.username}'s Student Profile"

    @classmethod
    def for_user(cls, user):
        profile, _ = cls.objects.get_or_create(user=user)
        return profile
