from django.db import models
from django.core.cache import cache

from config.constants import (
    SITE_NAME, SITE_TAGLINE, COMPANY_EMAIL, COMPANY_PHONE, COMPANY_ADDRESS, COMPANY_WHATSAPP,
    ASSISTANT_DEFAULT_MODEL, ASSISTANT_DEFAULT_TEMPERATURE, ASSISTANT_DEFAULT_MAX_TOKENS,
)

SITE_SETTINGS_CACHE_KEY = 'site_settings'
LLM_CONFIG_CACHE_KEY = 'llm_config'


class SiteSettings(models.Model):
    """
    Singleton holding everything the public site reads at render time:
    hero and about copy, contact details, social links and the per-section
    visibility flags.
    """
    # Hero
    hero_title = models.CharField(max_length=200, default=f"Welcome to {SITE_NAME}")
    hero_subtitle = models.CharField(max_length=300, default=SITE_TAGLINE, blank=True)

    # About
    about_title = models.CharField(max_length=200, default="About Us", blank=True)
    about_description = models.TextField(blank=True)
    about_image_url = models.URLField(blank=True)

    # Contact
    contact_email = models.EmailField(default=COMPANY_EMAIL)
    contact_phone = models.CharField(max_length=30, default=COMPANY_PHONE, blank=True)
    address = models.TextField(default=COMPANY_ADDRESS, blank=True)
    whatsapp_number = models.CharField(
        max_length=20, default=COMPANY_WHATSAPP, blank=True,
        help_text="Digits only, with country code (used for the wa.me link)",
    )

    # Social Media
    instagram = models.URLField(blank=True)
    facebook = models.URLField(blank=True)
    linkedin = models.URLField(blank=True)
    twitter = models.URLField(blank=True)
    youtube_url = models.URLField(blank=True, help_text="Channel link for the video gallery")

    # Branding
    theme_color = models.CharField(max_length=20, blank=True)
    logo_url = models.URLField(blank=True, help_text="External URL to logo image")

    # Section id -> bool; a missing key means the section is shown
    visible_sections = models.JSONField(default=dict, blank=True)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Site settings"
        verbose_name_plural = "Site settings"

    def __str__(self):
        return "Site Settings"

    def save(self, *args, **kwargs):
        self.pk = 1  # Singleton: always ID 1
        super().save(*args, **kwargs)
        cache.delete(SITE_SETTINGS_CACHE_KEY)

    def delete(self, *args, **kwargs):
        pass  # Prevent deletion

    @classmethod
    def load(cls):
        """
        Load the singleton instance. Create if not exists.
        """
        obj = cache.get(SITE_SETTINGS_CACHE_KEY)
        if obj is None:
            obj, _ = cls.objects.get_or_create(pk=1)
            cache.set(SITE_SETTINGS_CACHE_KEY, obj)
        return obj

    @classmethod
    def load_for_update(cls):
        """
        Fresh, row-locked copy for writes. Call inside transaction.atomic().
        """
        cls.objects.get_or_create(pk=1)
        return cls.objects.select_for_update().get(pk=1)

    @property
    def whatsapp_url(self):
        number = ''.join(ch for ch in (self.whatsapp_number or COMPANY_WHATSAPP) if ch.isdigit())
        return f"https://wa.me/{number}"


class TeamMember(models.Model):
    name = models.CharField(max_length=120)
    role = models.CharField(max_length=120)
    image_url = models.URLField(blank=True)
    bio = models.TextField(blank=True)
    linkedin = models.URLField(blank=True)
    twitter = models.URLField(blank=True)
    instagram = models.URLField(blank=True)
    order = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ['order', 'name']

    def __str__(self):
        return f"{self.name} ({self.role})"


class LLMConfig(models.Model):
    """
    Singleton model to store the career assistant's model settings and API credentials.
    """
    encrypted_api_key = models.TextField(blank=True, help_text="Encrypted OpenAI API key")
    active_model = models.CharField(max_length=100, default=ASSISTANT_DEFAULT_MODEL)
    system_prompt = models.TextField(blank=True, help_text="Leave blank to use the default counsellor prompt")
    temperature = models.DecimalField(max_digits=3, decimal_places=2, default=ASSISTANT_DEFAULT_TEMPERATURE)
    max_output_tokens = models.PositiveIntegerField(default=ASSISTANT_DEFAULT_MAX_TOKENS)

    monthly_token_cap = models.PositiveIntegerField(default=0, help_text="0 means no cap")
    generation_enabled = models.BooleanField(default=True)
    auto_disable_on_cap = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return "LLM Configuration"

    def save(self, *args, **kwargs):
        self.pk = 1  # Singleton: always ID 1
        super().save(*args, **kwargs)
        cache.delete(LLM_CONFIG_CACHE_KEY)

    def delete(self, *args, **kwargs):
        pass

    @classmethod
    def load(cls):
        obj = cache.get(LLM_CONFIG_CACHE_KEY)
        if obj is None:
            obj, _ = cls.objects.get_or_create(pk=1)
            cache.set(LLM_CONFIG_CACHE_KEY, obj)
        return obj


class LLMUsageLog(models.Model):
    request_type = models.CharField(max_length=50, default='career_advice')
    model_name = models.CharField(max_length=100)
    user_message = models.TextField(blank=True)
    response_text = models.TextField(blank=True)
    prompt_tokens = models.PositiveIntegerField(default=0)
    completion_tokens = models.PositiveIntegerField(default=0)
    total_tokens = models.PositiveIntegerField(default=0)
    cost_input = models.DecimalField(max_digits=10, decimal_places=6, default=0)
    cost_output = models.DecimalField(max_digits=10, decimal_places=6, default=0)
    cost_total = models.DecimalField(max_digits=10, decimal_places=6, default=0)
    latency_ms = models.PositiveIntegerField(default=0)
    success = models.BooleanField(default=True)
    error_message = models.TextField(blank=True)
    session_key = models.CharField(max_length=40, blank=True)

    actor = models.ForeignKey('users.User', on_delete=models.SET_NULL, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        status = "ok" if self.success else "failed"
        return f"{self.model_name} {self.request_type} ({status})"
