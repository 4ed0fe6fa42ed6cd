from django.contrib import admin
from .models import SiteSettings, TeamMember, LLMConfig, LLMUsageLog


@admin.register(SiteSettings)
class SiteSettingsAdmin(admin.ModelAdmin):
    list_display = ('hero_title', 'contact_email', 'contact_phone', 'updated_at')


@admin.register(TeamMember)
class TeamMemberAdmin(admin.ModelAdmin):
    list_display = ('name', 'role', 'order')
    list_editable = ('order',)


@admin.register(LLMConfig)
class LLMConfigAdmin(admin.ModelAdmin):
    list_display = ('active_model', 'generation_enabled', 'monthly_token_cap', 'updated_at')
    exclude = ('encrypted_api_key',)


@admin.register(LLMUsageLog)
class LLMUsageLogAdmin(admin.ModelAdmin):
    list_display = ('model_name', 'request_type', 'total_tokens', 'cost_total', 'latency_ms', 'success', 'created_at')
    list_filter = ('model_name', 'success', 'created_at')
