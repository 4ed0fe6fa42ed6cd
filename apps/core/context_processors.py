from .models import TeamMember
from .services import SiteSettingsService
from .visibility import visibility_map


def site_settings(request):
    """
    Context processor to make the live site settings and the section
    visibility map available in all templates.
    """
    settings = SiteSettingsService.get_settings()
    return {
        'SITE_SETTINGS': settings,
        'SECTIONS': visibility_map(settings),
        'WHATSAPP_URL': settings.whatsapp_url,
        'TEAM_MEMBERS': TeamMember.objects.all(),
    }
