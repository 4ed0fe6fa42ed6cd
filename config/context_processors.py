"""
Context Processor: Injects branding constants into every template.

Usage in templates:
    {{ SITE_NAME }}
    {{ SITE_TAGLINE }}
    {{ COPYRIGHT_TEXT }}
    etc.
"""

from config.constants.branding import (
    SITE_NAME, SITE_TAGLINE, SITE_DESCRIPTION, SITE_FULL_TITLE,
    COMPANY_NAME, COMPANY_EMAIL, COMPANY_PHONE, COMPANY_ADDRESS,
    COPYRIGHT_TEXT, META_DESCRIPTION, META_KEYWORDS, META_TITLE_SUFFIX,
)
from config.constants.messages import (
    MSG_LOGIN_HEADING, MSG_HOME_WELCOME, MSG_HOME_CTA, MSG_BOOKING_CLOSED,
)


def site_config(request):
    """Inject site-wide branding into all templates."""
    return {
        # Branding
        'SITE_NAME': SITE_NAME,
        'SITE_TAGLINE': SITE_TAGLINE,
        'SITE_DESCRIPTION': SITE_DESCRIPTION,
        'SITE_FULL_TITLE': SITE_FULL_TITLE,
        'META_TITLE_SUFFIX': META_TITLE_SUFFIX,
        'COMPANY_NAME': COMPANY_NAME,
        'COMPANY_EMAIL': COMPANY_EMAIL,
        'COMPANY_PHONE': COMPANY_PHONE,
        'COMPANY_ADDRESS': COMPANY_ADDRESS,
        'COPYRIGHT_TEXT': COPYRIGHT_TEXT,
        'META_DESCRIPTION': META_DESCRIPTION,
        'META_KEYWORDS': META_KEYWORDS,

        # Messages (for templates)
        'MSG_LOGIN_HEADING': MSG_LOGIN_HEADING,
        'MSG_HOME_WELCOME': MSG_HOME_WELCOME,
        'MSG_HOME_CTA': MSG_HOME_CTA,
        'MSG_BOOKING_CLOSED': MSG_BOOKING_CLOSED,
    }
