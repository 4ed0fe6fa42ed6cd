import logging

from django.db import transaction

from .models import SiteSettings
from .visibility import SECTIONS, is_section_visible

logger = logging.getLogger('apps.core')


class SiteSettingsService:
    @staticmethod
    def get_settings():
        """
        Return the singleton SiteSettings instance.
        """
        return SiteSettings.load()

    @staticmethod
    def update_settings(**fields):
        """
        Merge the given fields into the stored settings and save.
        Fields that are not passed keep their stored value, including
        values written by another process since this one cached the row.
        """
        field_names = {f.name for f in SiteSettings._meta.concrete_fields}
        unknown = [name for name in fields if name not in field_names]
        if unknown:
            raise ValueError(f"Unknown settings field(s): {', '.join(sorted(unknown))}")
        with transaction.atomic():
            settings = SiteSettings.load_for_update()
            for name, value in fields.items():
                setattr(settings, name, value)
            settings.save(update_fields={*fields, 'updated_at'})
        logger.info("Site settings updated: %s", ", ".join(sorted(fields)) or "(no fields)")
        return settings

    @staticmethod
    def is_section_visible(section_id):
        return is_section_visible(SiteSettings.load(), section_id)

    @staticmethod
    def toggle_section(section_id):
        """
        Flip the visibility of one section and return its new state.
        """
        if section_id not in SECTIONS:
            raise ValueError(f"Unknown section: {section_id}")
        with transaction.atomic():
            settings = SiteSettings.load_for_update()
            flags = dict(settings.visible_sections or {})
            visible = not is_section_visible(settings, section_id)
            flags[section_id] = visible
            settings.visible_sections = flags
            settings.save(update_fields=['visible_sections', 'updated_at'])
        logger.info("Section '%s' is now %s", section_id, "visible" if visible else "hidden")
        return visible
