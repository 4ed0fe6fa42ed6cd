"""
Per-section show/hide flags for the public pages.

A section is hidden only when the settings explicitly store ``False`` for it;
missing settings, a missing map or a missing key all mean "show".
"""

from collections import OrderedDict

SECTIONS = OrderedDict([
    ('hero', ('Hero (Home)', 'The main landing area with the "Start Your Journey" button.')),
    ('about', ('About Us', 'Information about the agency and its mission.')),
    ('team', ('Our Team', 'Counsellors and leadership profiles.')),
    ('colleges', ('Affiliated Colleges', 'List of partner colleges.')),
    ('universities', ('Partner Universities', 'Searchable list of partner universities with lead generation.')),
    ('programs', ('Programs & Courses', 'Available courses and study paths.')),
    ('booking', ('Consultation Booking', 'Form for students to request callbacks.')),
    ('media', ('Education Insights (Media)', 'Video gallery section.')),
    ('events', ('Upcoming Events', 'List of upcoming events and webinars.')),
    ('admissions', ('Admissions Process', 'Step-by-step guide to applying.')),
    ('social', ('Social Feed', 'Latest updates from social media.')),
    ('contact', ('Contact Us', 'Footer contact form and address details.')),
])


def section_name(section_id):
    return SECTIONS[section_id][0]


def is_section_visible(settings, section_id):
    if settings is None:
        return True
    flags = settings.visible_sections or {}
    return flags.get(section_id) is not False


def visibility_map(settings):
    return {section_id: is_section_visible(settings, section_id) for section_id in SECTIONS}


def section_rows(settings):
    """Rows for the admin sections page: id, name, description, visible."""
    return [
        {
            'id': section_id,
            'name': name,
            'description': description,
            'visible': is_section_visible(settings, section_id),
        }
        for section_id, (name, description) in SECTIONS.items()
    ]
