from .models import Service, Event

ALL_LOCATIONS = 'All'


def ordered_services():
    """Services by display order (unordered last), then title."""
    return Service.objects.all()


def flatten_programs(services):
    """One entry per program name, carrying its category's metadata."""
    programs = []
    for service in services:
        for name in service.programs or []:
            programs.append({
                'name': name,
                'category': service.title,
                'category_id': service.pk,
                'category_image': service.image_url,
                'category_description': service.description,
            })
    return programs


def filter_programs(programs, category_id=None):
    if not category_id:
        return list(programs)
    return [p for p in programs if str(p['category_id']) == str(category_id)]


def university_locations(institutions):
    """['All', *distinct locations] in first-seen order."""
    locations = [ALL_LOCATIONS]
    for item in institutions:
        if item.location and item.location not in locations:
            locations.append(item.location)
    return locations


def filter_by_location(institutions, location=None):
    if not location or location == ALL_LOCATIONS:
        return list(institutions)
    return [item for item in institutions if item.location == location]


def latest_event():
    return Event.objects.order_by('-created_at', '-pk').first()
