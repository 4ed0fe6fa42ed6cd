import datetime
from unittest import mock

import pytest
from django.db import DatabaseError
from django.urls import reverse

from catalog.models import Service, College, University, Event, EducationInsight, Review, youtube_id
from catalog.services import (
    ALL_LOCATIONS, flatten_programs, filter_programs, university_locations, filter_by_location, latest_event,
)
from config.constants import MSG_ITEM_FAILED, MSG_DELETE_FAILED
from core.services import SiteSettingsService


@pytest.mark.parametrize('url, expected', [
    ('https://www.youtube.com/watch?v=dQw4w9WgXcQ', 'dQw4w9WgXcQ'),
    ('https://youtu.be/dQw4w9WgXcQ', 'dQw4w9WgXcQ'),
    ('https://www.youtube.com/embed/dQw4w9WgXcQ?start=10', 'dQw4w9WgXcQ'),
    ('https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ', 'dQw4w9WgXcQ'),
    ('https://www.youtube.com/watch?v=short', None),
    ('https://example.com/video', None),
    ('', None),
])
def test_youtube_id(url, expected):
    assert youtube_id(url) == expected


def test_flatten_and_filter_programs():
    nursing = Service(pk=1, title='Paramedical', image_url='/courses/paramedical.png', programs=['GNM', 'MLT'])
    tech = Service(pk=2, title='Engineering', programs=['BCA'])
    empty = Service(pk=3, title='Law', programs=[])

    programs = flatten_programs([nursing, tech, empty])

    assert [p['name'] for p in programs] == ['GNM', 'MLT', 'BCA']
    assert programs[0]['category'] == 'Paramedical'
    assert programs[0]['category_image'] == '/courses/paramedical.png'
    assert [p['name'] for p in filter_programs(programs, '2')] == ['BCA']
    assert [p['name'] for p in filter_programs(programs, 1)] == ['GNM', 'MLT']
    assert filter_programs(programs, None) == programs
    assert filter_programs(programs, '99') == []


def test_university_locations_first_seen_order():
    unis = [University(name='A', location='Bengaluru'), University(name='B', location='Chennai'),
            University(name='C', location='Bengaluru'), University(name='D', location='')]
    assert university_locations(unis) == [ALL_LOCATIONS, 'Bengaluru', 'Chennai']
    assert [u.name for u in filter_by_location(unis, 'Bengaluru')] == ['A', 'C']
    assert len(filter_by_location(unis, ALL_LOCATIONS)) == 4
    assert len(filter_by_location(unis, None)) == 4


@pytest.mark.django_db
def test_services_ordered_with_blank_order_last():
    Service.objects.create(title='Zoology')
    Service.objects.create(title='Law', order=2)
    Service.objects.create(title='Aviation', order=1)
    Service.objects.create(title='Commerce')
    assert [s.title for s in Service.objects.all()] == ['Aviation', 'Law', 'Commerce', 'Zoology']


@pytest.mark.django_db
def test_latest_event_is_newest_created():
    assert latest_event() is None
    Event.objects.create(title='Nursing webinar', date=datetime.date(2026, 12, 1))
    newest = Event.objects.create(title='GNM orientation', date=datetime.date(2026, 11, 1))
    assert latest_event() == newest


@pytest.mark.django_db
def test_courses_view_filters_by_category(client, nursing):
    other = Service.objects.create(title='Engineering', order=2, programs=['BCA', 'B.Tech'])

    everything = client.get(reverse('courses'))
    filtered = client.get(reverse('courses'), {'category': other.pk})

    assert everything.context['program_count'] == 5
    assert [p['name'] for p in filtered.context['programs']] == ['BCA', 'B.Tech']


@pytest.mark.django_db
def test_courses_view_htmx_partial(client, nursing):
    response = client.get(reverse('courses'), {'category': nursing.pk}, HTTP_HX_REQUEST='true')
    assert [t.name for t in response.templates][0] == 'catalog/_program_list.html'
    assert 'GNM' in response.content.decode()


@pytest.mark.django_db
def test_university_list_location_filter(client):
    University.objects.create(name='RGUHS', location='Bengaluru')
    University.objects.create(name='KUHS', location='Thrissur')

    response = client.get(reverse('university-list'), {'location': 'Thrissur'})

    assert response.context['locations'] == ['All', 'Thrissur', 'Bengaluru']
    assert [u.name for u in response.context['institutions']] == ['KUHS']


@pytest.mark.django_db
def test_college_detail_shows_registration_state(student_client, student, college):
    before = student_client.get(reverse('college-detail', args=[college.pk]))
    student_client.post(reverse('register-interest', args=['college', college.pk]), {'phone': '+91 98470 12345'})
    after = student_client.get(reverse('college-detail', args=[college.pk]))

    assert before.context['already_registered'] is False
    assert after.context['already_registered'] is True


@pytest.mark.django_db
def test_home_lists_latest_six_reviews(client):
    for i in range(8):
        Review.objects.create(student_name=f'Student {i}', content='Great guidance', rating=5)

    reviews = list(client.get(reverse('home')).context['reviews'])

    assert len(reviews) == 6
    assert reviews[0].student_name == 'Student 7'


@pytest.mark.django_db
def test_event_popup_respects_visibility(client):
    Event.objects.create(title='Open House', date=datetime.date(2026, 11, 20))
    assert 'Open House' in client.get(reverse('event-popup')).content.decode()

    SiteSettingsService.toggle_section('events')
    assert 'Open House' not in client.get(reverse('event-popup')).content.decode()


@pytest.mark.django_db
def test_insight_rejects_non_youtube_links(admin_client):
    response = admin_client.post(reverse('content-create', args=['insights']), {
        'name': 'Campus tour', 'service_tag': 'Nursing', 'youtube_link': 'https://vimeo.com/123',
    })
    assert response.status_code == 200
    assert not EducationInsight.objects.exists()


# --- Content management ---

@pytest.mark.django_db
def test_admin_creates_service_with_program_lines(admin_client):
    response = admin_client.post(reverse('content-create', args=['services']), {
        'title': 'Allied Science',
        'description': 'Lab and imaging programs',
        'image_url': '/courses/allied science.png',
        'order': '',
        'programs_text': 'MLT\n  Radiology \n\nMLT\n',
    })

    assert response.status_code == 302
    service = Service.objects.get(title='Allied Science')
    assert service.programs == ['MLT', 'Radiology']
    assert service.order is None


@pytest.mark.django_db
def test_admin_edits_and_deletes_college(admin_client, college):
    admin_client.post(reverse('content-update', args=['colleges', college.pk]), {
        'name': 'Wayanad Institute of Nursing', 'location': 'Kalpetta',
        'description': '', 'website_url': '', 'image_url': '',
    })
    college.refresh_from_db()
    assert college.name == 'Wayanad Institute of Nursing'

    response = admin_client.post(reverse('content-delete', args=['colleges', college.pk]))
    assert response.status_code == 302
    assert not College.objects.exists()


@pytest.mark.django_db
def test_content_unknown_kind_404(admin_client):
    assert admin_client.get(reverse('content-list', args=['pricing'])).status_code == 404


@pytest.mark.django_db
def test_content_management_forbidden_for_students(student_client):
    assert student_client.get(reverse('content-list', args=['services'])).status_code == 403


@pytest.mark.django_db
def test_admin_deletes_event(admin_client):
    event = Event.objects.create(title='Open House', date=datetime.date(2026, 12, 1), type='Orientation')

    response = admin_client.post(reverse('content-delete', args=['events', event.pk]))

    assert response.status_code == 302
    assert response.url == reverse('content-list', args=['events'])
    assert not Event.objects.exists()


@pytest.mark.django_db
def test_content_unknown_kind_asks_anonymous_to_log_in(client):
    response = client.get(reverse('content-list', args=['pricing']))

    assert response.status_code == 302
    assert reverse('login') in response.url


@pytest.mark.django_db
def test_content_save_failure_is_flashed(admin_client):
    with mock.patch('catalog.forms.CollegeForm.save', side_effect=DatabaseError):
        response = admin_client.post(reverse('content-create', args=['colleges']), {
            'name': 'Malappuram Arts College', 'location': 'Malappuram',
            'description': '', 'website_url': '', 'image_url': '',
        })

    assert response.status_code == 200
    assert MSG_ITEM_FAILED in response.content.decode()
    assert not College.objects.exists()


@pytest.mark.django_db
def test_content_delete_failure_keeps_item(admin_client, college):
    with mock.patch.object(College, 'delete', side_effect=DatabaseError):
        response = admin_client.post(reverse('content-delete', args=['colleges', college.pk]))

    assert response.status_code == 200
    assert MSG_DELETE_FAILED in response.content.decode()
    assert College.objects.filter(pk=college.pk).exists()


@pytest.mark.django_db
def test_booking_popup_follows_visibility(client):
    popup_url = reverse('booking-popup')
    assert popup_url in client.get(reverse('home')).content.decode()
    assert 'id="booking-popup"' in client.get(popup_url).content.decode()

    SiteSettingsService.toggle_section('booking')

    assert popup_url not in client.get(reverse('home')).content.decode()
    assert 'id="booking-popup"' not in client.get(popup_url).content.decode()
