from unittest import mock

import pytest
from django.db import DatabaseError
from django.urls import reverse

from config.constants import MSG_SETTINGS_FAILED
from core.models import SiteSettings
from core.services import SiteSettingsService
from core.visibility import SECTIONS, is_section_visible, visibility_map, section_rows


class FakeSettings:
    def __init__(self, flags):
        self.visible_sections = flags


def test_missing_settings_show_everything():
    assert is_section_visible(None, 'hero') is True


def test_missing_key_or_map_means_visible():
    assert is_section_visible(FakeSettings({}), 'booking') is True
    assert is_section_visible(FakeSettings(None), 'booking') is True


def test_only_explicit_false_hides():
    settings = FakeSettings({'hero': False, 'about': None, 'team': 0, 'media': True})
    assert is_section_visible(settings, 'hero') is False
    assert is_section_visible(settings, 'about') is True
    assert is_section_visible(settings, 'team') is True
    assert is_section_visible(settings, 'media') is True


def test_visibility_map_covers_every_section():
    flags = visibility_map(FakeSettings({'events': False}))
    assert list(flags) == list(SECTIONS)
    assert flags['events'] is False
    assert all(flags[s] for s in SECTIONS if s != 'events')


def test_section_rows_carry_names():
    rows = section_rows(FakeSettings({}))
    assert rows[0] == {
        'id': 'hero',
        'name': 'Hero (Home)',
        'description': 'The main landing area with the "Start Your Journey" button.',
        'visible': True,
    }
    assert len(rows) == 12


@pytest.mark.django_db
def test_toggle_flips_and_persists():
    assert SiteSettingsService.toggle_section('media') is False
    assert SiteSettings.load().visible_sections == {'media': False}
    assert SiteSettingsService.toggle_section('media') is True
    assert SiteSettingsService.is_section_visible('media') is True


@pytest.mark.django_db
def test_toggle_unknown_section_raises():
    with pytest.raises(ValueError):
        SiteSettingsService.toggle_section('pricing')


@pytest.mark.django_db
def test_hidden_hero_is_not_rendered(client):
    SiteSettingsService.update_settings(hero_title='Hero banner text')
    assert 'Hero banner text' in client.get(reverse('home')).content.decode()

    SiteSettingsService.toggle_section('hero')
    assert 'Hero banner text' not in client.get(reverse('home')).content.decode()


@pytest.mark.django_db
def test_admin_toggle_view(admin_client):
    response = admin_client.post(reverse('toggle-section', args=['events']), follow=True)

    assert response.status_code == 200
    assert SiteSettingsService.is_section_visible('events') is False
    assert '&quot;Upcoming Events&quot; is now hidden.' in response.content.decode()


@pytest.mark.django_db
def test_admin_toggle_view_htmx_returns_row(admin_client):
    response = admin_client.post(reverse('toggle-section', args=['social']), HTTP_HX_REQUEST='true')

    assert response.status_code == 200
    assert 'id="section-social"' in response.content.decode()
    assert 'Hidden' in response.content.decode()


@pytest.mark.django_db
def test_admin_toggle_unknown_section_404(admin_client):
    assert admin_client.post(reverse('toggle-section', args=['pricing'])).status_code == 404


@pytest.mark.django_db
def test_sections_page_lists_all(admin_client):
    response = admin_client.get(reverse('sections'))
    assert response.status_code == 200
    assert len(response.context['rows']) == len(SECTIONS)


@pytest.mark.django_db
def test_admin_toggle_failure_is_flashed(admin_client):
    with mock.patch('core.views.SiteSettingsService.toggle_section', side_effect=DatabaseError):
        response = admin_client.post(reverse('toggle-section', args=['events']), follow=True)

    assert response.redirect_chain[-1][0] == reverse('sections')
    assert MSG_SETTINGS_FAILED in response.content.decode()
    assert SiteSettingsService.is_section_visible('events') is True
