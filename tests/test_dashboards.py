from datetime import timedelta
from io import StringIO

import pytest
from django.core.management import call_command
from django.urls import reverse
from django.utils import timezone

from catalog.models import Service
from core.models import SiteSettings, LLMConfig
from core.services import SiteSettingsService
from leads.models import Consultation, Lead
from leads.services import ConsultationService, LeadService
from users.models import User, StudentProfile

pytestmark = pytest.mark.django_db


def test_superuser_becomes_admin_role():
    user = User.objects.create_superuser('root', 'root@example.com', 'pass12345')
    assert user.role == User.Role.ADMIN
    assert user.is_site_admin is True
    assert user.is_student is False


def test_new_user_defaults_to_student(student):
    assert student.role == User.Role.STUDENT
    assert student.is_student is True
    assert student.is_site_admin is False


def test_signup_creates_student_with_profile(client):
    response = client.post(reverse('student-signup'), {
        'username': 'meera',
        'email': 'meera@example.com',
        'first_name': 'Meera',
        'last_name': 'P',
        'password1': 'Kerala-nursing-2026',
        'password2': 'Kerala-nursing-2026',
    })

    assert response.status_code == 302
    assert response.url == reverse('student-dashboard')
    user = User.objects.get(username='meera')
    assert user.role == User.Role.STUDENT
    assert StudentProfile.objects.filter(user=user).exists()


def test_signup_rejects_duplicate_email(client, student):
    response = client.post(reverse('student-signup'), {
        'username': 'someone',
        'email': 'ANJALI@example.com',
        'password1': 'Kerala-nursing-2026',
        'password2': 'Kerala-nursing-2026',
    })
    assert response.status_code == 200
    assert response.context['form'].errors['email']


def test_student_dashboard_lists_leads(student_client, student, college):
    LeadService.register_interest(student, college, {'phone': '+91 98470 12345'})

    response = student_client.get(reverse('student-dashboard'))

    assert response.status_code == 200
    assert [lead.target_name for lead in response.context['leads']] == ['Wayanad College of Nursing']


def test_student_updates_profile(student_client, student):
    response = student_client.post(reverse('student-dashboard'), {
        'user-first_name': 'Anjali',
        'user-last_name': 'Menon',
        'user-email': 'anjali@example.com',
        'profile-mobile': '+91 90000 00000',
        'profile-dob': '2006-05-14',
        'profile-gender': 'FEMALE',
        'profile-address': 'Sulthan Bathery',
        'profile-location': 'Wayanad',
    })

    assert response.status_code == 302
    student.refresh_from_db()
    assert student.last_name == 'Menon'
    assert student.student_profile.mobile == '+91 90000 00000'
    assert student.student_profile.gender == 'FEMALE'


def test_admin_is_sent_to_admin_dashboard(admin_client):
    response = admin_client.get(reverse('student-dashboard'))
    assert response.status_code == 302
    assert response.url == reverse('admin-dashboard')


def test_admin_dashboard_counts(admin_client, student, college, booking_data):
    ConsultationService.book(booking_data)
    LeadService.register_interest(student, college, {'phone': '+91 98470 12345'})

    response = admin_client.get(reverse('admin-dashboard'))

    assert response.status_code == 200
    assert response.context['total_counts'] == {'leads': 1, 'consultations': 1, 'inquiries': 0}
    assert response.context['unread_counts']['leads'] == 1
    assert response.context['total_students'] == 1


def test_admin_dashboard_forbidden_for_students(student_client):
    assert student_client.get(reverse('admin-dashboard')).status_code == 403


def test_deleting_college_keeps_lead(student, college):
    lead, _ = LeadService.register_interest(student, college, {'phone': '+91 98470 12345'})
    college.delete()
    lead.refresh_from_db()
    assert lead.college is None
    assert lead.target_name == 'Wayanad College of Nursing'
    assert Lead.objects.count() == 1


def test_system_status_page(admin_client):
    response = admin_client.get(reverse('system-status'))

    assert response.status_code == 200
    health = response.context['health_check']
    assert health['database']['status'] == 'Operational'
    assert [page['name'] for page in health['pages']][:2] == ['Home Page', 'About']


# --- Management commands ---

def test_seed_data_creates_categories_once(monkeypatch):
    monkeypatch.setenv('ADMIN_PASSWORD', 'seed-pass-123')

    call_command('seed_data', stdout=StringIO())
    call_command('seed_data', stdout=StringIO())

    assert Service.objects.count() == 12
    assert Service.objects.filter(title='Aviation', image_url='/courses/aviation.png').exists()
    assert User.objects.get(username='admin').is_site_admin
    assert SiteSettings.objects.filter(pk=1).exists()


def test_seed_data_skips_when_services_exist():
    Service.objects.create(title='Custom')
    call_command('seed_data', stdout=StringIO())
    assert Service.objects.count() == 1


def _healthcheck_output():
    out = StringIO()
    call_command('healthcheck', stdout=out)
    return out.getvalue()


def test_healthcheck_reports_unseeded_site():
    output = _healthcheck_output()

    assert 'RESULTS' in output
    assert 'None found; run "manage.py seed_data"' in output
    assert 'No API key configured' in output


def test_healthcheck_flags_undecryptable_api_key():
    config = LLMConfig.load()
    config.encrypted_api_key = 'not-a-fernet-token'
    config.save()

    assert 'Stored API key cannot be decrypted' in _healthcheck_output()


def test_healthcheck_flags_stale_consultations(booking_data):
    consultation = ConsultationService.book(booking_data)
    Consultation.objects.filter(pk=consultation.pk).update(created_at=timezone.now() - timedelta(days=10))

    assert '1 consultation(s) unread for over 7 days' in _healthcheck_output()


def test_healthcheck_warns_when_booking_hidden():
    SiteSettingsService.toggle_section('booking')
    assert 'Booking section is hidden' in _healthcheck_output()
