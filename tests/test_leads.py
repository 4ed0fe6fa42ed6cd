from unittest import mock

import pytest
from django.db import DatabaseError, IntegrityError, transaction
from django.urls import reverse

from config.constants import (
    MSG_CONSULTATION_FAILED, MSG_INQUIRY_FAILED, MSG_GENERIC_ERROR, MSG_DELETE_FAILED,
)
from core.services import SiteSettingsService
from leads.models import Consultation, Inquiry, Lead
from leads.services import ConsultationService, LeadService, InboxService

pytestmark = pytest.mark.django_db


# --- Consultations ---

def test_book_stores_unread_consultation(booking_data):
    consultation = ConsultationService.book(dict(booking_data, date='2026-11-02'))
    assert consultation.read is False
    assert consultation.selected_program == 'GNM'
    assert Consultation.objects.count() == 1


def test_booking_form_post_creates_record(client, nursing, booking_data):
    response = client.post(reverse('book-consultation'), booking_data, follow=True)

    assert response.status_code == 200
    consultation = Consultation.objects.get()
    assert consultation.interest == 'Paramedical'
    assert consultation.read is False
    assert 'Consultation booked!' in response.content.decode()


def test_booking_htmx_returns_success_partial(client, booking_data):
    response = client.post(reverse('book-consultation'), booking_data, HTTP_HX_REQUEST='true')

    assert response.status_code == 200
    assert 'Thank you, Rahul K!' in response.content.decode()


def test_booking_rejects_bad_phone(client, booking_data):
    response = client.post(reverse('book-consultation'), dict(booking_data, phone='12'))

    assert response.status_code == 200
    assert response.context['booking_form'].errors['phone']
    assert not Consultation.objects.exists()


def test_booking_interest_must_be_a_listed_category(client, nursing, booking_data):
    response = client.post(reverse('book-consultation'), dict(booking_data, interest='Astrology'))

    assert 'interest' in response.context['booking_form'].errors
    assert not Consultation.objects.exists()


def test_booking_refused_while_section_hidden(client, booking_data):
    SiteSettingsService.toggle_section('booking')

    response = client.post(reverse('book-consultation'), booking_data)
    htmx = client.post(reverse('book-consultation'), booking_data, HTTP_HX_REQUEST='true')

    assert response.status_code == 302
    assert htmx.status_code == 403
    assert not Consultation.objects.exists()


def test_booking_prefills_program(client, nursing):
    response = client.get(reverse('book-consultation'), {'program': 'GNM', 'interest': 'Paramedical'})
    assert response.context['booking_form'].initial['selected_program'] == 'GNM'


# --- Inquiries ---

def test_contact_inquiry_saved(client):
    data = {
        'name': 'Fathima',
        'phone': '+91 94470 00000',
        'subject': 'GNM Diploma Programs',
        'message': 'What are the fees?',
    }
    response = client.post(reverse('contact'), data, follow=True)

    inquiry = Inquiry.objects.get()
    assert inquiry.subject == 'GNM Diploma Programs'
    assert inquiry.read is False
    assert 'Inquiry sent successfully!' in response.content.decode()


def test_contact_inquiry_requires_message(client):
    response = client.post(reverse('contact'), {'name': 'A', 'phone': '+91 94470 00000', 'subject': 'General Inquiry'})
    assert response.context['inquiry_form'].errors['message']
    assert not Inquiry.objects.exists()


# --- Leads ---

def test_register_interest_snapshots_student(student, college):
    lead, created = LeadService.register_interest(
        student, college, {'phone': '+91 98470 12345', 'location': 'Kalpetta', 'course': 'Plus Two', 'percentage': '90'},
    )

    assert created is True
    assert lead.kind == Lead.Kind.COLLEGE
    assert lead.target == college
    assert lead.student_name == 'Anjali Nair'
    assert lead.student_email == 'anjali@example.com'
    assert lead.target_name == 'Wayanad College of Nursing'


def test_register_interest_is_idempotent(student, university):
    details = {'phone': '+91 98470 12345'}
    first, created_first = LeadService.register_interest(student, university, details)
    second, created_second = LeadService.register_interest(student, university, details)

    assert created_first is True
    assert created_second is False
    assert first.pk == second.pk
    assert Lead.objects.count() == 1


def test_concurrent_duplicate_lead_returns_existing(student, college):
    details = {'phone': '+91 98470 12345'}
    first, _ = LeadService.register_interest(student, college, details)
    real_filter = Lead.objects.filter
    stale = [Lead.objects.none()]

    def filter_missing_new_row(**kwargs):
        # The first check misses the row a parallel request just wrote
        return stale.pop() if stale else real_filter(**kwargs)

    with mock.patch.object(Lead.objects, 'filter', side_effect=filter_missing_new_row):
        second, created = LeadService.register_interest(student, college, details)

    assert created is False
    assert second.pk == first.pk
    assert Lead.objects.count() == 1


def test_duplicate_lead_rows_are_rejected_by_the_database(student, college):
    LeadService.register_interest(student, college, {'phone': '+91 98470 12345'})
    with pytest.raises(IntegrityError), transaction.atomic():
        Lead.objects.create(
            student=student, kind=Lead.Kind.COLLEGE, college=college,
            target_name=college.name, student_name='Anjali Nair', student_phone='+91 98470 12345',
        )


def test_same_student_can_register_for_different_targets(student, college, university):
    LeadService.register_interest(student, college, {'phone': '+91 98470 12345'})
    LeadService.register_interest(student, university, {'phone': '+91 98470 12345'})
    assert Lead.objects.filter(student=student).count() == 2


def test_register_interest_rejects_other_targets(student):
    with pytest.raises(TypeError):
        LeadService.register_interest(student, object(), {'phone': '+91 98470 12345'})


def test_register_interest_view(student_client, college):
    url = reverse('register-interest', args=['college', college.pk])
    response = student_client.post(url, {'phone': '+91 98470 12345', 'location': 'Kalpetta'})

    assert response.status_code == 302
    assert response.url == reverse('college-detail', args=[college.pk])
    assert Lead.objects.filter(college=college).count() == 1


def test_register_interest_requires_login(client, college):
    url = reverse('register-interest', args=['college', college.pk])
    response = client.post(url, {'phone': '+91 98470 12345'})

    assert response.status_code == 302
    assert reverse('login') in response.url
    assert not Lead.objects.exists()


def test_admin_cannot_register_interest(admin_client, college):
    url = reverse('register-interest', args=['college', college.pk])
    admin_client.post(url, {'phone': '+91 98470 12345'})
    assert not Lead.objects.exists()


def test_register_interest_unknown_kind_404(student_client, college):
    assert student_client.get(reverse('register-interest', args=['school', college.pk])).status_code == 404


# --- Admin inboxes ---

def test_inbox_counts(booking_data):
    ConsultationService.book(booking_data)
    ConsultationService.book(booking_data)
    Consultation.objects.filter(pk=Consultation.objects.first().pk).update(read=True)

    assert InboxService.total_counts() == {'leads': 0, 'consultations': 2, 'inquiries': 0}
    assert InboxService.unread_counts() == {'leads': 0, 'consultations': 1, 'inquiries': 0}


def test_inbox_unknown_kind():
    with pytest.raises(ValueError):
        InboxService.model_for('payments')


def test_inbox_list_and_unread_filter(admin_client, booking_data):
    read = ConsultationService.book(dict(booking_data, name='Already Read'))
    InboxService.mark_read('consultations', read.pk)
    ConsultationService.book(dict(booking_data, name='Still New'))

    everything = admin_client.get(reverse('inbox', args=['consultations']))
    unread = admin_client.get(reverse('inbox', args=['consultations']), {'unread': '1'})

    assert [r.name for r in everything.context['records']] == ['Still New', 'Already Read']
    assert [r.name for r in unread.context['records']] == ['Still New']


def test_inbox_htmx_partial(admin_client):
    response = admin_client.get(reverse('inbox', args=['inquiries']), HTTP_HX_REQUEST='true')
    assert [t.name for t in response.templates][0] == 'leads/_inbox_rows.html'


def test_mark_read_view(admin_client, booking_data):
    consultation = ConsultationService.book(booking_data)

    response = admin_client.post(reverse('inbox-mark-read', args=['consultations', consultation.pk]))

    assert response.status_code == 302
    consultation.refresh_from_db()
    assert consultation.read is True


def test_mark_read_missing_record_404(admin_client):
    assert admin_client.post(reverse('inbox-mark-read', args=['inquiries', 999])).status_code == 404


def test_delete_view(admin_client, booking_data):
    consultation = ConsultationService.book(booking_data)
    response = admin_client.post(reverse('inbox-delete', args=['consultations', consultation.pk]))

    assert response.status_code == 302
    assert not Consultation.objects.exists()


def test_inbox_forbidden_for_students(student_client):
    assert student_client.get(reverse('inbox', args=['leads'])).status_code == 403


def test_inbox_redirects_anonymous(client):
    response = client.get(reverse('inbox', args=['leads']))
    assert response.status_code == 302
    assert reverse('login') in response.url


# --- Write failures ---

def test_booking_failure_shows_error(client, nursing, booking_data):
    with mock.patch('leads.views.ConsultationService.book', side_effect=DatabaseError):
        response = client.post(reverse('book-consultation'), booking_data)
        htmx = client.post(reverse('book-consultation'), booking_data, HTTP_HX_REQUEST='true')

    assert response.status_code == 200
    assert MSG_CONSULTATION_FAILED in response.content.decode()
    assert htmx.status_code == 200
    assert htmx.context['booking_error'] == MSG_CONSULTATION_FAILED
    assert not Consultation.objects.exists()


def test_contact_failure_keeps_form(client):
    data = {
        'name': 'Fathima',
        'phone': '+91 94470 00000',
        'subject': 'GNM Diploma Programs',
        'message': 'What are the fees?',
    }
    with mock.patch('leads.views.InquiryService.send', side_effect=DatabaseError):
        response = client.post(reverse('contact'), data)

    assert response.status_code == 200
    assert MSG_INQUIRY_FAILED in response.content.decode()
    assert response.context['inquiry_form'].data['message'] == 'What are the fees?'


def test_register_interest_failure_shows_generic_error(student_client, college):
    url = reverse('register-interest', args=['college', college.pk])
    with mock.patch('leads.views.LeadService.register_interest', side_effect=DatabaseError):
        response = student_client.post(url, {'phone': '+91 98470 12345'})

    assert response.status_code == 200
    assert MSG_GENERIC_ERROR in response.content.decode()


def test_inbox_delete_failure_keeps_record(admin_client, booking_data):
    consultation = ConsultationService.book(booking_data)
    with mock.patch.object(Consultation, 'delete', side_effect=DatabaseError):
        response = admin_client.post(
            reverse('inbox-delete', args=['consultations', consultation.pk]), follow=True,
        )

    assert response.redirect_chain[-1][0] == reverse('inbox', args=['consultations'])
    assert MSG_DELETE_FAILED in response.content.decode()
    assert Consultation.objects.filter(pk=consultation.pk).exists()
