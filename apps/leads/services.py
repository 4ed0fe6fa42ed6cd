import logging

from django.db import IntegrityError, transaction

from catalog.models import College, University
from .models import Consultation, Inquiry, Lead

logger = logging.getLogger('apps.leads')

INBOX_MODELS = {
    'leads': Lead,
    'consultations': Consultation,
    'inquiries': Inquiry,
}


class ConsultationService:
    @staticmethod
    def book(data):
        """Append one consultation request. `data` is a form's cleaned_data."""
        consultation = Consultation.objects.create(
            name=data['name'],
            phone=data['phone'],
            date=data['date'],
            time=data.get('time', ''),
            interest=data['interest'],
            selected_program=data.get('selected_program', ''),
            last_attended_course=data.get('last_attended_course', ''),
            percentage=data.get('percentage', ''),
            comment=data.get('comment', ''),
            read=False,
        )
        logger.info("Consultation booked: #%s (%s)", consultation.pk, consultation.interest)
        return consultation


class InquiryService:
    @staticmethod
    def send(data):
        inquiry = Inquiry.objects.create(
            name=data['name'],
            phone=data['phone'],
            subject=data['subject'],
            message=data['message'],
        )
        logger.info("Inquiry received: #%s (%s)", inquiry.pk, inquiry.subject)
        return inquiry


class LeadService:
    @staticmethod
    def register_interest(student, target, details):
        """
        Record a student's interest in a college or university.

        Returns (lead, created). A student registering twice for the same
        target gets the existing lead back and nothing new is written.
        """
        if isinstance(target, College):
            kind, lookup = Lead.Kind.COLLEGE, {'college': target}
        elif isinstance(target, University):
            kind, lookup = Lead.Kind.UNIVERSITY, {'university': target}
        else:
            raise TypeError(f"Cannot register interest in {type(target).__name__}")

        existing = Lead.objects.filter(student=student, **lookup).first()
        if existing:
            logger.debug("Duplicate lead ignored: %s → %s", student.username, target)
            return existing, False
        try:
            with transaction.atomic():
                lead = Lead.objects.create(
                    student=student,
                    kind=kind,
                    target_name=target.name,
                    student_name=student.get_full_name() or student.username,
                    student_email=student.email,
                    student_phone=details['phone'],
                    student_location=details.get('location', ''),
                    last_attended_course=details.get('course', ''),
                    percentage=details.get('percentage', ''),
                    **lookup,
                )
        except IntegrityError:
            existing = Lead.objects.filter(student=student, **lookup).first()
            if existing is None:
                raise
            # A concurrent submit for the same target got there first
            logger.debug("Concurrent duplicate lead ignored: %s → %s", student.username, target)
            return existing, False
        logger.info("Lead saved: %s → %s (%s)", student.username, target.name, kind)
        return lead, True


class InboxService:
    @staticmethod
    def model_for(kind):
        try:
            return INBOX_MODELS[kind]
        except KeyError:
            raise ValueError(f"Unknown inbox: {kind}")

    @staticmethod
    def mark_read(kind, pk):
        updated = InboxService.model_for(kind).objects.filter(pk=pk).update(read=True)
        return bool(updated)

    @staticmethod
    def unread_counts():
        return {kind: model.objects.filter(read=False).count() for kind, model in INBOX_MODELS.items()}

    @staticmethod
    def total_counts():
        return {kind: model.objects.count() for kind, model in INBOX_MODELS.items()}
