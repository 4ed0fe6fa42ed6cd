import logging

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.db import DatabaseError
from django.http import Http404
from django.shortcuts import render, redirect, get_object_or_404
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.generic import ListView, View

from catalog.models import College, University
from config.constants import (
    PAGINATION_INBOX,
    MSG_CONSULTATION_BOOKED, MSG_CONSULTATION_FAILED, MSG_BOOKING_CLOSED,
    MSG_INQUIRY_SENT, MSG_INQUIRY_FAILED,
    MSG_LEAD_REGISTERED, MSG_LEAD_STUDENTS_ONLY, MSG_GENERIC_ERROR,
    MSG_MARKED_READ, MSG_ITEM_DELETED, MSG_DELETE_FAILED,
)
from core.permissions import AdminRequiredMixin
from core.services import SiteSettingsService
from .forms import ConsultationForm, InquiryForm, LeadForm
from .services import ConsultationService, InquiryService, LeadService, InboxService

logger = logging.getLogger('apps.leads')

LEAD_TARGETS = {
    'college': College,
    'university': University,
}


def _safe_next(request, default='home'):
    target = request.POST.get('next') or request.GET.get('next')
    if target and url_has_allowed_host_and_scheme(target, allowed_hosts={request.get_host()}):
        return target
    return default


class BookConsultationView(View):
    """Booking popup and booking section both post here."""
    template_name = 'leads/booking.html'
    partial_template = 'leads/_booking_form.html'
    success_partial = 'leads/_booking_success.html'

    def _is_htmx(self):
        return bool(self.request.headers.get('HX-Request'))

    def _render_form(self, form, status=200):
        template = self.partial_template if self._is_htmx() else self.template_name
        return render(self.request, template, {'booking_form': form}, status=status)

    def dispatch(self, request, *args, **kwargs):
        if not SiteSettingsService.is_section_visible('booking'):
            logger.info("Booking attempt while booking section is hidden")
            if self._is_htmx():
                return render(request, self.partial_template, {'booking_closed': True}, status=403)
            messages.error(request, MSG_BOOKING_CLOSED)
            return redirect('home')
        return super().dispatch(request, *args, **kwargs)

    def get(self, request):
        initial = {}
        if request.GET.get('program'):
            initial['selected_program'] = request.GET['program']
        if request.GET.get('interest'):
            initial['interest'] = request.GET['interest']
        return self._render_form(ConsultationForm(initial=initial))

    def post(self, request):
        form = ConsultationForm(request.POST)
        if not form.is_valid():
            return self._render_form(form)

        try:
            consultation = ConsultationService.book(form.cleaned_data)
        except DatabaseError:
            logger.exception("Error booking consultation")
            if self._is_htmx():
                return render(request, self.partial_template, {
                    'booking_form': form,
                    'booking_error': MSG_CONSULTATION_FAILED,
                })
            messages.error(request, MSG_CONSULTATION_FAILED)
            return self._render_form(form)

        if self._is_htmx():
            return render(request, self.success_partial, {'consultation': consultation})
        messages.success(request, MSG_CONSULTATION_BOOKED)
        return redirect(_safe_next(request))


class ContactView(View):
    template_name = 'leads/contact.html'

    def get(self, request):
        return render(request, self.template_name, {'inquiry_form': InquiryForm()})

    def post(self, request):
        form = InquiryForm(request.POST)
        if form.is_valid():
            try:
                InquiryService.send(form.cleaned_data)
            except DatabaseError:
                logger.exception("Error sending inquiry")
                messages.error(request, MSG_INQUIRY_FAILED)
            else:
                messages.success(request, MSG_INQUIRY_SENT)
                return redirect('contact')
        return render(request, self.template_name, {'inquiry_form': form})


class RegisterInterestView(LoginRequiredMixin, View):
    """A logged-in student registers interest in a college or university."""
    template_name = 'leads/register_interest.html'

    def _get_target(self, kind, pk):
        model = LEAD_TARGETS.get(kind)
        if model is None:
            raise Http404("Unknown institution type")
        return get_object_or_404(model, pk=pk)

    def _initial(self, user):
        profile = getattr(user, 'student_profile', None)
        if profile is None:
            return {}
        return {'phone': profile.mobile, 'location': profile.location}

    def get(self, request, kind, pk):
        target = self._get_target(kind, pk)
        form = LeadForm(initial=self._initial(request.user))
        return render(request, self.template_name, {'form': form, 'target': target, 'kind': kind})

    def post(self, request, kind, pk):
        target = self._get_target(kind, pk)
        if not request.user.is_student:
            messages.error(request, MSG_LEAD_STUDENTS_ONLY)
            return redirect(f'{kind}-detail', pk=pk)

        form = LeadForm(request.POST)
        if form.is_valid():
            try:
                LeadService.register_interest(request.user, target, form.cleaned_data)
            except DatabaseError:
                logger.exception("Error saving lead for %s", request.user.username)
                messages.error(request, MSG_GENERIC_ERROR)
            else:
                messages.success(request, MSG_LEAD_REGISTERED.format(name=target.name))
                return redirect(f'{kind}-detail', pk=pk)
        return render(request, self.template_name, {'form': form, 'target': target, 'kind': kind})


# --- Admin inboxes ---

class InboxMixin(AdminRequiredMixin):
    def get_inbox_model(self):
        try:
            return InboxService.model_for(self.kwargs['kind'])
        except ValueError:
            raise Http404("Unknown inbox")


class InboxListView(InboxMixin, ListView):
    template_name = 'leads/inbox.html'
    context_object_name = 'records'
    paginate_by = PAGINATION_INBOX

    def get_queryset(self):
        qs = self.get_inbox_model().objects.order_by('-created_at', '-pk')
        if self.request.GET.get('unread'):
            qs = qs.filter(read=False)
        if self.kwargs['kind'] == 'leads':
            qs = qs.select_related('student', 'college', 'university')
        return qs

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['kind'] = self.kwargs['kind']
        context['unread_counts'] = InboxService.unread_counts()
        return context

    def get_template_names(self):
        if self.request.headers.get('HX-Request'):
            return ['leads/_inbox_rows.html']
        return super().get_template_names()


class MarkReadView(InboxMixin, View):
    def post(self, request, kind, pk):
        self.get_inbox_model()
        if not InboxService.mark_read(kind, pk):
            raise Http404("Record not found")
        messages.success(request, MSG_MARKED_READ)
        return redirect(_safe_next(request, default=reverse('inbox', kwargs={'kind': kind})))


class InboxDeleteView(InboxMixin, View):
    def post(self, request, kind, pk):
        record = get_object_or_404(self.get_inbox_model(), pk=pk)
        try:
            record.delete()
        except DatabaseError:
            logger.exception("Error deleting %s #%s", kind, pk)
            messages.error(request, MSG_DELETE_FAILED)
        else:
            logger.info("%s #%s deleted by %s", kind, pk, request.user.username)
            messages.success(request, MSG_ITEM_DELETED.format(label=record._meta.verbose_name.capitalize()))
        return redirect('inbox', kind=kind)
