import logging

from django.contrib import messages
from django.db import DatabaseError
from django.http import Http404
from django.urls import reverse
from django.views.generic import ListView, DetailView, TemplateView, CreateView, UpdateView, DeleteView

from config.constants import (
    PAGINATION_CATALOG_ADMIN, MSG_ITEM_SAVED, MSG_ITEM_DELETED, MSG_ITEM_FAILED, MSG_DELETE_FAILED,
)
from core.forms import TeamMemberForm
from core.models import TeamMember
from core.permissions import AdminRequiredMixin
from leads.forms import ConsultationForm
from .forms import ServiceForm, CollegeForm, UniversityForm, EventForm, EducationInsightForm, ReviewForm
from .models import Service, College, University, Event, EducationInsight, Review
from .services import (
    ordered_services, flatten_programs, filter_programs,
    university_locations, filter_by_location, latest_event,
)

logger = logging.getLogger('apps.catalog')


class HtmxPartialMixin:
    partial_template_name = None

    def get_template_names(self):
        if self.partial_template_name and self.request.headers.get('HX-Request'):
            return [self.partial_template_name]
        return super().get_template_names()


class CoursesView(HtmxPartialMixin, TemplateView):
    template_name = 'catalog/courses.html'
    partial_template_name = 'catalog/_program_list.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        services = list(ordered_services())
        selected = self.request.GET.get('category') or None
        programs = flatten_programs(services)
        context.update({
            'services': services,
            'selected_category': selected,
            'programs': filter_programs(programs, selected),
            'program_count': len(programs),
        })
        return context


class CollegeListView(HtmxPartialMixin, ListView):
    model = College
    template_name = 'catalog/college_list.html'
    partial_template_name = 'catalog/_institution_list.html'
    context_object_name = 'institutions'

    def get_queryset(self):
        qs = super().get_queryset()
        search_query = self.request.GET.get('search')
        if search_query:
            qs = qs.filter(name__icontains=search_query)
        return qs

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['kind'] = 'college'
        return context


class UniversityListView(HtmxPartialMixin, TemplateView):
    template_name = 'catalog/university_list.html'
    partial_template_name = 'catalog/_institution_list.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        universities = list(University.objects.all())
        selected = self.request.GET.get('location') or 'All'
        context.update({
            'kind': 'university',
            'locations': university_locations(universities),
            'selected_location': selected,
            'institutions': filter_by_location(universities, selected),
        })
        return context


class InstitutionDetailView(DetailView):
    template_name = 'catalog/institution_detail.html'
    context_object_name = 'institution'
    kind = None

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['kind'] = self.kind
        user = self.request.user
        if user.is_authenticated:
            context['already_registered'] = self.object.leads.filter(student=user).exists()
        return context


class CollegeDetailView(InstitutionDetailView):
    model = College
    kind = 'college'


class UniversityDetailView(InstitutionDetailView):
    model = University
    kind = 'university'


class EventListView(ListView):
    model = Event
    template_name = 'catalog/event_list.html'
    context_object_name = 'events'


class EventPopupView(TemplateView):
    """HTMX-loaded popup announcing the newest event."""
    template_name = 'catalog/_event_popup.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['event'] = latest_event()
        return context


class BookingPopupView(TemplateView):
    template_name = 'catalog/_booking_popup.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['booking_form'] = ConsultationForm()
        return context


# --- Content management (admin) ---

CONTENT_TYPES = {
    'services': ('Course category', Service, ServiceForm),
    'colleges': ('College', College, CollegeForm),
    'universities': ('University', University, UniversityForm),
    'events': ('Event', Event, EventForm),
    'insights': ('Education insight', EducationInsight, EducationInsightForm),
    'reviews': ('Review', Review, ReviewForm),
    'team': ('Team member', TeamMember, TeamMemberForm),
}


class ContentTypeMixin:
    """
    Resolves the `kind` URL kwarg to a label and model.

    Listed after AdminRequiredMixin so access is checked before the kind.
    """

    def dispatch(self, request, *args, **kwargs):
        try:
            self.label, self.model, _ = CONTENT_TYPES[kwargs['kind']]
        except KeyError:
            raise Http404("Unknown content type")
        return super().dispatch(request, *args, **kwargs)

    def get_queryset(self):
        return self.model.objects.all()

    def get_success_url(self):
        return reverse('content-list', kwargs={'kind': self.kwargs['kind']})

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['kind'] = self.kwargs['kind']
        context['label'] = self.label
        context['content_types'] = [(kind, label) for kind, (label, _, _) in CONTENT_TYPES.items()]
        return context


class ContentListView(AdminRequiredMixin, ContentTypeMixin, ListView):
    template_name = 'catalog/manage/content_list.html'
    context_object_name = 'items'
    paginate_by = PAGINATION_CATALOG_ADMIN


class ContentSaveMixin(ContentTypeMixin):
    template_name = 'catalog/manage/content_form.html'

    def get_form_class(self):
        return CONTENT_TYPES[self.kwargs['kind']][2]

    def form_valid(self, form):
        try:
            response = super().form_valid(form)
        except DatabaseError:
            logger.exception("Error saving %s", self.label)
            messages.error(self.request, MSG_ITEM_FAILED)
            return self.form_invalid(form)
        logger.info("%s saved by %s: %s", self.label, self.request.user.username, self.object)
        messages.success(self.request, MSG_ITEM_SAVED.format(label=self.label))
        return response


class ContentCreateView(AdminRequiredMixin, ContentSaveMixin, CreateView):
    pass


class ContentUpdateView(AdminRequiredMixin, ContentSaveMixin, UpdateView):
    pass


class ContentDeleteView(AdminRequiredMixin, ContentTypeMixin, DeleteView):
    template_name = 'catalog/manage/content_confirm_delete.html'

    def form_valid(self, form):
        try:
            response = super().form_valid(form)
        except DatabaseError:
            logger.exception("Error deleting %s #%s", self.label, self.kwargs['pk'])
            messages.error(self.request, MSG_DELETE_FAILED)
            return self.render_to_response(self.get_context_data())
        messages.success(self.request, MSG_ITEM_DELETED.format(label=self.label))
        return response
