import logging
from datetime import timedelta

from django.contrib import messages
from django.db import DatabaseError
from django.db.models import Sum
from django.http import Http404
from django.shortcuts import render, redirect
from django.utils import timezone
from django.views.generic import TemplateView, ListView, DetailView, View

from catalog.models import College, University, EducationInsight, Event, Review
from catalog.services import ordered_services, latest_event
from config.constants import (
    DASHBOARD_RECENT_ITEMS, HOME_REVIEWS_LIMIT, HOME_COLLEGES_LIMIT, HOME_UNIVERSITIES_LIMIT,
    MSG_SETTINGS_SAVED, MSG_SETTINGS_FAILED, MSG_SECTION_SHOWN, MSG_SECTION_HIDDEN, MSG_LLM_CONFIG_SAVED,
)
from leads.forms import ConsultationForm
from leads.models import Consultation, Inquiry, Lead
from leads.services import InboxService
from users.models import User
from .forms import SiteSettingsForm, LLMConfigForm
from .llm_pricing import PRICING_PER_1M
from .llm_services import list_openai_models, model_choices
from .models import SiteSettings, LLMConfig, LLMUsageLog
from .monitor import SystemMonitor
from .permissions import AdminRequiredMixin
from .security import decrypt_value, mask_secret
from .services import SiteSettingsService
from .visibility import SECTIONS, section_name, section_rows, visibility_map

logger = logging.getLogger('apps.core')


def home(request):
    """Landing page; each block renders only when its section is visible."""
    settings = SiteSettingsService.get_settings()
    sections = visibility_map(settings)
    context = {
        'services': ordered_services() if sections['programs'] else [],
        'colleges': College.objects.all()[:HOME_COLLEGES_LIMIT] if sections['colleges'] else [],
        'universities': University.objects.all()[:HOME_UNIVERSITIES_LIMIT] if sections['universities'] else [],
        'reviews': Review.objects.order_by('-created_at', '-pk')[:HOME_REVIEWS_LIMIT],
        'insights': EducationInsight.objects.all() if sections['media'] else [],
        'events': Event.objects.all() if sections['events'] else [],
        'popup_event': latest_event() if sections['events'] else None,
        'booking_form': ConsultationForm() if sections['booking'] else None,
    }
    return render(request, 'home.html', context)


class AboutView(TemplateView):
    template_name = 'core/about.html'


class AdminDashboardView(AdminRequiredMixin, TemplateView):
    template_name = 'core/admin_dashboard.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['total_counts'] = InboxService.total_counts()
        context['unread_counts'] = InboxService.unread_counts()
        context['total_students'] = User.objects.filter(role=User.Role.STUDENT, is_superuser=False).count()
        context['total_colleges'] = College.objects.count()
        context['total_universities'] = University.objects.count()
        context['recent_leads'] = Lead.objects.select_related('student').order_by('-created_at')[:DASHBOARD_RECENT_ITEMS]
        context['recent_consultations'] = Consultation.objects.order_by('-created_at')[:DASHBOARD_RECENT_ITEMS]
        context['recent_inquiries'] = Inquiry.objects.order_by('-created_at')[:DASHBOARD_RECENT_ITEMS]
        return context


class SiteSettingsView(AdminRequiredMixin, View):
    template_name = 'settings/site_settings.html'

    def get(self, request):
        form = SiteSettingsForm(instance=SiteSettings.load())
        return render(request, self.template_name, {'form': form})

    def post(self, request):
        form = SiteSettingsForm(request.POST, instance=SiteSettings.load())
        if form.is_valid():
            try:
                SiteSettingsService.update_settings(**form.cleaned_data)
            except DatabaseError:
                logger.exception("Error saving site settings")
                messages.error(request, MSG_SETTINGS_FAILED)
            else:
                messages.success(request, MSG_SETTINGS_SAVED)
                return redirect('site-settings')
        return render(request, self.template_name, {'form': form})


class SectionsView(AdminRequiredMixin, View):
    template_name = 'settings/sections.html'

    def get(self, request):
        rows = section_rows(SiteSettingsService.get_settings())
        return render(request, self.template_name, {'rows': rows})


class ToggleSectionView(AdminRequiredMixin, View):
    def post(self, request, section_id):
        if section_id not in SECTIONS:
            raise Http404("Unknown section")
        try:
            visible = SiteSettingsService.toggle_section(section_id)
        except DatabaseError:
            logger.exception("Error toggling section %s", section_id)
            messages.error(request, MSG_SETTINGS_FAILED)
            return redirect('sections')

        template = MSG_SECTION_SHOWN if visible else MSG_SECTION_HIDDEN
        messages.success(request, template.format(name=section_name(section_id)))

        if request.headers.get('HX-Request'):
            row = next(r for r in section_rows(SiteSettingsService.get_settings()) if r['id'] == section_id)
            return render(request, 'settings/_section_row.html', {'row': row})
        return redirect('sections')


class SystemStatusView(AdminRequiredMixin, TemplateView):
    template_name = 'settings/system_status.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        monitor = SystemMonitor()
        context['health_check'] = monitor.check_all()
        return context


class LLMConfigView(AdminRequiredMixin, View):
    template_name = 'settings/llm_config.html'

    def _build_model_choices(self, api_key):
        models = []
        if api_key:
            try:
                models = list_openai_models(api_key)
            except Exception as exc:
                logger.warning("Could not list models: %s", exc)
                self._model_error = str(exc)
        if not models:
            models = list(PRICING_PER_1M.keys())
        return model_choices(models)

    def _render(self, request, form, api_key):
        context = self._build_metrics_context()
        context.update({
            'form': form,
            'api_key_masked': mask_secret(api_key),
            'model_error': getattr(self, '_model_error', ''),
        })
        return render(request, self.template_name, context)

    def get(self, request):
        config = LLMConfig.load()
        api_key = decrypt_value(config.encrypted_api_key)
        form = LLMConfigForm(instance=config, model_choices=self._build_model_choices(api_key))
        return self._render(request, form, api_key)

    def post(self, request):
        config = LLMConfig.load()
        api_key = decrypt_value(config.encrypted_api_key)
        api_key_for_models = request.POST.get('api_key') or api_key
        form = LLMConfigForm(
            request.POST, instance=config,
            model_choices=self._build_model_choices(api_key_for_models),
        )

        if request.POST.get('action') == 'test_key':
            if not api_key_for_models:
                messages.error(request, "Please enter an API key to test.")
            else:
                try:
                    list_openai_models(api_key_for_models)
                    messages.success(request, "API key is valid. Models fetched successfully.")
                except Exception as exc:
                    logger.warning("API key test failed: %s", exc)
                    messages.error(request, f"API key test failed: {exc}")
            return self._render(request, form, api_key)

        if form.is_valid():
            form.save()
            logger.info("Assistant configuration updated by %s", request.user.username)
            messages.success(request, MSG_LLM_CONFIG_SAVED)
            return redirect('llm-config')
        return self._render(request, form, api_key)

    def _build_metrics_context(self):
        now = timezone.now()
        start_month = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        start_week = now - timedelta(days=7)
        start_day = now - timedelta(days=1)

        logs = LLMUsageLog.objects.all()
        total_calls = logs.count()
        totals = logs.aggregate(
            tokens=Sum('total_tokens'), cost=Sum('cost_total'), latency=Sum('latency_ms'),
        )
        total_latency = totals['latency'] or 0

        return {
            'llm_config': LLMConfig.load(),
            'total_calls': total_calls,
            'success_calls': logs.filter(success=True).count(),
            'failed_calls': logs.filter(success=False).count(),
            'total_tokens': totals['tokens'] or 0,
            'total_cost': totals['cost'] or 0,
            'avg_latency': int(total_latency / total_calls) if total_calls else 0,
            'calls_today': logs.filter(created_at__gte=start_day).count(),
            'calls_week': logs.filter(created_at__gte=start_week).count(),
            'calls_month': logs.filter(created_at__gte=start_month).count(),
            'recent_logs': logs.order_by('-created_at')[:20],
        }


class LLMLogListView(AdminRequiredMixin, ListView):
    model = LLMUsageLog
    template_name = 'settings/llm_logs.html'
    context_object_name = 'logs'
    paginate_by = 25

    def get_queryset(self):
        qs = LLMUsageLog.objects.select_related('actor')
        status = self.request.GET.get('status')
        if status == 'failed':
            qs = qs.filter(success=False)
        elif status == 'ok':
            qs = qs.filter(success=True)
        return qs


class LLMLogDetailView(AdminRequiredMixin, DetailView):
    model = LLMUsageLog
    template_name = 'settings/llm_log_detail.html'
    context_object_name = 'log'
