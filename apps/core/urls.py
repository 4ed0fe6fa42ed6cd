from django.urls import path
from .views import (
    home, AboutView, AdminDashboardView, SiteSettingsView, SectionsView, ToggleSectionView,
    SystemStatusView, LLMConfigView, LLMLogListView, LLMLogDetailView,
)

urlpatterns = [
    path('', home, name='home'),
    path('about/', AboutView.as_view(), name='about'),
    path('dashboard/', AdminDashboardView.as_view(), name='admin-dashboard'),
    path('dashboard/settings/', SiteSettingsView.as_view(), name='site-settings'),
    path('dashboard/sections/', SectionsView.as_view(), name='sections'),
    path('dashboard/sections/<slug:section_id>/toggle/', ToggleSectionView.as_view(), name='toggle-section'),
    path('dashboard/status/', SystemStatusView.as_view(), name='system-status'),
    path('dashboard/llm/', LLMConfigView.as_view(), name='llm-config'),
    path('dashboard/llm/logs/', LLMLogListView.as_view(), name='llm-logs'),
    path('dashboard/llm/logs/<int:pk>/', LLMLogDetailView.as_view(), name='llm-log-detail'),
]
