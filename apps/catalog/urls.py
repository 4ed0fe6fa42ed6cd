from django.urls import path
from .views import (
    CoursesView, CollegeListView, CollegeDetailView, UniversityListView, UniversityDetailView,
    EventListView, EventPopupView, BookingPopupView,
    ContentListView, ContentCreateView, ContentUpdateView, ContentDeleteView,
)

urlpatterns = [
    path('courses/', CoursesView.as_view(), name='courses'),
    path('colleges/', CollegeListView.as_view(), name='college-list'),
    path('colleges/<int:pk>/', CollegeDetailView.as_view(), name='college-detail'),
    path('universities/', UniversityListView.as_view(), name='university-list'),
    path('universities/<int:pk>/', UniversityDetailView.as_view(), name='university-detail'),
    path('events/', EventListView.as_view(), name='event-list'),
    path('popups/event/', EventPopupView.as_view(), name='event-popup'),
    path('popups/booking/', BookingPopupView.as_view(), name='booking-popup'),

    # Content management
    path('dashboard/content/<slug:kind>/', ContentListView.as_view(), name='content-list'),
    path('dashboard/content/<slug:kind>/add/', ContentCreateView.as_view(), name='content-create'),
    path('dashboard/content/<slug:kind>/<int:pk>/edit/', ContentUpdateView.as_view(), name='content-update'),
    path('dashboard/content/<slug:kind>/<int:pk>/delete/', ContentDeleteView.as_view(), name='content-delete'),
]
