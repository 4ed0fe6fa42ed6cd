from django.urls import path
from .views import (
    BookConsultationView, ContactView, RegisterInterestView,
    InboxListView, MarkReadView, InboxDeleteView,
)

urlpatterns = [
    path('book/', BookConsultationView.as_view(), name='book-consultation'),
    path('contact/', ContactView.as_view(), name='contact'),
    path('interest/<slug:kind>/<int:pk>/', RegisterInterestView.as_view(), name='register-interest'),

    # Admin inboxes
    path('dashboard/inbox/<slug:kind>/', InboxListView.as_view(), name='inbox'),
    path('dashboard/inbox/<slug:kind>/<int:pk>/read/', MarkReadView.as_view(), name='inbox-mark-read'),
    path('dashboard/inbox/<slug:kind>/<int:pk>/delete/', InboxDeleteView.as_view(), name='inbox-delete'),
]
