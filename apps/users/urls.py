from django.urls import path
from .views import StudentSignupView, StudentDashboardView

urlpatterns = [
    path('signup/', StudentSignupView.as_view(), name='student-signup'),
    path('dashboard/', StudentDashboardView.as_view(), name='student-dashboard'),
]
