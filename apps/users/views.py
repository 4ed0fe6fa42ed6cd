import logging

from django.contrib import messages
from django.contrib.auth import login
from django.contrib.auth.mixins import LoginRequiredMixin
from django.db import DatabaseError, transaction
from django.shortcuts import render, redirect
from django.views import View as BaseView

from config.constants import MSG_SIGNUP_SUCCESS, MSG_PROFILE_UPDATED, MSG_PROFILE_FAILED
from leads.models import Lead
from .forms import StudentSignupForm, UserProfileForm, StudentProfileForm
from .models import StudentProfile

logger = logging.getLogger('apps.users')


class StudentSignupView(BaseView):
    template_name = 'registration/signup.html'

    def get(self, request):
        if request.user.is_authenticated:
            return redirect('home')
        return render(request, self.template_name, {'form': StudentSignupForm()})

    def post(self, request):
        form = StudentSignupForm(request.POST)
        if form.is_valid():
            user = form.save()
            login(request, user)
            logger.info("Student signed up: %s", user.username)
            messages.success(request, MSG_SIGNUP_SUCCESS)
            return redirect('student-dashboard')
        return render(request, self.template_name, {'form': form})


class StudentDashboardView(LoginRequiredMixin, BaseView):
    """Profile editing plus the student's registered interests."""
    template_name = 'users/student_dashboard.html'

    def dispatch(self, request, *args, **kwargs):
        if request.user.is_authenticated and request.user.is_site_admin:
            return redirect('admin-dashboard')
        return super().dispatch(request, *args, **kwargs)

    def _context(self, user_form, profile_form):
        return {
            'user_form': user_form,
            'profile_form': profile_form,
            'leads': Lead.objects.filter(student=self.request.user).select_related('college', 'university'),
        }

    def get(self, request):
        profile = StudentProfile.for_user(request.user)
        user_form = UserProfileForm(instance=request.user, prefix='user')
        profile_form = StudentProfileForm(instance=profile, prefix='profile')
        return render(request, self.template_name, self._context(user_form, profile_form))

    def post(self, request):
        profile = StudentProfile.for_user(request.user)
        user_form = UserProfileForm(request.POST, instance=request.user, prefix='user')
        profile_form = StudentProfileForm(request.POST, instance=profile, prefix='profile')
        if user_form.is_valid() and profile_form.is_valid():
            try:
                with transaction.atomic():
                    user_form.save()
                    profile_form.save()
            except DatabaseError:
                logger.exception("Error saving profile for %s", request.user.username)
                messages.error(request, MSG_PROFILE_FAILED)
            else:
                messages.success(request, MSG_PROFILE_UPDATED)
                return redirect('student-dashboard')
        return render(request, self.template_name, self._context(user_form, profile_form))
