from django.contrib.auth.mixins import LoginRequiredMixin, UserPassesTestMixin


class AdminRequiredMixin(LoginRequiredMixin, UserPassesTestMixin):
    """Superusers and ADMIN-role users only; others get a 403."""

    def test_func(self):
        return self.request.user.is_site_admin
