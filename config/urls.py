from django.conf import settings
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path("accounts/", include("django.contrib.auth.urls")),
    path("accounts/", include("users.urls")),
    path("assistant/", include("assistant.urls")),
    path("", include("catalog.urls")),
    path("", include("leads.urls")),
    path("", include("core.urls")),
]

if 'django_browser_reload' in settings.INSTALLED_APPS:
    urlpatterns.append(path("__reload__/", include("django_browser_reload.urls")))
