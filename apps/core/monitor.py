import time
import logging

from django.db import connections
from django.db.utils import OperationalError
from django.test import Client
from django.urls import reverse

logger = logging.getLogger('diagnostics')

# Pages anyone can load; admin pages are checked for a 200 or a login redirect
CRITICAL_PAGES = [
    ('Home Page', 'home', None),
    ('About', 'about', None),
    ('Courses', 'courses', None),
    ('Colleges', 'college-list', None),
    ('Universities', 'university-list', None),
    ('Events', 'event-list', None),
    ('Contact', 'contact', None),
    ('Career Assistant', 'assistant', None),
    ('Login', 'login', None),
    ('Student Signup', 'student-signup', None),
    ('Admin Dashboard', 'admin-dashboard', None),
    ('Consultation Inbox', 'inbox', {'kind': 'consultations'}),
    ('Django Admin', 'admin:login', None),
]


class SystemMonitor:
    def check_all(self):
        """
        Run all system checks and return a dict of results.
        """
        return {
            'database': self.check_database(),
            'pages': self.check_critical_pages(),
        }

    def check_database(self):
        start = time.time()
        status = "Operational"
        error = None
        try:
            conn = connections['default']
            conn.cursor()
        except OperationalError as e:
            status = "Failed"
            error = str(e)
            logger.error("Database check failed: %s", e)

        duration = (time.time() - start) * 1000
        return {
            'name': 'Default Database',
            'status': status,
            'duration_ms': round(duration, 2),
            'error': error,
        }

    def check_critical_pages(self):
        """
        Ping critical internal URLs to ensure they load (200 or 302).
        Uses Django Test Client to avoid network overhead.
        """
        client = Client()
        results = []
        for name, url_name, kwargs in CRITICAL_PAGES:
            url = reverse(url_name, kwargs=kwargs)
            start = time.time()
            try:
                # HTTP_HOST='localhost' keeps ALLOWED_HOSTS happy outside tests
                response = client.get(url, HTTP_HOST='localhost')
                status_code = response.status_code
                if status_code in (200, 302):
                    status = "Operational"
                    error = None
                else:
                    status = "Failed"
                    error = f"HTTP {status_code}"
            except Exception as e:
                logger.exception("Page check crashed: %s", url)
                status = "Failed"
                status_code = 0
                error = str(e)

            duration = (time.time() - start) * 1000
            results.append({
                'name': name,
                'url': url,
                'status': status,
                'status_code': status_code,
                'duration_ms': round(duration, 2),
                'error': error,
            })
        return results
