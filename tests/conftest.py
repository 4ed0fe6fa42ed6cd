"""
Shared fixtures for the site's test-suite.

Settings singletons are cached in the local-memory cache, so the cache is
cleared around every test to keep one test's settings out of the next.
"""

import datetime

import pytest
from django.core.cache import cache

from catalog.models import College, University, Service
from users.models import User, StudentProfile


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def no_env_api_key(settings):
    settings.OPENAI_API_KEY = ''


@pytest.fixture
def site_admin(db):
    return User.objects.create_user(
        username='counsellor', email='counsellor@example.com', password='pass12345',
        role=User.Role.ADMIN,
    )


@pytest.fixture
def student(db):
    user = User.objects.create_user(
        username='anjali', email='anjali@example.com', password='pass12345',
        first_name='Anjali', last_name='Nair',
    )
    StudentProfile.objects.create(user=user, mobile='+91 98470 12345', location='Kalpetta')
    return user


@pytest.fixture
def admin_client(client, site_admin):
    client.force_login(site_admin)
    return client


@pytest.fixture
def student_client(client, student):
    client.force_login(student)
    return client


@pytest.fixture
def college(db):
    return College.objects.create(name='Wayanad College of Nursing', location='Wayanad')


@pytest.fixture
def university(db):
    return University.objects.create(name='Rajiv Gandhi University of Health Sciences', location='Bengaluru')


@pytest.fixture
def nursing(db):
    return Service.objects.create(
        title='Paramedical', order=1,
        programs=['B.Sc. Nursing', 'GNM', 'MLT'],
    )


@pytest.fixture
def booking_data():
    return {
        'name': 'Rahul K',
        'phone': '+91 70253 11111',
        'date': (datetime.date.today() + datetime.timedelta(days=3)).isoformat(),
        'time': '10:00 AM',
        'interest': 'Paramedical',
        'selected_program': 'GNM',
        'last_attended_course': 'Plus Two',
        'percentage': '82%',
        'comment': 'Please call after 5pm',
    }
