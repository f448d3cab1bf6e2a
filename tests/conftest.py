import os
from datetime import timedelta

import django
import pytest

# Ensure Django is configured when running under plain pytest
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "incubator.settings")
django.setup()

from django.utils import timezone

from applications.models import HackathonApplication, IncubationApplication
from core.models import User
from programs.models import Hackathon, IncubationProgram


@pytest.fixture(autouse=True)
def locmem_email(settings):
    settings.EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"


@pytest.fixture
def staff_user(db):
    return User.objects.create_user(
        email="admin@inc-combinator.com",
        password="Str0ng-passw0rd!",
        first_name="Ada",
        last_name="Admin",
        role="admin",
    )


@pytest.fixture
def applicant_user(db):
    return User.objects.create_user(
        email="founder@example.com",
        password="Str0ng-passw0rd!",
        first_name="Fay",
        last_name="Founder",
    )


@pytest.fixture
def staff_client(client, staff_user):
    client.force_login(staff_user)
    return client


@pytest.fixture
def applicant_client(client, applicant_user):
    client.force_login(applicant_user)
    return client


@pytest.fixture
def make_hackathon(db):
    def factory(**overrides):
        now = timezone.now()
        fields = {
            "title": "Spring Build Weekend",
            "subtitle": "48 hours of building",
            "description": "A weekend hackathon",
            "start_date": now + timedelta(days=20),
            "end_date": now + timedelta(days=22),
            "registration_open_date": now - timedelta(days=1),
            "registration_close_date": now + timedelta(days=10),
            "location": "Bangalore",
            "status": "published",
            "published": True,
        }
        fields.update(overrides)
        return Hackathon.objects.create(**fields)
    return factory


@pytest.fixture
def make_incubation_program(db):
    def factory(**overrides):
        now = timezone.now()
        fields = {
            "title": "Seed Track",
            "description": "Twelve week incubation",
            "start_date": now + timedelta(days=60),
            "end_date": now + timedelta(days=150),
            "application_open_date": now - timedelta(days=1),
            "application_close_date": now + timedelta(days=30),
            "location": "Remote",
            "status": "published",
            "published": True,
        }
        fields.update(overrides)
        return IncubationProgram.objects.create(**fields)
    return factory


@pytest.fixture
def hackathon(make_hackathon):
    return make_hackathon()


@pytest.fixture
def incubation_program(make_incubation_program):
    return make_incubation_program()


@pytest.fixture
def make_hackathon_application(db):
    def factory(hackathon, **overrides):
        fields = {
            "hackathon": hackathon,
            "full_name": "Asha Rao",
            "email": "asha@example.com",
            "city": "Pune",
            "college": "COEP",
            "experience": "beginner",
        }
        fields.update(overrides)
        return HackathonApplication.objects.create(**fields)
    return factory


@pytest.fixture
def make_incubation_application(db):
    def factory(program, **overrides):
        fields = {
            "program": program,
            "founder_name": "Ravi Menon",
            "startup_name": "SolarGrid",
            "email": "ravi@solargrid.io",
            "stage": "mvp",
            "industry": "Energy",
            "description": "Community solar",
            "problem_statement": "Grid outages",
            "solution_description": "Shared microgrids",
            "target_market": "Tier-2 towns",
        }
        fields.update(overrides)
        return IncubationApplication.objects.create(**fields)
    return factory
