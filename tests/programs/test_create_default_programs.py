from io import StringIO

import pytest
from django.core.management import call_command

from programs.models import Hackathon, IncubationProgram


@pytest.mark.django_db
def test_command_creates_featured_programs_once(settings):
    settings.FEATURED_HACKATHON_TITLE = "Tech Innovation Hackathon 2024"
    out = StringIO()

    call_command("create_default_programs", stdout=out)
    call_command("create_default_programs", stdout=out)

    hackathon = Hackathon.objects.get()
    assert hackathon.title == "Tech Innovation Hackathon 2024"
    assert hackathon.is_default and hackathon.is_publicly_visible
    program = IncubationProgram.objects.get()
    assert program.is_default
    assert "already exists" in out.getvalue()


@pytest.mark.django_db
def test_command_can_create_drafts():
    call_command("create_default_programs", "--unpublished", stdout=StringIO())

    assert not Hackathon.objects.get().is_publicly_visible
    assert IncubationProgram.objects.get().status == "draft"
