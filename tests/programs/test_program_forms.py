import pytest
from django.http import QueryDict

from programs.forms import HackathonForm, IncubationProgramForm
from programs.models import Hackathon, IncubationProgram


def hackathon_data(**overrides):
    data = {
        "title": "Tech Innovation Hackathon 2024",
        "subtitle": "Build for Bharat",
        "description": "Two days of building",
        "start_date": "2030-03-01T09:00",
        "end_date": "2030-03-03T18:00",
        "registration_open_date": "2030-01-01T00:00",
        "registration_close_date": "2030-02-20T00:00",
        "location": "Bangalore",
        "tags": "AI, Fintech , ,Web3",
        "status": "published",
        "published": True,
    }
    data.update(overrides)
    return data


def incubation_data(**overrides):
    data = {
        "title": "Seed Track",
        "description": "Twelve weeks of support",
        "start_date": "2030-06-01T09:00",
        "end_date": "2030-09-01T09:00",
        "application_open_date": "2030-04-01T00:00",
        "application_close_date": "2030-05-01T00:00",
        "location": "Remote",
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
def test_valid_hackathon_is_saved_with_parsed_tags():
    form = HackathonForm(hackathon_data())
    assert form.is_valid(), form.errors

    hackathon = form.save()

    assert hackathon.tags == ["AI", "Fintech", "Web3"]
    assert hackathon.expected_participants == 100
    assert hackathon.is_publicly_visible


@pytest.mark.django_db
def test_tags_accept_a_list():
    form = HackathonForm(hackathon_data(tags=["AI", " ML "]))
    assert form.is_valid(), form.errors
    assert form.cleaned_data["tags"] == ["AI", "ML"]


@pytest.mark.django_db
def test_missing_required_fields_are_reported_once():
    form = HackathonForm(hackathon_data(subtitle="", location=""))

    assert not form.is_valid()
    assert form.non_field_errors() == ["Please fill in all required fields"]
    assert not Hackathon.objects.exists()


@pytest.mark.django_db
@pytest.mark.parametrize("overrides, message", [
    ({"end_date": "2030-03-01T09:00"}, "Start date must be before end date"),
    ({"end_date": "2030-02-01T09:00"}, "Start date must be before end date"),
    ({"registration_close_date": "2029-12-01T00:00"}, "Registration open date must be before close date"),
])
def test_hackathon_date_rules_block_the_write(overrides, message):
    form = HackathonForm(hackathon_data(**overrides))

    assert not form.is_valid()
    assert message in form.non_field_errors()
    assert not Hackathon.objects.exists()


@pytest.mark.django_db
def test_registration_window_is_optional():
    form = HackathonForm(hackathon_data(registration_open_date="", registration_close_date=""))
    assert form.is_valid(), form.errors


@pytest.mark.django_db
def test_incubation_defaults_and_draft_status():
    form = IncubationProgramForm(incubation_data())
    assert form.is_valid(), form.errors

    program = form.save()

    assert program.expected_startups == 20
    assert program.status == "draft"
    assert not program.is_publicly_visible


@pytest.mark.django_db
def test_incubation_subtitle_is_optional():
    assert IncubationProgramForm(incubation_data(subtitle="")).is_valid()


@pytest.mark.django_db
def test_incubation_application_must_open_before_program_start():
    form = IncubationProgramForm(incubation_data(
        application_open_date="2030-06-15T00:00",
        application_close_date="2030-07-01T00:00",
    ))

    assert not form.is_valid()
    assert "Application open date must be before program start date" in form.non_field_errors()
    assert not IncubationProgram.objects.exists()


@pytest.mark.django_db
def test_every_broken_date_rule_is_reported():
    form = IncubationProgramForm(incubation_data(
        end_date="2030-05-01T00:00",
        application_open_date="2030-07-01T00:00",
        application_close_date="2030-06-20T00:00",
    ))

    assert not form.is_valid()
    assert form.non_field_errors() == [
        "Start date must be before end date",
        "Application open date must be before close date",
        "Application open date must be before program start date",
    ]


@pytest.mark.django_db
def test_editing_binds_to_the_existing_instance(make_hackathon):
    hackathon = make_hackathon(title="Old title")
    form = HackathonForm(hackathon_data(title="New title"), instance=hackathon)
    assert form.is_valid(), form.errors

    form.save()

    hackathon.refresh_from_db()
    assert hackathon.title == "New title"
    assert Hackathon.objects.count() == 1


@pytest.mark.django_db
def test_form_encoded_edit_keeps_omitted_checkboxes(make_hackathon):
    hackathon = make_hackathon(is_default=True)
    data = QueryDict(mutable=True)
    data.update({key: value for key, value in hackathon_data().items() if key != "published"})
    data._mutable = False

    form = HackathonForm(data, instance=hackathon)
    assert form.is_valid(), form.errors
    form.save()

    hackathon.refresh_from_db()
    assert hackathon.published is True
    assert hackathon.is_default is True


@pytest.mark.django_db
def test_omitted_checkboxes_default_to_false_on_create():
    data = hackathon_data()
    del data["published"]

    form = HackathonForm(data)
    assert form.is_valid(), form.errors

    program = form.save()
    assert program.published is False
    assert program.is_default is False
