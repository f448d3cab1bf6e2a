import csv
import io
from datetime import timedelta

import pytest
from django.core import mail
from django.db import connection
from django.db.models.query import QuerySet
from django.test.utils import CaptureQueriesContext
from django.urls import reverse
from django.utils import timezone

import applications.services as services
from applications.models import HackathonApplication, IncubationApplication
from core.models import EmailLog


def list_url(program, family="hackathons"):
    return reverse("applications:list", args=[family, program.external_id])


def status_url(program, application, family="hackathons"):
    return reverse("applications:status", args=[family, program.external_id, application.external_id])


@pytest.mark.django_db
def test_list_returns_filtered_rows_and_unfiltered_stats(staff_client, hackathon, make_hackathon_application):
    make_hackathon_application(hackathon, full_name="Asha Rao", experience="beginner")
    make_hackathon_application(hackathon, full_name="Ben Ortiz", experience="advanced", status="approved")
    make_hackathon_application(hackathon, full_name="Chen Wu", experience="advanced")

    response = staff_client.get(list_url(hackathon), {"status": "pending", "category": "advanced"})

    assert response.status_code == 200
    body = response.json()
    assert [row["applicant_name"] for row in body["applications"]] == ["Chen Wu"]
    assert body["stats"]["total"] == 3
    assert body["stats"]["by_status"]["pending"] == 2
    assert body["stats"]["by_status"]["approved"] == 1
    assert body["filters"] == {"search": "", "status": "pending", "category": "advanced"}
    assert body["applications"][0]["allowed_statuses"] == ["pending", "under_review", "approved", "rejected", "waitlisted"]


@pytest.mark.django_db
def test_list_for_unknown_program_is_404(staff_client):
    url = reverse("applications:list", args=["hackathons", "00000000-0000-0000-0000-000000000000"])
    assert staff_client.get(url).status_code == 404


@pytest.mark.django_db
def test_list_is_staff_only(applicant_client, hackathon):
    assert applicant_client.get(list_url(hackathon)).status_code == 403


@pytest.mark.django_db
def test_detail_is_scoped_to_the_program(staff_client, make_hackathon, make_hackathon_application):
    first = make_hackathon(title="First")
    second = make_hackathon(title="Second")
    application = make_hackathon_application(first)

    own = staff_client.get(reverse("applications:detail", args=["hackathons", first.external_id, application.external_id]))
    other = staff_client.get(reverse("applications:detail", args=["hackathons", second.external_id, application.external_id]))

    assert own.status_code == 200
    assert own.json()["application"]["hackathon_title"] == "First"
    assert other.status_code == 404


@pytest.mark.django_db
def test_status_change_updates_and_emails(staff_client, incubation_program, make_incubation_application):
    application = make_incubation_application(incubation_program)

    response = staff_client.post(
        status_url(incubation_program, application, "incubation"),
        {"status": "under_review"},
        content_type="application/json",
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Application status updated to Under Review"
    assert body["application"]["status"] == "under_review"
    assert body["notified"] is True
    assert IncubationApplication.objects.get(pk=application.pk).reviewed_at is not None
    assert len(mail.outbox) == 1
    assert EmailLog.objects.filter(type="incubation_status_update", status="sent").exists()


@pytest.mark.django_db
def test_status_change_succeeds_when_email_fails(staff_client, hackathon, make_hackathon_application, monkeypatch):
    application = make_hackathon_application(hackathon)

    def failing_notifier(*args):
        raise ConnectionError("SMTP down")

    monkeypatch.setattr(services, "send_status_update_email", failing_notifier)

    response = staff_client.post(status_url(hackathon, application), {"status": "approved"})

    assert response.status_code == 200
    assert response.json()["notified"] is False
    assert HackathonApplication.objects.get(pk=application.pk).status == "approved"


@pytest.mark.django_db
def test_invalid_status_is_rejected(staff_client, hackathon, make_hackathon_application):
    application = make_hackathon_application(hackathon, status="approved")

    unknown = staff_client.post(status_url(hackathon, application), {"status": "archived"}, content_type="application/json")
    backwards = staff_client.post(status_url(hackathon, application), {"status": "pending"}, content_type="application/json")
    missing = staff_client.post(status_url(hackathon, application), {}, content_type="application/json")

    assert unknown.status_code == 400
    assert backwards.status_code == 400
    assert backwards.json()["error"] == "Cannot change status from approved to pending"
    assert missing.json()["error"] == "Status is required"
    assert HackathonApplication.objects.get(pk=application.pk).status == "approved"


@pytest.mark.django_db
def test_status_change_for_foreign_application_is_404(staff_client, make_hackathon, make_hackathon_application):
    mine = make_hackathon(title="Mine")
    other = make_hackathon(title="Other")
    application = make_hackathon_application(other)

    response = staff_client.post(status_url(mine, application), {"status": "approved"}, content_type="application/json")

    assert response.status_code == 404
    assert HackathonApplication.objects.get(pk=application.pk).status == "pending"


@pytest.mark.django_db
def test_export_honours_filters(staff_client, make_hackathon, make_hackathon_application):
    hackathon = make_hackathon(title="Tech Innovation Hackathon 2024")
    make_hackathon_application(hackathon, full_name="Asha Rao")
    make_hackathon_application(hackathon, full_name="Ben Ortiz", status="rejected")

    response = staff_client.get(
        reverse("applications:export", args=["hackathons", hackathon.external_id]), {"status": "rejected"}
    )

    assert response.status_code == 200
    assert response["Content-Type"].startswith("text/csv")
    assert response["Content-Disposition"] == 'attachment; filename="tech_innovation_hackathon_2024_applications.csv"'
    rows = list(csv.reader(io.StringIO(response.content.decode())))
    assert len(rows) == 2
    assert rows[1][0] == "Ben Ortiz"


def hackathon_payload(**overrides):
    payload = {
        "full_name": "Fay Founder",
        "email": "founder@example.com",
        "city": "Kochi",
        "experience": "intermediate",
        "agreements": True,
    }
    payload.update(overrides)
    return payload


@pytest.mark.django_db
def test_apply_creates_pending_registration_and_confirms(applicant_client, applicant_user, hackathon):
    response = applicant_client.post(
        reverse("applications:apply", args=["hackathons", hackathon.external_id]),
        hackathon_payload(),
        content_type="application/json",
    )

    assert response.status_code == 201
    application = HackathonApplication.objects.get()
    assert application.status == "pending"
    assert application.user == applicant_user
    assert application.hackathon == hackathon
    assert mail.outbox[0].subject == f"Hackathon Registration Received - {hackathon.title}"


@pytest.mark.django_db
def test_apply_only_once_per_program(applicant_client, hackathon):
    url = reverse("applications:apply", args=["hackathons", hackathon.external_id])
    applicant_client.post(url, hackathon_payload(), content_type="application/json")

    second = applicant_client.post(url, hackathon_payload(), content_type="application/json")

    assert second.status_code == 409
    assert HackathonApplication.objects.count() == 1


@pytest.mark.django_db
def test_apply_duplicate_caught_by_database_constraint(applicant_client, applicant_user, hackathon,
                                                        make_hackathon_application, monkeypatch):
    make_hackathon_application(hackathon, user=applicant_user)
    monkeypatch.setattr(QuerySet, "exists", lambda self: False)

    response = applicant_client.post(
        reverse("applications:apply", args=["hackathons", hackathon.external_id]),
        hackathon_payload(),
        content_type="application/json",
    )

    assert response.status_code == 409
    assert response.json()["error"] == f'You have already applied to "{hackathon.title}"'
    assert HackathonApplication.objects.count() == 1


@pytest.mark.django_db
def test_apply_requires_open_window_and_agreement(applicant_client, make_hackathon):
    closed = make_hackathon(registration_close_date=timezone.now() - timedelta(days=1))
    open_hackathon = make_hackathon(title="Open")

    closed_response = applicant_client.post(
        reverse("applications:apply", args=["hackathons", closed.external_id]),
        hackathon_payload(), content_type="application/json",
    )
    no_agreement = applicant_client.post(
        reverse("applications:apply", args=["hackathons", open_hackathon.external_id]),
        hackathon_payload(agreements=False), content_type="application/json",
    )

    assert closed_response.status_code == 400
    assert "closed" in closed_response.json()["error"]
    assert no_agreement.status_code == 400
    assert "agreements" in no_agreement.json()["errors"]
    assert not HackathonApplication.objects.exists()


@pytest.mark.django_db
def test_apply_requires_login(client, hackathon):
    response = client.post(
        reverse("applications:apply", args=["hackathons", hackathon.external_id]),
        hackathon_payload(), content_type="application/json",
    )
    assert response.status_code == 401


@pytest.mark.django_db
def test_incubation_apply_and_history(applicant_client, incubation_program):
    response = applicant_client.post(
        reverse("applications:apply", args=["incubation", incubation_program.external_id]),
        {
            "founder_name": "Fay Founder",
            "email": "founder@example.com",
            "startup_name": "Kelp Labs",
            "stage": "idea",
            "industry": "Food",
            "description": "Seaweed snacks",
            "problem_statement": "Protein deficit",
            "solution_description": "Farmed kelp",
            "target_market": "Coastal cities",
            "team_size": 2,
        },
        content_type="application/json",
    )
    assert response.status_code == 201
    assert response.json()["application"]["status"] == "submitted"

    history = applicant_client.get(reverse("applications:mine")).json()["applications"]
    assert [row["startup_name"] for row in history["incubation"]] == ["Kelp Labs"]
    assert history["hackathons"] == []


@pytest.mark.django_db
def test_list_query_count_does_not_grow_with_applications(staff_client, hackathon, make_hackathon_application):
    make_hackathon_application(hackathon, full_name="First")
    with CaptureQueriesContext(connection) as single:
        staff_client.get(list_url(hackathon))

    for name in ("Second", "Third", "Fourth"):
        make_hackathon_application(hackathon, full_name=name)
    with CaptureQueriesContext(connection) as several:
        response = staff_client.get(list_url(hackathon))

    assert len(response.json()["applications"]) == 4
    assert len(several.captured_queries) == len(single.captured_queries)
