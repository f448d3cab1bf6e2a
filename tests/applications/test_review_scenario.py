import csv
import io

import pytest
from django.urls import reverse

from applications.models import HackathonApplication


@pytest.mark.django_db
def test_filter_transition_and_export_round(staff_client, hackathon, make_hackathon_application):
    a = make_hackathon_application(hackathon, full_name="A", email="a@example.com", status="pending")
    b = make_hackathon_application(hackathon, full_name="B", email="b@example.com", status="approved")
    c = make_hackathon_application(hackathon, full_name="C", email="c@example.com", status="pending")
    list_url = reverse("applications:list", args=["hackathons", hackathon.external_id])

    pending = staff_client.get(list_url, {"status": "pending"}).json()["applications"]
    assert {row["full_name"] for row in pending} == {"A", "C"}

    response = staff_client.post(
        reverse("applications:status", args=["hackathons", hackathon.external_id, b.external_id]),
        {"status": "rejected"},
        content_type="application/json",
    )
    assert response.status_code == 200
    refetched = {row["full_name"]: row["status"] for row in staff_client.get(list_url).json()["applications"]}
    assert refetched == {"A": "pending", "B": "rejected", "C": "pending"}
    assert HackathonApplication.objects.get(pk=b.pk).status == "rejected"

    export = staff_client.get(
        reverse("applications:export", args=["hackathons", hackathon.external_id]), {"status": "pending"}
    )
    records = list(csv.reader(io.StringIO(export.content.decode())))
    assert len(records) == 3
    assert {record[0] for record in records[1:]} == {a.full_name, c.full_name}
