from datetime import timedelta

import pytest
from django.urls import reverse
from django.utils import timezone

from candidates.utils import candidate_row, candidate_rows, filter_candidates, unique_positions
from interviews.models import Interview
from interviews.utils import schedule_interview
from resumes.models import Resume

from .conftest import make_user

pytestmark = pytest.mark.django_db


def _row(name, position, status, email, days_ago):
    return {
        "id": email,
        "name": name,
        "position": position,
        "status": status,
        "email": email,
        "last_activity": timezone.now() - timedelta(days=days_ago),
    }


@pytest.fixture
def rows():
    return [
        _row("Jane Doe", "Frontend Developer", "new", "jane@example.com", 3),
        _row("bob stone", "Backend Developer", "interviewed", "bob@example.com", 1),
        _row("Alice Wong", "Frontend Developer", "hired", "alice@corp.io", 7),
    ]


def test_filter_default_sorts_by_recent_activity(rows):
    assert [c["name"] for c in filter_candidates(rows)] == ["bob stone", "Jane Doe", "Alice Wong"]


def test_filter_by_query_matches_name_position_or_email(rows):
    assert [c["name"] for c in filter_candidates(rows, query="ALICE")] == ["Alice Wong"]
    assert [c["name"] for c in filter_candidates(rows, query="backend")] == ["bob stone"]
    assert [c["name"] for c in filter_candidates(rows, query="corp.io")] == ["Alice Wong"]
    assert filter_candidates(rows, query="nobody") == []


def test_filter_by_status_and_position(rows):
    assert [c["name"] for c in filter_candidates(rows, status="hired")] == ["Alice Wong"]
    frontend = filter_candidates(rows, position="Frontend Developer", sort="name")
    assert [c["name"] for c in frontend] == ["Alice Wong", "Jane Doe"]
    assert len(filter_candidates(rows, status="all", position="all")) == 3


def test_sort_by_name_is_case_insensitive(rows):
    assert [c["name"] for c in filter_candidates(rows, sort="name")] == ["Alice Wong", "bob stone", "Jane Doe"]


def test_sort_by_position(rows):
    assert [c["position"] for c in filter_candidates(rows, sort="position")] == [
        "Backend Developer", "Frontend Developer", "Frontend Developer",
    ]


def test_unique_positions(rows):
    rows.append(_row("No Role", "", "new", "x@example.com", 0))
    assert unique_positions(rows) == ["Backend Developer", "Frontend Developer"]


def test_candidate_row_lists_interviews(admin_user, candidate_user, slot_times):
    start, end = slot_times
    past = timezone.now() - timedelta(days=5)
    old = schedule_interview(
        admin_user, "Screening", "D", candidate=candidate_user,
        slot={"start_time": past, "end_time": past + timedelta(hours=1)},
    )
    schedule_interview(
        admin_user, "Onsite", "D", candidate=candidate_user,
        slot={"start_time": start, "end_time": end},
    )

    row = candidate_row(candidate_user.profile)
    assert row["id"] == candidate_user.pk
    assert row["name"] == "Jane Doe"
    assert row["status_label"] == "New"
    assert [i["title"] for i in row["interviews"]] == ["Screening", "Onsite"]
    assert row["interviews"][0]["completed"] is True
    assert row["next_interview"]["title"] == "Onsite"
    assert row["interviews"][0]["interview_id"] == old.pk


def test_candidate_rows_exclude_admins(admin_user, candidate_user):
    make_user("sam@example.com", full_name="Sam")
    names = sorted(r["name"] for r in candidate_rows())
    assert names == ["Jane Doe", "Sam"]


# ---------- pages ----------
def test_list_page_admin_only(candidate_client):
    resp = candidate_client.get(reverse("candidate_list"), follow=True)
    assert resp.redirect_chain[-1][0] == reverse("dashboard")
    assert b"Only administrators can access this page" in resp.content


def test_list_page_filters(admin_client, candidate_user):
    make_user("bob@example.com", full_name="Bob Stone", position="Backend Developer", status="hired")

    resp = admin_client.get(reverse("candidate_list"))
    assert resp.status_code == 200
    assert {c["name"] for c in resp.context["candidates"]} == {"Jane Doe", "Bob Stone"}
    assert resp.context["positions"] == ["Backend Developer", "Frontend Developer"]

    resp = admin_client.get(reverse("candidate_list"), {"status": "hired"})
    assert [c["name"] for c in resp.context["candidates"]] == ["Bob Stone"]
    resp = admin_client.get(reverse("candidate_list"), {"q": "jane"})
    assert [c["name"] for c in resp.context["candidates"]] == ["Jane Doe"]


def test_detail_page(admin_client, admin_user, candidate_user, slot_times):
    start, end = slot_times
    Resume.objects.create(user=candidate_user, file="resumes/x/cv.pdf", skills="Python, React")
    onsite = schedule_interview(
        admin_user, "Onsite", "D", candidate=candidate_user,
        slot={"start_time": start, "end_time": end},
    )

    resp = admin_client.get(reverse("candidate_detail", args=[candidate_user.pk]))
    assert resp.status_code == 200
    assert resp.context["skills"] == ["Python", "React"]
    assert b"Onsite" in resp.content
    assert f"?candidate={candidate_user.pk}".encode() in resp.content

    assert resp.context["candidate"]["next_interview"]["interview_id"] == onsite.pk
    assert b"Next interview" in resp.content
    assert b"No upcoming interview." not in resp.content
    expected_date = timezone.localtime(start).strftime("%b %d, %Y %H:%M")
    assert expected_date.encode() in resp.content


def test_detail_page_without_upcoming_interview(admin_client, candidate_user):
    resp = admin_client.get(reverse("candidate_detail", args=[candidate_user.pk]))
    assert resp.status_code == 200
    assert b"No upcoming interview." in resp.content


def test_detail_page_unknown_candidate(admin_client, admin_user):
    resp = admin_client.get(reverse("candidate_detail", args=[999]))
    assert resp.status_code == 404
    assert b"Candidate not found" in resp.content

    # admins are not candidates
    assert admin_client.get(reverse("candidate_detail", args=[admin_user.pk])).status_code == 404


def test_status_update(admin_client, candidate_user):
    url = reverse("candidate_status_update", args=[candidate_user.pk])
    resp = admin_client.post(url, {"status": "feedback"})
    assert resp.status_code == 302
    candidate_user.profile.refresh_from_db()
    assert candidate_user.profile.status == "feedback"

    admin_client.post(url, {"status": "ghosted"})
    candidate_user.profile.refresh_from_db()
    assert candidate_user.profile.status == "feedback"


# ---------- API ----------
def test_api_list(admin_api, candidate_user):
    data = admin_api.get("/api/candidates/", {"sort": "name"}).json()
    assert data["count"] == 1
    assert data["candidates"][0]["id"] == candidate_user.pk
    assert data["candidates"][0]["email"] == "jane@example.com"


def test_api_forbidden_for_candidate(candidate_api):
    assert candidate_api.get("/api/candidates/").status_code == 403


def test_api_detail_and_patch(admin_api, candidate_user):
    url = f"/api/candidates/{candidate_user.pk}/"
    assert admin_api.get(url).json()["skills"] == []

    resp = admin_api.patch(url, {"status": "hired"}, format="json")
    assert resp.status_code == 200
    assert resp.json()["status"] == "hired"
    assert resp.json()["status_label"] == "Hired"

    assert admin_api.patch(url, {"status": "nope"}, format="json").status_code == 400
    assert admin_api.get("/api/candidates/999/").status_code == 404


def test_completed_interview_status_marks_row(admin_user, candidate_user, slot_times):
    start, end = slot_times
    interview = schedule_interview(
        admin_user, "Final", "D", candidate=candidate_user,
        slot={"start_time": start, "end_time": end},
    )
    interview.status = Interview.STATUS_COMPLETED
    interview.save()

    row = candidate_rows()[0]
    assert row["interviews"][0]["completed"] is True
    assert row["next_interview"] is None
