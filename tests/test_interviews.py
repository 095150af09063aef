from datetime import timedelta

import pytest
from django.core import mail
from django.core.exceptions import ValidationError
from django.urls import reverse
from django.utils import timezone

from interviews.models import Interview, InterviewParticipant, InterviewQuestion, InterviewSlot
from interviews.utils import assign_question, build_dashboard, remove_question, schedule_interview

from .conftest import make_user

pytestmark = pytest.mark.django_db


def _stat(dashboard, stat_id):
    return next(s["value"] for s in dashboard["statistics"] if s["id"] == stat_id)


# ---------- scheduling ----------
def test_schedule_interview_creates_everything(admin_user, candidate_user, questions, slot_times):
    start, end = slot_times
    interview = schedule_interview(
        created_by=admin_user,
        title="Frontend Developer Interview",
        description="Frontend Developer",
        questions=[questions[0], questions[1], questions[0]],
        candidate=candidate_user,
        slot={"start_time": start, "end_time": end, "location": "Room 4", "meeting_link": None},
    )

    assert interview.status == Interview.STATUS_SCHEDULED
    assert interview.created_by == admin_user
    assert list(interview.interview_questions.values_list("question_id", flat=True)) == [
        questions[0].pk, questions[1].pk,
    ]
    assert interview.slots.get().location == "Room 4"

    participant = interview.participants.get()
    assert participant.user == candidate_user
    assert participant.role == InterviewParticipant.ROLE_CANDIDATE
    assert participant.notified_at is not None

    assert len(mail.outbox) == 1
    message = mail.outbox[0]
    assert message.to == ["jane@example.com"]
    assert message.subject == "Interview scheduled: Frontend Developer Interview"
    assert "Where: Room 4" in message.body


def test_schedule_without_questions_or_candidate(admin_user):
    interview = schedule_interview(admin_user, "Screening", "Phone screen")
    assert interview.interview_questions.count() == 0
    assert interview.participants.count() == 0
    assert mail.outbox == []


def test_schedule_is_atomic(admin_user, candidate_user, questions, slot_times):
    start, _ = slot_times
    with pytest.raises(ValidationError):
        schedule_interview(
            admin_user, "Broken", "Bad slot",
            questions=questions,
            candidate=candidate_user,
            slot={"start_time": start, "end_time": start - timedelta(minutes=5)},
        )
    assert not Interview.objects.exists()
    assert not InterviewQuestion.objects.exists()
    assert mail.outbox == []


def test_schedule_page_admin_only(candidate_client):
    resp = candidate_client.get(reverse("schedule_interview"), follow=True)
    assert resp.redirect_chain[-1][0] == reverse("dashboard")
    assert b"Only administrators can schedule interviews" in resp.content


def test_schedule_page_prefills_candidate(admin_client, candidate_user, questions):
    resp = admin_client.get(reverse("schedule_interview"), {"candidate": candidate_user.pk})
    assert resp.status_code == 200
    assert resp.context["form"].initial["candidate"] == candidate_user.pk
    assert b"Explain React hooks" in resp.content


def test_schedule_page_post(admin_client, candidate_user, questions):
    resp = admin_client.post(reverse("schedule_interview"), {
        "title": "Backend Interview",
        "description": "Backend Developer",
        "questions": [questions[0].pk, questions[2].pk],
        "candidate": candidate_user.pk,
        "start_time": "2030-01-15T10:00",
        "end_time": "2030-01-15T11:00",
        "meeting_link": "https://meet.example.com/abc",
    })
    assert resp.status_code == 302
    assert resp.url == reverse("dashboard")

    interview = Interview.objects.get(title="Backend Interview")
    assert interview.interview_questions.count() == 2
    assert interview.slots.get().meeting_link == "https://meet.example.com/abc"
    assert interview.participants.get().user == candidate_user
    assert len(mail.outbox) == 1


def test_schedule_page_missing_fields(admin_client):
    resp = admin_client.post(reverse("schedule_interview"), {"title": "", "description": "x"})
    assert resp.status_code == 400
    assert b"Please fill in all required fields." in resp.content
    assert not Interview.objects.exists()


def test_schedule_page_rejects_end_before_start(admin_client):
    resp = admin_client.post(reverse("schedule_interview"), {
        "title": "T", "description": "D",
        "start_time": "2030-01-15T10:00", "end_time": "2030-01-15T09:00",
    })
    assert resp.status_code == 400
    assert b"End time must be after start time" in resp.content


def test_schedule_page_failure_is_reported(admin_client, monkeypatch):
    def boom(**kwargs):
        raise RuntimeError("db down")

    monkeypatch.setattr("interviews.views.schedule_interview", boom)
    resp = admin_client.post(reverse("schedule_interview"), {"title": "T", "description": "D"})
    assert resp.status_code == 500
    assert b"Failed to schedule interview." in resp.content


# ---------- question assignment ----------
def test_assign_and_remove_question(admin_user, questions):
    interview = schedule_interview(admin_user, "I", "D")
    link, created = assign_question(interview, questions[0])
    assert created
    _, created_again = assign_question(interview, questions[0])
    assert not created_again
    assert interview.interview_questions.count() == 1

    assert remove_question(interview, questions[0].pk) == 1
    assert remove_question(interview, questions[0].pk) == 0


def test_toggle_question_page(admin_client, admin_user, questions):
    interview = schedule_interview(admin_user, "I", "D")
    url = reverse("interview_toggle_question", args=[interview.pk, questions[1].pk])

    admin_client.post(url)
    assert list(interview.questions.all()) == [questions[1]]
    admin_client.post(url)
    assert not interview.questions.exists()


def test_interview_detail_page_marks_assigned(admin_client, admin_user, questions):
    interview = schedule_interview(admin_user, "I", "D", questions=[questions[0]])
    resp = admin_client.get(reverse("interview_detail", args=[interview.pk]))
    assert resp.status_code == 200
    assert resp.context["assigned_ids"] == {questions[0].pk}
    assert len(resp.context["questions"]) == 3


def test_interview_detail_status_update(admin_client, admin_user):
    interview = schedule_interview(admin_user, "I", "D")
    resp = admin_client.post(
        reverse("interview_detail", args=[interview.pk]),
        {"status": Interview.STATUS_COMPLETED, "notes": "Strong candidate"},
    )
    assert resp.status_code == 302
    interview.refresh_from_db()
    assert interview.status == Interview.STATUS_COMPLETED
    assert interview.notes == "Strong candidate"


def test_delete_interview(admin_client, admin_user):
    interview = schedule_interview(admin_user, "I", "D")
    admin_client.post(reverse("interview_delete", args=[interview.pk]))
    assert not Interview.objects.exists()


# ---------- API ----------
def test_api_schedule(admin_api, candidate_user, questions, slot_times):
    start, end = slot_times
    resp = admin_api.post("/api/interviews/", {
        "title": "API Interview",
        "description": "Data Engineer",
        "question_ids": [questions[2].pk],
        "candidate_id": candidate_user.pk,
        "slot": {"start_time": start.isoformat(), "end_time": end.isoformat()},
    }, format="json")
    assert resp.status_code == 201
    data = resp.json()
    assert [q["question"]["id"] for q in data["questions"]] == [questions[2].pk]
    assert data["participants"][0]["user_id"] == candidate_user.pk
    assert data["created_by_name"] == "admin@example.com"
    assert len(data["slots"]) == 1


def test_api_schedule_rejects_admin_as_candidate(admin_api, admin_user):
    resp = admin_api.post("/api/interviews/", {
        "title": "T", "description": "D", "candidate_id": admin_user.pk,
    }, format="json")
    assert resp.status_code == 400
    assert "candidate_id" in resp.json()


def test_api_schedule_forbidden_for_candidate(candidate_api):
    resp = candidate_api.post("/api/interviews/", {"title": "T", "description": "D"}, format="json")
    assert resp.status_code == 403
    assert not Interview.objects.exists()


def test_api_list_scoped_to_participant(admin_user, candidate_user, candidate_api):
    mine = schedule_interview(admin_user, "Mine", "D", candidate=candidate_user)
    schedule_interview(admin_user, "Other", "D")
    data = candidate_api.get("/api/interviews/").json()
    assert [i["id"] for i in data] == [mine.pk]


def test_api_question_selector(admin_api, admin_user, questions):
    interview = schedule_interview(admin_user, "I", "D", questions=[questions[1]])
    url = f"/api/interviews/{interview.pk}/questions/"

    data = admin_api.get(url).json()
    assigned = {q["title"]: q["is_assigned"] for q in data}
    assert assigned == {"Conflict resolution": True, "Explain React hooks": False, "System design": False}
    assert [q["title"] for q in admin_api.get(url, {"search": "react"}).json()] == ["Explain React hooks"]

    assert admin_api.post(url, {"question_id": questions[0].pk}, format="json").status_code == 201
    dup = admin_api.post(url, {"question_id": questions[0].pk}, format="json")
    assert dup.status_code == 400
    assert admin_api.post(url, {"question_id": "abc"}, format="json").status_code == 400

    assert admin_api.delete(f"{url}{questions[0].pk}/").status_code == 204
    assert admin_api.delete(f"{url}{questions[0].pk}/").status_code == 404


def test_api_participants_notify(admin_api, admin_user, candidate_user):
    interview = schedule_interview(admin_user, "I", "D")
    url = f"/api/interviews/{interview.pk}/participants/"

    resp = admin_api.post(url, {"user_id": candidate_user.pk, "role": "candidate"}, format="json")
    assert resp.status_code == 201
    assert resp.json()["notified_at"] is not None
    assert len(mail.outbox) == 1

    again = admin_api.post(url, {"user_id": candidate_user.pk}, format="json")
    assert again.status_code == 400


def test_api_slots_validate_order(admin_api, admin_user, slot_times):
    interview = schedule_interview(admin_user, "I", "D")
    start, end = slot_times
    url = f"/api/interviews/{interview.pk}/slots/"

    bad = admin_api.post(url, {"start_time": end.isoformat(), "end_time": start.isoformat()}, format="json")
    assert bad.status_code == 400
    ok = admin_api.post(url, {"start_time": start.isoformat(), "end_time": end.isoformat()}, format="json")
    assert ok.status_code == 201
    assert InterviewSlot.objects.filter(interview=interview).count() == 1


def test_api_update_and_delete(admin_api, admin_user):
    interview = schedule_interview(admin_user, "I", "D")
    url = f"/api/interviews/{interview.pk}/"
    resp = admin_api.patch(url, {"status": "in-progress"}, format="json")
    assert resp.json()["status"] == "in-progress"
    assert admin_api.patch(url, {"status": "postponed"}, format="json").status_code == 400
    assert admin_api.delete(url).status_code == 204


def test_my_interviews_api(admin_user, candidate_user, candidate_api, admin_api, questions):
    schedule_interview(admin_user, "Mine", "D", questions=[questions[0]], candidate=candidate_user)
    data = candidate_api.get("/api/interviews/mine/").json()
    assert [i["title"] for i in data] == ["Mine"]
    assert data[0]["questions"][0]["question"]["title"] == "Explain React hooks"

    assert admin_api.get("/api/interviews/mine/").status_code == 403


# ---------- candidate page / dashboard ----------
def test_candidate_interviews_page(admin_user, candidate_user, candidate_client, questions):
    schedule_interview(admin_user, "Mine", "D", questions=[questions[0]], candidate=candidate_user)
    other = make_user("other@example.com")
    schedule_interview(admin_user, "Theirs", "D", candidate=other)

    resp = candidate_client.get(reverse("candidate_interviews"))
    assert resp.status_code == 200
    assert b"Mine" in resp.content
    assert b"Theirs" not in resp.content
    assert b"Questions to prepare" in resp.content
    assert b"What problem do hooks solve?" in resp.content
    assert b"Technical" in resp.content
    assert b"Medium" in resp.content


def test_candidate_interviews_page_rejects_admin(admin_client):
    resp = admin_client.get(reverse("candidate_interviews"), follow=True)
    assert b"This page is only for candidates" in resp.content


def test_admin_dashboard_statistics(admin_user, candidate_user, questions, slot_times):
    start, end = slot_times
    done = schedule_interview(admin_user, "Done", "D")
    done.status = Interview.STATUS_COMPLETED
    done.save()
    schedule_interview(admin_user, "Next", "D", slot={"start_time": start, "end_time": end})
    past = timezone.now() - timedelta(days=3)
    schedule_interview(admin_user, "Stale", "D", slot={"start_time": past, "end_time": past + timedelta(hours=1)})

    dashboard = build_dashboard(admin_user)
    assert _stat(dashboard, "completed") == 1
    assert _stat(dashboard, "upcoming") == 1
    assert _stat(dashboard, "candidates") == 1
    assert _stat(dashboard, "questions") == 3
    assert len(dashboard["recent_activity"]) == 3

    titles = {a["id"]: a["title"] for a in dashboard["recent_activity"]}
    assert titles[done.pk] == "Standard Interview Completed"
    upcoming = {u["title"]: u for u in dashboard["upcoming_interviews"]}
    assert upcoming["Next"]["date"] == start
    assert upcoming["Next"]["interviewer"] == "admin@example.com"


def test_candidate_dashboard_only_counts_own(admin_user, candidate_user, questions):
    schedule_interview(admin_user, "Mine", "D", questions=questions[:2], candidate=candidate_user)
    schedule_interview(admin_user, "Other", "D", questions=questions)

    dashboard = build_dashboard(candidate_user)
    assert [u["title"] for u in dashboard["upcoming_interviews"]] == ["Mine"]
    assert _stat(dashboard, "questions") == 2
    assert "candidates" not in {s["id"] for s in dashboard["statistics"]}


def test_dashboard_page_and_api(admin_client, admin_user):
    schedule_interview(admin_user, "Visible", "Some role")
    resp = admin_client.get(reverse("dashboard"))
    assert resp.status_code == 200
    assert b"Visible" in resp.content
    assert b"Questions in Bank" in resp.content


def test_dashboard_api(candidate_api):
    data = candidate_api.get("/api/interviews/dashboard/").json()
    assert {"statistics", "recent_activity", "upcoming_interviews"} <= set(data)
