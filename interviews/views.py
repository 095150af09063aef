# interviews/views.py
import logging

from django.contrib import messages
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts.models import Profile
from accounts.permissions import IsAdmin, IsCandidate
from accounts.utils import is_admin, login_required_page, role_required
from questions.models import Question
from .forms import InterviewStatusForm, ScheduleInterviewForm
from .models import Interview, InterviewParticipant
from .serializers import (
    InterviewParticipantSerializer,
    InterviewSerializer,
    InterviewSlotSerializer,
    InterviewUpdateSerializer,
    ScheduleInterviewSerializer,
    SelectorQuestionSerializer,
)
from .utils import (
    add_participant,
    assign_question,
    build_dashboard,
    candidate_interviews,
    interviews_for_user,
    notify_participant,
    remove_question,
    schedule_interview,
    selector_questions,
    with_details,
)

logger = logging.getLogger(__name__)

scheduler_required = role_required(
    Profile.ROLE_ADMIN, "Only administrators can schedule interviews"
)
candidate_required = role_required(
    Profile.ROLE_CANDIDATE, "This page is only for candidates"
)


# ----------------- Pages -----------------
@login_required_page
def dashboard(request):
    context = build_dashboard(request.user)
    return render(request, "interviews/dashboard.html", context)


@scheduler_required
def schedule_interview_page(request):
    initial = {}
    candidate_id = request.GET.get("candidate")
    if candidate_id and candidate_id.isdigit():
        initial["candidate"] = int(candidate_id)

    form = ScheduleInterviewForm(request.POST or None, initial=initial)
    if request.method == "POST":
        if not form.is_valid():
            messages.error(request, form.non_field_errors()[0] if form.non_field_errors() else "Failed to schedule interview.")
            return render(request, "interviews/schedule.html", {"form": form}, status=400)

        data = form.cleaned_data
        try:
            schedule_interview(
                created_by=request.user,
                title=data["title"].strip(),
                description=data["description"].strip(),
                questions=list(data["questions"]),
                candidate=data.get("candidate"),
                slot=form.slot_data(),
            )
        except Exception:
            logger.exception("Scheduling interview failed")
            messages.error(request, "Failed to schedule interview.")
            return render(request, "interviews/schedule.html", {"form": form}, status=500)

        messages.success(request, "Interview scheduled successfully!")
        return redirect("dashboard")

    return render(request, "interviews/schedule.html", {"form": form})


@scheduler_required
def interview_detail_page(request, pk):
    interview = get_object_or_404(with_details(Interview.objects.all()), pk=pk)
    form = InterviewStatusForm(request.POST or None, instance=interview)
    if request.method == "POST":
        if form.is_valid():
            form.save()
            messages.success(request, "Interview updated")
            return redirect("interview_detail", pk=interview.pk)
        messages.error(request, "Failed to update interview")

    search = request.GET.get("q", "")
    questions, assigned_ids = selector_questions(interview, search)
    return render(request, "interviews/interview_detail.html", {
        "interview": interview,
        "form": form,
        "questions": questions,
        "assigned_ids": assigned_ids,
        "search": search,
    })


@scheduler_required
@require_POST
def toggle_question(request, pk, question_pk):
    interview = get_object_or_404(Interview, pk=pk)
    question = get_object_or_404(Question, pk=question_pk)

    if remove_question(interview, question.pk):
        messages.success(request, "Question removed from interview")
    else:
        assign_question(interview, question)
        messages.success(request, "Question added to interview")
    return redirect("interview_detail", pk=interview.pk)


@scheduler_required
@require_POST
def interview_delete(request, pk):
    interview = get_object_or_404(Interview, pk=pk)
    interview.delete()
    messages.success(request, "Interview deleted")
    return redirect("dashboard")


@candidate_required
def candidate_interviews_page(request):
    return render(request, "interviews/candidate_interviews.html", {
        "interviews": candidate_interviews(request.user),
    })


# ----------------- API: interviews -----------------
@api_view(["GET", "POST"])
@permission_classes([IsAuthenticated])
def interview_list_create(request):
    if request.method == "GET":
        qs = with_details(interviews_for_user(request.user)).order_by("-created_at")
        return Response(InterviewSerializer(qs, many=True).data)

    if not is_admin(request.user):
        return Response({"detail": "Forbidden"}, status=status.HTTP_403_FORBIDDEN)

    serializer = ScheduleInterviewSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data
    interview = schedule_interview(
        created_by=request.user,
        title=data["title"],
        description=data["description"],
        questions=data.get("question_ids", []),
        candidate=data.get("candidate_id"),
        slot=data.get("slot"),
    )
    interview = with_details(Interview.objects.all()).get(pk=interview.pk)
    return Response(InterviewSerializer(interview).data, status=status.HTTP_201_CREATED)


@api_view(["GET", "PUT", "PATCH", "DELETE"])
@permission_classes([IsAuthenticated, IsAdmin])
def interview_detail(request, pk):
    interview = get_object_or_404(with_details(Interview.objects.all()), pk=pk)

    if request.method == "GET":
        return Response(InterviewSerializer(interview).data)

    if request.method in ("PUT", "PATCH"):
        partial = (request.method == "PATCH")
        serializer = InterviewUpdateSerializer(interview, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        interview = with_details(Interview.objects.all()).get(pk=pk)
        return Response(InterviewSerializer(interview).data)

    interview.delete()
    return Response(status=status.HTTP_204_NO_CONTENT)


# ----------------- API: question selector -----------------
@api_view(["GET", "POST"])
@permission_classes([IsAuthenticated, IsAdmin])
def interview_questions(request, pk):
    interview = get_object_or_404(Interview, pk=pk)

    if request.method == "GET":
        questions, assigned_ids = selector_questions(interview, request.GET.get("search"))
        serializer = SelectorQuestionSerializer(questions, many=True, context={"assigned_ids": assigned_ids})
        return Response(serializer.data)

    try:
        question_id = int(request.data.get("question_id"))
    except (TypeError, ValueError):
        return Response({"question_id": ["A valid question id is required."]}, status=status.HTTP_400_BAD_REQUEST)

    question = get_object_or_404(Question, pk=question_id)
    link, created = assign_question(interview, question)
    if not created:
        return Response({"detail": "Question already assigned to this interview"}, status=status.HTTP_400_BAD_REQUEST)
    return Response({"id": link.id, "interview": interview.id, "question": question.id}, status=status.HTTP_201_CREATED)


@api_view(["DELETE"])
@permission_classes([IsAuthenticated, IsAdmin])
def interview_question_remove(request, pk, question_pk):
    interview = get_object_or_404(Interview, pk=pk)
    if not remove_question(interview, question_pk):
        return Response({"detail": "Question is not assigned to this interview"}, status=status.HTTP_404_NOT_FOUND)
    return Response(status=status.HTTP_204_NO_CONTENT)


# ----------------- API: participants / slots -----------------
@api_view(["GET", "POST"])
@permission_classes([IsAuthenticated, IsAdmin])
def interview_participants(request, pk):
    interview = get_object_or_404(Interview, pk=pk)

    if request.method == "GET":
        qs = interview.participants.select_related("user__profile")
        return Response(InterviewParticipantSerializer(qs, many=True).data)

    serializer = InterviewParticipantSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    participant, created = add_participant(
        interview,
        serializer.validated_data["user"],
        serializer.validated_data.get("role", InterviewParticipant.ROLE_CANDIDATE),
    )
    if not created:
        return Response({"detail": "User already participates in this interview"}, status=status.HTTP_400_BAD_REQUEST)
    if participant.role == InterviewParticipant.ROLE_CANDIDATE:
        notify_participant(participant)
        participant.refresh_from_db()
    return Response(InterviewParticipantSerializer(participant).data, status=status.HTTP_201_CREATED)


@api_view(["GET", "POST"])
@permission_classes([IsAuthenticated, IsAdmin])
def interview_slots(request, pk):
    interview = get_object_or_404(Interview, pk=pk)

    if request.method == "GET":
        return Response(InterviewSlotSerializer(interview.slots.all(), many=True).data)

    serializer = InterviewSlotSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    serializer.save(interview=interview)
    return Response(serializer.data, status=status.HTTP_201_CREATED)


# ----------------- API: candidate / dashboard -----------------
@api_view(["GET"])
@permission_classes([IsAuthenticated, IsCandidate])
def my_interviews(request):
    return Response(InterviewSerializer(candidate_interviews(request.user), many=True).data)


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def dashboard_api(request):
    return Response(build_dashboard(request.user))
