# interviews/utils.py
import logging

from django.db import transaction
from django.db.models import Prefetch
from django.utils import timezone
from django.utils.timesince import timesince

from accounts.models import Profile
from accounts.utils import is_admin
from questions.models import Question
from questions.utils import search_questions
from .models import Interview, InterviewParticipant, InterviewQuestion, InterviewSlot
from .tasks import send_interview_notification

logger = logging.getLogger(__name__)

RECENT_LIMIT = 5


def assigned_questions_prefetch():
    return Prefetch(
        'interview_questions',
        queryset=InterviewQuestion.objects.select_related('question__category').order_by('id'),
    )


def with_details(qs):
    return qs.select_related('created_by').prefetch_related(
        'slots', 'participants__user__profile', assigned_questions_prefetch()
    )


def interviews_for_user(user):
    """Admins see every interview; anyone else only those they take part in."""
    if is_admin(user):
        return Interview.objects.all()
    return Interview.objects.filter(participants__user=user).distinct()


def candidate_interviews(user):
    qs = Interview.objects.filter(
        participants__user=user,
        participants__role=InterviewParticipant.ROLE_CANDIDATE,
    ).distinct()
    return with_details(qs).order_by('-created_at')


# ----------------- Participants / questions -----------------
def notify_participant(participant):
    try:
        send_interview_notification.delay(participant.id)
    except Exception:
        logger.exception("Failed to send notification for participant %s (continuing)", participant.id)


def add_participant(interview, user, role=InterviewParticipant.ROLE_CANDIDATE):
    participant, created = InterviewParticipant.objects.get_or_create(
        interview=interview, user=user, defaults={'role': role}
    )
    return participant, created


def assign_question(interview, question):
    """Returns ``(link, created)``; ``created`` is False when already assigned."""
    return InterviewQuestion.objects.get_or_create(interview=interview, question=question)


def remove_question(interview, question_id):
    """Returns the number of removed links (0 when it was not assigned)."""
    deleted, _ = InterviewQuestion.objects.filter(interview=interview, question_id=question_id).delete()
    return deleted


def selector_questions(interview, search=None):
    """All bank questions ordered by title, with the ids assigned to ``interview``."""
    questions = search_questions(Question.objects.select_related('category').order_by('title'), search)
    assigned_ids = set(interview.interview_questions.values_list('question_id', flat=True))
    return questions, assigned_ids


# ----------------- Scheduling wizard -----------------
def schedule_interview(created_by, title, description, questions=(), candidate=None, slot=None):
    """
    Create the interview, attach the selected questions, then the optional
    candidate participant and slot. Runs in one transaction; the candidate
    is notified after it commits.
    """
    with transaction.atomic():
        interview = Interview.objects.create(
            title=title,
            description=description,
            status=Interview.STATUS_SCHEDULED,
            created_by=created_by,
        )

        InterviewQuestion.objects.bulk_create([
            InterviewQuestion(interview=interview, question=q)
            for q in dict.fromkeys(questions)
        ])

        if slot:
            slot_obj = InterviewSlot(interview=interview, **slot)
            slot_obj.full_clean()
            slot_obj.save()

        participant = None
        if candidate is not None:
            participant, _ = add_participant(interview, candidate)

    logger.info(
        "Interview %s scheduled by %s with %d question(s)",
        interview.id, getattr(created_by, 'id', None), interview.interview_questions.count(),
    )
    if participant is not None:
        notify_participant(participant)
    return interview


# ----------------- Dashboard -----------------
def _when(interview):
    slot = interview.first_slot
    return slot.start_time if slot else interview.created_at


def _activity_time(when, now):
    if when > now:
        return f"Upcoming on {timezone.localtime(when):%b %d, %Y}"
    return f"{timesince(when, now).split(',')[0]} ago"


def build_dashboard(user):
    now = timezone.now()
    qs = interviews_for_user(user)
    recent = list(
        qs.select_related('created_by').prefetch_related('slots').order_by('-created_at')[:RECENT_LIMIT]
    )

    activities = []
    upcoming = []
    for interview in recent:
        completed = interview.status == Interview.STATUS_COMPLETED
        when = _when(interview)
        activities.append({
            'id': interview.id,
            'type': 'interview',
            'title': f"Standard Interview {'Completed' if completed else 'Scheduled'}",
            'time': _activity_time(when, now),
            'status': 'completed' if completed else 'upcoming',
        })
        upcoming.append({
            'id': interview.id,
            'title': interview.title,
            'position': interview.description or 'Not specified',
            'date': when,
            'type': 'Standard',
            'interviewer': interview.created_by.username if interview.created_by_id else 'Assigned Interviewer',
            'status': interview.status,
        })

    upcoming_count = (
        qs.filter(status=Interview.STATUS_SCHEDULED)
        .exclude(slots__start_time__lt=now)
        .distinct()
        .count()
    )
    statistics = [
        {'id': 'completed', 'title': 'Completed Interviews',
         'value': qs.filter(status=Interview.STATUS_COMPLETED).count()},
        {'id': 'upcoming', 'title': 'Upcoming Interviews', 'value': upcoming_count},
    ]
    if is_admin(user):
        statistics += [
            {'id': 'candidates', 'title': 'Candidates',
             'value': Profile.objects.filter(role=Profile.ROLE_CANDIDATE).count()},
            {'id': 'questions', 'title': 'Questions in Bank', 'value': Question.objects.count()},
        ]
    else:
        statistics.append({
            'id': 'questions', 'title': 'Questions to Prepare',
            'value': InterviewQuestion.objects.filter(interview__in=qs).count(),
        })

    return {
        'statistics': statistics,
        'recent_activity': activities,
        'upcoming_interviews': upcoming,
    }
