# interviews/tasks.py
import logging

from celery import shared_task
from django.conf import settings
from django.core.mail import send_mail
from django.utils import timezone

from .models import InterviewParticipant

logger = logging.getLogger(__name__)


@shared_task
def send_interview_notification(participant_id):
    """E-mail a participant that they were added to an interview."""
    participant = (
        InterviewParticipant.objects
        .select_related('interview', 'user')
        .get(pk=participant_id)
    )
    interview = participant.interview
    user = participant.user
    if not user.email:
        logger.info("Participant %s has no email; skipping notification", participant_id)
        return False

    slot = interview.slots.order_by('start_time').first()
    when = timezone.localtime(slot.start_time).strftime('%b %d, %Y %I:%M %p') if slot else 'to be confirmed'
    name = getattr(getattr(user, 'profile', None), 'display_name', None) or user.username

    subject = f"Interview scheduled: {interview.title}"
    lines = [
        f"Hi {name},",
        "",
        "You have been scheduled for an interview.",
        "",
        f"Interview: {interview.title}",
        f"When: {when}",
    ]
    if slot and slot.location:
        lines.append(f"Where: {slot.location}")
    if slot and slot.meeting_link:
        lines.append(f"Meeting link: {slot.meeting_link}")
    lines += ["", f"Open your interviews: {settings.SITE_URL}/my-interviews/"]

    send_mail(subject, "\n".join(lines), settings.DEFAULT_FROM_EMAIL, [user.email])

    participant.notified_at = timezone.now()
    participant.save(update_fields=['notified_at'])
    return True
