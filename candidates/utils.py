# candidates/utils.py
from django.utils import timezone

from accounts.models import Profile
from interviews.models import Interview, InterviewParticipant

STATUS_LABELS = dict(Profile.STATUS_CHOICES)
SORT_KEYS = ('recent', 'name', 'position')


def candidate_profiles():
    return (
        Profile.objects.filter(role=Profile.ROLE_CANDIDATE)
        .select_related('user')
        .prefetch_related('user__interview_participations__interview__slots')
    )


def candidate_row(profile, now=None):
    """Flatten a candidate profile into the dict the list and detail views render."""
    now = now or timezone.now()
    interviews = []
    last_activity = profile.updated_at
    for participation in profile.user.interview_participations.all():
        if participation.role != InterviewParticipant.ROLE_CANDIDATE:
            continue
        interview = participation.interview
        last_activity = max(last_activity, participation.created_at)
        for slot in interview.slots.all():
            interviews.append({
                'interview_id': interview.id,
                'title': interview.title,
                'date': slot.start_time,
                'completed': interview.status == Interview.STATUS_COMPLETED or slot.end_time < now,
            })
    interviews.sort(key=lambda i: i['date'])

    return {
        'id': profile.user_id,
        'name': profile.display_name,
        'position': profile.position or '',
        'status': profile.status,
        'status_label': STATUS_LABELS.get(profile.status, 'Unknown'),
        'last_activity': last_activity,
        'email': profile.email or '',
        'phone': profile.phone or '',
        'avatar_url': profile.avatar_url,
        'resume_url': profile.resume_url,
        'interviews': interviews,
        'next_interview': next((i for i in interviews if not i['completed']), None),
    }


def candidate_rows(profiles=None):
    now = timezone.now()
    profiles = candidate_profiles() if profiles is None else profiles
    return [candidate_row(p, now) for p in profiles]


def _is_all(value):
    return not value or value == 'all'


def filter_candidates(candidates, query='', status='all', position='all', sort='recent'):
    """
    In-memory filter and sort over candidate rows.

    ``query`` matches name, position or email (case-insensitive substring);
    ``status``/``position`` of "all" disable that filter; ``sort`` is one
    of recent (default), name or position.
    """
    query = (query or '').strip().lower()

    def matches(c):
        if query and not (
            query in c['name'].lower()
            or query in c['position'].lower()
            or query in c['email'].lower()
        ):
            return False
        if not _is_all(status) and c['status'] != status:
            return False
        if not _is_all(position) and c['position'] != position:
            return False
        return True

    result = [c for c in candidates if matches(c)]

    if sort == 'name':
        result.sort(key=lambda c: c['name'].lower())
    elif sort == 'position':
        result.sort(key=lambda c: c['position'].lower())
    else:
        result.sort(key=lambda c: c['last_activity'], reverse=True)
    return result


def unique_positions(candidates):
    return sorted({c['position'] for c in candidates if c['position']})
