from django import template

from accounts.models import Profile
from questions.utils import format_difficulty as _format_difficulty

register = template.Library()

STATUS_COLORS = {
    'new': 'blue',
    'interviewed': 'purple',
    'feedback': 'amber',
    'decision': 'orange',
    'hired': 'green',
    'rejected': 'red',
    'scheduled': 'blue',
    'in-progress': 'amber',
    'completed': 'green',
    'cancelled': 'gray',
}


@register.filter
def initials(name):
    """'Mary Ann Smith' -> 'MS': first letters of the first and last word."""
    parts = str(name or '').split()
    if not parts:
        return ''
    if len(parts) == 1:
        return parts[0][0].upper()
    return (parts[0][0] + parts[-1][0]).upper()


@register.filter
def truncate_text(value, length=100):
    value = str(value or '')
    try:
        length = int(length)
    except (TypeError, ValueError):
        length = 100
    if len(value) <= length:
        return value
    return value[:length].rstrip() + '...'


@register.filter
def format_difficulty(value):
    return _format_difficulty(value)


@register.filter
def status_label(value):
    return dict(Profile.STATUS_CHOICES).get(value, str(value or '').replace('-', ' ').capitalize())


@register.filter
def status_color(value):
    return STATUS_COLORS.get(value, 'gray')
