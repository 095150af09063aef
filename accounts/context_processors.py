from .utils import get_profile


def roles(request):
    """Expose the current profile and derived role flags to every template."""
    profile = get_profile(getattr(request, 'user', None))
    return {
        'profile': profile,
        'is_admin': bool(profile and profile.is_admin),
        'is_candidate': bool(profile and profile.is_candidate),
    }
