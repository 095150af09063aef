# accounts/utils.py
from functools import wraps
from urllib.parse import urlencode

from django.contrib import messages
from django.shortcuts import redirect
from django.urls import reverse
from rest_framework.exceptions import AuthenticationFailed

from .authentication import CookieJWTAuthentication
from .models import Profile


def get_profile(user):
    if not user or not getattr(user, 'is_authenticated', False):
        return None
    try:
        return user.profile
    except Profile.DoesNotExist:
        return None


def get_role(user):
    profile = get_profile(user)
    return profile.role if profile else None


def is_admin(user):
    return get_role(user) == Profile.ROLE_ADMIN


def is_candidate(user):
    return get_role(user) == Profile.ROLE_CANDIDATE


def _login_redirect(request):
    query = urlencode({'next': request.get_full_path()})
    return redirect(f"{reverse('login')}?{query}")


def _authenticate_from_cookie(request):
    try:
        auth_result = CookieJWTAuthentication().authenticate(request)
    except AuthenticationFailed:
        auth_result = None
    if auth_result:
        request.user = auth_result[0]
        return True
    return False


def role_required(role=None, message=None):
    """
    Page decorator. Accept a session user or the 'access' JWT cookie.

    Anonymous -> login page with ?next. When ``role`` is given and the
    user does not hold it -> dashboard with an error message.
    """
    def decorator(view_func):
        @wraps(view_func)
        def _wrapped(request, *args, **kwargs):
            user = getattr(request, 'user', None)
            if not (user and user.is_authenticated) and not _authenticate_from_cookie(request):
                return _login_redirect(request)

            if role and get_role(request.user) != role:
                messages.error(request, message or "You do not have access to that page")
                return redirect('dashboard')
            return view_func(request, *args, **kwargs)
        return _wrapped
    return decorator


login_required_page = role_required()

admin_required = role_required(
    Profile.ROLE_ADMIN, "Only administrators can access this page"
)
