# accounts/views.py
import json
import logging

from django.contrib import messages
from django.contrib.auth import authenticate, get_user_model, login, logout
from django.http import JsonResponse
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework_simplejwt.tokens import RefreshToken

from resumes.forms import ResumeForm

from .authentication import ACCESS_COOKIE, REFRESH_COOKIE
from .forms import LoginForm, ProfileSettingsForm, RegisterForm
from .serializers import ProfileSerializer, ProfileUpdateSerializer
from .utils import get_profile, is_admin, is_candidate, login_required_page

User = get_user_model()

logger = logging.getLogger(__name__)


def _first_error(form):
    for errors in form.errors.values():
        if errors:
            return errors[0]
    return "Please check the form and try again."


def _safe_next(request):
    next_url = request.POST.get("next") or request.GET.get("next")
    if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
        return next_url
    return None


# ---------- AUTH PAGES ----------

def login_view(request):
    if request.user.is_authenticated:
        return redirect("dashboard")

    form = LoginForm(request.POST or None)
    if request.method == "POST":
        if not form.is_valid():
            messages.error(request, _first_error(form))
            return render(request, "accounts/login.html", {"form": form}, status=400)

        email = form.cleaned_data["email"].strip()
        account = User.objects.filter(email__iexact=email).first()
        user = None
        if account is not None:
            user = authenticate(request, username=account.username, password=form.cleaned_data["password"])

        if user is None:
            logger.info("Failed login attempt for %s", email)
            messages.error(request, "Invalid email or password. Please try again.")
            return render(request, "accounts/login.html", {"form": form}, status=400)

        login(request, user)
        messages.success(request, "Login successful!")
        return redirect(_safe_next(request) or "dashboard")

    return render(request, "accounts/login.html", {"form": form})


def register_view(request):
    # registration is for candidates only
    if request.user.is_authenticated:
        return redirect("dashboard")

    form = RegisterForm(request.POST or None)
    if request.method == "POST":
        if not form.is_valid():
            messages.error(request, _first_error(form))
            return render(request, "accounts/register.html", {"form": form}, status=400)

        user = form.save()
        login(request, user, backend="django.contrib.auth.backends.ModelBackend")
        logger.info("Registered candidate %s", user.pk)
        messages.success(request, "Registration successful!")
        return redirect("dashboard")

    return render(request, "accounts/register.html", {"form": form})


@require_POST
def logout_view(request):
    logout(request)
    response = redirect("login")
    response.delete_cookie(ACCESS_COOKIE, path="/")
    response.delete_cookie(REFRESH_COOKIE, path="/")
    messages.success(request, "Logged out successfully")
    return response


@login_required_page
def settings_view(request):
    profile = get_profile(request.user)
    form = ProfileSettingsForm(request.POST or None, instance=profile)
    if request.method == "POST":
        if form.is_valid():
            form.save()
            messages.success(request, "Profile updated successfully")
            return redirect("settings")
        messages.error(request, "Failed to update profile")

    return render(request, "accounts/settings.html", {
        "form": form,
        "resume_form": ResumeForm(),
        "latest_resume": request.user.resumes.order_by("-uploaded_at").first(),
    })


# ---------- COOKIE AUTH HELPERS ----------
def _cookie_kwargs(request):
    return {
        "httponly": True,
        "samesite": "Lax",
        "secure": request.is_secure(),
        "path": "/",
    }


@csrf_exempt
@require_POST
def token_cookie_obtain(request):
    """
    Login: POST {"email": "", "password": ""}
    -> sets HttpOnly 'access' + 'refresh' cookies.
    """
    try:
        data = json.loads(request.body.decode("utf-8"))
    except (ValueError, UnicodeDecodeError):
        return JsonResponse({"detail": "Invalid JSON"}, status=400)
    if not isinstance(data, dict):
        return JsonResponse({"detail": "Invalid JSON"}, status=400)

    username = data.get("username") or data.get("email") or ""
    account = User.objects.filter(email__iexact=username).first()
    if account is not None:
        username = account.username

    serializer = TokenObtainPairSerializer(data={"username": username, "password": data.get("password", "")})
    if not serializer.is_valid():
        return JsonResponse({"detail": "Invalid credentials"}, status=401)

    tokens = serializer.validated_data
    resp = JsonResponse({"ok": True})
    ck = _cookie_kwargs(request)
    resp.set_cookie(ACCESS_COOKIE, tokens["access"], **ck)
    resp.set_cookie(REFRESH_COOKIE, tokens["refresh"], **ck)
    return resp


@csrf_exempt
@require_POST
def token_refresh_cookie(request):
    refresh = request.COOKIES.get(REFRESH_COOKIE)
    if not refresh:
        return JsonResponse({"detail": "Refresh token missing"}, status=400)

    try:
        new_access = str(RefreshToken(refresh).access_token)
    except Exception:
        logger.warning("Rejected refresh token")
        return JsonResponse({"detail": "Invalid refresh"}, status=401)

    resp = JsonResponse({"ok": True})
    resp.set_cookie(ACCESS_COOKIE, new_access, **_cookie_kwargs(request))
    return resp


@csrf_exempt
@require_POST
def token_cookie_logout(request):
    resp = JsonResponse({"ok": True})
    resp.delete_cookie(ACCESS_COOKIE, path="/")
    resp.delete_cookie(REFRESH_COOKIE, path="/")
    return resp


# ---------- DRF APIs ----------
@api_view(["GET"])
@permission_classes([AllowAny])
def session_api(request):
    """Current auth state: user, profile and the two derived role flags."""
    user = request.user
    if not user or not user.is_authenticated:
        return Response({
            "is_authenticated": False,
            "user": None,
            "profile": None,
            "is_admin": False,
            "is_candidate": False,
        })

    profile = get_profile(user)
    return Response({
        "is_authenticated": True,
        "user": {"id": user.id, "username": user.username, "email": user.email},
        "profile": ProfileSerializer(profile).data if profile else None,
        "is_admin": is_admin(user),
        "is_candidate": is_candidate(user),
    })


@api_view(["GET", "PATCH"])
@permission_classes([IsAuthenticated])
def profile_api(request):
    profile = get_profile(request.user)
    if profile is None:
        return Response({"detail": "Profile not found"}, status=status.HTTP_404_NOT_FOUND)

    if request.method == "GET":
        return Response(ProfileSerializer(profile).data)

    serializer = ProfileUpdateSerializer(profile, data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)
    serializer.save()
    profile.refresh_from_db()
    return Response(ProfileSerializer(profile).data)
