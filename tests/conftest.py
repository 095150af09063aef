from datetime import timedelta

import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.test import APIClient

from accounts.models import Profile
from core.celery import app as celery_app
from questions.models import Question, QuestionCategory

User = get_user_model()

PASSWORD = "S3cure-pass-123"


@pytest.fixture(autouse=True)
def _isolated_settings(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path / "media"
    settings.EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
    settings.SESSION_COOKIE_SECURE = False
    settings.CSRF_COOKIE_SECURE = False
    celery_app.conf.task_always_eager = True
    celery_app.conf.task_eager_propagates = True


def make_user(email, role=Profile.ROLE_CANDIDATE, full_name="", **profile_fields):
    user = User.objects.create_user(username=email, email=email, password=PASSWORD)
    profile = user.profile
    profile.role = role
    profile.full_name = full_name
    for key, value in profile_fields.items():
        setattr(profile, key, value)
    profile.save()
    return user


@pytest.fixture
def admin_user(db):
    return make_user("admin@example.com", role=Profile.ROLE_ADMIN, full_name="Ada Admin")


@pytest.fixture
def candidate_user(db):
    return make_user(
        "jane@example.com",
        full_name="Jane Doe",
        position="Frontend Developer",
        phone="+1 555 0100",
    )


@pytest.fixture
def admin_client(client, admin_user):
    client.force_login(admin_user)
    return client


@pytest.fixture
def candidate_client(client, candidate_user):
    client.force_login(candidate_user)
    return client


@pytest.fixture
def admin_api(admin_user):
    api = APIClient()
    api.force_authenticate(admin_user)
    return api


@pytest.fixture
def candidate_api(candidate_user):
    api = APIClient()
    api.force_authenticate(candidate_user)
    return api


@pytest.fixture
def categories(db):
    return {
        "technical": QuestionCategory.objects.create(name="Technical"),
        "behavioral": QuestionCategory.objects.create(name="Behavioral"),
    }


@pytest.fixture
def questions(admin_user, categories):
    return [
        Question.objects.create(
            title="Explain React hooks",
            content="What problem do hooks solve?",
            category=categories["technical"],
            difficulty="medium",
            created_by=admin_user,
        ),
        Question.objects.create(
            title="Conflict resolution",
            content="Describe a disagreement with a teammate.",
            category=categories["behavioral"],
            difficulty="easy",
            created_by=admin_user,
        ),
        Question.objects.create(
            title="System design",
            content="Design a URL shortener.",
            category=None,
            difficulty=None,
            created_by=admin_user,
        ),
    ]


@pytest.fixture
def slot_times():
    start = (timezone.now() + timedelta(days=2)).replace(microsecond=0)
    return start, start + timedelta(hours=1)
