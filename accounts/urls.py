# accounts/urls.py
from django.urls import path

from resumes import views as resume_views
from . import views

urlpatterns = [
    path("login/", views.login_view, name="login"),
    path("register/", views.register_view, name="register"),
    path("logout/", views.logout_view, name="logout"),
    path("settings/", views.settings_view, name="settings"),
    path("settings/resume/", resume_views.upload_resume_page, name="settings_resume"),
]
