# accounts/api_urls.py
from django.urls import path

from . import views

urlpatterns = [
    path("session/", views.session_api, name="session_api"),
    path("profile/", views.profile_api, name="profile_api"),

    path("token/cookie/", views.token_cookie_obtain, name="token_cookie_obtain"),
    path("token/refresh/cookie/", views.token_refresh_cookie, name="token_refresh_cookie"),
    path("token/logout/", views.token_cookie_logout, name="token_cookie_logout"),
]
