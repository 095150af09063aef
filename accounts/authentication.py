# accounts/authentication.py
from rest_framework_simplejwt.authentication import JWTAuthentication

ACCESS_COOKIE = "access"
REFRESH_COOKIE = "refresh"


class CookieJWTAuthentication(JWTAuthentication):
    """Bearer header when present, otherwise the HttpOnly access cookie."""

    def authenticate(self, request):
        if self.get_header(request):
            return super().authenticate(request)

        raw_token = request.COOKIES.get(ACCESS_COOKIE)
        if not raw_token:
            return None
        validated_token = self.get_validated_token(raw_token)
        return self.get_user(validated_token), validated_token
