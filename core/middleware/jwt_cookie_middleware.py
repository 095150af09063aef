# core/middleware/jwt_cookie_middleware.py

class JWTFromCookieMiddleware:
    """
    For API endpoints, copy 'access' cookie into HTTP_AUTHORIZATION header
    so DRF JWTAuthentication reads it as Bearer <token>.
    """
    api_prefixes = ("/api/",)

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        path = request.path or ""
        if path.startswith(self.api_prefixes) and not request.META.get("HTTP_AUTHORIZATION"):
            access = request.COOKIES.get("access")
            if access:
                request.META["HTTP_AUTHORIZATION"] = f"Bearer {access}"
        return self.get_response(request)
