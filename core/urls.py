# core/urls.py
from django.contrib import admin
from django.conf import settings
from django.conf.urls.static import static
from django.urls import path, include
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

urlpatterns = [
    path('admin/', admin.site.urls),

    # API auth tokens
    path('api/auth/token/', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('api/auth/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    # API apps
    path('api/accounts/', include('accounts.api_urls')),
    path('api/resumes/', include('resumes.urls')),
    path('api/candidates/', include('candidates.api_urls')),
    path('api/questions/', include('questions.api_urls')),
    path('api/interviews/', include('interviews.api_urls')),

    # Web pages
    path('', include('frontend.urls')),
    path('', include('accounts.urls')),
    path('candidates/', include('candidates.urls')),
    path('questions/', include('questions.urls')),
    path('', include('interviews.urls')),
]

handler404 = 'frontend.views.page_not_found'

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
