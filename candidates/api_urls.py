from django.urls import path

from . import views

urlpatterns = [
    path('', views.candidate_list_api, name='api-candidates'),
    path('<int:pk>/', views.candidate_detail_api, name='api-candidate-detail'),
]
