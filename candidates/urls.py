from django.urls import path

from . import views

urlpatterns = [
    path('', views.candidate_list, name='candidate_list'),
    path('<int:pk>/', views.candidate_detail, name='candidate_detail'),
    path('<int:pk>/status/', views.candidate_status_update, name='candidate_status_update'),
]
