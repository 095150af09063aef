from django.urls import path

from . import views

urlpatterns = [
    path('', views.question_list_create, name='api-questions'),
    path('<int:pk>/', views.question_detail, name='api-question-detail'),
    path('categories/', views.category_list_create, name='api-categories'),
]
