from django.urls import path

from . import views

urlpatterns = [
    path('', views.interview_list_create, name='api-interviews'),
    path('mine/', views.my_interviews, name='api-my-interviews'),
    path('dashboard/', views.dashboard_api, name='api-dashboard'),
    path('<int:pk>/', views.interview_detail, name='api-interview-detail'),
    path('<int:pk>/questions/', views.interview_questions, name='api-interview-questions'),
    path('<int:pk>/questions/<int:question_pk>/', views.interview_question_remove, name='api-interview-question-remove'),
    path('<int:pk>/participants/', views.interview_participants, name='api-interview-participants'),
    path('<int:pk>/slots/', views.interview_slots, name='api-interview-slots'),
]
