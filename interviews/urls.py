from django.urls import path

from . import views

urlpatterns = [
    path('dashboard/', views.dashboard, name='dashboard'),
    path('interviews/new/', views.schedule_interview_page, name='schedule_interview'),
    path('interviews/<int:pk>/', views.interview_detail_page, name='interview_detail'),
    path('interviews/<int:pk>/delete/', views.interview_delete, name='interview_delete'),
    path('interviews/<int:pk>/questions/<int:question_pk>/toggle/', views.toggle_question, name='interview_toggle_question'),
    path('my-interviews/', views.candidate_interviews_page, name='candidate_interviews'),
]
