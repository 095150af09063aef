from django.urls import path

from . import views

urlpatterns = [
    path('', views.question_bank, name='question_bank'),
    path('new/', views.question_create, name='question_create'),
    path('<int:pk>/edit/', views.question_edit, name='question_edit'),
    path('<int:pk>/delete/', views.question_delete, name='question_delete'),
    path('categories/new/', views.category_create, name='category_create'),
]
