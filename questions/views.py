# questions/views.py
import logging

from django.contrib import messages
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts.models import Profile
from accounts.permissions import IsAdmin
from accounts.utils import role_required
from .forms import CategoryForm, QuestionForm
from .models import Question, QuestionCategory
from .serializers import CategorySerializer, QuestionSerializer
from .utils import search_questions

logger = logging.getLogger(__name__)

bank_admin_required = role_required(
    Profile.ROLE_ADMIN, "Only administrators can access the question bank"
)


def _questions_with_categories():
    return Question.objects.select_related('category').order_by('-created_at')


# ----------------- Pages -----------------
@bank_admin_required
def question_bank(request):
    search = request.GET.get('q', '')
    questions = search_questions(_questions_with_categories(), search)
    return render(request, 'questions/question_bank.html', {
        'questions': questions,
        'search': search,
        'category_form': CategoryForm(),
    })


@bank_admin_required
def question_create(request):
    form = QuestionForm(request.POST or None)
    if request.method == 'POST':
        if form.is_valid():
            question = form.save(commit=False)
            question.created_by = request.user
            question.save()
            messages.success(request, "Question created successfully")
            return redirect('question_bank')
        messages.error(request, "Failed to save question")
    return render(request, 'questions/question_form.html', {'form': form, 'question': None})


@bank_admin_required
def question_edit(request, pk):
    question = get_object_or_404(Question, pk=pk)
    form = QuestionForm(request.POST or None, instance=question)
    if request.method == 'POST':
        if form.is_valid():
            form.save()
            messages.success(request, "Question updated successfully")
            return redirect('question_bank')
        messages.error(request, "Failed to save question")
    return render(request, 'questions/question_form.html', {'form': form, 'question': question})


@bank_admin_required
@require_POST
def question_delete(request, pk):
    question = get_object_or_404(Question, pk=pk)
    question.delete()
    messages.success(request, "Question deleted successfully")
    return redirect('question_bank')


@bank_admin_required
@require_POST
def category_create(request):
    form = CategoryForm(request.POST)
    if form.is_valid():
        form.save()
        messages.success(request, "Category created successfully")
    else:
        messages.error(request, "Failed to create category")
    return redirect('question_bank')


# ----------------- API -----------------
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsAdmin])
def question_list_create(request):
    if request.method == 'GET':
        qs = search_questions(_questions_with_categories(), request.GET.get('search'))
        return Response(QuestionSerializer(qs, many=True).data)

    serializer = QuestionSerializer(data=request.data, context={'request': request})
    serializer.is_valid(raise_exception=True)
    question = serializer.save()
    logger.info("Question %s created by %s", question.pk, request.user.pk)
    return Response(QuestionSerializer(question).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, IsAdmin])
def question_detail(request, pk):
    question = get_object_or_404(Question.objects.select_related('category'), pk=pk)

    if request.method == 'GET':
        return Response(QuestionSerializer(question).data)

    if request.method in ('PUT', 'PATCH'):
        partial = (request.method == 'PATCH')
        serializer = QuestionSerializer(question, data=request.data, partial=partial, context={'request': request})
        serializer.is_valid(raise_exception=True)
        question = serializer.save()
        return Response(QuestionSerializer(question).data)

    question.delete()
    return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsAdmin])
def category_list_create(request):
    if request.method == 'GET':
        qs = QuestionCategory.objects.order_by('name')
        return Response(CategorySerializer(qs, many=True).data)

    serializer = CategorySerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    serializer.save()
    return Response(serializer.data, status=status.HTTP_201_CREATED)
