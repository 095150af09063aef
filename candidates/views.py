# candidates/views.py
import logging

from django.contrib import messages
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts.models import Profile
from accounts.permissions import IsAdmin
from accounts.utils import admin_required
from interviews.utils import candidate_interviews
from .forms import CandidateStatusForm
from .serializers import CandidateStatusSerializer
from .utils import candidate_profiles, candidate_row, candidate_rows, filter_candidates, unique_positions

logger = logging.getLogger(__name__)


def _filters(params):
    return {
        'query': params.get('q', ''),
        'status': params.get('status', 'all'),
        'position': params.get('position', 'all'),
        'sort': params.get('sort', 'recent'),
    }


def _candidate_or_none(pk):
    return candidate_profiles().filter(user_id=pk).first()


def _detail_context(profile):
    latest_resume = profile.user.resumes.order_by('-uploaded_at').first()
    return {
        'candidate': candidate_row(profile),
        'profile_obj': profile,
        'skills': latest_resume.skill_list if latest_resume else [],
        'latest_resume': latest_resume,
        'interviews': candidate_interviews(profile.user),
    }


# ----------------- Pages -----------------
@admin_required
def candidate_list(request):
    filters = _filters(request.GET)
    rows = candidate_rows()
    return render(request, 'candidates/candidate_list.html', {
        'candidates': filter_candidates(rows, **filters),
        'positions': unique_positions(rows),
        'status_choices': Profile.STATUS_CHOICES,
        'filters': filters,
    })


@admin_required
def candidate_detail(request, pk):
    profile = _candidate_or_none(pk)
    if profile is None:
        return render(request, 'candidates/candidate_not_found.html', status=404)

    context = _detail_context(profile)
    context['status_form'] = CandidateStatusForm(initial={'status': profile.status})
    return render(request, 'candidates/candidate_detail.html', context)


@admin_required
@require_POST
def candidate_status_update(request, pk):
    profile = _candidate_or_none(pk)
    if profile is None:
        return render(request, 'candidates/candidate_not_found.html', status=404)

    form = CandidateStatusForm(request.POST)
    if form.is_valid():
        profile.status = form.cleaned_data['status']
        profile.save(update_fields=['status', 'updated_at'])
        logger.info("Candidate %s moved to %s by %s", pk, profile.status, request.user.pk)
        messages.success(request, f"Candidate marked as {profile.get_status_display()}")
    else:
        messages.error(request, "Invalid status")
    return redirect('candidate_detail', pk=pk)


# ----------------- API -----------------
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdmin])
def candidate_list_api(request):
    rows = filter_candidates(candidate_rows(), **_filters(request.GET))
    return Response({'count': len(rows), 'candidates': rows})


@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated, IsAdmin])
def candidate_detail_api(request, pk):
    profile = _candidate_or_none(pk)
    if profile is None:
        return Response({"detail": "Candidate not found"}, status=status.HTTP_404_NOT_FOUND)

    if request.method == 'PATCH':
        serializer = CandidateStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        profile.status = serializer.validated_data['status']
        profile.save(update_fields=['status', 'updated_at'])
        profile = _candidate_or_none(pk)

    context = _detail_context(profile)
    data = context['candidate']
    data['skills'] = context['skills']
    return Response(data)
