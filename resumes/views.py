from django.contrib import messages
from django.shortcuts import redirect
from django.views.decorators.http import require_POST
from rest_framework import status
from rest_framework.decorators import api_view, parser_classes, permission_classes
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts.utils import login_required_page
from .forms import ResumeForm
from .serializers import ResumeUploadSerializer
from .utils import save_resume


# Resume upload (API)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
@parser_classes([MultiPartParser, FormParser])
def upload_resume(request):
    serializer = ResumeUploadSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    resume, public_url = save_resume(request.user, serializer.validated_data['file'], request=request)
    out = ResumeUploadSerializer(resume, context={'request': request}).data
    out['resume_url'] = public_url
    return Response(out, status=status.HTTP_201_CREATED)


# Resume upload (settings page form)
@login_required_page
@require_POST
def upload_resume_page(request):
    form = ResumeForm(request.POST, request.FILES)
    if not form.is_valid():
        messages.error(request, form.errors['file'][0])
        return redirect('settings')
    save_resume(request.user, form.cleaned_data['file'], request=request)
    messages.success(request, "Resume uploaded successfully")
    return redirect('settings')
