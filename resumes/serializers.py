from django.conf import settings
from rest_framework import serializers

from .models import Resume
from .utils import is_allowed_resume, max_upload_bytes


class ResumeUploadSerializer(serializers.ModelSerializer):
    class Meta:
        model = Resume
        fields = ['id', 'file', 'skills', 'uploaded_at']
        read_only_fields = ['skills', 'uploaded_at']

    def validate_file(self, value):
        if not is_allowed_resume(value):
            raise serializers.ValidationError("Please upload a PDF or Word document")
        if value.size > max_upload_bytes():
            raise serializers.ValidationError(
                f"File size should be less than {settings.RESUME_MAX_UPLOAD_MB}MB"
            )
        return value
