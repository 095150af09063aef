import os
import time

from django.conf import settings
from django.db import models


def resume_upload_path(instance, filename):
    ext = os.path.splitext(filename)[1].lstrip('.').lower() or 'bin'
    return f"resumes/{instance.user_id}/{int(time.time() * 1000)}.{ext}"


class Resume(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='resumes')
    file = models.FileField(upload_to=resume_upload_path)
    skills = models.TextField(blank=True)
    uploaded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-uploaded_at']

    def __str__(self):
        return f"{self.user.username} Resume"

    @property
    def skill_list(self):
        return [s.strip() for s in (self.skills or '').split(',') if s.strip()]
