from django.db import models
from django.conf import settings


class Profile(models.Model):
    ROLE_ADMIN = 'admin'
    ROLE_CANDIDATE = 'candidate'
    ROLE_CHOICES = (
        (ROLE_ADMIN, 'Admin'),
        (ROLE_CANDIDATE, 'Candidate'),
    )

    # candidate pipeline
    STATUS_CHOICES = (
        ('new', 'New'),
        ('interviewed', 'Interviewed'),
        ('feedback', 'Feedback Pending'),
        ('decision', 'Decision Pending'),
        ('hired', 'Hired'),
        ('rejected', 'Rejected'),
    )

    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='profile')
    full_name = models.CharField(max_length=255, blank=True)
    avatar_url = models.URLField(blank=True, null=True)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_CANDIDATE)
    phone = models.CharField(max_length=40, blank=True, null=True)
    position = models.CharField(max_length=200, blank=True, null=True)
    resume_url = models.CharField(max_length=500, blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='new')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ('-updated_at',)

    def __str__(self):
        return f"{self.display_name} ({self.role})"

    @property
    def display_name(self):
        return self.full_name or self.user.get_full_name() or self.user.email or self.user.username

    @property
    def email(self):
        return self.user.email

    @property
    def is_admin(self):
        return self.role == self.ROLE_ADMIN

    @property
    def is_candidate(self):
        return self.role == self.ROLE_CANDIDATE
