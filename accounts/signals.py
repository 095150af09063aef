# accounts/signals.py
from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import Profile


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def create_profile_for_new_user(sender, instance, created, **kwargs):
    if not created:
        return
    Profile.objects.get_or_create(
        user=instance,
        defaults={
            'full_name': instance.get_full_name(),
            'role': Profile.ROLE_ADMIN if instance.is_superuser else Profile.ROLE_CANDIDATE,
        },
    )
