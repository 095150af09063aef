from rest_framework import serializers

from accounts.models import Profile


class CandidateStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Profile.STATUS_CHOICES)
