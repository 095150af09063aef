from rest_framework import serializers

from .models import Profile


class ProfileSerializer(serializers.ModelSerializer):
    email = serializers.EmailField(source="user.email", read_only=True)
    username = serializers.CharField(source="user.username", read_only=True)

    class Meta:
        model = Profile
        fields = [
            "id",
            "user",
            "username",
            "email",
            "full_name",
            "avatar_url",
            "role",
            "phone",
            "position",
            "resume_url",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["user", "role", "status", "resume_url", "created_at", "updated_at"]


class ProfileUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Profile
        fields = ["full_name", "phone", "position"]
