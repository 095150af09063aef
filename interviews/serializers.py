# interviews/serializers.py
from django.contrib.auth import get_user_model
from rest_framework import serializers

from accounts.models import Profile
from questions.models import Question
from questions.serializers import QuestionSerializer
from .models import Interview, InterviewParticipant, InterviewQuestion, InterviewSlot

User = get_user_model()


# ----------------- Slots / participants -----------------
class InterviewSlotSerializer(serializers.ModelSerializer):
    class Meta:
        model = InterviewSlot
        fields = ["id", "start_time", "end_time", "location", "meeting_link"]

    def validate(self, attrs):
        start = attrs.get("start_time", getattr(self.instance, "start_time", None))
        end = attrs.get("end_time", getattr(self.instance, "end_time", None))
        if start and end and end <= start:
            raise serializers.ValidationError({"end_time": "End time must be after start time"})
        return attrs


class InterviewParticipantSerializer(serializers.ModelSerializer):
    user_name = serializers.SerializerMethodField()
    user_id = serializers.PrimaryKeyRelatedField(source="user", queryset=User.objects.all())

    class Meta:
        model = InterviewParticipant
        fields = ["id", "user_id", "user_name", "role", "notified_at", "created_at"]
        read_only_fields = ["notified_at", "created_at"]

    def get_user_name(self, obj):
        profile = getattr(obj.user, "profile", None)
        return profile.display_name if profile else obj.user.username


# ----------------- Assigned questions -----------------
class AssignedQuestionSerializer(serializers.ModelSerializer):
    question = QuestionSerializer(read_only=True)

    class Meta:
        model = InterviewQuestion
        fields = ["id", "question", "created_at"]


class SelectorQuestionSerializer(QuestionSerializer):
    is_assigned = serializers.SerializerMethodField()

    class Meta(QuestionSerializer.Meta):
        fields = QuestionSerializer.Meta.fields + ["is_assigned"]

    def get_is_assigned(self, obj):
        return obj.id in self.context.get("assigned_ids", set())


# ----------------- Interview -----------------
class InterviewSerializer(serializers.ModelSerializer):
    created_by_name = serializers.SerializerMethodField()
    slots = InterviewSlotSerializer(many=True, read_only=True)
    participants = InterviewParticipantSerializer(many=True, read_only=True)
    questions = AssignedQuestionSerializer(source="interview_questions", many=True, read_only=True)

    class Meta:
        model = Interview
        fields = [
            "id",
            "title",
            "description",
            "status",
            "notes",
            "created_by",
            "created_by_name",
            "created_at",
            "updated_at",
            "slots",
            "participants",
            "questions",
        ]

    def get_created_by_name(self, obj):
        return obj.created_by.username if obj.created_by_id else None


class InterviewUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Interview
        fields = ["title", "description", "status", "notes"]


class ScheduleInterviewSerializer(serializers.Serializer):
    """Input of the scheduling wizard: interview fields, question ids, optional candidate and slot."""

    title = serializers.CharField(max_length=255)
    description = serializers.CharField()
    question_ids = serializers.PrimaryKeyRelatedField(
        queryset=Question.objects.all(), many=True, required=False
    )
    candidate_id = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.filter(profile__role=Profile.ROLE_CANDIDATE),
        required=False,
        allow_null=True,
    )
    slot = InterviewSlotSerializer(required=False, allow_null=True)
