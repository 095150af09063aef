from rest_framework import serializers

from .models import Question, QuestionCategory
from .utils import format_difficulty


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = QuestionCategory
        fields = ["id", "name", "description"]


class QuestionSerializer(serializers.ModelSerializer):
    category = CategorySerializer(read_only=True)
    category_id = serializers.PrimaryKeyRelatedField(
        source="category",
        queryset=QuestionCategory.objects.all(),
        allow_null=True,
        required=False,
        write_only=True,
    )
    difficulty_display = serializers.SerializerMethodField()

    class Meta:
        model = Question
        fields = [
            "id",
            "title",
            "content",
            "category",
            "category_id",
            "difficulty",
            "difficulty_display",
            "created_by",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["created_by", "created_at", "updated_at"]

    def get_difficulty_display(self, obj):
        return format_difficulty(obj.difficulty)

    def create(self, validated_data):
        request = self.context.get("request")
        if "created_by" not in validated_data and request is not None:
            validated_data["created_by"] = request.user
        return super().create(validated_data)
