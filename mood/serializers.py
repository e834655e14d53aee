# mood/serializers.py
from rest_framework import serializers
from mood.models import MoodEntry
from mood.services.sanitizer import sanitize_note, hash_note
from mood.settings import get_mood_settings


class MoodEntrySerializer(serializers.ModelSerializer):
    """Client-facing representation. Never exposes the note hash."""

    userId = serializers.IntegerField(source="user_id", read_only=True)
    moodScore = serializers.IntegerField(source="mood_score", read_only=True)
    moodLabel = serializers.CharField(source="mood_label", read_only=True)
    noteSummary = serializers.CharField(source="note_summary", read_only=True)
    emotionTags = serializers.JSONField(source="emotion_tags", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = MoodEntry
        fields = [
            "id",
            "userId",
            "timestamp",
            "moodScore",
            "moodLabel",
            "noteSummary",
            "emotionTags",
            "source",
            "metadata",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields


class MoodMetadataSerializer(serializers.Serializer):
    sessionId = serializers.CharField(max_length=100, required=False)
    promptType = serializers.CharField(max_length=100, required=False)
    deviceType = serializers.CharField(max_length=100, required=False)


class MoodScoreField(serializers.ChoiceField):
    """Only JSON integers count; ``"2"`` and ``true`` are rejected"""

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, int):
            self.fail("invalid_choice", input=data)
        return super().to_internal_value(data)


class MoodEntryCreateSerializer(serializers.Serializer):
    moodScore = MoodScoreField(
        source="mood_score",
        choices=MoodEntry.SCORE_CHOICES,
        error_messages={
            "required": "moodScore and moodLabel are required",
            "invalid_choice": "moodScore must be -2, -1, 0, 1, or 2",
        },
    )
    moodLabel = serializers.ChoiceField(
        source="mood_label",
        choices=MoodEntry.LABEL_CHOICES,
        error_messages={
            "required": "moodScore and moodLabel are required",
            "invalid_choice": "Invalid moodLabel",
        },
    )
    note = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )
    source = serializers.ChoiceField(
        choices=MoodEntry.SOURCE_CHOICES, default="USER_ENTRY"
    )
    emotionTags = serializers.ListField(
        source="emotion_tags",
        child=serializers.CharField(max_length=50),
        required=False,
    )
    metadata = MoodMetadataSerializer(required=False)

    def validate_emotionTags(self, value):
        # Treated as a set, first occurrence order kept
        return list(dict.fromkeys(value))

    def create(self, validated_data):
        note = validated_data.pop("note", None)
        if note and note.strip():
            max_length = get_mood_settings()["NOTE_MAX_LENGTH"]
            validated_data["note_summary"] = sanitize_note(note, max_length)
            validated_data["note_hash"] = hash_note(note)

        if "metadata" in validated_data:
            validated_data["metadata"] = dict(validated_data["metadata"])

        return MoodEntry.objects.create(**validated_data)

    def to_representation(self, instance):
        return MoodEntrySerializer(instance, context=self.context).data
