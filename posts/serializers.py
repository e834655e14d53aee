# posts/serializers.py
from rest_framework import serializers
from posts.models import Post, TOPIC_CHOICES


class PostSerializer(serializers.ModelSerializer):
    authorId = serializers.SerializerMethodField()
    content = serializers.CharField(
        max_length=2000,
        error_messages={
            "required": "Post content is required",
            "blank": "Post content is required",
            "max_length": "Post content cannot exceed 2000 characters",
        },
    )
    category = serializers.ChoiceField(choices=TOPIC_CHOICES, default="general")
    responseMode = serializers.ChoiceField(
        source="response_mode", choices=Post.RESPONSE_MODE_CHOICES, default="open"
    )
    mood = serializers.CharField(max_length=50, required=False, allow_blank=True)
    isAnonymous = serializers.BooleanField(source="is_anonymous", default=False)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Post
        fields = [
            "id",
            "authorId",
            "content",
            "category",
            "responseMode",
            "mood",
            "isAnonymous",
            "createdAt",
        ]

    def get_authorId(self, obj):
        # Anonymous posts never reveal their author
        return None if obj.is_anonymous else obj.author_id
