# users/serializers.py
from rest_framework import serializers
from django.contrib.auth import get_user_model

CustomUser = get_user_model()


class CurrentUserSerializer(serializers.ModelSerializer):
    dateJoined = serializers.DateTimeField(source="date_joined", read_only=True)
    isActive = serializers.BooleanField(source="is_active", read_only=True)
    dmConsent = serializers.BooleanField(source="dm_consent", read_only=True)

    class Meta:
        model = CustomUser
        fields = ["id", "username", "email", "role", "isActive", "dmConsent", "dateJoined"]
        read_only_fields = fields
