# professionals/serializers.py
from rest_framework import serializers
from posts.models import TOPIC_CHOICES
from professionals.models import (
    ProfessionalProfile,
    ProfessionalResponse,
    ResponseTemplate,
)

REQUIRED_LICENSE_MESSAGE = "License number, type, and issuing authority are required"


class ProfessionalApplicationSerializer(serializers.Serializer):
    licenseNumber = serializers.CharField(
        source="license_number",
        max_length=100,
        error_messages={"required": REQUIRED_LICENSE_MESSAGE, "blank": REQUIRED_LICENSE_MESSAGE},
    )
    licenseType = serializers.ChoiceField(
        source="license_type",
        choices=ProfessionalProfile.LICENSE_TYPE_CHOICES,
        error_messages={"required": REQUIRED_LICENSE_MESSAGE},
    )
    issuingAuthority = serializers.CharField(
        source="issuing_authority",
        max_length=200,
        error_messages={"required": REQUIRED_LICENSE_MESSAGE, "blank": REQUIRED_LICENSE_MESSAGE},
    )
    specializations = serializers.ListField(
        child=serializers.CharField(max_length=100), required=False
    )
    bio = serializers.CharField(max_length=1000, required=False, allow_blank=True)
    yearsOfExperience = serializers.IntegerField(
        source="years_of_experience", min_value=0, required=False
    )
    institutionAffiliation = serializers.CharField(
        source="institution_affiliation", max_length=200, required=False, allow_blank=True
    )
    optInTopics = serializers.ListField(
        source="opt_in_topics",
        child=serializers.ChoiceField(choices=TOPIC_CHOICES),
        required=False,
    )

    def validate_optInTopics(self, value):
        return list(dict.fromkeys(value)) or ["general"]


class ProfessionalProfileSerializer(serializers.ModelSerializer):
    licenseNumber = serializers.CharField(source="license_number", read_only=True)
    licenseType = serializers.CharField(source="license_type", read_only=True)
    issuingAuthority = serializers.CharField(source="issuing_authority", read_only=True)
    verificationStatus = serializers.CharField(source="verification_status", read_only=True)
    verifiedAt = serializers.DateTimeField(source="verified_at", read_only=True)
    rejectionReason = serializers.CharField(source="rejection_reason", read_only=True)
    yearsOfExperience = serializers.IntegerField(source="years_of_experience", read_only=True)
    institutionAffiliation = serializers.CharField(
        source="institution_affiliation", read_only=True
    )
    dailyResponseLimit = serializers.IntegerField(
        source="daily_response_limit", read_only=True
    )
    responsesGivenToday = serializers.IntegerField(
        source="responses_given_today", read_only=True
    )
    optInTopics = serializers.JSONField(source="opt_in_topics", read_only=True)
    isAvailable = serializers.BooleanField(source="is_available", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = ProfessionalProfile
        fields = [
            "licenseNumber",
            "licenseType",
            "issuingAuthority",
            "verificationStatus",
            "verifiedAt",
            "rejectionReason",
            "specializations",
            "bio",
            "yearsOfExperience",
            "institutionAffiliation",
            "dailyResponseLimit",
            "responsesGivenToday",
            "optInTopics",
            "isAvailable",
            "createdAt",
        ]
        read_only_fields = fields


class ProfessionalProfileUpdateSerializer(serializers.ModelSerializer):
    """Only the self-service fields; license data and verification are fixed"""

    specializations = serializers.ListField(
        child=serializers.CharField(max_length=100), required=False
    )
    institutionAffiliation = serializers.CharField(
        source="institution_affiliation", max_length=200, required=False, allow_blank=True
    )
    optInTopics = serializers.ListField(
        source="opt_in_topics",
        child=serializers.ChoiceField(choices=TOPIC_CHOICES),
        required=False,
    )
    isAvailable = serializers.BooleanField(source="is_available", required=False)

    class Meta:
        model = ProfessionalProfile
        fields = ["bio", "specializations", "institutionAffiliation", "optInTopics", "isAvailable"]

    def validate_optInTopics(self, value):
        return list(dict.fromkeys(value))


class ApplicationSerializer(ProfessionalProfileSerializer):
    """Pending application as listed for admins"""

    userId = serializers.IntegerField(source="user_id", read_only=True)
    username = serializers.CharField(source="user.username", read_only=True)
    email = serializers.EmailField(source="user.email", read_only=True)

    class Meta(ProfessionalProfileSerializer.Meta):
        fields = ["userId", "username", "email"] + ProfessionalProfileSerializer.Meta.fields
        read_only_fields = fields


class VerificationSerializer(serializers.Serializer):
    action = serializers.ChoiceField(
        choices=["approve", "reject"],
        error_messages={
            "required": "Action must be 'approve' or 'reject'",
            "invalid_choice": "Action must be 'approve' or 'reject'",
        },
    )
    rejectionReason = serializers.CharField(
        source="rejection_reason", required=False, allow_blank=True, max_length=1000
    )


class DMConsentSerializer(serializers.Serializer):
    dmConsent = serializers.BooleanField(
        source="dm_consent", error_messages={"required": "dmConsent is required"}
    )


class ResourceItemSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=200)
    url = serializers.URLField(required=False)
    type = serializers.ChoiceField(
        choices=["article", "hotline", "service", "exercise", "book", "app"]
    )
    description = serializers.CharField(max_length=500)


class NextStepSerializer(serializers.Serializer):
    step = serializers.CharField(max_length=300)
    priority = serializers.ChoiceField(choices=["immediate", "short_term", "long_term"])


class ResponseContentSerializer(serializers.Serializer):
    reflection = serializers.CharField(max_length=2000, required=False)
    resources = ResourceItemSerializer(many=True, required=False)
    nextSteps = NextStepSerializer(many=True, required=False)
    encouragement = serializers.CharField(max_length=1000, required=False)

    def validate(self, attrs):
        if not any(attrs.values()):
            raise serializers.ValidationError("Response content cannot be empty")
        return attrs


class ProfessionalResponseCreateSerializer(serializers.Serializer):
    responseType = serializers.ChoiceField(
        source="response_type", choices=ProfessionalResponse.RESPONSE_TYPE_CHOICES
    )
    content = ResponseContentSerializer()
    aiAssisted = serializers.BooleanField(source="ai_assisted", default=False)
    disclaimerAcknowledged = serializers.BooleanField(
        source="disclaimer_acknowledged", default=False
    )

    def validate_content(self, value):
        # Plain dicts for the JSON column
        return {
            key: [dict(item) for item in items] if isinstance(items, list) else items
            for key, items in value.items()
        }


class ResponseAuthorSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    username = serializers.CharField(read_only=True)
    licenseType = serializers.CharField(
        source="professional_profile.license_type", read_only=True
    )
    specializations = serializers.JSONField(
        source="professional_profile.specializations", read_only=True
    )
    verificationStatus = serializers.CharField(
        source="professional_profile.verification_status", read_only=True
    )


class ProfessionalResponseSerializer(serializers.ModelSerializer):
    postId = serializers.IntegerField(source="post_id", read_only=True)
    professional = ResponseAuthorSerializer(read_only=True)
    responseType = serializers.CharField(source="response_type", read_only=True)
    aiAssisted = serializers.BooleanField(source="ai_assisted", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    editedAt = serializers.DateTimeField(source="edited_at", read_only=True)

    class Meta:
        model = ProfessionalResponse
        fields = [
            "id",
            "postId",
            "professional",
            "responseType",
            "content",
            "aiAssisted",
            "createdAt",
            "editedAt",
        ]
        read_only_fields = fields


class ResponseTemplateSerializer(serializers.ModelSerializer):
    exampleUsage = serializers.CharField(source="example_usage", read_only=True)
    usageCount = serializers.IntegerField(source="usage_count", read_only=True)

    class Meta:
        model = ResponseTemplate
        fields = [
            "id",
            "type",
            "category",
            "title",
            "template",
            "placeholders",
            "exampleUsage",
            "usageCount",
        ]
        read_only_fields = fields
