# professionals/views.py
from django.db.models import Q
from django.utils import timezone
from rest_framework import viewsets, status
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema_view, extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from core.mixins import ServerErrorMixin
from core.pagination import EnvelopePagination
from professionals import services
from professionals.models import (
    ProfessionalProfile,
    ProfessionalResponse,
    ResponseTemplate,
)
from professionals.permissions import (
    IsPlatformAdmin,
    IsProfessional,
    IsVerifiedProfessional,
)
from professionals.serializers import (
    ApplicationSerializer,
    DMConsentSerializer,
    ProfessionalApplicationSerializer,
    ProfessionalProfileSerializer,
    ProfessionalProfileUpdateSerializer,
    ProfessionalResponseCreateSerializer,
    ProfessionalResponseSerializer,
    ResponseTemplateSerializer,
    VerificationSerializer,
)
import logging

logger = logging.getLogger(__name__)

TEMPLATE_LIST_LIMIT = 20


class ApplicationPagination(EnvelopePagination):
    results_key = "applications"


@extend_schema_view(
    apply=extend_schema(
        description="Apply for verified professional status",
        summary="Apply As Professional",
        tags=["Professionals"],
        request=ProfessionalApplicationSerializer,
    ),
    profile=extend_schema(
        description="Get your professional profile and verification status",
        summary="Get Professional Profile",
        tags=["Professionals"],
        responses={200: ProfessionalProfileSerializer},
    ),
    update_profile=extend_schema(
        description="Update bio, specializations, topics and availability",
        summary="Update Professional Profile",
        tags=["Professionals"],
        request=ProfessionalProfileUpdateSerializer,
    ),
    dm_consent=extend_schema(
        description="Allow or refuse direct messages",
        summary="Update DM Consent",
        tags=["Professionals"],
        request=DMConsentSerializer,
    ),
    templates=extend_schema(
        description="Active response templates, most used first",
        summary="Response Templates",
        tags=["Professionals"],
        parameters=[
            OpenApiParameter(name="type", type=OpenApiTypes.STR),
            OpenApiParameter(name="category", type=OpenApiTypes.STR),
        ],
        responses={200: ResponseTemplateSerializer(many=True)},
    ),
    submit_response=extend_schema(
        description="Respond to a post. Verified professionals only, limited per day.",
        summary="Submit Professional Response",
        tags=["Professionals"],
        request=ProfessionalResponseCreateSerializer,
        responses={201: ProfessionalResponseSerializer},
    ),
    post_responses=extend_schema(
        description="Visible professional responses to a post, newest first",
        summary="Post Professional Responses",
        tags=["Professionals"],
        responses={200: ProfessionalResponseSerializer(many=True)},
    ),
    applications=extend_schema(
        description="Pending professional applications",
        summary="Pending Applications",
        tags=["Professionals Admin"],
        responses={200: ApplicationSerializer(many=True)},
    ),
    verify=extend_schema(
        description="Approve or reject a professional application",
        summary="Verify Professional",
        tags=["Professionals Admin"],
        request=VerificationSerializer,
    ),
)
class ProfessionalViewSet(ServerErrorMixin, viewsets.GenericViewSet):
    """Professional applications, verification and responses to posts"""

    permission_classes = [IsAuthenticated]
    serializer_class = ProfessionalProfileSerializer

    def get_permissions(self):
        if self.action == "post_responses":
            return [AllowAny()]
        if self.action in ["update_profile", "templates"]:
            return [IsAuthenticated(), IsProfessional()]
        if self.action == "submit_response":
            return [IsAuthenticated(), IsVerifiedProfessional()]
        if self.action in ["applications", "verify"]:
            return [IsAuthenticated(), IsPlatformAdmin()]
        return super().get_permissions()

    def get_serializer_class(self):
        serializers_by_action = {
            "apply": ProfessionalApplicationSerializer,
            "update_profile": ProfessionalProfileUpdateSerializer,
            "dm_consent": DMConsentSerializer,
            "templates": ResponseTemplateSerializer,
            "submit_response": ProfessionalResponseCreateSerializer,
            "post_responses": ProfessionalResponseSerializer,
            "applications": ApplicationSerializer,
            "verify": VerificationSerializer,
        }
        return serializers_by_action.get(self.action, ProfessionalProfileSerializer)

    def _own_profile(self):
        profile = ProfessionalProfile.objects.filter(user=self.request.user).first()
        if profile is None:
            raise NotFound("Professional profile not found")
        return profile

    def apply(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.submit_application(request.user, serializer.validated_data)

        return Response(
            {
                "success": True,
                "message": "Professional application submitted successfully. You will be notified once reviewed.",
                "data": {"verificationStatus": "pending"},
            },
            status=status.HTTP_201_CREATED,
        )

    def profile(self, request):
        profile = self._own_profile()
        return Response(
            {"success": True, "data": ProfessionalProfileSerializer(profile).data}
        )

    def update_profile(self, request):
        profile = self._own_profile()
        serializer = self.get_serializer(profile, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()

        logger.info(f"Professional {request.user.id} updated their profile")
        return Response(
            {
                "success": True,
                "message": "Profile updated successfully",
                "data": ProfessionalProfileSerializer(profile).data,
            }
        )

    def dm_consent(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        request.user.dm_consent = serializer.validated_data["dm_consent"]
        request.user.save(update_fields=["dm_consent", "updated_at"])

        return Response(
            {
                "success": True,
                "message": f"DM consent {'enabled' if request.user.dm_consent else 'disabled'}",
                "data": {"dmConsent": request.user.dm_consent},
            }
        )

    def templates(self, request):
        queryset = ResponseTemplate.objects.filter(is_active=True)
        template_type = request.query_params.get("type")
        category = request.query_params.get("category")
        if template_type:
            queryset = queryset.filter(type=template_type)
        if category:
            queryset = queryset.filter(Q(category=category) | Q(category="all"))

        templates = queryset.order_by("-usage_count", "id")[:TEMPLATE_LIST_LIMIT]
        return Response(
            {
                "success": True,
                "data": ResponseTemplateSerializer(templates, many=True).data,
            }
        )

    def submit_response(self, request, post_id=None):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        response = services.submit_response(
            request.user, post_id, serializer.validated_data, timezone.now()
        )
        return Response(
            {
                "success": True,
                "message": "Response submitted successfully",
                "data": ProfessionalResponseSerializer(response).data,
            },
            status=status.HTTP_201_CREATED,
        )

    def post_responses(self, request, post_id=None):
        try:
            responses = list(
                ProfessionalResponse.objects.filter(post_id=post_id, is_visible=True)
                .select_related("professional__professional_profile")
                .order_by("-created_at")
            )
        except Exception as e:
            return self.server_error("Failed to fetch professional responses", e)

        return Response(
            {
                "success": True,
                "data": ProfessionalResponseSerializer(responses, many=True).data,
            }
        )

    def applications(self, request):
        queryset = ProfessionalProfile.objects.filter(
            verification_status="pending"
        ).select_related("user")

        paginator = ApplicationPagination()
        page = paginator.paginate_queryset(queryset, request, view=self)
        return paginator.get_paginated_response(
            ApplicationSerializer(page, many=True).data
        )

    def verify(self, request, user_id=None):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        profile = (
            ProfessionalProfile.objects.select_related("user")
            .filter(user_id=user_id)
            .first()
        )
        if profile is None:
            raise NotFound("Professional application not found")

        action = serializer.validated_data["action"]
        outcome = "approved" if action == "approve" else "rejected"
        services.review_application(
            profile,
            action,
            request.user,
            timezone.now(),
            serializer.validated_data.get("rejection_reason"),
        )

        logger.info(
            f"Admin {request.user.id} {outcome} professional application of user {user_id}"
        )
        return Response(
            {
                "success": True,
                "message": f"Professional application {outcome} successfully",
                "data": {"verificationStatus": profile.verification_status},
            }
        )
