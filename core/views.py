# core/views.py
from django.http import JsonResponse
from django.utils import timezone
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework.decorators import (
    api_view,
    authentication_classes,
    permission_classes,
)
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
import logging

logger = logging.getLogger(__name__)


@extend_schema(
    description="Liveness check. Does not require authentication.",
    summary="Health Check",
    tags=["Health"],
    responses={200: OpenApiTypes.OBJECT},
)
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def health_check(request):
    return Response(
        {
            "status": "OK",
            "message": "ClarityHub Backend is running",
            "timestamp": timezone.now().isoformat(),
        }
    )


def route_not_found(request, exception=None):
    return JsonResponse(
        {
            "error": "Route not found",
            "message": f"The requested endpoint {request.path} does not exist",
        },
        status=404,
    )


def server_error(request):
    logger.error(f"Unhandled server error on {request.method} {request.path}")
    return JsonResponse(
        {"success": False, "error": "Internal Server Error"}, status=500
    )
