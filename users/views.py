# users/views.py
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema
from .serializers import CurrentUserSerializer
import logging

logger = logging.getLogger(__name__)


class CurrentUserView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        description="Get the authenticated user's profile",
        summary="Get Current User",
        tags=["User"],
        responses={200: CurrentUserSerializer},
    )
    def get(self, request):
        serializer = CurrentUserSerializer(request.user)
        return Response({"success": True, "data": serializer.data})
