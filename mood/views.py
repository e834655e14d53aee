# mood/views.py
from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from django.utils import timezone
from drf_spectacular.utils import extend_schema_view, extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from mood.models import MoodEntry
from mood.serializers import MoodEntrySerializer, MoodEntryCreateSerializer
from mood.services.analytics import (
    InvalidRange,
    resolve_range,
    compute_stats,
    format_trends,
)
from mood.services.insights import (
    mood_insight_service,
    NOT_ENOUGH_INSIGHT_DATA,
    NOT_ENOUGH_PATTERN_DATA,
)
from mood.settings import get_mood_settings
from core.mixins import ServerErrorMixin
import logging

logger = logging.getLogger(__name__)


def range_parameter(default, allow_all=True):
    choices = ["7d", "30d", "90d"] + (["all"] if allow_all else [])
    return OpenApiParameter(
        name="range",
        type=OpenApiTypes.STR,
        enum=choices,
        description=f"Lookback window (default: {default})",
    )


@extend_schema_view(
    create=extend_schema(
        description="Record a new mood entry for the authenticated user. Notes are sanitized before storage.",
        summary="Record Mood",
        tags=["Mood"],
        request=MoodEntryCreateSerializer,
        responses={201: MoodEntrySerializer},
    ),
    destroy=extend_schema(
        description="Delete one of the authenticated user's mood entries.",
        summary="Delete Mood Entry",
        tags=["Mood"],
    ),
    history=extend_schema(
        description="List mood entries in the requested window, newest first (at most 1000).",
        summary="Mood History",
        tags=["Mood"],
        parameters=[range_parameter("7d")],
        responses={200: MoodEntrySerializer(many=True)},
    ),
    trends=extend_schema(
        description="Average score and entry count per calendar day (UTC).",
        summary="Mood Trends",
        tags=["Mood"],
        parameters=[range_parameter("7d", allow_all=False)],
    ),
    stats=extend_schema(
        description="Average score, best day, current streak and label distribution.",
        summary="Mood Statistics",
        tags=["Mood"],
        parameters=[range_parameter("30d")],
    ),
    insights=extend_schema(
        description="Observations derived from the 30 most recent entries (requires at least 7).",
        summary="Mood Insights",
        tags=["Mood"],
    ),
    patterns=extend_schema(
        description="Weekday/weekend and two-week trend patterns from the 90 most recent entries (requires at least 14).",
        summary="Mood Patterns",
        tags=["Mood"],
    ),
    export=extend_schema(
        description="Export every mood entry of the authenticated user.",
        summary="Export Mood Data",
        tags=["Mood"],
        responses={200: MoodEntrySerializer(many=True)},
    ),
)
class MoodEntryViewSet(
    ServerErrorMixin,
    mixins.CreateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """ViewSet for recording and analysing mood entries"""

    permission_classes = [IsAuthenticated]
    serializer_class = MoodEntrySerializer
    lookup_value_regex = r"\d+"

    def get_serializer_class(self):
        if self.action == "create":
            return MoodEntryCreateSerializer
        return MoodEntrySerializer

    def get_queryset(self):
        return MoodEntry.objects.for_user(self.request.user).newest_first()

    def _cutoff(self, endpoint, now, allow_all=True):
        default = get_mood_settings()["DEFAULT_RANGES"][endpoint]
        range_value = self.request.query_params.get("range") or default
        try:
            return resolve_range(range_value, now, allow_all=allow_all)
        except InvalidRange as e:
            raise ValidationError(str(e))

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            entry = serializer.save(user=request.user, timestamp=timezone.now())
        except Exception as e:
            return self.server_error("Failed to record mood entry", e)

        logger.info(f"Recorded mood entry {entry.id} for user {request.user.id}")
        return Response(
            {"success": True, "data": serializer.data}, status=status.HTTP_201_CREATED
        )

    def destroy(self, request, *args, **kwargs):
        try:
            entry = self.get_queryset().filter(pk=kwargs.get("pk")).first()
        except Exception as e:
            return self.server_error("Failed to delete mood entry", e)

        if entry is None:
            raise NotFound("Mood entry not found")

        try:
            entry.delete()
        except Exception as e:
            return self.server_error("Failed to delete mood entry", e)

        logger.info(f"Deleted mood entry {kwargs.get('pk')} for user {request.user.id}")
        return Response(
            {"success": True, "message": "Mood entry deleted successfully"}
        )

    @action(detail=False, methods=["get"])
    def history(self, request):
        cutoff = self._cutoff("history", timezone.now())
        limit = get_mood_settings()["HISTORY_LIMIT"]

        try:
            entries = list(self.get_queryset().since(cutoff)[:limit])
        except Exception as e:
            return self.server_error("Failed to fetch mood history", e)

        return Response(
            {"success": True, "data": MoodEntrySerializer(entries, many=True).data}
        )

    @action(detail=False, methods=["get"])
    def trends(self, request):
        cutoff = self._cutoff("trends", timezone.now(), allow_all=False)

        try:
            rows = list(
                MoodEntry.objects.for_user(request.user).since(cutoff).daily_trends()
            )
        except Exception as e:
            return self.server_error("Failed to fetch mood trends", e)

        return Response({"success": True, "data": format_trends(rows)})

    @action(detail=False, methods=["get"])
    def stats(self, request):
        now = timezone.now()
        cutoff = self._cutoff("stats", now)

        try:
            entries = list(self.get_queryset().since(cutoff))
        except Exception as e:
            return self.server_error("Failed to calculate mood statistics", e)

        return Response({"success": True, "data": compute_stats(entries, now)})

    @action(detail=False, methods=["get"])
    def insights(self, request):
        cfg = get_mood_settings()

        try:
            scores = list(
                self.get_queryset()
                .values_list("mood_score", flat=True)[: cfg["INSIGHT_WINDOW"]]
            )
        except Exception as e:
            return self.server_error("Failed to generate insights", e)

        if len(scores) < cfg["INSIGHT_MIN_ENTRIES"]:
            return Response(
                {"success": True, "data": [], "message": NOT_ENOUGH_INSIGHT_DATA}
            )

        return Response(
            {"success": True, "data": mood_insight_service.generate_insights(scores)}
        )

    @action(detail=False, methods=["get"])
    def patterns(self, request):
        cfg = get_mood_settings()

        try:
            entries = list(self.get_queryset()[: cfg["PATTERN_WINDOW"]])
        except Exception as e:
            return self.server_error("Failed to detect patterns", e)

        if len(entries) < cfg["PATTERN_MIN_ENTRIES"]:
            return Response(
                {"success": True, "data": [], "message": NOT_ENOUGH_PATTERN_DATA}
            )

        return Response(
            {"success": True, "data": mood_insight_service.detect_patterns(entries)}
        )

    @action(detail=False, methods=["get"])
    def export(self, request):
        try:
            entries = list(self.get_queryset())
        except Exception as e:
            return self.server_error("Failed to export mood data", e)

        logger.info(f"Exported {len(entries)} mood entries for user {request.user.id}")
        return Response(
            {
                "success": True,
                "data": MoodEntrySerializer(entries, many=True).data,
                "exportedAt": timezone.now().isoformat(),
                "totalEntries": len(entries),
            }
        )
