from django.core.management.base import BaseCommand, CommandError
from django.contrib.auth import get_user_model
from django.utils import timezone
from mood.models import MoodEntry
from mood.services.analytics import InvalidRange, resolve_range, compute_stats
from mood.services.insights import (
    mood_insight_service,
    NOT_ENOUGH_INSIGHT_DATA,
    NOT_ENOUGH_PATTERN_DATA,
)
from mood.settings import get_mood_settings
import logging

logger = logging.getLogger(__name__)
User = get_user_model()


class Command(BaseCommand):
    help = "Print mood statistics, insights and patterns for a user"

    def add_arguments(self, parser):
        parser.add_argument(
            "--user-id",
            type=int,
            required=True,
            help="User to summarise",
        )
        parser.add_argument(
            "--range",
            default="30d",
            choices=["7d", "30d", "90d", "all"],
            help="Statistics window (default: 30d)",
        )

    def handle(self, *args, **kwargs):
        user_id = kwargs["user_id"]
        try:
            user = User.objects.get(id=user_id)
        except User.DoesNotExist:
            raise CommandError(f"User with ID {user_id} not found")

        cfg = get_mood_settings()
        now = timezone.now()
        try:
            cutoff = resolve_range(kwargs["range"], now)
        except InvalidRange as e:
            raise CommandError(str(e))

        entries = MoodEntry.objects.for_user(user).newest_first()

        stats = compute_stats(list(entries.since(cutoff)), now)
        self.stdout.write(f"=== MOOD SUMMARY: {user.username} ({kwargs['range']}) ===")
        self.stdout.write(f"Entries: {stats['totalEntries']}")
        self.stdout.write(f"Average score: {stats['averageScore']}")
        self.stdout.write(
            f"Best day: {stats['bestDay']['date']} (score {stats['bestDay']['score']})"
        )
        self.stdout.write(f"Current streak: {stats['currentStreak']} day(s)")
        for label, count in stats["distribution"].items():
            self.stdout.write(f"  {label:<10} {count}")

        scores = list(
            entries.values_list("mood_score", flat=True)[: cfg["INSIGHT_WINDOW"]]
        )
        insights = mood_insight_service.generate_insights(scores)
        self.stdout.write("\n=== INSIGHTS ===")
        if not insights:
            self.stdout.write(
                NOT_ENOUGH_INSIGHT_DATA
                if len(scores) < cfg["INSIGHT_MIN_ENTRIES"]
                else "No insights"
            )
        for insight in insights:
            self.stdout.write(f"- {insight['title']} ({insight['tone']})")

        recent = list(entries[: cfg["PATTERN_WINDOW"]])
        patterns = mood_insight_service.detect_patterns(recent)
        self.stdout.write("\n=== PATTERNS ===")
        if not patterns:
            self.stdout.write(
                NOT_ENOUGH_PATTERN_DATA
                if len(recent) < cfg["PATTERN_MIN_ENTRIES"]
                else "No patterns detected"
            )
        for pattern in patterns:
            self.stdout.write(
                f"- [{pattern['type']}] {pattern['description']} "
                f"(confidence {pattern['confidence']:.2f})"
            )

        logger.info(f"Printed mood summary for user {user.id}")
        self.stdout.write(self.style.SUCCESS("Done"))
