# mood/services/insights.py
"""
Threshold-based insight and pattern generation over a user's recent mood
entries.

Insights are canned observations selected by a small, ordered rule table;
their confidence values are fixed per rule. Patterns compare group means
(weekday vs weekend, recent vs older entries) and derive a capped confidence
from the size of the difference.
"""

from typing import Dict, Any, List, Callable, Optional
from dataclasses import dataclass
import logging

import numpy as np

from mood.settings import get_mood_settings

logger = logging.getLogger(__name__)

NOT_ENOUGH_INSIGHT_DATA = "Not enough data for insights. Keep tracking!"
NOT_ENOUGH_PATTERN_DATA = "Not enough data for pattern detection"


@dataclass(frozen=True)
class MoodSummary:
    count: int
    mean: float
    variance: float

    @classmethod
    def from_scores(cls, scores: List[int]) -> "MoodSummary":
        values = np.asarray(scores, dtype=float)
        return cls(
            count=len(values),
            mean=float(values.mean()),
            # population variance
            variance=float(values.var()),
        )


@dataclass(frozen=True)
class InsightRule:
    key: str
    condition: Callable[[MoodSummary, Dict[str, Any]], bool]
    title: str
    observation: str
    suggestion: str
    tone: str
    confidence: float
    # Within a group only the first matching rule is reported
    group: Optional[str] = None

    def render(self, summary: MoodSummary) -> Dict[str, Any]:
        return {
            "title": self.title,
            "observation": self.observation,
            "suggestion": self.suggestion,
            "tone": self.tone,
            "dataPoints": summary.count,
            "confidence": self.confidence,
        }


INSIGHT_RULES = [
    InsightRule(
        key="lower_mood",
        condition=lambda summary, cfg: summary.mean < cfg["LOW_MOOD_THRESHOLD"],
        title="Lower Mood Pattern Observed",
        observation=(
            "Your recent mood scores have been on the lower side. This might be "
            "worth noticing, but remember - fluctuations are normal."
        ),
        suggestion=(
            "Consider exploring activities that have historically improved your "
            "mood, or reach out to someone you trust."
        ),
        tone="gentle",
        confidence=0.7,
        group="mean",
    ),
    InsightRule(
        key="positive_trend",
        condition=lambda summary, cfg: summary.mean > cfg["POSITIVE_MOOD_THRESHOLD"],
        title="Positive Mood Trend",
        observation=(
            "You've been recording more positive moods recently. "
            "That's great to see!"
        ),
        suggestion=(
            "Reflect on what's been going well - it might help you recognize "
            "patterns worth maintaining."
        ),
        tone="encouraging",
        confidence=0.75,
        group="mean",
    ),
    InsightRule(
        key="variability",
        condition=lambda summary, cfg: summary.variance > cfg["VARIABILITY_THRESHOLD"],
        title="Mood Variability Noticed",
        observation=(
            "Your mood has been fluctuating quite a bit. This could be influenced "
            "by various factors in your environment or routine."
        ),
        suggestion=(
            "You might find it helpful to note what's happening when you track "
            "your mood - patterns might emerge."
        ),
        tone="neutral",
        confidence=0.65,
    ),
]


def _mean(scores: List[int]) -> float:
    return float(np.mean(scores))


class MoodInsightService:
    """Generates insights and detects patterns from recent mood entries"""

    def __init__(self, rules: Optional[List[InsightRule]] = None):
        self.rules = rules if rules is not None else INSIGHT_RULES

    def generate_insights(self, scores: List[int]) -> List[Dict[str, Any]]:
        """
        Evaluate the rule table against ``scores`` (most recent first).

        Returns an empty list when there are fewer scores than
        ``INSIGHT_MIN_ENTRIES``.
        """
        cfg = get_mood_settings()
        if len(scores) < cfg["INSIGHT_MIN_ENTRIES"]:
            return []

        summary = MoodSummary.from_scores(scores)
        insights = []
        fired_groups = set()

        for rule in self.rules:
            if rule.group and rule.group in fired_groups:
                continue
            if rule.condition(summary, cfg):
                insights.append(rule.render(summary))
                if rule.group:
                    fired_groups.add(rule.group)

        logger.debug(
            f"Generated {len(insights)} insights from {summary.count} entries "
            f"(mean={summary.mean:.2f}, variance={summary.variance:.2f})"
        )
        return insights

    def detect_patterns(self, entries: List[Any]) -> List[Dict[str, Any]]:
        """
        Look for a weekday/weekend effect and a two-window trend in
        ``entries`` (newest first). Returns an empty list when there are
        fewer entries than ``PATTERN_MIN_ENTRIES``.
        """
        cfg = get_mood_settings()
        if len(entries) < cfg["PATTERN_MIN_ENTRIES"]:
            return []

        patterns = []
        for detector in (self.detect_time_pattern, self.detect_trend_pattern):
            pattern = detector(entries, cfg)
            if pattern:
                patterns.append(pattern)
        return patterns

    def detect_time_pattern(
        self, entries: List[Any], cfg: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        weekday_scores = []
        weekend_scores = []

        for entry in entries:
            # Monday is 0; Saturday and Sunday are 5 and 6
            if entry.timestamp.weekday() >= 5:
                weekend_scores.append(entry.mood_score)
            else:
                weekday_scores.append(entry.mood_score)

        if (
            len(weekday_scores) <= cfg["MIN_WEEKDAY_SAMPLES"]
            or len(weekend_scores) <= cfg["MIN_WEEKEND_SAMPLES"]
        ):
            return None

        weekday_avg = _mean(weekday_scores)
        weekend_avg = _mean(weekend_scores)
        diff = abs(weekday_avg - weekend_avg)

        if diff <= cfg["PATTERN_MIN_DIFFERENCE"]:
            return None

        if weekday_avg < weekend_avg:
            description = "Your mood tends to be lower on weekdays compared to weekends."
        else:
            description = "Your mood tends to be higher on weekdays compared to weekends."

        return {
            "type": "time_based",
            "description": description,
            "confidence": min(diff / 2, cfg["TIME_PATTERN_MAX_CONFIDENCE"]),
            "suggestion": (
                "Consider what differs between weekdays and weekends that might "
                "affect your mood."
            ),
        }

    def detect_trend_pattern(
        self, entries: List[Any], cfg: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        size = cfg["TREND_WINDOW_SIZE"]
        recent = [entry.mood_score for entry in entries[:size]]
        older = [entry.mood_score for entry in entries[size : size * 2]]

        if not recent or not older:
            return None

        trend_diff = _mean(recent) - _mean(older)
        if abs(trend_diff) <= cfg["PATTERN_MIN_DIFFERENCE"]:
            return None

        upward = trend_diff > 0
        return {
            "type": "trend",
            "description": (
                "Your mood has been trending upward over the past two weeks."
                if upward
                else "Your mood has been trending downward over the past two weeks."
            ),
            "confidence": min(abs(trend_diff) / 2, cfg["TREND_PATTERN_MAX_CONFIDENCE"]),
            "suggestion": (
                "Whatever you're doing seems to be working. Keep it up!"
                if upward
                else "If this trend continues, it might be worth exploring what's changed recently."
            ),
        }


mood_insight_service = MoodInsightService()
