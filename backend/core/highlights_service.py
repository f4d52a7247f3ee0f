"""
Workout Highlights Service.

Computes the achievements shown after a workout is completed by comparing
the finished session against the user's history:
- Personal records (vs all-time best weight per exercise)
- Volume increase (vs the most recent similar workout)
- Training streak (sessions within a week of each other)
- Weight increases (vs the last session with the same exercise)

Detectors are pure functions over snapshots. The service only fetches the
history snapshot and assembles the highlights in a fixed order.
"""
import asyncio
import logging
import math
from typing import Dict, List, Optional

from application.ports.session_history import SessionHistoryProvider
from backend.core.session_metrics import (
    calculate_session_volume,
    get_exercise_max_weight,
    get_session_max_weights,
)
from domain.models.highlight import (
    ExercisePR,
    HighlightType,
    VolumeComparison,
    WorkoutHighlight,
)
from domain.models.session import WorkoutSession
from domain.models.weight import WeightRecord, format_weight

logger = logging.getLogger(__name__)


DEFAULT_RECENT_LIMIT = 10
DEFAULT_STREAK_LIMIT = 30
DEFAULT_STREAK_WINDOW_DAYS = 7
DEFAULT_VOLUME_THRESHOLD_PERCENT = 5.0

MIN_STREAK_FOR_HIGHLIGHT = 2


# =============================================================================
# Detectors
# =============================================================================


def detect_personal_records(
    session: WorkoutSession,
    best_weights: Dict[str, WeightRecord],
) -> List[ExercisePR]:
    """
    Detect new personal records in a session.

    An exercise with no history is always a first-time record, whatever
    the weight. An exercise with history needs a strictly heavier set.

    Args:
        session: The completed session
        best_weights: All-time best set per exercise name

    Returns:
        One ExercisePR per record, in session order
    """
    prs: List[ExercisePR] = []

    for exercise_name, session_max in get_session_max_weights(session).items():
        historical_best = best_weights.get(exercise_name)

        if historical_best is None:
            prs.append(ExercisePR(
                exercise_name=exercise_name,
                new_weight=session_max.weight,
                new_reps=session_max.reps,
                unit=session_max.unit,
            ))
        elif session_max.weight > historical_best.weight:
            prs.append(ExercisePR(
                exercise_name=exercise_name,
                new_weight=session_max.weight,
                new_reps=session_max.reps,
                old_weight=historical_best.weight,
                old_reps=historical_best.reps,
                unit=session_max.unit,
            ))

    return prs


def find_last_session_with_exercise(
    sessions: List[WorkoutSession],
    exercise_name: str,
    exclude_session_id: str,
) -> Optional[WorkoutSession]:
    """First session (in the given order) that performed the exercise, other than the excluded one."""
    for session in sessions:
        if session.id == exclude_session_id:
            continue
        if session.has_exercise_with_sets(exercise_name):
            return session
    return None


def detect_weight_increases(
    session: WorkoutSession,
    recent_sessions: List[WorkoutSession],
) -> List[ExercisePR]:
    """
    Detect exercises lifted heavier than the last time they were performed.

    Independent of personal records: the same exercise can show up in both.

    Args:
        session: The completed session
        recent_sessions: Recent sessions, most recent first

    Returns:
        One ExercisePR (with old weight) per increased exercise
    """
    increases: List[ExercisePR] = []

    for current_exercise in session.exercises:
        if not current_exercise.sets:
            continue

        current_max = get_exercise_max_weight(current_exercise)
        if current_max is None:
            continue

        last_session = find_last_session_with_exercise(
            recent_sessions,
            current_exercise.exercise_name,
            session.id,
        )
        if last_session is None:
            continue

        last_exercise = last_session.find_exercise(current_exercise.exercise_name)
        last_max = get_exercise_max_weight(last_exercise) if last_exercise else None

        if last_max is not None and current_max.weight > last_max.weight:
            increases.append(ExercisePR(
                exercise_name=current_exercise.exercise_name,
                new_weight=current_max.weight,
                new_reps=current_max.reps,
                old_weight=last_max.weight,
                old_reps=last_max.reps,
                unit=current_max.unit,
            ))

    return increases


def _is_similar_session(candidate: WorkoutSession, session: WorkoutSession) -> bool:
    """Same workout name (case-insensitive) or same originating template."""
    if candidate.id == session.id:
        return False
    if candidate.name.lower() == session.name.lower():
        return True
    return (
        session.workout_template_id is not None
        and candidate.workout_template_id == session.workout_template_id
    )


def calculate_volume_improvement(
    session: WorkoutSession,
    recent_sessions: List[WorkoutSession],
    threshold_percent: float = DEFAULT_VOLUME_THRESHOLD_PERCENT,
) -> Optional[VolumeComparison]:
    """
    Compare session volume with the most recent similar workout.

    Args:
        session: The completed session
        recent_sessions: Recent sessions, most recent first
        threshold_percent: Increase that must be strictly exceeded

    Returns:
        VolumeComparison when the increase exceeds the threshold, else None
    """
    current_volume = calculate_session_volume(session)
    if current_volume == 0:
        return None

    similar_sessions = [s for s in recent_sessions if _is_similar_session(s, session)]
    if not similar_sessions:
        return None

    previous_volume = calculate_session_volume(similar_sessions[0])
    if previous_volume == 0:
        return None

    percentage_increase = (current_volume - previous_volume) / previous_volume * 100

    if percentage_increase > threshold_percent:
        return VolumeComparison(
            current_volume=current_volume,
            previous_volume=previous_volume,
            percentage_increase=percentage_increase,
        )

    return None


def calculate_workout_streak(
    session: WorkoutSession,
    recent_sessions: List[WorkoutSession],
    window_days: int = DEFAULT_STREAK_WINDOW_DAYS,
) -> Optional[int]:
    """
    Count the sessions forming a streak with the current one.

    The current session counts as 1. Sessions are walked newest first and
    each one within `window_days` of the current session's date extends the
    streak; the first one further away ends it. The gap is measured from
    the current session, not between consecutive sessions.

    Returns:
        Streak length, or None when there is no history at all
    """
    if not recent_sessions:
        return None

    sorted_sessions = sorted(recent_sessions, key=lambda s: s.date, reverse=True)

    streak = 1
    for previous in sorted_sessions:
        days_diff = (session.date - previous.date).days
        if days_diff <= window_days:
            streak += 1
        else:
            break

    return streak


# =============================================================================
# Highlight Messages
# =============================================================================


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def create_pr_highlight(pr: ExercisePR) -> WorkoutHighlight:
    unit = pr.unit
    if pr.old_weight:
        return WorkoutHighlight(
            type=HighlightType.PERSONAL_RECORD,
            emoji="🎉",
            title="New PR!",
            message=(
                f"{pr.exercise_name}: {format_weight(pr.new_weight)}{unit} "
                f"(previous: {format_weight(pr.old_weight)}{unit})"
            ),
        )
    return WorkoutHighlight(
        type=HighlightType.PERSONAL_RECORD,
        emoji="🎉",
        title="First PR!",
        message=f"{pr.exercise_name}: {format_weight(pr.new_weight)}{unit}",
    )


def create_weight_increase_highlight(increase: ExercisePR) -> WorkoutHighlight:
    unit = increase.unit
    return WorkoutHighlight(
        type=HighlightType.WEIGHT_INCREASE,
        emoji="💪",
        title="Weight Increase!",
        message=(
            f"{increase.exercise_name}: {format_weight(increase.new_weight)}{unit} "
            f"(up from {format_weight(increase.old_weight)}{unit})"
        ),
    )


def create_volume_highlight(comparison: VolumeComparison) -> WorkoutHighlight:
    return WorkoutHighlight(
        type=HighlightType.VOLUME_INCREASE,
        emoji="📈",
        title="Volume Increase!",
        message=f"{_round_half_up(comparison.percentage_increase)}% more volume vs last time",
    )


def create_streak_highlight(streak: int) -> WorkoutHighlight:
    week_count = streak // 7
    day_count = streak % 7

    if week_count > 0:
        message = f"{week_count}-week streak!"
    else:
        message = f"{day_count}-day streak!"

    return WorkoutHighlight(
        type=HighlightType.STREAK,
        emoji="🔥",
        title="Consistency!",
        message=message,
    )


# =============================================================================
# Workout Highlights Service
# =============================================================================


class WorkoutHighlightsService:
    """
    Service computing post-workout highlights.

    Holds only the history provider and thresholds; every call works on a
    freshly fetched history snapshot, so repeated calls with the same
    inputs return the same highlights.
    """

    def __init__(
        self,
        history_provider: SessionHistoryProvider,
        *,
        recent_limit: int = DEFAULT_RECENT_LIMIT,
        streak_limit: int = DEFAULT_STREAK_LIMIT,
        streak_window_days: int = DEFAULT_STREAK_WINDOW_DAYS,
        volume_threshold_percent: float = DEFAULT_VOLUME_THRESHOLD_PERCENT,
    ):
        """
        Initialize the highlights service.

        Args:
            history_provider: Read-only source of past sessions and best weights
            recent_limit: Sessions fetched for volume and weight comparisons
            streak_limit: Sessions fetched for the streak
            streak_window_days: Max days from the current session to extend a streak
            volume_threshold_percent: Volume increase that must be exceeded
        """
        self._history = history_provider
        self._recent_limit = recent_limit
        self._streak_limit = streak_limit
        self._streak_window_days = streak_window_days
        self._volume_threshold_percent = volume_threshold_percent

    async def calculate_workout_highlights(
        self,
        session: WorkoutSession,
    ) -> List[WorkoutHighlight]:
        """
        Calculate all highlights for a completed session.

        History is fetched concurrently; a failing provider call propagates
        to the caller unchanged.

        Returns:
            Highlights ordered as: personal records, volume increase,
            streak, weight increases
        """
        best_weights, recent_sessions, streak_sessions = await asyncio.gather(
            self._history.get_exercise_best_weights(),
            self._history.get_recent_sessions(self._recent_limit),
            self._history.get_recent_sessions(self._streak_limit),
        )

        highlights: List[WorkoutHighlight] = []

        prs = detect_personal_records(session, best_weights)
        highlights.extend(create_pr_highlight(pr) for pr in prs)

        volume_comparison = calculate_volume_improvement(
            session,
            recent_sessions,
            self._volume_threshold_percent,
        )
        if volume_comparison is not None:
            highlights.append(create_volume_highlight(volume_comparison))

        streak = calculate_workout_streak(session, streak_sessions, self._streak_window_days)
        if streak is not None and streak >= MIN_STREAK_FOR_HIGHLIGHT:
            highlights.append(create_streak_highlight(streak))

        increases = detect_weight_increases(session, recent_sessions)
        highlights.extend(create_weight_increase_highlight(inc) for inc in increases)

        logger.debug(
            f"Session {session.id}: {len(prs)} PRs, "
            f"volume={volume_comparison is not None}, streak={streak}, "
            f"{len(increases)} weight increases"
        )
        logger.info(f"Calculated {len(highlights)} highlights for session {session.id}")

        return highlights
