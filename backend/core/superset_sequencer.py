"""
Superset sequencing for guided workout sessions.

A superset is two or more exercises performed back-to-back, so their sets
are interleaved instead of finishing one exercise at a time:

    A(3 sets), B(3 sets)  ->  A1, B1, A2, B2, A3, B3

This module also groups a session's exercises into supersets and single
exercises, and flattens the whole session into the order the guided
session UI walks through one set at a time.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Set

from domain.models.session import GroupType, SessionExercise, SessionSet, WorkoutSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InterleavedSet:
    """One step of a guided session: a set and the exercise it belongs to."""
    exercise: SessionExercise
    set: SessionSet
    set_index: int


class ExerciseGroupType(str, Enum):
    SUPERSET = "superset"
    SINGLE = "single"


@dataclass
class ExerciseGroup:
    """Exercises performed together, in the order they were supplied."""
    type: ExerciseGroupType
    exercises: List[SessionExercise] = field(default_factory=list)
    group_name: Optional[str] = None
    section_name: Optional[str] = None


# =============================================================================
# Interleaving
# =============================================================================


def interleave_superset_sets(exercises: Sequence[SessionExercise]) -> List[InterleavedSet]:
    """
    Interleave the sets of a superset round by round.

    Exercises with fewer sets stop contributing once their own sets run
    out; nothing is padded or repeated. Within a round, exercises keep the
    order they were supplied in.

    Args:
        exercises: Exercises of one superset group

    Returns:
        Flat execution order, e.g. A1, B1, A2, B2, A3
    """
    max_sets = max((len(exercise.sets) for exercise in exercises), default=0)

    interleaved: List[InterleavedSet] = []
    for set_index in range(max_sets):
        for exercise in exercises:
            if set_index < len(exercise.sets):
                interleaved.append(InterleavedSet(
                    exercise=exercise,
                    set=exercise.sets[set_index],
                    set_index=set_index,
                ))

    return interleaved


# =============================================================================
# Session Grouping
# =============================================================================


def group_session_exercises(session: WorkoutSession) -> List[ExerciseGroup]:
    """
    Split a session into superset groups and single exercises.

    - A section header (section type, no parent, no sets) names the
      section for the exercises that follow it.
    - A superset header (superset type, no sets) collects every exercise
      whose parent_exercise_id points at it.
    - Everything else is a single-exercise group.
    """
    exercises = session.exercises
    by_id: Dict[str, SessionExercise] = {exercise.id: exercise for exercise in exercises}
    processed: Set[str] = set()
    groups: List[ExerciseGroup] = []
    current_section: Optional[str] = None

    for exercise in exercises:
        if exercise.id in processed:
            continue

        if (
            exercise.group_type == GroupType.SECTION
            and not exercise.parent_exercise_id
            and not exercise.sets
        ):
            processed.add(exercise.id)
            current_section = exercise.group_name or exercise.exercise_name
            continue

        if exercise.group_type == GroupType.SUPERSET and not exercise.sets:
            children = [ex for ex in exercises if ex.parent_exercise_id == exercise.id]
            processed.add(exercise.id)
            processed.update(child.id for child in children)

            if children:
                groups.append(ExerciseGroup(
                    type=ExerciseGroupType.SUPERSET,
                    exercises=children,
                    group_name=exercise.group_name or exercise.exercise_name,
                    section_name=current_section,
                ))
            else:
                logger.debug(f"Superset '{exercise.exercise_name}' has no exercises")
            continue

        if exercise.parent_exercise_id:
            parent = by_id.get(exercise.parent_exercise_id)
            if parent is None:
                logger.warning(
                    f"Exercise '{exercise.exercise_name}' references missing parent "
                    f"{exercise.parent_exercise_id}; treating it as a single exercise"
                )
            elif parent.group_type == GroupType.SUPERSET:
                # Picked up when its superset header is reached
                continue

        processed.add(exercise.id)
        groups.append(ExerciseGroup(
            type=ExerciseGroupType.SINGLE,
            exercises=[exercise],
            section_name=(
                exercise.group_name
                if exercise.group_type == GroupType.SECTION
                else current_section
            ),
        ))

    return groups


def build_session_execution_order(session: WorkoutSession) -> List[InterleavedSet]:
    """
    Flatten a whole session into the order sets are performed.

    Superset groups are interleaved; single exercises run their sets in
    order.
    """
    order: List[InterleavedSet] = []

    for group in group_session_exercises(session):
        if group.type == ExerciseGroupType.SUPERSET:
            order.extend(interleave_superset_sets(group.exercises))
            continue

        for exercise in group.exercises:
            for set_index, session_set in enumerate(exercise.sets):
                order.append(InterleavedSet(
                    exercise=exercise,
                    set=session_set,
                    set_index=set_index,
                ))

    return order
