"""
Analytics router for barbell loading, superset order and workout highlights.

This router provides endpoints for:
- Plate breakdown for a target barbell weight
- Interleaved execution order of a superset
- Guided execution order of a whole session
- Post-workout highlights against a caller-supplied history snapshot
"""
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from api.deps import (
    HighlightsServiceFactory,
    get_barbell_classifier,
    get_highlights_service_factory,
    get_settings,
)
from application.ports import BarbellClassifier
from backend.core.plate_calculator import (
    calculate_plates,
    format_complete_plate_setup,
    format_plate_breakdown,
)
from backend.core.superset_sequencer import (
    InterleavedSet,
    build_session_execution_order,
    interleave_superset_sets,
)
from backend.settings import Settings
from domain.models import (
    PlateBreakdown,
    SessionExercise,
    WeightRecord,
    WeightUnit,
    WorkoutHighlight,
    WorkoutSession,
)
from infrastructure.history import InMemorySessionHistory


router = APIRouter(
    prefix="/analytics",
    tags=["Analytics"],
)


# =============================================================================
# Request / Response Models
# =============================================================================


class PlateCalculationRequest(BaseModel):
    """Request body for the plate calculator."""
    total_weight: float = Field(
        ...,
        allow_inf_nan=False,
        description="Target total weight including the bar",
    )
    unit: Optional[WeightUnit] = Field(default=None, description="Defaults to the configured unit")
    bar_weight: Optional[float] = Field(
        default=None,
        ge=0,
        allow_inf_nan=False,
        description="Defaults to the configured bar",
    )
    exercise_name: Optional[str] = Field(default=None, description="Classify this exercise as barbell or not")
    equipment_type: Optional[str] = None


class PlateCalculationResponse(BaseModel):
    """Plate breakdown with display strings."""
    breakdown: PlateBreakdown
    formatted: str
    formatted_setup: str
    is_barbell: Optional[bool] = None


class InterleaveRequest(BaseModel):
    """Exercises of one superset, in the order they are performed."""
    exercises: List[SessionExercise] = Field(default_factory=list)


class SessionOrderRequest(BaseModel):
    session: WorkoutSession


class ExecutionStep(BaseModel):
    """One set in the execution order."""
    exercise_id: str
    exercise_name: str
    set_id: str
    set_index: int


class ExecutionOrderResponse(BaseModel):
    steps: List[ExecutionStep]
    total: int


class HistorySnapshot(BaseModel):
    """History the caller already holds; served to the highlight engine as-is."""
    best_weights: Optional[Dict[str, WeightRecord]] = Field(
        default=None,
        description="All-time best per exercise; aggregated from recent_sessions when omitted",
    )
    recent_sessions: List[WorkoutSession] = Field(default_factory=list)


class HighlightsRequest(BaseModel):
    session: WorkoutSession
    history: HistorySnapshot = Field(default_factory=HistorySnapshot)


class HighlightsResponse(BaseModel):
    highlights: List[WorkoutHighlight]
    total: int


def _to_execution_order(steps: List[InterleavedSet]) -> ExecutionOrderResponse:
    return ExecutionOrderResponse(
        steps=[
            ExecutionStep(
                exercise_id=step.exercise.id,
                exercise_name=step.exercise.exercise_name,
                set_id=step.set.id,
                set_index=step.set_index,
            )
            for step in steps
        ],
        total=len(steps),
    )


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/plates", response_model=PlateCalculationResponse)
def calculate_plate_breakdown(
    request: PlateCalculationRequest,
    settings: Settings = Depends(get_settings),
    classifier: BarbellClassifier = Depends(get_barbell_classifier),
) -> PlateCalculationResponse:
    """
    Calculate the plates to load on each side of the bar.

    Targets below the bar weight return an unachievable breakdown rather
    than an error.
    """
    unit = request.unit or settings.default_weight_unit
    bar_weight = (
        request.bar_weight
        if request.bar_weight is not None
        else settings.default_bar_weight(unit)
    )

    breakdown = calculate_plates(request.total_weight, unit, bar_weight)

    is_barbell = None
    if request.exercise_name:
        is_barbell = classifier.is_barbell_exercise(
            request.exercise_name,
            request.equipment_type,
        )

    return PlateCalculationResponse(
        breakdown=breakdown,
        formatted=format_plate_breakdown(breakdown),
        formatted_setup=format_complete_plate_setup(breakdown),
        is_barbell=is_barbell,
    )


@router.post("/supersets/interleave", response_model=ExecutionOrderResponse)
def interleave_superset(request: InterleaveRequest) -> ExecutionOrderResponse:
    """Get the round-robin set order of a superset (A1, B1, A2, B2, ...)."""
    return _to_execution_order(interleave_superset_sets(request.exercises))


@router.post("/sessions/order", response_model=ExecutionOrderResponse)
def session_execution_order(request: SessionOrderRequest) -> ExecutionOrderResponse:
    """Get the guided execution order of a whole session, supersets interleaved."""
    return _to_execution_order(build_session_execution_order(request.session))


@router.post("/highlights", response_model=HighlightsResponse)
async def calculate_highlights(
    request: HighlightsRequest,
    service_factory: HighlightsServiceFactory = Depends(get_highlights_service_factory),
) -> HighlightsResponse:
    """
    Calculate post-workout highlights for a completed session.

    The caller sends the history snapshot along with the session; nothing
    is read from or written to storage.
    """
    history = InMemorySessionHistory(
        sessions=request.history.recent_sessions,
        best_weights=request.history.best_weights,
    )
    service = service_factory(history)

    highlights = await service.calculate_workout_highlights(request.session)

    return HighlightsResponse(highlights=highlights, total=len(highlights))
