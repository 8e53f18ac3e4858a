"""
Planning pipeline graph construction.

Builds the graph that gates planning on validation:
    validate -> plan -> estimate -> complete

Nodes call the component functions directly and store their outputs as
plain dicts in the pipeline state.
"""

import logging
import uuid
from typing import Any, Dict, Optional

from langgraph.graph import StateGraph, END

from planning.estimation import apply_travel_style_adjustments, estimate_costs
from planning.graph.config import DEFAULT_CONFIG, PipelineConfig
from planning.graph.router import route_next_stage
from planning.graph.state import PipelineState
from planning.planner import plan_trip
from planning.shared.clock import Clock, SYSTEM_CLOCK
from planning.shared.contracts.trip_plan import TripPlan
from planning.shared.logging import log_pipeline_event
from planning.shared.schemas.inputs import (
    LocationData,
    TravelInputData,
    TravelPreferences,
    TripData,
)
from planning.validation import analyze_travel_input, generate_follow_up_questions


logger = logging.getLogger(__name__)

_ROUTES = {
    "validate_node": "validate_node",
    "plan_node": "plan_node",
    "estimate_node": "estimate_node",
    "complete": "complete",
}


def _failure(stage: str, error: Exception) -> Dict[str, Any]:
    return {
        "current_stage": f"{stage}_failed",
        "errors": [f"{stage.capitalize()} stage error: {error}"],
        "messages": [
            {
                "role": "system",
                "stage": "pipeline",
                "content": f"{stage.capitalize()} stage failed: {error}",
            }
        ],
    }


def _validate_node(state: PipelineState, clock: Clock) -> Dict[str, Any]:
    """
    Validate and analyze the raw travel input.

    Args:
        state: Current pipeline state
        clock: Source of "today" for date checks

    Returns:
        State updates with validation, score, incompleteness and questions
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=pipeline] [node=validate] "

    try:
        travel_input = TravelInputData.model_validate(state["travel_input"])
        logger.info(
            f"{_log}Entering node | destinations={len(travel_input.destinations)}, "
            f"experiences={len(travel_input.experiences)}"
        )

        analysis = analyze_travel_input(travel_input, clock)
        questions = generate_follow_up_questions(travel_input)
    except Exception as e:
        logger.exception(f"{_log}Validation failed: {e}")
        return _failure("validation", e)

    validation = analysis.validation
    logger.info(
        f"{_log}Validation complete | valid={validation.is_valid}, "
        f"errors={len(validation.errors)}, warnings={len(validation.warnings)}, "
        f"score={analysis.completeness_score}, questions={len(questions)}"
    )

    updates = {
        "validation": validation.model_dump(mode="json"),
        "completeness_score": analysis.completeness_score,
        "incomplete_analysis": analysis.incomplete_analysis.model_dump(mode="json"),
        "follow_up_questions": [q.model_dump(mode="json") for q in questions],
        "normalized_input": analysis.normalized.model_dump(mode="json")
        if analysis.normalized
        else None,
        "current_stage": "validation_complete",
        "messages": [
            {
                "role": "system",
                "stage": "validate",
                "content": (
                    f"Input {'valid' if validation.is_valid else 'invalid'}: "
                    f"{len(validation.errors)} errors, {len(validation.warnings)} warnings, "
                    f"completeness {analysis.completeness_score}/100"
                ),
            }
        ],
    }
    log_pipeline_event("validation_complete", {**state, **updates})
    return updates


def _planning_preferences(travel_input: TravelInputData) -> TravelPreferences:
    """Preferences for planning; requested experiences stand in for missing interests."""
    preferences = travel_input.preferences or TravelPreferences()
    if not preferences.interests and travel_input.experiences:
        preferences = preferences.model_copy(
            update={"interests": list(travel_input.experiences)}
        )
    return preferences


def _plan_node(state: PipelineState, clock: Clock) -> Dict[str, Any]:
    """
    Plan the trip from the normalized input.

    Args:
        state: Current pipeline state
        clock: Source for cost timestamps

    Returns:
        State updates with trip_plan
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=pipeline] [node=plan] "

    try:
        travel_input = TravelInputData.model_validate(state["normalized_input"])
        logger.info(f"{_log}Entering node | destinations={travel_input.destinations}")
        plan = plan_trip(travel_input.destinations, _planning_preferences(travel_input), clock=clock)
    except Exception as e:
        logger.exception(f"{_log}Planning failed: {e}")
        return _failure("planning", e)

    updates = {
        "trip_plan": plan.model_dump(mode="json"),
        "current_stage": "plan_complete",
        "messages": [
            {
                "role": "system",
                "stage": "plan",
                "content": (
                    f"Planned {len(plan.destinations)} destinations over "
                    f"{plan.total_duration} days: {' -> '.join(plan.suggested_route)}"
                ),
            }
        ],
    }
    log_pipeline_event("plan_complete", {**state, **updates})
    return updates


def _estimate_node(
    state: PipelineState,
    clock: Clock,
    config: PipelineConfig,
) -> Dict[str, Any]:
    """
    Estimate round-trip costs from the home location along the planned route.

    Args:
        state: Current pipeline state
        clock: Source for ``last_updated``
        config: Pipeline configuration

    Returns:
        State updates with cost_estimate
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=pipeline] [node=estimate] "

    try:
        travel_input = TravelInputData.model_validate(state["normalized_input"])
        plan = TripPlan.model_validate(state["trip_plan"])
        home = LocationData.model_validate(state["home_location"])
        preferences = travel_input.preferences or TravelPreferences()

        trip = TripData(
            destinations=plan.suggested_route,
            experiences=travel_input.experiences,
            duration=plan.total_duration,
            travelers=preferences.group_size or 1,
        )
        logger.info(
            f"{_log}Entering node | home={home.label}, duration={trip.duration}d, "
            f"style={preferences.travel_style or 'mid-range'}"
        )

        estimate = estimate_costs(trip, home, clock=clock)
        if config.apply_travel_style:
            estimate = apply_travel_style_adjustments(estimate, preferences.travel_style)
    except Exception as e:
        logger.exception(f"{_log}Estimation failed: {e}")
        return _failure("estimation", e)

    updates = {
        "cost_estimate": estimate.model_dump(mode="json"),
        "current_stage": "estimate_complete",
        "messages": [
            {
                "role": "system",
                "stage": "estimate",
                "content": (
                    f"Estimated {estimate.total.min:.0f}-{estimate.total.max:.0f} "
                    f"{estimate.currency} from {home.label}"
                ),
            }
        ],
    }
    log_pipeline_event("estimate_complete", {**state, **updates})
    return updates


def _complete_node(state: PipelineState) -> Dict[str, Any]:
    """
    Final node that marks the pipeline as complete.

    Args:
        state: Current pipeline state

    Returns:
        Completion tracking message
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=pipeline] [node=complete] "

    validation = state.get("validation") or {}
    has_plan = state.get("trip_plan") is not None
    has_estimate = state.get("cost_estimate") is not None
    num_errors = len(state.get("errors", []))

    logger.info(
        f"{_log}Pipeline complete | valid={validation.get('is_valid')}, "
        f"plan={'done' if has_plan else 'MISSING'}, "
        f"estimate={'done' if has_estimate else 'MISSING'}, "
        f"errors={num_errors} -> END"
    )

    return {
        "current_stage": "complete",
        "messages": [
            {
                "role": "system",
                "stage": "pipeline",
                "content": (
                    f"Pipeline complete. "
                    f"Plan: {'done' if has_plan else 'missing'}. "
                    f"Estimate: {'done' if has_estimate else 'missing'}."
                ),
            }
        ],
    }


def create_pipeline_graph(
    clock: Clock = SYSTEM_CLOCK,
    config: PipelineConfig = DEFAULT_CONFIG,
):
    """
    Create and compile the planning pipeline graph.

    The graph structure is:
        Entry -> route_next_stage
          -> "validate_node" -> validate -> route_next_stage
          -> "plan_node"     -> plan     -> route_next_stage
          -> "estimate_node" -> estimate -> route_next_stage
          -> "complete"      -> complete -> END

    Args:
        clock: Clock passed to every stage
        config: Pipeline configuration

    Returns:
        Compiled LangGraph application ready for execution.
    """
    graph = StateGraph(PipelineState)

    graph.add_node("validate_node", lambda state: _validate_node(state, clock))
    graph.add_node("plan_node", lambda state: _plan_node(state, clock))
    graph.add_node("estimate_node", lambda state: _estimate_node(state, clock, config))
    graph.add_node("complete", _complete_node)

    graph.set_conditional_entry_point(route_next_stage, _ROUTES)
    for node in ("validate_node", "plan_node", "estimate_node"):
        graph.add_conditional_edges(node, route_next_stage, _ROUTES)

    graph.add_edge("complete", END)

    return graph.compile()


def create_initial_state(
    travel_input: TravelInputData,
    home_location: Optional[LocationData] = None,
    session_id: Optional[str] = None,
) -> PipelineState:
    """
    Build the initial pipeline state for one request.

    The home location falls back to ``preferences.home_location``.
    """
    if home_location is None and travel_input.preferences is not None:
        home_location = travel_input.preferences.home_location

    return {
        "travel_input": travel_input.model_dump(mode="json"),
        "home_location": home_location.model_dump(mode="json") if home_location else None,
        "validation": None,
        "completeness_score": None,
        "incomplete_analysis": None,
        "follow_up_questions": None,
        "normalized_input": None,
        "trip_plan": None,
        "cost_estimate": None,
        "current_stage": "starting",
        "errors": [],
        "messages": [
            {
                "role": "system",
                "stage": "pipeline",
                "content": f"Pipeline started for {len(travel_input.destinations)} destinations",
            }
        ],
        "session_id": session_id or str(uuid.uuid4()),
    }


def run_pipeline(
    travel_input: TravelInputData,
    home_location: Optional[LocationData] = None,
    session_id: Optional[str] = None,
    clock: Clock = SYSTEM_CLOCK,
    config: PipelineConfig = DEFAULT_CONFIG,
) -> Dict[str, Any]:
    """
    Run the full pipeline for one travel input.

    Returns:
        Final pipeline state
    """
    graph = create_pipeline_graph(clock=clock, config=config)
    initial_state = create_initial_state(travel_input, home_location, session_id)
    return graph.invoke(initial_state, {"recursion_limit": config.recursion_limit})
