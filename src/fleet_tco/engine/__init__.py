"""Engine — reliability, cost, staffing and projection logic."""

from fleet_tco.engine.derived import compute_fleet_profile
from fleet_tco.engine.reliability import (
    failure_curve,
    lanczos_gamma,
    optimal_replacement_interval,
    replacement_schedule,
)
from fleet_tco.engine.task_cost import compute_task_costs
from fleet_tco.engine.staffing import plan_staffing
from fleet_tco.engine.fuel import estimate_fuel_cost
from fleet_tco.engine.downtime import estimate_downtime_cost
from fleet_tco.engine.replacement import schedule_component_replacements
from fleet_tco.engine.cost_categories import build_cost_breakdown, compute_extended_costs
from fleet_tco.engine.projection import build_projection
from fleet_tco.engine.orchestrator import run_analysis, validate_resolved_scenario
from fleet_tco.engine.comparison import ScenarioResolver, compare_scenarios, rank_comparison

__all__ = [
    "compute_fleet_profile",
    "lanczos_gamma",
    "failure_curve",
    "optimal_replacement_interval",
    "replacement_schedule",
    "compute_task_costs",
    "plan_staffing",
    "estimate_fuel_cost",
    "estimate_downtime_cost",
    "schedule_component_replacements",
    "compute_extended_costs",
    "build_cost_breakdown",
    "build_projection",
    # Orchestration
    "run_analysis",
    "validate_resolved_scenario",
    "ScenarioResolver",
    "compare_scenarios",
    "rank_comparison",
]
