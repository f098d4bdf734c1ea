"""Analysis orchestrator — one resolved scenario in, one ``AnalysisResult`` out.

Data flows one way:

  resolved scenario
    → fleet profile
    → task costs, fuel, reliability          (independent of each other)
    → downtime, staffing, replacements, ancillary categories
    → projection + TCO summary

Entry point: ``run_analysis(resolved)``.  Everything below it is pure, so
two runs over equal inputs return equal results.
"""

from __future__ import annotations

import logging

from fleet_tco.config.equipment import FleetUnit
from fleet_tco.config.lifecycle import ComponentLifecycle
from fleet_tco.config.pricing import PriceList
from fleet_tco.config.rates import SkillTier
from fleet_tco.config.scenario import ResolvedScenario
from fleet_tco.engine.cost_categories import build_cost_breakdown, compute_extended_costs
from fleet_tco.engine.derived import compute_fleet_profile
from fleet_tco.engine.downtime import estimate_downtime_cost
from fleet_tco.engine.fuel import estimate_fuel_cost
from fleet_tco.engine.projection import build_projection
from fleet_tco.engine.reliability import failure_curve, optimal_replacement_interval
from fleet_tco.engine.replacement import schedule_component_replacements
from fleet_tco.engine.staffing import plan_staffing
from fleet_tco.engine.task_cost import compute_task_costs
from fleet_tco.errors import ReliabilityDomainError, ScenarioConfigurationError
from fleet_tco.models.results import (
    AnalysisResult,
    AnalysisWarning,
    ComponentReliability,
    TaskCostSummary,
    UnpricedPart,
)

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# Validation
# ═══════════════════════════════════════════════════════════════════════════

def validate_resolved_scenario(resolved: ResolvedScenario) -> None:
    """Raise ``ScenarioConfigurationError`` listing every reason the run cannot start."""
    scenario = resolved.scenario
    problems: list[str] = []

    if resolved.fleet is None:
        problems.append("Scenario has no fleet configured")
    elif not resolved.fleet.units:
        problems.append(f"Fleet '{resolved.fleet.name}' has no units")
    if resolved.pm_schedule is None:
        problems.append("Scenario has no PM schedule configured")
    if resolved.price_list is None:
        problems.append("Scenario has no price list configured")

    if problems:
        raise ScenarioConfigurationError(problems, scenario_id=scenario.id)


# ═══════════════════════════════════════════════════════════════════════════
# Public entry point
# ═══════════════════════════════════════════════════════════════════════════

def run_analysis(resolved: ResolvedScenario) -> AnalysisResult:
    """Run the full PM / TCO analysis for one resolved scenario.

    Raises ``ScenarioConfigurationError`` when the scenario is not runnable.
    Reliability domain errors and unpriced parts do not stop the run; they
    are reported in ``warnings``.
    """
    validate_resolved_scenario(resolved)

    scenario = resolved.scenario
    fleet_units = resolved.fleet.units
    price_list = resolved.price_list
    rates = scenario.labor_rates.as_table()
    specialist_rate = rates[SkillTier.SPECIALIST]
    period = scenario.analysis_period_years

    logger.debug("Running analysis for scenario %r (%d fleet unit groups)", scenario.name, len(fleet_units))

    # --- Fleet aggregates ---
    fleet = compute_fleet_profile(fleet_units)

    # --- Independent sub-engines ---
    maintenance = compute_task_costs(
        resolved.pm_schedule.tasks,
        fleet,
        rates,
        scenario.parts_discount_pct,
        scenario.overhead_markup_pct,
        price_list,
    )
    fuel = estimate_fuel_cost(fleet_units, scenario.fuel_cost_per_unit, scenario.include_fuel_costs)
    reliability, reliability_warnings = _component_reliability(
        resolved.component_lifecycles, fleet_units, specialist_rate, price_list, scenario.parts_discount_pct,
    )

    # --- Dependent sub-engines ---
    downtime = estimate_downtime_cost(
        maintenance, scenario.downtime_cost_per_hour, scenario.include_downtime_costs,
    )
    staffing = plan_staffing(
        maintenance.total_annual_labor_hours,
        fleet_units,
        scenario.working_days_per_year,
        scenario.hours_per_day,
        scenario.target_utilization,
        fleet.longest_commissioning_months,
    )
    replacements = schedule_component_replacements(
        resolved.component_lifecycles,
        fleet_units,
        period,
        specialist_rate,
        scenario.inflation_rate,
        price_list,
        scenario.parts_discount_pct,
    )
    extended = compute_extended_costs(scenario.extended_costs, fleet, staffing.technicians_needed)

    # --- Projection ---
    projection, tco = build_projection(
        maintenance, fuel, downtime, extended, replacements, staffing,
        fleet, fleet_units, period, scenario.inflation_rate, scenario.discount_rate,
    )

    unpriced = maintenance.unpriced_parts + replacements.unpriced_parts
    warnings = reliability_warnings + _pricing_warnings(unpriced) + _schedule_warnings(maintenance)

    logger.debug(
        "Scenario %r: NPV %.2f over %d years, %d warning(s)",
        scenario.name, tco.total_npv, period, len(warnings),
    )

    return AnalysisResult(
        scenario_id=scenario.id,
        scenario_name=scenario.name,
        fleet_name=resolved.fleet.name,
        fleet=fleet,
        maintenance=maintenance,
        staffing=staffing,
        fuel=fuel,
        downtime=downtime,
        extended_costs=extended,
        cost_breakdown=build_cost_breakdown(maintenance, fuel, downtime, extended),
        component_replacements=replacements,
        reliability=reliability,
        projection=projection,
        tco=tco,
        unpriced_parts=unpriced,
        warnings=warnings,
    )


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _component_reliability(
    lifecycles: list[ComponentLifecycle],
    fleet_units: list[FleetUnit],
    specialist_rate: float,
    price_list: PriceList | None,
    parts_discount_pct: float,
) -> tuple[list[ComponentReliability], list[AnalysisWarning]]:
    """Weibull model of every component whose equipment model is in the fleet."""
    model_ids = {u.equipment_model_id for u in fleet_units}
    discount = parts_discount_pct / 100.0

    rows: list[ComponentReliability] = []
    warnings: list[AnalysisWarning] = []
    for lifecycle in lifecycles:
        if lifecycle.equipment_model_id not in model_ids:
            continue

        part_price = price_list.unit_price(lifecycle.catalog_key) if price_list else None
        planned_cost = (
            lifecycle.replacement_labor_hours * specialist_rate
            + (part_price or 0.0) * (1.0 - discount)
        )
        try:
            curve = failure_curve(
                lifecycle.expected_life_hours, lifecycle.shape, scale=lifecycle.weibull_scale,
            )
            interval = optimal_replacement_interval(
                lifecycle.expected_life_hours, lifecycle.shape, planned_cost, scale=lifecycle.weibull_scale,
            )
        except ReliabilityDomainError as exc:
            logger.warning("Skipping reliability model for %r: %s", lifecycle.component_name, exc)
            warnings.append(AnalysisWarning(
                kind="reliability_domain",
                subject=lifecycle.component_name,
                message=str(exc),
            ))
            continue

        rows.append(ComponentReliability(
            component_name=lifecycle.component_name,
            equipment_model_id=lifecycle.equipment_model_id,
            category=lifecycle.category,
            parameters=curve.parameters,
            optimal_interval=interval,
            failure_curve=curve.points,
        ))
    return rows, warnings


def _pricing_warnings(unpriced: list[UnpricedPart]) -> list[AnalysisWarning]:
    return [
        AnalysisWarning(
            kind="unpriced_part",
            subject=part.part_number or part.used_by,
            message=f"No price for part {part.part_number!r} used by {part.used_by!r}; costed at 0",
        )
        for part in unpriced
    ]


def _schedule_warnings(maintenance: TaskCostSummary) -> list[AnalysisWarning]:
    return [
        AnalysisWarning(
            kind="unscheduled_task",
            subject=row.task_name,
            message=f"Task {row.task_name!r} has no interval and is not one-time; no services counted",
        )
        for row in maintenance.rows
        if row.recurrence == "unscheduled" and row.status == "active"
    ]
