"""Multi-scenario comparison — side-by-side metrics and ranking.

Each scenario is resolved and analysed on its own; a scenario that cannot be
resolved or fails validation becomes a ``ScenarioError`` entry while the
others still compare.  For every tracked metric the best scenario is the
lowest value, except utilization where higher is better.  Ties go to the
scenario listed first.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import NamedTuple, Protocol

from pydantic import ValidationError

from fleet_tco.config.scenario import ResolvedScenario
from fleet_tco.engine.orchestrator import run_analysis
from fleet_tco.errors import ComparisonError, FleetTCOError
from fleet_tco.models.results import (
    AnalysisResult,
    ComparisonResult,
    LowestTCO,
    MetricBest,
    ScenarioError,
    ScenarioMetrics,
)

logger = logging.getLogger(__name__)


class ScenarioResolver(Protocol):
    """Data-access boundary: fetch a scenario with its fleet, schedule and catalog."""

    def resolve(self, scenario_id: int) -> ResolvedScenario | None:
        """Return the resolved scenario, or ``None`` if it does not exist."""
        ...


class MetricSpec(NamedTuple):
    label: str
    higher_is_better: bool = False


METRICS: dict[str, MetricSpec] = {
    "annual_maintenance_cost": MetricSpec("Annual Maintenance Cost"),
    "annual_labor_cost": MetricSpec("Annual Labor Cost"),
    "annual_parts_cost": MetricSpec("Annual Parts Cost"),
    "annual_fuel_cost": MetricSpec("Annual Fuel Cost"),
    "annual_downtime_cost": MetricSpec("Annual Downtime Cost"),
    "total_labor_hours": MetricSpec("Annual Labor Hours"),
    "cost_per_kwh": MetricSpec("Cost per kWh"),
    "cost_per_operating_hour": MetricSpec("Cost per Operating Hour"),
    "technicians_required": MetricSpec("Technicians Required"),
    "utilization": MetricSpec("Technician Utilization", higher_is_better=True),
    "tco_npv": MetricSpec("TCO (NPV)"),
    "tco_nominal": MetricSpec("TCO (Nominal)"),
    "average_annual_cost": MetricSpec("Average Annual Cost"),
}


def metrics_from_result(result: AnalysisResult) -> ScenarioMetrics:
    """Flatten an analysis result into one comparison-table row."""
    return ScenarioMetrics(
        scenario_id=result.scenario_id,
        scenario_name=result.scenario_name,
        total_units=result.fleet.total_units,
        total_kw=result.fleet.total_kw,
        annual_maintenance_cost=result.maintenance.annual_maintenance_cost,
        annual_labor_cost=result.maintenance.annual_labor_cost,
        annual_parts_cost=result.maintenance.annual_parts_cost,
        annual_fuel_cost=result.fuel.annual_fuel_cost,
        annual_downtime_cost=result.downtime.annual_downtime_cost,
        total_labor_hours=round(result.maintenance.total_annual_labor_hours, 2),
        cost_per_kwh=result.tco.cost_per_kwh,
        cost_per_operating_hour=result.tco.cost_per_operating_hour,
        technicians_required=result.staffing.technicians_needed,
        utilization=result.staffing.utilization_without_safety,
        tco_npv=result.tco.total_npv,
        tco_nominal=result.tco.total_nominal,
        average_annual_cost=result.tco.average_annual_cost,
    )


def rank_comparison(rows: list[ScenarioMetrics]) -> tuple[list[MetricBest], LowestTCO | None]:
    """Best scenario per metric, plus the lowest-NPV pointer.

    ``lowest_tco`` needs at least two rows; with one there is nothing to
    save against.
    """
    if not rows:
        return [], None

    best_by_metric: list[MetricBest] = []
    for metric, direction in METRICS.items():
        best = rows[0]
        for row in rows[1:]:
            value, current = getattr(row, metric), getattr(best, metric)
            if (value > current) if direction.higher_is_better else (value < current):
                best = row
        best_by_metric.append(MetricBest(
            metric=metric,
            label=direction.label,
            higher_is_better=direction.higher_is_better,
            scenario_id=best.scenario_id,
            scenario_name=best.scenario_name,
            value=getattr(best, metric),
        ))

    lowest_tco = None
    if len(rows) >= 2:
        cheapest = min(rows, key=lambda r: r.tco_npv)
        highest = max(r.tco_npv for r in rows)
        lowest_tco = LowestTCO(
            scenario_id=cheapest.scenario_id,
            scenario_name=cheapest.scenario_name,
            tco_npv=cheapest.tco_npv,
            savings_vs_highest=round(highest - cheapest.tco_npv, 2),
        )
    return best_by_metric, lowest_tco


def _analyse(scenario_id: int, resolver: ScenarioResolver) -> AnalysisResult | ScenarioError:
    try:
        resolved = resolver.resolve(scenario_id)
        if resolved is None:
            logger.warning("Scenario %s not found; excluded from comparison", scenario_id)
            return ScenarioError(scenario_id=scenario_id, error="Scenario not found")
        return run_analysis(resolved)
    except (FleetTCOError, ValidationError) as exc:
        logger.warning("Scenario %s excluded from comparison: %s", scenario_id, exc)
        return ScenarioError(scenario_id=scenario_id, error=str(exc))


def compare_scenarios(
    scenario_ids: list[int],
    resolver: ScenarioResolver,
    max_workers: int = 1,
) -> ComparisonResult:
    """Analyse two or more scenarios and rank them side by side.

    With ``max_workers > 1`` the analyses run in a thread pool; results keep
    the order of ``scenario_ids`` either way.
    """
    if len(scenario_ids) < 2:
        raise ComparisonError(f"At least 2 scenarios are required for comparison, got {len(scenario_ids)}")

    if max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            outcomes = list(executor.map(lambda sid: _analyse(sid, resolver), scenario_ids))
    else:
        outcomes = [_analyse(sid, resolver) for sid in scenario_ids]

    results = [o for o in outcomes if isinstance(o, AnalysisResult)]
    errors = [o for o in outcomes if isinstance(o, ScenarioError)]

    rows = [metrics_from_result(r) for r in results]
    best_by_metric, lowest_tco = rank_comparison(rows)

    logger.debug("Compared %d scenario(s), %d excluded", len(rows), len(errors))

    return ComparisonResult(
        scenarios=rows,
        best_by_metric=best_by_metric,
        lowest_tco=lowest_tco,
        full_results=results,
        errors=errors,
    )
