"""Downtime — cost of units taken out of service for planned maintenance.

Each recurring service keeps a unit down for its labor time plus setup,
teardown and test, taken as 1.5 × labor hours.  One-time commissioning work
happens before the unit earns anything and is excluded.

  downtime hours = recurring PM labor hours × 1.5
  annual cost    = downtime hours × downtime cost per hour
"""

from __future__ import annotations

from fleet_tco.models.results import DowntimeSummary, TaskCostSummary

DOWNTIME_PER_LABOR_HOUR = 1.5


def estimate_downtime_cost(
    task_costs: TaskCostSummary,
    downtime_cost_per_hour: float,
    enabled: bool = True,
) -> DowntimeSummary:
    if not enabled:
        return DowntimeSummary(
            enabled=False,
            downtime_cost_per_hour=downtime_cost_per_hour,
            downtime_hours=0.0,
            annual_downtime_cost=0.0,
        )

    hours = task_costs.recurring_labor_hours * DOWNTIME_PER_LABOR_HOUR
    return DowntimeSummary(
        enabled=True,
        downtime_cost_per_hour=downtime_cost_per_hour,
        downtime_hours=round(hours, 2),
        annual_downtime_cost=round(hours * downtime_cost_per_hour, 2),
    )
