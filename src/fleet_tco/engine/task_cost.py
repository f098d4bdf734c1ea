"""PM task costs — annualized labor and parts per task across the fleet.

Services per year, by recurrence:

  one-time   : total_units                              (once per unit, at commissioning)
  hours      : total_units × avg_annual_hours / interval_hours
  calendar   : total_units × 12 / interval_months

  labor cost = services × labor_hours × rate(skill tier)
  parts cost = services × Σ(non-optional unit price × qty × (1 − discount))

Overhead markup is applied once to the fleet-wide labor + parts total.
Disabled and automated tasks stay in the breakdown at zero cost.
"""

from __future__ import annotations

from collections.abc import Mapping

from fleet_tco.config.maintenance import PMTask, TaskPart
from fleet_tco.config.pricing import PriceList
from fleet_tco.config.rates import SkillTier
from fleet_tco.errors import UnrecognizedSkillTierError
from fleet_tco.models.results import FleetProfile, TaskCostRow, TaskCostSummary, UnpricedPart


def services_per_year(task: PMTask, total_units: int, avg_annual_hours: float) -> tuple[float, str]:
    """Annual service count and the recurrence rule that produced it."""
    if task.is_one_time:
        return float(total_units), "one_time"
    if task.interval_hours:
        return total_units * avg_annual_hours / task.interval_hours, "hours"
    if task.interval_months:
        return total_units * (12.0 / task.interval_months), "calendar"
    return 0.0, "unscheduled"


def resolve_part_price(part: TaskPart, price_list: PriceList | None) -> float | None:
    """Unit list price of a task part, or ``None`` when unpriced."""
    if part.unit_price is not None:
        return part.unit_price
    if price_list is None:
        return None
    return price_list.unit_price(part.part_number)


def _labor_rate(rates: Mapping[SkillTier, float], tier: SkillTier) -> float:
    try:
        return rates[tier]
    except KeyError:
        raise UnrecognizedSkillTierError(tier) from None


def _zero_row(task: PMTask, status: str, recurrence: str, rate: float) -> TaskCostRow:
    return TaskCostRow(
        task_id=task.id,
        task_name=task.name,
        status=status,
        recurrence=recurrence,
        skill_level=task.skill_level.value,
        interval_hours=task.interval_hours,
        interval_months=task.interval_months,
        is_one_time=task.is_one_time,
        services_per_year=0.0,
        labor_hours_per_service=task.labor_hours,
        labor_hours_per_year=0.0,
        labor_rate=rate,
        labor_cost_per_year=0.0,
        parts_cost_per_service=0.0,
        parts_cost_per_year=0.0,
        total_cost_per_year=0.0,
        pct_of_workload=0.0,
    )


def compute_task_costs(
    tasks: list[PMTask],
    fleet: FleetProfile,
    rates: Mapping[SkillTier, float],
    parts_discount_pct: float,
    overhead_markup_pct: float,
    price_list: PriceList | None = None,
) -> TaskCostSummary:
    """Cost every PM task for the whole fleet and total them.

    Workload shares are filled in a second pass, once the fleet-wide labor
    total is known.
    """
    discount = parts_discount_pct / 100.0
    markup = overhead_markup_pct / 100.0

    # ── Pass 1: per-task services, hours and cost ─────────────────────
    rows: list[TaskCostRow] = []
    unpriced: list[UnpricedPart] = []
    labor_hours_by_row: list[float] = []

    total_services = 0.0
    total_labor_hours = 0.0
    recurring_labor_hours = 0.0
    total_labor_cost = 0.0
    total_parts_cost = 0.0
    one_time_cost = 0.0

    for task in tasks:
        rate = _labor_rate(rates, task.skill_level)
        services, recurrence = services_per_year(task, fleet.total_units, fleet.avg_annual_hours)

        if task.is_automated or not task.enabled:
            status = "automated" if task.is_automated else "disabled"
            rows.append(_zero_row(task, status, recurrence, rate))
            labor_hours_by_row.append(0.0)
            continue

        parts_per_service = 0.0
        missing: list[str] = []
        for part in task.parts:
            if part.is_optional:
                continue
            unit_price = resolve_part_price(part, price_list)
            if unit_price is None:
                missing.append(part.part_number or "")
                unpriced.append(UnpricedPart(part_number=part.part_number, used_by=task.name, source="task"))
                continue
            parts_per_service += unit_price * part.quantity * (1.0 - discount)

        labor_hours = services * task.labor_hours
        labor_cost = labor_hours * rate
        parts_cost = services * parts_per_service

        total_services += services
        total_labor_hours += labor_hours
        total_labor_cost += labor_cost
        total_parts_cost += parts_cost
        if recurrence == "one_time":
            one_time_cost += labor_cost + parts_cost
        else:
            recurring_labor_hours += labor_hours

        labor_hours_by_row.append(labor_hours)
        rows.append(TaskCostRow(
            task_id=task.id,
            task_name=task.name,
            status="active",
            recurrence=recurrence,
            skill_level=task.skill_level.value,
            interval_hours=task.interval_hours,
            interval_months=task.interval_months,
            is_one_time=task.is_one_time,
            services_per_year=round(services, 4),
            labor_hours_per_service=task.labor_hours,
            labor_hours_per_year=round(labor_hours, 2),
            labor_rate=rate,
            labor_cost_per_year=round(labor_cost, 2),
            parts_cost_per_service=round(parts_per_service, 2),
            parts_cost_per_year=round(parts_cost, 2),
            total_cost_per_year=round(labor_cost + parts_cost, 2),
            pct_of_workload=0.0,
            unpriced_parts=missing,
        ))

    # ── Pass 2: workload shares against the finished total ────────────
    if total_labor_hours > 0:
        rows = [
            row.model_copy(update={"pct_of_workload": round(hours / total_labor_hours * 100.0, 2)})
            for row, hours in zip(rows, labor_hours_by_row)
        ]

    # ── Overhead on the aggregate ─────────────────────────────────────
    base = total_labor_cost + total_parts_cost
    overhead = base * markup

    return TaskCostSummary(
        rows=rows,
        total_annual_services=round(total_services, 4),
        total_annual_labor_hours=total_labor_hours,
        recurring_labor_hours=recurring_labor_hours,
        annual_labor_cost=round(total_labor_cost, 2),
        annual_parts_cost=round(total_parts_cost, 2),
        annual_overhead=round(overhead, 2),
        overhead_markup_pct=overhead_markup_pct,
        annual_maintenance_cost=round(base + overhead, 2),
        one_time_cost=round(one_time_cost, 2),
        one_time_cost_with_overhead=round(one_time_cost * (1.0 + markup), 2),
        unpriced_parts=unpriced,
    )
