"""Component replacement scheduler — discrete wear-out replacements.

For every component lifecycle and every fleet unit group of the same
equipment model:

  years per replacement = life hours / annual hours
  event r lands in year ⌈years_per_replacement × r⌉

The horizon is exclusive: an event is scheduled only while
years_per_replacement × r < period, so a life ending exactly at the end of
the period schedules nothing.  ``reliability.replacement_schedule`` counts
the same boundary inclusively.

  cost per event (per unit) = labor hours × specialist rate + discounted part price
  inflated cost             = cost × (1 + inflation)^year
  event total               = inflated cost × quantity
"""

from __future__ import annotations

import math

from fleet_tco.config.equipment import FleetUnit
from fleet_tco.config.lifecycle import ComponentLifecycle
from fleet_tco.config.pricing import PriceList
from fleet_tco.finance.dcf import escalate
from fleet_tco.models.results import (
    ComponentReplacementPlan,
    ComponentReplacementRow,
    ReplacementEvent,
    ReplacementYearBucket,
    UnpricedPart,
)

_PRECISION = 9


def replacement_years(years_per_replacement: float, period_years: int) -> list[int]:
    """Years in which replacements 1, 2, … fall, within the exclusive horizon."""
    if years_per_replacement <= 0:
        return []

    years: list[int] = []
    r = 1
    while round(years_per_replacement * r, _PRECISION) < period_years:
        year = math.ceil(round(years_per_replacement * r, _PRECISION))
        if year > period_years:
            break
        years.append(year)
        r += 1
    return years


def schedule_component_replacements(
    lifecycles: list[ComponentLifecycle],
    fleet_units: list[FleetUnit],
    period_years: int,
    specialist_rate: float,
    inflation_rate: float,
    price_list: PriceList | None = None,
    parts_discount_pct: float = 0.0,
) -> ComponentReplacementPlan:
    """Build every replacement event over the period and bucket costs by year."""
    discount = parts_discount_pct / 100.0
    components: list[ComponentReplacementRow] = []
    unpriced: list[UnpricedPart] = []
    bucket_cost = [0.0] * (period_years + 1)
    bucket_events = [0] * (period_years + 1)
    total = 0.0

    for lifecycle in lifecycles:
        matching = [u for u in fleet_units if u.equipment_model_id == lifecycle.equipment_model_id]
        if not matching:
            continue

        part_price = price_list.unit_price(lifecycle.catalog_key) if price_list else None
        if part_price is None:
            unpriced.append(UnpricedPart(
                part_number=lifecycle.catalog_key,
                used_by=lifecycle.component_name,
                source="component",
            ))
        labor_cost = lifecycle.replacement_labor_hours * specialist_rate
        cost_per_replacement = labor_cost + (part_price or 0.0) * (1.0 - discount)

        for unit in matching:
            hours = unit.effective_annual_hours
            if hours <= 0 or lifecycle.expected_life_hours <= 0:
                continue

            years_per_replacement = lifecycle.expected_life_hours / hours
            schedule: list[ReplacementEvent] = []
            for number, year in enumerate(replacement_years(years_per_replacement, period_years), start=1):
                per_unit = escalate(cost_per_replacement, inflation_rate, year)
                event_total = per_unit * unit.quantity
                bucket_cost[year] += event_total
                bucket_events[year] += unit.quantity
                total += event_total
                schedule.append(ReplacementEvent(
                    replacement_number=number,
                    year=year,
                    cost_per_unit=round(per_unit, 2),
                    total_cost=round(event_total, 2),
                ))

            if not schedule:
                continue

            components.append(ComponentReplacementRow(
                component_name=lifecycle.component_name,
                category=lifecycle.category,
                equipment_model_id=lifecycle.equipment_model_id,
                model_number=unit.equipment_model.model_number,
                unit_name=unit.label,
                quantity=unit.quantity,
                expected_life_hours=lifecycle.expected_life_hours,
                years_per_replacement=round(years_per_replacement, 4),
                replacements_over_period=len(schedule),
                labor_hours=lifecycle.replacement_labor_hours,
                cost_per_replacement=round(cost_per_replacement, 2),
                part_priced=part_price is not None,
                criticality=lifecycle.criticality,
                total_cost=round(sum(e.total_cost for e in schedule), 2),
                schedule=schedule,
            ))

    by_year = [
        ReplacementYearBucket(year=year, events=bucket_events[year], cost=bucket_cost[year])
        for year in range(1, period_years + 1)
    ]

    return ComponentReplacementPlan(
        total_cost_over_period=round(total, 2),
        components=components,
        by_year=by_year,
        unpriced_parts=unpriced,
    )
