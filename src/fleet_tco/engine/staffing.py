"""Staffing — technician headcount and the commissioning ramp.

  available hours per technician = working days × hours/day × utilization
  technicians = ⌈annual labor hours × 1.15 / available hours⌉

The 1.15 safety factor absorbs travel, training, sick days and backlog.

During commissioning only part of the fleet is in service, so the
headcount ramps with it:

  units active(m)   = Σ min(quantity, ⌊rate × m⌋)     per fleet unit group
  technicians(m)    = ⌈units active / total units × technicians⌉
"""

from __future__ import annotations

import math

from fleet_tco.config.equipment import FleetUnit
from fleet_tco.models.results import StaffingPlan, StaffingRampRow

SAFETY_FACTOR = 1.15

_MIN_RAMP_MONTHS = 12
_RAMP_TAIL_MONTHS = 6
_MAX_RAMP_MONTHS = 120

# Float noise such as 2.0000000000000004 must not add a technician.
_CEIL_PRECISION = 9


def _ceil(value: float) -> int:
    return math.ceil(round(value, _CEIL_PRECISION))


def available_hours_per_technician(
    working_days_per_year: float,
    hours_per_day: float,
    utilization: float,
) -> float:
    """Productive hours one technician delivers per year (utilization as a fraction)."""
    return working_days_per_year * hours_per_day * utilization


def technicians_required(
    annual_labor_hours: float,
    available_hours: float,
    safety_factor: float = SAFETY_FACTOR,
) -> int:
    if available_hours <= 0:
        return 0
    return _ceil(annual_labor_hours * safety_factor / available_hours)


def units_commissioned_by_month(fleet_units: list[FleetUnit], month: int) -> int:
    """Units in service at the end of ``month`` (1-indexed)."""
    return sum(
        min(u.quantity, math.floor(u.commissioning_rate_per_month * month))
        for u in fleet_units
    )


def ramp_length_months(longest_commissioning_months: int) -> int:
    """At least a year, running past the slowest deployment by a margin."""
    return min(
        _MAX_RAMP_MONTHS,
        max(_MIN_RAMP_MONTHS, longest_commissioning_months + _RAMP_TAIL_MONTHS),
    )


def scale_technicians(technicians: int, units_active: int, total_units: int) -> int:
    """Headcount proportional to the share of the fleet in service."""
    if total_units <= 0:
        return 0
    return _ceil(units_active / total_units * technicians)


def plan_staffing(
    total_annual_labor_hours: float,
    fleet_units: list[FleetUnit],
    working_days_per_year: float,
    hours_per_day: float,
    utilization: float,
    longest_commissioning_months: int = 0,
) -> StaffingPlan:
    """Steady-state technician count plus the month-by-month ramp."""
    available = available_hours_per_technician(working_days_per_year, hours_per_day, utilization)
    technicians = technicians_required(total_annual_labor_hours, available)
    total_units = sum(u.quantity for u in fleet_units)

    ramp: list[StaffingRampRow] = []
    for month in range(1, ramp_length_months(longest_commissioning_months) + 1):
        active = units_commissioned_by_month(fleet_units, month)
        ramp.append(StaffingRampRow(
            month=month,
            units_active=active,
            technicians=scale_technicians(technicians, active, total_units),
        ))

    utilization_without_safety = (
        total_annual_labor_hours / (technicians * available) * 100.0
        if technicians > 0 and available > 0 else 0.0
    )

    return StaffingPlan(
        total_annual_labor_hours=round(total_annual_labor_hours, 2),
        available_hours_per_technician=round(available, 2),
        safety_factor=SAFETY_FACTOR,
        technicians_needed=technicians,
        utilization_without_safety=round(utilization_without_safety, 2),
        ramp=ramp,
    )
