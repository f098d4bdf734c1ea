"""Fleet aggregates — computed once per run from the fleet units.

Pure arithmetic: fleet units → FleetProfile.
"""

from __future__ import annotations

import math

from fleet_tco.config.equipment import FleetUnit
from fleet_tco.models.results import FleetProfile


def commissioning_months(unit: FleetUnit) -> int:
    """Months needed to bring every unit of a group online."""
    return math.ceil(unit.quantity / unit.commissioning_rate_per_month)


def compute_fleet_profile(fleet_units: list[FleetUnit]) -> FleetProfile:
    """Sum units, kW and operating hours across the fleet."""
    total_units = sum(u.quantity for u in fleet_units)
    total_kw = sum(u.equipment_model.power_rating_kw * u.quantity for u in fleet_units)

    # Quantity-weighted operating hours
    total_annual_operating_hours = sum(u.effective_annual_hours * u.quantity for u in fleet_units)
    avg_annual_hours = total_annual_operating_hours / total_units if total_units > 0 else 0.0

    longest = max((commissioning_months(u) for u in fleet_units), default=0)

    return FleetProfile(
        total_units=total_units,
        total_kw=total_kw,
        avg_annual_hours=avg_annual_hours,
        total_annual_operating_hours=total_annual_operating_hours,
        total_annual_kwh=total_kw * avg_annual_hours,
        longest_commissioning_months=longest,
    )
