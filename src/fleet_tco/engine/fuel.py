"""Fuel cost — annual fuel spend from each unit's load tier.

Tier by duty cycle:

  duty ≥ 0.85  → full-load rate
  duty ≥ 0.60  → 75% rate, else full
  otherwise    → 50% rate, else 75%, else full

Gas engines are often rated in cubic feet per hour while gas is bought by
the therm; 1 therm ≈ 100 ft³, so volumetric rates are divided by 100.

  annual cost = normalized rate × annual hours × fuel price × quantity
"""

from __future__ import annotations

from fleet_tco.config.equipment import FleetUnit
from fleet_tco.models.results import FuelCostSummary, FuelDetailRow

FULL_LOAD_DUTY = 0.85
THREE_QUARTER_LOAD_DUTY = 0.60

CUBIC_FEET_PER_THERM = 100.0
_VOLUMETRIC_GAS_UNITS = {"cfh", "scfh", "ft3/hr", "cf/hr", "cuft/hr"}


def select_fuel_rate(unit: FleetUnit) -> tuple[float, str]:
    """Fuel rate for the unit's duty cycle and the tier it came from."""
    model = unit.equipment_model
    if unit.duty_cycle >= FULL_LOAD_DUTY:
        chain = [(model.fuel_consumption_rate_full, "full")]
    elif unit.duty_cycle >= THREE_QUARTER_LOAD_DUTY:
        chain = [(model.fuel_consumption_rate_75, "75"), (model.fuel_consumption_rate_full, "full")]
    else:
        chain = [
            (model.fuel_consumption_rate_50, "50"),
            (model.fuel_consumption_rate_75, "75"),
            (model.fuel_consumption_rate_full, "full"),
        ]

    for rate, tier in chain:
        if rate:
            return rate, tier
    return 0.0, "none"


def normalize_fuel_rate(rate: float, unit: str) -> float:
    """Convert a fuel rate to the basis the fuel price is quoted in."""
    if unit.strip().lower() in _VOLUMETRIC_GAS_UNITS:
        return rate / CUBIC_FEET_PER_THERM
    return rate


def estimate_fuel_cost(
    fleet_units: list[FleetUnit],
    fuel_cost_per_unit: float,
    enabled: bool = True,
) -> FuelCostSummary:
    """Annual fuel cost per fleet unit group and in total."""
    if not enabled:
        return FuelCostSummary(enabled=False, fuel_cost_per_unit=fuel_cost_per_unit, annual_fuel_cost=0.0)

    details: list[FuelDetailRow] = []
    total = 0.0
    for unit in fleet_units:
        hours = unit.effective_annual_hours
        rate, tier = select_fuel_rate(unit)
        fuel_unit = unit.equipment_model.fuel_consumption_unit
        normalized = normalize_fuel_rate(rate, fuel_unit)

        cost = normalized * hours * fuel_cost_per_unit * unit.quantity
        total += cost

        details.append(FuelDetailRow(
            unit_name=unit.label,
            model_number=unit.equipment_model.model_number,
            quantity=unit.quantity,
            annual_hours=hours,
            duty_cycle=unit.duty_cycle,
            load_tier=tier,
            fuel_rate=rate,
            fuel_unit=fuel_unit,
            normalized_fuel_rate=normalized,
            annual_fuel_cost=round(cost, 2),
        ))

    return FuelCostSummary(
        enabled=True,
        fuel_cost_per_unit=fuel_cost_per_unit,
        annual_fuel_cost=round(total, 2),
        details=details,
    )
