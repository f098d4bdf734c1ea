"""Cost categories — ancillary annual costs and the category breakdown.

Ancillary categories (all year-1 prices):

  energy efficiency         = total kW × $/kW
  environmental compliance  = total units × $/unit
  training                  = technicians × $/technician
  insurance                 = equipment value × insurance %
  warranty                  = equipment value × warranty %
  equipment value           = total kW × $/kW valuation
"""

from __future__ import annotations

from fleet_tco.config.scenario import ExtendedCostConfig
from fleet_tco.models.results import (
    CATEGORY_LABELS,
    CostCategory,
    CostCategoryRow,
    DowntimeSummary,
    ExtendedCosts,
    FleetProfile,
    FuelCostSummary,
    TaskCostSummary,
)


def compute_extended_costs(
    config: ExtendedCostConfig,
    fleet: FleetProfile,
    technicians: int,
) -> ExtendedCosts:
    equipment_value = fleet.total_kw * config.equipment_value_per_kw
    return ExtendedCosts(
        energy_efficiency=round(fleet.total_kw * config.energy_efficiency_cost_per_kw, 2),
        environmental_compliance=round(fleet.total_units * config.environmental_compliance_cost_per_unit, 2),
        training=round(technicians * config.training_cost_per_technician, 2),
        insurance=round(equipment_value * config.insurance_cost_pct / 100.0, 2),
        warranty=round(equipment_value * config.warranty_cost_pct / 100.0, 2),
    )


def build_cost_breakdown(
    maintenance: TaskCostSummary,
    fuel: FuelCostSummary,
    downtime: DowntimeSummary,
    extended: ExtendedCosts,
) -> list[CostCategoryRow]:
    """Annual cost per category.

    Labor, parts and overhead are always listed; fuel and downtime only when
    enabled and non-zero; ancillary categories only when non-zero.
    """
    amounts: list[tuple[CostCategory, float]] = [
        (CostCategory.LABOR, maintenance.annual_labor_cost),
        (CostCategory.PARTS, maintenance.annual_parts_cost),
        (CostCategory.OVERHEAD, maintenance.annual_overhead),
    ]
    if fuel.enabled and fuel.annual_fuel_cost > 0:
        amounts.append((CostCategory.FUEL, fuel.annual_fuel_cost))
    if downtime.enabled and downtime.annual_downtime_cost > 0:
        amounts.append((CostCategory.DOWNTIME, downtime.annual_downtime_cost))

    for category, value in (
        (CostCategory.ENERGY_EFFICIENCY, extended.energy_efficiency),
        (CostCategory.ENVIRONMENTAL_COMPLIANCE, extended.environmental_compliance),
        (CostCategory.TRAINING, extended.training),
        (CostCategory.INSURANCE, extended.insurance),
        (CostCategory.WARRANTY, extended.warranty),
    ):
        if value > 0:
            amounts.append((category, value))

    return [
        CostCategoryRow(category=category, label=CATEGORY_LABELS[category], annual_cost=value)
        for category, value in amounts
    ]
