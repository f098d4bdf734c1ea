"""Year-by-year TCO projection — nominal and discounted.

For year y = 1 … period:

  recurring costs (maintenance, fuel, downtime, ancillary) × (1 + i)^(y − 1)
  one-time PM work (with overhead) is recognized in year 1 only
  + that year's component replacements (already inflated when scheduled)
  = year total

  cumulative nominal = Σ year totals
  NPV                = Σ year total / (1 + r)^y

Technicians per year follow the commissioning ramp: the steady-state
headcount scaled by the share of the fleet in service at the end of the year.
"""

from __future__ import annotations

from fleet_tco.config.equipment import FleetUnit
from fleet_tco.engine.staffing import scale_technicians, units_commissioned_by_month
from fleet_tco.finance.dcf import compute_npv, discount_factor, inflation_multiplier
from fleet_tco.models.results import (
    ComponentReplacementPlan,
    DowntimeSummary,
    ExtendedCosts,
    FleetProfile,
    FuelCostSummary,
    StaffingPlan,
    TaskCostSummary,
    TCOSummary,
    YearProjection,
)


def build_projection(
    maintenance: TaskCostSummary,
    fuel: FuelCostSummary,
    downtime: DowntimeSummary,
    extended: ExtendedCosts,
    replacements: ComponentReplacementPlan,
    staffing: StaffingPlan,
    fleet: FleetProfile,
    fleet_units: list[FleetUnit],
    period_years: int,
    inflation_rate: float,
    discount_rate: float,
) -> tuple[list[YearProjection], TCOSummary]:
    """Project every year of the analysis period and summarize it.

    Parameters
    ----------
    maintenance, fuel, downtime, extended : year-1 annual costs
    replacements : ComponentReplacementPlan
        Scheduled replacement events bucketed by year.
    staffing : StaffingPlan
        Steady-state technician count.
    inflation_rate, discount_rate : float
        Annual rates as fractions (0.03 for 3%).
    """
    recurring_maintenance = maintenance.annual_maintenance_cost - maintenance.one_time_cost_with_overhead
    annual_fuel = fuel.annual_fuel_cost
    annual_downtime = downtime.annual_downtime_cost
    annual_other = extended.total

    years: list[YearProjection] = []
    totals: list[float] = []
    cumulative = 0.0
    cumulative_npv = 0.0

    for year in range(1, period_years + 1):
        multiplier = inflation_multiplier(inflation_rate, year)
        factor = discount_factor(discount_rate, year)

        if year == 1:
            maintenance_cost = maintenance.annual_maintenance_cost
        else:
            maintenance_cost = recurring_maintenance * multiplier
        fuel_cost = annual_fuel * multiplier
        downtime_cost = annual_downtime * multiplier
        other_cost = annual_other * multiplier
        replacement_cost = replacements.cost_in_year(year)

        total = maintenance_cost + fuel_cost + downtime_cost + other_cost + replacement_cost
        totals.append(total)
        npv_of_year = total * factor
        cumulative += total
        cumulative_npv += npv_of_year

        # ── Deployment-weighted headcount ─────────────────────────────
        active = units_commissioned_by_month(fleet_units, 12 * year)
        technicians = scale_technicians(staffing.technicians_needed, active, fleet.total_units)

        years.append(YearProjection(
            year=year,
            inflation_multiplier=round(multiplier, 6),
            discount_factor=round(factor, 6),
            units_commissioned=active,
            technicians_needed=technicians,
            maintenance_cost=round(maintenance_cost, 2),
            fuel_cost=round(fuel_cost, 2),
            downtime_cost=round(downtime_cost, 2),
            other_cost=round(other_cost, 2),
            component_replacement_cost=round(replacement_cost, 2),
            total_cost=round(total, 2),
            cumulative_cost=round(cumulative, 2),
            npv_of_year=round(npv_of_year, 2),
            cumulative_npv=round(cumulative_npv, 2),
        ))

    total_npv = compute_npv(totals, discount_rate)

    annual_total = maintenance.annual_maintenance_cost + annual_fuel + annual_downtime + annual_other
    cost_per_kwh = (
        maintenance.annual_maintenance_cost / fleet.total_annual_kwh
        if fleet.total_annual_kwh > 0 else 0.0
    )
    cost_per_operating_hour = (
        maintenance.annual_maintenance_cost / fleet.total_annual_operating_hours
        if fleet.total_annual_operating_hours > 0 else 0.0
    )

    summary = TCOSummary(
        analysis_period_years=period_years,
        annual_total_cost=round(annual_total, 2),
        total_nominal=round(cumulative, 2),
        total_npv=round(total_npv, 2),
        average_annual_cost=round(cumulative / period_years, 2) if period_years > 0 else 0.0,
        average_annual_cost_npv=round(total_npv / period_years, 2) if period_years > 0 else 0.0,
        cost_per_kwh=round(cost_per_kwh, 4),
        cost_per_operating_hour=round(cost_per_operating_hour, 2),
    )
    return years, summary
