"""Scenario — the unit of analysis, and the resolved bundle the engine consumes."""

from __future__ import annotations

from pydantic import BaseModel, Field

from fleet_tco.config.equipment import Fleet
from fleet_tco.config.lifecycle import ComponentLifecycle
from fleet_tco.config.maintenance import PMSchedule
from fleet_tco.config.pricing import PriceList
from fleet_tco.config.rates import LaborRates


class ExtendedCostConfig(BaseModel):
    """Ancillary annual cost categories outside the PM schedule.

    Every rate defaults to zero, so these categories only appear in results
    when a scenario opts in.
    """

    energy_efficiency_cost_per_kw: float = Field(
        default=0.0, ge=0, description="Efficiency programs and monitoring ($/kW/year)",
    )
    environmental_compliance_cost_per_unit: float = Field(
        default=0.0, ge=0, description="Emissions monitoring and permits ($/unit/year)",
    )
    training_cost_per_technician: float = Field(
        default=0.0, ge=0, description="Ongoing certification ($/technician/year)",
    )
    insurance_cost_pct: float = Field(
        default=0.0, ge=0, le=100, description="Insurance premium (% of equipment value per year)",
    )
    warranty_cost_pct: float = Field(
        default=0.0, ge=0, le=100, description="Extended warranty (% of equipment value per year)",
    )
    equipment_value_per_kw: float = Field(
        default=1_000.0, ge=0, description="Replacement value used for insurance/warranty ($/kW)",
    )


class Scenario(BaseModel):
    """Financial and staffing assumptions for one analysis.

    Percentages are stored as 0–100 the way they are entered; the fraction
    properties convert them for the engines.
    """

    id: int | None = None
    name: str = "Scenario"
    description: str | None = None

    # --- References (resolved by the data-access boundary) ---
    fleet_id: int | None = None
    pm_schedule_id: int | None = None
    price_list_id: int | None = None

    # --- Horizon ---
    analysis_period_years: int = Field(default=20, gt=0, description="Projection horizon (years)")

    # --- Labor ---
    labor_rates: LaborRates = Field(default_factory=LaborRates)
    working_days_per_year: float = Field(default=250, gt=0, le=366)
    hours_per_day: float = Field(default=8.0, gt=0, le=24)
    target_utilization_pct: float = Field(
        default=75.0, gt=0, le=100,
        description="Share of paid hours spent on wrench time (%)",
    )

    # --- Parts & overhead ---
    parts_discount_pct: float = Field(default=20.0, ge=0, le=100, description="Discount off list price (%)")
    overhead_markup_pct: float = Field(default=15.0, ge=0, le=100, description="Markup on labor + parts (%)")

    # --- Money over time ---
    discount_rate_pct: float = Field(default=5.0, ge=0, description="Annual discount rate for NPV (%)")
    inflation_rate_pct: float = Field(default=3.0, ge=0, description="Annual cost inflation (%)")

    # --- Fuel & downtime ---
    fuel_cost_per_unit: float = Field(default=1.0, ge=0, description="Price per therm (gas) or gallon (liquid)")
    downtime_cost_per_hour: float = Field(default=500.0, ge=0)
    include_fuel_costs: bool = True
    include_downtime_costs: bool = True

    extended_costs: ExtendedCostConfig = Field(default_factory=ExtendedCostConfig)

    @property
    def target_utilization(self) -> float:
        return self.target_utilization_pct / 100.0

    @property
    def discount_rate(self) -> float:
        return self.discount_rate_pct / 100.0

    @property
    def inflation_rate(self) -> float:
        return self.inflation_rate_pct / 100.0


class ResolvedScenario(BaseModel):
    """A scenario with every reference already fetched.

    This is the whole input of an analysis run.  ``fleet``, ``pm_schedule``
    and ``price_list`` are ``None`` when the scenario does not reference one;
    the orchestrator reports that as a configuration error.
    """

    scenario: Scenario = Field(default_factory=Scenario)
    fleet: Fleet | None = None
    pm_schedule: PMSchedule | None = None
    price_list: PriceList | None = None
    component_lifecycles: list[ComponentLifecycle] = Field(default_factory=list)
