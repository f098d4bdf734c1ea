"""Result types — the contract between the engines and whatever stores or shows them.

Every engine returns one of these models.  They are plain values: an
``AnalysisResult`` carries no timestamp, so running the same resolved
scenario twice produces identical objects.  Time-stamping happens in
``models.snapshot`` when a result is handed to storage.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


# ═══════════════════════════════════════════════════════════════════════════
# Fleet aggregates
# ═══════════════════════════════════════════════════════════════════════════

class FleetProfile(BaseModel):
    """Fleet-wide totals computed once per run (see ``engine.derived``)."""

    total_units: int
    total_kw: float
    avg_annual_hours: float
    """Quantity-weighted mean operating hours per unit per year."""

    total_annual_operating_hours: float
    """Σ quantity × annual hours."""

    total_annual_kwh: float
    """total_kw × avg_annual_hours — the cost/kWh denominator."""

    longest_commissioning_months: int
    """Months until the slowest fleet unit is fully deployed."""


# ═══════════════════════════════════════════════════════════════════════════
# Reliability
# ═══════════════════════════════════════════════════════════════════════════

class WeibullParameters(BaseModel):
    """Fitted Weibull parameters and characteristic lives of one component."""

    beta: float
    """Shape β."""

    eta: float
    """Scale η (characteristic life, 63.2% failed)."""

    mean_life: float
    b10_life: float
    """Hours at which 10% of the population has failed."""

    b50_life: float
    """Median life."""


class CurvePoint(BaseModel):
    hours: float
    failure_probability: float
    reliability: float
    failure_rate: float
    """Weibull density f(t) (per hour)."""


class FailureCurve(BaseModel):
    points: list[CurvePoint]
    parameters: WeibullParameters


class ReplacementIntervalResult(BaseModel):
    """Cost-rate–minimising planned replacement age.

    The expected cycle length behind ``cost_per_hour`` uses a t/2 shortcut
    for the failure branch, so the interval is directional guidance only.
    """

    optimal_interval_hours: float
    cost_per_hour: float
    pct_of_oem_life: float
    """optimal_interval / mean life × 100."""

    steps: int
    note: str = (
        "Heuristic estimate: expected cycle length is approximated, "
        "treat the interval as directional guidance rather than an exact optimum."
    )


class DueReplacement(BaseModel):
    """One component falling due in a year of ``replacement_schedule``."""

    component_name: str
    category: str | None = None
    replacement_number: int
    events: int
    """Replacements due this year per unit (usually 1)."""

    units_affected: int
    cost_per_unit: float
    total_cost: float
    part_priced: bool


class ReplacementYear(BaseModel):
    year: int
    cumulative_hours: float
    replacements: list[DueReplacement]
    total_cost: float


class ComponentReliability(BaseModel):
    """Reliability model of one component lifecycle in the fleet."""

    component_name: str
    equipment_model_id: int
    category: str | None = None
    parameters: WeibullParameters
    optimal_interval: ReplacementIntervalResult
    failure_curve: list[CurvePoint]


# ═══════════════════════════════════════════════════════════════════════════
# Warnings
# ═══════════════════════════════════════════════════════════════════════════

class UnpricedPart(BaseModel):
    """A part number with no price in the active catalog (costed at zero)."""

    part_number: str | None
    used_by: str
    """Task or component name that references the part."""

    source: Literal["task", "component"]


class AnalysisWarning(BaseModel):
    kind: Literal["reliability_domain", "unpriced_part", "unscheduled_task"]
    subject: str
    message: str


# ═══════════════════════════════════════════════════════════════════════════
# PM task costs
# ═══════════════════════════════════════════════════════════════════════════

class TaskCostRow(BaseModel):
    """Annualized cost of one PM task across the fleet."""

    task_id: int | None = None
    task_name: str
    status: Literal["active", "disabled", "automated"]
    recurrence: Literal["one_time", "hours", "calendar", "unscheduled"]
    skill_level: str
    interval_hours: float | None = None
    interval_months: float | None = None
    is_one_time: bool = False
    services_per_year: float
    labor_hours_per_service: float
    labor_hours_per_year: float
    labor_rate: float
    labor_cost_per_year: float
    parts_cost_per_service: float
    parts_cost_per_year: float
    total_cost_per_year: float
    pct_of_workload: float
    """Share of fleet-wide annual labor hours (%)."""

    unpriced_parts: list[str] = Field(default_factory=list)


class TaskCostSummary(BaseModel):
    rows: list[TaskCostRow]
    total_annual_services: float
    total_annual_labor_hours: float
    recurring_labor_hours: float
    """Labor hours excluding one-time tasks (drives downtime)."""

    annual_labor_cost: float
    annual_parts_cost: float
    annual_overhead: float
    overhead_markup_pct: float
    annual_maintenance_cost: float
    """labor + parts + overhead."""

    one_time_cost: float
    """Labor + parts of one-time tasks, before overhead."""

    one_time_cost_with_overhead: float
    unpriced_parts: list[UnpricedPart] = Field(default_factory=list)


# ═══════════════════════════════════════════════════════════════════════════
# Staffing
# ═══════════════════════════════════════════════════════════════════════════

class StaffingRampRow(BaseModel):
    month: int
    units_active: int
    technicians: int


class StaffingPlan(BaseModel):
    total_annual_labor_hours: float
    available_hours_per_technician: float
    safety_factor: float
    technicians_needed: int
    utilization_without_safety: float
    """Labor hours / (technicians × available hours) × 100."""

    ramp: list[StaffingRampRow] = Field(default_factory=list)


# ═══════════════════════════════════════════════════════════════════════════
# Fuel & downtime
# ═══════════════════════════════════════════════════════════════════════════

class FuelDetailRow(BaseModel):
    unit_name: str
    model_number: str
    quantity: int
    annual_hours: float
    duty_cycle: float
    load_tier: Literal["full", "75", "50", "none"]
    fuel_rate: float
    fuel_unit: str
    normalized_fuel_rate: float
    """Fuel rate in the price basis (therms/hr for gas, native otherwise)."""

    annual_fuel_cost: float


class FuelCostSummary(BaseModel):
    enabled: bool
    fuel_cost_per_unit: float
    annual_fuel_cost: float
    details: list[FuelDetailRow] = Field(default_factory=list)


class DowntimeSummary(BaseModel):
    enabled: bool
    downtime_cost_per_hour: float
    downtime_hours: float
    annual_downtime_cost: float


# ═══════════════════════════════════════════════════════════════════════════
# Cost categories
# ═══════════════════════════════════════════════════════════════════════════

class CostCategory(str, Enum):
    LABOR = "labor"
    PARTS = "parts"
    OVERHEAD = "overhead"
    FUEL = "fuel"
    DOWNTIME = "downtime"
    ENERGY_EFFICIENCY = "energy_efficiency"
    ENVIRONMENTAL_COMPLIANCE = "environmental_compliance"
    TRAINING = "training"
    INSURANCE = "insurance"
    WARRANTY = "warranty"


CATEGORY_LABELS: dict[CostCategory, str] = {
    CostCategory.LABOR: "Labor",
    CostCategory.PARTS: "Parts",
    CostCategory.OVERHEAD: "Overhead",
    CostCategory.FUEL: "Fuel",
    CostCategory.DOWNTIME: "Est. Downtime",
    CostCategory.ENERGY_EFFICIENCY: "Energy Efficiency",
    CostCategory.ENVIRONMENTAL_COMPLIANCE: "Environmental Compliance",
    CostCategory.TRAINING: "Training & Certification",
    CostCategory.INSURANCE: "Insurance",
    CostCategory.WARRANTY: "Warranty",
}


class CostCategoryRow(BaseModel):
    category: CostCategory
    label: str
    annual_cost: float


class ExtendedCosts(BaseModel):
    """Annual ancillary costs (year-1 prices)."""

    energy_efficiency: float = 0.0
    environmental_compliance: float = 0.0
    training: float = 0.0
    insurance: float = 0.0
    warranty: float = 0.0

    @property
    def total(self) -> float:
        return (
            self.energy_efficiency + self.environmental_compliance
            + self.training + self.insurance + self.warranty
        )


# ═══════════════════════════════════════════════════════════════════════════
# Component replacements
# ═══════════════════════════════════════════════════════════════════════════

class ReplacementEvent(BaseModel):
    replacement_number: int
    year: int
    cost_per_unit: float
    """Inflated to the event year."""

    total_cost: float
    """cost_per_unit × fleet-unit quantity."""


class ComponentReplacementRow(BaseModel):
    """Replacement plan of one component on one fleet unit group."""

    component_name: str
    category: str | None = None
    equipment_model_id: int
    model_number: str
    unit_name: str
    quantity: int
    expected_life_hours: float
    years_per_replacement: float
    replacements_over_period: int
    labor_hours: float
    cost_per_replacement: float
    """Labor + part, per unit, at year-0 prices."""

    part_priced: bool
    criticality: str
    total_cost: float
    schedule: list[ReplacementEvent]


class ReplacementYearBucket(BaseModel):
    year: int
    events: int
    cost: float


class ComponentReplacementPlan(BaseModel):
    total_cost_over_period: float
    components: list[ComponentReplacementRow] = Field(default_factory=list)
    by_year: list[ReplacementYearBucket] = Field(default_factory=list)
    unpriced_parts: list[UnpricedPart] = Field(default_factory=list)

    def cost_in_year(self, year: int) -> float:
        for bucket in self.by_year:
            if bucket.year == year:
                return bucket.cost
        return 0.0


# ═══════════════════════════════════════════════════════════════════════════
# Projection & summary
# ═══════════════════════════════════════════════════════════════════════════

class YearProjection(BaseModel):
    """One year of the nominal / discounted cost projection."""

    year: int
    inflation_multiplier: float
    discount_factor: float
    """1 / (1 + r)^year."""

    units_commissioned: int
    technicians_needed: int
    maintenance_cost: float
    fuel_cost: float
    downtime_cost: float
    other_cost: float
    """Extended categories (insurance, warranty, training, ...)."""

    component_replacement_cost: float
    total_cost: float
    cumulative_cost: float
    npv_of_year: float
    cumulative_npv: float


class TCOSummary(BaseModel):
    analysis_period_years: int
    annual_total_cost: float
    """Year-1 run rate: maintenance + fuel + downtime + extended categories."""

    total_nominal: float
    total_npv: float
    average_annual_cost: float
    average_annual_cost_npv: float
    cost_per_kwh: float
    cost_per_operating_hour: float


class AnalysisResult(BaseModel):
    """Complete output of one analysis run."""

    scenario_id: int | None
    scenario_name: str
    fleet_name: str
    fleet: FleetProfile
    maintenance: TaskCostSummary
    staffing: StaffingPlan
    fuel: FuelCostSummary
    downtime: DowntimeSummary
    extended_costs: ExtendedCosts
    cost_breakdown: list[CostCategoryRow]
    component_replacements: ComponentReplacementPlan
    reliability: list[ComponentReliability] = Field(default_factory=list)
    projection: list[YearProjection]
    tco: TCOSummary
    unpriced_parts: list[UnpricedPart] = Field(default_factory=list)
    warnings: list[AnalysisWarning] = Field(default_factory=list)


# ═══════════════════════════════════════════════════════════════════════════
# Comparison
# ═══════════════════════════════════════════════════════════════════════════

class ScenarioMetrics(BaseModel):
    """One row of the side-by-side comparison table."""

    scenario_id: int | None
    scenario_name: str
    total_units: int
    total_kw: float
    annual_maintenance_cost: float
    annual_labor_cost: float
    annual_parts_cost: float
    annual_fuel_cost: float
    annual_downtime_cost: float
    total_labor_hours: float
    cost_per_kwh: float
    cost_per_operating_hour: float
    technicians_required: int
    utilization: float
    tco_npv: float
    tco_nominal: float
    average_annual_cost: float


class MetricBest(BaseModel):
    metric: str
    label: str
    higher_is_better: bool
    scenario_id: int | None
    scenario_name: str
    value: float


class LowestTCO(BaseModel):
    scenario_id: int | None
    scenario_name: str
    tco_npv: float
    savings_vs_highest: float


class ScenarioError(BaseModel):
    scenario_id: int | None
    error: str


class ComparisonResult(BaseModel):
    scenarios: list[ScenarioMetrics]
    best_by_metric: list[MetricBest] = Field(default_factory=list)
    lowest_tco: LowestTCO | None = None
    full_results: list[AnalysisResult] = Field(default_factory=list)
    errors: list[ScenarioError] = Field(default_factory=list)
