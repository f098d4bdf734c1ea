"""Equipment catalog and fleet composition — the units being maintained."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class UsageClass(str, Enum):
    """How a unit is operated; selects the model's default annual hours."""

    STANDBY = "standby"
    PRIME = "prime"
    LTP = "ltp"
    CONTINUOUS = "continuous"


class EquipmentModel(BaseModel):
    """One generator model from the equipment catalog.

    Fuel rates are in ``fuel_consumption_unit`` per operating hour at the
    given load tier.  Any tier may be missing; the fuel estimator falls back
    through the chain 50% → 75% → full.
    """

    id: int = Field(description="Catalog identity; component lifecycles refer to it")
    model_number: str = Field(default="", description="Manufacturer model number")
    manufacturer: str | None = None
    power_rating_kw: float = Field(default=0.0, ge=0, description="Rated electrical output (kW)")

    fuel_consumption_rate_full: float | None = Field(default=None, ge=0, description="Fuel rate at 100% load")
    fuel_consumption_rate_75: float | None = Field(default=None, ge=0, description="Fuel rate at 75% load")
    fuel_consumption_rate_50: float | None = Field(default=None, ge=0, description="Fuel rate at 50% load")
    fuel_consumption_unit: str = Field(
        default="therms/hr",
        description="Unit of the fuel rates. Volumetric gas units (CFH, SCFH) "
                    "are converted to therms before pricing.",
    )

    default_annual_hours_standby: float = Field(default=200.0, ge=0)
    default_annual_hours_prime: float = Field(default=6_500.0, ge=0)
    default_annual_hours_ltp: float = Field(default=4_000.0, ge=0)
    default_annual_hours_continuous: float = Field(default=8_760.0, ge=0)

    def default_hours_for(self, usage_class: UsageClass) -> float:
        """Usage-class default hours, falling back to the prime default."""
        hours = {
            UsageClass.STANDBY: self.default_annual_hours_standby,
            UsageClass.PRIME: self.default_annual_hours_prime,
            UsageClass.LTP: self.default_annual_hours_ltp,
            UsageClass.CONTINUOUS: self.default_annual_hours_continuous,
        }[usage_class]
        return hours or self.default_annual_hours_prime or 6_500.0


class FleetUnit(BaseModel):
    """A group of ``quantity`` identical units of one equipment model."""

    id: int | None = None
    equipment_model: EquipmentModel
    unit_name: str | None = None
    quantity: int = Field(default=1, ge=1, description="Number of identical physical units")
    usage_class: UsageClass = Field(default=UsageClass.PRIME)
    annual_hours: float | None = Field(
        default=None, ge=0,
        description="Operating hours per unit per year. None/0 = model default for the usage class.",
    )
    duty_cycle: float = Field(
        default=0.75, ge=0, le=1.0,
        description="Typical fraction of rated load (selects the fuel tier)",
    )
    commissioning_rate_per_month: float = Field(
        default=1.0, gt=0,
        description="Units brought online per month (deployment ramp)",
    )

    @property
    def equipment_model_id(self) -> int:
        return self.equipment_model.id

    @property
    def label(self) -> str:
        return self.unit_name or self.equipment_model.model_number

    @property
    def effective_annual_hours(self) -> float:
        if self.annual_hours:
            return self.annual_hours
        return self.equipment_model.default_hours_for(self.usage_class)


class Fleet(BaseModel):
    """A named collection of fleet units."""

    id: int | None = None
    name: str = "Fleet"
    units: list[FleetUnit] = Field(default_factory=list)
