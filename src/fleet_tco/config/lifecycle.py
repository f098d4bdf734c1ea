"""Component lifecycle — wear-out data for one component of an equipment model."""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_WEIBULL_SHAPE = 2.5


class ComponentLifecycle(BaseModel):
    """Expected life and Weibull parameters of a wearing component.

    ``expected_life_hours`` and ``weibull_shape`` are left
    unconstrained here: bad values surface from the reliability math as a
    per-component warning instead of rejecting the whole scenario.
    """

    id: int | None = None
    equipment_model_id: int
    component_name: str
    category: str | None = None
    part_number: str | None = Field(
        default=None,
        description="Catalog part number. None = look the component name up in the price list.",
    )
    expected_life_hours: float = Field(description="Mean life in operating hours")
    expected_life_hours_min: float | None = None
    expected_life_hours_max: float | None = None
    replacement_labor_hours: float = Field(default=8.0, ge=0)
    weibull_shape: float | None = Field(default=None, description="β; None = 2.5")
    weibull_scale: float | None = Field(default=None, description="η; None = derived from mean life")
    failure_mode: str | None = None
    criticality: str = "medium"

    @property
    def shape(self) -> float:
        return self.weibull_shape if self.weibull_shape is not None else DEFAULT_WEIBULL_SHAPE

    @property
    def catalog_key(self) -> str:
        return self.part_number or self.component_name
