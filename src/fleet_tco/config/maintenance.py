"""Preventive-maintenance schedule — tasks and the parts they consume."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from fleet_tco.config.rates import SkillTier


class TaskPart(BaseModel):
    """A part consumed each time the owning task is performed.

    ``unit_price`` is filled in by the data-access boundary when the part
    resolves against the active price list; ``None`` means the engine looks
    the part up itself and, failing that, prices it at zero and flags it.
    """

    part_number: str | None = None
    description: str | None = None
    quantity: float = Field(default=1.0, ge=0)
    is_optional: bool = Field(default=False, description="Optional parts are excluded from baseline cost")
    unit_price: float | None = Field(default=None, ge=0)


class PMTask(BaseModel):
    """One preventive-maintenance activity and its recurrence rule.

    Recurrence: ``is_one_time`` wins, then ``interval_hours``, then
    ``interval_months``.
    """

    id: int | None = None
    name: str
    description: str | None = None
    interval_hours: float | None = Field(default=None, ge=0, description="Operating-hours interval")
    interval_months: float | None = Field(default=None, ge=0, description="Calendar interval (months)")
    is_one_time: bool = Field(default=False, description="Performed once per unit at commissioning")
    labor_hours: float = Field(default=1.0, ge=0, description="Labor hours per service")
    skill_level: SkillTier = Field(default=SkillTier.BASIC)
    is_automated: bool = Field(default=False, description="Automated tasks contribute no labor")
    enabled: bool = True
    is_locked: bool = False
    parts: list[TaskPart] = Field(default_factory=list)

    @field_validator("skill_level", mode="before")
    @classmethod
    def _parse_skill_level(cls, value: object) -> SkillTier:
        return SkillTier.parse(value)


class PMSchedule(BaseModel):
    """An ordered list of PM tasks."""

    id: int | None = None
    name: str = "PM schedule"
    tasks: list[PMTask] = Field(default_factory=list)
