"""Labor rates — the skill-tier → hourly rate table."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from fleet_tco.errors import UnrecognizedSkillTierError


class SkillTier(str, Enum):
    """Closed set of labor skill tiers a PM task can require."""

    BASIC = "basic"
    SPECIALIST = "specialist"
    ENGINEER = "engineer"

    @classmethod
    def parse(cls, label: object) -> "SkillTier":
        """Map a free-text label onto a tier.

        ``technician`` is the field name used on most PM sheets for the
        basic tier and is accepted as an alias.  Anything else that is not
        a tier name raises ``UnrecognizedSkillTierError``.
        """
        if isinstance(label, cls):
            return label
        if not isinstance(label, str):
            raise UnrecognizedSkillTierError(label)
        normalized = label.strip().lower()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            raise UnrecognizedSkillTierError(label) from None


_ALIASES = {"technician": "basic", "tech": "basic"}


class LaborRates(BaseModel):
    """Hourly labor rates per skill tier (currency/hour)."""

    basic: float = Field(default=120.0, ge=0, description="Technician / basic tier rate")
    specialist: float = Field(default=180.0, ge=0, description="Specialist tier rate")
    engineer: float = Field(default=250.0, ge=0, description="Engineer tier rate")

    def as_table(self) -> dict[SkillTier, float]:
        """Enum-keyed lookup table consumed by the cost engines."""
        return {
            SkillTier.BASIC: self.basic,
            SkillTier.SPECIALIST: self.specialist,
            SkillTier.ENGINEER: self.engineer,
        }

    def rate_for(self, tier: SkillTier | str) -> float:
        return self.as_table()[SkillTier.parse(tier)]
