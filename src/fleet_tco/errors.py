"""Error taxonomy for the analysis engine.

Three families of failure are distinguished:

  * configuration errors — the resolved scenario cannot be analysed at all
    (missing fleet / PM schedule / price list, empty fleet, bad values);
  * domain errors — the reliability math was given a non-positive mean life
    or shape; these fail one component, not the whole run;
  * comparison errors — the comparison request itself is malformed.

Unresolved price lookups are *not* errors: they cost zero and are reported
as warnings on the result.
"""

from __future__ import annotations


class FleetTCOError(Exception):
    """Base class for every error raised by the engine."""


class ScenarioConfigurationError(FleetTCOError):
    """A resolved scenario is not runnable.

    ``problems`` lists every issue found so the caller can report them all
    at once instead of fixing one per round-trip.
    """

    def __init__(self, problems: list[str] | str, scenario_id: int | None = None) -> None:
        if isinstance(problems, str):
            problems = [problems]
        self.problems = list(problems)
        self.scenario_id = scenario_id
        super().__init__("; ".join(self.problems))


class UnrecognizedSkillTierError(ScenarioConfigurationError, ValueError):
    """A PM task names a skill tier that has no labor rate."""

    def __init__(self, label: object) -> None:
        self.label = label
        super().__init__(f"Unrecognized skill tier: {label!r}")


class ReliabilityDomainError(FleetTCOError, ValueError):
    """Weibull inputs outside the model's domain (life or shape ≤ 0)."""


class ComparisonError(FleetTCOError):
    """A comparison request cannot be evaluated (e.g. fewer than 2 ids)."""
