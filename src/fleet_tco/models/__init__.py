"""Result models — analysis output contracts."""

from fleet_tco.models.results import (
    AnalysisResult,
    AnalysisWarning,
    ComparisonResult,
    ComponentReplacementPlan,
    CostCategory,
    FailureCurve,
    FleetProfile,
    StaffingPlan,
    TaskCostSummary,
    TCOSummary,
    UnpricedPart,
    YearProjection,
)
from fleet_tco.models.snapshot import AnalysisSnapshot

__all__ = [
    "AnalysisResult",
    "AnalysisSnapshot",
    "AnalysisWarning",
    "ComparisonResult",
    "ComponentReplacementPlan",
    "CostCategory",
    "FailureCurve",
    "FleetProfile",
    "StaffingPlan",
    "TaskCostSummary",
    "TCOSummary",
    "UnpricedPart",
    "YearProjection",
]
