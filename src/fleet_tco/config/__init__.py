"""Configuration models — every input record the engine consumes."""

from fleet_tco.config.rates import LaborRates, SkillTier
from fleet_tco.config.equipment import EquipmentModel, Fleet, FleetUnit, UsageClass
from fleet_tco.config.maintenance import PMSchedule, PMTask, TaskPart
from fleet_tco.config.pricing import PriceList, PriceListItem
from fleet_tco.config.lifecycle import ComponentLifecycle
from fleet_tco.config.scenario import ExtendedCostConfig, ResolvedScenario, Scenario

__all__ = [
    "SkillTier",
    "LaborRates",
    "UsageClass",
    "EquipmentModel",
    "FleetUnit",
    "Fleet",
    "TaskPart",
    "PMTask",
    "PMSchedule",
    "PriceListItem",
    "PriceList",
    "ComponentLifecycle",
    "ExtendedCostConfig",
    "Scenario",
    "ResolvedScenario",
]
