"""Shared test fixtures — a small gas-generator fleet with a three-task PM plan."""

from __future__ import annotations

import pytest

from fleet_tco.config import (
    ComponentLifecycle,
    EquipmentModel,
    Fleet,
    FleetUnit,
    LaborRates,
    PMSchedule,
    PMTask,
    PriceList,
    PriceListItem,
    ResolvedScenario,
    Scenario,
    TaskPart,
)
from fleet_tco.engine.derived import compute_fleet_profile
from fleet_tco.models.results import FleetProfile


@pytest.fixture
def gas_model() -> EquipmentModel:
    return EquipmentModel(
        id=1,
        model_number="G-500",
        manufacturer="Acme Power",
        power_rating_kw=500,
        fuel_consumption_rate_full=40.0,
        fuel_consumption_rate_75=32.0,
        fuel_consumption_rate_50=22.0,
        fuel_consumption_unit="therms/hr",
    )


@pytest.fixture
def diesel_model() -> EquipmentModel:
    return EquipmentModel(
        id=2,
        model_number="D-250",
        manufacturer="Acme Power",
        power_rating_kw=250,
        fuel_consumption_rate_full=18.0,
        fuel_consumption_rate_75=14.0,
        fuel_consumption_unit="gal/hr",
    )


@pytest.fixture
def site_a(gas_model) -> FleetUnit:
    """10 units × 4,000 h/yr, deployed 2 per month."""
    return FleetUnit(
        id=1,
        equipment_model=gas_model,
        unit_name="Site A",
        quantity=10,
        annual_hours=4_000,
        duty_cycle=0.70,
        commissioning_rate_per_month=2,
    )


@pytest.fixture
def fleet(site_a) -> Fleet:
    return Fleet(id=1, name="North Sites", units=[site_a])


@pytest.fixture
def fleet_profile(fleet) -> FleetProfile:
    return compute_fleet_profile(fleet.units)


@pytest.fixture
def price_list() -> PriceList:
    return PriceList(
        id=1,
        name="2024 catalog",
        items=[
            PriceListItem(part_number="OIL-15W40", description="Engine oil (qt)", unit_price=10.0),
            PriceListItem(part_number="FLT-OIL", description="Oil filter", unit_price=25.0),
            PriceListItem(part_number="SPK-PLUG", description="Spark plug set", unit_price=100.0),
        ],
    )


@pytest.fixture
def oil_change() -> PMTask:
    return PMTask(
        id=1,
        name="Oil & filter change",
        interval_hours=500,
        labor_hours=2.0,
        skill_level="basic",
        parts=[
            TaskPart(part_number="OIL-15W40", quantity=4),
            TaskPart(part_number="FLT-OIL", quantity=1),
        ],
    )


@pytest.fixture
def annual_inspection() -> PMTask:
    return PMTask(id=2, name="Annual inspection", interval_months=12, labor_hours=4.0, skill_level="specialist")


@pytest.fixture
def commissioning() -> PMTask:
    return PMTask(id=3, name="Commissioning", is_one_time=True, labor_hours=8.0, skill_level="engineer")


@pytest.fixture
def pm_schedule(oil_change, annual_inspection, commissioning) -> PMSchedule:
    return PMSchedule(id=1, name="Gas genset PM", tasks=[oil_change, annual_inspection, commissioning])


@pytest.fixture
def spark_plugs() -> ComponentLifecycle:
    return ComponentLifecycle(
        id=1,
        equipment_model_id=1,
        component_name="Spark plugs",
        category="ignition",
        part_number="SPK-PLUG",
        expected_life_hours=8_000,
        replacement_labor_hours=2.0,
        weibull_shape=2.0,
    )


@pytest.fixture
def scenario() -> Scenario:
    return Scenario(
        id=1,
        name="Baseline",
        analysis_period_years=10,
        labor_rates=LaborRates(basic=100, specialist=150, engineer=200),
        fuel_cost_per_unit=1.2,
        downtime_cost_per_hour=500,
    )


@pytest.fixture
def resolved(scenario, fleet, pm_schedule, price_list, spark_plugs) -> ResolvedScenario:
    return ResolvedScenario(
        scenario=scenario,
        fleet=fleet,
        pm_schedule=pm_schedule,
        price_list=price_list,
        component_lifecycles=[spark_plugs],
    )
