"""Pydantic validation tests — invalid configuration is rejected at construction."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fleet_tco.config import (
    ComponentLifecycle,
    EquipmentModel,
    ExtendedCostConfig,
    FleetUnit,
    LaborRates,
    PMTask,
    PriceList,
    PriceListItem,
    Scenario,
    SkillTier,
    TaskPart,
    UsageClass,
)


# ═══════════════════════════════════════════════════════════════════════════
# Scenario
# ═══════════════════════════════════════════════════════════════════════════

class TestScenarioValidation:

    def test_defaults_are_valid(self):
        s = Scenario()
        assert s.analysis_period_years == 20
        assert s.target_utilization == pytest.approx(0.75)
        assert s.discount_rate == pytest.approx(0.05)
        assert s.inflation_rate == pytest.approx(0.03)

    @pytest.mark.parametrize("years", [0, -5])
    def test_non_positive_period_rejected(self, years):
        with pytest.raises(ValidationError):
            Scenario(analysis_period_years=years)

    @pytest.mark.parametrize("field", ["parts_discount_pct", "overhead_markup_pct"])
    def test_percentages_capped_at_100(self, field):
        with pytest.raises(ValidationError):
            Scenario(**{field: 101})

    def test_zero_utilization_rejected(self):
        with pytest.raises(ValidationError):
            Scenario(target_utilization_pct=0)

    def test_zero_rates_allowed(self):
        s = Scenario(discount_rate_pct=0, inflation_rate_pct=0)
        assert s.discount_rate == 0.0

    def test_negative_labor_rate_rejected(self):
        with pytest.raises(ValidationError):
            LaborRates(specialist=-1)

    def test_extended_costs_default_to_zero(self):
        ext = ExtendedCostConfig()
        assert ext.insurance_cost_pct == 0.0
        assert ext.training_cost_per_technician == 0.0

    def test_labor_rate_lookup(self):
        rates = LaborRates(basic=90, specialist=140, engineer=210)
        assert rates.rate_for("technician") == 90
        assert rates.rate_for(SkillTier.ENGINEER) == 210


# ═══════════════════════════════════════════════════════════════════════════
# Fleet
# ═══════════════════════════════════════════════════════════════════════════

class TestFleetValidation:

    def test_zero_quantity_rejected(self, gas_model):
        with pytest.raises(ValidationError):
            FleetUnit(equipment_model=gas_model, quantity=0)

    def test_duty_cycle_above_one_rejected(self, gas_model):
        with pytest.raises(ValidationError):
            FleetUnit(equipment_model=gas_model, duty_cycle=1.5)

    def test_zero_commissioning_rate_rejected(self, gas_model):
        with pytest.raises(ValidationError):
            FleetUnit(equipment_model=gas_model, commissioning_rate_per_month=0)

    @pytest.mark.parametrize("usage, hours", [
        (UsageClass.STANDBY, 200),
        (UsageClass.PRIME, 6_500),
        (UsageClass.LTP, 4_000),
        (UsageClass.CONTINUOUS, 8_760),
    ])
    def test_usage_class_default_hours(self, gas_model, usage, hours):
        assert FleetUnit(equipment_model=gas_model, usage_class=usage).effective_annual_hours == hours

    def test_explicit_hours_override_default(self, gas_model):
        unit = FleetUnit(equipment_model=gas_model, usage_class="standby", annual_hours=1_234)
        assert unit.effective_annual_hours == 1_234

    def test_label_falls_back_to_model_number(self, gas_model):
        assert FleetUnit(equipment_model=gas_model).label == "G-500"

    def test_negative_power_rejected(self):
        with pytest.raises(ValidationError):
            EquipmentModel(id=1, power_rating_kw=-10)


# ═══════════════════════════════════════════════════════════════════════════
# PM tasks, parts and catalog
# ═══════════════════════════════════════════════════════════════════════════

class TestMaintenanceValidation:

    def test_negative_labor_hours_rejected(self):
        with pytest.raises(ValidationError):
            PMTask(name="Oil", labor_hours=-1)

    def test_negative_part_quantity_rejected(self):
        with pytest.raises(ValidationError):
            TaskPart(part_number="X", quantity=-2)

    def test_negative_catalog_price_rejected(self):
        with pytest.raises(ValidationError):
            PriceListItem(part_number="X", unit_price=-1)

    def test_catalog_lookup(self, price_list):
        assert price_list.unit_price("FLT-OIL") == 25.0
        assert price_list.unit_price("NOPE") is None
        assert price_list.unit_price(None) is None
        assert price_list.lookup("OIL-15W40").description == "Engine oil (qt)"

    def test_catalog_from_dict(self):
        catalog = PriceList.model_validate({"items": [{"part_number": "A", "unit_price": 3.5}]})
        assert catalog.unit_price("A") == 3.5

    def test_lifecycle_default_shape(self):
        lc = ComponentLifecycle(equipment_model_id=1, component_name="Belt", expected_life_hours=5_000)
        assert lc.shape == 2.5
        assert lc.catalog_key == "Belt"
