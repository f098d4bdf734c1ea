"""Tests for engine/task_cost.py — PM task recurrence and annual cost.

Hand calculations use a 10-unit fleet at 4,000 h/yr with rates
basic $100, specialist $150, engineer $200.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fleet_tco.config import PMTask, SkillTier, TaskPart
from fleet_tco.engine.task_cost import compute_task_costs, resolve_part_price, services_per_year
from fleet_tco.errors import UnrecognizedSkillTierError
from fleet_tco.models.results import FleetProfile

RATES = {SkillTier.BASIC: 100.0, SkillTier.SPECIALIST: 150.0, SkillTier.ENGINEER: 200.0}


def _run(tasks, fleet_profile, price_list=None, discount=20.0, overhead=15.0):
    return compute_task_costs(tasks, fleet_profile, RATES, discount, overhead, price_list)


# ═══════════════════════════════════════════════════════════════════════════
# Recurrence
# ═══════════════════════════════════════════════════════════════════════════

class TestServicesPerYear:

    def test_hours_interval(self, oil_change):
        # 10 units × 4,000 h / 500 h
        assert services_per_year(oil_change, 10, 4_000) == (80.0, "hours")

    def test_calendar_interval(self):
        task = PMTask(name="Battery check", interval_months=6)
        assert services_per_year(task, 10, 4_000) == (20.0, "calendar")

    def test_one_time_once_per_unit(self, commissioning):
        assert services_per_year(commissioning, 10, 4_000) == (10.0, "one_time")

    def test_one_time_flag_wins_over_intervals(self):
        task = PMTask(name="Startup", is_one_time=True, interval_hours=250, interval_months=1)
        assert services_per_year(task, 10, 4_000)[1] == "one_time"

    def test_hours_interval_wins_over_calendar(self):
        task = PMTask(name="Coolant", interval_hours=2_000, interval_months=6)
        assert services_per_year(task, 10, 4_000) == (20.0, "hours")

    def test_no_interval_is_unscheduled(self):
        task = PMTask(name="Ad hoc")
        assert services_per_year(task, 10, 4_000) == (0.0, "unscheduled")


# ═══════════════════════════════════════════════════════════════════════════
# Labor and parts
# ═══════════════════════════════════════════════════════════════════════════

class TestTaskCosts:

    def test_one_time_labor_cost(self, fleet_profile):
        task = PMTask(name="Commissioning", is_one_time=True, labor_hours=2.0, skill_level="basic")
        summary = _run([task], fleet_profile)
        row = summary.rows[0]
        # 2 h × $100 × 10 units
        assert row.labor_cost_per_year == pytest.approx(2_000)
        assert summary.one_time_cost == pytest.approx(2_000)
        assert summary.one_time_cost_with_overhead == pytest.approx(2_300)

    def test_parts_with_discount(self, oil_change, fleet_profile, price_list):
        row = _run([oil_change], fleet_profile, price_list).rows[0]
        # (4 × $10 + 1 × $25) × 0.8
        assert row.parts_cost_per_service == pytest.approx(52.0)
        assert row.parts_cost_per_year == pytest.approx(52.0 * 80)

    def test_overhead_on_aggregate(self, oil_change, fleet_profile, price_list):
        summary = _run([oil_change], fleet_profile, price_list)
        labor = 80 * 2 * 100
        parts = 80 * 52.0
        assert summary.annual_labor_cost == pytest.approx(labor)
        assert summary.annual_parts_cost == pytest.approx(parts)
        assert summary.annual_overhead == pytest.approx((labor + parts) * 0.15)
        assert summary.annual_maintenance_cost == pytest.approx((labor + parts) * 1.15)

    def test_skill_tier_selects_rate(self, annual_inspection, commissioning, fleet_profile):
        rows = _run([annual_inspection, commissioning], fleet_profile).rows
        assert rows[0].labor_rate == 150.0
        assert rows[1].labor_rate == 200.0
        # 10 inspections × 4 h × $150
        assert rows[0].labor_cost_per_year == pytest.approx(6_000)

    def test_optional_parts_excluded(self, fleet_profile, price_list):
        task = PMTask(
            name="Filter swap",
            interval_months=12,
            parts=[
                TaskPart(part_number="FLT-OIL", quantity=1),
                TaskPart(part_number="OIL-15W40", quantity=10, is_optional=True),
            ],
        )
        row = _run([task], fleet_profile, price_list, discount=0).rows[0]
        assert row.parts_cost_per_service == pytest.approx(25.0)

    def test_part_price_on_record_beats_catalog(self, price_list):
        part = TaskPart(part_number="FLT-OIL", unit_price=30.0)
        assert resolve_part_price(part, price_list) == 30.0

    def test_unpriced_part_costs_zero_and_is_reported(self, fleet_profile, price_list):
        task = PMTask(
            name="Valve lash",
            interval_hours=2_000,
            parts=[TaskPart(part_number="GSK-VALVE", quantity=2)],
        )
        summary = _run([task], fleet_profile, price_list)
        assert summary.rows[0].parts_cost_per_year == 0.0
        assert summary.rows[0].unpriced_parts == ["GSK-VALVE"]
        assert summary.unpriced_parts[0].part_number == "GSK-VALVE"
        assert summary.unpriced_parts[0].source == "task"

    def test_no_price_list_leaves_catalog_parts_unpriced(self, oil_change, fleet_profile):
        summary = _run([oil_change], fleet_profile, price_list=None)
        assert summary.annual_parts_cost == 0.0
        assert len(summary.unpriced_parts) == 2

    def test_recurring_hours_exclude_one_time(self, oil_change, commissioning, fleet_profile, price_list):
        summary = _run([oil_change, commissioning], fleet_profile, price_list)
        assert summary.total_annual_labor_hours == pytest.approx(160 + 80)
        assert summary.recurring_labor_hours == pytest.approx(160)


# ═══════════════════════════════════════════════════════════════════════════
# Status rows and workload
# ═══════════════════════════════════════════════════════════════════════════

class TestStatusAndWorkload:

    def test_disabled_and_automated_rows_kept_at_zero(self, oil_change, fleet_profile, price_list):
        disabled = oil_change.model_copy(update={"name": "Disabled", "enabled": False})
        automated = PMTask(name="Remote monitoring", interval_months=1, is_automated=True)
        summary = _run([disabled, automated], fleet_profile, price_list)

        assert [r.status for r in summary.rows] == ["disabled", "automated"]
        assert all(r.total_cost_per_year == 0.0 for r in summary.rows)
        assert summary.annual_maintenance_cost == 0.0

    def test_workload_percentages_sum_to_100(self, pm_schedule, fleet_profile, price_list):
        rows = _run(pm_schedule.tasks, fleet_profile, price_list).rows
        assert sum(r.pct_of_workload for r in rows) == pytest.approx(100.0, abs=0.05)

    def test_workload_share(self, oil_change, annual_inspection, fleet_profile):
        rows = _run([oil_change, annual_inspection], fleet_profile).rows
        # 160 h and 40 h
        assert rows[0].pct_of_workload == pytest.approx(80.0)
        assert rows[1].pct_of_workload == pytest.approx(20.0)

    def test_no_labor_gives_zero_workload(self, fleet_profile):
        rows = _run([PMTask(name="Ad hoc")], fleet_profile).rows
        assert rows[0].pct_of_workload == 0.0
        assert rows[0].recurrence == "unscheduled"

    def test_empty_fleet_profile(self):
        empty = FleetProfile(
            total_units=0, total_kw=0, avg_annual_hours=0,
            total_annual_operating_hours=0, total_annual_kwh=0, longest_commissioning_months=0,
        )
        summary = compute_task_costs([PMTask(name="Oil", interval_hours=500)], empty, RATES, 0, 0)
        assert summary.annual_maintenance_cost == 0.0


# ═══════════════════════════════════════════════════════════════════════════
# Skill tiers
# ═══════════════════════════════════════════════════════════════════════════

class TestSkillTiers:

    @pytest.mark.parametrize("label", ["technician", "Technician", " tech ", "basic"])
    def test_basic_aliases(self, label):
        assert SkillTier.parse(label) is SkillTier.BASIC

    def test_unknown_label_raises(self):
        with pytest.raises(UnrecognizedSkillTierError):
            SkillTier.parse("wizard")

    def test_unknown_label_rejected_on_task(self):
        with pytest.raises(ValidationError):
            PMTask(name="Bad", skill_level="wizard")

    def test_missing_rate_raises(self, annual_inspection, fleet_profile):
        with pytest.raises(UnrecognizedSkillTierError):
            compute_task_costs([annual_inspection], fleet_profile, {SkillTier.BASIC: 100.0}, 0, 0)
