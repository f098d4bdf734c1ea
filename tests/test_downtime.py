"""Tests for engine/downtime.py."""

from __future__ import annotations

import pytest

from fleet_tco.config import SkillTier
from fleet_tco.engine.downtime import DOWNTIME_PER_LABOR_HOUR, estimate_downtime_cost
from fleet_tco.engine.task_cost import compute_task_costs

RATES = {SkillTier.BASIC: 100.0, SkillTier.SPECIALIST: 150.0, SkillTier.ENGINEER: 200.0}


def test_downtime_from_recurring_hours(oil_change, fleet_profile):
    costs = compute_task_costs([oil_change], fleet_profile, RATES, 0, 0)
    summary = estimate_downtime_cost(costs, 500)
    # 160 labor hours × 1.5 × $500
    assert summary.downtime_hours == pytest.approx(240)
    assert summary.annual_downtime_cost == pytest.approx(120_000)


def test_one_time_work_excluded(commissioning, fleet_profile):
    costs = compute_task_costs([commissioning], fleet_profile, RATES, 0, 0)
    assert estimate_downtime_cost(costs, 500).annual_downtime_cost == 0.0


def test_disabled(oil_change, fleet_profile):
    costs = compute_task_costs([oil_change], fleet_profile, RATES, 0, 0)
    summary = estimate_downtime_cost(costs, 500, enabled=False)
    assert summary.enabled is False
    assert summary.downtime_hours == 0.0
    assert summary.annual_downtime_cost == 0.0


def test_multiplier():
    assert DOWNTIME_PER_LABOR_HOUR == 1.5
