"""Serialization tests — resolved scenarios from JSON, results into snapshots."""

from __future__ import annotations

from datetime import datetime, timezone

from fleet_tco.config import ResolvedScenario, SkillTier
from fleet_tco.engine.orchestrator import run_analysis
from fleet_tco.models import AnalysisResult, AnalysisSnapshot


class TestResolvedScenarioJson:

    def test_round_trip(self, resolved):
        restored = ResolvedScenario.model_validate_json(resolved.model_dump_json())
        assert restored == resolved
        assert run_analysis(restored) == run_analysis(resolved)

    def test_from_plain_dict(self):
        resolved = ResolvedScenario.model_validate({
            "scenario": {"name": "From dict", "analysis_period_years": 5},
            "fleet": {
                "name": "Depot",
                "units": [{"equipment_model": {"id": 7, "model_number": "X-1", "power_rating_kw": 100}}],
            },
            "pm_schedule": {"tasks": [{"name": "Inspect", "interval_months": 6, "skill_level": "Technician"}]},
            "price_list": {"items": []},
        })
        assert resolved.pm_schedule.tasks[0].skill_level is SkillTier.BASIC
        result = run_analysis(resolved)
        assert len(result.projection) == 5
        assert result.fleet.total_units == 1


class TestAnalysisSnapshot:

    def test_capture_and_load(self, resolved):
        result = run_analysis(resolved)
        snapshot = AnalysisSnapshot.capture(result, name="Q3 review")
        assert snapshot.scenario_id == 1
        assert snapshot.name == "Q3 review"
        assert snapshot.calculated_at.tzinfo is not None
        assert snapshot.load() == result

    def test_explicit_timestamp(self, resolved):
        when = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)
        snapshot = AnalysisSnapshot.capture(run_analysis(resolved), calculated_at=when)
        assert snapshot.calculated_at == when

    def test_result_itself_has_no_timestamp(self):
        assert "calculated_at" not in AnalysisResult.model_fields

    def test_snapshot_json_round_trip(self, resolved):
        snapshot = AnalysisSnapshot.capture(run_analysis(resolved))
        restored = AnalysisSnapshot.model_validate_json(snapshot.model_dump_json())
        assert restored.load() == snapshot.load()
