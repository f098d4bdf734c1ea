"""Analysis snapshots — results handed to the storage boundary.

The engine never persists anything.  A snapshot freezes a result as JSON,
keyed by scenario id and the time it was taken; storage treats
``result_data`` as opaque text.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from fleet_tco.models.results import AnalysisResult


class AnalysisSnapshot(BaseModel):
    scenario_id: int | None
    name: str | None = None
    calculated_at: datetime
    result_data: str = Field(description="AnalysisResult as JSON")

    @classmethod
    def capture(
        cls,
        result: AnalysisResult,
        name: str | None = None,
        calculated_at: datetime | None = None,
    ) -> "AnalysisSnapshot":
        return cls(
            scenario_id=result.scenario_id,
            name=name,
            calculated_at=calculated_at or datetime.now(timezone.utc),
            result_data=result.model_dump_json(),
        )

    def load(self) -> AnalysisResult:
        """Rebuild the stored ``AnalysisResult``."""
        return AnalysisResult.model_validate_json(self.result_data)
