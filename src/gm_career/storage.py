from __future__ import annotations

import json
import logging
import shutil
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from .config import SAVE_VERSION
from .models import (
    Achievement,
    AchievementType,
    BestSeason,
    CareerHighlight,
    CareerRecord,
    CareerSummary,
    DepartureReason,
    FinalCareerStats,
    HallOfFameStatus,
    HighlightType,
    LegacyTier,
    LongestTenure,
    ReputationFactors,
    RetirementReason,
    RetirementState,
    SeasonSnapshot,
    Significance,
    TeamLegacy,
    TeamTenure,
)

logger = logging.getLogger(__name__)


def to_plain(value: Any) -> Any:
    """Convert model values into JSON-safe dicts, lists and scalars."""
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    if isinstance(value, dict):
        return {str(k): to_plain(v) for k, v in value.items()}
    return value


def serialize_career_record(record: CareerRecord) -> dict[str, Any]:
    return to_plain(record)


def serialize_retirement_state(state: RetirementState) -> dict[str, Any]:
    return to_plain(state)


def _int(raw: Any, default: int = 0) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default


def _float(raw: Any, default: float = 0.0) -> float:
    try:
        return float(raw)
    except (TypeError, ValueError):
        return default


def _rows(raw: Any) -> list[dict[str, Any]]:
    return [row for row in raw if isinstance(row, dict)] if isinstance(raw, list) else []


def _strings(raw: Any) -> tuple[str, ...]:
    return tuple(str(item) for item in raw) if isinstance(raw, list) else ()


def _deserialize_season(raw: dict[str, Any]) -> SeasonSnapshot:
    return SeasonSnapshot(
        year=_int(raw.get("year")),
        team_id=str(raw.get("team_id", "")),
        team_name=str(raw.get("team_name", "")),
        wins=_int(raw.get("wins")),
        losses=_int(raw.get("losses")),
        ties=_int(raw.get("ties")),
        made_playoffs=bool(raw.get("made_playoffs", False)),
        playoff_wins=_int(raw.get("playoff_wins")),
        won_division=bool(raw.get("won_division", False)),
        won_conference=bool(raw.get("won_conference", False)),
        won_championship=bool(raw.get("won_championship", False)),
        fired=bool(raw.get("fired", False)),
    )


def _deserialize_tenure(raw: dict[str, Any]) -> TeamTenure:
    end_year = raw.get("end_year")
    reason = raw.get("reason_for_departure")
    return TeamTenure(
        team_id=str(raw.get("team_id", "")),
        team_name=str(raw.get("team_name", "")),
        start_year=_int(raw.get("start_year")),
        end_year=None if end_year is None else _int(end_year),
        seasons=_int(raw.get("seasons")),
        wins=_int(raw.get("wins")),
        losses=_int(raw.get("losses")),
        ties=_int(raw.get("ties")),
        championships=_int(raw.get("championships")),
        conference_championships=_int(raw.get("conference_championships")),
        division_titles=_int(raw.get("division_titles")),
        playoff_appearances=_int(raw.get("playoff_appearances")),
        win_percentage=_float(raw.get("win_percentage")),
        was_fired=bool(raw.get("was_fired", False)),
        reason_for_departure=DepartureReason(reason) if reason else None,
    )


def _deserialize_achievement(raw: dict[str, Any]) -> Achievement:
    return Achievement(
        type=AchievementType(str(raw.get("type", AchievementType.CHAMPIONSHIP.value))),
        year=_int(raw.get("year")),
        team_id=str(raw.get("team_id", "")),
        description=str(raw.get("description", "")),
    )


def _deserialize_factors(raw: Any) -> ReputationFactors:
    if not isinstance(raw, dict):
        return ReputationFactors()
    defaults = ReputationFactors()
    return ReputationFactors(
        **{f.name: _int(raw.get(f.name), getattr(defaults, f.name)) for f in fields(ReputationFactors)}
    )


def deserialize_career_record(raw: dict[str, Any]) -> CareerRecord:
    return CareerRecord(
        gm_id=str(raw.get("gm_id", "")),
        gm_name=str(raw.get("gm_name", "")),
        total_seasons=_int(raw.get("total_seasons")),
        total_wins=_int(raw.get("total_wins")),
        total_losses=_int(raw.get("total_losses")),
        total_ties=_int(raw.get("total_ties")),
        career_win_percentage=_float(raw.get("career_win_percentage")),
        championships=_int(raw.get("championships")),
        conference_championships=_int(raw.get("conference_championships")),
        division_titles=_int(raw.get("division_titles")),
        playoff_appearances=_int(raw.get("playoff_appearances")),
        times_fired=_int(raw.get("times_fired")),
        years_unemployed=_int(raw.get("years_unemployed")),
        reputation_score=_int(raw.get("reputation_score"), ReputationFactors().base_reputation),
        reputation_factors=_deserialize_factors(raw.get("reputation_factors")),
        achievements=tuple(_deserialize_achievement(r) for r in _rows(raw.get("achievements"))),
        teams_worked_for=tuple(_deserialize_tenure(r) for r in _rows(raw.get("teams_worked_for"))),
        season_history=tuple(_deserialize_season(r) for r in _rows(raw.get("season_history"))),
    )


def _deserialize_summary(raw: dict[str, Any]) -> CareerSummary:
    stats = raw.get("stats") if isinstance(raw.get("stats"), dict) else {}
    longest = stats.get("longest_tenure") if isinstance(stats.get("longest_tenure"), dict) else {}
    best = stats.get("best_season") if isinstance(stats.get("best_season"), dict) else {}
    return CareerSummary(
        gm_name=str(raw.get("gm_name", "")),
        retirement_year=_int(raw.get("retirement_year")),
        total_seasons=_int(raw.get("total_seasons")),
        stats=FinalCareerStats(
            total_seasons=_int(stats.get("total_seasons")),
            total_wins=_int(stats.get("total_wins")),
            total_losses=_int(stats.get("total_losses")),
            total_ties=_int(stats.get("total_ties")),
            win_percentage=_float(stats.get("win_percentage")),
            teams_managed=_int(stats.get("teams_managed")),
            championships=_int(stats.get("championships")),
            conference_championships=_int(stats.get("conference_championships")),
            division_titles=_int(stats.get("division_titles")),
            playoff_appearances=_int(stats.get("playoff_appearances")),
            playoff_win_percentage=_float(stats.get("playoff_win_percentage")),
            times_fired=_int(stats.get("times_fired")),
            longest_tenure=LongestTenure(
                team_name=str(longest.get("team_name", "None")),
                seasons=_int(longest.get("seasons")),
            ),
            best_season=BestSeason(
                year=_int(best.get("year")),
                team_name=str(best.get("team_name", "")),
                wins=_int(best.get("wins")),
                losses=_int(best.get("losses")),
            ),
        ),
        legacy_tier=LegacyTier(str(raw.get("legacy_tier", LegacyTier.POOR.value))),
        legacy_score=_int(raw.get("legacy_score")),
        legacy_description=str(raw.get("legacy_description", "")),
        hall_of_fame_status=HallOfFameStatus(str(raw.get("hall_of_fame_status", HallOfFameStatus.NO.value))),
        hall_of_fame_reasons=_strings(raw.get("hall_of_fame_reasons")),
        highlights=tuple(
            CareerHighlight(
                type=HighlightType(str(h.get("type"))),
                year=_int(h.get("year")),
                team_name=str(h.get("team_name", "")),
                description=str(h.get("description", "")),
                significance=Significance(str(h.get("significance", Significance.MINOR.value))),
            )
            for h in _rows(raw.get("highlights"))
        ),
        team_legacies=tuple(
            TeamLegacy(
                team_id=str(t.get("team_id", "")),
                team_name=str(t.get("team_name", "")),
                tenure=str(t.get("tenure", "")),
                record=str(t.get("record", "")),
                achievements=_strings(t.get("achievements")),
                fan_memory=str(t.get("fan_memory", "")),
            )
            for t in _rows(raw.get("team_legacies"))
        ),
        farewell_statement=str(raw.get("farewell_statement", "")),
        media_reaction=str(raw.get("media_reaction", "")),
    )


def deserialize_retirement_state(raw: dict[str, Any]) -> RetirementState:
    year = raw.get("retirement_year")
    reason = raw.get("retirement_reason")
    summary = raw.get("career_summary")
    return RetirementState(
        is_retired=bool(raw.get("is_retired", False)),
        retirement_year=None if year is None else _int(year),
        retirement_reason=RetirementReason(reason) if reason else None,
        career_summary=_deserialize_summary(summary) if isinstance(summary, dict) else None,
    )


class CareerStore:
    """Versioned JSON file holding one GM's record and retirement state."""

    SAVE_VERSION = SAVE_VERSION

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.last_load_error: str = ""

    def load(self) -> tuple[CareerRecord | None, RetirementState]:
        self.last_load_error = ""
        if not self.path.exists():
            return None, RetirementState()
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            self._fail(f"Failed to load career save ({exc}); starting fresh.")
            return None, RetirementState()
        if not isinstance(raw, dict):
            self._fail("Career save file has invalid format; starting fresh.")
            return None, RetirementState()

        version = _int(raw.get("save_version", 1) or 1, 1)
        if version > self.SAVE_VERSION:
            self._fail(f"Unsupported career save version {version}; app supports up to {self.SAVE_VERSION}.")
            return None, RetirementState()

        raw_record = raw.get("career_record")
        raw_retirement = raw.get("retirement")
        try:
            record = deserialize_career_record(raw_record) if isinstance(raw_record, dict) else None
            retirement = (
                deserialize_retirement_state(raw_retirement) if isinstance(raw_retirement, dict) else RetirementState()
            )
        except (TypeError, ValueError) as exc:
            self._fail(f"Career save payload is invalid ({exc}); starting fresh.")
            return None, RetirementState()
        return record, retirement

    def save(self, record: CareerRecord | None, retirement: RetirementState) -> None:
        payload = {
            "save_version": self.SAVE_VERSION,
            "career_record": serialize_career_record(record) if record is not None else None,
            "retirement": serialize_retirement_state(retirement),
        }
        self._write_json_with_backup(payload)

    def _fail(self, message: str) -> None:
        self.last_load_error = message
        logger.warning(message)

    def _write_json_with_backup(self, payload: Any) -> None:
        if self.path.exists():
            backup = self.path.with_suffix(self.path.suffix + ".bak")
            try:
                shutil.copy2(self.path, backup)
            except OSError:
                logger.warning("Could not back up %s", self.path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
