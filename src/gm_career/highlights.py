from __future__ import annotations

from .config import LONGEVITY_HIGHLIGHT_SEASONS, TURNAROUND_MAX_PREV_WINS, TURNAROUND_MIN_WINS
from .models import AchievementType, CareerHighlight, CareerRecord, HighlightType, Significance, TeamTenure


def _team_name(record: CareerRecord, team_id: str) -> str:
    for tenure in record.teams_worked_for:
        if tenure.team_id == team_id:
            return tenure.team_name
    return "Unknown Team"


def _championship_highlights(record: CareerRecord) -> list[CareerHighlight]:
    return [
        CareerHighlight(
            type=HighlightType.CHAMPIONSHIP,
            year=achievement.year,
            team_name=_team_name(record, achievement.team_id),
            description=achievement.description,
            significance=Significance.MAJOR,
        )
        for achievement in record.achievements
        if achievement.type == AchievementType.CHAMPIONSHIP
    ]


def _turnaround_highlights(record: CareerRecord) -> list[CareerHighlight]:
    out: list[CareerHighlight] = []
    history = record.season_history
    for prev, curr in zip(history, history[1:]):
        if prev.team_id != curr.team_id:
            continue
        if prev.wins < TURNAROUND_MAX_PREV_WINS and curr.wins >= TURNAROUND_MIN_WINS:
            out.append(
                CareerHighlight(
                    type=HighlightType.TURNAROUND,
                    year=curr.year,
                    team_name=curr.team_name,
                    description=(
                        f"Turned {curr.team_name} from {prev.wins}-{prev.losses} to {curr.wins}-{curr.losses}"
                    ),
                    significance=Significance.NOTABLE,
                )
            )
    return out


def longest_tenure(record: CareerRecord) -> TeamTenure | None:
    # First tenure wins ties.
    best: TeamTenure | None = None
    for tenure in record.teams_worked_for:
        if best is None or tenure.seasons > best.seasons:
            best = tenure
    return best


def _longevity_highlights(record: CareerRecord) -> list[CareerHighlight]:
    tenure = longest_tenure(record)
    if tenure is None or tenure.seasons < LONGEVITY_HIGHLIGHT_SEASONS:
        return []
    return [
        CareerHighlight(
            type=HighlightType.LONGEVITY,
            year=0,
            team_name=tenure.team_name,
            description=f"{tenure.seasons} seasons with {tenure.team_name}",
            significance=Significance.NOTABLE,
        )
    ]


def extract_highlights(record: CareerRecord) -> list[CareerHighlight]:
    highlights = [
        *_championship_highlights(record),
        *_turnaround_highlights(record),
        *_longevity_highlights(record),
    ]
    # sorted() is stable, so discovery order holds within a significance.
    return sorted(highlights, key=lambda h: h.significance.rank)
