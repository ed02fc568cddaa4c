"""Career ledger: folds career events into an immutable ``CareerRecord``.

Every operation takes a record and returns a new one. Callers thread the
result forward in real-world order, since season results are applied to
whichever tenure is open at the time.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from .config import (
    CHAMPIONSHIP_REPUTATION_BONUS,
    CONFERENCE_REPUTATION_BONUS,
    FIRING_BASE_PENALTY,
    FIRING_SEVERITY_PENALTIES,
    LOSING_SEASON_PCT,
    LOSING_SEASON_PENALTY,
    OWNER_APPROVAL_DIVISOR,
    PLAYOFF_REPUTATION_BONUS,
    REPUTATION_MAX,
    REPUTATION_MIN,
    REPUTATION_TIER_THRESHOLDS,
    UNEMPLOYMENT_YEAR_PENALTY,
    WINNING_SEASON_BONUS,
    WINNING_SEASON_PCT,
)
from .errors import NoOpenTenureError, TenureConflictError
from .models import (
    Achievement,
    AchievementType,
    CareerRecord,
    DepartureReason,
    ReputationFactors,
    ReputationTier,
    SeasonSnapshot,
    TeamTenure,
)
from .narrative import count_label

logger = logging.getLogger(__name__)

REPUTATION_TIER_DESCRIPTIONS: dict[ReputationTier, str] = {
    ReputationTier.ELITE: "Top candidate - multiple teams interested",
    ReputationTier.HIGH: "Strong interest from contending teams",
    ReputationTier.MODERATE: "Some interest from rebuilding teams",
    ReputationTier.LOW: "Limited interest - may need to take less desirable jobs",
    ReputationTier.NONE: "No current interest from any teams",
}


def _win_pct(wins: int, losses: int, ties: int) -> float:
    games = wins + losses + ties
    return wins / games if games > 0 else 0.0


def create_career_record(gm_id: str, gm_name: str) -> CareerRecord:
    return CareerRecord(gm_id=gm_id, gm_name=gm_name)


def _factor_total(factors: ReputationFactors) -> int:
    return int(
        factors.base_reputation
        + factors.championship_bonus
        + factors.playoff_bonus
        + factors.winning_season_bonus
        - factors.losing_season_penalty
        - factors.firing_penalty
        - factors.unemployment_penalty
        + factors.owner_approval_modifier
    )


def _clamp_reputation(score: int) -> int:
    return max(REPUTATION_MIN, min(REPUTATION_MAX, score))


def calculate_reputation_score(factors: ReputationFactors) -> int:
    return _clamp_reputation(_factor_total(factors))


def _with_factors(record: CareerRecord, factors: ReputationFactors, **changes: object) -> CareerRecord:
    # Apply this event's delta to the current clamped score, not the
    # lifetime factor total.
    delta = _factor_total(factors) - _factor_total(record.reputation_factors)
    return replace(
        record,
        reputation_factors=factors,
        reputation_score=_clamp_reputation(record.reputation_score + delta),
        **changes,
    )


def get_current_tenure(record: CareerRecord) -> TeamTenure | None:
    for tenure in record.teams_worked_for:
        if tenure.end_year is None:
            return tenure
    return None


def _open_tenure_index(record: CareerRecord, team_id: str) -> int:
    for idx, tenure in enumerate(record.teams_worked_for):
        if tenure.team_id == team_id and tenure.end_year is None:
            return idx
    raise NoOpenTenureError(team_id)


def _replace_tenure(record: CareerRecord, idx: int, tenure: TeamTenure) -> tuple[TeamTenure, ...]:
    teams = record.teams_worked_for
    return (*teams[:idx], tenure, *teams[idx + 1:])


def start_new_team(record: CareerRecord, team_id: str, team_name: str, year: int) -> CareerRecord:
    current = get_current_tenure(record)
    if current is not None:
        raise TenureConflictError(current.team_id, team_id)
    tenure = TeamTenure(team_id=team_id, team_name=team_name, start_year=year)
    logger.info("GM %s takes over %s in %d", record.gm_id, team_name, year)
    return replace(
        record,
        teams_worked_for=(*record.teams_worked_for, tenure),
        years_unemployed=0,
    )


def _season_achievements(snapshot: SeasonSnapshot) -> list[Achievement]:
    out: list[Achievement] = []
    if snapshot.won_championship:
        out.append(
            Achievement(
                type=AchievementType.CHAMPIONSHIP,
                year=snapshot.year,
                team_id=snapshot.team_id,
                description=f"Won championship with {snapshot.team_name}",
            )
        )
    elif snapshot.won_conference:
        out.append(
            Achievement(
                type=AchievementType.CONFERENCE_CHAMPIONSHIP,
                year=snapshot.year,
                team_id=snapshot.team_id,
                description=f"Won conference championship with {snapshot.team_name}",
            )
        )
    if snapshot.won_division:
        out.append(
            Achievement(
                type=AchievementType.DIVISION_TITLE,
                year=snapshot.year,
                team_id=snapshot.team_id,
                description=f"Won division title with {snapshot.team_name}",
            )
        )
    return out


def _season_reputation(
    factors: ReputationFactors, snapshot: SeasonSnapshot, owner_approval_change: float
) -> ReputationFactors:
    championship_bonus = factors.championship_bonus
    if snapshot.won_championship:
        championship_bonus += CHAMPIONSHIP_REPUTATION_BONUS
    elif snapshot.won_conference:
        championship_bonus += CONFERENCE_REPUTATION_BONUS

    pct = snapshot.win_pct
    return replace(
        factors,
        championship_bonus=championship_bonus,
        playoff_bonus=factors.playoff_bonus + (PLAYOFF_REPUTATION_BONUS if snapshot.made_playoffs else 0),
        winning_season_bonus=factors.winning_season_bonus + (WINNING_SEASON_BONUS if pct >= WINNING_SEASON_PCT else 0),
        losing_season_penalty=factors.losing_season_penalty + (LOSING_SEASON_PENALTY if pct < LOSING_SEASON_PCT else 0),
        owner_approval_modifier=factors.owner_approval_modifier + round(owner_approval_change / OWNER_APPROVAL_DIVISOR),
    )


def record_season(
    record: CareerRecord, snapshot: SeasonSnapshot, owner_approval_change: float = 0
) -> CareerRecord:
    idx = _open_tenure_index(record, snapshot.team_id)
    tenure = record.teams_worked_for[idx]

    tenure_wins = tenure.wins + snapshot.wins
    tenure_losses = tenure.losses + snapshot.losses
    tenure_ties = tenure.ties + snapshot.ties
    updated_tenure = replace(
        tenure,
        seasons=tenure.seasons + 1,
        wins=tenure_wins,
        losses=tenure_losses,
        ties=tenure_ties,
        win_percentage=_win_pct(tenure_wins, tenure_losses, tenure_ties),
        playoff_appearances=tenure.playoff_appearances + int(snapshot.made_playoffs),
        division_titles=tenure.division_titles + int(snapshot.won_division),
        conference_championships=tenure.conference_championships + int(snapshot.won_conference),
        championships=tenure.championships + int(snapshot.won_championship),
    )

    total_wins = record.total_wins + snapshot.wins
    total_losses = record.total_losses + snapshot.losses
    total_ties = record.total_ties + snapshot.ties
    factors = _season_reputation(record.reputation_factors, snapshot, owner_approval_change)
    logger.debug(
        "GM %s season %d with %s: %d-%d-%d",
        record.gm_id,
        snapshot.year,
        snapshot.team_name,
        snapshot.wins,
        snapshot.losses,
        snapshot.ties,
    )
    return _with_factors(
        record,
        factors,
        total_seasons=record.total_seasons + 1,
        total_wins=total_wins,
        total_losses=total_losses,
        total_ties=total_ties,
        career_win_percentage=_win_pct(total_wins, total_losses, total_ties),
        championships=record.championships + int(snapshot.won_championship),
        conference_championships=record.conference_championships + int(snapshot.won_conference),
        division_titles=record.division_titles + int(snapshot.won_division),
        playoff_appearances=record.playoff_appearances + int(snapshot.made_playoffs),
        teams_worked_for=_replace_tenure(record, idx, updated_tenure),
        season_history=(*record.season_history, snapshot),
        achievements=(*record.achievements, *_season_achievements(snapshot)),
    )


def firing_reputation_penalty(severity: int) -> int:
    for threshold, penalty in FIRING_SEVERITY_PENALTIES:
        if severity > threshold:
            return penalty
    return FIRING_BASE_PENALTY


def record_firing(record: CareerRecord, team_id: str, year: int, severity: int) -> CareerRecord:
    idx = _open_tenure_index(record, team_id)
    tenure = replace(
        record.teams_worked_for[idx],
        end_year=year,
        was_fired=True,
        reason_for_departure=DepartureReason.FIRED,
    )
    penalty = firing_reputation_penalty(severity)
    factors = replace(
        record.reputation_factors,
        firing_penalty=record.reputation_factors.firing_penalty + penalty,
    )
    logger.info("GM %s fired by %s in %d (reputation -%d)", record.gm_id, tenure.team_name, year, penalty)
    return _with_factors(
        record,
        factors,
        teams_worked_for=_replace_tenure(record, idx, tenure),
        times_fired=record.times_fired + 1,
    )


def record_resignation(record: CareerRecord, team_id: str, year: int) -> CareerRecord:
    idx = _open_tenure_index(record, team_id)
    tenure = replace(
        record.teams_worked_for[idx],
        end_year=year,
        was_fired=False,
        reason_for_departure=DepartureReason.RESIGNED,
    )
    logger.info("GM %s resigned from %s in %d", record.gm_id, tenure.team_name, year)
    return replace(record, teams_worked_for=_replace_tenure(record, idx, tenure))


def record_unemployment_year(record: CareerRecord) -> CareerRecord:
    factors = replace(
        record.reputation_factors,
        unemployment_penalty=record.reputation_factors.unemployment_penalty + UNEMPLOYMENT_YEAR_PENALTY,
    )
    return _with_factors(record, factors, years_unemployed=record.years_unemployed + 1)


def get_reputation_tier(score: float) -> ReputationTier:
    for threshold, tier in REPUTATION_TIER_THRESHOLDS:
        if score >= threshold:
            return ReputationTier(tier)
    return ReputationTier.NONE


def get_reputation_tier_description(tier: ReputationTier) -> str:
    return REPUTATION_TIER_DESCRIPTIONS[tier]


def get_career_summary(record: CareerRecord) -> str:
    if record.total_seasons == 0:
        return "Rookie GM with no professional experience"

    ties = f"-{record.total_ties}" if record.total_ties > 0 else ""
    parts = [
        f"{count_label(record.total_seasons, 'season')} as GM",
        f"{record.total_wins}-{record.total_losses}{ties} record",
        f"{round(record.career_win_percentage * 100)}% win rate",
    ]
    if record.championships > 0:
        parts.append(count_label(record.championships, "championship"))
    if len(record.teams_worked_for) > 1:
        parts.append(f"{len(record.teams_worked_for)} different teams")
    return " | ".join(parts)


def _is_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _valid_tenure(tenure: object) -> bool:
    if not isinstance(tenure, TeamTenure):
        return False
    if tenure.end_year is not None and not isinstance(tenure.end_year, int):
        return False
    return all(_is_count(value) for value in (tenure.seasons, tenure.wins, tenure.losses, tenure.ties))


def validate_career_record(record: object) -> bool:
    if not isinstance(record, CareerRecord):
        return False
    if not isinstance(record.gm_id, str) or not record.gm_id:
        return False
    if not isinstance(record.gm_name, str) or not record.gm_name:
        return False

    counters = (
        record.total_seasons,
        record.total_wins,
        record.total_losses,
        record.total_ties,
        record.championships,
        record.conference_championships,
        record.division_titles,
        record.playoff_appearances,
        record.times_fired,
        record.years_unemployed,
    )
    if not all(_is_count(value) for value in counters):
        return False
    if not _is_number(record.career_win_percentage) or not 0.0 <= record.career_win_percentage <= 1.0:
        return False
    if not _is_number(record.reputation_score):
        return False
    if not REPUTATION_MIN <= record.reputation_score <= REPUTATION_MAX:
        return False

    tenures = record.teams_worked_for
    if not isinstance(tenures, tuple) or not all(_valid_tenure(t) for t in tenures):
        return False
    if not isinstance(record.season_history, tuple) or not isinstance(record.achievements, tuple):
        return False
    if sum(1 for t in tenures if t.end_year is None) > 1:
        return False
    if record.total_seasons != len(record.season_history):
        return False
    if record.total_seasons != sum(t.seasons for t in tenures):
        return False
    return True
