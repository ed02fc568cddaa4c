from __future__ import annotations

import logging

from .config import MIN_RETIREMENT_YEAR
from .errors import AlreadyRetiredError, RetirementError
from .highlights import extract_highlights, longest_tenure
from .legacy import (
    calculate_hall_of_fame_status,
    calculate_legacy_score,
    get_hall_of_fame_reasons,
    get_legacy_description,
    get_legacy_tier,
)
from .models import (
    BestSeason,
    CareerRecord,
    CareerSummary,
    FinalCareerStats,
    HallOfFameStatus,
    LegacyTier,
    LongestTenure,
    RetirementReason,
    RetirementState,
)
from .narrative import generate_farewell_statement, generate_media_reaction, generate_team_legacies

logger = logging.getLogger(__name__)

LEGACY_TIER_DISPLAY_NAMES: dict[LegacyTier, str] = {
    LegacyTier.HALL_OF_FAME: "Hall of Fame",
    LegacyTier.LEGENDARY: "Legendary",
    LegacyTier.EXCELLENT: "Excellent",
    LegacyTier.GOOD: "Good",
    LegacyTier.AVERAGE: "Average",
    LegacyTier.FORGETTABLE: "Forgettable",
    LegacyTier.POOR: "Poor",
}

HALL_OF_FAME_STATUS_DISPLAY: dict[HallOfFameStatus, str] = {
    HallOfFameStatus.FIRST_BALLOT: "First Ballot Hall of Famer",
    HallOfFameStatus.EVENTUAL: "Eventual Hall of Famer",
    HallOfFameStatus.BORDERLINE: "Borderline Hall of Fame Candidate",
    HallOfFameStatus.UNLIKELY: "Hall of Fame Unlikely",
    HallOfFameStatus.NO: "Not a Hall of Fame Candidate",
}


def create_retirement_state() -> RetirementState:
    return RetirementState()


def calculate_final_stats(record: CareerRecord) -> FinalCareerStats:
    games = record.total_wins + record.total_losses + record.total_ties
    win_pct = record.total_wins / games if games > 0 else 0.0

    longest = longest_tenure(record)
    longest_row = (
        LongestTenure(team_name=longest.team_name, seasons=longest.seasons)
        if longest is not None and longest.seasons > 0
        else LongestTenure()
    )

    best = BestSeason()
    for season in record.season_history:
        if season.wins > best.wins:
            best = BestSeason(year=season.year, team_name=season.team_name, wins=season.wins, losses=season.losses)

    # Every playoff run that didn't end in a title ends in exactly one loss.
    playoff_wins = 0
    playoff_losses = 0
    for season in record.season_history:
        if not season.made_playoffs:
            continue
        playoff_wins += season.playoff_wins
        if not season.won_championship:
            playoff_losses += 1
    playoff_games = playoff_wins + playoff_losses
    playoff_pct = playoff_wins / playoff_games if playoff_games > 0 else 0.0

    return FinalCareerStats(
        total_seasons=record.total_seasons,
        total_wins=record.total_wins,
        total_losses=record.total_losses,
        total_ties=record.total_ties,
        win_percentage=win_pct,
        teams_managed=len(record.teams_worked_for),
        championships=record.championships,
        conference_championships=record.conference_championships,
        division_titles=record.division_titles,
        playoff_appearances=record.playoff_appearances,
        playoff_win_percentage=playoff_pct,
        times_fired=record.times_fired,
        longest_tenure=longest_row,
        best_season=best,
    )


def generate_career_summary(record: CareerRecord, retirement_year: int) -> CareerSummary:
    legacy_score = calculate_legacy_score(record)
    tier = get_legacy_tier(legacy_score)
    hof_status = calculate_hall_of_fame_status(record, legacy_score)
    return CareerSummary(
        gm_name=record.gm_name,
        retirement_year=retirement_year,
        total_seasons=record.total_seasons,
        stats=calculate_final_stats(record),
        legacy_tier=tier,
        legacy_score=legacy_score,
        legacy_description=get_legacy_description(tier, record),
        hall_of_fame_status=hof_status,
        hall_of_fame_reasons=tuple(get_hall_of_fame_reasons(record, hof_status)),
        highlights=tuple(extract_highlights(record)),
        team_legacies=tuple(generate_team_legacies(record)),
        farewell_statement=generate_farewell_statement(record, tier),
        media_reaction=generate_media_reaction(record, tier),
    )


def initiate_retirement(
    record: CareerRecord,
    year: int,
    reason: RetirementReason = RetirementReason.VOLUNTARY,
) -> RetirementState:
    if year < MIN_RETIREMENT_YEAR:
        raise RetirementError(f"Retirement year {year} is before {MIN_RETIREMENT_YEAR}.")
    summary = generate_career_summary(record, year)
    logger.info(
        "GM %s retires in %d (%s): legacy %d, %s",
        record.gm_id,
        year,
        RetirementReason(reason).value,
        summary.legacy_score,
        summary.legacy_tier.value,
    )
    return RetirementState(
        is_retired=True,
        retirement_year=year,
        retirement_reason=RetirementReason(reason),
        career_summary=summary,
    )


def retire(
    state: RetirementState,
    record: CareerRecord,
    year: int,
    reason: RetirementReason = RetirementReason.VOLUNTARY,
) -> RetirementState:
    if state.is_retired:
        raise AlreadyRetiredError(state.retirement_year)
    return initiate_retirement(record, year, reason)


def validate_retirement_state(state: object) -> bool:
    if not isinstance(state, RetirementState):
        return False
    if not isinstance(state.is_retired, bool):
        return False
    if state.is_retired:
        year = state.retirement_year
        if not isinstance(year, int) or isinstance(year, bool) or year < MIN_RETIREMENT_YEAR:
            return False
        if not isinstance(state.retirement_reason, RetirementReason):
            return False
        if not isinstance(state.career_summary, CareerSummary):
            return False
        score = state.career_summary.legacy_score
        if not isinstance(score, int) or isinstance(score, bool) or not 0 <= score <= 100:
            return False
    return True


def get_retirement_headline(summary: CareerSummary) -> str:
    return f"{summary.gm_name} Retires After {summary.total_seasons} Seasons"


def get_legacy_tier_display_name(tier: LegacyTier) -> str:
    return LEGACY_TIER_DISPLAY_NAMES[tier]


def get_hall_of_fame_status_display(status: HallOfFameStatus) -> str:
    return HALL_OF_FAME_STATUS_DISPLAY[status]
