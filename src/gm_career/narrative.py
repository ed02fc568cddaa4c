"""Deterministic career flavor text keyed on legacy tier and tenure facts."""

from __future__ import annotations

from typing import Callable

from .models import CareerRecord, LegacyTier, TeamLegacy, TeamTenure


def count_label(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


def generate_fan_memory(tenure: TeamTenure) -> str:
    if tenure.championships > 0:
        return "Championship glory! Fans will forever remember the title runs."
    if tenure.win_percentage >= 0.6:
        return "Golden era for the franchise. Consistent winning and exciting football."
    if tenure.was_fired and tenure.win_percentage < 0.4:
        return "A dark period fans would rather forget. Things have gotten better since."
    if tenure.playoff_appearances >= 3:
        return "Competitive years with playoff memories, even if the ultimate goal was elusive."
    if tenure.seasons <= 2:
        return "A brief tenure that didn't leave much of an impression either way."
    return "Mixed results. Some good seasons, some struggles. A middle-of-the-pack era."


FAREWELL_STATEMENTS: dict[LegacyTier, Callable[[CareerRecord], str]] = {
    LegacyTier.HALL_OF_FAME: lambda r: (
        '"It\'s been an incredible journey. To the fans, players, and coaches who made this possible, '
        f'thank you. After {r.total_seasons} seasons, I leave this game with a full heart and no regrets."'
    ),
    LegacyTier.LEGENDARY: lambda r: (
        '"I never imagined it would go this well. We raised the standard everywhere we went, '
        'and I leave knowing the foundation is strong."'
    ),
    LegacyTier.EXCELLENT: lambda r: (
        '"I\'m proud of what we accomplished together. We won a lot of games and gave our fans '
        'plenty of Sundays to remember."'
    ),
    LegacyTier.GOOD: lambda r: (
        '"There were challenges, but we built something worth being proud of. '
        'Time to enjoy some well-deserved rest."'
    ),
    LegacyTier.AVERAGE: lambda r: (
        '"This game has given me so much. I wish we could have achieved more, '
        'but I\'m at peace with my time in the league."'
    ),
    LegacyTier.FORGETTABLE: lambda r: (
        '"It\'s time to step away. I gave it everything I had, even if the results '
        'never quite came together."'
    ),
    LegacyTier.POOR: lambda r: (
        '"I take responsibility for how things went. I hope to be remembered for the effort, '
        'even if the results weren\'t there."'
    ),
}

MEDIA_REACTIONS: dict[LegacyTier, Callable[[CareerRecord], str]] = {
    LegacyTier.HALL_OF_FAME: lambda r: (
        f"League-wide tributes pour in as {r.gm_name} retires. Hall of Fame induction is a certainty."
    ),
    LegacyTier.LEGENDARY: lambda r: (
        f"A well-deserved retirement for {r.gm_name} after a career that will be remembered for decades."
    ),
    LegacyTier.EXCELLENT: lambda r: (
        f"{r.gm_name} retires as one of the better GMs of their era. A solid legacy secured."
    ),
    LegacyTier.GOOD: lambda r: (
        f"{r.gm_name} steps away after a respectable career with some memorable moments."
    ),
    LegacyTier.AVERAGE: lambda r: (
        f"{r.gm_name}'s retirement announcement generates modest attention across the league."
    ),
    LegacyTier.FORGETTABLE: lambda r: (
        f"{r.gm_name} quietly retires. The league moves on without much fanfare."
    ),
    LegacyTier.POOR: lambda r: (
        f"Few tears are shed as {r.gm_name} exits after a rocky run in the front office."
    ),
}


def generate_farewell_statement(record: CareerRecord, tier: LegacyTier) -> str:
    return FAREWELL_STATEMENTS[tier](record)


def generate_media_reaction(record: CareerRecord, tier: LegacyTier) -> str:
    return MEDIA_REACTIONS[tier](record)


def _tenure_achievements(tenure: TeamTenure) -> tuple[str, ...]:
    counts = (
        (tenure.championships, "championship"),
        (tenure.conference_championships, "conference title"),
        (tenure.division_titles, "division title"),
        (tenure.playoff_appearances, "playoff appearance"),
    )
    return tuple(count_label(count, noun) for count, noun in counts if count > 0)


def generate_team_legacy(tenure: TeamTenure) -> TeamLegacy:
    end = tenure.end_year if tenure.end_year is not None else "present"
    ties = f"-{tenure.ties}" if tenure.ties > 0 else ""
    return TeamLegacy(
        team_id=tenure.team_id,
        team_name=tenure.team_name,
        tenure=f"{tenure.start_year}-{end}",
        record=f"{tenure.wins}-{tenure.losses}{ties}",
        achievements=_tenure_achievements(tenure),
        fan_memory=generate_fan_memory(tenure),
    )


def generate_team_legacies(record: CareerRecord) -> list[TeamLegacy]:
    return [generate_team_legacy(tenure) for tenure in record.teams_worked_for]


def generate_unemployment_narrative(reputation_score: int, years_unemployed: int, championships: int) -> str:
    if championships > 0 and years_unemployed == 1:
        return "Championship-winning GM taking a 'gap year' before returning to the league"
    if reputation_score >= 70 and years_unemployed == 1:
        return "Well-regarded GM waiting for the right opportunity"
    if reputation_score >= 50 and years_unemployed <= 2:
        return "Former GM exploring options after recent departure"
    if years_unemployed >= 3:
        return "Former GM struggling to find a way back into the league"
    if reputation_score < 40:
        return "Former GM's job prospects limited after disappointing tenure"
    return "Former GM surveying the job market"
