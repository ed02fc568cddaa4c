from __future__ import annotations

from typing import Callable

from .config import (
    HOF_DETRACT_FIRINGS,
    HOF_REASON_PLAYOFFS,
    HOF_REASON_SEASONS,
    HOF_REASON_WIN_PCT,
    LEGACY_BASE_SCORE,
    LEGACY_CHAMPIONSHIP_POINTS,
    LEGACY_CONFERENCE_POINTS,
    LEGACY_DIVISION_POINTS,
    LEGACY_FIRING_PENALTY,
    LEGACY_LONGEVITY_BONUSES,
    LEGACY_MULTI_TEAM_BONUS,
    LEGACY_MULTI_TEAM_MIN_TEAMS,
    LEGACY_PLAYOFF_CAP,
    LEGACY_PLAYOFF_POINTS,
    LEGACY_TIER_THRESHOLDS,
    LEGACY_WIN_PCT_BONUSES,
)
from .models import CareerRecord, HallOfFameStatus, LegacyTier


def _win_pct_bonus(win_pct: float) -> int:
    for threshold, bonus in LEGACY_WIN_PCT_BONUSES:
        if win_pct >= threshold:
            return bonus
    return 0


def _longevity_bonus(seasons: int) -> int:
    for threshold, bonus in LEGACY_LONGEVITY_BONUSES:
        if seasons >= threshold:
            return bonus
    return 0


def calculate_legacy_score(record: CareerRecord) -> int:
    score = LEGACY_BASE_SCORE
    score += record.championships * LEGACY_CHAMPIONSHIP_POINTS
    score += record.conference_championships * LEGACY_CONFERENCE_POINTS
    score += record.division_titles * LEGACY_DIVISION_POINTS
    score += min(record.playoff_appearances * LEGACY_PLAYOFF_POINTS, LEGACY_PLAYOFF_CAP)
    score += _win_pct_bonus(record.career_win_percentage)
    score += _longevity_bonus(record.total_seasons)
    score -= record.times_fired * LEGACY_FIRING_PENALTY

    winning_stops = sum(1 for t in record.teams_worked_for if t.win_percentage >= 0.5)
    if winning_stops >= LEGACY_MULTI_TEAM_MIN_TEAMS:
        score += LEGACY_MULTI_TEAM_BONUS

    return max(0, min(100, score))


def get_legacy_tier(score: float) -> LegacyTier:
    for threshold, tier in LEGACY_TIER_THRESHOLDS:
        if score >= threshold:
            return LegacyTier(tier)
    return LegacyTier.POOR


LEGACY_DESCRIPTIONS: dict[LegacyTier, Callable[[CareerRecord], str]] = {
    LegacyTier.HALL_OF_FAME: lambda r: (
        f"One of the greatest GMs in league history. {r.championships} championships "
        "and a lasting impact on the game."
    ),
    LegacyTier.LEGENDARY: lambda r: (
        f"A truly exceptional career. {r.gm_name} built multiple championship-caliber teams."
    ),
    LegacyTier.EXCELLENT: lambda r: (
        f"A highly successful career with {r.playoff_appearances} playoff appearances and consistent winning."
    ),
    LegacyTier.GOOD: lambda r: (
        f"A solid career with notable achievements. {r.gm_name} was a respected presence in the league."
    ),
    LegacyTier.AVERAGE: lambda _r: "A workmanlike career with ups and downs. Some good seasons mixed with struggles.",
    LegacyTier.FORGETTABLE: lambda _r: "A forgettable tenure in the league. Few memorable moments to reflect upon.",
    LegacyTier.POOR: lambda _r: "A difficult career marked by struggles and unfulfilled potential.",
}


def get_legacy_description(tier: LegacyTier, record: CareerRecord) -> str:
    return LEGACY_DESCRIPTIONS[tier](record)


def calculate_hall_of_fame_status(record: CareerRecord, legacy_score: float) -> HallOfFameStatus:
    if legacy_score >= 90 and record.championships >= 2:
        return HallOfFameStatus.FIRST_BALLOT
    if legacy_score >= 80 or (record.championships >= 1 and record.career_win_percentage >= 0.55):
        return HallOfFameStatus.EVENTUAL
    if legacy_score >= 65 or record.championships >= 1:
        return HallOfFameStatus.BORDERLINE
    if legacy_score >= 50:
        return HallOfFameStatus.UNLIKELY
    return HallOfFameStatus.NO


def get_hall_of_fame_reasons(record: CareerRecord, status: HallOfFameStatus) -> list[str]:
    reasons: list[str] = []
    if record.championships > 0:
        suffix = "s" if record.championships > 1 else ""
        reasons.append(f"{record.championships} championship{suffix}")
    if record.career_win_percentage >= HOF_REASON_WIN_PCT:
        reasons.append(f"{round(record.career_win_percentage * 100)}% career win rate")
    if record.playoff_appearances >= HOF_REASON_PLAYOFFS:
        reasons.append(f"{record.playoff_appearances} playoff appearances")
    if record.total_seasons >= HOF_REASON_SEASONS:
        reasons.append(f"{record.total_seasons} years of service")

    if status in (HallOfFameStatus.UNLIKELY, HallOfFameStatus.NO):
        if record.times_fired >= HOF_DETRACT_FIRINGS:
            reasons.append(f"{record.times_fired} firings hurt candidacy")
        if record.career_win_percentage < 0.5:
            reasons.append("Losing career record hurts chances")
    return reasons
