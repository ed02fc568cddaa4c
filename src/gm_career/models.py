from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .config import BASE_REPUTATION


class DepartureReason(str, Enum):
    FIRED = "fired"
    RESIGNED = "resigned"


class AchievementType(str, Enum):
    CHAMPIONSHIP = "championship"
    CONFERENCE_CHAMPIONSHIP = "conference_championship"
    DIVISION_TITLE = "division_title"
    COACH_OF_YEAR = "coach_of_year"
    EXECUTIVE_OF_YEAR = "executive_of_year"
    PERFECT_SEASON = "perfect_season"
    WORST_TO_FIRST = "worst_to_first"
    DYNASTY_BUILDER = "dynasty_builder"
    REBUILDER = "rebuilder"
    LONGEVITY = "longevity"


class ReputationTier(str, Enum):
    ELITE = "elite"
    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"
    NONE = "none"


class LegacyTier(str, Enum):
    HALL_OF_FAME = "hall_of_fame"
    LEGENDARY = "legendary"
    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    FORGETTABLE = "forgettable"
    POOR = "poor"


class HallOfFameStatus(str, Enum):
    FIRST_BALLOT = "first_ballot"
    EVENTUAL = "eventual"
    BORDERLINE = "borderline"
    UNLIKELY = "unlikely"
    NO = "no"


class HighlightType(str, Enum):
    CHAMPIONSHIP = "championship"
    DYNASTY = "dynasty"
    TURNAROUND = "turnaround"
    DRAFT_SUCCESS = "draft_success"
    LONGEVITY = "longevity"
    INNOVATION = "innovation"
    MENTORSHIP = "mentorship"


class Significance(str, Enum):
    MAJOR = "major"
    NOTABLE = "notable"
    MINOR = "minor"

    @property
    def rank(self) -> int:
        return _SIGNIFICANCE_RANK[self]


_SIGNIFICANCE_RANK = {Significance.MAJOR: 0, Significance.NOTABLE: 1, Significance.MINOR: 2}


class RetirementReason(str, Enum):
    VOLUNTARY = "voluntary"
    FORCED = "forced"
    HEALTH = "health"


@dataclass(frozen=True, slots=True)
class SeasonSnapshot:
    year: int
    team_id: str
    team_name: str
    wins: int
    losses: int
    ties: int = 0
    made_playoffs: bool = False
    playoff_wins: int = 0
    won_division: bool = False
    won_conference: bool = False
    won_championship: bool = False
    fired: bool = False

    @property
    def games(self) -> int:
        return self.wins + self.losses + self.ties

    @property
    def win_pct(self) -> float:
        return self.wins / self.games if self.games > 0 else 0.0


@dataclass(frozen=True, slots=True)
class TeamTenure:
    team_id: str
    team_name: str
    start_year: int
    end_year: int | None = None
    seasons: int = 0
    wins: int = 0
    losses: int = 0
    ties: int = 0
    championships: int = 0
    conference_championships: int = 0
    division_titles: int = 0
    playoff_appearances: int = 0
    win_percentage: float = 0.0
    was_fired: bool = False
    reason_for_departure: DepartureReason | None = None

    @property
    def is_open(self) -> bool:
        return self.end_year is None


@dataclass(frozen=True, slots=True)
class Achievement:
    type: AchievementType
    year: int
    team_id: str
    description: str


@dataclass(frozen=True, slots=True)
class ReputationFactors:
    base_reputation: int = BASE_REPUTATION
    championship_bonus: int = 0
    playoff_bonus: int = 0
    winning_season_bonus: int = 0
    losing_season_penalty: int = 0
    firing_penalty: int = 0
    unemployment_penalty: int = 0
    owner_approval_modifier: int = 0


@dataclass(frozen=True, slots=True)
class CareerRecord:
    gm_id: str
    gm_name: str
    total_seasons: int = 0
    total_wins: int = 0
    total_losses: int = 0
    total_ties: int = 0
    career_win_percentage: float = 0.0
    championships: int = 0
    conference_championships: int = 0
    division_titles: int = 0
    playoff_appearances: int = 0
    times_fired: int = 0
    years_unemployed: int = 0
    reputation_score: int = BASE_REPUTATION
    reputation_factors: ReputationFactors = field(default_factory=ReputationFactors)
    achievements: tuple[Achievement, ...] = ()
    teams_worked_for: tuple[TeamTenure, ...] = ()
    season_history: tuple[SeasonSnapshot, ...] = ()


@dataclass(frozen=True, slots=True)
class CareerHighlight:
    type: HighlightType
    year: int
    team_name: str
    description: str
    significance: Significance


@dataclass(frozen=True, slots=True)
class LongestTenure:
    team_name: str = "None"
    seasons: int = 0


@dataclass(frozen=True, slots=True)
class BestSeason:
    year: int = 0
    team_name: str = ""
    wins: int = 0
    losses: int = 0


@dataclass(frozen=True, slots=True)
class FinalCareerStats:
    total_seasons: int
    total_wins: int
    total_losses: int
    total_ties: int
    win_percentage: float
    teams_managed: int
    championships: int
    conference_championships: int
    division_titles: int
    playoff_appearances: int
    playoff_win_percentage: float
    times_fired: int
    longest_tenure: LongestTenure
    best_season: BestSeason


@dataclass(frozen=True, slots=True)
class TeamLegacy:
    team_id: str
    team_name: str
    tenure: str
    record: str
    achievements: tuple[str, ...]
    fan_memory: str


@dataclass(frozen=True, slots=True)
class CareerSummary:
    gm_name: str
    retirement_year: int
    total_seasons: int
    stats: FinalCareerStats
    legacy_tier: LegacyTier
    legacy_score: int
    legacy_description: str
    hall_of_fame_status: HallOfFameStatus
    hall_of_fame_reasons: tuple[str, ...]
    highlights: tuple[CareerHighlight, ...]
    team_legacies: tuple[TeamLegacy, ...]
    farewell_statement: str
    media_reaction: str


@dataclass(frozen=True, slots=True)
class RetirementState:
    is_retired: bool = False
    retirement_year: int | None = None
    retirement_reason: RetirementReason | None = None
    career_summary: CareerSummary | None = None
