"""Static career and legacy tuning constants."""

SAVE_VERSION = 1
MIN_RETIREMENT_YEAR = 2000

BASE_REPUTATION = 50
REPUTATION_MIN = 0
REPUTATION_MAX = 100

# Per-season reputation deltas.
CHAMPIONSHIP_REPUTATION_BONUS = 15
CONFERENCE_REPUTATION_BONUS = 8
PLAYOFF_REPUTATION_BONUS = 3
WINNING_SEASON_PCT = 0.6
WINNING_SEASON_BONUS = 2
LOSING_SEASON_PCT = 0.4
LOSING_SEASON_PENALTY = 1
OWNER_APPROVAL_DIVISOR = 10
UNEMPLOYMENT_YEAR_PENALTY = 3

# (severity strictly above, penalty); severity 0-100, higher is an uglier exit.
FIRING_SEVERITY_PENALTIES: tuple[tuple[int, int], ...] = (
    (90, 15),
    (80, 12),
    (65, 10),
    (50, 7),
)
FIRING_BASE_PENALTY = 5

REPUTATION_TIER_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (90, "elite"),
    (75, "high"),
    (55, "moderate"),
    (35, "low"),
)

LEGACY_BASE_SCORE = 30
LEGACY_CHAMPIONSHIP_POINTS = 20
LEGACY_CONFERENCE_POINTS = 8
LEGACY_DIVISION_POINTS = 3
LEGACY_PLAYOFF_POINTS = 2
LEGACY_PLAYOFF_CAP = 20
LEGACY_FIRING_PENALTY = 5
LEGACY_MULTI_TEAM_BONUS = 5
LEGACY_MULTI_TEAM_MIN_TEAMS = 2
LEGACY_WIN_PCT_BONUSES: tuple[tuple[float, int], ...] = (
    (0.60, 15),
    (0.55, 10),
    (0.50, 5),
)
LEGACY_LONGEVITY_BONUSES: tuple[tuple[int, int], ...] = (
    (20, 10),
    (15, 7),
    (10, 4),
)

LEGACY_TIER_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (90, "hall_of_fame"),
    (75, "legendary"),
    (60, "excellent"),
    (45, "good"),
    (30, "average"),
    (15, "forgettable"),
)

HOF_REASON_WIN_PCT = 0.55
HOF_REASON_PLAYOFFS = 10
HOF_REASON_SEASONS = 15
HOF_DETRACT_FIRINGS = 2

TURNAROUND_MAX_PREV_WINS = 6
TURNAROUND_MIN_WINS = 10
LONGEVITY_HIGHLIGHT_SEASONS = 8
