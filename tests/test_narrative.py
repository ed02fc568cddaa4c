import pytest

from gm_career.ledger import create_career_record, record_firing, record_season, start_new_team
from gm_career.models import LegacyTier, SeasonSnapshot, TeamTenure
from gm_career.narrative import (
    count_label,
    generate_fan_memory,
    generate_farewell_statement,
    generate_media_reaction,
    generate_team_legacies,
    generate_unemployment_narrative,
)


def _tenure(**overrides) -> TeamTenure:
    kwargs = {"team_id": "a", "team_name": "Alpha Owls", "start_year": 2020, "end_year": 2025, "seasons": 5}
    kwargs.update(overrides)
    return TeamTenure(**kwargs)


@pytest.mark.parametrize(
    ("tenure", "expected_start"),
    [
        (_tenure(championships=1, win_percentage=0.3, was_fired=True), "Championship glory!"),
        (_tenure(win_percentage=0.65), "Golden era"),
        (_tenure(win_percentage=0.35, was_fired=True, playoff_appearances=4), "A dark period"),
        (_tenure(win_percentage=0.35, playoff_appearances=3), "Competitive years"),
        (_tenure(win_percentage=0.45, was_fired=True, seasons=2), "A brief tenure"),
        (_tenure(win_percentage=0.5), "Mixed results."),
    ],
)
def test_fan_memory_priority(tenure: TeamTenure, expected_start: str) -> None:
    assert generate_fan_memory(tenure).startswith(expected_start)


def test_farewell_and_media_cover_every_tier() -> None:
    record = create_career_record("gm-1", "John Smith")
    farewells = {tier: generate_farewell_statement(record, tier) for tier in LegacyTier}
    reactions = {tier: generate_media_reaction(record, tier) for tier in LegacyTier}
    assert len(set(farewells.values())) == len(LegacyTier)
    assert len(set(reactions.values())) == len(LegacyTier)
    assert all("John Smith" in text for text in reactions.values())
    assert all(text.startswith('"') and text.endswith('"') for text in farewells.values())
    for tier in LegacyTier:
        assert generate_farewell_statement(record, tier) == farewells[tier]
        assert generate_media_reaction(record, tier) == reactions[tier]


def test_hall_of_fame_media_reaction() -> None:
    record = create_career_record("gm-1", "John Smith")
    assert generate_media_reaction(record, LegacyTier.HALL_OF_FAME) == (
        "League-wide tributes pour in as John Smith retires. Hall of Fame induction is a certainty."
    )


def test_team_legacies_from_ledger() -> None:
    record = start_new_team(create_career_record("gm-1", "John Smith"), "a", "Alpha Owls", 2020)
    seasons = [
        (7, 10, {}),
        (9, 8, {"made_playoffs": True}),
        (12, 5, {"made_playoffs": True, "won_division": True}),
        (14, 3, {"made_playoffs": True, "won_division": True, "won_conference": True, "won_championship": True}),
        (10, 7, {"made_playoffs": True}),
    ]
    for offset, (wins, losses, flags) in enumerate(seasons):
        record = record_season(
            record,
            SeasonSnapshot(year=2020 + offset, team_id="a", team_name="Alpha Owls", wins=wins, losses=losses, **flags),
        )

    open_legacy = generate_team_legacies(record)[0]
    assert open_legacy.tenure == "2020-present"
    assert open_legacy.record == "52-33"
    assert open_legacy.achievements == (
        "1 championship",
        "1 conference title",
        "2 division titles",
        "4 playoff appearances",
    )
    assert open_legacy.fan_memory.startswith("Championship glory!")

    record = record_firing(record, "a", 2024, severity=20)
    closed_legacy = generate_team_legacies(record)[0]
    assert closed_legacy.tenure == "2020-2024"


def test_team_legacy_record_shows_ties() -> None:
    record = start_new_team(create_career_record("gm-1", "John Smith"), "a", "Alpha Owls", 2020)
    record = record_season(
        record, SeasonSnapshot(year=2020, team_id="a", team_name="Alpha Owls", wins=3, losses=13, ties=1)
    )
    record = record_firing(record, "a", 2020, severity=95)
    legacy = generate_team_legacies(record)[0]
    assert legacy.record == "3-13-1"
    assert legacy.achievements == ()
    assert legacy.fan_memory.startswith("A dark period")


def test_unemployment_narrative() -> None:
    assert "gap year" in generate_unemployment_narrative(60, 1, 1)
    assert generate_unemployment_narrative(75, 1, 0) == "Well-regarded GM waiting for the right opportunity"
    assert generate_unemployment_narrative(55, 2, 0) == "Former GM exploring options after recent departure"
    assert generate_unemployment_narrative(60, 3, 0) == "Former GM struggling to find a way back into the league"
    assert generate_unemployment_narrative(30, 1, 0) == "Former GM's job prospects limited after disappointing tenure"
    assert generate_unemployment_narrative(45, 2, 0) == "Former GM surveying the job market"


def test_count_label_pluralises_everything_but_one() -> None:
    assert count_label(0, "season") == "0 seasons"
    assert count_label(1, "championship") == "1 championship"
    assert count_label(3, "division title") == "3 division titles"
