from gm_career.highlights import extract_highlights, longest_tenure
from gm_career.ledger import create_career_record, record_resignation, record_season, start_new_team
from gm_career.models import HighlightType, SeasonSnapshot, Significance


def _play(record, team_id: str, team_name: str, year: int, results: list[tuple[int, int, bool]]):
    for offset, (wins, losses, title) in enumerate(results):
        record = record_season(
            record,
            SeasonSnapshot(
                year=year + offset,
                team_id=team_id,
                team_name=team_name,
                wins=wins,
                losses=losses,
                made_playoffs=title or wins >= 10,
                won_conference=title,
                won_championship=title,
            ),
        )
    return record


def _two_team_career():
    record = start_new_team(create_career_record("gm-1", "John Smith"), "a", "Alpha Owls", 2020)
    record = _play(record, "a", "Alpha Owls", 2020, [(4, 13, False), (11, 6, False), (13, 4, True)])
    record = record_resignation(record, "a", 2022)
    record = start_new_team(record, "b", "Bravo Bulls", 2023)
    return _play(record, "b", "Bravo Bulls", 2023, [(5, 12, False), (10, 7, False)])


def test_empty_career_has_no_highlights() -> None:
    assert extract_highlights(create_career_record("gm-1", "John Smith")) == []


def test_championships_rank_ahead_of_turnarounds() -> None:
    highlights = extract_highlights(_two_team_career())
    assert [h.type for h in highlights] == [
        HighlightType.CHAMPIONSHIP,
        HighlightType.TURNAROUND,
        HighlightType.TURNAROUND,
    ]
    title = highlights[0]
    assert title.significance is Significance.MAJOR
    assert title.year == 2022
    assert title.team_name == "Alpha Owls"
    assert highlights[1].description == "Turned Alpha Owls from 4-13 to 11-6"
    assert highlights[1].year == 2021
    assert highlights[2].team_name == "Bravo Bulls"
    assert highlights[2].year == 2024


def test_turnaround_ignores_team_changes() -> None:
    record = start_new_team(create_career_record("gm-1", "John Smith"), "a", "Alpha Owls", 2020)
    record = _play(record, "a", "Alpha Owls", 2020, [(3, 14, False)])
    record = record_resignation(record, "a", 2020)
    record = start_new_team(record, "b", "Bravo Bulls", 2021)
    record = _play(record, "b", "Bravo Bulls", 2021, [(12, 5, False)])
    assert extract_highlights(record) == []


def test_turnaround_thresholds() -> None:
    record = start_new_team(create_career_record("gm-1", "John Smith"), "a", "Alpha Owls", 2020)
    record = _play(record, "a", "Alpha Owls", 2020, [(6, 11, False), (12, 5, False), (5, 12, False), (9, 8, False)])
    assert extract_highlights(record) == []


def test_longevity_needs_eight_seasons() -> None:
    record = start_new_team(create_career_record("gm-1", "John Smith"), "a", "Alpha Owls", 2020)
    record = _play(record, "a", "Alpha Owls", 2020, [(8, 9, False)] * 7)
    assert extract_highlights(record) == []

    record = _play(record, "a", "Alpha Owls", 2027, [(8, 9, False)])
    highlights = extract_highlights(record)
    assert len(highlights) == 1
    assert highlights[0].type is HighlightType.LONGEVITY
    assert highlights[0].significance is Significance.NOTABLE
    assert highlights[0].year == 0
    assert highlights[0].description == "8 seasons with Alpha Owls"


def test_notable_highlights_keep_discovery_order() -> None:
    record = start_new_team(create_career_record("gm-1", "John Smith"), "a", "Alpha Owls", 2020)
    record = _play(record, "a", "Alpha Owls", 2020, [(4, 13, False), (10, 7, False)] + [(9, 8, False)] * 6 + [(14, 3, True)])
    types = [h.type for h in extract_highlights(record)]
    assert types == [HighlightType.CHAMPIONSHIP, HighlightType.TURNAROUND, HighlightType.LONGEVITY]


def test_longest_tenure_prefers_first_on_ties() -> None:
    record = start_new_team(create_career_record("gm-1", "John Smith"), "a", "Alpha Owls", 2020)
    record = _play(record, "a", "Alpha Owls", 2020, [(8, 9, False)] * 2)
    record = record_resignation(record, "a", 2021)
    record = start_new_team(record, "b", "Bravo Bulls", 2022)
    record = _play(record, "b", "Bravo Bulls", 2022, [(8, 9, False)] * 2)
    assert longest_tenure(record).team_id == "a"
    assert longest_tenure(create_career_record("gm-1", "John Smith")) is None
