from __future__ import annotations

import argparse
import logging
from typing import Iterable

from .ledger import (
    create_career_record,
    get_career_summary,
    get_reputation_tier,
    record_firing,
    record_season,
    record_unemployment_year,
    start_new_team,
)
from .models import CareerRecord, RetirementReason, RetirementState, SeasonSnapshot, TeamLegacy
from .retirement import (
    get_hall_of_fame_status_display,
    get_legacy_tier_display_name,
    get_retirement_headline,
    initiate_retirement,
)
from .storage import CareerStore

# (team_id, team_name, start_year, [(wins, losses, playoff_wins, division, conference, title)], fired)
DEMO_TENURES: tuple[tuple[str, str, int, list[tuple[int, int, int, bool, bool, bool]], bool], ...] = (
    (
        "riverton",
        "Riverton Rapids",
        2025,
        [(5, 12, 0, False, False, False), (4, 13, 0, False, False, False), (3, 14, 0, False, False, False)],
        True,
    ),
    (
        "harbor",
        "Harbor City Gulls",
        2029,
        [
            (5, 12, 0, False, False, False),
            (10, 7, 1, False, False, False),
            (12, 5, 2, True, False, False),
            (14, 3, 4, True, True, True),
            (11, 6, 1, True, False, False),
            (13, 4, 3, True, True, False),
            (12, 5, 4, True, True, True),
            (9, 8, 0, False, False, False),
            (10, 7, 1, True, False, False),
        ],
        False,
    ),
)


def build_demo_career(gm_id: str = "gm-demo", gm_name: str = "Jordan Avery") -> CareerRecord:
    record = create_career_record(gm_id, gm_name)
    for idx, (team_id, team_name, start_year, seasons, fired) in enumerate(DEMO_TENURES):
        if idx > 0:
            record = record_unemployment_year(record)
        record = start_new_team(record, team_id, team_name, start_year)
        year = start_year
        for wins, losses, playoff_wins, division, conference, title in seasons:
            made_playoffs = playoff_wins > 0 or division or title
            record = record_season(
                record,
                SeasonSnapshot(
                    year=year,
                    team_id=team_id,
                    team_name=team_name,
                    wins=wins,
                    losses=losses,
                    made_playoffs=bool(made_playoffs),
                    playoff_wins=playoff_wins,
                    won_division=division,
                    won_conference=conference,
                    won_championship=title,
                ),
            )
            year += 1
        if fired:
            record = record_firing(record, team_id, year - 1, severity=85)
    return record


def format_team_legacies(legacies: Iterable[TeamLegacy]) -> str:
    lines = ["Team                 Tenure       Record   Achievements"]
    for legacy in legacies:
        achievements = ", ".join(legacy.achievements) or "-"
        lines.append(f"{legacy.team_name:<20} {legacy.tenure:<12} {legacy.record:<8} {achievements}")
        lines.append(f"    {legacy.fan_memory}")
    return "\n".join(lines)


def format_retirement(state: RetirementState) -> str:
    summary = state.career_summary
    if summary is None:
        return "Career is still active."
    stats = summary.stats
    lines = [
        get_retirement_headline(summary),
        f"Legacy: {get_legacy_tier_display_name(summary.legacy_tier)} ({summary.legacy_score}/100)",
        summary.legacy_description,
        f"Hall of Fame: {get_hall_of_fame_status_display(summary.hall_of_fame_status)}",
    ]
    lines.extend(f"  - {reason}" for reason in summary.hall_of_fame_reasons)
    lines.append(
        f"Record {stats.total_wins}-{stats.total_losses} ({stats.win_percentage:.3f}), "
        f"playoff win pct {stats.playoff_win_percentage:.3f}, "
        f"longest tenure {stats.longest_tenure.seasons} seasons with {stats.longest_tenure.team_name}"
    )
    lines.append("Highlights:")
    for highlight in summary.highlights:
        year = f"{highlight.year} " if highlight.year else ""
        lines.append(f"  [{highlight.significance.value}] {year}{highlight.description}")
    lines.append(format_team_legacies(summary.team_legacies))
    lines.append(summary.farewell_statement)
    lines.append(summary.media_reaction)
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate a sample GM career and print the retirement report.")
    parser.add_argument("--retire-year", type=int, default=2038)
    parser.add_argument("--reason", choices=[r.value for r in RetirementReason], default=RetirementReason.VOLUNTARY.value)
    parser.add_argument("--save", help="Write the career and retirement state to this JSON file.")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    record = build_demo_career()
    print(get_career_summary(record))
    print(f"Reputation: {record.reputation_score} ({get_reputation_tier(record.reputation_score).value})")
    print()
    state = initiate_retirement(record, args.retire_year, RetirementReason(args.reason))
    print(format_retirement(state))
    if args.save:
        CareerStore(args.save).save(record, state)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
