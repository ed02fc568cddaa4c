import pytest
from fastapi import HTTPException

from gm_career.api import CareerService, SeasonResult
from gm_career.models import RetirementReason


def _service(tmp_path) -> CareerService:
    service = CareerService(data_root=tmp_path)
    service.new_career(gm_id="gm-1", gm_name="John Smith")
    service.start_team(team_id="team-1", team_name="Test City Tigers", year=2020)
    return service


def _result(year: int, wins: int, losses: int, **overrides) -> SeasonResult:
    return SeasonResult(year=year, team_id="team-1", team_name="Test City Tigers", wins=wins, losses=losses, **overrides)


def test_fresh_service_has_no_career(tmp_path) -> None:
    service = CareerService(data_root=tmp_path)
    assert service.career()["career_record"] is None
    with pytest.raises(HTTPException) as exc:
        service.legacy()
    assert exc.value.status_code == 400


def test_season_flow_persists(tmp_path) -> None:
    service = _service(tmp_path)
    payload = service.season(_result(2020, 12, 5, made_playoffs=True, won_division=True, owner_approval_change=20))
    assert payload["career_record"]["total_wins"] == 12
    assert payload["current_team"] == "Test City Tigers"
    assert payload["summary"].startswith("1 season as GM")

    reloaded = CareerService(data_root=tmp_path)
    assert reloaded.record == service.record
    assert reloaded.last_load_error == ""


def test_conflicting_team_start_is_409(tmp_path) -> None:
    service = _service(tmp_path)
    with pytest.raises(HTTPException) as exc:
        service.start_team(team_id="team-2", team_name="Harbor Gulls", year=2021)
    assert exc.value.status_code == 409


def test_season_for_wrong_team_is_400(tmp_path) -> None:
    service = _service(tmp_path)
    with pytest.raises(HTTPException) as exc:
        service.season(SeasonResult(year=2020, team_id="team-9", team_name="Nowhere", wins=1, losses=16))
    assert exc.value.status_code == 400


def test_firing_then_unemployment_narrative(tmp_path) -> None:
    service = _service(tmp_path)
    service.season(_result(2020, 3, 14, fired=True))
    with pytest.raises(HTTPException) as exc:
        service.unemployment_year()
    assert exc.value.status_code == 409

    service.fire(team_id="team-1", year=2020, severity=85)
    payload = service.unemployment_year()
    assert payload["career_record"]["years_unemployed"] == 1
    assert payload["current_team"] is None
    assert payload["media_narrative"]

    with pytest.raises(HTTPException) as exc:
        service.fire(team_id="team-1", year=2021, severity=150)
    assert exc.value.status_code == 400


def test_retirement_locks_career(tmp_path) -> None:
    service = _service(tmp_path)
    service.season(_result(2020, 14, 3, made_playoffs=True, won_conference=True, won_championship=True))
    legacy = service.legacy()
    assert legacy["legacy_tier_display"]

    payload = service.retire(year=2021, reason=RetirementReason.FORCED)
    assert payload["is_retired"] is True
    assert payload["retirement_reason"] == "forced"
    assert payload["headline"] == "John Smith Retires After 1 Seasons"
    assert payload["career_summary"]["legacy_score"] == legacy["legacy_score"]

    with pytest.raises(HTTPException) as exc:
        service.season(_result(2021, 10, 7))
    assert exc.value.status_code == 409
    with pytest.raises(HTTPException) as exc:
        service.retire(year=2022, reason=RetirementReason.VOLUNTARY)
    assert exc.value.status_code == 409

    reloaded = CareerService(data_root=tmp_path)
    assert reloaded.retirement == service.retirement


def test_retirement_before_2000_is_400(tmp_path) -> None:
    service = _service(tmp_path)
    with pytest.raises(HTTPException) as exc:
        service.retire(year=1995, reason=RetirementReason.VOLUNTARY)
    assert exc.value.status_code == 400
    assert service.retirement.is_retired is False
