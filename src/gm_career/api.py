from __future__ import annotations

import logging
from pathlib import Path
from threading import Lock
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from .errors import CareerError, NoOpenTenureError, TenureConflictError
from .ledger import (
    create_career_record,
    get_career_summary,
    get_current_tenure,
    get_reputation_tier,
    get_reputation_tier_description,
    record_firing,
    record_resignation,
    record_season,
    record_unemployment_year,
    start_new_team,
)
from .legacy import calculate_hall_of_fame_status, calculate_legacy_score, get_legacy_tier
from .models import CareerRecord, RetirementReason, RetirementState, SeasonSnapshot
from .narrative import generate_unemployment_narrative
from .retirement import (
    get_hall_of_fame_status_display,
    get_legacy_tier_display_name,
    get_retirement_headline,
    retire,
)
from .storage import CareerStore, serialize_career_record, serialize_retirement_state

logger = logging.getLogger(__name__)


class NewCareerSelection(BaseModel):
    gm_id: str
    gm_name: str


class TeamSelection(BaseModel):
    team_id: str
    team_name: str
    year: int


class SeasonResult(BaseModel):
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
    owner_approval_change: float = 0.0


class FiringSelection(BaseModel):
    team_id: str
    year: int
    severity: int = 50


class ResignationSelection(BaseModel):
    team_id: str
    year: int


class RetirementSelection(BaseModel):
    year: int
    reason: RetirementReason = RetirementReason.VOLUNTARY


class CareerService:
    def __init__(self, data_root: str | Path | None = None) -> None:
        self.data_root = Path(data_root) if data_root is not None else Path(__file__).resolve().parents[2]
        self.store = CareerStore(self.data_root / "career_state.json")
        self.record: CareerRecord | None
        self.retirement: RetirementState
        self.record, self.retirement = self.store.load()
        self._lock = Lock()

    @property
    def last_load_error(self) -> str:
        return self.store.last_load_error

    def _save(self) -> None:
        self.store.save(self.record, self.retirement)

    def _active_record(self) -> CareerRecord:
        if self.record is None:
            raise HTTPException(status_code=400, detail="No career started")
        if self.retirement.is_retired:
            raise HTTPException(status_code=409, detail="Career is retired")
        return self.record

    def _apply(self, record: CareerRecord) -> dict[str, Any]:
        self.record = record
        self._save()
        return self.career()

    def new_career(self, gm_id: str, gm_name: str) -> dict[str, Any]:
        gm_id = gm_id.strip()
        gm_name = gm_name.strip()
        if not gm_id or not gm_name:
            raise HTTPException(status_code=400, detail="gm_id and gm_name are required")
        self.retirement = RetirementState()
        return self._apply(create_career_record(gm_id, gm_name))

    def career(self) -> dict[str, Any]:
        if self.record is None:
            return {"career_record": None, "summary": "", "retired": self.retirement.is_retired}
        tier = get_reputation_tier(self.record.reputation_score)
        current = get_current_tenure(self.record)
        payload: dict[str, Any] = {
            "career_record": serialize_career_record(self.record),
            "summary": get_career_summary(self.record),
            "reputation_tier": tier.value,
            "reputation_outlook": get_reputation_tier_description(tier),
            "current_team": current.team_name if current is not None else None,
            "retired": self.retirement.is_retired,
        }
        if current is None and self.record.years_unemployed > 0:
            payload["media_narrative"] = generate_unemployment_narrative(
                self.record.reputation_score,
                self.record.years_unemployed,
                self.record.championships,
            )
        return payload

    def start_team(self, team_id: str, team_name: str, year: int) -> dict[str, Any]:
        record = self._active_record()
        try:
            return self._apply(start_new_team(record, team_id, team_name, year))
        except TenureConflictError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc

    def season(self, payload: SeasonResult) -> dict[str, Any]:
        record = self._active_record()
        snapshot = SeasonSnapshot(**payload.model_dump(exclude={"owner_approval_change"}))
        try:
            return self._apply(record_season(record, snapshot, payload.owner_approval_change))
        except NoOpenTenureError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    def fire(self, team_id: str, year: int, severity: int) -> dict[str, Any]:
        record = self._active_record()
        if not 0 <= severity <= 100:
            raise HTTPException(status_code=400, detail="severity must be between 0 and 100")
        try:
            return self._apply(record_firing(record, team_id, year, severity))
        except NoOpenTenureError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    def resign(self, team_id: str, year: int) -> dict[str, Any]:
        record = self._active_record()
        try:
            return self._apply(record_resignation(record, team_id, year))
        except NoOpenTenureError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    def unemployment_year(self) -> dict[str, Any]:
        record = self._active_record()
        if get_current_tenure(record) is not None:
            raise HTTPException(status_code=409, detail="GM is currently employed")
        return self._apply(record_unemployment_year(record))

    def legacy(self) -> dict[str, Any]:
        if self.record is None:
            raise HTTPException(status_code=400, detail="No career started")
        score = calculate_legacy_score(self.record)
        tier = get_legacy_tier(score)
        status = calculate_hall_of_fame_status(self.record, score)
        return {
            "legacy_score": score,
            "legacy_tier": tier.value,
            "legacy_tier_display": get_legacy_tier_display_name(tier),
            "hall_of_fame_status": status.value,
            "hall_of_fame_display": get_hall_of_fame_status_display(status),
        }

    def retire(self, year: int, reason: RetirementReason) -> dict[str, Any]:
        if self.record is None:
            raise HTTPException(status_code=400, detail="No career started")
        try:
            self.retirement = retire(self.retirement, self.record, year, reason)
        except CareerError as exc:
            raise HTTPException(status_code=409 if self.retirement.is_retired else 400, detail=str(exc)) from exc
        self._save()
        return self.retirement_data()

    def retirement_data(self) -> dict[str, Any]:
        payload = serialize_retirement_state(self.retirement)
        summary = self.retirement.career_summary
        if summary is not None:
            payload["headline"] = get_retirement_headline(summary)
            payload["legacy_tier_display"] = get_legacy_tier_display_name(summary.legacy_tier)
            payload["hall_of_fame_display"] = get_hall_of_fame_status_display(summary.hall_of_fame_status)
        return payload


service = CareerService()
app = FastAPI(title="GM Career API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/career")
def career() -> dict[str, Any]:
    with service._lock:
        return service.career()


@app.post("/api/career/new")
def new_career(payload: NewCareerSelection) -> dict[str, Any]:
    with service._lock:
        return service.new_career(gm_id=payload.gm_id, gm_name=payload.gm_name)


@app.post("/api/career/team")
def start_team(payload: TeamSelection) -> dict[str, Any]:
    with service._lock:
        return service.start_team(team_id=payload.team_id, team_name=payload.team_name, year=payload.year)


@app.post("/api/career/season")
def season(payload: SeasonResult) -> dict[str, Any]:
    with service._lock:
        return service.season(payload)


@app.post("/api/career/fire")
def fire(payload: FiringSelection) -> dict[str, Any]:
    with service._lock:
        return service.fire(team_id=payload.team_id, year=payload.year, severity=payload.severity)


@app.post("/api/career/resign")
def resign(payload: ResignationSelection) -> dict[str, Any]:
    with service._lock:
        return service.resign(team_id=payload.team_id, year=payload.year)


@app.post("/api/career/unemployment")
def unemployment_year() -> dict[str, Any]:
    with service._lock:
        return service.unemployment_year()


@app.get("/api/career/legacy")
def legacy() -> dict[str, Any]:
    with service._lock:
        return service.legacy()


@app.post("/api/career/retire")
def retire_career(payload: RetirementSelection) -> dict[str, Any]:
    with service._lock:
        return service.retire(year=payload.year, reason=payload.reason)


@app.get("/api/retirement")
def retirement() -> dict[str, Any]:
    with service._lock:
        return service.retirement_data()
