from __future__ import annotations


class CareerError(ValueError):
    """Illegal career state transition."""


class TenureConflictError(CareerError):
    def __init__(self, open_team_id: str, requested_team_id: str) -> None:
        super().__init__(
            f"Cannot start tenure with {requested_team_id!r}: tenure with {open_team_id!r} is still open."
        )
        self.open_team_id = open_team_id
        self.requested_team_id = requested_team_id


class NoOpenTenureError(CareerError):
    def __init__(self, team_id: str) -> None:
        super().__init__(f"No open tenure for team {team_id!r}.")
        self.team_id = team_id


class RetirementError(CareerError):
    pass


class AlreadyRetiredError(RetirementError):
    def __init__(self, retirement_year: int | None) -> None:
        super().__init__(f"Career already retired (year {retirement_year}); retirement is final.")
        self.retirement_year = retirement_year
