"""Pydantic schemas for FPL API payloads.

The provider's records carry far more fields than the cache needs, and
several of them come back as ``null`` early in a season. Every model
ignores unknown fields and coerces nulls on counters/strings/flags to a
neutral default, so downstream code never has to guard against ``None``
in arithmetic. Fields that are meaningfully nullable (an unscheduled
fixture's round, scores before kickoff, ranks) stay ``Optional``.
"""

import math
from typing import Optional

from pydantic import BaseModel, Field, field_validator


def _parse_float(value: Optional[str]) -> float:
    """Parse a provider decimal string ("5.4"), treating junk as 0.0."""
    if value in (None, ''):
        return 0.0
    try:
        result = float(value)
    except (TypeError, ValueError):
        return 0.0
    # float() also accepts "NaN" and "Infinity"
    return result if math.isfinite(result) else 0.0


class RawTeam(BaseModel):
    """Premier League club from bootstrap-static."""

    id: int
    name: str = ''
    short_name: str = ''

    @field_validator('name', 'short_name', mode='before')
    @classmethod
    def none_as_empty(cls, v):
        return '' if v is None else v

    class Config:
        extra = 'ignore'


class RawPlayer(BaseModel):
    """Player ("element") from bootstrap-static."""

    id: int
    web_name: str = ''
    first_name: str = ''
    second_name: str = ''
    element_type: Optional[int] = None
    team: Optional[int] = None
    form: Optional[str] = None
    selected_by_percent: Optional[str] = None
    now_cost: int = 0
    cost_change_event: int = 0
    event_points: int = 0
    total_points: int = 0
    bonus: int = 0
    goals_scored: int = 0
    assists: int = 0
    clean_sheets: int = 0
    minutes: int = 0

    @field_validator('web_name', 'first_name', 'second_name', mode='before')
    @classmethod
    def none_as_empty(cls, v):
        return '' if v is None else v

    @field_validator(
        'now_cost',
        'cost_change_event',
        'event_points',
        'total_points',
        'bonus',
        'goals_scored',
        'assists',
        'clean_sheets',
        'minutes',
        mode='before',
    )
    @classmethod
    def none_as_zero(cls, v):
        return 0 if v is None else v

    @field_validator('form', 'selected_by_percent', mode='before')
    @classmethod
    def number_as_string(cls, v):
        # The API sends these as strings; tolerate bare numbers too
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @property
    def parsed_form(self) -> float:
        return _parse_float(self.form)

    @property
    def parsed_ownership(self) -> float:
        return _parse_float(self.selected_by_percent)

    @property
    def full_name(self) -> str:
        return f'{self.first_name} {self.second_name}'

    class Config:
        extra = 'ignore'


class RawEvent(BaseModel):
    """Gameweek ("event") from bootstrap-static."""

    id: int
    deadline_time: Optional[str] = None
    is_current: bool = False
    is_next: bool = False

    @field_validator('is_current', 'is_next', mode='before')
    @classmethod
    def none_as_false(cls, v):
        return False if v is None else v

    class Config:
        extra = 'ignore'


class RawBootstrap(BaseModel):
    """The bootstrap-static payload: players, clubs and gameweeks."""

    elements: list[RawPlayer] = Field(default_factory=list)
    teams: list[RawTeam] = Field(default_factory=list)
    events: list[RawEvent] = Field(default_factory=list)

    @field_validator('elements', 'teams', 'events', mode='before')
    @classmethod
    def none_as_empty_list(cls, v):
        return [] if v is None else v

    class Config:
        extra = 'ignore'


class RawFixture(BaseModel):
    """Fixture from /fixtures/. ``event`` is None until it is scheduled."""

    id: int
    event: Optional[int] = None
    kickoff_time: Optional[str] = None
    finished: bool = False
    team_h: Optional[int] = None
    team_a: Optional[int] = None
    team_h_score: Optional[int] = None
    team_a_score: Optional[int] = None
    team_h_difficulty: Optional[int] = None
    team_a_difficulty: Optional[int] = None

    @field_validator('finished', mode='before')
    @classmethod
    def none_as_false(cls, v):
        return False if v is None else v

    class Config:
        extra = 'ignore'


class RawEntry(BaseModel):
    """Manager entry summary from /entry/{id}/."""

    id: Optional[int] = None
    name: str = ''
    player_first_name: str = ''
    player_last_name: str = ''
    summary_overall_points: int = 0
    summary_overall_rank: Optional[int] = None
    summary_event_rank: Optional[int] = None

    @field_validator('name', 'player_first_name', 'player_last_name', mode='before')
    @classmethod
    def none_as_empty(cls, v):
        return '' if v is None else v

    @field_validator('summary_overall_points', mode='before')
    @classmethod
    def none_as_zero(cls, v):
        return 0 if v is None else v

    @property
    def manager_name(self) -> str:
        return f'{self.player_first_name} {self.player_last_name}'

    class Config:
        extra = 'ignore'


class RawEntryHistory(BaseModel):
    """The ``entry_history`` block of a picks response. Prices are in tenths."""

    points: int = 0
    value: int = 0
    bank: int = 0
    event_transfers: int = 0
    event_transfers_cost: int = 0

    @field_validator(
        'points', 'value', 'bank', 'event_transfers', 'event_transfers_cost', mode='before'
    )
    @classmethod
    def none_as_zero(cls, v):
        return 0 if v is None else v

    class Config:
        extra = 'ignore'


class RawPick(BaseModel):
    """One squad slot from /entry/{id}/event/{gw}/picks/.

    ``element`` and ``position`` are left optional so that one broken pick
    is dropped or benched on its own instead of failing the whole squad.
    """

    element: Optional[int] = None
    position: Optional[int] = None
    multiplier: Optional[int] = None
    is_captain: bool = False
    is_vice_captain: bool = False

    @field_validator('is_captain', 'is_vice_captain', mode='before')
    @classmethod
    def none_as_false(cls, v):
        return False if v is None else v

    class Config:
        extra = 'ignore'


class RawPicks(BaseModel):
    """Full picks response for one entry and gameweek."""

    picks: list[RawPick]
    entry_history: RawEntryHistory = Field(default_factory=RawEntryHistory)

    @field_validator('entry_history', mode='before')
    @classmethod
    def none_as_empty_history(cls, v):
        return {} if v is None else v

    class Config:
        extra = 'ignore'
