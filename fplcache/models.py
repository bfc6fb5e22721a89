"""Data models for the FPL cache snapshot.

Field names are Pythonic; ``to_dict`` produces the camelCase keys the
static site reads from ``cache.json``. Key order is fixed so repeated runs
over the same data serialize identically.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class CurrentWindow:
    """The active gameweek and the next deadline."""
    current_gw: Optional[int] = None
    next_deadline: Optional[str] = None


@dataclass(frozen=True)
class NextFixture:
    """A player's upcoming fixture from the perspective of the player's club."""
    difficulty: Optional[int]
    label: str
    opponent: str  # short name, '@'-prefixed when away


@dataclass(frozen=True)
class TopPlayerRecord:
    """Flattened form-table row for one player."""
    id: int
    name: str
    full_name: str
    pos: Optional[str]
    team: str
    team_full: str
    team_id: Optional[int]
    form: float
    price: float
    price_change: float
    own: float
    gw_pts: int
    total_pts: int
    bonus: int
    goals: int
    assists: int
    clean_sheets: int
    minutes: int
    next_fixture: Optional[NextFixture] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            'id': self.id,
            'name': self.name,
            'fullName': self.full_name,
            'pos': self.pos,
            'team': self.team,
            'teamFull': self.team_full,
            'teamId': self.team_id,
            'form': self.form,
            'price': self.price,
            'priceChange': self.price_change,
            'own': self.own,
            'gwPts': self.gw_pts,
            'totalPts': self.total_pts,
            'bonus': self.bonus,
            'goals': self.goals,
            'assists': self.assists,
            'cleanSheets': self.clean_sheets,
            'minutes': self.minutes,
        }
        if self.next_fixture is not None:
            data['nextFDR'] = self.next_fixture.difficulty
            data['nextFDRLabel'] = self.next_fixture.label
            data['nextOpp'] = self.next_fixture.opponent
        return data


@dataclass(frozen=True)
class FixtureRecord:
    """One scheduled fixture with both sides resolved."""
    id: int
    gw: int
    kickoff: Optional[str]
    finished: bool
    home_team: str
    home_short: str
    home_id: Optional[int]
    away_team: str
    away_short: str
    away_id: Optional[int]
    home_score: Optional[int]
    away_score: Optional[int]
    home_diff: Optional[int]
    away_diff: Optional[int]
    home_diff_label: str
    away_diff_label: str

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'gw': self.gw,
            'kickoff': self.kickoff,
            'finished': self.finished,
            'homeTeam': self.home_team,
            'homeShort': self.home_short,
            'homeId': self.home_id,
            'awayTeam': self.away_team,
            'awayShort': self.away_short,
            'awayId': self.away_id,
            'homeScore': self.home_score,
            'awayScore': self.away_score,
            'homeDiff': self.home_diff,
            'awayDiff': self.away_diff,
            'homeDiffLabel': self.home_diff_label,
            'awayDiffLabel': self.away_diff_label,
        }


@dataclass(frozen=True)
class SquadPlayer:
    """A picked player with their role in the manager's squad."""
    id: int
    name: str
    full_name: str
    pos: Optional[str]
    team: str
    team_full: str
    price: float
    gw_pts: int
    total_pts: int
    form: float
    own: float
    is_captain: bool
    is_vc: bool
    is_starter: bool
    bench_order: Optional[int]
    multiplier: int
    display_pts: int

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'fullName': self.full_name,
            'pos': self.pos,
            'team': self.team,
            'teamFull': self.team_full,
            'price': self.price,
            'gwPts': self.gw_pts,
            'totalPts': self.total_pts,
            'form': self.form,
            'own': self.own,
            'isCaptain': self.is_captain,
            'isVC': self.is_vc,
            'isStarter': self.is_starter,
            'benchOrder': self.bench_order,
            'multiplier': self.multiplier,
            'displayPts': self.display_pts,
        }


@dataclass(frozen=True)
class TeamSnapshot:
    """Entry summary plus the squad split into starters and bench."""
    id: str
    name: str
    manager_name: str
    gw: Optional[int]
    gw_points: int
    total_points: int
    overall_rank: Optional[int]
    gw_rank: Optional[int]
    team_value: float
    bank: float
    transfers: int
    transfer_cost: int
    starters: tuple[SquadPlayer, ...] = ()
    bench: tuple[SquadPlayer, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'managerName': self.manager_name,
            'gw': self.gw,
            'gwPoints': self.gw_points,
            'totalPoints': self.total_points,
            'overallRank': self.overall_rank,
            'gwRank': self.gw_rank,
            'teamValue': self.team_value,
            'bank': self.bank,
            'transfers': self.transfers,
            'transferCost': self.transfer_cost,
            'starters': [p.to_dict() for p in self.starters],
            'bench': [p.to_dict() for p in self.bench],
        }


@dataclass(frozen=True)
class Snapshot:
    """Everything written to cache.json for one run."""
    fetched_at: str
    window: CurrentWindow
    top_players: tuple[TopPlayerRecord, ...] = ()
    fixtures: tuple[FixtureRecord, ...] = ()
    team: Optional[TeamSnapshot] = None
    # Reserved for league standings; not populated yet
    standings: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            'fetchedAt': self.fetched_at,
            'currentGW': self.window.current_gw,
            'nextDeadline': self.window.next_deadline,
            'team': self.team.to_dict() if self.team is not None else None,
            'topPlayers': [p.to_dict() for p in self.top_players],
            'fixtures': [f.to_dict() for f in self.fixtures],
            'standings': self.standings,
        }
