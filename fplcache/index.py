"""Id lookups built once from bootstrap-static."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .constants import PLACEHOLDER
from .models import CurrentWindow
from .schemas import RawBootstrap, RawEvent, RawPlayer, RawTeam


@dataclass(frozen=True)
class ReferenceIndex:
    """
    Read-only player and club lookups for a single run.

    ``player``/``team`` return None on a miss; the ``team_*`` helpers fold a
    miss into the "?" placeholder so callers can't trip over a club the
    bootstrap didn't list.
    """

    players: Mapping[int, RawPlayer]
    teams: Mapping[int, RawTeam]

    def player(self, player_id: Optional[int]) -> Optional[RawPlayer]:
        return self.players.get(player_id)

    def team(self, team_id: Optional[int]) -> Optional[RawTeam]:
        return self.teams.get(team_id)

    def team_short(self, team_id: Optional[int], default: str = PLACEHOLDER) -> str:
        team = self.team(team_id)
        return team.short_name if team is not None and team.short_name else default

    def team_name(self, team_id: Optional[int], default: str = PLACEHOLDER) -> str:
        team = self.team(team_id)
        return team.name if team is not None and team.name else default


def build_reference_index(bootstrap: RawBootstrap) -> ReferenceIndex:
    """Index every player and club by id. A repeated id keeps the last record."""
    return ReferenceIndex(
        players=MappingProxyType({p.id: p for p in bootstrap.elements}),
        teams=MappingProxyType({t.id: t for t in bootstrap.teams}),
    )


def current_window(events: Iterable[RawEvent]) -> CurrentWindow:
    """
    Work out the active gameweek and the upcoming deadline.

    The gameweek is the one flagged current, else the one flagged next.
    The deadline is the next gameweek's, else the current one's, since
    once a gameweek is live its own deadline has already passed.
    """
    events = list(events)
    live = next((e for e in events if e.is_current), None)
    upcoming = next((e for e in events if e.is_next), None)

    current_gw = live.id if live is not None else (upcoming.id if upcoming is not None else None)

    next_deadline = None
    if upcoming is not None and upcoming.deadline_time:
        next_deadline = upcoming.deadline_time
    elif live is not None and live.deadline_time:
        next_deadline = live.deadline_time

    return CurrentWindow(current_gw=current_gw, next_deadline=next_deadline)
