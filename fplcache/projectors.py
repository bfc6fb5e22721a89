"""Projections from raw FPL records to snapshot records.

Three independent views are built from the reference index:

- the form table (top players by form, each tagged with the next fixture)
- the fixture list
- one manager's squad, only when an entry id is configured
"""

import logging
from dataclasses import replace
from typing import Iterable, Optional, Sequence

from pydantic import ValidationError

from .client import FPLClient, RemoteError
from .constants import (
    DEFAULT_FDR,
    MIN_MINUTES,
    PLACEHOLDER,
    POSITION_ORDER,
    STARTER_SLOTS,
    TOP_PLAYER_LIMIT,
)
from .derive import fdr_label, position_label, round_half_away, tenths_to_price
from .index import ReferenceIndex
from .models import FixtureRecord, NextFixture, SquadPlayer, TeamSnapshot, TopPlayerRecord
from .schemas import RawEntry, RawFixture, RawPick, RawPicks, RawPlayer

logger = logging.getLogger('fplcache.projectors')


def is_in_form(player: RawPlayer) -> bool:
    """Has meaningful minutes and positive form."""
    return player.minutes > MIN_MINUTES and player.parsed_form > 0


def select_top_players(players: Iterable[RawPlayer], limit: int = TOP_PLAYER_LIMIT) -> list[RawPlayer]:
    """
    Filter to in-form players and take the best ``limit`` by form.

    ``sorted`` is stable (also with ``reverse=True``), so players on equal
    form keep their bootstrap order.
    """
    eligible = [p for p in players if is_in_form(p)]
    return sorted(eligible, key=lambda p: p.parsed_form, reverse=True)[:limit]


def build_top_player(player: RawPlayer, index: ReferenceIndex) -> TopPlayerRecord:
    return TopPlayerRecord(
        id=player.id,
        name=player.web_name,
        full_name=player.full_name,
        pos=position_label(player.element_type),
        team=index.team_short(player.team),
        team_full=index.team_name(player.team),
        team_id=player.team,
        form=round_half_away(player.parsed_form),
        price=tenths_to_price(player.now_cost),
        price_change=tenths_to_price(player.cost_change_event),
        own=round_half_away(player.parsed_ownership),
        gw_pts=player.event_points,
        total_pts=player.total_points,
        bonus=player.bonus,
        goals=player.goals_scored,
        assists=player.assists,
        clean_sheets=player.clean_sheets,
        minutes=player.minutes,
    )


def project_top_players(
    players: Iterable[RawPlayer],
    index: ReferenceIndex,
    limit: int = TOP_PLAYER_LIMIT,
) -> list[TopPlayerRecord]:
    """Form table rows, without next-fixture information yet."""
    return [build_top_player(p, index) for p in select_top_players(players, limit)]


def find_next_fixture(
    team_id: Optional[int],
    fixtures: Sequence[RawFixture],
    next_gw: int,
) -> Optional[RawFixture]:
    """
    First unfinished fixture in ``next_gw`` involving ``team_id``.

    A club normally plays once per gameweek; if the provider ever lists two,
    the earlier one in fixture order wins.
    """
    for fixture in fixtures:
        if fixture.event != next_gw or fixture.finished:
            continue
        if team_id is not None and team_id in (fixture.team_h, fixture.team_a):
            return fixture
    return None


def next_fixture_for(
    team_id: Optional[int],
    fixtures: Sequence[RawFixture],
    next_gw: int,
    index: ReferenceIndex,
) -> NextFixture:
    """
    Difficulty and opponent of a club's next fixture.

    Without a fixture (blank gameweek, end of season) the club is given a
    neutral Medium rating against "?".
    """
    fixture = find_next_fixture(team_id, fixtures, next_gw)
    if fixture is None:
        return NextFixture(difficulty=DEFAULT_FDR, label=fdr_label(DEFAULT_FDR), opponent=PLACEHOLDER)

    is_home = fixture.team_h == team_id
    if is_home:
        difficulty, opponent_id = fixture.team_h_difficulty, fixture.team_a
    else:
        difficulty, opponent_id = fixture.team_a_difficulty, fixture.team_h

    prefix = '' if is_home else '@'
    return NextFixture(
        difficulty=difficulty,
        label=fdr_label(difficulty),
        opponent=prefix + index.team_short(opponent_id),
    )


def attach_next_fixtures(
    records: Iterable[TopPlayerRecord],
    fixtures: Sequence[RawFixture],
    index: ReferenceIndex,
    current_gw: Optional[int],
) -> list[TopPlayerRecord]:
    """Tag each form-table row with the club's fixture in the following gameweek."""
    # Before the season starts there is no current gameweek; GW1 is next
    next_gw = (current_gw or 0) + 1
    return [
        replace(r, next_fixture=next_fixture_for(r.team_id, fixtures, next_gw, index))
        for r in records
    ]


def build_fixture(fixture: RawFixture, index: ReferenceIndex) -> FixtureRecord:
    return FixtureRecord(
        id=fixture.id,
        gw=fixture.event,
        kickoff=fixture.kickoff_time,
        finished=fixture.finished,
        home_team=index.team_name(fixture.team_h),
        home_short=index.team_short(fixture.team_h),
        home_id=fixture.team_h,
        away_team=index.team_name(fixture.team_a),
        away_short=index.team_short(fixture.team_a),
        away_id=fixture.team_a,
        home_score=fixture.team_h_score,
        away_score=fixture.team_a_score,
        home_diff=fixture.team_h_difficulty,
        away_diff=fixture.team_a_difficulty,
        home_diff_label=fdr_label(fixture.team_h_difficulty),
        away_diff_label=fdr_label(fixture.team_a_difficulty),
    )


def project_fixtures(fixtures: Iterable[RawFixture], index: ReferenceIndex) -> list[FixtureRecord]:
    """
    One record per fixture that has been assigned a gameweek.

    Provider order is kept; the site sorts by kickoff or gameweek itself.
    """
    return [build_fixture(f, index) for f in fixtures if f.event is not None]


def build_squad_player(player: RawPlayer, pick: RawPick, index: ReferenceIndex) -> SquadPlayer:
    # Bench picks report multiplier 0; the site shows their raw points
    multiplier = pick.multiplier or 1
    # A pick without a slot number goes to the bench, after the numbered slots
    is_starter = pick.position is not None and pick.position <= STARTER_SLOTS
    bench_order = None
    if not is_starter and pick.position is not None:
        bench_order = pick.position - STARTER_SLOTS
    return SquadPlayer(
        id=player.id,
        name=player.web_name,
        full_name=player.full_name,
        pos=position_label(player.element_type),
        team=index.team_short(player.team),
        team_full=index.team_name(player.team),
        price=tenths_to_price(player.now_cost),
        gw_pts=player.event_points,
        total_pts=player.total_points,
        form=round_half_away(player.parsed_form),
        own=round_half_away(player.parsed_ownership),
        is_captain=pick.is_captain,
        is_vc=pick.is_vice_captain,
        is_starter=is_starter,
        bench_order=bench_order,
        multiplier=multiplier,
        display_pts=player.event_points * multiplier,
    )


def _position_rank(player: SquadPlayer) -> int:
    return POSITION_ORDER.get(player.pos, len(POSITION_ORDER))


def _bench_rank(player: SquadPlayer) -> tuple[bool, int]:
    return (player.bench_order is None, player.bench_order or 0)


def build_team_snapshot(
    user_id: str,
    gw: Optional[int],
    entry: RawEntry,
    picks: RawPicks,
    index: ReferenceIndex,
) -> TeamSnapshot:
    """
    Combine an entry summary and its picks into the team section.

    Picks whose player isn't in the bootstrap are dropped. Starters are
    ordered GKP, DEF, MID, FWD (pick order within a position); the bench
    by bench slot.
    """
    squad = []
    for pick in picks.picks:
        player = index.player(pick.element)
        if player is None:
            logger.debug(f'Skipping pick for unknown player id {pick.element}')
            continue
        squad.append(build_squad_player(player, pick, index))

    starters = sorted((p for p in squad if p.is_starter), key=_position_rank)
    bench = sorted((p for p in squad if not p.is_starter), key=_bench_rank)

    history = picks.entry_history
    return TeamSnapshot(
        id=user_id,
        name=entry.name,
        manager_name=entry.manager_name,
        gw=gw,
        gw_points=history.points,
        total_points=entry.summary_overall_points,
        overall_rank=entry.summary_overall_rank or None,
        gw_rank=entry.summary_event_rank or None,
        team_value=tenths_to_price(history.value),
        bank=tenths_to_price(history.bank),
        transfers=history.event_transfers,
        transfer_cost=history.event_transfers_cost,
        starters=tuple(starters),
        bench=tuple(bench),
    )


def project_squad(
    client: FPLClient,
    index: ReferenceIndex,
    user_id: str,
    gw: Optional[int],
) -> TeamSnapshot:
    """
    Fetch one entry's summary and picks and build its team section.

    Raises:
        RemoteError: If either request fails
        ValidationError: If either response is malformed
    """
    entry = client.get_entry(user_id)
    picks = client.get_picks(user_id, gw)
    return build_team_snapshot(user_id, gw, entry, picks, index)


def load_squad(
    client: FPLClient,
    index: ReferenceIndex,
    user_id: Optional[str],
    gw: Optional[int],
) -> Optional[TeamSnapshot]:
    """
    Squad section for the snapshot, or None.

    None when no entry id is configured, and also when fetching or parsing
    the entry fails: the rest of the snapshot is still worth publishing, so
    squad failures are logged rather than raised.
    """
    if not user_id:
        logger.info('No FPL_TEAM_ID set - skipping team picks')
        return None

    logger.info(f'Fetching team ID: {user_id}')
    try:
        team = project_squad(client, index, user_id, gw)
    except (RemoteError, ValidationError) as e:
        logger.warning(f'Team fetch failed: {e}')
        return None

    logger.info(f'Team loaded: {team.name} - GW{gw} - {team.gw_points}pts')
    return team
