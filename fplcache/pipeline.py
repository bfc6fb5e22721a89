"""End-to-end fetch run: API -> projections -> cache.json."""

import logging
from datetime import datetime, timezone
from typing import Optional

from .client import FPLClient
from .config import PipelineConfig
from .index import build_reference_index, current_window
from .models import Snapshot
from .projectors import attach_next_fixtures, load_squad, project_fixtures, project_top_players
from .snapshot import assemble_snapshot, write_snapshot

logger = logging.getLogger('fplcache.pipeline')


def build_snapshot(
    config: PipelineConfig,
    client: Optional[FPLClient] = None,
    now: Optional[datetime] = None,
) -> Snapshot:
    """
    Fetch everything and build the snapshot without writing it.

    Args:
        config: Run configuration
        client: API client (default: one built from ``config``)
        now: Timestamp recorded as ``fetchedAt`` (default: current UTC time)

    Raises:
        RemoteError: If bootstrap-static or fixtures can't be fetched
        ValidationError: If either of those responses is malformed
    """
    fetched_at = now or datetime.now(timezone.utc)

    if client is not None:
        return _collect(config, client, fetched_at)

    # The pipeline owns this client's session, so it closes it too
    client = FPLClient.from_config(config)
    try:
        return _collect(config, client, fetched_at)
    finally:
        client.close()


def _collect(config: PipelineConfig, client: FPLClient, fetched_at: datetime) -> Snapshot:
    logger.info('Fetching bootstrap-static')
    bootstrap = client.get_bootstrap()
    index = build_reference_index(bootstrap)
    window = current_window(bootstrap.events)
    logger.info(f'Current GW: {window.current_gw}')

    logger.info('Building top players list')
    top_players = project_top_players(bootstrap.elements, index)

    logger.info('Fetching fixtures')
    raw_fixtures = client.get_fixtures()
    fixtures = project_fixtures(raw_fixtures, index)
    top_players = attach_next_fixtures(top_players, raw_fixtures, index, window.current_gw)

    team = load_squad(client, index, config.user_id, window.current_gw)

    return assemble_snapshot(fetched_at, window, top_players, fixtures, team)


def run_pipeline(
    config: PipelineConfig,
    client: Optional[FPLClient] = None,
    now: Optional[datetime] = None,
) -> Snapshot:
    """
    Build the snapshot and write it to ``config.output_path``.

    Nothing is written unless every fatal step succeeded; a failed squad
    fetch only leaves ``team`` empty.

    Example:
        from fplcache import PipelineConfig, run_pipeline
        snapshot = run_pipeline(PipelineConfig(user_id='123456'))
    """
    logger.info(f'FPL data fetch started - {datetime.now(timezone.utc):%a, %d %b %Y %H:%M:%S} UTC')

    snapshot = build_snapshot(config, client=client, now=now)
    write_snapshot(snapshot, config.output_path)

    logger.info(f'   Players: {len(snapshot.top_players)}')
    logger.info(f'   Fixtures: {len(snapshot.fixtures)}')
    logger.info(f'   Team: {snapshot.team.name if snapshot.team else "N/A"}')
    logger.info('Done!')
    return snapshot
