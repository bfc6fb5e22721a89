"""Assemble and persist the cache.json snapshot."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional

from .models import CurrentWindow, FixtureRecord, Snapshot, TeamSnapshot, TopPlayerRecord
from .utils import save_json

logger = logging.getLogger('fplcache.snapshot')


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. 2025-01-04T10:00:00.000Z."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def assemble_snapshot(
    fetched_at: datetime,
    window: CurrentWindow,
    top_players: Iterable[TopPlayerRecord],
    fixtures: Iterable[FixtureRecord],
    team: Optional[TeamSnapshot] = None,
) -> Snapshot:
    return Snapshot(
        fetched_at=format_timestamp(fetched_at),
        window=window,
        top_players=tuple(top_players),
        fixtures=tuple(fixtures),
        team=team,
    )


def write_snapshot(snapshot: Snapshot, output_path: Path | str) -> Path:
    """
    Write the snapshot as indented JSON, replacing any existing file.

    Parent directories are created as needed.

    Raises:
        OSError: If the directory or file cannot be written
    """
    path = save_json(output_path, snapshot.to_dict(), indent=2)
    logger.info(f'Written -> {path}')
    return path
