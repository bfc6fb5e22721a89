from .client import FPLClient, RemoteError
from .config import PipelineConfig, clear_config_cache, get_config
from .derive import fdr_label, position_label, round_half_away, tenths_to_price
from .index import ReferenceIndex, build_reference_index, current_window
from .models import (
    CurrentWindow,
    FixtureRecord,
    NextFixture,
    Snapshot,
    SquadPlayer,
    TeamSnapshot,
    TopPlayerRecord,
)
from .pipeline import build_snapshot, run_pipeline
from .projectors import (
    attach_next_fixtures,
    build_team_snapshot,
    load_squad,
    project_fixtures,
    project_squad,
    project_top_players,
)
from .snapshot import assemble_snapshot, write_snapshot

__all__ = [
    # Models
    'CurrentWindow',
    'FixtureRecord',
    'NextFixture',
    'Snapshot',
    'SquadPlayer',
    'TeamSnapshot',
    'TopPlayerRecord',
    # Config
    'PipelineConfig',
    'get_config',
    'clear_config_cache',
    # API access
    'FPLClient',
    'RemoteError',
    # Lookups and derived values
    'ReferenceIndex',
    'build_reference_index',
    'current_window',
    'fdr_label',
    'position_label',
    'round_half_away',
    'tenths_to_price',
    # Projections
    'project_top_players',
    'attach_next_fixtures',
    'project_fixtures',
    'project_squad',
    'build_team_snapshot',
    'load_squad',
    # Output
    'assemble_snapshot',
    'write_snapshot',
    'build_snapshot',
    'run_pipeline',
]
