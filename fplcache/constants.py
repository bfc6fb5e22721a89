"""Constants and mappings for the FPL cache builder."""

from pathlib import Path

PROJECT_DIR = Path(__file__).parent.parent
DATA_DIR = PROJECT_DIR / 'data'
DEFAULT_OUTPUT_PATH = DATA_DIR / 'cache.json'

FPL_BASE_URL = 'https://fantasy.premierleague.com/api'

# Default-agent requests get blocked by the provider
REQUEST_HEADERS = {
    'User-Agent': 'Mozilla/5.0',
    'Accept': 'application/json',
}
REQUEST_TIMEOUT_MS = 15000

# element_type -> position label
POSITION_MAP = {
    1: 'GKP',
    2: 'DEF',
    3: 'MID',
    4: 'FWD',
}

# Starters are listed goalkeeper first, forwards last
POSITION_ORDER = {
    'GKP': 0,
    'DEF': 1,
    'MID': 2,
    'FWD': 3,
}

# Fixture difficulty rating -> label
FDR_LABELS = {
    1: 'Very Easy',
    2: 'Easy',
    3: 'Medium',
    4: 'Hard',
    5: 'Very Hard',
}
UNKNOWN_FDR_LABEL = 'Unknown'

# Used when no next-round fixture exists for a team
DEFAULT_FDR = 3

# Stand-in for any team or player name that can't be resolved
PLACEHOLDER = '?'

TOP_PLAYER_LIMIT = 20
MIN_MINUTES = 90

# Squad slots 1-11 start, 12-15 are the bench
STARTER_SLOTS = 11
