"""Utility functions for file I/O and common operations."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger('fplcache.utils')


def save_json(
    path: Path | str,
    data: Any,
    indent: int = 2,
    create_dirs: bool = True,
) -> Path:
    """
    Save data as JSON, replacing whatever is at ``path``.

    The payload is serialized in full before the destination is touched
    and then swapped in with ``os.replace``, so readers never observe a
    half-written file and a serialization error leaves any previous file
    intact.

    Args:
        path: Path to write to (str or Path object)
        data: Data to serialize (must be JSON-serializable or Pydantic model)
        indent: Indentation level (default: 2 spaces)
        create_dirs: Create parent directories if they don't exist (default: True)

    Returns:
        The path written to

    Raises:
        TypeError: If data is not JSON-serializable
        OSError: If file cannot be written
    """
    path = Path(path)

    if create_dirs:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f'Failed to create directory {path.parent}: {e}')
            raise

    json_data = data.model_dump() if isinstance(data, BaseModel) else data

    try:
        text = json.dumps(json_data, indent=indent, ensure_ascii=False)
    except TypeError as e:
        logger.error(f'Data is not JSON-serializable: {e}')
        raise TypeError(f'Data is not JSON-serializable: {e}') from e

    tmp_path = path.with_name(f'.{path.name}.tmp')
    try:
        with open(tmp_path, 'w', encoding='utf-8') as f:
            f.write(text)
            f.write('\n')
        os.replace(tmp_path, path)
    except OSError as e:
        logger.error(f'Failed to write file {path}: {e}')
        if tmp_path.exists():
            tmp_path.unlink()
        raise

    logger.debug(f'Saved JSON to: {path}')
    return path
