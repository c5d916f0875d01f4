"""
Load site records from a JSON file.

Accepts either a bare list of site objects or an object with a "sites" list
(the shape of the static site exports).
"""

import json
from pathlib import Path

from loguru import logger
from pydantic import TypeAdapter

from heritage.models import Site

_SITES_ADAPTER = TypeAdapter(list[Site])


def load_sites(path: Path) -> list[Site]:
    """
    Read and validate site records.

    Raises:
        OSError: The file cannot be read
        pydantic.ValidationError: The file is not valid JSON or a record is malformed
    """
    path = Path(path)
    raw = path.read_text(encoding="utf-8")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        # Let pydantic report the syntax error in its own format
        return _SITES_ADAPTER.validate_json(raw)

    if isinstance(data, dict) and "sites" in data:
        data = data["sites"]

    sites = _SITES_ADAPTER.validate_python(data)
    logger.info(f"Loaded {len(sites)} sites from {path}")
    return sites
