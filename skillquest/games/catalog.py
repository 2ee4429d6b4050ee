"""
Game catalog loader for local JSON game templates.

Each *.json file holds one game document (or a list of them). Files that
can't be read or don't validate are skipped with a warning so one broken
template doesn't hide the rest of the catalog.
"""

from __future__ import annotations

import json
from pathlib import Path

from loguru import logger

from skillquest.core.errors import ValidationError
from skillquest.games.engine import load_game
from skillquest.games.models import GameDefinition


def load_catalog(directory: Path | str) -> list[GameDefinition]:
    """
    Load every game template in a directory.

    Args:
        directory: Directory containing *.json game documents

    Returns:
        Loaded games in file-name order
    """
    base_path = Path(directory)
    if not base_path.exists():
        logger.warning(f"Game catalog directory not found: {base_path}")
        return []

    games: list[GameDefinition] = []
    for file_path in sorted(base_path.glob("*.json")):
        try:
            payload = json.loads(file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to read game template {file_path.name}: {e}")
            continue

        documents = payload if isinstance(payload, list) else [payload]
        for document in documents:
            try:
                games.append(load_game(document))
            except ValidationError as e:
                logger.warning(f"Skipping invalid game in {file_path.name}: {e}")

    logger.debug(f"Loaded {len(games)} games from {base_path}")
    return games


def find_game(catalog: list[GameDefinition], game_id: str) -> GameDefinition | None:
    """Look up a game by id."""
    return next((g for g in catalog if g.game_id == game_id), None)
