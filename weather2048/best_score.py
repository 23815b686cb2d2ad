"""
Best score persistence.

The best score lives in a small JSON object used as a key-value store, so
other settings can share the file. Storage problems never stop a game: a
failed read counts as 0 and a failed write only keeps the score in memory.
"""

import json
import logging
import os
from typing import Dict, Optional

logger = logging.getLogger(__name__)

BEST_SCORE_KEY = 'weather-2048-best'
DEFAULT_BEST_SCORE_FILE = os.path.join(os.path.expanduser('~'), '.weather2048.json')


class BestScoreStore:
    """Best score kept under ``key`` in the JSON file at ``path``."""

    def __init__(self, path: str = DEFAULT_BEST_SCORE_FILE, key: str = BEST_SCORE_KEY):
        self.path = path
        self.key = key
        self.best: Optional[int] = None

    def _read(self) -> Dict:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read best score from %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring best score file %s: expected a JSON object", self.path)
            return {}
        return data

    def load(self) -> int:
        """Read the stored best score (0 if missing or invalid)."""
        value = self._read().get(self.key, 0)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            logger.warning("Ignoring invalid best score %r in %s", value, self.path)
            value = 0
        self.best = value
        return value

    def update(self, score: int) -> int:
        """Record ``score`` if it beats the best so far. Returns the best."""
        if self.best is None:
            self.load()
        if score <= self.best:
            return self.best

        self.best = score
        data = self._read()
        data[self.key] = score
        try:
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(data, f)
        except OSError as e:
            logger.warning("Could not save best score to %s: %s", self.path, e)
        return self.best
