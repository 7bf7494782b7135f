import json
import logging
import math
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

logger = logging.getLogger(__name__)

# File paths
HIGH_SCORE_FILE = Path.home() / ".asteroids_scores.json"


def _is_score(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, int)


class ScoreStore(Protocol):
    def get(self, key: str) -> Optional[int]: ...

    def set(self, key: str, value: int) -> None: ...


class MemoryScoreStore:
    def __init__(self, values: Optional[Dict[str, int]] = None) -> None:
        self.values: Dict[str, int] = dict(values or {})

    def get(self, key: str) -> Optional[int]:
        return self.values.get(key)

    def set(self, key: str, value: int) -> None:
        self.values[key] = int(value)


class JsonScoreStore:
    """Scores kept as a flat JSON object in a single file"""

    def __init__(self, path: Union[str, Path] = HIGH_SCORE_FILE) -> None:
        self.path = Path(path)
        self.values: Dict[str, int] = {}
        self.load()

    def load(self) -> None:
        if not self.path.exists():
            self.values = {}
            return
        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable score file %s: %s", self.path, e)
            self.values = {}
            return

        if not isinstance(data, dict):
            logger.warning("Ignoring malformed score file %s", self.path)
            self.values = {}
            return
        self.values = {k: int(v) for k, v in data.items() if _is_score(v)}

    def save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w') as f:
            json.dump(self.values, f)

    def get(self, key: str) -> Optional[int]:
        return self.values.get(key)

    def set(self, key: str, value: int) -> None:
        self.values[key] = int(value)
        self.save()
