"""Usage counters - JSON file persistence."""
import json
import threading
from pathlib import Path
from typing import Dict, Optional, Union

from convertaphile.config import settings
from convertaphile.domain.models.conversion import ConversionStats

Number = Union[int, float]

STAT_FIELDS = ("total_files", "total_size_mb", "total_downloads")


class StatsRepository:
    """Counter store; increments are serialized by a lock."""

    def __init__(self, stats_file: Optional[Path] = None):
        self.stats_file = (stats_file or settings.stats_file).resolve()
        self.stats_file.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    def increment(self, field: str, amount: Number = 1) -> Number:
        """Add ``amount`` to a counter and return its new value."""
        if field not in STAT_FIELDS:
            raise ValueError(f"Unknown stat field: {field}")

        with self._lock:
            counters = self._load()
            counters[field] = counters.get(field, 0) + amount
            self._save(counters)
            return counters[field]

    def read_all(self) -> Dict[str, Number]:
        with self._lock:
            return self._load()

    def get_stats(self) -> ConversionStats:
        return ConversionStats(**self.read_all())

    def _load(self) -> Dict[str, Number]:
        if not self.stats_file.exists():
            return {}
        try:
            with open(self.stats_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            return {}
        if not isinstance(data, dict):
            return {}
        return {k: v for k, v in data.items() if k in STAT_FIELDS}

    def _save(self, counters: Dict[str, Number]) -> None:
        tmp_path = self.stats_file.with_suffix(".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(counters, f, indent=2)
        tmp_path.replace(self.stats_file)


# Global singleton
stats_repository = StatsRepository()
