"""File-backed search history: a JSON list of {id, name} entries."""

import json
import logging
import os
import tempfile
import threading
from dataclasses import asdict
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from citycast.errors import StorePersistError, StoreUnavailableError
from citycast.models.history import City

logger = logging.getLogger(__name__)

_CITY_LIST = TypeAdapter(list[City])


class HistoryStore:
    """Owns the persisted history file.

    Every mutation is a read-modify-write of the whole list, serialized by a
    per-instance lock. Construct one store per process and pass it to
    whatever serves requests.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def ensure_exists(self) -> None:
        """Create an empty history file if none exists."""
        with self._lock:
            if self.path.exists():
                return
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                logger.error("Cannot create history directory %s: %s", self.path.parent, e)
                raise StorePersistError(f"History could not be created: {e}") from e
            self._write([])
            logger.info("Created empty history at %s", self.path)

    def get_cities(self) -> list[City]:
        return self._read()

    def add_city(self, name: str) -> City:
        """Append a city. Ids are one past the highest numeric id stored."""
        with self._lock:
            cities = self._read()
            city = City(id=str(_next_id(cities)), name=name)
            self._write([*cities, city])
        logger.info("History add id=%s name=%r", city.id, city.name)
        return city

    def remove_city(self, city_id: str) -> None:
        """Drop entries with the given id. Unknown ids are a no-op."""
        with self._lock:
            cities = self._read()
            remaining = [c for c in cities if c.id != city_id]
            self._write(remaining)
        logger.info(
            "History remove id=%s (%d removed)", city_id, len(cities) - len(remaining)
        )

    def _read(self) -> list[City]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error reading search history %s: %s", self.path, e)
            raise StoreUnavailableError(f"History unavailable: {e}") from e
        try:
            return _CITY_LIST.validate_json(raw)
        except ValidationError as e:
            logger.error("Corrupt search history %s: %s", self.path, e)
            raise StoreUnavailableError(f"History file {self.path} is corrupt") from e

    def _write(self, cities: list[City]) -> None:
        """Write to a temp file beside the target, then rename into place."""
        data = json.dumps([asdict(c) for c in cities], indent=2)
        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(data)
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.error("Error writing search history %s: %s", self.path, e)
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorePersistError(f"History could not be saved: {e}") from e


def _next_id(cities: list[City]) -> int:
    numeric = [int(c.id) for c in cities if c.id.isdecimal()]
    return max(numeric, default=0) + 1
