"""Named local storage slots backed by files."""

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from calorie_tracker.domain.errors import PersistenceError


class SlotStorage(Protocol):
    """Key-value storage holding one opaque blob per slot name."""

    def read(self, slot: str) -> bytes | None:
        """Return the blob stored in ``slot`` or None when empty."""

    def write(self, slot: str, data: bytes) -> None:
        """Replace the blob stored in ``slot``."""


@dataclass
class FileSlotStorage(SlotStorage):
    """Stores each slot as ``<root>/<slot>.json``."""

    root: Path

    def path_for(self, slot: str) -> Path:
        return self.root / f"{slot}.json"

    def read(self, slot: str) -> bytes | None:
        """Return the slot contents, or None if the slot was never written."""
        path = self.path_for(slot)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise PersistenceError(f"Failed to read slot {slot!r}") from exc

    def write(self, slot: str, data: bytes) -> None:
        """Write via a temporary file; readers never see a partial blob."""
        path = self.path_for(slot)
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=f".{slot}.")
            try:
                with os.fdopen(fd, "wb") as handle:
                    handle.write(data)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise PersistenceError(f"Failed to write slot {slot!r}") from exc
