from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

from common.errors import NotFoundError, StorageError


class ProfileSource:
    """Serves the static profile document as-is."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def get_profile(self) -> Any:
        if not self.path.exists():
            raise NotFoundError(f"Profile file not found: {self.path}")
        try:
            return json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise StorageError(f"Profile file {self.path} is not valid JSON: {exc}") from exc
        except OSError as exc:
            raise StorageError(f"Profile file {self.path} could not be read: {exc}") from exc
