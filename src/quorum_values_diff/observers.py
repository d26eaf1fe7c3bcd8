"""Ready-made DiagnosticObserver implementations.

- ``LoggingObserver`` forwards observations to the ``logging`` module.
- ``RecordingObserver`` keeps them in memory as ``Observation`` records.

Both satisfy ``DiagnosticObserver`` structurally (no inheritance).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

__all__ = ["LoggingObserver", "Observation", "RecordingObserver"]


class LoggingObserver:
    """Emits every observation as a log record.

    Args:
        logger: Target logger.  Defaults to this module's logger
            (``quorum_values_diff.observers``).
        level:  Level used for every record.  Defaults to DEBUG.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.DEBUG,
    ) -> None:
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._level = level

    def on_reduce(self, path: str, count: int, quorum_count: int) -> None:
        self._logger.log(
            self._level,
            "Reducing %d values at %s (quorum count %d)",
            count,
            path or "/",
            quorum_count,
        )

    def on_key(self, path: str, key: object) -> None:
        self._logger.log(self._level, "Processing key %r at %s", key, path or "/")

    def on_type_mismatch(self, path: str, tags: list[str]) -> None:
        self._logger.log(
            self._level,
            "Types differ at %s (%s); keeping non-null values in diffs",
            path or "/",
            ", ".join(tags),
        )


@dataclass(frozen=True, slots=True)
class Observation:
    """One recorded diagnostic event.

    Attributes:
        event: "reduce", "key" or "type_mismatch".
        path:  JSON Pointer of the position observed.
        data:  Event payload (count/quorum_count, key, or tags).
    """

    event: str
    path: str
    data: dict[str, Any] = field(default_factory=dict)


class RecordingObserver:
    """Collects observations in order of emission."""

    def __init__(self) -> None:
        self.observations: list[Observation] = []

    def on_reduce(self, path: str, count: int, quorum_count: int) -> None:
        self.observations.append(
            Observation("reduce", path, {"count": count, "quorum_count": quorum_count})
        )

    def on_key(self, path: str, key: object) -> None:
        self.observations.append(Observation("key", path, {"key": key}))

    def on_type_mismatch(self, path: str, tags: list[str]) -> None:
        self.observations.append(Observation("type_mismatch", path, {"tags": tags}))

    def events(self, event: str) -> list[Observation]:
        """Return the recorded observations of one event kind."""
        return [obs for obs in self.observations if obs.event == event]
