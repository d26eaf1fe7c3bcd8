"""DiagnosticObserver Protocol for the reducer's observation extension point.

Defines the structural interface a diagnostic sink must satisfy.  Users can
plug in their own observers without inheriting from any base class — any
class with the three conformant methods passes ``isinstance`` checks.

Observers are purely observational: the algorithms produce identical results
with or without one attached.

Example::

    from quorum_values_diff.protocols import DiagnosticObserver

    class PrintObserver:
        def on_reduce(self, path: str, count: int, quorum_count: int) -> None:
            print(f"{path or '/'}: {count} inputs, quorum {quorum_count}")

        def on_key(self, path: str, key: object) -> None:
            print(f"{path or '/'}: key {key!r}")

        def on_type_mismatch(self, path: str, tags: list[str]) -> None:
            print(f"{path or '/'}: mixed types {tags}")

    assert isinstance(PrintObserver(), DiagnosticObserver)  # True
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DiagnosticObserver(Protocol):
    """Structural protocol for reduction diagnostics.

    - ``on_reduce``: called once per reduction call with the number of inputs
      and the resolved quorum threshold.
    - ``on_key``: called for every map key before its column is reduced.
    - ``on_type_mismatch``: called when the inputs at a position have more
      than one variant; ``tags`` lists the variant of each input in order.
    """

    def on_reduce(self, path: str, count: int, quorum_count: int) -> None: ...

    def on_key(self, path: str, key: object) -> None: ...

    def on_type_mismatch(self, path: str, tags: list[str]) -> None: ...
