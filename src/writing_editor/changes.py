from __future__ import annotations

from typing import Iterator, List

from .models import Change, ChangeCategory


class ChangeLog:
    """Accumulates the Change records produced during one processing call.

    A log is owned by whoever created it. Rule sets only append; the owner reads
    everything back with ``drain`` which also resets the log, so changes never
    leak from one sentence or section into the next.
    """

    def __init__(self) -> None:
        self._changes: List[Change] = []

    def record(
        self,
        rule: str,
        category: ChangeCategory,
        before: str,
        after: str,
        reason: str,
    ) -> Change:
        change = Change(
            rule=rule, category=category, before=before, after=after, reason=reason
        )
        self._changes.append(change)
        return change

    def since(self, mark: int) -> List[Change]:
        """Return the changes recorded after position ``mark``."""
        return list(self._changes[mark:])

    def drain(self) -> List[Change]:
        """Return every recorded change and reset the log."""
        drained = self._changes
        self._changes = []
        return drained

    def clear(self) -> None:
        self._changes = []

    def __len__(self) -> int:
        return len(self._changes)

    def __iter__(self) -> Iterator[Change]:
        return iter(list(self._changes))
