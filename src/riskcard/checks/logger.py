"""Detail sink passed to evaluation functions."""

from __future__ import annotations

from typing import List

from riskcard.checks.models import CheckDetail, DetailType, LogMessage


class DetailLogger:
    """Collects human-readable explanations in emission order.

    Recording details never influences the score.
    """

    def __init__(self) -> None:
        self._details: List[CheckDetail] = []

    def _log(self, type_: DetailType, msg: LogMessage) -> None:
        self._details.append(CheckDetail(type=type_, msg=msg))

    def info(self, msg: LogMessage) -> None:
        self._log("info", msg)

    def warn(self, msg: LogMessage) -> None:
        self._log("warn", msg)

    def debug(self, msg: LogMessage) -> None:
        self._log("debug", msg)

    def flush(self) -> List[CheckDetail]:
        """Return everything logged so far and reset the buffer."""
        details, self._details = self._details, []
        return details

    def __len__(self) -> int:
        return len(self._details)

    def count(self, type_: DetailType) -> int:
        return sum(1 for d in self._details if d.type == type_)
