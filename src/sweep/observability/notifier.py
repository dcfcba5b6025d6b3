"""Notice sink for purge failures.

A failed purge never interrupts a content save, so the only trace it leaves
is a notice.  ``StderrNotifier`` prints notices the way the CLI prints its
own diagnostics; hosts can pass any object with a ``notice(message)`` method.
"""

from __future__ import annotations

import sys
from typing import TextIO


class StderrNotifier:
    """Write notices to a text stream, one per line.

    Args:
        stream: Destination stream. Defaults to ``sys.stderr`` at call time,
            so test capture of stderr keeps working.
        prefix: Text prepended to each notice.

    """

    __slots__ = ("_prefix", "_stream")

    def __init__(self, stream: TextIO | None = None, *, prefix: str = "  ") -> None:
        self._stream = stream
        self._prefix = prefix

    def notice(self, message: str) -> None:
        print(f"{self._prefix}{message}", file=self._stream or sys.stderr)
