"""Log callbacks.

Components take an optional ``log`` callable and hand it short
``"area: message"`` lines; the CLI decides whether they are printed.
"""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional, TextIO, Tuple

LogFn = Callable[[str], None]


def make_loggers(
    verbose: bool = False,
    debug: bool = False,
    stream: Optional[TextIO] = None,
) -> Tuple[Optional[LogFn], Optional[LogFn]]:
    """Return ``(log, log_debug)``; either is None when its level is off.

    --debug implies --verbose. Lines are prefixed with seconds since the
    loggers were created.
    """
    verbose = bool(verbose or debug)
    start_t = time.time()

    def _write(msg: str) -> None:
        dt = time.time() - start_t
        print(f"[{dt:7.2f}s] {msg}", file=stream if stream is not None else sys.stderr)

    def log(msg: str) -> None:
        _write(msg)

    def log_debug(msg: str) -> None:
        _write(f"DEBUG {msg}")

    return (log if verbose else None, log_debug if debug else None)
