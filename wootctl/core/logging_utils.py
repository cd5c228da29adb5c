from __future__ import annotations

import logging
import threading
import time


_last_emitted: dict[str, float] = {}
_lock = threading.Lock()


def log_throttled(
    logger: logging.Logger,
    key: str,
    *,
    interval_s: float,
    level: int,
    msg: str,
    args: tuple = (),
    exc: BaseException | None = None,
) -> bool:
    """Emit *msg* at most once per *interval_s* for a given *key*.

    Device listing runs on every command, so fallback warnings would otherwise
    repeat for each query within a single invocation.
    Returns True if the record was emitted.
    """

    now = time.monotonic()
    with _lock:
        last = _last_emitted.get(key)
        if last is not None and (now - last) < interval_s:
            return False
        _last_emitted[key] = now

    if exc is not None:
        logger.log(level, msg, *args, exc_info=exc)
    else:
        logger.log(level, msg, *args)
    return True


def reset_throttle(key: str | None = None) -> None:
    """Forget throttle state for *key* (or for every key)."""

    with _lock:
        if key is None:
            _last_emitted.clear()
        else:
            _last_emitted.pop(key, None)
