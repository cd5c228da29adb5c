from __future__ import annotations

import logging
import os


def configure_logging() -> None:
    """Configure root logging for the CLI.

    If callers already configured logging handlers, we don't override them.
    """

    if logging.getLogger().handlers:
        return

    level = logging.DEBUG if os.environ.get("WOOTCTL_DEBUG") else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
