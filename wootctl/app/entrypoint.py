"""CLI startup entrypoint.

Owns the startup sequence (logging) and then dispatches to `cli.main`.
"""

from __future__ import annotations

import logging
import sys

from . import cli
from .startup import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    try:
        configure_logging()
        code = cli.main()
    except KeyboardInterrupt:
        logger.info("Interrupted")
        sys.exit(0)
    except Exception as exc:
        logger.exception("Unhandled error: %s", exc)
        sys.exit(1)
    else:
        sys.exit(code)
