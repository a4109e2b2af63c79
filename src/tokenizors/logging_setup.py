"""Central logging setup for the project."""

from __future__ import annotations

import logging

from rich.logging import RichHandler


def setup_logging(level: int | str = logging.INFO) -> None:
    """Route the root logger through rich's handler."""
    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)
