# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for httpsclient."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("HTTPSCLIENT_LOG_LEVEL", "WARNING").upper()

logging.getLogger("httpsclient").addHandler(logging.NullHandler())


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for scripts that use the library directly."""
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


__all__ = ["setup_logging"]
