"""Shared helpers for American Format."""

# American Format
# Copyright (C) 2025  American Format developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
from typing import Optional

ROOT_LOGGER_NAME = "americanformat"

# Library code never configures output; applications attach handlers.
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logger(name: str) -> logging.Logger:
    """Return the logger for a module of this package.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        A logger nested under the ``americanformat`` root logger
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


_console_handler: Optional[logging.Handler] = None


def enable_console_logging(level: int = logging.INFO) -> logging.Handler:
    """Attach a stderr handler to the package root logger.

    Used by the developer CLI; library callers configure logging themselves.
    Repeated calls only change the level; the handler is attached once.
    """
    global _console_handler
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _console_handler is None:
        _console_handler = logging.StreamHandler()
        _console_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    if _console_handler not in root.handlers:
        root.addHandler(_console_handler)
    root.setLevel(level)
    return _console_handler
