"""Argument rejection policy shared by the validating operations."""

from __future__ import annotations

import logging
from typing import NoReturn


class InvalidArgumentError(ValueError):
    """Raised when an operation receives arguments it cannot compute with."""

    def __init__(self, argument: str, message: str) -> None:
        super().__init__(message)
        self.argument = argument


def reject_argument(
    logger: logging.Logger,
    argument: str,
    message: str,
    **fields: object,
) -> NoReturn:
    """Log the rejected values at debug level and raise ``InvalidArgumentError``."""
    logger.debug(message, extra={"argument": argument, **fields})
    raise InvalidArgumentError(argument, message)
