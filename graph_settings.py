"""
Runtime settings shared by the graph representations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class GraphSettings:
    """Knobs for a graph instance.

    Attributes
    ----------
    check_rep:
        Verify the representation invariant before and after every public
        operation. On by default, off when Python runs with ``-O``. Turning
        it off never changes observable behaviour.
    log_level:
        Level name applied to the ``digraph`` logger namespace by
        :func:`graph_logging.configure_logging`.
    """

    check_rep: bool = __debug__
    log_level: str = "WARNING"

    def validate(self) -> None:
        """Raise :class:`ValueError` if ``log_level`` is not a known level."""

        if self.log_level.upper() not in _LEVELS:
            raise ValueError(
                f"Unknown log level '{self.log_level}'; expected one of {', '.join(_LEVELS)}."
            )

    @property
    def level(self) -> int:
        self.validate()
        return logging.getLevelName(self.log_level.upper())


DEFAULT_SETTINGS = GraphSettings()
