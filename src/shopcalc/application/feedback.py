"""Feedback port: the "haptic pulse" fired when the till accepts input.

Feedback is a courtesy: a failing implementation must never break
billing, so callers go through ``pulse_quietly``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class Feedback(ABC):

    @abstractmethod
    def pulse(self) -> None:
        """Emit one short acknowledgement."""


class NoFeedback(Feedback):

    def pulse(self) -> None:
        pass


def pulse_quietly(feedback: Feedback) -> None:
    try:
        feedback.pulse()
    except Exception:
        logger.debug("Feedback pulse failed", exc_info=True)
