"""Write-time crisis classification of a single journal entry."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from mindtrack.core.config import settings
from mindtrack.schemas.enums import AlertFlag
from mindtrack.services.risk_predicates import entry_signals, is_high_flag_mood

logger = logging.getLogger(__name__)


def classify_entry(entry: Any, phrases: Iterable[str] | None = None) -> AlertFlag:
    """Return the advisory flag for a newly created entry.

    ``critical`` when the text carries a risk phrase or a very low mood comes
    with extreme anxiety or stress; ``high`` for any other mood of 2 or less;
    ``none`` otherwise. The entry itself is never modified.
    """
    signals = entry_signals(entry, settings.risk_phrases if phrases is None else phrases)
    if signals.is_critical:
        logger.warning(
            "entry_flagged_critical patient_id=%s risk_phrase=%s",
            entry.patient_id,
            signals.risk_phrase,
        )
        return AlertFlag.CRITICAL
    if is_high_flag_mood(entry):
        return AlertFlag.HIGH
    return AlertFlag.NONE
