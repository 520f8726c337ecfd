"""Enumerations shared by risk schemas and services."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort rank, most urgent first."""
        return SEVERITY_RANK[self]


SEVERITY_RANK: dict[Severity, int] = {
    Severity.CRITICAL: 0,
    Severity.HIGH: 1,
    Severity.MEDIUM: 2,
    Severity.LOW: 3,
}


class AlertType(str, Enum):
    RISK_SUICIDE = "risk_suicide"
    DETERIORATION = "deterioration"


class AlertFlag(str, Enum):
    """Write-time flag returned to the submitter of a new entry."""

    CRITICAL = "critical"
    HIGH = "high"
    NONE = "none"
