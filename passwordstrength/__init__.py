from .passwordchecker import (
    ATTACKER_TIERS,
    Analysis,
    AttackerTier,
    CharsetProfile,
    Strength,
    analyze,
    sanitized_report,
)

__all__ = [
    "ATTACKER_TIERS",
    "Analysis",
    "AttackerTier",
    "CharsetProfile",
    "Strength",
    "analyze",
    "sanitized_report",
]
