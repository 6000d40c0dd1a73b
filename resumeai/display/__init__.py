from .config import (
    FALLBACK_CARD,
    CardStyle,
    DisplayConfig,
    ScoreRange,
    ToneThresholds,
    get_display_config,
    parse_display_config,
)

__all__ = [
    "FALLBACK_CARD",
    "CardStyle",
    "DisplayConfig",
    "ScoreRange",
    "ToneThresholds",
    "get_display_config",
    "parse_display_config",
]
