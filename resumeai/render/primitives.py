from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable

from resumeai.display import get_display_config
from resumeai.normalize.utils import format_number
from resumeai.schemas.presentation import (
    AnnotatedList,
    Badge,
    BadgeList,
    KeyValueCell,
    KeyValueGrid,
    ListItem,
    NumberedItem,
    NumberedList,
    ScoreIndicator,
    Tone,
)


def card_meta(kind_tag: str) -> tuple[str, str | None]:
    card = get_display_config().card(kind_tag)
    return card.title, card.icon


def label(key: str, default: str) -> str:
    return get_display_config().label(key, default)


def humanize_key(key: str) -> str:
    return key.replace("_", " ")


def score_tone(value: float) -> Tone:
    tones = get_display_config().tones
    if value >= tones.success_min:
        return "success"
    if value >= tones.warning_min:
        return "warning"
    return "error"


def percent_display(value: float) -> str:
    try:
        rounded = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return f"{value:.0f}%"
    return f"{int(rounded)}%"


def score_indicator(value: float, text: str) -> ScoreIndicator:
    return ScoreIndicator(
        label=text,
        value=value,
        display=percent_display(value),
        tone=score_tone(value),
        out_of_range=not get_display_config().score_range.contains(value),
    )


def badge_list(texts: Iterable[str], tone: Tone) -> BadgeList:
    return BadgeList(badges=tuple(Badge(text=text, tone=tone) for text in texts))


def annotated_list(texts: Iterable[str], icon: str, tone: Tone = "default") -> AnnotatedList:
    return AnnotatedList(items=tuple(ListItem(text=text, icon=icon, tone=tone) for text in texts))


def numbered_list(texts: Iterable[str]) -> NumberedList:
    return NumberedList(
        items=tuple(NumberedItem(number=index, text=text) for index, text in enumerate(texts, start=1))
    )


def key_value_grid(values: dict[str, float]) -> KeyValueGrid:
    return KeyValueGrid(
        cells=tuple(
            KeyValueCell(label=humanize_key(key), value=value, display=f"{format_number(value)}%")
            for key, value in values.items()
        )
    )


def signed_percent_badge(impact: float) -> Badge:
    sign = "+" if impact > 0 else ""
    return Badge(text=f"{sign}{format_number(impact)}%", tone="success" if impact > 0 else "error")
