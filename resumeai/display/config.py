from __future__ import annotations

from functools import lru_cache
from importlib import resources

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from resumeai.schemas.analysis import AnalysisKind

FALLBACK_CARD = "fallback"
_RESOURCE_PACKAGE = "resumeai.display"
_RESOURCE_NAME = "presentation.yaml"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class CardStyle(_Frozen):
    title: str = Field(min_length=1)
    icon: str | None = None


class ToneThresholds(_Frozen):
    success_min: float = 80
    warning_min: float = 60

    @model_validator(mode="after")
    def _ordered(self) -> "ToneThresholds":
        if self.warning_min > self.success_min:
            raise ValueError("tones.warning_min must not exceed tones.success_min")
        return self


class ScoreRange(_Frozen):
    min: float = 0
    max: float = 100

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


class DisplayConfig(_Frozen):
    """Card styles, score tones, labels and the expected score range."""

    cards: dict[str, CardStyle]
    tones: ToneThresholds = ToneThresholds()
    labels: dict[str, str] = Field(default_factory=dict)
    score_range: ScoreRange = ScoreRange()

    @model_validator(mode="after")
    def _every_kind_has_a_card(self) -> "DisplayConfig":
        required = [kind.value for kind in AnalysisKind] + [FALLBACK_CARD]
        missing = [tag for tag in required if tag not in self.cards]
        if missing:
            raise ValueError(f"cards missing entries for: {', '.join(missing)}")
        return self

    def card(self, kind_tag: str) -> CardStyle:
        return self.cards.get(kind_tag) or self.cards[FALLBACK_CARD]

    def label(self, key: str, default: str) -> str:
        return self.labels.get(key) or default


def parse_display_config(text: str, source: str = _RESOURCE_NAME) -> DisplayConfig:
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in display config '{source}': {exc}") from exc
    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid display config '{source}': expected a top-level mapping.")
    try:
        return DisplayConfig.model_validate(parsed)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid display config '{source}': {exc}") from exc


@lru_cache(maxsize=1)
def get_display_config() -> DisplayConfig:
    """Load the packaged presentation.yaml once."""
    resource = resources.files(_RESOURCE_PACKAGE).joinpath(_RESOURCE_NAME)
    return parse_display_config(resource.read_text(encoding="utf-8"))
