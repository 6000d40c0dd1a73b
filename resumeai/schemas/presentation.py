from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

Tone = Literal["default", "success", "warning", "error", "info"]


class _Primitive(BaseModel):
    model_config = ConfigDict(frozen=True)


class ScoreIndicator(_Primitive):
    type: Literal["score_indicator"] = "score_indicator"
    label: str
    value: float
    display: str
    tone: Tone
    out_of_range: bool = False


class VerdictPanel(_Primitive):
    type: Literal["verdict_panel"] = "verdict_panel"
    label: str
    text: str


class Badge(_Primitive):
    text: str
    tone: Tone = "default"


class BadgeList(_Primitive):
    type: Literal["badge_list"] = "badge_list"
    badges: tuple[Badge, ...]


class ListItem(_Primitive):
    text: str
    icon: str
    tone: Tone = "default"


class AnnotatedList(_Primitive):
    type: Literal["annotated_list"] = "annotated_list"
    items: tuple[ListItem, ...]


class NumberedItem(_Primitive):
    number: int
    text: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def label(self) -> str:
        return f"{self.number}. {self.text}"


class NumberedList(_Primitive):
    type: Literal["numbered_list"] = "numbered_list"
    items: tuple[NumberedItem, ...]


class KeyValueCell(_Primitive):
    label: str
    value: float
    display: str


class KeyValueGrid(_Primitive):
    type: Literal["key_value_grid"] = "key_value_grid"
    cells: tuple[KeyValueCell, ...]


class FactorEntry(_Primitive):
    name: str
    badge: Badge | None = None
    description: str | None = None


class FactorList(_Primitive):
    type: Literal["factor_list"] = "factor_list"
    factors: tuple[FactorEntry, ...]


class Alert(_Primitive):
    type: Literal["alert"] = "alert"
    message: str
    tone: Tone = "error"


class RawBlock(_Primitive):
    type: Literal["raw"] = "raw"
    text: str


Primitive = Annotated[
    Union[
        ScoreIndicator,
        VerdictPanel,
        BadgeList,
        AnnotatedList,
        NumberedList,
        KeyValueGrid,
        FactorList,
        Alert,
        RawBlock,
    ],
    Field(discriminator="type"),
]


class Section(_Primitive):
    title: str
    icon: str | None = None
    primitives: tuple[Primitive, ...] = ()


class PresentationTree(_Primitive):
    type: Literal["tree"] = "tree"
    title: str = ""
    icon: str | None = None
    sections: tuple[Section, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.sections

    def section_titles(self) -> list[str]:
        return [section.title for section in self.sections]

    def find_section(self, title: str) -> Section | None:
        for section in self.sections:
            if section.title == title:
                return section
        return None


class LoadingPlaceholder(_Primitive):
    type: Literal["loading"] = "loading"
    blocks: tuple[str, ...] = ("header", "block_lg", "block_md", "block_md")
