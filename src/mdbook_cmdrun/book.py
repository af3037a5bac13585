"""Pydantic models for the JSON mdBook exchanges with preprocessors.

mdBook writes `[context, book]` to the preprocessor's stdin and reads the
modified book back from stdout. Only the fields this preprocessor touches
are modelled; everything else is kept as extra data and written back
unchanged.
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

# mdBook release the JSON layout below was checked against.
MDBOOK_VERSION = "0.4.40"


class Chapter(BaseModel):
    """A chapter of the book, with its nested sub-chapters."""

    model_config = ConfigDict(extra="allow")

    name: str
    content: str
    number: list[int] | None = None
    sub_items: list["BookItem"] = Field(default_factory=list)
    path: str | None = None
    source_path: str | None = None
    parent_names: list[str] = Field(default_factory=list)

    @property
    def source_file(self) -> Path | None:
        """Chapter path relative to the source root, None for draft chapters."""
        if self.path is None:
            return None
        return Path(self.path)


class ChapterItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    chapter: Chapter = Field(alias="Chapter")


class PartTitleItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    part_title: str = Field(alias="PartTitle")


BookItem = ChapterItem | PartTitleItem | Literal["Separator"]

Chapter.model_rebuild()


class Book(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    sections: list[BookItem] = Field(default_factory=list)
    non_exhaustive: None = Field(default=None, alias="__non_exhaustive")

    def iter_chapters(self) -> Iterator[Chapter]:
        """Yield every chapter depth-first, parents before their sub-chapters."""
        yield from _iter_chapters(self.sections)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class PreprocessorContext(BaseModel):
    """Context mdBook passes alongside the book."""

    model_config = ConfigDict(extra="allow")

    root: str
    config: dict[str, Any] = Field(default_factory=dict)
    renderer: str
    mdbook_version: str


def _iter_chapters(items: list[BookItem]) -> Iterator[Chapter]:
    for item in items:
        if isinstance(item, ChapterItem):
            yield item.chapter
            yield from _iter_chapters(item.chapter.sub_items)


_INPUT_ADAPTER = TypeAdapter(tuple[PreprocessorContext, Book])


def parse_input(raw: str | bytes) -> tuple[PreprocessorContext, Book]:
    """Parse the `[context, book]` JSON array mdBook sends on stdin.

    Raises:
        pydantic.ValidationError: If the payload is not valid preprocessor input
    """
    return _INPUT_ADAPTER.validate_json(raw)
