from typing import Annotated, Any, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Word(BaseModel):
    """A recognized vocabulary token and its pinyin annotation."""

    model_config = ConfigDict(frozen=True)

    characters: str
    pinyin: str

    @property
    def pronunciation(self) -> str:
        return self.pinyin


class PlainSegment(BaseModel):
    """Literal text that is not treated as vocabulary (punctuation, digits, spaces)."""

    model_config = ConfigDict(frozen=True)

    type: Literal["plain"] = "plain"
    text: str

    @property
    def content(self) -> str:
        return self.text


class WordSegment(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["word"] = "word"
    word: Word

    @property
    def content(self) -> str:
        return self.word.characters


# The "type" tag decides the variant; an unknown tag is a validation error.
TextSegment = Annotated[Union[WordSegment, PlainSegment], Field(discriminator="type")]


class Text(BaseModel):
    """
    The annotated document: the original input and its ordered segmentation.

    Callers exchange it as ``{"rawInput": ..., "segments": [...]}``; the
    Python attribute keeps the snake_case name.
    """

    model_config = ConfigDict(populate_by_name=True)

    raw_input: str = Field(..., alias="rawInput")
    segments: List[TextSegment] = Field(default_factory=list)

    def reconstructed(self) -> str:
        """Concatenation of the segments' literal text.

        For a well-formed Text this equals ``raw_input``; nothing enforces it.
        """
        return "".join(segment.content for segment in self.segments)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Text":
        return cls.model_validate(payload)
