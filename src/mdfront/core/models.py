"""Data models for loaded documents and the structure listed from their bodies"""

from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator


class Document(BaseModel):
    """A loaded document: string metadata from the front matter plus the verbatim body.

    metadata is exposed as a read-only mapping; has_frontmatter records whether a
    sentinel block was present, even an empty one.
    """
    model_config = ConfigDict(frozen=True)

    metadata:        Mapping[str, str] = Field(default_factory=dict)
    body:            str = ""
    path:            Optional[str] = None     # source file, when loaded from disk
    has_frontmatter: bool = False

    @model_validator(mode="before")
    @classmethod
    def _block_implied_by_metadata(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("metadata"):
            data = {**data, "has_frontmatter": True}
        return data

    @field_validator("metadata", mode="after")
    @classmethod
    def _read_only(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(v))

    @field_serializer("metadata")
    def _plain_dict(self, v: Mapping[str, str]) -> dict[str, str]:
        return dict(v)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return a metadata value, or default when the key is absent."""
        return self.metadata.get(key, default)


class CodeBlock(BaseModel):
    """A fenced or indented code example found in a document body."""
    model_config = ConfigDict(frozen=True)

    info:     str = ""
    language: str = ""
    content:  str
    line:     int                       # 0-based line in the body where the block opens


class Heading(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: int = Field(ge=1, le=6)
    text:  str
    line:  int
