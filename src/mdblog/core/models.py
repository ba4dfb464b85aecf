"""Post and parse-result models shared by the parser and the catalog"""

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Post(BaseModel):
    """A catalog entry: frontmatter fields plus derived slug, content, and read time."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    slug:      str
    content:   str
    read_time: str = Field(alias="readTime")
    title:     Optional[str] = None
    date:      Optional[str] = None     # kept as written; parsed only for ordering
    excerpt:   Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Plain dict with frontmatter keys and `readTime`, as consumed by a front-end."""
        return self.model_dump(by_alias=True, exclude_none=True)


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one document; error is set when the parser failed."""
    metadata: dict[str, Any] = field(default_factory=dict)
    content:  str = ""
    error:    Optional[str] = None