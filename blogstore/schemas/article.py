from datetime import date, datetime
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"

# Route segments under /articles that a slug cannot shadow
RESERVED_SLUGS = frozenset({"tags"})

# Canonical key order when writing a header back out
FRONT_MATTER_KEYS = ("title", "date", "slug", "thumbnail", "template", "tags")


class FrontMatter(BaseModel):
    """Header block every article must carry."""

    model_config = ConfigDict(frozen=True, extra='ignore')

    title: str = Field(min_length=1)
    date: date
    slug: str = Field(pattern=SLUG_PATTERN)
    thumbnail: str = Field(min_length=1)
    template: str = Field(min_length=1)
    tags: List[str]

    @field_validator("date", mode="before")
    @classmethod
    def _drop_time(cls, value):
        # YAML turns "2020-07-23 10:00" into a datetime
        if isinstance(value, datetime):
            return value.date()
        return value

    @field_validator("slug", mode="before")
    @classmethod
    def _strip_slashes(cls, value):
        if isinstance(value, str):
            return value.strip().strip("/")
        return value

    @field_validator("slug")
    @classmethod
    def _not_reserved(cls, value: str) -> str:
        if value in RESERVED_SLUGS:
            raise ValueError(f"'{value}' is a reserved slug")
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _single_tag(cls, value):
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("tags")
    @classmethod
    def _unique_tags(cls, value: List[str]) -> List[str]:
        seen = []
        for tag in value:
            tag = tag.strip()
            if tag and tag not in seen:
                seen.append(tag)
        return seen


class ContentDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    front_matter: FrontMatter
    body: str = ""
    source: Optional[Path] = None

    @property
    def slug(self) -> str:
        return self.front_matter.slug

    @property
    def title(self) -> str:
        return self.front_matter.title

    @property
    def date(self) -> date:
        return self.front_matter.date

    @property
    def tags(self) -> List[str]:
        return self.front_matter.tags


class ArticleListItem(BaseModel):
    title: str
    slug: str
    date: date
    thumbnail: str
    template: str
    tags: List[str] = []

    @classmethod
    def from_document(cls, document: ContentDocument) -> "ArticleListItem":
        fm = document.front_matter
        return cls(
            title=fm.title,
            slug=fm.slug,
            date=fm.date,
            thumbnail=fm.thumbnail,
            template=fm.template,
            tags=list(fm.tags),
        )


class ArticleDetail(ArticleListItem):
    body: str

    @classmethod
    def from_document(cls, document: ContentDocument) -> "ArticleDetail":
        item = ArticleListItem.from_document(document)
        return cls(**item.model_dump(), body=document.body)


class TagCount(BaseModel):
    name: str
    count: int
