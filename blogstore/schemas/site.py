from datetime import date
from typing import Annotated, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


NonEmptyStr = Annotated[str, Field(min_length=1)]


class SiteStats(BaseModel):
    articleCount: int
    tagCount: int
    subscribersCount: str
    latestArticleDate: Optional[date] = None


class SiteConfig(BaseModel):
    """Site metadata consumed by the static site generator.

    Field names keep the camelCase keys the generator templates read
    (``config.siteTitle`` and friends). Values are plain strings; only
    emptiness is checked, URL formats are taken as written.
    """

    model_config = ConfigDict(frozen=True, extra='forbid')

    # Site Info
    siteTitle: NonEmptyStr
    siteUrl: NonEmptyStr
    description: NonEmptyStr

    # Identity
    username: NonEmptyStr
    shortname: NonEmptyStr

    # Profiles
    github: NonEmptyStr
    twitter: NonEmptyStr
    medium: NonEmptyStr
    devto: NonEmptyStr
    hashnode: NonEmptyStr
    instagram: NonEmptyStr
    goodreads: NonEmptyStr

    # Contact & extras
    mailAddress: NonEmptyStr
    newsletter: NonEmptyStr
    kofi: NonEmptyStr
    twitterBotRepo: NonEmptyStr
    hundredDaysOfCodeBot: NonEmptyStr

    # 手动更新的订阅人数，例如 "1200+"
    subscribersCount: NonEmptyStr


# Response payload for the saved tweets mapping
SavedTweetsPayload = Dict[str, str]
