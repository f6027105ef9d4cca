"""Creator record models as delivered by the creator-listing provider."""
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class CreatorAnalytics(BaseModel):
    """Audience numbers. Values are kept loose; accessors coerce them."""

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    followers: Optional[Any] = None
    total_views: Optional[Any] = Field(default=None, alias="totalViews")
    average_views: Optional[Any] = Field(default=None, alias="averageViews")


class CreatorDetails(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    bio: Optional[str] = None
    location: Optional[str] = None
    tags: Optional[List[str]] = None
    pricing: Optional[str] = None
    analytics: Optional[CreatorAnalytics] = None


class CreatorRecord(BaseModel):
    """A single creator profile.

    Several fields may appear either at the top level or nested under
    ``details`` depending on which revision of the admin tooling wrote the
    record. Read them through ``app.core.accessors`` rather than directly.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    id: Union[int, str] = Field(..., alias="_id")
    name: str = ""
    genre: str = ""
    platform: Optional[str] = None
    location: Optional[str] = None
    tags: Optional[List[str]] = None
    pricing: Optional[str] = None
    analytics: Optional[CreatorAnalytics] = None
    details: Optional[CreatorDetails] = None
    avatar: Optional[str] = None
    social_link: Optional[str] = Field(default=None, alias="socialLink")


class CreatorListResponse(BaseModel):
    success: bool
    results: List[dict]
    count: int


class CreatorDetailResponse(BaseModel):
    success: bool
    result: dict


class CatalogReloadResponse(BaseModel):
    success: bool
    version: int
    count: int
