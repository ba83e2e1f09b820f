"""
Album Client Models

Typed snapshots of the remote album collection: enumerations with their
wire values, the album entity, the paginated envelope and the request
parameter models callers construct.
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from datetime import datetime
from enum import Enum

from .protocols import InvalidArgumentError


# ==================== Enumerations ====================

class AlbumPrivacyOption(str, Enum):
    """Who can view an album"""
    ANYBODY = "anybody"
    PASSWORD = "password"


class AlbumSortOption(str, Enum):
    """Default ordering of videos inside an album"""
    ARRANGED = "arranged"
    NEWEST = "newest"
    OLDEST = "oldest"
    PLAYS = "plays"
    COMMENTS = "comments"
    LIKES = "likes"
    ADDED_FIRST = "added_first"
    ADDED_LAST = "added_last"
    ALPHABETICAL = "alphabetical"


class GetAlbumsSortOption(str, Enum):
    """Ordering of albums in a list response"""
    DATE = "date"
    ALPHABETICAL = "alphabetical"
    VIDEOS = "videos"
    DURATION = "duration"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


# ==================== Core Models ====================

class AlbumPrivacy(BaseModel):
    """Album privacy settings as reported by the API"""
    model_config = ConfigDict(frozen=True)

    view: Optional[str] = None
    password: Optional[str] = None


class AlbumOwner(BaseModel):
    """Minimal owner reference embedded in an album"""
    model_config = ConfigDict(frozen=True)

    uri: Optional[str] = None
    name: Optional[str] = None
    link: Optional[str] = None


class Album(BaseModel):
    """
    Album snapshot

    `album_id` is derived from `uri` by the decoder; it is never
    assigned on the client side.
    """
    model_config = ConfigDict(frozen=True)

    uri: str = Field(..., min_length=1)
    album_id: Optional[int] = None
    name: str
    description: Optional[str] = None
    link: Optional[str] = None
    duration: int = 0
    created_time: Optional[datetime] = None
    modified_time: Optional[datetime] = None
    privacy: AlbumPrivacy = Field(default_factory=AlbumPrivacy)
    sort: Optional[str] = None
    layout: Optional[str] = None
    theme: Optional[str] = None
    user: Optional[AlbumOwner] = None
    pictures: Dict[str, Any] = Field(default_factory=dict)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_validator('pictures', 'metadata', mode='before')
    @classmethod
    def parse_optional_dict(cls, v):
        return v if v is not None else {}

    @field_validator('privacy', mode='before')
    @classmethod
    def parse_privacy(cls, v):
        return v if v is not None else {}


class Paging(BaseModel):
    """Pagination links; `next`/`previous` are absent on the last/first page"""
    model_config = ConfigDict(frozen=True)

    next: Optional[str] = None
    previous: Optional[str] = None
    first: Optional[str] = None
    last: Optional[str] = None


T = TypeVar("T")


class PageEnvelope(BaseModel, Generic[T]):
    """Decoded list response with its pagination metadata"""
    model_config = ConfigDict(frozen=True)

    total: int = Field(..., ge=0)
    page: Optional[int] = Field(None, ge=1)
    per_page: int = Field(..., gt=0)
    paging: Paging = Field(default_factory=Paging)
    data: List[T] = Field(default_factory=list)

    @field_validator('data', mode='before')
    @classmethod
    def parse_data(cls, v):
        return v if v is not None else []

    @field_validator('paging', mode='before')
    @classmethod
    def parse_paging(cls, v):
        return v if v is not None else {}

    @model_validator(mode='after')
    def check_page_size(self):
        if len(self.data) > self.per_page:
            raise ValueError(
                f"page holds {len(self.data)} items but per_page is {self.per_page}"
            )
        return self

    @property
    def items(self) -> List[T]:
        return self.data

    @property
    def has_next(self) -> bool:
        return self.paging.next is not None


AlbumPage = PageEnvelope[Album]


# ==================== Request Models ====================

def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc']) or 'value'}: {item['msg']}"
        for item in error.errors()
    )


class RequestParameters(BaseModel):
    """
    Base for caller-built request models

    Construction failures surface as InvalidArgumentError (a ValueError),
    so callers only ever catch the client's own error types.
    """
    model_config = ConfigDict(frozen=True)

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InvalidArgumentError(f"Invalid {type(self).__name__}: {_describe(e)}") from e

    @classmethod
    def model_validate(cls, obj: Any, **kwargs: Any):
        try:
            return super().model_validate(obj, **kwargs)
        except ValidationError as e:
            raise InvalidArgumentError(f"Invalid {cls.__name__}: {_describe(e)}") from e


class EditAlbumParameters(RequestParameters):
    """
    Sparse album edit request

    Only fields that are set (non-None) reach the wire, so an update
    carries exactly the attributes the caller wants to change.
    """
    privacy: Optional[AlbumPrivacyOption] = Field(None, description="Album privacy")
    sort: Optional[AlbumSortOption] = Field(None, description="Default video ordering")
    name: Optional[str] = Field(None, description="Album name", min_length=1)
    description: Optional[str] = Field(None, description="Album description")
    password: Optional[str] = Field(None, description="Password when privacy is 'password'")


class GetAlbumsParameters(RequestParameters):
    """Album list query options"""

    page: Optional[int] = Field(None, description="Page number (1-indexed)")
    per_page: Optional[int] = Field(None, description="Items per page")
    query: Optional[str] = Field(None, description="Search in album names")
    sort: Optional[GetAlbumsSortOption] = Field(None, description="List ordering")
    direction: Optional[SortDirection] = Field(None, description="Sort direction")


# ==================== Export Models ====================

__all__ = [
    # Enums
    'AlbumPrivacyOption', 'AlbumSortOption', 'GetAlbumsSortOption', 'SortDirection',
    # Core Models
    'Album', 'AlbumPrivacy', 'AlbumOwner', 'Paging', 'PageEnvelope', 'AlbumPage',
    # Request Models
    'RequestParameters', 'EditAlbumParameters', 'GetAlbumsParameters',
]
