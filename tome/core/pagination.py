"""Pagination metadata and navigation links.

A ``Chapter`` carries both what the caller knows (base URL, requested page,
page size, total item count, the payload) and what ``paginate`` derives from
it (offset, current and last page, first/next/previous/last links).
``paginate`` never touches its argument; it returns a fresh ``Chapter``.
"""

import math
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from tome.core.exceptions import InvalidLimitError, ValidationError
from tome.core.logging import get_logger

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
PAGE_PARAM = "page"

log = get_logger(__name__)


class Chapter(BaseModel, Generic[T]):
    """Pagination input and result. Aliases are the wire names."""

    model_config = ConfigDict(populate_by_name=True)

    data: T | None = None
    base_url: str = ""
    first_url: str = ""
    next_url: str = ""
    previous_url: str = Field(default="", alias="prev_url")
    last_url: str = ""
    offset: int = Field(default=0, exclude=True)
    limit: int = Field(default=0, alias="per_page")
    # page number captured from the request params
    requested_page: int = Field(default=0, exclude=True)
    current_page: int = 0
    last_page: int = 0
    total_items: int = Field(default=0, alias="total")

    def paginate(self) -> "Chapter[T]":
        return paginate(self)

    def to_wire(self) -> dict[str, Any]:
        """Response body: wire names only, no ``offset``/``requested_page``."""
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_wire(cls, payload: dict[str, Any] | str | bytes) -> "Chapter[T]":
        if isinstance(payload, (str, bytes)):
            return cls.model_validate_json(payload)
        return cls.model_validate(payload)


def page_url(base_url: str, page: int) -> str:
    return f"{base_url}?{PAGE_PARAM}={page}"


def last_page_for(total_items: int, limit: int) -> int:
    """ceil(total_items / limit) using true division."""
    if limit <= 0:
        log.warning("paginate_rejected", reason="invalid_limit", limit=limit)
        raise InvalidLimitError(limit)
    return int(math.ceil(total_items / limit))


def paginate(chapter: Chapter[T]) -> Chapter[T]:
    """
    Compute offset, pages and links for ``chapter`` and return them as a new Chapter.

    Zero ``current_page``/``limit`` mean unset and become 1/10. The offset only
    moves when ``requested_page`` is greater than ``current_page``, so feeding a
    result back in with a lower page keeps its offset.
    """
    if not chapter.base_url:
        log.warning("paginate_rejected", reason="missing_base_url")
        raise ValidationError("Base URL is missing")

    current_page = chapter.current_page or DEFAULT_PAGE
    limit = chapter.limit or DEFAULT_LIMIT
    last_page = last_page_for(chapter.total_items, limit)

    requested_page = chapter.requested_page
    offset = chapter.offset
    if requested_page > current_page:
        current_page = requested_page
        offset = (current_page - 1) * limit

    base_url = chapter.base_url
    next_url = page_url(base_url, current_page + 1) if requested_page < last_page else ""
    previous_url = page_url(base_url, current_page - 1) if last_page > requested_page else ""

    log.debug(
        "paginate",
        requested_page=requested_page,
        current_page=current_page,
        last_page=last_page,
        offset=offset,
        limit=limit,
        total=chapter.total_items,
    )
    return chapter.model_copy(
        update={
            "first_url": page_url(base_url, 1),
            "next_url": next_url,
            "previous_url": previous_url,
            "last_url": page_url(base_url, last_page),
            "offset": offset,
            "limit": limit,
            "current_page": current_page,
            "last_page": last_page,
        }
    )
