"""Shared FastAPI dependencies."""

from fastapi import Query, Request

from tome.core.config import get_settings
from tome.core.exceptions import BadRequestError
from tome.core.pagination import Chapter


def base_url_for(request: Request) -> str:
    """Request URL without query string; PUBLIC_BASE_URL replaces scheme and host when set."""
    settings = get_settings()
    if settings.public_base_url:
        return settings.public_base_url.rstrip("/") + request.url.path
    return str(request.url.replace(query="", fragment=""))


async def get_chapter(
    request: Request,
    page: int = Query(0, ge=0),
    per_page: int = Query(0, ge=0),
) -> Chapter:
    """Dependency: unpaginated Chapter with base URL, requested page and limit from the request."""
    max_per_page = get_settings().max_per_page
    if per_page > max_per_page:
        raise BadRequestError(
            f"per_page must be at most {max_per_page}",
            details={"per_page": per_page, "max_per_page": max_per_page},
        )
    return Chapter(base_url=base_url_for(request), requested_page=page, limit=per_page)
