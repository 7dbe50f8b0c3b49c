from tome.core.exceptions import AppError, InvalidLimitError, ValidationError
from tome.core.pagination import Chapter, last_page_for, page_url, paginate

__all__ = [
    "AppError",
    "Chapter",
    "InvalidLimitError",
    "ValidationError",
    "last_page_for",
    "page_url",
    "paginate",
]
