from fastapi import APIRouter, Depends

from tome.core.config import get_settings
from tome.core.pagination import Chapter
from tome.deps import get_chapter

router = APIRouter()


@router.get("/items")
async def demo_items(chapter: Chapter = Depends(get_chapter)):
    """Paginate the in-memory demo collection 1..DEMO_TOTAL_ITEMS."""
    items = list(range(1, get_settings().demo_total_items + 1))
    result = chapter.model_copy(update={"total_items": len(items)}).paginate()
    page_items = items[result.offset : result.offset + result.limit]
    return result.model_copy(update={"data": page_items}).to_wire()
