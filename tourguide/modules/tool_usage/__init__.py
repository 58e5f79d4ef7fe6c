"""modules/tool_usage — static place dataset access."""

from tourguide.modules.tool_usage.place_tool import (
    PlaceTool,
    get_category_key,
    record_to_place,
    resolve_interest_categories,
)

__all__ = [
    "PlaceTool",
    "get_category_key",
    "record_to_place",
    "resolve_interest_categories",
]
