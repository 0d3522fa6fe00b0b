from datetime import datetime

from constants import SHORT_ID_LEN
from entity_registry import resolve_category


def format_created(value):
    """Format a createdAt timestamp as YYYY-MM-DD."""
    if not value:
        return "Invalid Date"
    try:
        # fromisoformat() before 3.11 rejects the trailing "Z" JavaScript emits
        dt = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return "Invalid Date"
    return f"{dt:%Y-%m-%d}"


def card_view(item, kind):
    """Build the display fields for one category card."""
    cfg = resolve_category(kind)
    item_id = str(item.get("id", ""))
    return {
        "id": item_id,
        "title": item.get(cfg.name_field) or "",
        "short_id": f"{item_id[:SHORT_ID_LEN]}...",
        "created": format_created(item.get("createdAt")),
    }
