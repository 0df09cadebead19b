from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from .amenity_catalog import (
    AMENITIES,
    CATEGORIES,
    CUSTOM_CATEGORY_ID,
    CUSTOM_FALLBACK_ICONS,
    find_amenity_by_name,
    get_amenity,
    get_category,
    is_catalog_id,
)

CUSTOM_PREFIX = "custom:"
CUSTOM_SEPARATOR = "|"


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def is_custom_id(value: Any) -> bool:
    return isinstance(value, str) and value.startswith(CUSTOM_PREFIX)


def parse_custom_id(selection_id: str) -> tuple[str, str]:
    """Split ``custom:<nameHe>|<nameEn>`` into its two names.

    Without the separator both names are empty; the id itself still carries
    the raw text, so a later decode keeps it unchanged.
    """
    payload = _text(selection_id)[len(CUSTOM_PREFIX):]
    name_he, separator, name_en = payload.partition(CUSTOM_SEPARATOR)
    if not separator:
        return "", ""
    return name_he, name_en


def _he_segment(name: str) -> str:
    # The Hebrew half ends at the first separator, so it must not contain one.
    return name.replace(CUSTOM_SEPARATOR, "/")


def build_custom_id(name_he: str, name_en: str = "") -> str | None:
    he_value = _he_segment(_text(name_he).strip())
    if not he_value:
        return None
    en_value = _text(name_en).strip() or _text(name_he).strip()
    return f"{CUSTOM_PREFIX}{he_value}{CUSTOM_SEPARATOR}{en_value}"


def _dedupe(ids: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(ids))


def _iter_items(persisted: Any):
    if not isinstance(persisted, list):
        return
    for group in persisted:
        if not isinstance(group, dict):
            continue
        items = group.get("items")
        if not isinstance(items, list):
            continue
        for item in items:
            if isinstance(item, dict):
                yield item


def _split_corrupted_ids(raw_name: str) -> list[str]:
    # Older saves joined several selection ids into one name field.
    if "," not in raw_name:
        return []
    parts = [part.strip() for part in raw_name.split(",")]
    parts = [part for part in parts if part]
    if len(parts) > 1 and all(is_catalog_id(part) for part in parts):
        return parts
    return []


def _recover_item_ids(item: dict) -> list[str]:
    stored_id = item.get("_id")
    if isinstance(stored_id, str) and stored_id:
        return [stored_id]

    name_he = _text(item.get("nameHe"))
    name_en = _text(item.get("name"))

    match = find_amenity_by_name(name_he, name_en)
    if match is not None:
        return [match.id]

    for raw_name in (name_he, name_en):
        if raw_name and is_catalog_id(raw_name):
            return [raw_name]

    for raw_name in (name_he, name_en):
        repaired = _split_corrupted_ids(raw_name) if raw_name else []
        if repaired:
            return repaired

    raw_name = name_he or name_en
    if not raw_name:
        return []
    return [f"{CUSTOM_PREFIX}{_he_segment(raw_name)}{CUSTOM_SEPARATOR}{name_en or name_he}"]


def decode_amenities(persisted: Any) -> list[str]:
    ids: list[str] = []
    for item in _iter_items(persisted):
        ids.extend(_recover_item_ids(item))
    return _dedupe(ids)


def encode_amenities(
    ids: Any,
    on_drop: Optional[Callable[[str], None]] = None,
) -> list[dict]:
    if not isinstance(ids, (list, tuple)):
        return []

    items_by_category: dict[str, list[dict]] = {}
    custom_index = 0
    for selection_id in ids:
        if is_custom_id(selection_id):
            name_he, name_en = parse_custom_id(selection_id)
            items_by_category.setdefault(CUSTOM_CATEGORY_ID, []).append(
                {
                    "icon": CUSTOM_FALLBACK_ICONS[custom_index % len(CUSTOM_FALLBACK_ICONS)],
                    "name": name_en or name_he,
                    "nameHe": name_he,
                    "_id": selection_id,
                }
            )
            custom_index += 1
            continue

        amenity = get_amenity(selection_id)
        if amenity is None:
            if on_drop is not None:
                on_drop(str(selection_id))
            continue
        items_by_category.setdefault(amenity.category, []).append(
            {
                "icon": amenity.icon,
                "name": amenity.name_en,
                "nameHe": amenity.name_he,
                "_id": amenity.id,
            }
        )

    output: list[dict] = []
    for category in CATEGORIES:
        items = items_by_category.get(category.id)
        if not items:
            continue
        output.append(
            {
                "category": category.name_he,
                "categoryEn": category.name_en,
                "items": items,
            }
        )
    return output


def repair_amenities(
    persisted: Any,
    on_drop: Optional[Callable[[str], None]] = None,
) -> list[dict] | None:
    ids = decode_amenities(persisted)
    if not ids:
        return None
    return encode_amenities(ids, on_drop=on_drop)


def toggle_selection(ids: list[str], selection_id: str) -> list[str]:
    current = _dedupe(ids or [])
    if selection_id in current:
        return [value for value in current if value != selection_id]
    return [*current, selection_id]


def add_selections(ids: list[str], new_ids: Iterable[str]) -> list[str]:
    return _dedupe([*(ids or []), *new_ids])


def toggle_category(ids: list[str], category_id: str, candidates: Iterable[Any] | None = None) -> list[str]:
    """Select every amenity of a category, or clear them when all are selected.

    ``candidates`` narrows the category to the currently visible (searched)
    definitions; by default the whole catalog is used.
    """
    pool = AMENITIES if candidates is None else candidates
    category_ids = [amenity.id for amenity in pool if amenity.category == category_id]
    current = _dedupe(ids or [])
    if category_ids and all(value in current for value in category_ids):
        return [value for value in current if value not in category_ids]
    return add_selections(current, category_ids)


def count_by_category(ids: Iterable[str]) -> dict[str, int]:
    counts = {category.id: 0 for category in CATEGORIES}
    for selection_id in ids or []:
        if is_custom_id(selection_id):
            counts[CUSTOM_CATEGORY_ID] += 1
            continue
        amenity = get_amenity(selection_id)
        if amenity is not None and get_category(amenity.category) is not None:
            counts[amenity.category] += 1
    return counts


def amenities_to_text(persisted: Any) -> str:
    """Render persisted amenities as one display name per line."""
    names: list[str] = []
    if isinstance(persisted, dict):
        items = persisted.get("items")
        if isinstance(items, list):
            for item in items:
                if isinstance(item, dict):
                    names.append(_text(item.get("name")) or _text(item.get("nameHe")))
    elif isinstance(persisted, list):
        for entry in persisted:
            if isinstance(entry, dict) and isinstance(entry.get("items"), list):
                for item in entry["items"]:
                    if isinstance(item, dict):
                        names.append(_text(item.get("name")) or _text(item.get("nameHe")))
            elif isinstance(entry, dict):
                names.append(_text(entry.get("name")))
            else:
                names.append(_text(entry))
    return "\n".join(name for name in names if name)
