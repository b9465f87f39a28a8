# directus_sync/services/mapper.py

def _first(items):
    return (items or [None])[0] or {}

def map_product_data(product: dict) -> dict:
    """Project a Medusa product onto the Directus products collection shape."""
    product = product or {}
    variant = _first(product.get("variants"))
    price = _first(variant.get("prices"))
    meta = product.get("metadata") or {}

    return {
        "name": product.get("title"),
        "description": product.get("description"),
        "price": price.get("amount") or 0,
        "slug": product.get("handle"),
        "sku": variant.get("sku") or "",
        "medusa_reference_id": product.get("id"),
        "date_updated": product.get("updated_at"),
        "metadata": {
            "syncId": meta.get("syncId"),
            "syncSource": meta.get("syncSource"),
            "lastSyncedAt": meta.get("lastSyncedAt"),
        },
    }

def map_directus_to_medusa(item: dict) -> dict:
    # only the editorial fields; prices and variants stay owned by Medusa
    item = item or {}
    fields = {
        "title": item.get("name"),
        "description": item.get("description"),
        "handle": item.get("slug"),
    }
    return {k: v for k, v in fields.items() if v is not None}
