# directus_sync/routes/directus_events.py
import json
from flask import Blueprint, current_app

from ..utils.security import verify_webhook_hmac
from ..utils.logger import info

bp = Blueprint("directus_events", __name__)


def _split_event(event: str) -> tuple[str, str]:
    # "products.items.update" -> ("products", "update")
    parts = (event or "").split(".")
    if len(parts) == 3 and parts[1] == "items":
        return parts[0], parts[2]
    return "", ""


@bp.post("/events")
def events():
    ext = current_app.extensions["directus_sync"]
    raw = verify_webhook_hmac(ext["webhook_secret"])
    try:
        body = json.loads(raw.decode("utf-8")) if raw else {}
    except ValueError:
        return {"error": "invalid JSON"}, 400
    if not isinstance(body, dict):
        return {"error": "body must be a JSON object"}, 400

    event = body.get("event")
    if event is not None and not isinstance(event, str):
        return {"error": "event must be a string"}, 400

    collection, action = _split_event(event)
    if not collection:
        collection, action = body.get("collection"), (event or "").split(".")[-1]
    if collection != ext["collection"]:
        return "Ignored", 200

    keys = body.get("keys")
    if keys is None:
        keys = [body["key"]] if body.get("key") is not None else []
    if not isinstance(keys, (list, tuple)):
        return {"error": "keys must be a list"}, 400
    if not keys:
        return {"error": "no item keys"}, 400
    if any(isinstance(k, bool) or not isinstance(k, (str, int)) for k in keys):
        return {"error": "keys must be strings or integers"}, 400

    info(f"[Directus] {collection}.items.{action} webhook received. keys={keys}")
    service = ext["service"]
    results = {str(k): service.handle_directus_item(action, k).value for k in keys}
    return {"event": f"{collection}.items.{action}", "results": results}, 200
