# directus_sync/routes/medusa_events.py
import json
from flask import Blueprint, current_app

from ..models import UnknownEventError, parse_event
from ..utils.security import verify_webhook_hmac
from ..utils.logger import info, warn

bp = Blueprint("medusa_events", __name__)


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

    name = body.get("name")
    try:
        event = parse_event(name, body.get("data"))
    except UnknownEventError:
        warn(f"[Medusa] unhandled event: {name}")
        return "Ignored", 200
    except ValueError as e:
        return {"error": str(e)}, 400

    info(f"[Medusa] {event.name} webhook received. PID={event.product_id}")
    result = ext["service"].handle_event(event)
    return {"event": event.name, "id": event.product_id, "result": result.value}, 200
