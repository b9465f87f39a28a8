import base64, hashlib, hmac
from flask import request, abort

SIGNATURE_HEADER = "X-Webhook-Hmac-Sha256"

def verify_webhook_hmac(secret: str | None, header: str = SIGNATURE_HEADER) -> bytes:
    """Check the base64 HMAC-SHA256 of the raw body. No secret configured means no check."""
    raw = request.get_data()
    if not secret:
        return raw
    their_hmac = request.headers.get(header, "")
    digest = hmac.new(secret.encode(), raw, hashlib.sha256).digest()
    if not hmac.compare_digest(base64.b64encode(digest).decode(), their_hmac):
        abort(401)
    return raw

def sign(secret: str, raw: bytes) -> str:
    return base64.b64encode(hmac.new(secret.encode(), raw, hashlib.sha256).digest()).decode()
