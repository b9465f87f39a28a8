# directus_sync/services/loop_guard.py
import random
import string
from datetime import datetime, timezone
from typing import Optional

from ..models import SyncMetadata, SyncSource
from ..utils.logger import info, warn

SYNC_THRESHOLD_MS = 10000

_TOKEN_ALPHABET = string.digits + string.ascii_lowercase

# =========================================================
# Stamping
# =========================================================

def _iso_now(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def _sync_token(length: int = 6) -> str:
    return "".join(random.choice(_TOKEN_ALPHABET) for _ in range(length))

def generate_sync_metadata(source: SyncSource = SyncSource.MEDUSA,
                           now: Optional[datetime] = None) -> SyncMetadata:
    return SyncMetadata(last_synced_at=_iso_now(now), sync_source=source, sync_id=_sync_token())

# =========================================================
# Echo detection
# =========================================================

def parse_timestamp(value: str) -> Optional[datetime]:
    try:
        ts = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts

def is_external_sync(record: Optional[dict],
                     origin: SyncSource = SyncSource.DIRECTUS,
                     threshold_ms: int = SYNC_THRESHOLD_MS,
                     now: Optional[datetime] = None) -> bool:
    """
    True when `record` was written by a sync from `origin` less than
    `threshold_ms` ago, i.e. the event is an echo of our own push.

    Works for fetched records and for flat delete payloads alike: both keep
    the stamp under a top-level "metadata" key, which may be absent.
    No clock skew compensation; the comparison uses this process's clock.
    """
    if not isinstance(record, dict):
        return False
    raw = record.get("metadata")
    if not isinstance(raw, dict) or not raw.get("lastSyncedAt"):
        return False

    meta = SyncMetadata.from_dict(raw)
    synced_at = parse_timestamp(meta.last_synced_at)
    if synced_at is None:
        warn(f"[loop-guard] unparseable lastSyncedAt {meta.last_synced_at!r}, treating as unsynced")
        return False

    now = now or datetime.now(timezone.utc)
    elapsed_ms = (now - synced_at).total_seconds() * 1000
    info(f"[loop-guard] time since last sync: {int(elapsed_ms)}ms (source={raw.get('syncSource')})")

    return meta.sync_source == origin and elapsed_ms < threshold_ms
