"""
Sync metadata and the inbound commerce event types.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class SyncSource(str, Enum):
    MEDUSA = "medusa"
    DIRECTUS = "directus"


@dataclass
class SyncMetadata:
    """Provenance stamp written on every record pushed across systems."""
    last_synced_at: Optional[str] = None
    sync_source: Optional[SyncSource] = None
    sync_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "SyncMetadata":
        data = data or {}
        source = data.get("syncSource")
        try:
            source = SyncSource(source) if source else None
        except ValueError:
            source = None
        return cls(
            last_synced_at=data.get("lastSyncedAt"),
            sync_source=source,
            sync_id=data.get("syncId"),
        )

    def to_dict(self) -> dict:
        return {
            "lastSyncedAt": self.last_synced_at,
            "syncSource": self.sync_source.value if self.sync_source else None,
            "syncId": self.sync_id,
        }


# =========================================================
# Commerce events
# =========================================================

class UnknownEventError(ValueError):
    pass


@dataclass(frozen=True)
class ProductCreated:
    product_id: str
    name = "product.created"


@dataclass(frozen=True)
class ProductUpdated:
    product_id: str
    name = "product.updated"


@dataclass(frozen=True)
class ProductDeleted:
    product_id: str
    # deletes carry the raw event payload, not a fetched record
    metadata: Optional[dict] = field(default=None)
    name = "product.deleted"

    def as_payload(self) -> dict:
        return {"id": self.product_id, "metadata": self.metadata}


ProductEvent = Union[ProductCreated, ProductUpdated, ProductDeleted]

EVENT_TYPES = {cls.name: cls for cls in (ProductCreated, ProductUpdated, ProductDeleted)}


def parse_event(name: str, data: Optional[dict]) -> ProductEvent:
    if not isinstance(name, str):
        raise ValueError(f"Event name must be a string, got {type(name).__name__}")
    cls = EVENT_TYPES.get(name)
    if cls is None:
        raise UnknownEventError(f"Unhandled event: {name}")
    data = data if data is not None else {}
    if not isinstance(data, dict):
        raise ValueError(f"Event {name} data must be an object")
    pid = data.get("id")
    if not pid:
        raise ValueError(f"Event {name} has no product id")
    if cls is ProductDeleted:
        metadata = data.get("metadata")
        return ProductDeleted(str(pid), metadata if isinstance(metadata, dict) else None)
    return cls(str(pid))
