# directus_sync/services/sync.py
from enum import Enum

from ..clients.directus import DirectusClient
from ..clients.medusa import MedusaClient
from ..models import ProductCreated, ProductDeleted, ProductEvent, ProductUpdated, SyncSource
from ..utils.logger import debug, info, warn, error
from .loop_guard import SYNC_THRESHOLD_MS, generate_sync_metadata, is_external_sync
from .mapper import map_directus_to_medusa, map_product_data


class SyncResult(str, Enum):
    SYNCED = "synced"
    SKIPPED = "skipped"
    FAILED = "failed"


M2D = "[Medusa ➝ Directus]"
D2M = "[Directus ➝ Medusa]"


class ProductSyncService:
    """
    Mirrors Medusa product events into Directus, and Directus item edits
    back into Medusa. Each event is handled once, synchronously; a failed
    sync is logged and dropped.
    """

    def __init__(self, medusa: MedusaClient, directus: DirectusClient,
                 threshold_ms: int = SYNC_THRESHOLD_MS):
        self.medusa = medusa
        self.directus = directus
        self.threshold_ms = threshold_ms

    def _echo(self, record, origin: SyncSource) -> bool:
        return is_external_sync(record, origin=origin, threshold_ms=self.threshold_ms)

    # =========================================================
    # Medusa -> Directus
    # =========================================================

    def handle_event(self, event: ProductEvent) -> SyncResult:
        pid = event.product_id
        try:
            if isinstance(event, ProductCreated):
                return self._on_created(pid)
            if isinstance(event, ProductUpdated):
                return self._on_updated(pid)
            if isinstance(event, ProductDeleted):
                return self._on_deleted(event)
            warn(f"{M2D} unhandled event type {type(event).__name__}")
            return SyncResult.SKIPPED
        except Exception as e:
            error(f"{M2D} error handling event {event.name} PID={pid}: {e}", exc_info=True)
            return SyncResult.FAILED

    def _on_created(self, pid: str) -> SyncResult:
        product = self.medusa.retrieve_product(pid)
        info(f"{M2D} product created PID={pid}")
        if self._echo(product, SyncSource.DIRECTUS):
            info(f"{M2D} skipping sync, product created from Directus PID={pid}")
            return SyncResult.SKIPPED

        data = {
            **map_product_data(product),
            "metadata": generate_sync_metadata(SyncSource.MEDUSA).to_dict(),
            "medusa_reference_id": pid,
        }
        self.directus.create_product(data)
        info(f"{M2D} product synced to Directus PID={pid}")
        return SyncResult.SYNCED

    def _on_updated(self, pid: str) -> SyncResult:
        product = self.medusa.retrieve_product(pid)
        info(f"{M2D} product updated PID={pid}")
        if self._echo(product, SyncSource.DIRECTUS):
            info(f"{M2D} skipping sync, product updated from Directus PID={pid}")
            return SyncResult.SKIPPED

        data = {
            **map_product_data(product),
            "metadata": generate_sync_metadata(SyncSource.MEDUSA).to_dict(),
        }
        self.directus.update_product(pid, data)
        info(f"{M2D} product updated in Directus PID={pid}")
        return SyncResult.SYNCED

    def _on_deleted(self, event: ProductDeleted) -> SyncResult:
        pid = event.product_id
        if self._echo(event.as_payload(), SyncSource.DIRECTUS):
            info(f"{M2D} skipping sync, product deleted from Directus PID={pid}")
            return SyncResult.SKIPPED

        self.directus.delete_product(pid)
        info(f"{M2D} product deleted from Directus PID={pid}")
        return SyncResult.SYNCED

    # =========================================================
    # Directus -> Medusa
    # =========================================================

    def handle_directus_item(self, action: str, key) -> SyncResult:
        """Propagate one Directus item change. Only updates travel back to Medusa."""
        if action != "update":
            info(f"{D2M} '{action}' not propagated for item {key}. Skip.")
            return SyncResult.SKIPPED

        try:
            item = self.directus.get_product(key)
            if not item:
                warn(f"{D2M} item {key} not found")
                return SyncResult.SKIPPED

            pid = item.get("medusa_reference_id")
            if not pid:
                debug(f"{D2M} item {key} has no medusa_reference_id. Skip.")
                return SyncResult.SKIPPED

            if self._echo(item, SyncSource.MEDUSA):
                info(f"{D2M} skipping sync, item {key} written by Medusa sync PID={pid}")
                return SyncResult.SKIPPED

            data = {
                **map_directus_to_medusa(item),
                "metadata": generate_sync_metadata(SyncSource.DIRECTUS).to_dict(),
            }
            self.medusa.update_product(pid, data)
            info(f"{D2M} item {key} synced to Medusa PID={pid}")
            return SyncResult.SYNCED
        except Exception as e:
            error(f"{D2M} error handling item {key}: {e}", exc_info=True)
            return SyncResult.FAILED
