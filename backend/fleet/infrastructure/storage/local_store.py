from __future__ import annotations

import shutil
from pathlib import Path

import structlog

log = structlog.get_logger(__name__)

PHOTO = "photo"
CNH_PDF = "cnh-pdf"


class LocalAttachmentStore:
    """Keeps driver attachments on disk as ``<root>/drivers/<id>/<kind>``."""

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def _dir(self, driver_id: int) -> Path:
        return self.root / "drivers" / str(driver_id)

    def save(self, driver_id: int, kind: str, data: bytes) -> Path:
        target = self._dir(driver_id) / kind
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
        log.info("attachment.stored", driver_id=driver_id, kind=kind, size=len(data))
        return target

    def path(self, driver_id: int, kind: str) -> Path | None:
        target = self._dir(driver_id) / kind
        return target if target.is_file() else None

    def delete_all(self, driver_id: int) -> None:
        d = self._dir(driver_id)
        if d.exists():
            shutil.rmtree(d)
            log.info("attachment.purged", driver_id=driver_id)
