from pathlib import Path
from typing import Protocol

class AttachmentStore(Protocol):
    def save(self, driver_id: int, kind: str, data: bytes) -> Path: ...
    def path(self, driver_id: int, kind: str) -> Path | None: ...
    def delete_all(self, driver_id: int) -> None: ...
