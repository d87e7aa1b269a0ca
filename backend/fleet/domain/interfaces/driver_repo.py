from typing import Protocol, Sequence, Optional, Mapping, Any
from fleet.domain.entities.driver import Driver

class DriverRepository(Protocol):
    async def create(self, *, fields: Mapping[str, Any]) -> Driver: ...
    async def get(self, driver_id: int) -> Optional[Driver]: ...
    async def list(self) -> Sequence[Driver]: ...
    async def replace(self, driver_id: int, *, fields: Mapping[str, Any]) -> Optional[Driver]: ...
    async def delete(self, driver_id: int) -> bool: ...
    async def set_columns(self, driver_id: int, **values: Any) -> Optional[Driver]: ...
