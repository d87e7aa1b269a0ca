from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Sequence, Optional, Mapping, Any
from fleet.domain.entities.driver import Driver

class SQLDriverRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, *, fields: Mapping[str, Any]) -> Driver:
        obj = Driver(**fields)
        self.session.add(obj)
        await self.session.commit()
        await self.session.refresh(obj)
        return obj

    async def get(self, driver_id: int) -> Optional[Driver]:
        res = await self.session.execute(select(Driver).where(Driver.id == driver_id))
        return res.scalar_one_or_none()

    async def list(self) -> Sequence[Driver]:
        res = await self.session.execute(select(Driver).order_by(Driver.id))
        return list(res.scalars().all())

    async def replace(self, driver_id: int, *, fields: Mapping[str, Any]) -> Optional[Driver]:
        res = await self.session.execute(update(Driver).where(Driver.id == driver_id).values(**fields))
        await self.session.commit()
        if res.rowcount == 0:
            return None
        return await self._fresh(driver_id)

    async def delete(self, driver_id: int) -> bool:
        res = await self.session.execute(delete(Driver).where(Driver.id == driver_id))
        await self.session.commit()
        return res.rowcount > 0

    async def set_columns(self, driver_id: int, **values: Any) -> Optional[Driver]:
        res = await self.session.execute(update(Driver).where(Driver.id == driver_id).values(**values))
        await self.session.commit()
        if res.rowcount == 0:
            return None
        return await self._fresh(driver_id)

    async def _fresh(self, driver_id: int) -> Optional[Driver]:
        # bulk UPDATE leaves identity-map copies stale
        res = await self.session.execute(
            select(Driver).where(Driver.id == driver_id).execution_options(populate_existing=True)
        )
        return res.scalar_one_or_none()
