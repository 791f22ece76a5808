from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from retail_planner.db.models.store import Store
from retail_planner.schemas.store import StoreCreate


async def list_stores(db: AsyncSession) -> List[Store]:
    result = await db.execute(select(Store).order_by(Store.id))
    return list(result.scalars().all())


async def get_store(db: AsyncSession, store_id: str) -> Optional[Store]:
    return await db.get(Store, store_id)


async def create_store(db: AsyncSession, store: StoreCreate) -> Optional[Store]:
    """Creates a store. Returns None when the id is already taken."""
    if await db.get(Store, store.id) is not None:
        return None

    db_store = Store(
        id=store.id,
        label=store.label,
        city=store.city,
        state=store.state,
    )
    db.add(db_store)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        return None
    await db.refresh(db_store)
    return db_store


async def delete_store(db: AsyncSession, store_id: str) -> bool:
    """Deletes a store by id. Planning rows that mention it are left alone."""
    db_store = await db.get(Store, store_id)
    if db_store is None:
        return False
    await db.delete(db_store)
    await db.commit()
    return True
