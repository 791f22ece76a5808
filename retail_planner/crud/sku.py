from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from retail_planner.db.models.sku import Sku
from retail_planner.schemas.sku import SkuCreate


async def list_skus(db: AsyncSession) -> List[Sku]:
    result = await db.execute(select(Sku).order_by(Sku.id))
    return list(result.scalars().all())


async def create_sku(db: AsyncSession, sku: SkuCreate) -> Optional[Sku]:
    """Creates a SKU. Returns None when the id is already taken."""
    if await db.get(Sku, sku.id) is not None:
        return None

    db_sku = Sku(
        id=sku.id,
        label=sku.label,
        sku_class=sku.sku_class,
        department=sku.department,
        price=float(sku.price),
        cost=float(sku.cost),
    )
    db.add(db_sku)
    try:
        await db.commit()
    except IntegrityError:
        # Another request inserted the same id after our check
        await db.rollback()
        return None
    await db.refresh(db_sku)
    return db_sku


async def delete_sku(db: AsyncSession, sku_id: str) -> bool:
    db_sku = await db.get(Sku, sku_id)
    if db_sku is None:
        return False
    await db.delete(db_sku)
    await db.commit()
    return True
