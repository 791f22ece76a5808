from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from retail_planner.db.models.calculation import Calculation
from retail_planner.db.models.calendar import Calendar
from retail_planner.db.models.chart import Chart
from retail_planner.db.models.planning import Planning


async def list_planning_rows(db: AsyncSession, store_id: str) -> List[Planning]:
    """All planning rows for a store, by week then SKU.

    Rows are matched on the store id value; an unknown store simply has none.
    """
    stmt = (
        select(Planning)
        .where(Planning.store_id == store_id)
        .order_by(Planning.week, Planning.sku_id)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def list_calculations(db: AsyncSession, store_id: str) -> List[Calculation]:
    stmt = (
        select(Calculation)
        .where(Calculation.store_id == store_id)
        .order_by(Calculation.week, Calculation.sku_id)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def list_calendar(db: AsyncSession) -> List[Calendar]:
    result = await db.execute(select(Calendar).order_by(Calendar.id))
    return list(result.scalars().all())


async def list_chart_points(db: AsyncSession) -> List[Chart]:
    result = await db.execute(select(Chart).order_by(Chart.week))
    return list(result.scalars().all())
