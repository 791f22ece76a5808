from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from retail_planner.crud import planning as planning_crud
from retail_planner.db.base import get_db
from retail_planner.schemas.calendar import CalendarWeek
from retail_planner.schemas.planning import CalculationRow, ChartPoint, PlanningRow

router = APIRouter()


@router.get("/planning/{store_id}", response_model=List[PlanningRow])
async def read_planning(store_id: str, db: AsyncSession = Depends(get_db)):
    """
    Planning rows for one store, passed through without aggregation.
    """
    rows = await planning_crud.list_planning_rows(db, store_id)
    return [
        PlanningRow(
            store_id=row.store_id,
            sku_id=row.sku_id,
            week=row.week,
            sales_units=row.sales_units,
        ) for row in rows
    ]


@router.get("/calculations/{store_id}", response_model=List[CalculationRow])
async def read_calculations(store_id: str, db: AsyncSession = Depends(get_db)):
    rows = await planning_crud.list_calculations(db, store_id)
    return [
        CalculationRow(
            store_id=row.store_id,
            sku_id=row.sku_id,
            week=row.week,
            sales_units=row.sales_units,
            sales_dollars=row.sales_dollars,
            cost_dollars=row.cost_dollars,
            gm_dollars=row.gm_dollars,
            gm_percent=row.gm_percent,
        ) for row in rows
    ]


@router.get("/calendar", response_model=List[CalendarWeek])
async def read_calendar(db: AsyncSession = Depends(get_db)):
    weeks = await planning_crud.list_calendar(db)
    return [
        CalendarWeek(
            id=week.id,
            week=week.week,
            week_label=week.week_label,
            month=week.month,
            month_label=week.month_label,
        ) for week in weeks
    ]


@router.get("/charts", response_model=List[ChartPoint])
async def read_charts(db: AsyncSession = Depends(get_db)):
    """
    Week by week GM and sales totals, precomputed upstream.
    """
    points = await planning_crud.list_chart_points(db)
    return [
        ChartPoint(
            week=point.week,
            gm_dollars=point.gm_dollars,
            sales_dollars=point.sales_dollars,
            gm_percent=point.gm_percent,
        ) for point in points
    ]
