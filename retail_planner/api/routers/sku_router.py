from typing import List
import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from retail_planner.crud import sku as sku_crud
from retail_planner.db.base import get_db
from retail_planner.db.models.sku import Sku as SkuModel
from retail_planner.schemas.sku import Sku, SkuCreate

logger = logging.getLogger(__name__)

router = APIRouter()


def to_schema(model: SkuModel) -> Sku:
    return Sku(
        id=model.id,
        label=model.label,
        sku_class=model.sku_class,
        department=model.department,
        price=model.price,
        cost=model.cost,
    )


@router.get("/skus", response_model=List[Sku])
async def read_skus(db: AsyncSession = Depends(get_db)):
    """
    List every SKU. Filtering and paging happen in the dashboard.
    """
    return [to_schema(sku) for sku in await sku_crud.list_skus(db)]


@router.post("/skus", response_model=Sku, status_code=status.HTTP_201_CREATED)
async def create_sku(sku: SkuCreate, db: AsyncSession = Depends(get_db)):
    db_sku = await sku_crud.create_sku(db, sku)
    if db_sku is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"SKU {sku.id} already exists"
        )
    logger.info(f"Created SKU {db_sku.id}")
    return to_schema(db_sku)


@router.delete("/skus/{sku_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_sku(sku_id: str, db: AsyncSession = Depends(get_db)):
    if not await sku_crud.delete_sku(db, sku_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="SKU not found")
    logger.info(f"Deleted SKU {sku_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
