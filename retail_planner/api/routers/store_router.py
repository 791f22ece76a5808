from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from retail_planner.crud import store as store_crud
from retail_planner.db.base import get_db
from retail_planner.db.models.store import Store as StoreModel
from retail_planner.schemas.store import Store, StoreCreate

router = APIRouter()


def to_schema(model: StoreModel) -> Store:
    return Store(id=model.id, label=model.label, city=model.city, state=model.state)


@router.get("/stores", response_model=List[Store])
async def read_stores(db: AsyncSession = Depends(get_db)):
    """
    List every store.
    """
    return [to_schema(store) for store in await store_crud.list_stores(db)]


@router.get("/stores/{store_id}", response_model=Store)
async def read_store(store_id: str, db: AsyncSession = Depends(get_db)):
    store = await store_crud.get_store(db, store_id)
    if store is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Store not found")
    return to_schema(store)


@router.post("/stores", response_model=Store, status_code=status.HTTP_201_CREATED)
async def create_store(store: StoreCreate, db: AsyncSession = Depends(get_db)):
    db_store = await store_crud.create_store(db, store)
    if db_store is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Store {store.id} already exists"
        )
    return to_schema(db_store)


@router.delete("/stores/{store_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_store(store_id: str, db: AsyncSession = Depends(get_db)):
    if not await store_crud.delete_store(db, store_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Store not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
