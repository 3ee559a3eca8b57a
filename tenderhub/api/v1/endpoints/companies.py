from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from tenderhub.api.deps import AuthSession, require_company
from tenderhub.core.errors import NotFoundOrForbidden
from tenderhub.core.logging_config import logger
from tenderhub.crud import companies as crud
from tenderhub.db.database import get_db
from tenderhub.schemas.common import Pagination, ok
from tenderhub.schemas.companies import (
    CompanyDetail,
    CompanyOut,
    CompanyUpdate,
    GoodsServiceCreate,
    GoodsServiceOut,
    GoodsServiceUpdate,
)

router = APIRouter()


@router.get("/", summary="Company directory")
async def get_companies(
        page: int = Query(1, ge=1, description="Page number"),
        limit: int = Query(10, ge=1, le=100, description="Records per page"),
        search: Optional[str] = Query(None, description="Substring of the company name"),
        industry: Optional[str] = Query(None, description="Exact industry"),
        db: AsyncSession = Depends(get_db)
):
    logger.info(f"Fetching companies list: page={page}, limit={limit}, search={search}, industry={industry}")
    companies, total = await crud.list_companies(db, page, limit, search, industry)
    return ok({
        "companies": [CompanyOut.model_validate(c) for c in companies],
        "pagination": Pagination.build(page, limit, total),
    })


@router.put("/profile", summary="Update the caller's company profile")
async def update_profile(
        data: CompanyUpdate,
        session: AuthSession = Depends(require_company),
        db: AsyncSession = Depends(get_db)
):
    company = await crud.get_company_by_id(db, session.company_id)
    company = await crud.update_company(db, company, data.model_dump(exclude_unset=True))
    return ok({"company": CompanyOut.model_validate(company)})


@router.post("/goods-services", status_code=201, summary="List a good or service for the caller's company")
async def create_goods_service(
        data: GoodsServiceCreate,
        session: AuthSession = Depends(require_company),
        db: AsyncSession = Depends(get_db)
):
    item = await crud.create_goods_service(db, session.company_id, data.model_dump())
    return ok({"goods_service": GoodsServiceOut.model_validate(item)})


@router.put("/goods-services/{item_id}", summary="Update a good or service of the caller's company")
async def update_goods_service(
        item_id: UUID,
        data: GoodsServiceUpdate,
        session: AuthSession = Depends(require_company),
        db: AsyncSession = Depends(get_db)
):
    item = await crud.get_owned_goods_service(db, item_id, session.company_id)
    item = await crud.update_goods_service(db, item, data.model_dump(exclude_unset=True))
    return ok({"goods_service": GoodsServiceOut.model_validate(item)})


@router.delete("/goods-services/{item_id}", summary="Remove a good or service of the caller's company")
async def delete_goods_service(
        item_id: UUID,
        session: AuthSession = Depends(require_company),
        db: AsyncSession = Depends(get_db)
):
    item = await crud.get_owned_goods_service(db, item_id, session.company_id)
    await crud.delete_goods_service(db, item)
    return ok({"message": "Goods or service deleted"})


@router.get("/{company_id}", summary="Company profile with its goods and services")
async def get_company(company_id: UUID, db: AsyncSession = Depends(get_db)):
    company = await crud.get_company_by_id(db, company_id, with_goods=True)
    if not company:
        raise NotFoundOrForbidden("Company not found")
    return ok({"company": CompanyDetail.model_validate(company)})
