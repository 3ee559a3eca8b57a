from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from tenderhub.core.errors import ValidationError
from tenderhub.core.logging_config import logger
from tenderhub.crud import search as crud
from tenderhub.db.database import get_db
from tenderhub.schemas.common import SearchPagination, ok
from tenderhub.schemas.companies import CompanySummary, GoodsServiceOut
from tenderhub.schemas.search import CompanySearchHit
from tenderhub.schemas.tenders import TenderStatusIn, TenderSummary

router = APIRouter()


@router.get("/companies", summary="Search companies by name, description or goods and services")
async def search_companies(
        q: Optional[str] = Query(None, description="Free text"),
        industry: Optional[str] = Query(None, description="Industry substring"),
        page: int = Query(1, ge=1),
        limit: int = Query(10, ge=1, le=100),
        db: AsyncSession = Depends(get_db)
):
    if not q and not industry:
        raise ValidationError("Search query or industry filter is required")
    logger.info(f"Searching companies: q={q}, industry={industry}, page={page}, limit={limit}")

    companies, has_more = await crud.search_companies(db, q, industry, page, limit)
    hits = []
    for company in companies:
        goods = await crud.get_goods_preview(db, company.id)
        hits.append(CompanySearchHit(
            **CompanySummary.model_validate(company).model_dump(),
            description=company.description,
            goods_services=[GoodsServiceOut.model_validate(g) for g in goods],
        ))
    return ok({
        "companies": hits,
        "pagination": SearchPagination(page=page, limit=limit, has_more=has_more),
    })


@router.get("/tenders", summary="Search tenders by text and owner industry")
async def search_tenders(
        q: Optional[str] = Query(None, description="Free text"),
        industry: Optional[str] = Query(None, description="Industry substring of the owning company"),
        status: Optional[TenderStatusIn] = Query(None, description="Status filter, open when omitted"),
        page: int = Query(1, ge=1),
        limit: int = Query(10, ge=1, le=100),
        db: AsyncSession = Depends(get_db)
):
    logger.info(f"Searching tenders: q={q}, industry={industry}, status={status}, page={page}, limit={limit}")
    tenders, has_more = await crud.search_tenders(db, q, industry, status.value if status else None, page, limit)
    return ok({
        "tenders": [TenderSummary.model_validate(t) for t in tenders],
        "pagination": SearchPagination(page=page, limit=limit, has_more=has_more),
    })


@router.get("/industries", summary="Distinct industries for filter options")
async def get_industries(db: AsyncSession = Depends(get_db)):
    return ok({"industries": await crud.list_industries(db)})


@router.get("/suggestions", summary="Popular categories or recent tender titles")
async def get_suggestions(
        type: Optional[str] = Query(None, description="companies or tenders"),
        db: AsyncSession = Depends(get_db)
):
    if type == "companies":
        suggestions = await crud.top_categories(db)
    else:
        suggestions = await crud.recent_open_titles(db)
    return ok({"suggestions": suggestions})
