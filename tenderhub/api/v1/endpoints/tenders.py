from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from tenderhub.api.deps import AuthSession, require_company
from tenderhub.core.errors import NotFoundOrForbidden
from tenderhub.core.logging_config import logger
from tenderhub.crud.tenders import count_applications, get_tender_by_id, list_company_tenders, list_tenders
from tenderhub.db.database import get_db
from tenderhub.schemas.common import Pagination, ok
from tenderhub.schemas.tenders import TenderCreate, TenderDetail, TenderOut, TenderStatusIn, TenderSummary, TenderUpdate
from tenderhub.services import tender_service

router = APIRouter()


@router.get("/", summary="Public tender listing")
async def get_tenders(
        page: int = Query(1, ge=1, description="Page number"),
        limit: int = Query(10, ge=1, le=100, description="Records per page"),
        status: Optional[TenderStatusIn] = Query(None, description="Status filter, open when omitted"),
        search: Optional[str] = Query(None, description="Substring of title or description"),
        db: AsyncSession = Depends(get_db)
):
    logger.info(f"Fetching tenders list: page={page}, limit={limit}, status={status}, search={search}")
    tenders, total = await list_tenders(db, page, limit, status.value if status else None, search)
    return ok({
        "tenders": [TenderSummary.model_validate(t) for t in tenders],
        "pagination": Pagination.build(page, limit, total),
    })


@router.get("/company/mine", summary="Tenders of the caller's company")
async def get_my_tenders(
        session: AuthSession = Depends(require_company),
        db: AsyncSession = Depends(get_db)
):
    tenders = await list_company_tenders(db, session.company_id)
    return ok({"tenders": [TenderOut.model_validate(t) for t in tenders]})


@router.get("/{tender_id}", summary="Tender details with application count")
async def get_tender_detail(tender_id: UUID, db: AsyncSession = Depends(get_db)):
    tender = await get_tender_by_id(db, tender_id)
    if not tender:
        raise NotFoundOrForbidden("Tender not found")
    detail = TenderDetail.model_validate(tender)
    detail.application_count = await count_applications(db, tender_id)
    return ok({"tender": detail})


@router.post("/", status_code=201, summary="Create a tender")
async def create_tender(
        data: TenderCreate,
        session: AuthSession = Depends(require_company),
        db: AsyncSession = Depends(get_db)
):
    tender = await tender_service.create_tender(db, session.company_id, data)
    return ok({"tender": TenderOut.model_validate(tender)})


@router.put("/{tender_id}", summary="Update a tender owned by the caller")
async def update_tender(
        tender_id: UUID,
        data: TenderUpdate,
        session: AuthSession = Depends(require_company),
        db: AsyncSession = Depends(get_db)
):
    tender = await tender_service.update_tender(db, tender_id, session.company_id, data)
    return ok({"tender": TenderOut.model_validate(tender)})
