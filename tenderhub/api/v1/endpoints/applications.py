from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tenderhub.api.deps import AuthSession, require_company
from tenderhub.crud.applications import (
    get_application_for_party,
    list_company_applications,
    list_tender_applications,
)
from tenderhub.crud.tenders import get_owned_tender
from tenderhub.db.database import get_db
from tenderhub.schemas.applications import ApplicationCreate, ApplicationDetail, ApplicationOut, ApplicationStatusUpdate
from tenderhub.schemas.common import ok
from tenderhub.services import application_service

router = APIRouter()


@router.post("/", status_code=201, summary="Submit an application to an open tender")
async def create_application(
        data: ApplicationCreate,
        session: AuthSession = Depends(require_company),
        db: AsyncSession = Depends(get_db)
):
    application = await application_service.submit_application(db, session.company_id, data)
    return ok({"application": ApplicationOut.model_validate(application)})


@router.get("/tender/{tender_id}", summary="Applications received by a tender of the caller")
async def get_tender_applications(
        tender_id: UUID,
        session: AuthSession = Depends(require_company),
        db: AsyncSession = Depends(get_db)
):
    await get_owned_tender(db, tender_id, session.company_id)
    applications = await list_tender_applications(db, tender_id)
    return ok({"applications": [ApplicationDetail.model_validate(a) for a in applications]})


@router.get("/company/mine", summary="Applications submitted by the caller's company")
async def get_my_applications(
        session: AuthSession = Depends(require_company),
        db: AsyncSession = Depends(get_db)
):
    applications = await list_company_applications(db, session.company_id)
    return ok({"applications": [ApplicationDetail.model_validate(a) for a in applications]})


@router.patch("/{application_id}/status", summary="Move an application through its review workflow")
async def update_application_status(
        application_id: UUID,
        data: ApplicationStatusUpdate,
        session: AuthSession = Depends(require_company),
        db: AsyncSession = Depends(get_db)
):
    application = await application_service.change_status(db, application_id, session.company_id, data.status)
    return ok({"application": ApplicationOut.model_validate(application)})


@router.get("/{application_id}", summary="Application details for the applicant or the tender owner")
async def get_application(
        application_id: UUID,
        session: AuthSession = Depends(require_company),
        db: AsyncSession = Depends(get_db)
):
    application = await get_application_for_party(db, application_id, session.company_id)
    return ok({"application": ApplicationDetail.model_validate(application)})
