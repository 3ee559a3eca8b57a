from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from tenderhub.core.errors import DeadlinePassed, DuplicateApplication, NotFoundOrForbidden, TenderNotOpen
from tenderhub.core.logging_config import logger
from tenderhub.crud.applications import (
    find_application,
    get_application_for_tender_owner,
    save_application,
    update_application_status,
)
from tenderhub.crud.tenders import get_tender_by_id
from tenderhub.models.applications import Application
from tenderhub.models.base import ensure_utc
from tenderhub.models.enums import ApplicationStatus, TenderStatus
from tenderhub.schemas.applications import ApplicationCreate
from tenderhub.services.application_state_machine import ApplicationStateMachine


async def submit_application(db: AsyncSession, company_id, data: ApplicationCreate) -> Application:
    tender = await get_tender_by_id(db, data.tender_id)
    if not tender:
        raise NotFoundOrForbidden("Tender not found")
    if tender.status != TenderStatus.OPEN.value:
        logger.warning(f"Company {company_id} applied to tender {tender.id} in state {tender.status}")
        raise TenderNotOpen()
    if ensure_utc(tender.deadline) < datetime.now(timezone.utc):
        logger.warning(f"Company {company_id} applied to tender {tender.id} after its deadline")
        raise DeadlinePassed()
    if await find_application(db, tender.id, company_id):
        logger.warning(f"Company {company_id} already applied to tender {tender.id}")
        raise DuplicateApplication()

    application = await save_application(
        db,
        Application(
            tender_id=tender.id,
            company_id=company_id,
            proposal=data.proposal,
            quoted_price=data.quoted_price,
            currency=data.currency,
            attachments=data.attachments,
            status=ApplicationStatus.SUBMITTED.value,
        ),
    )
    logger.info(f"Company {company_id} submitted application {application.id} to tender {tender.id}")
    return application


async def change_status(db: AsyncSession, application_id, company_id, status: ApplicationStatus) -> Application:
    """Only the organization that owns the parent tender may move an application."""
    application = await get_application_for_tender_owner(db, application_id, company_id)
    sm = ApplicationStateMachine(application.id, application.status)
    new_status = await sm.advance(status.value)
    return await update_application_status(db, application, new_status)
