from typing import List

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from tenderhub.core.errors import DuplicateApplication, NotFoundOrForbidden
from tenderhub.core.logging_config import logger
from tenderhub.models.applications import Application
from tenderhub.models.tenders import Tender


def _with_parties():
    return (
        selectinload(Application.company),
        selectinload(Application.tender).selectinload(Tender.company),
    )


async def find_application(db: AsyncSession, tender_id, company_id) -> Application | None:
    result = await db.execute(
        select(Application).filter(Application.tender_id == tender_id, Application.company_id == company_id)
    )
    return result.scalars().first()


async def save_application(db: AsyncSession, application: Application) -> Application:
    """Inserts a new application; the unique constraint is the last word on duplicates."""
    db.add(application)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.warning(
            f"Duplicate application from company {application.company_id} to tender {application.tender_id}"
        )
        raise DuplicateApplication()
    await db.refresh(application)
    return application


async def get_application_for_party(db: AsyncSession, application_id, company_id) -> Application:
    """Visible to the applicant and to the owner of the tender."""
    result = await db.execute(
        select(Application)
        .join(Tender, Application.tender_id == Tender.id)
        .options(*_with_parties())
        .filter(Application.id == application_id)
        .filter(or_(Application.company_id == company_id, Tender.company_id == company_id))
    )
    application = result.scalars().first()
    if not application:
        logger.warning(f"Application {application_id} not found or not visible to company {company_id}")
        raise NotFoundOrForbidden("Application not found or access denied")
    return application


async def get_application_for_tender_owner(db: AsyncSession, application_id, company_id) -> Application:
    result = await db.execute(
        select(Application)
        .join(Tender, Application.tender_id == Tender.id)
        .filter(Application.id == application_id, Tender.company_id == company_id)
    )
    application = result.scalars().first()
    if not application:
        logger.warning(f"Application {application_id} not found or tender not owned by company {company_id}")
        raise NotFoundOrForbidden("Application not found or access denied")
    return application


async def list_tender_applications(db: AsyncSession, tender_id) -> List[Application]:
    result = await db.execute(
        select(Application)
        .options(*_with_parties())
        .filter(Application.tender_id == tender_id)
        .order_by(Application.submitted_at.desc(), Application.id)
    )
    return result.scalars().all()


async def list_company_applications(db: AsyncSession, company_id) -> List[Application]:
    result = await db.execute(
        select(Application)
        .options(*_with_parties())
        .filter(Application.company_id == company_id)
        .order_by(Application.submitted_at.desc(), Application.id)
    )
    return result.scalars().all()


async def update_application_status(db: AsyncSession, application: Application, status: str) -> Application:
    application.status = status
    db.add(application)
    await db.commit()
    await db.refresh(application)
    return application
