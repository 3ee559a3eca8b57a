from typing import List

from sqlalchemy import func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from tenderhub.core.errors import NotFoundOrForbidden
from tenderhub.core.logging_config import logger
from tenderhub.models.applications import Application
from tenderhub.models.enums import TenderStatus
from tenderhub.models.tenders import Tender


async def get_tender_by_id(db: AsyncSession, tender_id) -> Tender | None:
    """Fetches a tender with its owning company preloaded."""
    result = await db.execute(
        select(Tender).options(selectinload(Tender.company)).filter(Tender.id == tender_id)
    )
    tender = result.scalars().first()
    if not tender:
        logger.warning(f"Tender {tender_id} not found")
    return tender


async def get_owned_tender(db: AsyncSession, tender_id, company_id) -> Tender:
    """Same 404 whether the tender is missing or belongs to someone else."""
    result = await db.execute(
        select(Tender)
        .options(selectinload(Tender.company))
        .filter(Tender.id == tender_id, Tender.company_id == company_id)
    )
    tender = result.scalars().first()
    if not tender:
        logger.warning(f"Tender {tender_id} not found or not owned by company {company_id}")
        raise NotFoundOrForbidden("Tender not found or access denied")
    return tender


async def count_applications(db: AsyncSession, tender_id) -> int:
    result = await db.execute(
        select(func.count(Application.id)).filter(Application.tender_id == tender_id)
    )
    return result.scalar() or 0


async def list_tenders(
    db: AsyncSession,
    page: int,
    limit: int,
    status: str | None = None,
    search: str | None = None,
) -> tuple[List[Tender], int]:
    query = select(Tender).where(Tender.status == (status or TenderStatus.OPEN.value))
    if search:
        query = query.where(
            or_(Tender.title.ilike(f"%{search}%"), Tender.description.ilike(f"%{search}%"))
        )

    total_query = select(func.count()).select_from(query.subquery())
    total = (await db.execute(total_query)).scalar()

    query = (
        query.options(selectinload(Tender.company))
        .order_by(Tender.deadline.asc(), Tender.id)
        .offset((page - 1) * limit)
        .limit(limit)
    )
    result = await db.execute(query)
    return result.scalars().all(), total


async def list_company_tenders(db: AsyncSession, company_id) -> List[Tender]:
    result = await db.execute(
        select(Tender)
        .options(selectinload(Tender.company))
        .filter(Tender.company_id == company_id)
        .order_by(Tender.created_at.desc(), Tender.id)
    )
    return result.scalars().all()


async def save_tender(db: AsyncSession, tender: Tender) -> Tender:
    db.add(tender)
    await db.commit()
    await db.refresh(tender)
    await db.refresh(tender, ["company"])
    return tender
