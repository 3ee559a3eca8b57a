from typing import List

from sqlalchemy import func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from tenderhub.models.companies import Company
from tenderhub.models.enums import TenderStatus
from tenderhub.models.goods_services import GoodsService
from tenderhub.models.tenders import Tender

GOODS_PER_COMPANY = 5
SUGGESTION_LIMIT = 10


async def _page(db: AsyncSession, query, page: int, limit: int) -> tuple[list, bool]:
    # one extra row tells whether another page exists
    result = await db.execute(query.offset((page - 1) * limit).limit(limit + 1))
    rows = result.scalars().all()
    return rows[:limit], len(rows) > limit


async def search_companies(
    db: AsyncSession, q: str | None, industry: str | None, page: int, limit: int
) -> tuple[List[Company], bool]:
    query = select(Company)
    if q:
        pattern = f"%{q}%"
        goods_match = (
            select(GoodsService.id)
            .where(GoodsService.company_id == Company.id)
            .where(or_(GoodsService.name.ilike(pattern), GoodsService.description.ilike(pattern)))
            .exists()
        )
        query = query.where(
            or_(Company.name.ilike(pattern), Company.description.ilike(pattern), goods_match)
        )
    if industry:
        query = query.where(Company.industry.ilike(f"%{industry}%"))
    return await _page(db, query.order_by(Company.name.asc(), Company.id), page, limit)


async def get_goods_preview(db: AsyncSession, company_id) -> List[GoodsService]:
    result = await db.execute(
        select(GoodsService)
        .filter(GoodsService.company_id == company_id)
        .order_by(GoodsService.created_at, GoodsService.id)
        .limit(GOODS_PER_COMPANY)
    )
    return result.scalars().all()


async def search_tenders(
    db: AsyncSession, q: str | None, industry: str | None, status: str | None, page: int, limit: int
) -> tuple[List[Tender], bool]:
    query = (
        select(Tender)
        .join(Company, Tender.company_id == Company.id)
        .options(selectinload(Tender.company))
        .where(Tender.status == (status or TenderStatus.OPEN.value))
    )
    if q:
        pattern = f"%{q}%"
        query = query.where(or_(Tender.title.ilike(pattern), Tender.description.ilike(pattern)))
    if industry:
        query = query.where(Company.industry.ilike(f"%{industry}%"))
    return await _page(db, query.order_by(Tender.deadline.asc(), Tender.id), page, limit)


async def list_industries(db: AsyncSession) -> List[str]:
    result = await db.execute(
        select(Company.industry).where(Company.industry.is_not(None)).distinct().order_by(Company.industry)
    )
    return result.scalars().all()


async def top_categories(db: AsyncSession) -> List[str]:
    count = func.count().label("count")
    result = await db.execute(
        select(GoodsService.category, count)
        .where(GoodsService.category.is_not(None))
        .group_by(GoodsService.category)
        .order_by(count.desc(), GoodsService.category)
        .limit(SUGGESTION_LIMIT)
    )
    return [row.category for row in result.all()]


async def recent_open_titles(db: AsyncSession) -> List[str]:
    result = await db.execute(
        select(Tender.title)
        .where(Tender.status == TenderStatus.OPEN.value)
        .order_by(Tender.created_at.desc())
        .limit(SUGGESTION_LIMIT)
    )
    return result.scalars().all()
