from typing import List

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from tenderhub.core.errors import NotFoundOrForbidden
from tenderhub.core.logging_config import logger
from tenderhub.models.companies import Company
from tenderhub.models.goods_services import GoodsService


async def get_company_by_id(db: AsyncSession, company_id, with_goods: bool = False) -> Company | None:
    query = select(Company).filter(Company.id == company_id)
    if with_goods:
        query = query.options(selectinload(Company.goods_services))
    result = await db.execute(query)
    company = result.scalars().first()
    if not company:
        logger.warning(f"Company {company_id} not found")
    return company


async def list_companies(
    db: AsyncSession, page: int, limit: int, search: str | None = None, industry: str | None = None
) -> tuple[List[Company], int]:
    query = select(Company)
    if search:
        query = query.where(Company.name.ilike(f"%{search}%"))
    if industry:
        query = query.where(Company.industry == industry)

    total_query = select(func.count()).select_from(query.subquery())
    total = (await db.execute(total_query)).scalar()

    query = query.order_by(Company.created_at.desc(), Company.id).offset((page - 1) * limit).limit(limit)
    result = await db.execute(query)
    return result.scalars().all(), total


async def update_company(db: AsyncSession, company: Company, data: dict) -> Company:
    for key, value in data.items():
        setattr(company, key, value)
    db.add(company)
    await db.commit()
    await db.refresh(company)
    return company


async def create_goods_service(db: AsyncSession, company_id, data: dict) -> GoodsService:
    item = GoodsService(company_id=company_id, **data)
    db.add(item)
    await db.commit()
    await db.refresh(item)
    return item


async def get_owned_goods_service(db: AsyncSession, item_id, company_id) -> GoodsService:
    result = await db.execute(
        select(GoodsService).filter(GoodsService.id == item_id, GoodsService.company_id == company_id)
    )
    item = result.scalars().first()
    if not item:
        logger.warning(f"Goods/service {item_id} not found for company {company_id}")
        raise NotFoundOrForbidden("Goods or service not found or access denied")
    return item


async def update_goods_service(db: AsyncSession, item: GoodsService, data: dict) -> GoodsService:
    for key, value in data.items():
        setattr(item, key, value)
    db.add(item)
    await db.commit()
    await db.refresh(item)
    return item


async def delete_goods_service(db: AsyncSession, item: GoodsService) -> None:
    await db.delete(item)
    await db.commit()
