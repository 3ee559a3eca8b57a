from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from tenderhub.core.errors import Conflict
from tenderhub.core.logging_config import logger
from tenderhub.models.companies import Company
from tenderhub.models.users import User


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(
        select(User).options(selectinload(User.company)).filter(User.email == email)
    )
    return result.scalars().first()


async def get_user_by_id(db: AsyncSession, user_id) -> User | None:
    result = await db.execute(
        select(User).options(selectinload(User.company)).filter(User.id == user_id)
    )
    return result.scalars().first()


async def create_user_with_company(
    db: AsyncSession,
    email: str,
    password_hash: str,
    company_name: str,
    industry: str,
    description: str | None = None,
) -> tuple[User, Company]:
    """Creates the account and its company in one transaction."""
    user = User(email=email, password_hash=password_hash)
    db.add(user)
    try:
        await db.flush()
        company = Company(user_id=user.id, name=company_name, industry=industry, description=description)
        db.add(company)
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.warning(f"Registration rejected, email {email} already taken")
        raise Conflict("User with this email already exists")
    await db.refresh(user)
    await db.refresh(company)
    return user, company
