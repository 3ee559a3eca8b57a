from sqlalchemy.ext.asyncio import AsyncSession

from tenderhub.core.errors import Conflict, Unauthenticated
from tenderhub.core.logging_config import logger
from tenderhub.core.security import create_access_token, hash_password, verify_password
from tenderhub.crud.users import create_user_with_company, get_user_by_email
from tenderhub.schemas.auth import LoginRequest, RegisterRequest, UserOut
from tenderhub.schemas.companies import CompanyOut


def _auth_payload(user, company) -> dict:
    return {
        "token": create_access_token(user.id, user.email, company.id if company else None),
        "user": UserOut.model_validate(user),
        "company": CompanyOut.model_validate(company) if company else None,
    }


async def register(db: AsyncSession, data: RegisterRequest) -> dict:
    email = data.email.lower()
    if await get_user_by_email(db, email):
        logger.warning(f"Registration rejected, email {email} already taken")
        raise Conflict("User with this email already exists")

    user, company = await create_user_with_company(
        db,
        email=email,
        password_hash=hash_password(data.password),
        company_name=data.company_name,
        industry=data.industry,
        description=data.description,
    )
    logger.info(f"Registered user {user.id} with company {company.id}")
    return _auth_payload(user, company)


async def login(db: AsyncSession, data: LoginRequest) -> dict:
    user = await get_user_by_email(db, data.email.lower())
    if not user or not verify_password(data.password, user.password_hash):
        logger.warning(f"Failed login for {data.email}")
        raise Unauthenticated("Invalid email or password")
    logger.info(f"User {user.id} logged in")
    return _auth_payload(user, user.company)
