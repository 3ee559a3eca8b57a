from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tenderhub.api.deps import AuthSession, get_current_session
from tenderhub.core.errors import NotFoundOrForbidden
from tenderhub.crud.users import get_user_by_id
from tenderhub.db.database import get_db
from tenderhub.schemas.auth import LoginRequest, RegisterRequest, UserOut
from tenderhub.schemas.common import ok
from tenderhub.schemas.companies import CompanyOut
from tenderhub.services import auth_service

router = APIRouter()


@router.post("/register", status_code=201, summary="Register an account together with its company")
async def register(data: RegisterRequest, db: AsyncSession = Depends(get_db)):
    return ok(await auth_service.register(db, data))


@router.post("/login", summary="Exchange credentials for a bearer token")
async def login(data: LoginRequest, db: AsyncSession = Depends(get_db)):
    return ok(await auth_service.login(db, data))


@router.get("/profile", summary="Current account and its company")
async def profile(
    session: AuthSession = Depends(get_current_session),
    db: AsyncSession = Depends(get_db),
):
    user = await get_user_by_id(db, session.account_id)
    if not user:
        raise NotFoundOrForbidden("User not found")
    return ok({
        "user": UserOut.model_validate(user),
        "company": CompanyOut.model_validate(user.company) if user.company else None,
    })
