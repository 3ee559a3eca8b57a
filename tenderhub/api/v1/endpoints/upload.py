from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from tenderhub.api.deps import AuthSession, get_current_session, require_company
from tenderhub.core.config import settings
from tenderhub.crud.companies import get_company_by_id, update_company
from tenderhub.db.database import get_db
from tenderhub.schemas.common import ok
from tenderhub.services.storage import (
    DOCUMENT_PREFIX,
    LOGO_PREFIX,
    S3Storage,
    build_key,
    check_key_owner,
    check_upload,
    get_storage,
)

router = APIRouter()


@router.post("/company-logo", summary="Upload the caller's company logo")
async def upload_company_logo(
        logo: UploadFile = File(...),
        session: AuthSession = Depends(require_company),
        storage: S3Storage = Depends(get_storage),
        db: AsyncSession = Depends(get_db)
):
    content = await logo.read(settings.MAX_UPLOAD_BYTES + 1)
    check_upload(content, logo.content_type, image_only=True)

    key = build_key(LOGO_PREFIX, session.account_id, logo.filename)
    url = await storage.upload(key, content, logo.content_type)

    company = await get_company_by_id(db, session.company_id)
    await update_company(db, company, {"logo_url": url})
    return ok({"url": url, "file_name": key})


@router.post("/tender-document", summary="Upload a tender or proposal document")
async def upload_tender_document(
        document: UploadFile = File(...),
        session: AuthSession = Depends(get_current_session),
        storage: S3Storage = Depends(get_storage)
):
    content = await document.read(settings.MAX_UPLOAD_BYTES + 1)
    check_upload(content, document.content_type)

    key = build_key(DOCUMENT_PREFIX, session.account_id, document.filename)
    url = await storage.upload(key, content, document.content_type or "application/octet-stream")
    return ok({"url": url, "file_name": key, "original_name": document.filename})


@router.delete("/file/{file_name:path}", summary="Delete a previously uploaded file")
async def delete_file(
        file_name: str,
        session: AuthSession = Depends(get_current_session),
        storage: S3Storage = Depends(get_storage)
):
    check_key_owner(file_name, session.account_id)
    await storage.delete(file_name)
    return ok({"message": "File deleted successfully"})
