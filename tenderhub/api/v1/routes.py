from fastapi import APIRouter
from tenderhub.api.v1.endpoints import applications, auth, companies, search, tenders, upload

router = APIRouter(prefix="/v1")

router.include_router(auth.router, prefix="/auth", tags=["Auth"])
router.include_router(companies.router, prefix="/companies", tags=["Companies"])
router.include_router(tenders.router, prefix="/tenders", tags=["Tenders"])
router.include_router(applications.router, prefix="/applications", tags=["Applications"])
router.include_router(search.router, prefix="/search", tags=["Search"])
router.include_router(upload.router, prefix="/upload", tags=["Upload"])
