"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.auth import router as auth_router
from api.v1.routes.certifications import router as certifications_router
from api.v1.routes.contact import router as contact_router
from api.v1.routes.media import router as media_router
from api.v1.routes.profile import router as profile_router
from api.v1.routes.project_categories import router as project_categories_router
from api.v1.routes.projects import router as projects_router
from api.v1.routes.services import router as services_router
from api.v1.routes.upload import router as upload_router

router = APIRouter()
router.include_router(profile_router)
router.include_router(projects_router)
router.include_router(project_categories_router)
router.include_router(certifications_router)
router.include_router(services_router)
router.include_router(contact_router)
router.include_router(upload_router)
router.include_router(media_router)
router.include_router(auth_router)
