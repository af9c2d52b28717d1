from fastapi import APIRouter
from api.v1.routes.i18n import router as i18n_router


# Main v1 router (includes all endpoints)
router = APIRouter()
router.include_router(i18n_router)
