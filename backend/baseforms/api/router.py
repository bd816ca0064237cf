from fastapi import APIRouter

from baseforms.api.routes.augment import router as augment_router
from baseforms.api.routes.root import router as root_router

api_router = APIRouter()
api_router.include_router(root_router)
api_router.include_router(augment_router)
