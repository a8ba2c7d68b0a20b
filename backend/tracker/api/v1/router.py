from fastapi import APIRouter

from tracker.api.v1 import auth, circuits, import_routes, reports

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(import_routes.router, prefix="/circuits", tags=["import"])
api_router.include_router(reports.router, prefix="/circuits/reports", tags=["reports"])
api_router.include_router(circuits.router, prefix="/circuits", tags=["circuits"])
