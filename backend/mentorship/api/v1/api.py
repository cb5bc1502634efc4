from fastapi import APIRouter

from mentorship.api.v1.endpoints import admin, personalization, sessions, templates, users

api_router = APIRouter()

api_router.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(templates.router, prefix="/templates", tags=["templates"])
api_router.include_router(personalization.router, prefix="/personalization", tags=["personalization"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
