from fastapi import APIRouter

from leavedesk.api.leaves import leaves_router
from leavedesk.api.users import users_router

api_router = APIRouter()
api_router.include_router(leaves_router)
api_router.include_router(users_router)
