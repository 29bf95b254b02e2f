"""API v1 router combining all endpoint routers."""

from fastapi import APIRouter

from app.api.v1 import voting_records

api_router = APIRouter()

api_router.include_router(
    voting_records.router, prefix="/voting-records", tags=["voting-records"]
)
