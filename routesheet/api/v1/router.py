"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from routesheet.api.v1.routes import spreadsheet

api_router = APIRouter()

api_router.include_router(spreadsheet.router, prefix="/spreadsheet", tags=["Spreadsheet"])
