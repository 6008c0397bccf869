"""API router aggregating all endpoints."""

from fastapi import APIRouter

from app.api.routes import books, users

api_router = APIRouter()

api_router.include_router(
    users.router,
    prefix="/users",
    tags=["Users"],
)

api_router.include_router(
    books.router,
    prefix="/books",
    tags=["Books"],
)
