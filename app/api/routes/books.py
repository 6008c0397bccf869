"""Book endpoints. Every route requires a bearer token."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.deps import BookServiceDep, PaginationDep, get_current_user_id
from app.api.validation import ValidBook
from app.dtos.factory import DtoFactory, ResponseType
from app.dtos.request import CreateBookSchema
from app.dtos.response import BookDto

# Authentication runs before body validation on every route below
router = APIRouter(dependencies=[Depends(get_current_user_id)])

# The body is read by the validation dependency, so describe it for the docs here
BOOK_BODY_DOCS = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {
                "schema": CreateBookSchema.model_json_schema(by_alias=True),
            },
        },
    },
}


@router.post(
    "",
    response_model=BookDto,
    status_code=status.HTTP_201_CREATED,
    summary="Create book",
    openapi_extra=BOOK_BODY_DOCS,
)
async def create_book(data: ValidBook, service: BookServiceDep) -> BookDto:
    """Create a new book.

    - **title**, **author**, **category**: non-empty text
    - **price**: number >= 0
    - **rating**: number between 0 and 5
    - **publishedDate**: ISO-8601 date
    """
    book = await service.create(data)
    return DtoFactory.create_response(ResponseType.BOOK, book)


@router.get(
    "",
    response_model=list[BookDto],
    summary="List books",
)
async def list_books(
    response: Response,
    service: BookServiceDep,
    pagination: PaginationDep,
    category: Annotated[
        str | None,
        Query(max_length=100, description="Filter by category"),
    ] = None,
    author: Annotated[
        str | None,
        Query(max_length=255, description="Filter by author"),
    ] = None,
) -> list[BookDto]:
    """List books, newest first.

    The total number of matching books is returned in ``X-Total-Count``.
    """
    books, total = await service.list(
        page=pagination.page,
        limit=pagination.limit,
        category=category,
        author=author,
    )
    response.headers["X-Total-Count"] = str(total)
    return DtoFactory.create_response(ResponseType.BOOK_LIST, books)


@router.get(
    "/{book_id}",
    response_model=BookDto,
    summary="Get book",
)
async def get_book(book_id: UUID, service: BookServiceDep) -> BookDto:
    """Get a specific book by ID."""
    book = await service.get(book_id)
    return DtoFactory.create_response(ResponseType.BOOK, book)


@router.put(
    "/{book_id}",
    response_model=BookDto,
    summary="Update book",
    openapi_extra=BOOK_BODY_DOCS,
)
async def update_book(
    book_id: UUID,
    data: ValidBook,
    service: BookServiceDep,
) -> BookDto:
    """Replace a book. The body must contain every field."""
    book = await service.update(book_id, data)
    return DtoFactory.create_response(ResponseType.BOOK, book)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete book",
)
async def delete_book(book_id: UUID, service: BookServiceDep) -> None:
    """Delete a book."""
    await service.delete(book_id)
