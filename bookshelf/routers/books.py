"""
Books Router

CRUD endpoints for books.

Handlers are thin: they hand the request body to the book service and
return what it returns. Domain errors raised by the service
(InvalidArgumentError, BookNotFoundError, StorageError) are mapped to
status codes by the exception handlers in main.py.
"""

from fastapi import APIRouter, status

from bookshelf.dependencies import BookServiceDep
from bookshelf.schemas import BookCreate, BookResponse, BookUpdate

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        400: {"description": "Missing or empty required fields"},
        404: {"description": "Book not found"},
    },
)


@router.get(
    "/",
    response_model=list[BookResponse],
    summary="List all books",
    description="Get every stored book. Returns an empty list when there are none.",
)
def list_books(service: BookServiceDep) -> list[BookResponse]:
    return service.get_books()


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
)
def get_book(book_id: str, service: BookServiceDep) -> BookResponse:
    """
    Get a single book by its ID.

    Raises:
        BookNotFoundError: 404 if book not found
    """
    return service.get_book(book_id)


@router.post(
    "/",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="Create a book. The id is assigned by the server.",
)
def create_book(book_data: BookCreate, service: BookServiceDep) -> BookResponse:
    """
    Create a new book.

    All of name, author and year are required. If several are missing
    the 400 response lists all of them in "fields".
    """
    return service.create_book(book_data)


@router.put(
    "/",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update a book",
    description="Replace name, author and year of the book identified by id.",
)
def update_book(book_data: BookUpdate, service: BookServiceDep) -> None:
    service.update_book(book_data)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    description="Permanently delete a book.",
)
def delete_book(book_id: str, service: BookServiceDep) -> None:
    """
    Delete a book.

    Returns 204 No Content on success. Deleting the same id twice
    returns 404 the second time.
    """
    service.delete_book(book_id)
