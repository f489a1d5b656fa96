from flask import current_app

from app.errors import Conflict
from app.repositories.book_repo import BookRepo
from app.services.book_service import BookService


class InventoryService:
    """Kopya sayısı değişiklikleri; her biri versiyonlu update ile yazılır."""

    @staticmethod
    def checkout_copy(book_id: int, expected_version: int):
        book = BookService.get_book(book_id)
        if book.available_copies < 1:
            raise Conflict(f"Book {book_id} has no available copies")

        book = BookRepo.update(
            book_id, expected_version, {"available_copies": book.available_copies - 1}
        )
        current_app.logger.info(
            "Checked out a copy of book %s (%s left)", book_id, book.available_copies
        )
        return book

    @staticmethod
    def return_copy(book_id: int, expected_version: int):
        book = BookService.get_book(book_id)
        if book.available_copies >= book.total_copies:
            raise Conflict(f"All copies of book {book_id} are already in stock")

        book = BookRepo.update(
            book_id, expected_version, {"available_copies": book.available_copies + 1}
        )
        current_app.logger.info("Returned a copy of book %s", book_id)
        return book
