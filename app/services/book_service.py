from flask import current_app

from app.errors import Conflict, NotFound, ValidationError
from app.models.book import Book
from app.repositories.book_repo import BookRepo
from app.validators.book_validator import BOOK_FIELDS, normalize_book_data, validate_book

IMMUTABLE_FIELDS = ("id", "version", "status")


class BookService:
    @staticmethod
    def list_books(**filters):
        return BookRepo.list_all(**filters)

    @staticmethod
    def get_book(book_id: int):
        book = BookRepo.get(book_id)
        if not book:
            raise NotFound(f"Book {book_id} not found")
        return book

    @staticmethod
    def get_book_for_audit(book_id: int):
        """Silinmiş kayıtlar dahil; silinen kitap için izin verilen tek okuma."""
        book = BookRepo.get(book_id, include_deleted=True)
        if not book:
            raise NotFound(f"Book {book_id} not found")
        return book

    @staticmethod
    def _check_fields(data: dict):
        for k in data:
            if k in IMMUTABLE_FIELDS:
                raise ValidationError(k, "is read-only")
            if k not in BOOK_FIELDS:
                raise ValidationError(k, "unknown field")

    @staticmethod
    def create_book(data: dict):
        BookService._check_fields(data)
        data = normalize_book_data(data)
        if data.get("total_copies") is None:
            data["total_copies"] = 1
        if data.get("available_copies") is None:
            data["available_copies"] = data["total_copies"]
        validate_book(data)

        if BookRepo.find_by_isbn(data["isbn"]):
            current_app.logger.warning("Duplicate ISBN on create: %s", data["isbn"])
            raise Conflict(f"ISBN {data['isbn']} already exists")

        book = BookRepo.create(Book(**{k: data[k] for k in BOOK_FIELDS}))
        current_app.logger.info("Book %s created (isbn=%s)", book.id, book.isbn)
        return book

    @staticmethod
    def update_book(book_id: int, expected_version: int, data: dict):
        BookService._check_fields(data)
        patch = normalize_book_data(data)

        book = BookService.get_book(book_id)
        if book.version != expected_version:
            current_app.logger.warning(
                "Stale update on book %s: expected v%s, current v%s",
                book_id, expected_version, book.version,
            )
            raise Conflict(
                f"Book {book_id} version mismatch: expected {expected_version}, found {book.version}"
            )

        merged = book.to_dict()
        merged.update(patch)
        validate_book(merged)

        if "isbn" in patch and patch["isbn"] != book.isbn:
            other = BookRepo.find_by_isbn(patch["isbn"])
            if other and other.id != book_id:
                current_app.logger.warning("Duplicate ISBN on update of book %s: %s", book_id, patch["isbn"])
                raise Conflict(f"ISBN {patch['isbn']} already exists")

        try:
            book = BookRepo.update(book_id, expected_version, patch)
        except Conflict:
            current_app.logger.warning("Concurrent update lost on book %s", book_id)
            raise
        current_app.logger.info("Book %s updated to v%s", book_id, book.version)
        return book

    @staticmethod
    def delete_book(book_id: int, expected_version=None):
        BookRepo.delete(book_id, expected_version)
        current_app.logger.info("Book %s deleted", book_id)
