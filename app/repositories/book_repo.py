from datetime import datetime

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from app.errors import Conflict, NotFound
from app.extensions import db
from app.models.book import Book, BookStatus
from app.utils.isbn import normalize_isbn


class BookRepo:
    @staticmethod
    def list_all(title=None, author=None, isbn=None, available_only=False, include_deleted=False):
        q = Book.query
        if not include_deleted:
            q = q.filter(Book.status == BookStatus.ACTIVE)
        if title:
            q = q.filter(Book.title.icontains(title, autoescape=True))
        if author:
            q = q.filter(func.lower(Book.author) == author.strip().lower())
        if isbn:
            q = q.filter(Book.isbn == normalize_isbn(isbn))
        if available_only:
            q = q.filter(Book.available_copies > 0)
        return q.order_by(Book.id.desc()).all()

    @staticmethod
    def count(status=None) -> int:
        q = Book.query
        if status:
            q = q.filter(Book.status == status)
        return q.count()

    @staticmethod
    def copy_totals():
        """Aktif kitaplar için (available, total) kopya toplamları."""
        available, total = (
            db.session.query(
                func.coalesce(func.sum(Book.available_copies), 0),
                func.coalesce(func.sum(Book.total_copies), 0),
            )
            .filter(Book.status == BookStatus.ACTIVE)
            .one()
        )
        return int(available), int(total)

    @staticmethod
    def get(book_id: int, include_deleted: bool = False):
        book = db.session.get(Book, book_id)
        if book is None:
            return None
        if book.is_deleted and not include_deleted:
            return None
        return book

    @staticmethod
    def find_by_isbn(isbn: str):
        return Book.query.filter_by(isbn=normalize_isbn(isbn), status=BookStatus.ACTIVE).first()

    @staticmethod
    def create(book: Book):
        book.version = 1
        book.status = BookStatus.ACTIVE
        db.session.add(book)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise Conflict(f"ISBN {book.isbn} already exists")
        return book

    @staticmethod
    def _compare_and_swap(book_id: int, expected_version, values: dict) -> int:
        # tek UPDATE: id + version + aktiflik kontrolü atomik
        q = Book.query.filter(Book.id == book_id, Book.status == BookStatus.ACTIVE)
        if expected_version is not None:
            q = q.filter(Book.version == expected_version)
        values = dict(values)
        values[Book.version] = Book.version + 1
        values[Book.updated_at] = datetime.utcnow()
        try:
            matched = q.update(values, synchronize_session=False)
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise Conflict("ISBN already exists")
        return matched

    @staticmethod
    def _miss(book_id: int, expected_version):
        current = Book.query.filter_by(id=book_id, status=BookStatus.ACTIVE).first()
        if current is None:
            raise NotFound(f"Book {book_id} not found")
        raise Conflict(
            f"Book {book_id} version mismatch: expected {expected_version}, found {current.version}"
        )

    @staticmethod
    def update(book_id: int, expected_version: int, patch: dict):
        values = {getattr(Book, k): v for k, v in patch.items()}
        if not BookRepo._compare_and_swap(book_id, expected_version, values):
            BookRepo._miss(book_id, expected_version)
        return db.session.get(Book, book_id, populate_existing=True)

    @staticmethod
    def delete(book_id: int, expected_version=None):
        values = {Book.status: BookStatus.DELETED, Book.deleted_at: datetime.utcnow()}
        if not BookRepo._compare_and_swap(book_id, expected_version, values):
            BookRepo._miss(book_id, expected_version)
