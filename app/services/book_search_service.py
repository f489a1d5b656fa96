from app.errors import ValidationError
from app.repositories.book_repo import BookRepo
from app.utils.isbn import is_valid_isbn


class BookSearchService:
    @staticmethod
    def search_by_title(title: str):
        return BookRepo.list_all(title=title)

    @staticmethod
    def search_by_author(author: str):
        return BookRepo.list_all(author=author)

    @staticmethod
    def search_by_isbn(isbn: str):
        # hatalı ISBN -> boş liste
        if not is_valid_isbn(isbn):
            return []
        book = BookRepo.find_by_isbn(isbn)
        return [book] if book else []

    @staticmethod
    def available_books():
        return BookRepo.list_all(available_only=True)

    @staticmethod
    def search_books(term: str, search_type: str = "title"):
        handlers = {
            "title": BookSearchService.search_by_title,
            "author": BookSearchService.search_by_author,
            "isbn": BookSearchService.search_by_isbn,
        }
        handler = handlers.get((search_type or "").lower())
        if handler is None:
            raise ValidationError("search_type", "must be one of title, author, isbn")
        return handler(term)
