from datetime import date

from app.errors import ValidationError
from app.models.book import BookStatus
from app.repositories.book_repo import BookRepo


class ReportService:
    @staticmethod
    def checkout_rate(available: int, total: int) -> float:
        # kopya yoksa oran 0
        if total <= 0:
            return 0.0
        return (total - available) / total * 100

    @staticmethod
    def available_books_report() -> str:
        available, total = BookRepo.copy_totals()
        lines = [
            "AVAILABLE BOOKS REPORT",
            "=====================",
            f"Available copies: {available}",
            f"Total copies: {total}",
            f"Checkout rate: {ReportService.checkout_rate(available, total):.1f}%",
        ]
        return "\n".join(lines) + "\n"

    @staticmethod
    def summary_report(today=None) -> str:
        available, total = BookRepo.copy_totals()
        lines = [
            "LIBRARY SUMMARY REPORT",
            "======================",
            f"Total books: {BookRepo.count(BookStatus.ACTIVE)}",
            f"Deleted books: {BookRepo.count(BookStatus.DELETED)}",
            f"Total copies: {total}",
            f"Available copies: {available}",
            f"Checked out copies: {total - available}",
            f"Report generated on: {(today or date.today()).isoformat()}",
        ]
        return "\n".join(lines) + "\n"

    @staticmethod
    def generate_report(report_type: str) -> str:
        handlers = {
            "available": ReportService.available_books_report,
            "summary": ReportService.summary_report,
        }
        handler = handlers.get((report_type or "").lower())
        if handler is None:
            raise ValidationError("report_type", f"invalid report type: {report_type}")
        return handler()
