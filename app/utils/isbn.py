import re

_ISBN10 = re.compile(r"^\d{9}[\dX]$")
_ISBN13 = re.compile(r"^\d{13}$")


def normalize_isbn(value) -> str:
    """Tire ve boşlukları at, sondaki x'i büyüt: '0-306-40615-2' -> '0306406152'."""
    if value is None:
        return ""
    return re.sub(r"[\s-]", "", str(value)).upper()


def is_valid_isbn10(isbn: str) -> bool:
    if not _ISBN10.match(isbn):
        return False
    total = 0
    for i, ch in enumerate(isbn):
        digit = 10 if ch == "X" else int(ch)
        total += (10 - i) * digit
    return total % 11 == 0


def is_valid_isbn13(isbn: str) -> bool:
    if not _ISBN13.match(isbn):
        return False
    total = sum(int(ch) * (3 if i % 2 else 1) for i, ch in enumerate(isbn))
    return total % 10 == 0


def is_valid_isbn(value) -> bool:
    isbn = normalize_isbn(value)
    return is_valid_isbn10(isbn) or is_valid_isbn13(isbn)
