"""
Book alanları için saf (yan etkisiz) doğrulama.

normalize_book_data ham girdiyi temizler, validate_book ise kuralları
kontrol eder ve ilk hatalı alan için ValidationError fırlatır.
"""
import re

from app.errors import ValidationError
from app.utils.isbn import normalize_isbn, is_valid_isbn

BOOK_FIELDS = ("title", "author", "isbn", "total_copies", "available_copies")
COPY_FIELDS = ("total_copies", "available_copies")
_INT_RE = re.compile(r"-?[0-9]+")


def _to_int(field: str, value):
    if isinstance(value, bool):
        raise ValidationError(field, "must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_RE.fullmatch(value.strip()):
        return int(value.strip())
    raise ValidationError(field, "must be an integer")


def normalize_book_data(data: dict) -> dict:
    out = dict(data)
    for k in ("title", "author"):
        if isinstance(out.get(k), str):
            out[k] = out[k].strip()
    if "isbn" in out and out["isbn"] is not None:
        out["isbn"] = normalize_isbn(out["isbn"])
    for k in COPY_FIELDS:
        if k in out and out[k] is not None:
            out[k] = _to_int(k, out[k])
    return out


def validate_book(entity) -> None:
    """Book ya da dict kabul eder; geçerliyse None döner."""
    data = entity.to_dict() if hasattr(entity, "to_dict") else entity

    for k in ("title", "author"):
        value = data.get(k)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(k, "must not be blank")

    isbn = data.get("isbn")
    if not isbn:
        raise ValidationError("isbn", "is required")
    if not is_valid_isbn(isbn):
        raise ValidationError("isbn", "is not a valid ISBN-10 or ISBN-13")

    for k in COPY_FIELDS:
        value = data.get(k)
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValidationError(k, "must be an integer")
        if value < 0:
            raise ValidationError(k, "must not be negative")

    if data["available_copies"] > data["total_copies"]:
        raise ValidationError("available_copies", "must not exceed total_copies")
