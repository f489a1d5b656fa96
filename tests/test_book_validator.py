import pytest

from app.errors import ValidationError
from app.validators.book_validator import normalize_book_data, validate_book

from tests.conftest import CLEAN_CODE


def _valid(**overrides):
    data = {
        "title": "Clean Code",
        "author": "Robert Martin",
        "isbn": "9780132350884",
        "total_copies": 2,
        "available_copies": 1,
    }
    data.update(overrides)
    return data


def test_valid_book_passes():
    assert validate_book(_valid()) is None


@pytest.mark.parametrize("field", ["title", "author"])
@pytest.mark.parametrize("value", ["", "   ", None])
def test_blank_title_and_author_rejected(field, value):
    with pytest.raises(ValidationError) as exc:
        validate_book(_valid(**{field: value}))
    assert exc.value.field == field


def test_malformed_isbn_rejected():
    with pytest.raises(ValidationError) as exc:
        validate_book(_valid(isbn="9780132350885"))
    assert exc.value.field == "isbn"


def test_missing_isbn_rejected():
    with pytest.raises(ValidationError) as exc:
        validate_book(_valid(isbn=None))
    assert exc.value.field == "isbn"


def test_negative_copies_rejected():
    with pytest.raises(ValidationError) as exc:
        validate_book(_valid(available_copies=-1))
    assert exc.value.field == "available_copies"


def test_available_cannot_exceed_total():
    with pytest.raises(ValidationError) as exc:
        validate_book(_valid(total_copies=1, available_copies=2))
    assert exc.value.field == "available_copies"


def test_bool_copies_rejected():
    with pytest.raises(ValidationError):
        validate_book(_valid(total_copies=True))


def test_first_failing_field_reported():
    with pytest.raises(ValidationError) as exc:
        validate_book(_valid(title="", author="", isbn="bad"))
    assert exc.value.field == "title"


def test_validate_does_not_mutate_input():
    data = _valid()
    before = dict(data)
    validate_book(data)
    assert data == before


def test_normalize_coerces_and_strips():
    raw = {"title": "  Clean Code ", "isbn": CLEAN_CODE, "total_copies": "4"}
    out = normalize_book_data(raw)
    assert out == {"title": "Clean Code", "isbn": "9780132350884", "total_copies": 4}
    assert raw["total_copies"] == "4"


def test_normalize_rejects_non_integer_copies():
    with pytest.raises(ValidationError) as exc:
        normalize_book_data({"total_copies": "many"})
    assert exc.value.field == "total_copies"


@pytest.mark.parametrize("value", ["--3", "²", "3.5", "1e3", " - 2", ""])
def test_normalize_rejects_malformed_integer_strings(value):
    with pytest.raises(ValidationError) as exc:
        normalize_book_data({"available_copies": value})
    assert exc.value.field == "available_copies"


def test_normalize_accepts_padded_integer_string():
    assert normalize_book_data({"total_copies": " 7 "}) == {"total_copies": 7}
