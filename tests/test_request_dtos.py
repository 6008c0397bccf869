"""Tests for request DTOs and their validation rules."""

from datetime import date
from typing import Any

import pytest

from app.dtos.request import CreateBookDto, UserLoginDto, UserSignupDto

# ─────────────────────────────────────────────────────────────────────────────
# Construction
# ─────────────────────────────────────────────────────────────────────────────


def test_create_book_dto_copies_fields(book_payload: dict[str, Any]) -> None:
    """Test that construction copies recognized wire fields verbatim."""
    dto = CreateBookDto(book_payload)

    assert dto.title == "The Pragmatic Programmer"
    assert dto.author == "Andrew Hunt"
    assert dto.category == "Programming"
    assert dto.price == 39.99
    assert dto.rating == 4.5
    assert dto.published_date == "1999-10-20"


def test_create_book_dto_missing_fields_are_none() -> None:
    """Test that construction never fails on a partial payload."""
    dto = CreateBookDto({"title": "Only a title"})

    assert dto.title == "Only a title"
    assert dto.author is None
    assert dto.published_date is None


def test_create_book_dto_ignores_non_mapping_input() -> None:
    """Test that a non-object payload builds an empty DTO."""
    dto = CreateBookDto(["not", "an", "object"])  # type: ignore[arg-type]

    assert dto.title is None
    assert dto.price is None


def test_to_model_equals_payload(book_payload: dict[str, Any]) -> None:
    """Test that to_model gives back the validated payload unchanged."""
    assert CreateBookDto.validate(book_payload).is_valid

    assert CreateBookDto(book_payload).to_model() == book_payload


def test_to_attributes_uses_attribute_names(book_payload: dict[str, Any]) -> None:
    """Test that to_attributes keys match the ORM attribute names."""
    dto = CreateBookDto(book_payload)

    assert dto.to_attributes() == {
        "title": "The Pragmatic Programmer",
        "author": "Andrew Hunt",
        "category": "Programming",
        "price": 39.99,
        "rating": 4.5,
        "published_date": "1999-10-20",
    }


def test_to_model_drops_unknown_fields(book_payload: dict[str, Any]) -> None:
    """Test that fields outside the DTO never reach the persistence payload."""
    dto = CreateBookDto({**book_payload, "id": "forged", "isAdmin": True})

    model = dto.to_model()
    assert "id" not in model
    assert "isAdmin" not in model


def test_to_model_does_not_mutate_dto(book_payload: dict[str, Any]) -> None:
    """Test that the returned payload is a fresh dict each call."""
    dto = CreateBookDto(book_payload)

    model = dto.to_model()
    model["title"] = "Changed"

    assert dto.title == "The Pragmatic Programmer"
    assert dto.to_model()["title"] == "The Pragmatic Programmer"


def test_dto_equality(book_payload: dict[str, Any]) -> None:
    """Test that DTOs with the same fields compare equal."""
    assert CreateBookDto(book_payload) == CreateBookDto(dict(book_payload))
    assert CreateBookDto(book_payload) != CreateBookDto({**book_payload, "price": 1})


def test_signup_repr_masks_password() -> None:
    """Test that credentials never appear in the repr."""
    dto = UserSignupDto({"username": "reader", "email": "r@example.com", "password": "abc12345"})

    text = repr(dto)
    assert "abc12345" not in text
    assert "password='***'" in text
    assert "username='reader'" in text


def test_login_repr_masks_password() -> None:
    """Test that login credentials are masked too."""
    dto = UserLoginDto({"email": "r@example.com", "password": "hunter2hunter2"})

    assert "hunter2hunter2" not in repr(dto)


# ─────────────────────────────────────────────────────────────────────────────
# CreateBookDto.validate
# ─────────────────────────────────────────────────────────────────────────────


def test_validate_book_success(book_payload: dict[str, Any]) -> None:
    """Test that a valid payload passes and values are coerced."""
    result = CreateBookDto.validate(book_payload)

    assert result.is_valid
    assert result.error is None
    assert result.value is not None
    assert result.value["publishedDate"] == date(1999, 10, 20)
    assert result.value["price"] == 39.99


def test_validate_does_not_mutate_input(book_payload: dict[str, Any]) -> None:
    """Test that validation leaves the payload untouched."""
    original = dict(book_payload)

    CreateBookDto.validate(book_payload)

    assert book_payload == original


def test_validate_book_accepts_timestamp(book_payload: dict[str, Any]) -> None:
    """Test that a full ISO-8601 timestamp is accepted as a date."""
    book_payload["publishedDate"] = "2020-05-17T10:30:00Z"

    result = CreateBookDto.validate(book_payload)

    assert result.is_valid
    assert result.value["publishedDate"] == date(2020, 5, 17)  # type: ignore[index]


def test_validate_book_missing_field(book_payload: dict[str, Any]) -> None:
    """Test that a missing required field is reported by name."""
    del book_payload["title"]

    result = CreateBookDto.validate(book_payload)

    assert not result.is_valid
    assert result.value is None
    assert result.error is not None
    assert result.error.fields == ["title"]
    assert result.error.details[0].message == "title is required"


def test_validate_book_null_field(book_payload: dict[str, Any]) -> None:
    """Test that null counts as missing."""
    book_payload["author"] = None

    result = CreateBookDto.validate(book_payload)

    assert result.error is not None
    assert result.error.details[0].message == "author is required"


def test_validate_book_reports_every_violation() -> None:
    """Test that all violations are reported in one pass."""
    result = CreateBookDto.validate({"price": -1, "rating": 7})

    assert result.error is not None
    fields = set(result.error.fields)
    assert fields == {"title", "author", "category", "price", "rating", "publishedDate"}


@pytest.mark.parametrize(
    ("field", "value", "message"),
    [
        ("title", "", "title must not be empty"),
        ("title", "   ", "title must not be empty"),
        ("title", "x" * 256, "title must be at most 255 characters long"),
        ("category", 42, "category must be a string"),
        ("price", -0.01, "price must be greater than or equal to 0"),
        ("price", "cheap", "price must be a number"),
        ("price", True, "price must be a number"),
        ("rating", False, "rating must be a number"),
        ("price", float("inf"), "price must be a number"),
        ("rating", float("nan"), "rating must be a number"),
        ("price", 10**8, "price must be less than 100000000"),
        ("rating", 5.5, "rating must be less than or equal to 5"),
        ("rating", -1, "rating must be greater than or equal to 0"),
        ("publishedDate", "not a date", "publishedDate must be a valid date"),
        ("publishedDate", "2020-13-45", "publishedDate must be a valid date"),
    ],
)
def test_validate_book_field_rules(
    book_payload: dict[str, Any],
    field: str,
    value: Any,
    message: str,
) -> None:
    """Test each field rule produces a message naming the field."""
    book_payload[field] = value

    result = CreateBookDto.validate(book_payload)

    assert result.error is not None
    assert result.error.fields == [field]
    assert result.error.details[0].message == message


def test_validate_book_boundaries(book_payload: dict[str, Any]) -> None:
    """Test that boundary values are accepted."""
    book_payload.update(price=0, rating=5)
    assert CreateBookDto.validate(book_payload).is_valid

    book_payload.update(rating=0)
    assert CreateBookDto.validate(book_payload).is_valid

    book_payload.update(price=99_999_999.99)
    assert CreateBookDto.validate(book_payload).is_valid


def test_validate_book_rejects_unknown_field(book_payload: dict[str, Any]) -> None:
    """Test that unknown fields are violations."""
    book_payload["isbn"] = "978-0201616224"

    result = CreateBookDto.validate(book_payload)

    assert result.error is not None
    assert result.error.details[0].field == "isbn"
    assert result.error.details[0].message == "isbn is not allowed"


def test_validate_book_rejects_non_object() -> None:
    """Test that a JSON array body is rejected."""
    result = CreateBookDto.validate([1, 2, 3])

    assert result.error is not None
    assert result.error.details[0].message == "body must be a JSON object"


def test_validate_book_strips_whitespace(book_payload: dict[str, Any]) -> None:
    """Test that surrounding whitespace is trimmed."""
    book_payload["title"] = "  Padded Title  "

    result = CreateBookDto.validate(book_payload)

    assert result.value is not None
    assert result.value["title"] == "Padded Title"


def test_validated_values_round_trip(book_payload: dict[str, Any]) -> None:
    """Test that a DTO built from validated values holds coerced types."""
    result = CreateBookDto.validate(book_payload)
    dto = CreateBookDto(result.value)

    assert dto.to_model()["publishedDate"] == date(1999, 10, 20)
    assert dto.to_attributes()["published_date"] == date(1999, 10, 20)


# ─────────────────────────────────────────────────────────────────────────────
# UserSignupDto.validate
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def signup_payload() -> dict[str, Any]:
    return {"username": "book_worm", "email": "worm@example.com", "password": "Secret123"}


def test_validate_signup_success(signup_payload: dict[str, Any]) -> None:
    """Test a valid signup payload."""
    result = UserSignupDto.validate(signup_payload)

    assert result.is_valid
    assert result.value == signup_payload


@pytest.mark.parametrize(
    ("field", "value", "message"),
    [
        ("username", "ab", "username must be at least 3 characters long"),
        ("username", "a" * 31, "username must be at most 30 characters long"),
        (
            "username",
            "bad name!",
            "username may only contain letters, numbers and underscores",
        ),
        ("password", "short1", "password must be at least 8 characters long"),
        (
            "password",
            "lettersonly",
            "password must contain at least one letter and one number",
        ),
        (
            "password",
            "1234567890",
            "password must contain at least one letter and one number",
        ),
    ],
)
def test_validate_signup_field_rules(
    signup_payload: dict[str, Any],
    field: str,
    value: Any,
    message: str,
) -> None:
    """Test signup field rules."""
    signup_payload[field] = value

    result = UserSignupDto.validate(signup_payload)

    assert result.error is not None
    assert result.error.fields == [field]
    assert result.error.details[0].message == message


def test_validate_signup_invalid_email(signup_payload: dict[str, Any]) -> None:
    """Test that an invalid email is reported against the email field."""
    signup_payload["email"] = "not-an-email"

    result = UserSignupDto.validate(signup_payload)

    assert result.error is not None
    assert result.error.fields == ["email"]
    assert "email" in result.error.details[0].message


def test_validate_signup_empty_payload() -> None:
    """Test that an empty payload reports every required field."""
    result = UserSignupDto.validate({})

    assert result.error is not None
    assert result.error.fields == ["username", "email", "password"]
    assert result.error.message == (
        "username is required; email is required; password is required"
    )


# ─────────────────────────────────────────────────────────────────────────────
# UserLoginDto.validate
# ─────────────────────────────────────────────────────────────────────────────


def test_validate_login_success() -> None:
    """Test a valid login payload."""
    result = UserLoginDto.validate({"email": "worm@example.com", "password": "anything"})

    assert result.is_valid


def test_validate_login_empty_password() -> None:
    """Test that an empty password is rejected."""
    result = UserLoginDto.validate({"email": "worm@example.com", "password": ""})

    assert result.error is not None
    assert result.error.details[0].message == "password must not be empty"
