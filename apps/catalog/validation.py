"""
Field validation for catalog payloads.

Each function returns every violation found instead of stopping at the first,
so a client can fix a payload in one round trip.
"""

from typing import List, Optional
from pydantic import BaseModel
from framework.config import Settings, settings as default_settings
from framework.exceptions.handler import ValidationException
from .schemas import CategoryDTO, ProductDTO


class FieldViolation(BaseModel):
    field: str
    message: str


def _check_length(
    violations: List[FieldViolation],
    field: str,
    value: Optional[str],
    max_length: int,
    min_length: int = 1,
    required_message: Optional[str] = None,
):
    if value is None or not value.strip():
        violations.append(FieldViolation(field=field, message=required_message or f"{field} is required"))
        return
    if not min_length <= len(value) <= max_length:
        if min_length > 1:
            message = f"{field} must be between {min_length} and {max_length} characters"
        else:
            message = f"{field} must be at most {max_length} characters"
        violations.append(FieldViolation(field=field, message=message))


def validate_category(payload: CategoryDTO) -> List[FieldViolation]:
    violations: List[FieldViolation] = []
    _check_length(violations, "name", payload.name, 100)
    _check_length(violations, "image_url", payload.image_url, 300)
    return violations


def first_letter_is_uppercase(value: Optional[str]) -> bool:
    """Empty values pass; the required check reports them."""
    if not value:
        return True
    first = value[0]
    return first == first.upper()


def validate_product(payload: ProductDTO, settings: Settings = default_settings) -> List[FieldViolation]:
    violations: List[FieldViolation] = []
    _check_length(
        violations, "name", payload.name, 100, min_length=2,
        required_message="Product name is required",
    )
    if settings.VALIDATE_NAME_CAPITALIZATION and not first_letter_is_uppercase(payload.name):
        violations.append(FieldViolation(field="name", message="The first letter of the name must be uppercase"))
    _check_length(
        violations, "description", payload.description, 300, min_length=5,
        required_message="Description is required",
    )
    _check_length(
        violations, "image_url", payload.image_url, 300,
        required_message="An image URL is required",
    )
    if payload.price is None:
        violations.append(FieldViolation(field="price", message="Price is required"))
    if payload.category_id is None:
        violations.append(FieldViolation(field="category_id", message="category_id is required"))
    if settings.VALIDATE_POSITIVE_STOCK and payload.stock <= 0:
        violations.append(FieldViolation(field="stock", message="Stock must be greater than zero"))
    return violations


def ensure_valid(violations: List[FieldViolation]) -> None:
    """Raise ValidationException when any violation was found."""
    if violations:
        raise ValidationException([v.model_dump() for v in violations])
