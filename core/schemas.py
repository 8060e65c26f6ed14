# =============================================================================
# core/schemas.py  —  Input schemas for the query operations
# =============================================================================
#
# One pydantic model per operation.  They are the declarative contract the
# agent runtime sees (field, type, bounds, required/optional) and the gate
# every request passes before any network call.
#
# validate_input() converts pydantic's error into core.errors.ValidationError
# so callers only deal with the core error taxonomy.
# =============================================================================

from typing import Literal, Optional, Type, TypeVar

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from core.errors import ValidationError

HolidayType = Literal["national", "local", "religious", "observance"]


class _CountryCodeInput(BaseModel):
    @field_validator("country", mode="before", check_fields=False)
    @classmethod
    def _upper(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class HolidaysByCountryInput(_CountryCodeInput):
    country: str = Field(
        min_length=2,
        max_length=2,
        description="Two-letter ISO 3166-1 alpha-2 country code (e.g., US, GB, NG, IN)",
    )
    year: int = Field(ge=2000, le=2100, description="Year for which to fetch holidays")
    month: Optional[int] = Field(default=None, ge=1, le=12)
    day: Optional[int] = Field(default=None, ge=1, le=31)
    type: Optional[HolidayType] = None


class HolidaysForDateInput(_CountryCodeInput):
    month: int = Field(ge=1, le=12, description="Month number (1=January, 12=December)")
    day: int = Field(ge=1, le=31, description="Day of the month (1-31)")
    year: Optional[int] = Field(default=None, ge=2000, le=2100)
    country: Optional[str] = Field(default=None, min_length=2, max_length=2)


class SearchHolidaysInput(_CountryCodeInput):
    search_term: str = Field(min_length=2, description="Holiday name or keyword")
    country: Optional[str] = Field(default=None, min_length=2, max_length=2)
    year: Optional[int] = Field(default=None, ge=2001, le=2049)
    type: Optional[HolidayType] = None


class TodayHolidaysInput(_CountryCodeInput):
    country: Optional[str] = Field(default=None, min_length=2, max_length=2)


class ValidateCountryInput(BaseModel):
    input: str = Field(description="Country name or ISO code, e.g. 'Nigeria' or 'NG'")


M = TypeVar("M", bound=BaseModel)


def validate_input(model: Type[M], **values: object) -> M:
    """Instantiate ``model`` or raise the core ValidationError."""
    try:
        return model(**values)
    except PydanticValidationError as exc:
        errors = [{"loc": list(err["loc"]), "msg": err["msg"]} for err in exc.errors()]
        summary = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'input'}: {err['msg']}" for err in errors
        )
        raise ValidationError(f"Invalid input: {summary}", errors=errors) from exc
