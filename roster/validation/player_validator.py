"""
Regole di validazione Player.

  - user_id:       obbligatorio
  - name:          obbligatorio, max 200 caratteri
  - date_of_birth: obbligatoria, nel passato, non oltre 100 anni fa
  - gender:        opzionale, uno tra VALID_GENDER_OPTIONS (case-insensitive)
  - photo_url:     opzionale, max 500 caratteri, URL assoluto http/https
"""

from datetime import date
from urllib.parse import urlparse

from roster.validation.common import FieldErrors, add_error, add_years, is_blank

MAX_NAME_LENGTH = 200
MAX_GENDER_LENGTH = 50
MAX_PHOTO_URL_LENGTH = 500
MAX_AGE_IN_YEARS = 100

VALID_GENDER_OPTIONS = ("Male", "Female", "Non-binary", "Prefer not to say")


def _validate_name(name: str | None, errors: FieldErrors) -> None:
    if is_blank(name):
        add_error(errors, "name", "Name is required.")
        return
    if len(name.strip()) > MAX_NAME_LENGTH:
        add_error(errors, "name", f"Name cannot exceed {MAX_NAME_LENGTH} characters.")


def _validate_date_of_birth(date_of_birth: date | None, today: date, errors: FieldErrors) -> None:
    if date_of_birth is None:
        add_error(errors, "date_of_birth", "Date of birth is required.")
        return
    if date_of_birth >= today:
        add_error(errors, "date_of_birth", "Date of birth must be in the past.")
        return
    if date_of_birth < add_years(today, -MAX_AGE_IN_YEARS):
        add_error(
            errors, "date_of_birth",
            f"Date of birth cannot be more than {MAX_AGE_IN_YEARS} years ago.",
        )


def _validate_gender(gender: str | None, errors: FieldErrors) -> None:
    if is_blank(gender):
        return
    valid = {option.lower() for option in VALID_GENDER_OPTIONS}
    if gender.strip().lower() not in valid:
        add_error(errors, "gender", f"Gender must be one of: {', '.join(VALID_GENDER_OPTIONS)}.")


def _validate_photo_url(photo_url: str | None, errors: FieldErrors) -> None:
    if is_blank(photo_url):
        return
    url = photo_url.strip()
    if len(url) > MAX_PHOTO_URL_LENGTH:
        add_error(errors, "photo_url", f"Photo URL cannot exceed {MAX_PHOTO_URL_LENGTH} characters.")
        return
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        add_error(errors, "photo_url", "Photo URL must be a valid HTTP or HTTPS URL.")


def validate_player(record, today: date | None = None) -> FieldErrors:
    """Ritorna {campo: [messaggi]}; dict vuoto se il record è valido."""
    today = today or date.today()
    errors: FieldErrors = {}

    if is_blank(getattr(record, "user_id", None)):
        add_error(errors, "user_id", "User ID is required.")
    _validate_name(getattr(record, "name", None), errors)
    _validate_date_of_birth(getattr(record, "date_of_birth", None), today, errors)
    _validate_gender(getattr(record, "gender", None), errors)
    _validate_photo_url(getattr(record, "photo_url", None), errors)

    return errors
