"""Helper condivisi dalle regole di validazione."""

from datetime import date

FieldErrors = dict[str, list[str]]


def add_error(errors: FieldErrors, field: str, message: str) -> None:
    errors.setdefault(field, []).append(message)


def is_blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


def add_years(d: date, years: int) -> date:
    """Sposta la data di `years` anni; il 29/02 diventa 28/02 negli anni non bisestili."""
    try:
        return d.replace(year=d.year + years)
    except ValueError:
        return d.replace(year=d.year + years, day=28)
