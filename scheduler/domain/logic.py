import uuid
from dataclasses import dataclass
from datetime import date

from .enums import CollectionKind
from .errors import InvalidArgument
from ..config import MAX_SCHEDULE_DAYS
from ..utils.dates import format_date, is_valid_date_string, subtract_days

EARLIEST_DATE = format_date(date.min)


@dataclass(frozen=True)
class StudyWindow:
    start: str
    end: str


def _days_before(reference_date: str, days: int):
    try:
        return subtract_days(reference_date, days)
    except OverflowError:
        return None


def study_window(study_days: int, reference_date: str) -> StudyWindow:
    """Closed range of creation dates still in first-pass study."""
    start = _days_before(reference_date, study_days) or EARLIEST_DATE
    return StudyWindow(start=start, end=reference_date)


def review_checkpoints(review_days, reference_date: str) -> list:
    """
    One checkpoint date per configured offset, in configuration order.
    Checkpoints are single days, not ranges: a collection is due only on the
    exact anniversary of its creation date. Offsets reaching before the
    first representable day have no checkpoint.
    """
    checkpoints = (_days_before(reference_date, days) for days in review_days)
    return [day for day in checkpoints if day is not None]


def exclude_reviewed(collections, reviewed_ids) -> list:
    reviewed = {str(i) for i in reviewed_ids}
    return [c for c in collections if str(c.id) not in reviewed]


# Argument checks, run before any state is touched

def ensure_reference_date(value, name: str = "reference_date") -> str:
    if not is_valid_date_string(value):
        raise InvalidArgument(f"{name} must be a valid YYYY-MM-DD date, got {value!r}")
    return value


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def ensure_schedule_values(study_days, review_days):
    if not _is_int(study_days) or not 0 <= study_days <= MAX_SCHEDULE_DAYS:
        raise InvalidArgument(
            f"study_days must be an integer between 0 and {MAX_SCHEDULE_DAYS}, got {study_days!r}"
        )
    if isinstance(review_days, (str, bytes)) or not hasattr(review_days, "__iter__"):
        raise InvalidArgument("review_days must be a list of positive integers")
    review_days = list(review_days)
    for days in review_days:
        if not _is_int(days) or not 0 < days <= MAX_SCHEDULE_DAYS:
            raise InvalidArgument(
                f"review_days elements must be integers between 1 and {MAX_SCHEDULE_DAYS}, got {days!r}"
            )
    return study_days, review_days


def ensure_user_id(value) -> uuid.UUID:
    try:
        return uuid.UUID(str(value))
    except ValueError:
        raise InvalidArgument(f"user id must be a UUID, got {value!r}")


def ensure_kind(value) -> CollectionKind:
    try:
        return CollectionKind(value)
    except ValueError:
        raise InvalidArgument(f"unknown collection kind {value!r}")


def ensure_collection_id(value) -> str:
    try:
        return str(uuid.UUID(str(value)))
    except ValueError:
        raise InvalidArgument(f"collection id must be a UUID, got {value!r}")
