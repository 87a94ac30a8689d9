import structlog
from ..config import LEARNING_STATUS
from ..data import gateway
from ..data.repos import get_or_create_review, get_or_create_schedule
from ..domain.enums import CollectionKind
from ..domain.logic import (
    ensure_kind,
    ensure_reference_date,
    exclude_reviewed,
    review_checkpoints,
    study_window,
)

logger = structlog.get_logger()


def list_scheduled_collections(user_id, kind, reference_date):
    """
    Collections of kind that are in first-pass study on reference_date and
    those sitting on a review checkpoint that the user has not handled yet.

    The two lists come from independent queries, so a collection may be in
    both. study_statistics covers the items of the study list only and
    carries the ledger's own review_date, which can lag reference_date.
    """
    kind = ensure_kind(kind)
    ensure_reference_date(reference_date)

    sched = get_or_create_schedule(user_id)
    review = get_or_create_review(user_id, reference_date)

    window = study_window(sched.study_days, reference_date)
    checkpoints = review_checkpoints(sched.review_days, reference_date)

    study = gateway.find_by_owner_and_date_range(user_id, kind, window.start, window.end)
    due = gateway.find_by_owner_and_dates(user_id, kind, checkpoints)
    pending = exclude_reviewed(due, review.reviewed_ids(kind))

    study_ids = [book.id for book in study]
    statistics = {
        "total": gateway.count_items(kind, study_ids),
        "learning": gateway.count_items(kind, study_ids, status=LEARNING_STATUS),
        "review_date": str(review.review_date),
    }

    logger.info("scheduled_listing",
        user_id=str(user_id),
        kind=kind.value,
        reference_date=reference_date,
        study_start=window.start,
        checkpoints=checkpoints,
        study_count=len(study),
        due_count=len(due),
        review_count=len(pending),
    )

    return {"study": study, "review": pending, "study_statistics": statistics}


def list_scheduled_books(user_id, reference_date):
    """Scheduled word-books and kanji-books for one reference date."""
    return {
        "word_books": list_scheduled_collections(user_id, CollectionKind.WORD_BOOK, reference_date),
        "kanji_books": list_scheduled_collections(user_id, CollectionKind.KANJI_BOOK, reference_date),
    }
