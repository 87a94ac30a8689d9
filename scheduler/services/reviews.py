import structlog
from ..data.gateway import find_by_id
from ..data.repos import add_reviewed_id, reset_review as clear_review
from ..domain.enums import KIND_LABELS
from ..domain.errors import Forbidden, NotFound
from ..domain.logic import (
    ensure_collection_id,
    ensure_kind,
    ensure_reference_date,
    ensure_user_id,
)

logger = structlog.get_logger()


def mark_reviewed(user_id, kind, collection_id, reference_date):
    user_id = ensure_user_id(user_id)
    kind = ensure_kind(kind)
    ensure_reference_date(reference_date)
    collection_id = ensure_collection_id(collection_id)

    logger.info("review_received",
        user_id=str(user_id),
        kind=kind.value,
        collection_id=collection_id,
        reference_date=reference_date,
    )

    book = find_by_id(kind, collection_id)
    if book is None:
        raise NotFound(f"{KIND_LABELS[kind]} {collection_id} not found")
    if book.owner_id != user_id:
        raise Forbidden(f"{KIND_LABELS[kind]} {collection_id} belongs to another user")

    review, added = add_reviewed_id(user_id, reference_date, kind, collection_id)

    if not added:
        # Fast path: id already in the ledger, nothing written
        logger.info("review_mark_reused",
            user_id=str(user_id),
            kind=kind.value,
            collection_id=collection_id,
            review_date=str(review.review_date),
        )
        return review

    logger.info("review_marked",
        user_id=str(user_id),
        kind=kind.value,
        collection_id=collection_id,
        review_date=str(review.review_date),
        reviewed_count=len(review.reviewed_ids(kind)),
    )
    return review


def reset_review(user_id, reference_date):
    ensure_reference_date(reference_date)
    review = clear_review(user_id, reference_date)
    logger.info("review_reset",
        user_id=str(user_id),
        review_date=str(review.review_date),
    )
    return review
