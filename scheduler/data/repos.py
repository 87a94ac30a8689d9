from django.db import transaction

from ..config import DEFAULT_STUDY_DAYS
from ..domain.enums import REVIEW_FIELDS
from .models import Review, Schedule, default_review_days


def get_or_create_schedule(user_id):
    sched, _ = Schedule.objects.get_or_create(
        user_id=user_id,
        defaults={"study_days": DEFAULT_STUDY_DAYS, "review_days": default_review_days()},
    )
    return sched


def upsert_schedule(user_id, study_days, review_days):
    sched, _ = Schedule.objects.update_or_create(
        user_id=user_id,
        defaults={"study_days": study_days, "review_days": list(review_days)},
    )
    return sched


def get_or_create_review(user_id, reference_date):
    """
    Return the user's review ledger untouched, even when it is anchored to
    another day. A missing ledger is created empty at reference_date.
    """
    review, _ = Review.objects.get_or_create(
        user_id=user_id,
        defaults={
            "review_date": reference_date,
            "word_book_reviews": [],
            "kanji_book_reviews": [],
        },
    )
    return review


def get_or_create_review_for_update(user_id, reference_date):
    """
    Fetch the review row and lock it for update to avoid lost ids.
    Create if missing. Must run inside transaction.atomic().
    """
    try:
        return Review.objects.select_for_update().get(user_id=user_id)
    except Review.DoesNotExist:
        review = get_or_create_review(user_id, reference_date)
        # Lock the just-created row
        return Review.objects.select_for_update().get(pk=review.pk)


def add_reviewed_id(user_id, reference_date, kind, collection_id):
    """
    Set-union of collection_id into the ledger column for kind.
    Returns (review, added); added is False when the id was already there.
    """
    field = REVIEW_FIELDS[kind]
    collection_id = str(collection_id)
    with transaction.atomic():
        review = get_or_create_review_for_update(user_id, reference_date)
        reviewed = list(getattr(review, field))
        if collection_id in reviewed:
            return review, False
        reviewed.append(collection_id)
        setattr(review, field, reviewed)
        review.save(update_fields=[field, "updated_at"])
    return review, True


def reset_review(user_id, reference_date):
    review, _ = Review.objects.update_or_create(
        user_id=user_id,
        defaults={
            "review_date": reference_date,
            "word_book_reviews": [],
            "kanji_book_reviews": [],
        },
    )
    return review
