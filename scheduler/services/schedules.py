from django.db import transaction
import structlog
from ..data.repos import get_or_create_schedule, reset_review, upsert_schedule as store_schedule
from ..domain.logic import ensure_reference_date, ensure_schedule_values

logger = structlog.get_logger()


def get_schedule(user_id):
    return get_or_create_schedule(user_id)


def upsert_schedule(user_id, study_days, review_days, reference_date):
    study_days, review_days = ensure_schedule_values(study_days, review_days)
    ensure_reference_date(reference_date)

    # "Already reviewed" only means something under the schedule that
    # produced it, so the ledger is cleared together with the change.
    with transaction.atomic():
        sched = store_schedule(user_id, study_days, review_days)
        review = reset_review(user_id, reference_date)

    logger.info("schedule_upserted",
        user_id=str(user_id),
        study_days=sched.study_days,
        review_days=sched.review_days,
        review_date=str(review.review_date),
    )
    return sched
