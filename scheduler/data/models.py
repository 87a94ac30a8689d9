from django.db import models

from ..config import DEFAULT_REVIEW_DAYS, DEFAULT_STUDY_DAYS
from ..domain.enums import REVIEW_FIELDS


def default_review_days():
    return list(DEFAULT_REVIEW_DAYS)


class Schedule(models.Model):
    user_id = models.UUIDField(unique=True)
    study_days = models.PositiveIntegerField(default=DEFAULT_STUDY_DAYS)
    review_days = models.JSONField(default=default_review_days)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)


class Review(models.Model):
    """
    Per-user ledger of collections already handled for review_date.
    Stale rows are kept as-is; only an explicit reset or a schedule
    change re-anchors them.
    """

    user_id = models.UUIDField(unique=True)
    review_date = models.DateField()
    word_book_reviews = models.JSONField(default=list)
    kanji_book_reviews = models.JSONField(default=list)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def reviewed_ids(self, kind):
        return list(getattr(self, REVIEW_FIELDS[kind]))
