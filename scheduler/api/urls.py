from django.urls import path
from ..domain.enums import CollectionKind
from .views import (
    AllScheduledBooksView,
    MarkReviewedView,
    ResetReviewView,
    ScheduledBooksView,
    ScheduleView,
)

urlpatterns = [
    path("users/<uuid:user_id>/schedule", ScheduleView.as_view(), name="schedule"),
    path(
        "users/<uuid:user_id>/schedule/books",
        AllScheduledBooksView.as_view(),
        name="scheduled-books",
    ),
    path(
        "users/<uuid:user_id>/schedule/word-books",
        ScheduledBooksView.as_view(),
        {"kind": CollectionKind.WORD_BOOK},
        name="scheduled-word-books",
    ),
    path(
        "users/<uuid:user_id>/schedule/kanji-books",
        ScheduledBooksView.as_view(),
        {"kind": CollectionKind.KANJI_BOOK},
        name="scheduled-kanji-books",
    ),
    path(
        "users/<uuid:user_id>/reviews/word-books",
        MarkReviewedView.as_view(),
        {"kind": CollectionKind.WORD_BOOK},
        name="review-word-book",
    ),
    path(
        "users/<uuid:user_id>/reviews/kanji-books",
        MarkReviewedView.as_view(),
        {"kind": CollectionKind.KANJI_BOOK},
        name="review-kanji-book",
    ),
    path("users/<uuid:user_id>/reviews/reset", ResetReviewView.as_view(), name="review-reset"),
]
