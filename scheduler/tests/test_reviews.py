import uuid

import pytest

from scheduler.data.models import Review
from scheduler.data import repos
from scheduler.data.repos import get_or_create_review
from scheduler.domain.enums import CollectionKind
from scheduler.domain.errors import Forbidden, InvalidArgument, NotFound
from scheduler.services.reviews import mark_reviewed, reset_review

WORD = CollectionKind.WORD_BOOK
KANJI = CollectionKind.KANJI_BOOK


@pytest.mark.django_db
def test_mark_creates_ledger_anchored_at_reference_date(user_id, make_word_book):
    book = make_word_book(user_id, "2026-01-08")

    review = mark_reviewed(user_id, WORD, book.id, "2026-01-15")

    assert review.word_book_reviews == [str(book.id)]
    assert review.kanji_book_reviews == []
    assert str(Review.objects.get(user_id=user_id).review_date) == "2026-01-15"


@pytest.mark.django_db
def test_mark_is_idempotent(user_id, make_word_book):
    book = make_word_book(user_id, "2026-01-08")

    once = mark_reviewed(user_id, WORD, book.id, "2026-01-15")
    twice = mark_reviewed(user_id, WORD, str(book.id), "2026-01-15")

    stored = Review.objects.get(user_id=user_id)
    assert once.word_book_reviews == twice.word_book_reviews == [str(book.id)]
    assert stored.word_book_reviews == [str(book.id)]


@pytest.mark.django_db
def test_mark_accumulates_distinct_ids(user_id, make_word_book, make_kanji_book):
    first = make_word_book(user_id, "2026-01-08")
    second = make_word_book(user_id, "2026-01-01")
    kanji = make_kanji_book(user_id, "2026-01-08")

    mark_reviewed(user_id, WORD, first.id, "2026-01-15")
    mark_reviewed(user_id, WORD, second.id, "2026-01-15")
    review = mark_reviewed(user_id, KANJI, kanji.id, "2026-01-15")

    assert review.word_book_reviews == [str(first.id), str(second.id)]
    assert review.kanji_book_reviews == [str(kanji.id)]


@pytest.mark.django_db
def test_mark_unknown_collection_is_not_found(user_id):
    with pytest.raises(NotFound):
        mark_reviewed(user_id, WORD, uuid.uuid4(), "2026-01-15")

    assert not Review.objects.filter(user_id=user_id).exists()


@pytest.mark.django_db
def test_mark_checks_the_table_of_the_given_kind(user_id, make_word_book):
    book = make_word_book(user_id, "2026-01-08")

    with pytest.raises(NotFound):
        mark_reviewed(user_id, KANJI, book.id, "2026-01-15")


@pytest.mark.django_db
def test_mark_someone_elses_collection_is_forbidden(user_id, make_word_book):
    book = make_word_book(uuid.uuid4(), "2026-01-08")

    with pytest.raises(Forbidden):
        mark_reviewed(user_id, WORD, book.id, "2026-01-15")

    assert not Review.objects.filter(user_id=user_id).exists()


@pytest.mark.django_db
@pytest.mark.parametrize(
    "kind, collection_id, reference_date",
    [
        ("notebooks", uuid.uuid4(), "2026-01-15"),
        (WORD, "not-a-uuid", "2026-01-15"),
        (WORD, uuid.uuid4(), "2026-13-45"),
    ],
)
def test_mark_rejects_bad_arguments(user_id, kind, collection_id, reference_date):
    with pytest.raises(InvalidArgument):
        mark_reviewed(user_id, kind, collection_id, reference_date)


@pytest.mark.django_db
def test_stale_ledger_is_not_auto_reset(user_id, make_word_book):
    first = make_word_book(user_id, "2026-01-08")
    second = make_word_book(user_id, "2026-01-09")
    mark_reviewed(user_id, WORD, first.id, "2026-01-15")

    review = mark_reviewed(user_id, WORD, second.id, "2026-01-16")

    assert str(review.review_date) == "2026-01-15"
    assert review.word_book_reviews == [str(first.id), str(second.id)]

    untouched = get_or_create_review(user_id, "2026-01-20")
    assert str(untouched.review_date) == "2026-01-15"


@pytest.mark.django_db
def test_reset_clears_and_reanchors(user_id, make_word_book, make_kanji_book):
    mark_reviewed(user_id, WORD, make_word_book(user_id, "2026-01-08").id, "2026-01-15")
    mark_reviewed(user_id, KANJI, make_kanji_book(user_id, "2026-01-08").id, "2026-01-15")

    review = reset_review(user_id, "2026-01-16")

    stored = Review.objects.get(user_id=user_id)
    assert review.pk == stored.pk
    assert stored.word_book_reviews == []
    assert stored.kanji_book_reviews == []
    assert str(stored.review_date) == "2026-01-16"


@pytest.mark.django_db
def test_reset_creates_missing_ledger(user_id):
    review = reset_review(user_id, "2026-01-16")

    assert review.word_book_reviews == []
    assert review.kanji_book_reviews == []
    assert str(Review.objects.get(user_id=user_id).review_date) == "2026-01-16"


@pytest.mark.django_db
def test_reset_rejects_bad_date(user_id):
    with pytest.raises(InvalidArgument):
        reset_review(user_id, "2026-02-30")


@pytest.mark.django_db
@pytest.mark.parametrize("spelling", [str.upper, lambda s: s.replace("-", "")])
def test_mark_accepts_any_uuid_spelling_for_owner(user_id, make_word_book, spelling):
    book = make_word_book(user_id, "2026-01-08")

    review = mark_reviewed(spelling(str(user_id)), WORD, book.id, "2026-01-15")

    assert review.word_book_reviews == [str(book.id)]
    assert Review.objects.filter(user_id=user_id).count() == 1


@pytest.mark.django_db
def test_mark_rejects_malformed_user_id(make_word_book):
    book = make_word_book(uuid.uuid4(), "2026-01-08")

    with pytest.raises(InvalidArgument):
        mark_reviewed("someone", WORD, book.id, "2026-01-15")


@pytest.mark.django_db
def test_add_keeps_ids_written_after_callers_read(user_id):
    """A ledger read earlier is not written back over a newer one."""
    stale = get_or_create_review(user_id, "2026-01-15")

    repos.add_reviewed_id(user_id, "2026-01-15", WORD, "first")
    review, added = repos.add_reviewed_id(user_id, "2026-01-15", WORD, "second")

    assert stale.word_book_reviews == []
    assert added is True
    assert review.word_book_reviews == ["first", "second"]


@pytest.mark.django_db
def test_add_unions_with_row_changed_before_locked_read(user_id, monkeypatch):
    get_or_create_review(user_id, "2026-01-15")
    locked_read = repos.get_or_create_review_for_update

    def concurrent_writer_then_lock(uid, reference_date):
        # Another request lands its id just before this one takes the lock
        Review.objects.filter(user_id=uid).update(word_book_reviews=["other"])
        return locked_read(uid, reference_date)

    monkeypatch.setattr(repos, "get_or_create_review_for_update", concurrent_writer_then_lock)

    review, added = repos.add_reviewed_id(user_id, "2026-01-15", WORD, "mine")

    assert added is True
    assert review.word_book_reviews == ["other", "mine"]
    assert Review.objects.get(user_id=user_id).word_book_reviews == ["other", "mine"]


@pytest.mark.django_db
def test_add_already_present_after_concurrent_write(user_id, monkeypatch):
    get_or_create_review(user_id, "2026-01-15")
    locked_read = repos.get_or_create_review_for_update

    def concurrent_writer_then_lock(uid, reference_date):
        Review.objects.filter(user_id=uid).update(word_book_reviews=["mine"])
        return locked_read(uid, reference_date)

    monkeypatch.setattr(repos, "get_or_create_review_for_update", concurrent_writer_then_lock)

    review, added = repos.add_reviewed_id(user_id, "2026-01-15", WORD, "mine")

    assert added is False
    assert Review.objects.get(user_id=user_id).word_book_reviews == ["mine"]
