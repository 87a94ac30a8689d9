"""
Read-only queries over the books app.

The scheduling engine never creates or edits collections; everything it
needs to know about them goes through these four functions.
"""
from books.models import Kanji, KanjiBook, Word, WordBook

from ..domain.enums import CollectionKind

BOOK_MODELS = {
    CollectionKind.WORD_BOOK: (WordBook, Word),
    CollectionKind.KANJI_BOOK: (KanjiBook, Kanji),
}

NEWEST_FIRST = ("-created_date", "-created_at")


def find_by_owner_and_date_range(owner_id, kind, start_date, end_date):
    book_model, _ = BOOK_MODELS[kind]
    return list(
        book_model.objects.filter(
            owner_id=owner_id, created_date__gte=start_date, created_date__lte=end_date
        ).order_by(*NEWEST_FIRST)
    )


def find_by_owner_and_dates(owner_id, kind, dates):
    book_model, _ = BOOK_MODELS[kind]
    dates = sorted(set(dates))
    if not dates:
        return []
    return list(
        book_model.objects.filter(owner_id=owner_id, created_date__in=dates).order_by(
            *NEWEST_FIRST
        )
    )


def count_items(kind, collection_ids, status=None):
    _, item_model = BOOK_MODELS[kind]
    collection_ids = list(collection_ids)
    if not collection_ids:
        return 0
    qs = item_model.objects.filter(book_id__in=collection_ids)
    if status is not None:
        qs = qs.filter(status=status)
    return qs.count()


def find_by_id(kind, collection_id):
    book_model, _ = BOOK_MODELS[kind]
    return book_model.objects.filter(pk=collection_id).first()
