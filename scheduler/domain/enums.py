from enum import Enum


class CollectionKind(str, Enum):
    WORD_BOOK = "word-books"
    KANJI_BOOK = "kanji-books"


# Review ledger column per kind
REVIEW_FIELDS = {
    CollectionKind.WORD_BOOK: "word_book_reviews",
    CollectionKind.KANJI_BOOK: "kanji_book_reviews",
}

KIND_LABELS = {
    CollectionKind.WORD_BOOK: "word book",
    CollectionKind.KANJI_BOOK: "kanji book",
}
