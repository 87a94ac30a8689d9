import uuid

import pytest

from books.models import Kanji, KanjiBook, Word, WordBook


@pytest.fixture
def user_id():
    return uuid.uuid4()


@pytest.fixture
def make_word_book():
    def _make(owner_id, created_date, title="Word book", statuses=()):
        book = WordBook.objects.create(owner_id=owner_id, title=title, created_date=created_date)
        for i, status in enumerate(statuses):
            Word.objects.create(book=book, japanese=f"単語{i}", meaning=f"word {i}", status=status)
        return book

    return _make


@pytest.fixture
def make_kanji_book():
    def _make(owner_id, created_date, title="Kanji book", statuses=()):
        book = KanjiBook.objects.create(owner_id=owner_id, title=title, created_date=created_date)
        for i, status in enumerate(statuses):
            Kanji.objects.create(book=book, character="字", meaning=f"kanji {i}", status=status)
        return book

    return _make
