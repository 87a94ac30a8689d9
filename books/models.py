import uuid

from django.db import models
from django.utils import timezone


class BookStatus(models.TextChoices):
    STUDYING = "studying"
    STUDIED = "studied"


class ItemStatus(models.TextChoices):
    LEARNING = "learning"
    LEARNED = "learned"


class Book(models.Model):
    """
    Common shape of a word-book or kanji-book.
    created_date is the calendar day the book belongs to and is what
    scheduling compares against; created_at is only a timestamp.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner_id = models.UUIDField()
    title = models.CharField(max_length=255)
    status = models.CharField(
        max_length=16, choices=BookStatus.choices, default=BookStatus.STUDYING
    )
    show_front = models.BooleanField(default=True)
    created_date = models.DateField()
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def __str__(self):
        return self.title


class WordBook(Book):
    class Meta:
        indexes = [
            models.Index(fields=["owner_id", "created_date"], name="wordbook_owner_date_idx"),
        ]


class KanjiBook(Book):
    class Meta:
        indexes = [
            models.Index(fields=["owner_id", "created_date"], name="kanjibook_owner_date_idx"),
        ]


class Word(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    book = models.ForeignKey(WordBook, on_delete=models.CASCADE, related_name="words")
    japanese = models.CharField(max_length=255)
    meaning = models.CharField(max_length=255)
    pronunciation = models.CharField(max_length=255, blank=True, default="")
    status = models.CharField(
        max_length=16, choices=ItemStatus.choices, default=ItemStatus.LEARNING
    )
    created_at = models.DateTimeField(default=timezone.now)


class Kanji(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    book = models.ForeignKey(KanjiBook, on_delete=models.CASCADE, related_name="kanjis")
    character = models.CharField(max_length=8)
    meaning = models.CharField(max_length=255)
    on_reading = models.CharField(max_length=255, blank=True, default="")
    kun_reading = models.CharField(max_length=255, blank=True, default="")
    status = models.CharField(
        max_length=16, choices=ItemStatus.choices, default=ItemStatus.LEARNING
    )
    created_at = models.DateTimeField(default=timezone.now)
