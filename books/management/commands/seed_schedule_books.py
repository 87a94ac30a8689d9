import uuid
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils import timezone

from books.models import ItemStatus, Kanji, KanjiBook, Word, WordBook
from scheduler.utils.dates import format_date, is_valid_date_string, subtract_days

TEST_MARKER = "(s)"

SAMPLE_WORDS = [
    ("勉強", "study", "べんきょう"),
    ("復習", "review", "ふくしゅう"),
    ("単語", "word", "たんご"),
    ("漢字", "kanji", "かんじ"),
]
SAMPLE_KANJIS = [
    ("学", "learn", "ガク", "まな.ぶ"),
    ("習", "practice", "シュウ", "なら.う"),
    ("読", "read", "ドク", "よ.む"),
    ("書", "write", "ショ", "か.く"),
]


def books_for_day(days_ago):
    # Zigzag: 2 books on even offsets, 1 on odd ones
    return 2 if days_ago % 2 == 0 else 1


def cycle_samples(samples, count):
    return [samples[i % len(samples)] for i in range(count)]


def item_status(index):
    return ItemStatus.LEARNING if index % 2 == 0 else ItemStatus.LEARNED


class Command(BaseCommand):
    help = "Create dated word-books and kanji-books for exercising the review schedule"

    def add_arguments(self, parser):
        parser.add_argument("--owner", required=True, help="UUID of the owning user")
        parser.add_argument(
            "--days", type=int, default=60, help="How many days back to create books for"
        )
        parser.add_argument(
            "--today", default=None, help="Reference date (YYYY-MM-DD), defaults to today"
        )
        parser.add_argument("--items", type=int, default=4, help="Items per book")

    def handle(self, *args, **options):
        try:
            owner_id = uuid.UUID(str(options["owner"]))
        except ValueError:
            raise CommandError(f"--owner must be a UUID, got {options['owner']!r}")

        today = options.get("today") or format_date(timezone.localdate())
        if not is_valid_date_string(today):
            raise CommandError(f"--today must be a valid YYYY-MM-DD date, got {today!r}")

        days = options["days"]
        items = options["items"]
        if days < 0 or items < 0:
            raise CommandError("--days and --items must not be negative")

        with transaction.atomic():
            deleted_words, _ = WordBook.objects.filter(
                owner_id=owner_id, title__contains=TEST_MARKER
            ).delete()
            deleted_kanjis, _ = KanjiBook.objects.filter(
                owner_id=owner_id, title__contains=TEST_MARKER
            ).delete()
            self.stdout.write(
                self.style.SUCCESS(
                    f"Removed {deleted_words + deleted_kanjis} previously seeded rows"
                )
            )

            word_books = kanji_books = 0
            for days_ago in range(days, -1, -1):
                created_date = subtract_days(today, days_ago)
                for n in range(1, books_for_day(days_ago) + 1):
                    label = f"{TEST_MARKER} {created_date} #{n}"
                    self._create_word_book(owner_id, label, created_date, items)
                    self._create_kanji_book(owner_id, label, created_date, items)
                    word_books += 1
                    kanji_books += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Seeded {word_books} word books and {kanji_books} kanji books "
                f"from {subtract_days(today, days)} to {today}"
            )
        )

    def _create_word_book(self, owner_id, label, created_date, items):
        book = WordBook.objects.create(
            owner_id=owner_id, title=f"{label} words", created_date=created_date
        )
        Word.objects.bulk_create([
            Word(
                book=book,
                japanese=japanese,
                meaning=meaning,
                pronunciation=reading,
                status=item_status(i),
            )
            for i, (japanese, meaning, reading) in enumerate(cycle_samples(SAMPLE_WORDS, items))
        ])
        return book

    def _create_kanji_book(self, owner_id, label, created_date, items):
        book = KanjiBook.objects.create(
            owner_id=owner_id, title=f"{label} kanji", created_date=created_date
        )
        Kanji.objects.bulk_create([
            Kanji(
                book=book,
                character=character,
                meaning=meaning,
                on_reading=on_reading,
                kun_reading=kun_reading,
                status=item_status(i),
            )
            for i, (character, meaning, on_reading, kun_reading) in enumerate(
                cycle_samples(SAMPLE_KANJIS, items)
            )
        ])
        return book
