import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


def _book_fields():
    return [
        ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
        ("owner_id", models.UUIDField()),
        ("title", models.CharField(max_length=255)),
        (
            "status",
            models.CharField(
                choices=[("studying", "Studying"), ("studied", "Studied")],
                default="studying",
                max_length=16,
            ),
        ),
        ("show_front", models.BooleanField(default=True)),
        ("created_date", models.DateField()),
        ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
        ("updated_at", models.DateTimeField(auto_now=True)),
    ]


ITEM_STATUS = models.CharField(
    choices=[("learning", "Learning"), ("learned", "Learned")],
    default="learning",
    max_length=16,
)


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="KanjiBook",
            fields=_book_fields(),
            options={
                "indexes": [
                    models.Index(fields=["owner_id", "created_date"], name="kanjibook_owner_date_idx")
                ],
            },
        ),
        migrations.CreateModel(
            name="WordBook",
            fields=_book_fields(),
            options={
                "indexes": [
                    models.Index(fields=["owner_id", "created_date"], name="wordbook_owner_date_idx")
                ],
            },
        ),
        migrations.CreateModel(
            name="Word",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("japanese", models.CharField(max_length=255)),
                ("meaning", models.CharField(max_length=255)),
                ("pronunciation", models.CharField(blank=True, default="", max_length=255)),
                ("status", ITEM_STATUS.clone()),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "book",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="words",
                        to="books.wordbook",
                    ),
                ),
            ],
        ),
        migrations.CreateModel(
            name="Kanji",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("character", models.CharField(max_length=8)),
                ("meaning", models.CharField(max_length=255)),
                ("on_reading", models.CharField(blank=True, default="", max_length=255)),
                ("kun_reading", models.CharField(blank=True, default="", max_length=255)),
                ("status", ITEM_STATUS.clone()),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "book",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="kanjis",
                        to="books.kanjibook",
                    ),
                ),
            ],
        ),
    ]
