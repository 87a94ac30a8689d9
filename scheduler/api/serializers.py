from rest_framework import serializers

from ..config import MAX_SCHEDULE_DAYS
from ..utils.dates import is_valid_date_string


def validate_date_string(value):
    if not is_valid_date_string(value):
        raise serializers.ValidationError("current_date must be a valid YYYY-MM-DD date.")
    return value


class CurrentDateSerializer(serializers.Serializer):
    current_date = serializers.CharField(validators=[validate_date_string])


class ScheduleInSerializer(CurrentDateSerializer):
    study_days = serializers.IntegerField(min_value=0, max_value=MAX_SCHEDULE_DAYS)
    review_days = serializers.ListField(
        child=serializers.IntegerField(min_value=1, max_value=MAX_SCHEDULE_DAYS), allow_empty=True
    )


class ReviewInSerializer(CurrentDateSerializer):
    book_id = serializers.UUIDField()


class ScheduleSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    user_id = serializers.UUIDField()
    study_days = serializers.IntegerField()
    review_days = serializers.ListField(child=serializers.IntegerField())
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class ReviewSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    user_id = serializers.UUIDField()
    # Freshly written rows still hold the string they were given
    review_date = serializers.CharField()
    word_book_reviews = serializers.ListField(child=serializers.CharField())
    kanji_book_reviews = serializers.ListField(child=serializers.CharField())
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class BookSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    title = serializers.CharField()
    status = serializers.CharField()
    show_front = serializers.BooleanField()
    created_date = serializers.CharField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class StudyStatisticsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    learning = serializers.IntegerField()
    review_date = serializers.CharField()


class ScheduledBooksSerializer(serializers.Serializer):
    study = BookSerializer(many=True)
    review = BookSerializer(many=True)
    study_statistics = StudyStatisticsSerializer()


class AllScheduledBooksSerializer(serializers.Serializer):
    word_books = ScheduledBooksSerializer()
    kanji_books = ScheduledBooksSerializer()
