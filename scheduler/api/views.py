from rest_framework import views, status
from rest_framework.response import Response
import structlog
import uuid
from ..services.listing import list_scheduled_books, list_scheduled_collections
from ..services.reviews import mark_reviewed, reset_review
from ..services.schedules import get_schedule, upsert_schedule
from .serializers import (
    AllScheduledBooksSerializer,
    CurrentDateSerializer,
    ReviewInSerializer,
    ReviewSerializer,
    ScheduleInSerializer,
    ScheduledBooksSerializer,
    ScheduleSerializer,
)

base_logger = structlog.get_logger()


class ScheduleView(views.APIView):
    def get(self, request, user_id):
        logger = base_logger.bind(request_id=str(uuid.uuid4()))

        sched = get_schedule(user_id)

        logger.info(
            "schedule_api_response",
            user_id=str(user_id),
            study_days=sched.study_days,
            review_days=sched.review_days,
        )
        return Response(ScheduleSerializer(sched).data)

    def post(self, request, user_id):
        logger = base_logger.bind(request_id=str(uuid.uuid4()))

        s = ScheduleInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        sched = upsert_schedule(
            user_id,
            s.validated_data["study_days"],
            s.validated_data["review_days"],
            s.validated_data["current_date"],
        )

        logger.info(
            "schedule_upsert_api_response",
            user_id=str(user_id),
            study_days=sched.study_days,
            review_days=sched.review_days,
            current_date=s.validated_data["current_date"],
        )
        return Response(ScheduleSerializer(sched).data)


class ScheduledBooksView(views.APIView):
    def get(self, request, user_id, kind):
        logger = base_logger.bind(request_id=str(uuid.uuid4()))

        qs = CurrentDateSerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        current_date = qs.validated_data["current_date"]

        result = list_scheduled_collections(user_id, kind, current_date)

        logger.info(
            "scheduled_books_api_response",
            user_id=str(user_id),
            kind=kind.value,
            current_date=current_date,
            study_count=len(result["study"]),
            review_count=len(result["review"]),
        )
        return Response(ScheduledBooksSerializer(result).data)


class AllScheduledBooksView(views.APIView):
    def get(self, request, user_id):
        logger = base_logger.bind(request_id=str(uuid.uuid4()))

        qs = CurrentDateSerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        current_date = qs.validated_data["current_date"]

        result = list_scheduled_books(user_id, current_date)

        logger.info(
            "all_scheduled_books_api_response",
            user_id=str(user_id),
            current_date=current_date,
            word_study_count=len(result["word_books"]["study"]),
            word_review_count=len(result["word_books"]["review"]),
            kanji_study_count=len(result["kanji_books"]["study"]),
            kanji_review_count=len(result["kanji_books"]["review"]),
        )
        return Response(AllScheduledBooksSerializer(result).data)


class MarkReviewedView(views.APIView):
    def post(self, request, user_id, kind):
        logger = base_logger.bind(request_id=str(uuid.uuid4()))

        s = ReviewInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        book_id = s.validated_data["book_id"]
        current_date = s.validated_data["current_date"]

        review = mark_reviewed(user_id, kind, book_id, current_date)

        logger.info(
            "mark_reviewed_api_response",
            user_id=str(user_id),
            kind=kind.value,
            book_id=str(book_id),
            current_date=current_date,
            review_date=str(review.review_date),
        )
        return Response(ReviewSerializer(review).data, status=status.HTTP_200_OK)


class ResetReviewView(views.APIView):
    def post(self, request, user_id):
        logger = base_logger.bind(request_id=str(uuid.uuid4()))

        s = CurrentDateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        current_date = s.validated_data["current_date"]

        review = reset_review(user_id, current_date)

        logger.info(
            "reset_review_api_response",
            user_id=str(user_id),
            review_date=str(review.review_date),
        )
        return Response(ReviewSerializer(review).data)
