from rest_framework import exceptions
from rest_framework.views import exception_handler as drf_exception_handler

from ..domain.errors import Forbidden, InvalidArgument, NotFound

API_ERRORS = (
    (InvalidArgument, exceptions.ValidationError),
    (NotFound, exceptions.NotFound),
    (Forbidden, exceptions.PermissionDenied),
)


def _first_message(data):
    if isinstance(data, dict):
        if not data:
            return "Invalid request."
        if "detail" in data:
            return str(data["detail"])
        field, messages = next(iter(data.items()))
        if field == "non_field_errors":
            return _first_message(messages)
        return f"{field}: {_first_message(messages)}"
    if isinstance(data, list) and data:
        return _first_message(data[0])
    return str(data)


def exception_handler(exc, context):
    """
    DRF handler that also understands engine errors and flattens every
    error body to {"ok": false, "error": <message>, "data": null}.
    """
    for error_cls, api_cls in API_ERRORS:
        if isinstance(exc, error_cls):
            exc = api_cls(str(exc))
            break

    response = drf_exception_handler(exc, context)
    if response is None:
        return None

    response.data = {"ok": False, "error": _first_message(response.data), "data": None}
    return response
