class SchedulingError(Exception):
    """Base class for errors raised by the scheduling engine."""


class InvalidArgument(SchedulingError):
    pass


class NotFound(SchedulingError):
    pass


class Forbidden(SchedulingError):
    pass
