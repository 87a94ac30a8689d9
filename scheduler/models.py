# Models live in the data layer; re-exported so Django registers them
from .data.models import Review, Schedule  # noqa: F401
