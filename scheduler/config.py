DEFAULT_STUDY_DAYS = 2
DEFAULT_REVIEW_DAYS = (7, 14, 28)  # checkpoint offsets, in days before the reference date

DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

LEARNING_STATUS = "learning"

# Upper bound for study_days and each review offset (about ten years)
MAX_SCHEDULE_DAYS = 3650
