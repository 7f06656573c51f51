# career_quiz/constants.py
from enum import Enum


class SessionStatus(str, Enum):
    INCOMPLETE = "incomplete"
    COMPLETE = "complete"


class ReportFormat(str, Enum):
    JSON = "json"
    HTML = "html"


# Cookie carrying the admin console token
ADMIN_COOKIE_NAME = "adminToken"

# Placeholder used in report fields the respondent left empty
NOT_SPECIFIED = "Not specified"

SESSION_ID_PREFIX = "quiz_"
