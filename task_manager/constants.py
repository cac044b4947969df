"""
Shared messages and business-rule limits for the task manager.

Kept in one place so the validation layer, the service and the HTTP error
handlers (and the tests asserting on them) all agree on the exact wording.
"""

# Error messages
TASK_NOT_FOUND = "Task not found with id {task_id}"
TASK_DELETED_SUCCESS = "Task deleted successfully."
DATABASE_WRITE_ERROR = "Failed to save task to the database."
MALFORMED_JSON = "Malformed JSON request"
UNEXPECTED_ERROR = "An unexpected error occurred"

# Validation messages
TITLE_REQUIRED = "Title is required"
TITLE_TOO_LONG = "Title must be 100 characters or less"
DESCRIPTION_TOO_LONG = "Description must be 200 characters or less"
STATUS_REQUIRED = "Status is required"
DUE_DATE_REQUIRED = "Due date is required"
DUE_DATE_FUTURE = "Due date must be in the future"

# Business rule values
MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 200

# tasknum is a signed 32-bit integer column
MIN_TASKNUM = -(2**31)
MAX_TASKNUM = 2**31 - 1
