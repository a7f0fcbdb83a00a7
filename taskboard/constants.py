"""
Constants for task status, priority, type, filters and weekdays.
"""
from __future__ import annotations

# Task status (two-valued)
TASK_STATUS_PENDING = "Pending"
TASK_STATUS_DONE = "Done"

# Priority (rank: lower sorts first)
PRIORITY_HIGH = "High"
PRIORITY_MEDIUM = "Medium"
PRIORITY_LOW = "Low"
PRIORITY_RANK = {PRIORITY_HIGH: 0, PRIORITY_MEDIUM: 1, PRIORITY_LOW: 2}
DEFAULT_PRIORITY = PRIORITY_MEDIUM

# Task type (display only)
TASK_TYPE_HOMEWORK = "Homework"
TASK_TYPE_PLAN = "Plan"
TASK_TYPE_GROUP_WORK = "Group Work"
TASK_TYPES = (TASK_TYPE_HOMEWORK, TASK_TYPE_PLAN, TASK_TYPE_GROUP_WORK)
DEFAULT_TASK_TYPE = TASK_TYPE_HOMEWORK

# Subject used when a task has none
UNCATEGORIZED = "uncategorized"

# Date buckets
BUCKET_OVERDUE = "overdue"
BUCKET_DUE_TODAY = "due_today"
BUCKET_DUE_TOMORROW = "due_tomorrow"
BUCKET_DUE_THIS_WEEK = "due_this_week"
BUCKET_UPCOMING = "upcoming"
BUCKET_UNSCHEDULED = "unscheduled"
BUCKET_DONE = "done"

# Days ahead counted as "this week" (inclusive)
WEEK_WINDOW_DAYS = 7
# Days ahead highlighted as urgent (inclusive)
URGENT_WINDOW_DAYS = 3
# Items shown in the upcoming panel
UPCOMING_LIMIT = 5

# View filters
FILTER_ALL = "all"
FILTER_TODAY = "today"
FILTER_WEEK = "week"
FILTER_OVERDUE = "overdue"
FILTER_HIGH = "high"
VIEW_FILTERS = (FILTER_ALL, FILTER_TODAY, FILTER_WEEK, FILTER_OVERDUE, FILTER_HIGH)
SUBJECT_FILTER_ALL = "all"

# Timetable
WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Notification kinds (colour of the message)
NOTIFY_PRIMARY = "primary"
NOTIFY_SUCCESS = "success"
NOTIFY_WARNING = "warning"
NOTIFY_DANGER = "danger"
