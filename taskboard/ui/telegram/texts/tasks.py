ASK_TITLE = "What is the task? (one message)"
ASK_DUE = (
    "Due date?\n"
    "YYYY-MM-DD, DD.MM.YYYY, DD.MM, 'today' or 'tomorrow'."
)
INVALID_DUE = "Could not read that date. Try again, e.g. 2024-06-14 or 14.06."
ASK_SUBJECT = "Subject? Pick one or type a new name."
ASK_PRIORITY = "Priority?"
ASK_TYPE = "Type?"
ASK_TAGS = "Tags? Comma separated, e.g. exam, reading."
EMPTY_TITLE = "An empty task is not allowed. Type the task."
ADDED = "Task added."
DELETED = "Deleted 🗑️"
MARKED_DONE = "Marked done ✅"
MARKED_PENDING = "Back to pending ↩️"
NO_TASKS = "No tasks yet. Add one with ➕ Add task."
LIST_HEADER = "<b>📝 Tasks</b> (pending first, by priority)"
ASK_DESCRIPTION = "Description? (optional)"
ASK_ESTIMATE = "Estimated time? e.g. 30 min, 2h (optional)"
EDIT_WHICH = "Editing <b>{title}</b>. What do you want to change?"
EDIT_PROMPTS = {
    "title": "New title?",
    "due": ASK_DUE,
    "subject": "New subject?",
    "priority": ASK_PRIORITY,
    "type": ASK_TYPE,
    "description": "New description?",
    "estimate": ASK_ESTIMATE,
    "tags": ASK_TAGS,
}
INVALID_PRIORITY = "Priority must be High, Medium or Low."
INVALID_TYPE = "Type must be Homework, Plan or Group Work."
EDITED = "Task updated ✏️"
