ASK_DAY = "Which day?"
ASK_START = "Start time? (HHMM or HH:MM)"
ASK_END = "End time? (HHMM or HH:MM)"
ASK_SUBJECT = "Subject?"
ASK_ROOM = "Room? (optional)"
INVALID_TIME = "Invalid time format. Use HHMM or HH:MM."
ADDED = "Class added."
DELETED = "Class removed."
EDIT_START = "Re-enter the class. Which day?"
UPDATED = "Class updated."
