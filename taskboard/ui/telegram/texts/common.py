MENU_DASHBOARD = "📊 Dashboard"
MENU_TASKS = "📝 Tasks"
MENU_ADD_TASK = "➕ Add task"
MENU_SUBJECTS = "📚 Subjects"
MENU_TIMETABLE = "🗓 Timetable"

CHOOSE_ACTION = "Choose an action."
CANCELLED = "Cancelled."
NOT_AUTHORIZED = "Not authorized."
SAVE_FAILED = "Could not save. The list was reloaded."

MENU_LABELS = (MENU_DASHBOARD, MENU_TASKS, MENU_ADD_TASK, MENU_SUBJECTS, MENU_TIMETABLE)
