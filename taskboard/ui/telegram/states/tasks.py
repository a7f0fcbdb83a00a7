from aiogram.fsm.state import State, StatesGroup


class TasksFlow(StatesGroup):
    add_title = State()
    add_due = State()
    add_subject = State()
    add_priority = State()
    add_type = State()
    add_tags = State()
    add_description = State()
    add_estimate = State()

    edit_field = State()
    edit_value = State()


class SubjectsFlow(StatesGroup):
    add_name = State()
    rename_name = State()


class TimetableFlow(StatesGroup):
    day = State()
    start = State()
    end = State()
    subject = State()
    room = State()
