from __future__ import annotations

from datetime import date
from html import escape
from typing import Optional, Sequence

from aiogram import F, Router
from aiogram.filters import Command, CommandObject
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from taskboard.constants import DEFAULT_PRIORITY, DEFAULT_TASK_TYPE, PRIORITY_RANK, TASK_TYPES, UNCATEGORIZED
from taskboard.domain.common.errors import DomainError, ValidationError
from taskboard.domain.subjects.service import SubjectService
from taskboard.domain.tasks.models import NewTask, Task, TaskChanges
from taskboard.domain.tasks.normalize import normalize_tags
from taskboard.domain.tasks.service import TaskService
from taskboard.domain.tasks.views import management_order
from taskboard.ui.telegram.keyboards.common import cancel_kb, main_menu_kb, skip_cancel_kb
from taskboard.ui.telegram.keyboards.tasks import (
    edit_field_kb,
    priority_kb,
    subject_choice_kb,
    task_type_kb,
    tasks_list_kb,
)
from taskboard.ui.telegram.render import render_task_list
from taskboard.ui.telegram.states.tasks import TasksFlow
from taskboard.ui.telegram.texts import common as common_texts
from taskboard.ui.telegram.texts import tasks as texts
from taskboard.ui.telegram.utils.navigation import send_or_edit
from taskboard.ui.telegram.utils.task_form import (
    CLEARABLE_FIELDS,
    EDIT_FIELDS,
    FIELD_PRIORITY,
    FIELD_TYPE,
    changes_from_text,
    cleared_changes,
)
from taskboard.utils import parse_date_input, parse_int_safe

router = Router()


def _list_text(tasks: Sequence[Task], reference_date: date) -> str:
    return texts.LIST_HEADER + "\n" + render_task_list(tasks, reference_date, empty=texts.NO_TASKS)


async def _send_list(
    target: Message,
    tasks: Sequence[Task],
    reference_date: date,
    prefer_edit: bool,
) -> None:
    ordered = management_order(tasks)
    markup = tasks_list_kb(ordered) if ordered else None
    await send_or_edit(target, _list_text(ordered, reference_date), reply_markup=markup, prefer_edit=prefer_edit)


@router.message(Command("tasks"))
@router.message(F.text == common_texts.MENU_TASKS)
async def tasks_cmd(message: Message, state: FSMContext, task_service: TaskService):
    await state.clear()
    try:
        tasks = await task_service.management_list()
    except DomainError as e:
        await message.answer(str(e))
        return
    await _send_list(message, tasks, task_service.reference_date(), prefer_edit=False)


@router.callback_query(F.data.startswith("tk:toggle:"))
async def task_toggle(cb: CallbackQuery, task_service: TaskService):
    task_id = (cb.data or "").split(":")[-1]
    try:
        snapshot = await task_service.snapshot()
        result = await task_service.toggle(snapshot, task_id)
    except DomainError as e:
        await cb.answer(str(e), show_alert=True)
        return

    if not result.ok:
        await cb.answer(common_texts.SAVE_FAILED, show_alert=True)
    elif result.task is not None and result.task.is_done:
        await cb.answer(texts.MARKED_DONE)
    else:
        await cb.answer(texts.MARKED_PENDING)

    await _send_list(cb.message, result.tasks, task_service.reference_date(), prefer_edit=True)


@router.callback_query(F.data.startswith("tk:del:"))
async def task_delete(cb: CallbackQuery, task_service: TaskService):
    task_id = (cb.data or "").split(":")[-1]
    try:
        await task_service.delete_task(task_id)
        tasks = await task_service.snapshot()
    except DomainError as e:
        await cb.answer(str(e), show_alert=True)
        return

    await cb.answer(texts.DELETED)
    await _send_list(cb.message, tasks, task_service.reference_date(), prefer_edit=True)


# --- add flow ---


@router.message(Command("add"))
@router.message(F.text == common_texts.MENU_ADD_TASK)
async def add_cmd(
    message: Message,
    state: FSMContext,
    task_service: TaskService,
    command: Optional[CommandObject] = None,
):
    await state.clear()

    # /add <title> -> quick add with defaults
    if command is not None and command.args and command.args.strip():
        await _create(message, state, task_service, {"title": command.args.strip()})
        return

    await state.set_state(TasksFlow.add_title)
    await message.answer(texts.ASK_TITLE, reply_markup=cancel_kb())


@router.message(TasksFlow.add_title, ~F.text.in_(common_texts.MENU_LABELS))
async def add_title(message: Message, state: FSMContext):
    title = (message.text or "").strip()
    if not title:
        await message.answer(texts.EMPTY_TITLE)
        return

    await state.update_data(title=title)
    await state.set_state(TasksFlow.add_due)
    await message.answer(texts.ASK_DUE, reply_markup=skip_cancel_kb("add:due:skip"))


@router.message(TasksFlow.add_due, ~F.text.in_(common_texts.MENU_LABELS))
async def add_due(message: Message, state: FSMContext, task_service: TaskService, subject_service: SubjectService):
    due = parse_date_input(message.text or "", task_service.reference_date())
    if due is None:
        await message.answer(texts.INVALID_DUE, reply_markup=skip_cancel_kb("add:due:skip"))
        return

    await state.update_data(due_date=due.isoformat())
    await _ask_subject(message, state, subject_service)


@router.callback_query(TasksFlow.add_due, F.data == "add:due:skip")
async def add_due_skip(cb: CallbackQuery, state: FSMContext, subject_service: SubjectService):
    await cb.answer()
    await state.update_data(due_date=None)
    await _ask_subject(cb.message, state, subject_service)


async def _ask_subject(target: Message, state: FSMContext, subject_service: SubjectService) -> None:
    names = [s.name for s in await subject_service.list()]
    await state.update_data(subject_choices=names)
    await state.set_state(TasksFlow.add_subject)
    await target.answer(texts.ASK_SUBJECT, reply_markup=subject_choice_kb(names))


@router.callback_query(TasksFlow.add_subject, F.data.startswith("add:subj:"))
async def add_subject_choice(cb: CallbackQuery, state: FSMContext):
    await cb.answer()
    choice = (cb.data or "").split(":")[-1]
    data = await state.get_data()
    names = data.get("subject_choices") or []
    index = parse_int_safe(choice, -1)

    subject = names[index] if 0 <= index < len(names) else UNCATEGORIZED
    await state.update_data(subject=subject)
    await state.set_state(TasksFlow.add_priority)
    await cb.message.answer(texts.ASK_PRIORITY, reply_markup=priority_kb())


@router.message(TasksFlow.add_subject, ~F.text.in_(common_texts.MENU_LABELS))
async def add_subject_text(message: Message, state: FSMContext):
    await state.update_data(subject=(message.text or "").strip() or UNCATEGORIZED)
    await state.set_state(TasksFlow.add_priority)
    await message.answer(texts.ASK_PRIORITY, reply_markup=priority_kb())


@router.callback_query(TasksFlow.add_priority, F.data.startswith("add:prio:"))
async def add_priority(cb: CallbackQuery, state: FSMContext):
    await cb.answer()
    priority = (cb.data or "").split(":")[-1]
    await state.update_data(priority=priority if priority in PRIORITY_RANK else DEFAULT_PRIORITY)
    await state.set_state(TasksFlow.add_type)
    await cb.message.answer(texts.ASK_TYPE, reply_markup=task_type_kb())


@router.callback_query(TasksFlow.add_type, F.data.startswith("add:type:"))
async def add_type(cb: CallbackQuery, state: FSMContext):
    await cb.answer()
    index = parse_int_safe((cb.data or "").split(":")[-1], -1)
    task_type = TASK_TYPES[index] if 0 <= index < len(TASK_TYPES) else DEFAULT_TASK_TYPE
    await state.update_data(task_type=task_type)
    await state.set_state(TasksFlow.add_tags)
    await cb.message.answer(texts.ASK_TAGS, reply_markup=skip_cancel_kb("add:tags:skip"))


@router.message(TasksFlow.add_tags, ~F.text.in_(common_texts.MENU_LABELS))
async def add_tags(message: Message, state: FSMContext):
    await state.update_data(tags=message.text or "")
    await _ask_description(message, state)


@router.callback_query(TasksFlow.add_tags, F.data == "add:tags:skip")
async def add_tags_skip(cb: CallbackQuery, state: FSMContext):
    await cb.answer()
    await _ask_description(cb.message, state)


async def _ask_description(target: Message, state: FSMContext) -> None:
    await state.set_state(TasksFlow.add_description)
    await target.answer(texts.ASK_DESCRIPTION, reply_markup=skip_cancel_kb("add:desc:skip"))


@router.message(TasksFlow.add_description, ~F.text.in_(common_texts.MENU_LABELS))
async def add_description(message: Message, state: FSMContext):
    await state.update_data(description=(message.text or "").strip())
    await _ask_estimate(message, state)


@router.callback_query(TasksFlow.add_description, F.data == "add:desc:skip")
async def add_description_skip(cb: CallbackQuery, state: FSMContext):
    await cb.answer()
    await _ask_estimate(cb.message, state)


async def _ask_estimate(target: Message, state: FSMContext) -> None:
    await state.set_state(TasksFlow.add_estimate)
    await target.answer(texts.ASK_ESTIMATE, reply_markup=skip_cancel_kb("add:est:skip"))


@router.message(TasksFlow.add_estimate, ~F.text.in_(common_texts.MENU_LABELS))
async def add_estimate(message: Message, state: FSMContext, task_service: TaskService):
    await state.update_data(estimated_time=(message.text or "").strip())
    await _create(message, state, task_service, await state.get_data())


@router.callback_query(TasksFlow.add_estimate, F.data == "add:est:skip")
async def add_estimate_skip(cb: CallbackQuery, state: FSMContext, task_service: TaskService):
    await cb.answer()
    await _create(cb.message, state, task_service, await state.get_data())


async def _create(target: Message, state: FSMContext, task_service: TaskService, data: dict) -> None:
    due_raw = data.get("due_date")
    new = NewTask(
        title=data.get("title", ""),
        due_date=date.fromisoformat(due_raw) if due_raw else None,
        task_type=data.get("task_type", DEFAULT_TASK_TYPE),
        subject=data.get("subject", UNCATEGORIZED),
        priority=data.get("priority", DEFAULT_PRIORITY),
        description=data.get("description", ""),
        estimated_time=data.get("estimated_time", ""),
        tags=normalize_tags(data.get("tags")),
    )

    try:
        await task_service.add_task(new)
        tasks = await task_service.snapshot()
    except DomainError as e:
        await state.clear()
        await target.answer(str(e), reply_markup=main_menu_kb())
        return

    await state.clear()
    await target.answer(texts.ADDED, reply_markup=main_menu_kb())
    await _send_list(target, tasks, task_service.reference_date(), prefer_edit=False)


# --- edit flow ---


@router.callback_query(F.data.startswith("tk:edit:"))
async def edit_start(cb: CallbackQuery, state: FSMContext, task_service: TaskService):
    task_id = (cb.data or "").split(":")[-1]
    try:
        task = await task_service.get(task_id)
    except DomainError as e:
        await cb.answer(str(e), show_alert=True)
        return

    await cb.answer()
    await state.clear()
    await state.update_data(edit_id=task.id)
    await state.set_state(TasksFlow.edit_field)
    await cb.message.answer(texts.EDIT_WHICH.format(title=escape(task.title)), reply_markup=edit_field_kb())


@router.callback_query(TasksFlow.edit_field, F.data.startswith("ed:f:"))
async def edit_choose_field(cb: CallbackQuery, state: FSMContext):
    await cb.answer()
    field = (cb.data or "").split(":")[-1]
    if field not in EDIT_FIELDS:
        return

    if field == FIELD_PRIORITY:
        markup = priority_kb("ed:prio")
    elif field == FIELD_TYPE:
        markup = task_type_kb("ed:type")
    elif field in CLEARABLE_FIELDS:
        markup = skip_cancel_kb("ed:clear", skip_text="Clear")
    else:
        markup = cancel_kb()

    await state.update_data(edit_field=field)
    await state.set_state(TasksFlow.edit_value)
    await cb.message.answer(texts.EDIT_PROMPTS[field], reply_markup=markup)


@router.message(TasksFlow.edit_value, ~F.text.in_(common_texts.MENU_LABELS))
async def edit_value(message: Message, state: FSMContext, task_service: TaskService):
    data = await state.get_data()
    try:
        changes = changes_from_text(data.get("edit_field", ""), message.text or "", task_service.reference_date())
    except ValidationError as e:
        # stay on this step
        await message.answer(str(e))
        return
    await _apply_edit(message, state, task_service, data.get("edit_id", ""), changes)


@router.callback_query(TasksFlow.edit_value, F.data == "ed:clear")
async def edit_clear(cb: CallbackQuery, state: FSMContext, task_service: TaskService):
    data = await state.get_data()
    try:
        changes = cleared_changes(data.get("edit_field", ""))
    except ValidationError as e:
        await cb.answer(str(e), show_alert=True)
        return
    await cb.answer()
    await _apply_edit(cb.message, state, task_service, data.get("edit_id", ""), changes)


@router.callback_query(TasksFlow.edit_value, F.data.startswith("ed:prio:"))
async def edit_priority(cb: CallbackQuery, state: FSMContext, task_service: TaskService):
    await cb.answer()
    priority = (cb.data or "").split(":")[-1]
    if priority not in PRIORITY_RANK:
        return
    data = await state.get_data()
    await _apply_edit(cb.message, state, task_service, data.get("edit_id", ""), TaskChanges(priority=priority))


@router.callback_query(TasksFlow.edit_value, F.data.startswith("ed:type:"))
async def edit_type(cb: CallbackQuery, state: FSMContext, task_service: TaskService):
    await cb.answer()
    index = parse_int_safe((cb.data or "").split(":")[-1], -1)
    if not 0 <= index < len(TASK_TYPES):
        return
    data = await state.get_data()
    await _apply_edit(cb.message, state, task_service, data.get("edit_id", ""), TaskChanges(task_type=TASK_TYPES[index]))


async def _apply_edit(
    target: Message,
    state: FSMContext,
    task_service: TaskService,
    task_id: str,
    changes: TaskChanges,
) -> None:
    await state.clear()
    try:
        await task_service.edit_task(task_id, changes)
        tasks = await task_service.snapshot()
    except DomainError as e:
        await target.answer(str(e), reply_markup=main_menu_kb())
        return

    await target.answer(texts.EDITED, reply_markup=main_menu_kb())
    await _send_list(target, tasks, task_service.reference_date(), prefer_edit=False)
