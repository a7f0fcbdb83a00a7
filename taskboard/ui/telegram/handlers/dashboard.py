from __future__ import annotations

from aiogram import F, Router
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from taskboard.constants import FILTER_ALL, SUBJECT_FILTER_ALL, VIEW_FILTERS
from taskboard.domain.common.errors import DomainError
from taskboard.domain.tasks.grouping import unique_subjects
from taskboard.domain.tasks.models import Dashboard
from taskboard.domain.tasks.service import TaskService
from taskboard.ui.telegram.keyboards.dashboard import dashboard_kb
from taskboard.ui.telegram.render import render_dashboard
from taskboard.ui.telegram.texts import common as texts
from taskboard.ui.telegram.utils.navigation import send_or_edit
from taskboard.utils import parse_callback_data, parse_int_safe

router = Router()


def _markup(dashboard: Dashboard):
    return dashboard_kb(dashboard.filter_name, dashboard.subject_filter, dashboard.subjects)


@router.message(Command("dashboard"))
@router.message(F.text == texts.MENU_DASHBOARD)
async def dashboard_cmd(message: Message, state: FSMContext, task_service: TaskService):
    await state.clear()
    try:
        dashboard = await task_service.dashboard(FILTER_ALL, SUBJECT_FILTER_ALL)
    except DomainError as e:
        await message.answer(str(e))
        return
    await message.answer(render_dashboard(dashboard), reply_markup=_markup(dashboard))


@router.callback_query(F.data.startswith("db:"))
async def dashboard_filter_cb(cb: CallbackQuery, task_service: TaskService):
    parts = parse_callback_data(cb.data or "", expected_parts=3)
    if not parts:
        await cb.answer()
        return

    _, filter_name, index_raw = parts
    if filter_name not in VIEW_FILTERS:
        filter_name = FILTER_ALL

    try:
        tasks = await task_service.snapshot()
    except DomainError as e:
        await cb.answer(str(e), show_alert=True)
        return

    # subject buttons carry an index into the sorted subject list
    subjects = unique_subjects(tasks)
    index = parse_int_safe(index_raw, -1)
    subject_filter = subjects[index] if 0 <= index < len(subjects) else SUBJECT_FILTER_ALL

    dashboard = await task_service.dashboard(filter_name, subject_filter, tasks=tasks)
    await cb.answer()
    await send_or_edit(cb.message, render_dashboard(dashboard), reply_markup=_markup(dashboard), prefer_edit=True)
