from __future__ import annotations

from html import escape

from aiogram import F, Router
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from taskboard.domain.common.errors import DomainError
from taskboard.domain.subjects.service import SubjectService
from taskboard.domain.tasks.grouping import group_by_subject
from taskboard.domain.tasks.service import TaskService
from taskboard.ui.telegram.keyboards.common import cancel_kb, main_menu_kb
from taskboard.ui.telegram.keyboards.timetable import subjects_kb
from taskboard.ui.telegram.render import render_subject_progress
from taskboard.ui.telegram.states.tasks import SubjectsFlow
from taskboard.ui.telegram.texts import common as common_texts
from taskboard.ui.telegram.texts import subjects as texts
from taskboard.ui.telegram.utils.navigation import send_or_edit

router = Router()


async def _show(target: Message, task_service: TaskService, subject_service: SubjectService, prefer_edit: bool) -> None:
    tasks = await task_service.snapshot()
    subjects = await subject_service.list()

    lines = [render_subject_progress(group_by_subject(tasks).values()), "", texts.REGISTRY_HEADER]
    if subjects:
        lines.extend(f"• {escape(s.name)}" for s in subjects)
    else:
        lines.append(texts.NO_SUBJECTS)

    await send_or_edit(target, "\n".join(lines), reply_markup=subjects_kb(subjects), prefer_edit=prefer_edit)


@router.message(Command("subjects"))
@router.message(F.text == common_texts.MENU_SUBJECTS)
async def subjects_cmd(message: Message, state: FSMContext, task_service: TaskService, subject_service: SubjectService):
    await state.clear()
    try:
        await _show(message, task_service, subject_service, prefer_edit=False)
    except DomainError as e:
        await message.answer(str(e))


@router.callback_query(F.data == "sj:add")
async def subject_add_start(cb: CallbackQuery, state: FSMContext):
    await cb.answer()
    await state.set_state(SubjectsFlow.add_name)
    await cb.message.answer(texts.ASK_NAME, reply_markup=cancel_kb())


@router.message(SubjectsFlow.add_name, ~F.text.in_(common_texts.MENU_LABELS))
async def subject_add_name(message: Message, state: FSMContext, task_service: TaskService, subject_service: SubjectService):
    try:
        await subject_service.add(message.text or "")
    except DomainError as e:
        # stay in the step so the user can retype
        await message.answer(str(e), reply_markup=cancel_kb())
        return

    await state.clear()
    await message.answer(texts.ADDED, reply_markup=main_menu_kb())
    await _show(message, task_service, subject_service, prefer_edit=False)


@router.callback_query(F.data.startswith("sj:del:"))
async def subject_delete(cb: CallbackQuery, task_service: TaskService, subject_service: SubjectService):
    subject_id = (cb.data or "").split(":")[-1]
    try:
        await subject_service.delete(subject_id)
        await cb.answer(texts.DELETED)
        await _show(cb.message, task_service, subject_service, prefer_edit=True)
    except DomainError as e:
        await cb.answer(str(e), show_alert=True)


@router.callback_query(F.data.startswith("sj:ren:"))
async def subject_rename_start(cb: CallbackQuery, state: FSMContext, subject_service: SubjectService):
    subject_id = (cb.data or "").split(":")[-1]
    try:
        subjects = await subject_service.list()
    except DomainError as e:
        await cb.answer(str(e), show_alert=True)
        return

    current = next((s for s in subjects if s.id == subject_id), None)
    if current is None:
        await cb.answer("Subject not found.", show_alert=True)
        return

    await cb.answer()
    await state.clear()
    await state.update_data(subject_id=subject_id)
    await state.set_state(SubjectsFlow.rename_name)
    await cb.message.answer(texts.ASK_RENAME.format(name=escape(current.name)), reply_markup=cancel_kb())


@router.message(SubjectsFlow.rename_name, ~F.text.in_(common_texts.MENU_LABELS))
async def subject_rename_name(message: Message, state: FSMContext, task_service: TaskService, subject_service: SubjectService):
    data = await state.get_data()
    try:
        await subject_service.rename(data.get("subject_id", ""), message.text or "")
    except DomainError as e:
        # stay in the step so the user can retype
        await message.answer(str(e), reply_markup=cancel_kb())
        return

    await state.clear()
    await message.answer(texts.RENAMED, reply_markup=main_menu_kb())
    await _show(message, task_service, subject_service, prefer_edit=False)
