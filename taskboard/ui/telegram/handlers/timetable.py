from __future__ import annotations

from aiogram import F, Router
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from taskboard.constants import WEEKDAYS
from taskboard.domain.common.errors import DomainError
from taskboard.domain.common.ports import Clock
from taskboard.domain.timetable.models import NewSchedule
from taskboard.domain.timetable.service import TimetableService
from taskboard.ui.telegram.keyboards.common import cancel_kb, main_menu_kb, skip_cancel_kb
from taskboard.ui.telegram.keyboards.timetable import timetable_kb, weekday_kb
from taskboard.ui.telegram.render import render_week
from taskboard.ui.telegram.states.tasks import TimetableFlow
from taskboard.ui.telegram.texts import common as common_texts
from taskboard.ui.telegram.texts import timetable as texts
from taskboard.ui.telegram.utils.navigation import send_or_edit
from taskboard.utils import parse_time_input

router = Router()


async def _show(target: Message, timetable_service: TimetableService, clock: Clock, prefer_edit: bool) -> None:
    buckets = await timetable_service.week()
    schedules = [s for bucket in buckets for s in bucket.schedules]
    today_name = WEEKDAYS[clock.today().weekday()]
    await send_or_edit(target, render_week(buckets, today_name), reply_markup=timetable_kb(schedules), prefer_edit=prefer_edit)


@router.message(Command("timetable"))
@router.message(F.text == common_texts.MENU_TIMETABLE)
async def timetable_cmd(message: Message, state: FSMContext, timetable_service: TimetableService, clock: Clock):
    await state.clear()
    try:
        await _show(message, timetable_service, clock, prefer_edit=False)
    except DomainError as e:
        await message.answer(str(e))


@router.callback_query(F.data == "tt:add")
async def tt_add_start(cb: CallbackQuery, state: FSMContext):
    await cb.answer()
    await state.clear()
    await state.set_state(TimetableFlow.day)
    await cb.message.answer(texts.ASK_DAY, reply_markup=weekday_kb())


@router.callback_query(F.data.startswith("tt:edit:"))
async def tt_edit_start(cb: CallbackQuery, state: FSMContext):
    # same steps as add; _save updates instead of inserting
    await cb.answer()
    await state.clear()
    await state.update_data(edit_id=(cb.data or "").split(":")[-1])
    await state.set_state(TimetableFlow.day)
    await cb.message.answer(texts.EDIT_START, reply_markup=weekday_kb())


@router.callback_query(TimetableFlow.day, F.data.startswith("tt:day:"))
async def tt_day(cb: CallbackQuery, state: FSMContext):
    await cb.answer()
    day = (cb.data or "").split(":")[-1]
    if day not in WEEKDAYS:
        return
    await state.update_data(day=day)
    await state.set_state(TimetableFlow.start)
    await cb.message.answer(texts.ASK_START, reply_markup=cancel_kb())


@router.message(TimetableFlow.start, ~F.text.in_(common_texts.MENU_LABELS))
async def tt_start(message: Message, state: FSMContext):
    start = parse_time_input(message.text or "")
    if start is None:
        await message.answer(texts.INVALID_TIME)
        return
    await state.update_data(start_time=start)
    await state.set_state(TimetableFlow.end)
    await message.answer(texts.ASK_END, reply_markup=cancel_kb())


@router.message(TimetableFlow.end, ~F.text.in_(common_texts.MENU_LABELS))
async def tt_end(message: Message, state: FSMContext):
    end = parse_time_input(message.text or "")
    if end is None:
        await message.answer(texts.INVALID_TIME)
        return
    await state.update_data(end_time=end)
    await state.set_state(TimetableFlow.subject)
    await message.answer(texts.ASK_SUBJECT, reply_markup=cancel_kb())


@router.message(TimetableFlow.subject, ~F.text.in_(common_texts.MENU_LABELS))
async def tt_subject(message: Message, state: FSMContext):
    await state.update_data(subject=(message.text or "").strip())
    await state.set_state(TimetableFlow.room)
    await message.answer(texts.ASK_ROOM, reply_markup=skip_cancel_kb("tt:room:skip"))


@router.message(TimetableFlow.room, ~F.text.in_(common_texts.MENU_LABELS))
async def tt_room(message: Message, state: FSMContext, timetable_service: TimetableService, clock: Clock):
    await state.update_data(room=(message.text or "").strip())
    await _save(message, state, timetable_service, clock)


@router.callback_query(TimetableFlow.room, F.data == "tt:room:skip")
async def tt_room_skip(cb: CallbackQuery, state: FSMContext, timetable_service: TimetableService, clock: Clock):
    await cb.answer()
    await _save(cb.message, state, timetable_service, clock)


async def _save(target: Message, state: FSMContext, timetable_service: TimetableService, clock: Clock) -> None:
    data = await state.get_data()
    await state.clear()
    new = NewSchedule(
        day=data.get("day", ""),
        start_time=data.get("start_time", ""),
        end_time=data.get("end_time", ""),
        subject=data.get("subject", ""),
        room=data.get("room", ""),
    )
    edit_id = data.get("edit_id")
    try:
        if edit_id:
            await timetable_service.update(edit_id, new)
        else:
            await timetable_service.add(new)
    except DomainError as e:
        await target.answer(str(e), reply_markup=main_menu_kb())
        return

    await target.answer(texts.UPDATED if edit_id else texts.ADDED, reply_markup=main_menu_kb())
    await _show(target, timetable_service, clock, prefer_edit=False)


@router.callback_query(F.data.startswith("tt:del:"))
async def tt_delete(cb: CallbackQuery, timetable_service: TimetableService, clock: Clock):
    schedule_id = (cb.data or "").split(":")[-1]
    try:
        await timetable_service.delete(schedule_id)
        await cb.answer(texts.DELETED)
        await _show(cb.message, timetable_service, clock, prefer_edit=True)
    except DomainError as e:
        await cb.answer(str(e), show_alert=True)
