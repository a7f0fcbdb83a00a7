from __future__ import annotations

from aiogram import Router
from aiogram.filters import Command, CommandStart
from aiogram.fsm.context import FSMContext
from aiogram.types import Message

from taskboard.ui.telegram.utils.navigation import go_to_main_menu

router = Router()

HELP_TEXT = (
    "Homework tracker.\n"
    "/dashboard – overview, filters and progress\n"
    "/tasks – all tasks, tap to mark done\n"
    "/add – add a task (or /add &lt;title&gt;)\n"
    "/subjects – progress by subject\n"
    "/timetable – weekly classes\n"
    "/cancel – stop the current step"
)


@router.message(CommandStart())
async def start_cmd(message: Message, state: FSMContext):
    await go_to_main_menu(message, state, text=HELP_TEXT)


@router.message(Command("menu"))
async def menu_cmd(message: Message, state: FSMContext):
    await go_to_main_menu(message, state)


@router.message(Command("help"))
async def help_cmd(message: Message):
    await message.answer(HELP_TEXT)
