# -*- coding: utf-8 -*-
"""
Text rendering for bot messages (HTML parse mode).

Pure functions: the handlers fetch data through services and pass it here.
"""
from __future__ import annotations

from datetime import date
from html import escape
from typing import Iterable, Sequence

from taskboard.constants import (
    FILTER_ALL,
    FILTER_HIGH,
    FILTER_OVERDUE,
    FILTER_TODAY,
    FILTER_WEEK,
    NOTIFY_DANGER,
    NOTIFY_PRIMARY,
    NOTIFY_SUCCESS,
    NOTIFY_WARNING,
    PRIORITY_HIGH,
    PRIORITY_LOW,
    SUBJECT_FILTER_ALL,
)
from taskboard.domain.tasks.classifier import classify, is_urgent, task_due_label
from taskboard.domain.tasks.models import Dashboard, Notification, Stats, SubjectGroup, Task
from taskboard.domain.timetable.models import DayBucket

FILTER_TITLES = {
    FILTER_ALL: "All",
    FILTER_TODAY: "Today",
    FILTER_WEEK: "This week",
    FILTER_OVERDUE: "Overdue",
    FILTER_HIGH: "High priority",
}

PRIORITY_ICONS = {PRIORITY_HIGH: "🔴", PRIORITY_LOW: "🟢"}

NOTIFY_ICONS = {
    NOTIFY_PRIMARY: "✨",
    NOTIFY_SUCCESS: "✅",
    NOTIFY_WARNING: "✏️",
    NOTIFY_DANGER: "🗑️",
}

PANEL_PREVIEW = 3


def priority_icon(priority: str) -> str:
    return PRIORITY_ICONS.get(priority, "🟡")


def progress_bar(percent: float, width: int = 10) -> str:
    filled = max(0, min(width, round(percent / 100 * width)))
    return "█" * filled + "░" * (width - filled)


def render_stats(stats: Stats) -> str:
    lines = [
        "<b>📊 Overview</b>",
        f"Total: {stats.total}  ·  Done: {stats.completed}  ·  Pending: {stats.pending}",
        f"Overdue: {stats.overdue}  ·  Today: {stats.due_today}  ·  Tomorrow: {stats.due_tomorrow}",
        f"This week: {stats.due_this_week}  ·  High priority: {stats.high_priority}",
        f"Completion: {progress_bar(stats.completion_rate)} {stats.completion_rate}%",
    ]
    return "\n".join(lines)


def render_task_line(task: Task, reference_date: date) -> str:
    title = escape(task.title)
    if task.is_done:
        return f"✅ <s>{title}</s> · {escape(task.subject)}"

    label = task_due_label(task, reference_date)
    if classify(task, reference_date).days_until_due < 0:
        label = f"⚠️ {label}"
    elif is_urgent(task, reference_date):
        label = f"⏰ {label}"

    line = f"{priority_icon(task.priority)} {title} · {escape(task.subject)} · {label}"
    if task.estimated_time:
        line += f" · ⏱ {escape(task.estimated_time)}"
    if task.tags:
        line += " " + " ".join(f"#{escape(tag)}" for tag in task.tags)
    return line


def render_task_list(tasks: Sequence[Task], reference_date: date, empty: str = "No tasks.") -> str:
    if not tasks:
        return empty
    return "\n".join(render_task_line(t, reference_date) for t in tasks)


def _panel(title: str, tasks: Sequence[Task], reference_date: date) -> list[str]:
    lines = [f"<b>{title}</b> ({len(tasks)})"]
    for task in tasks[:PANEL_PREVIEW]:
        lines.append("  " + render_task_line(task, reference_date))
    if len(tasks) > PANEL_PREVIEW:
        lines.append(f"  …and {len(tasks) - PANEL_PREVIEW} more")
    return lines


def render_dashboard(dashboard: Dashboard) -> str:
    ref = dashboard.reference_date
    subject = "all subjects" if dashboard.subject_filter == SUBJECT_FILTER_ALL else dashboard.subject_filter
    parts = [
        render_stats(dashboard.stats),
        "",
        *_panel("📅 Due today", dashboard.due_today, ref),
        *_panel("🚨 Overdue", dashboard.overdue, ref),
        *_panel("🔜 Upcoming", dashboard.upcoming, ref),
        "",
        f"<b>{FILTER_TITLES.get(dashboard.filter_name, dashboard.filter_name)}</b> · {escape(subject)}",
        render_task_list(dashboard.tasks, ref, empty="Nothing here 🎉"),
    ]
    return "\n".join(parts)


def render_subject_progress(groups: Iterable[SubjectGroup]) -> str:
    lines = ["<b>📚 Progress by subject</b>"]
    any_group = False
    for group in groups:
        any_group = True
        lines.append(
            f"{escape(group.subject)}: {progress_bar(group.progress_percent)} "
            f"{round(group.progress_percent)}% ({group.completed}/{len(group.tasks)} done, {group.pending} pending)"
        )
    if not any_group:
        lines.append("No tasks yet.")
    return "\n".join(lines)


def render_week(buckets: Sequence[DayBucket], today_name: str = "") -> str:
    lines = ["<b>🗓 Timetable</b>"]
    for bucket in buckets:
        marker = " ← today" if bucket.day == today_name else ""
        lines.append(f"\n<b>{bucket.day}</b>{marker}")
        if not bucket.schedules:
            lines.append("  —")
            continue
        for s in bucket.schedules:
            room = f" · {escape(s.room)}" if s.room else ""
            note = f" ({escape(s.note)})" if s.note else ""
            lines.append(f"  {s.start_time}–{s.end_time} {escape(s.subject)}{room}{note}")
    return "\n".join(lines)


def render_notification(notification: Notification) -> str:
    icon = NOTIFY_ICONS.get(notification.kind, "🔔")
    lines = [f"{icon} <b>{escape(notification.title)}</b>", escape(notification.description)]
    for name, value in notification.fields:
        lines.append(f"<b>{escape(name)}</b>\n<pre>{escape(value)}</pre>")
    return "\n".join(lines)
