"""
Tests for user input parsing helpers.
"""
from __future__ import annotations

from datetime import date

from taskboard.utils import parse_callback_data, parse_date_input, parse_int_safe, parse_time_input

TODAY = date(2024, 6, 10)


def test_parse_time_input_formats():
    assert parse_time_input("0815") == "08:15"
    assert parse_time_input("8:15") == "08:15"
    assert parse_time_input("815") == "08:15"
    assert parse_time_input("23 59") == "23:59"


def test_parse_time_input_invalid():
    assert parse_time_input("2400") is None
    assert parse_time_input("12:60") is None
    assert parse_time_input("noon") is None
    assert parse_time_input("") is None


def test_parse_date_input_formats():
    assert parse_date_input("2024-06-14", TODAY) == date(2024, 6, 14)
    assert parse_date_input("14.06.2024", TODAY) == date(2024, 6, 14)
    assert parse_date_input("14.6", TODAY) == date(2024, 6, 14)
    assert parse_date_input("today", TODAY) == TODAY
    assert parse_date_input("Tomorrow", TODAY) == date(2024, 6, 11)


def test_parse_date_input_invalid():
    assert parse_date_input("31.02", TODAY) is None
    assert parse_date_input("next week", TODAY) is None


def test_callback_helpers():
    assert parse_callback_data("db:week:2") == ("db", "week", "2")
    assert parse_callback_data("db:week") is None
    assert parse_int_safe("-1") == -1
    assert parse_int_safe("x", -1) == -1
