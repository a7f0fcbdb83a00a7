# -*- coding: utf-8 -*-
"""Homework/task tracker: analytics engine, SQLite storage and Telegram front end."""

__version__ = "0.3.0"
