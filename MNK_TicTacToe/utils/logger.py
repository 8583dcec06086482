"""Timestamped event lines for the console session."""

import datetime


def format_event(message, now=None):
    stamp = (now or datetime.datetime.now()).strftime("%H:%M:%S")
    return f"[{stamp}] {message}"


def log_event(message):
    print(format_event(message))
