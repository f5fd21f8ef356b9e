"""Input checks behind the main window: remarks, account names and sync progress."""

from __future__ import annotations

import re
from dataclasses import dataclass

ACCOUNT_NAME_MAX_LENGTH = 63
SYNCED_BLOCK_THRESHOLD = 20
SECONDS_PER_BLOCK = 10

MARKER_TOP = 17
MARKER_SPACING = 94

_ACCOUNT_NAME_PATTERN = re.compile(r"[a-z][a-z0-9]+")
_REMARK_FORBIDDEN = ("=", ";")

_BLOCK_NUM_KEY = '"blockchain_head_block_num":'
_BLOCK_AGE_KEY = '"blockchain_head_block_age":'
_BLOCK_TIMESTAMP_KEY = '"blockchain_head_block_timestamp":'

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class AccountNameError(ValueError):
    """An account name that cannot be used, with the message to show the user."""


@dataclass(frozen=True)
class SyncStatus:
    """How far the wallet is behind the head of the chain."""

    synced: bool
    blocks_behind: int
    head_block_num: int


def sanitize_remark(text: str) -> str:
    """Drop the characters a contact remark may not hold: ``=`` and ``;``."""
    for char in _REMARK_FORBIDDEN:
        text = text.replace(char, "")
    return text


def validate_account_name(name: str, existing: frozenset[str] | set[str] | list[str] = ()) -> str:
    """Check a new account name and return it.

    The name must begin with a lower-case letter followed by at least one
    lower-case letter or digit, be at most 63 characters long and not be
    one of ``existing``. Raises AccountNameError otherwise.
    """
    if not name:
        raise AccountNameError("Empty name")
    if len(name) > ACCOUNT_NAME_MAX_LENGTH:
        raise AccountNameError("More than 63 characters!")
    if _ACCOUNT_NAME_PATTERN.fullmatch(name) is None:
        raise AccountNameError("Beginning with letter,letters or numbers")
    if name in existing:
        raise AccountNameError("This name has been used")
    return name


def _mid(text: str, position: int, length: int) -> str:
    """Substring of ``length`` characters from ``position``; a negative length means to the end."""
    if position > len(text):
        return ""
    if position < 0:
        if length >= 0:
            length += position
            if length < 0:
                return ""
        position = 0
    if length < 0 or position + length > len(text):
        return text[position:]
    return text[position : position + length]


def _text_to_int(text: str) -> int:
    """A decimal 32-bit integer read from text, 0 when the text is not one."""
    stripped = text.strip()
    if not re.fullmatch(r"[+-]?\d+", stripped):
        return 0
    value = int(stripped)
    return value if _INT_MIN <= value <= _INT_MAX else 0


def _field_before(result: str, key: str, next_key: str) -> str:
    start = result.find(key) + len(key)
    return _mid(result, start, result.find(next_key) - start - 1)


def parse_sync_status(result: str) -> SyncStatus:
    """Read the head block number and age from a node info reply.

    The wallet counts as synced when it is fewer than 20 blocks behind and
    the head block number is positive. Raises ValueError on an empty reply.
    """
    if not result:
        raise ValueError("empty info reply")
    seconds = _text_to_int(_field_before(result, _BLOCK_AGE_KEY, _BLOCK_TIMESTAMP_KEY))
    head = _text_to_int(_field_before(result, _BLOCK_NUM_KEY, _BLOCK_AGE_KEY))
    seconds = max(seconds, 0)
    behind = seconds // SECONDS_PER_BLOCK
    return SyncStatus(
        synced=behind < SYNCED_BLOCK_THRESHOLD and head > 0,
        blocks_behind=behind,
        head_block_num=head,
    )


def active_marker_y(page_index: int) -> int:
    """Vertical position of the marker beside the button of page ``page_index`` (from 1)."""
    return MARKER_TOP + MARKER_SPACING * (page_index - 1)