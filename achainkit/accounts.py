"""Checks and conversions behind creating, deleting and exporting wallet accounts."""

from __future__ import annotations

import base64
import json
from typing import Any

MIN_PASSWORD_LENGTH = 8
PASSWORD_TOO_SHORT_CODE = 20015
KEY_FILE_SUFFIX = ".gkey"

_ERROR_PREFIX = '"error":'
_KEY_OFFSET = 10
_KEY_LENGTH = 51


class PasswordError(ValueError):
    """A password that cannot be used, with the message to show the user."""


def strip_spaces(text: str) -> str:
    """Remove every space from ``text``; passwords may not contain them."""
    return text.replace(" ", "")


def check_new_password(password: str, confirm: str) -> None:
    """Check a new wallet password and its confirmation.

    Raises PasswordError when either is empty, when they differ, or when
    the password is shorter than eight characters.
    """
    if not password or not confirm:
        raise PasswordError("Empty!")
    if password != confirm:
        raise PasswordError("not consistent!")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise PasswordError("Too short!")


def _wrap_reply(result: str) -> dict[str, Any]:
    """Decode a reply fragment such as ``"result":true`` as a JSON object."""
    try:
        document = json.loads("{" + result + "}")
    except ValueError:
        return {}
    return document if isinstance(document, dict) else {}


def _reply_flag(reply: dict[str, Any]) -> bool:
    value = reply.get("result")
    return value if isinstance(value, bool) else False


def parse_check_passphrase(result: str) -> bool:
    """Whether a passphrase check reply says the passphrase is correct.

    Raises PasswordError when the node rejects the passphrase as too short.
    """
    reply = _wrap_reply(result)
    if "result" in reply:
        return _reply_flag(reply)
    error = reply.get("error")
    if isinstance(error, dict):
        data = error.get("data")
        if isinstance(data, dict) and data.get("code") == PASSWORD_TOO_SHORT_CODE:
            raise PasswordError("At least 8 letters!")
    return False


def parse_delete_result(result: str) -> bool:
    """Whether an account deletion reply reports success."""
    reply = _wrap_reply(result)
    return "result" in reply and _reply_flag(reply)


def export_key_path(directory: str, account: str, windows: bool = False) -> str:
    """Path of the key file for ``account`` inside ``directory``."""
    if windows:
        return directory.replace("/", "\\") + "\\" + account + KEY_FILE_SUFFIX
    return directory + "/" + account + KEY_FILE_SUFFIX


def extract_private_key(result: str) -> str:
    """Take the private key out of a key dump reply.

    Raises ValueError when the reply is an error.
    """
    if result[: len(_ERROR_PREFIX)] == _ERROR_PREFIX:
        raise ValueError(f"private key dump failed: {result}")
    return result[_KEY_OFFSET : _KEY_OFFSET + _KEY_LENGTH]


def encode_private_key(key: str) -> str:
    """Text written to a key file: the key's UTF-8 bytes in base64."""
    return base64.b64encode(key.encode("utf-8")).decode("ascii")