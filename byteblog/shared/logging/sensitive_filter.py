# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from typing import Any

_COOKIE_NAMES: set[str] = set()

SENSITIVE_PATTERNS = [
    # Session tokens and cookies
    (r"(cookie\s*:\s*['\"]?)([^'\"]{10,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),
    (r"(token\s*[:=]\s*['\"]?)([a-zA-Z0-9_\-\.]{20,})(['\"]?)", r"\1***REDACTED***\3"),
    (r"(session[_-]?id\s*[:=]\s*['\"]?)([a-zA-Z0-9_\-\.]{20,})(['\"]?)", r"\1***REDACTED***\3"),

    # Passwords
    (r"(password\s*[:=]\s*['\"]?)([^'\"\s,)]{1,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),
    (r"(passwd\s*[:=]\s*['\"]?)([^'\"\s,)]{1,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),

    # Password digests (werkzeug format)
    (r"\b(scrypt|pbkdf2):[^$\s]+\$[^$\s]+\$[0-9a-f]+", r"\1:***REDACTED***"),

    # Database URLs with credentials
    (r"(postgresql|postgres|mysql)://([^:]+):([^@]+)@", r"\1://\2:***REDACTED***@"),

    # Authorization headers
    (r"(authorization\s*:\s*['\"]?)([^'\"]{10,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),
]


def register_cookie_name(name: str) -> None:
    """Adds a cookie whose value is redacted wherever it appears as `name=value`."""
    if name:
        _COOKIE_NAMES.add(name)


def _cookie_pattern() -> str | None:
    if not _COOKIE_NAMES:
        return None
    names = "|".join(re.escape(name) for name in sorted(_COOKIE_NAMES))
    return rf"(?<![\w-])((?:{names})=)([^;\s&]+)"


def sanitize_message(message: str) -> str:
    sanitized = message
    cookie_pattern = _cookie_pattern()
    if cookie_pattern:
        sanitized = re.sub(cookie_pattern, r"\1***REDACTED***", sanitized)

    for pattern_tuple in SENSITIVE_PATTERNS:
        if len(pattern_tuple) == 2:
            pattern, replacement = pattern_tuple
            flags = 0
        else:
            pattern, replacement, flags = pattern_tuple

        sanitized = re.sub(pattern, replacement, sanitized, flags=flags)

    return sanitized


def sanitize_record(record: dict[str, Any]) -> bool:
    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True
