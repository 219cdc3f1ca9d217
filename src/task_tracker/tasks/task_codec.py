# src/task_tracker/tasks/task_codec.py

"""
Text codec for the tasks file.

The file is a flat JSON array of flat objects with five keys:
id, description, status, createdAt, updatedAt.

Decoding is a forgiving scanner rather than a full JSON parser:
- values are located by a literal `"<key>":` search inside each object,
- objects are delimited by the next `{` / `}` pair (no nesting),
- a broken object skips just that task,
- a structural problem stops the scan but keeps tasks decoded so far.

Hand-edited files therefore load the same way they always have.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from .task_models import Task, build_task

logger = logging.getLogger(__name__)

FIELD_ORDER = ("id", "description", "status", "createdAt", "updatedAt")

# Same set as C's isspace().
_WHITESPACE = " \t\n\r\f\v"
_DIGITS = frozenset("0123456789")


@dataclass(slots=True)
class DecodeResult:
    tasks: list[Task] = field(default_factory=list)
    problems: list[str] = field(default_factory=list)


def escape_json_string(text: str) -> str:
    # Only quote and backslash are escaped; control characters are written raw.
    return text.replace("\\", "\\\\").replace('"', '\\"')


def unescape_json_string(text: str) -> str:
    out: list[str] = []
    escaped = False
    for ch in text:
        if escaped:
            if ch in ('"', "\\"):
                out.append(ch)
            else:
                # Unknown escape: keep it verbatim.
                out.append("\\")
                out.append(ch)
            escaped = False
        elif ch == "\\":
            escaped = True
        else:
            out.append(ch)
    return "".join(out)


def is_integer_literal(raw: str) -> bool:
    digits = raw[1:] if raw.startswith("-") else raw
    return bool(digits) and all(ch in _DIGITS for ch in digits)


def find_json_value(object_text: str, key: str) -> str:
    """
    Return the value stored under `key` in one object body, or "" if absent/invalid.

    String values are unescaped; other values must be integer literals and are
    returned as their digits.
    """
    pattern = f'"{key}":'
    key_pos = object_text.find(pattern)
    if key_pos == -1:
        return ""

    start = key_pos + len(pattern)
    n = len(object_text)
    while start < n and object_text[start] in _WHITESPACE:
        start += 1
    if start >= n:
        return ""

    if object_text[start] == '"':
        pos = start + 1
        in_escape = False
        while pos < n:
            ch = object_text[pos]
            if in_escape:
                in_escape = False
            elif ch == "\\":
                in_escape = True
            elif ch == '"':
                return unescape_json_string(object_text[start + 1 : pos])
            pos += 1
        logger.warning("Malformed JSON string value found for key '%s'", key)
        return ""

    ends = [p for p in (object_text.find(",", start), object_text.find("}", start)) if p != -1]
    end = min(ends) if ends else n

    raw = object_text[start:end].rstrip(_WHITESPACE)
    if not raw:
        return ""
    if is_integer_literal(raw):
        return raw

    logger.warning("Non-numeric value found for numeric key '%s': %s", key, raw)
    return ""


def encode_tasks(tasks: Iterable[Task]) -> str:
    """Render tasks as a pretty-printed JSON array (2-space indent, trailing newline)."""
    blocks: list[str] = []
    for task in tasks:
        blocks.append(
            "  {\n"
            f'    "id": {int(task.id)},\n'
            f'    "description": "{escape_json_string(task.description)}",\n'
            f'    "status": "{escape_json_string(str(task.status))}",\n'
            f'    "createdAt": "{escape_json_string(task.created_at)}",\n'
            f'    "updatedAt": "{escape_json_string(task.updated_at)}"\n'
            "  }"
        )
    if not blocks:
        return "[\n]\n"
    return "[\n" + ",\n".join(blocks) + "\n]\n"


def _format_problem(result: DecodeResult, message: str, *, source: str) -> None:
    text = f"Invalid JSON format in {source} ({message})."
    result.problems.append(text)
    logger.error(text)


def decode_tasks(text: str, *, source: str = "tasks file") -> DecodeResult:
    """
    Parse tasks from `text`, recovering what it can.

    Never raises for malformed content: problems are logged and collected on
    the returned DecodeResult next to whatever tasks were decoded.
    """
    result = DecodeResult()

    content = text.strip(_WHITESPACE)
    if not content or content == "[]":
        return result

    start = content.find("[")
    end = content.rfind("]")
    if start == -1 or end == -1 or start >= end:
        _format_problem(result, "missing or misplaced array brackets", source=source)
        return result

    pos = start + 1
    while pos < end:
        obj_start = content.find("{", pos)
        if obj_start == -1 or obj_start >= end:
            break

        obj_end = content.find("}", obj_start + 1)
        next_start = content.find("{", obj_start + 1)
        if obj_end == -1 or (next_start != -1 and obj_end > next_start):
            _format_problem(
                result, "mismatched or nested braces detected by simple check", source=source
            )
            break
        if obj_end >= end:
            _format_problem(result, "object brace extends beyond array", source=source)
            break

        body = content[obj_start + 1 : obj_end]
        built = build_task(*(find_json_value(body, key) for key in FIELD_ORDER))
        if built.task is not None:
            result.tasks.append(built.task)
        else:
            for reason in built.reasons:
                logger.warning(reason)
            result.problems.extend(built.reasons)

        pos = obj_end + 1

    return result
