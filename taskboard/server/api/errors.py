"""Request errors and their HTTP mapping for TaskBoard Server."""

import json
import re

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from ..services.task_store import TaskNotFoundError
from .schemas.tasks import TaskRequest

INVALID_TASK_ID_MESSAGE = "Invalid task ID"
NOT_FOUND_MESSAGE = "404 page not found"

_TASK_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_MAX_TASK_ID = 2**63 - 1
_MIN_TASK_ID = -(2**63)

_decoder = json.JSONDecoder()


class InvalidTaskIdError(ValueError):
    """Raised when the ``{id}`` path segment is not an integer."""

    def __init__(self):
        super().__init__(INVALID_TASK_ID_MESSAGE)


class MalformedTaskError(ValueError):
    """Raised when a request body does not decode into a task."""


def parse_task_id(raw: str) -> int:
    """Parse a path id: optional sign, decimal digits, signed 64-bit range."""
    if not _TASK_ID_PATTERN.fullmatch(raw):
        raise InvalidTaskIdError()
    value = int(raw)
    if not _MIN_TASK_ID <= value <= _MAX_TASK_ID:
        raise InvalidTaskIdError()
    return value


def parse_task_body(body: bytes) -> TaskRequest:
    """Decode a JSON request body into a task.

    Only the first JSON value is read; anything after it is ignored.
    Validation is strict on JSON types, so ``"completed": "yes"`` is rejected
    rather than coerced. Unknown fields are ignored and a bare ``null``
    document yields an all-default task.
    """
    try:
        value, _ = _decoder.raw_decode(body.decode("utf-8").lstrip())
    except UnicodeDecodeError as exc:
        raise MalformedTaskError(str(exc)) from exc
    except json.JSONDecodeError as exc:
        raise MalformedTaskError(exc.msg) from exc

    if value is None:
        return TaskRequest()
    try:
        return TaskRequest.model_validate(value, strict=True)
    except ValidationError as exc:
        raise MalformedTaskError(_describe(exc)) from exc


def _describe(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error["loc"])
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(messages)


async def _invalid_task_id_handler(request: Request, exc: InvalidTaskIdError):
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)


async def _malformed_task_handler(request: Request, exc: MalformedTaskError):
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)


async def _task_not_found_handler(request: Request, exc: TaskNotFoundError):
    return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)


def register_exception_handlers(app: FastAPI) -> None:
    """Map task errors to plain-text HTTP responses."""
    app.add_exception_handler(InvalidTaskIdError, _invalid_task_id_handler)
    app.add_exception_handler(MalformedTaskError, _malformed_task_handler)
    app.add_exception_handler(TaskNotFoundError, _task_not_found_handler)
