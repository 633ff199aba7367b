from __future__ import annotations

import logging
import math
from typing import Callable, Optional, Union

from sfm.domain.errors import AppError, ValidationError

log = logging.getLogger("sfm.screens")

FailureMessage = Union[str, Callable[[AppError], str]]


def parse_int(s: object, field: str) -> int:
    text = "" if s is None else str(s).strip()
    if text == "":
        raise ValidationError(f"{field} is required.")
    try:
        return int(text)
    except ValueError:
        raise ValidationError(f"{field} must be an integer.") from None


def parse_float(s: object, field: str) -> float:
    text = "" if s is None else str(s).strip()
    if text == "":
        raise ValidationError(f"{field} is required.")
    try:
        value = float(text)
    except ValueError:
        raise ValidationError(f"{field} must be a number.") from None
    if not math.isfinite(value):
        raise ValidationError(f"{field} must be a number.")
    return value


def required_text(s: object, field: str) -> str:
    text = "" if s is None else str(s).strip()
    if not text:
        raise ValidationError(f"{field} is required.")
    return text


class ResourceScreen:
    """Local state of one screen plus the shared reconcile-or-report step."""

    def __init__(self, client):
        self.client = client
        self.error = ""

    def _attempt(
        self,
        failure_message: FailureMessage,
        action: Callable[[], None],
        on_failure: Optional[Callable[[], None]] = None,
    ) -> bool:
        self.error = ""
        try:
            action()
        except ValidationError as e:
            # input problems are shown as-is; the user has to fix the field
            log.info("screen_validation screen=%s error=%s", type(self).__name__, e)
            self.error = str(e)
        except AppError as e:
            log.warning("screen_action_failed screen=%s error=%s", type(self).__name__, e)
            self.error = failure_message(e) if callable(failure_message) else failure_message
        else:
            return True

        if on_failure is not None:
            on_failure()
        return False
