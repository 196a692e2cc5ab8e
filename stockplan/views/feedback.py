from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Feedback:
    """Banner message shown above a view. ``kind`` is info, success or error."""

    message: str = ""
    kind: str = "info"

    @classmethod
    def success(cls, message: str) -> Feedback:
        return cls(message, "success")

    @classmethod
    def error(cls, message: str) -> Feedback:
        return cls(message, "error")
