from dataclasses import dataclass
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Toast:
    level: str
    message: str


class Notifier:
    """Collects user facing toasts in the order they were raised."""

    def __init__(self):
        self.toasts: List[Toast] = []

    def success(self, message: str) -> None:
        logger.info(f"toast: {message}")
        self.toasts.append(Toast("success", message))

    def error(self, message: str) -> None:
        logger.warning(f"toast: {message}")
        self.toasts.append(Toast("error", message))

    @property
    def last(self) -> Optional[Toast]:
        return self.toasts[-1] if self.toasts else None

    def clear(self) -> None:
        self.toasts.clear()
