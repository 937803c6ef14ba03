# backend/utils/notify.py
import logging
from collections import deque
from typing import List

logger = logging.getLogger(__name__)


class Notifier:
    """Toast queue for the screen: errors are logged and kept until a client drains them."""

    def __init__(self, max_pending: int = 50):
        self._pending = deque(maxlen=max_pending)

    def notify_error(self, message: str) -> None:
        logger.error(message)
        self._pending.append(message)

    def drain(self) -> List[str]:
        items = list(self._pending)
        self._pending.clear()
        return items
