"""
Append-only relay of role-to-role messages.

A single bus may be shared by several agents. All writes go through `post()`,
which holds the bus lock for the whole append, so readers only ever see a
complete prefix of the log.
"""

import asyncio
import logging
from typing import Optional, Tuple

from care_agent.models import Message

logger = logging.getLogger(__name__)


class MessageBus:
    def __init__(self):
        self._log: Tuple[Message, ...] = ()
        self._lock = asyncio.Lock()

    async def post(self, sender: str, recipient: str, body: str) -> Message:
        message = Message(sender=sender, recipient=recipient, body=body)
        async with self._lock:
            self._log = self._log + (message,)
        logger.info(f"[MessageBus] {sender} -> {recipient} ({len(body)} chars)")
        return message

    def messages(self, recipient: Optional[str] = None) -> Tuple[Message, ...]:
        log = self._log
        if recipient is None:
            return log
        return tuple(m for m in log if m.recipient == recipient)

    def __len__(self) -> int:
        return len(self._log)
