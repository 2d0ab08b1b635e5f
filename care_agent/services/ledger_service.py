"""
Append-only, hash-verifiable action ledger.

Receipts are deterministic for a given (action, subject_id, payload):

  receipt:<action>:<subject_id>:sha256=<digest of payload>

Entries are also chained (each stores the previous entry's chain hash) so
`verify()` can detect tampering with the stored log. A failed write returns a
string starting with LEDGER_ERROR_PREFIX instead of raising.
"""

import hashlib
import logging
from dataclasses import dataclass
from typing import List, Tuple

logger = logging.getLogger(__name__)

LEDGER_ERROR_PREFIX = "error:"
GENESIS = "0" * 64


def _sha256(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def make_receipt(action: str, subject_id: str, payload: str) -> str:
    return f"receipt:{action}:{subject_id}:sha256={_sha256(payload)}"


def is_error_receipt(receipt: str) -> bool:
    return receipt.startswith(LEDGER_ERROR_PREFIX)


@dataclass(frozen=True)
class LedgerEntry:
    action: str
    subject_id: str
    payload_digest: str
    previous: str
    chain_hash: str


class HashLedger:
    def __init__(self):
        self._entries: List[LedgerEntry] = []

    @property
    def entries(self) -> Tuple[LedgerEntry, ...]:
        return tuple(self._entries)

    async def log(self, action: str, subject_id: str, payload: str) -> str:
        if not action or not subject_id:
            logger.warning(f"[Ledger] Rejected entry action={action!r} subject={subject_id!r}")
            return f"{LEDGER_ERROR_PREFIX} action and subject_id are required"

        digest = _sha256(payload)
        previous = self._entries[-1].chain_hash if self._entries else GENESIS
        chain_hash = _sha256(f"{previous}|{action}|{subject_id}|{digest}")
        self._entries.append(LedgerEntry(action, subject_id, digest, previous, chain_hash))

        receipt = make_receipt(action, subject_id, payload)
        logger.info(f"[Ledger] {action} for {subject_id} -> {digest[:12]}")
        return receipt

    def verify(self) -> bool:
        previous = GENESIS
        for entry in self._entries:
            expected = _sha256(f"{previous}|{entry.action}|{entry.subject_id}|{entry.payload_digest}")
            if entry.previous != previous or entry.chain_hash != expected:
                logger.error(f"[Ledger] Chain broken at {entry.action}/{entry.subject_id}")
                return False
            previous = entry.chain_hash
        return True
