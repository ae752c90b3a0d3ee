"""Classify the STEGA signature headers of a parsed message into a trust verdict.

Classification is lexical only: the verdict token already present in the
headers is matched against known tokens, no signature is verified here.
"""
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional

from .settings import (
    DEFAULT_TOKENS,
    MSG_FOUND,
    MSG_INVALID,
    MSG_NO_HEADERS,
    MSG_NO_SIGNATURE,
    MSG_UNRECOGNIZED,
    SIGNATURE_HEADER,
    TIMESTAMP_HEADERS,
    VERDICT_HEADER,
    VerdictTokens,
)


class Status(str, Enum):
    PENDING = 'pending'
    SUCCESS = 'success'
    WARNING = 'warning'
    ERROR = 'error'


@dataclass
class VerdictResult:
    status: Status
    message: str
    signature: Optional[str] = None
    timestamp: Optional[str] = None
    verdict: Optional[str] = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data['status'] = self.status.value
        return data


def _timestamp(headers: dict) -> Optional[str]:
    for name in TIMESTAMP_HEADERS:
        if headers.get(name):
            return headers[name]
    return None


def classify_signature(headers: Optional[dict], tokens: VerdictTokens = DEFAULT_TOKENS) -> VerdictResult:
    """Return the verdict for a parsed header dict (see parser.parse_headers).

    An empty or missing header dict and a missing signature marker are both
    warnings. Invalid-looking verdicts are checked by substring before the
    exact match on valid tokens, so "invalid" never counts as "valid".
    """
    if not headers:
        return VerdictResult(Status.WARNING, MSG_NO_HEADERS)

    signature = headers.get(SIGNATURE_HEADER)
    if not signature:
        return VerdictResult(Status.WARNING, MSG_NO_SIGNATURE)

    verdict = headers.get(VERDICT_HEADER)
    result = VerdictResult(
        Status.SUCCESS,
        MSG_FOUND,
        signature=signature,
        timestamp=_timestamp(headers),
        verdict=verdict,
    )

    normalized = (verdict or '').strip().lower()
    if not normalized:
        return result

    if any(token in normalized for token in tokens.invalid):
        result.status = Status.ERROR
        result.message = MSG_INVALID.format(verdict=verdict)
    elif normalized not in tokens.valid:
        result.status = Status.WARNING
        result.message = MSG_UNRECOGNIZED.format(verdict=verdict)

    return result
