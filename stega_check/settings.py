"""Header names, verdict tokens and messages used by the STEGA classifier.

Token overrides can be loaded from a small file (JSON or simple lines), the same
two formats accepted for other mapping files in this project.
"""
import json
import os
from dataclasses import dataclass
from typing import Iterable, Tuple

SIGNATURE_HEADER = 'x-stega-signature'
TIMESTAMP_HEADERS = ('x-stega-timestamp', 'x-stega-date')
VERDICT_HEADER = 'x-stega-verdict'

MSG_NO_HEADERS = 'No headers returned by Outlook.'
MSG_NO_SIGNATURE = 'No STEGA signature present in the headers.'
MSG_FOUND = 'STEGA signature found.'
MSG_INVALID = 'STEGA signature flagged as invalid ({verdict}).'
MSG_UNRECOGNIZED = 'STEGA signature found with verdict: {verdict}.'


class TokenFileError(ValueError):
    """Raised when a token override file cannot be read or understood."""


def _clean(tokens: Iterable) -> Tuple[str, ...]:
    cleaned = []
    for t in tokens:
        t = str(t).strip().lower()
        if t and t not in cleaned:
            cleaned.append(t)
    return tuple(cleaned)


@dataclass(frozen=True)
class VerdictTokens:
    # matched as substrings of the normalized verdict
    invalid: Tuple[str, ...]
    # matched exactly
    valid: Tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, 'invalid', _clean(self.invalid))
        object.__setattr__(self, 'valid', _clean(self.valid))


DEFAULT_TOKENS = VerdictTokens(
    invalid=('invalid', 'fail', 'tamper', 'revoked'),
    valid=('valid', 'verified', 'pass'),
)


def load_tokens_from_file(path: str) -> VerdictTokens:
    """Load verdict tokens from a JSON object or simple `group: a, b` lines.

    JSON form: {"invalid": ["fail", ...], "valid": ["pass", ...]}
    Lines form:
        # comment
        invalid: fail, tamper
        valid: pass

    Groups the file does not mention keep their defaults.
    """
    if not os.path.exists(path):
        raise TokenFileError(f"Token file not found: {path}")
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise TokenFileError(f"Failed to read token file {path}: {e}") from e

    groups = {}
    # Try JSON first
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = None

    if data is not None:
        if not isinstance(data, dict):
            raise TokenFileError(f"Token file {path} must contain a JSON object")
        for name in ('invalid', 'valid'):
            if name not in data:
                continue
            value = data[name]
            if isinstance(value, str):
                value = value.split(',')
            if not isinstance(value, list):
                raise TokenFileError(f"'{name}' in {path} must be a list of strings")
            groups[name] = _clean(value)
    else:
        for lineno, line in enumerate(text.splitlines(), start=1):
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            name, sep, rest = line.partition(':')
            name = name.strip().lower()
            if not sep or name not in ('invalid', 'valid'):
                raise TokenFileError(f"{path}:{lineno}: expected 'invalid: ...' or 'valid: ...'")
            groups[name] = _clean(rest.split(','))

    return VerdictTokens(
        invalid=groups.get('invalid', DEFAULT_TOKENS.invalid),
        valid=groups.get('valid', DEFAULT_TOKENS.valid),
    )
