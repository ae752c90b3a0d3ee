"""Parse raw internet mail headers into a lower-case keyed dict.
Line-based parsing that unfolds continuation lines; malformed lines are dropped.
"""
import re
from typing import Optional

_LINE_SPLIT = re.compile(r'\r\n|\r|\n')

SUMMARY_FIELDS = ('From', 'To', 'Subject', 'Date')


def parse_headers(header_text: Optional[str]) -> dict:
    """Return an ordered dict mapping lower-case header names to unfolded values.

    Later occurrences of a header replace earlier ones. Lines without a colon
    and continuation lines with nothing to continue are ignored.
    """
    headers = {}
    if not header_text:
        return headers

    current_key = None
    for line in _LINE_SPLIT.split(header_text):
        if line == '':
            current_key = None
            continue

        if line[0] in (' ', '\t') and current_key is not None:
            folded = line.strip()
            # whitespace-only folds add nothing
            if folded:
                headers[current_key] = f"{headers[current_key]} {folded}"
            continue

        idx = line.find(':')
        if idx == -1:
            current_key = None
            continue

        key = line[:idx].strip().lower()
        headers[key] = line[idx + 1:].strip()
        current_key = key

    return headers


def summarize_headers(headers: Optional[dict]) -> dict:
    """Return the display fields (From, To, Subject, Date) from a parsed header dict."""
    headers = headers or {}
    return {name: headers.get(name.lower()) for name in SUMMARY_FIELDS}
