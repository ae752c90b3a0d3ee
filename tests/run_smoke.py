import sys
from pathlib import Path

sys.path.insert(0, str(Path.cwd()))

from stega_check.parser import parse_headers
from stega_check.classifier import Status, classify_signature


def main():
    ok = True

    text = Path('sample_headers/stega_signed.txt').read_text(encoding='utf-8')
    headers = parse_headers(text)
    result = classify_signature(headers)

    if headers.get('subject') != 'Quarterly report, final version':
        print('ERROR: folded Subject not unfolded')
        ok = False

    if result.status != Status.SUCCESS or result.verdict != 'Verified':
        print(f'ERROR: expected success for signed sample, got {result.status.value}')
        ok = False

    text = Path('sample_headers/stega_tampered.txt').read_text(encoding='utf-8')
    result = classify_signature(parse_headers(text))

    if result.status != Status.ERROR:
        print(f'ERROR: expected error for tampered sample, got {result.status.value}')
        ok = False

    if result.timestamp != '2024-01-02':
        print('ERROR: expected X-STEGA-Date fallback for timestamp')
        ok = False

    if classify_signature(parse_headers('')).message != 'No headers returned by Outlook.':
        print('ERROR: expected no-headers warning for empty input')
        ok = False

    if ok:
        print('Smoke test passed')
        return 0
    else:
        print('Smoke test FAILED')
        return 2


if __name__ == '__main__':
    raise SystemExit(main())
