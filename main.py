import argparse
import sys

from rich import print, print_json
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stega_check.classifier import Status, classify_signature
from stega_check.parser import parse_headers, summarize_headers
from stega_check.settings import DEFAULT_TOKENS, TokenFileError, load_tokens_from_file

STATUS_STYLES = {
    Status.PENDING: 'dim',
    Status.SUCCESS: 'green',
    Status.WARNING: 'yellow',
    Status.ERROR: 'red',
}

err_console = Console(stderr=True)


def read_header_text(header_file):
    """Return raw header text from a path, or from stdin when the path is '-'."""
    if header_file == '-':
        return sys.stdin.read()
    with open(header_file, 'r', encoding='utf-8') as f:
        return f.read()


def pretty_print_result(headers, result, show_headers=False):
    summary = summarize_headers(headers)
    print('\n[bold underline]Header Summary[/bold underline]')
    for name, value in summary.items():
        print(f"{name}: {escape(value or '-')}")

    style = STATUS_STYLES[result.status]
    print('\n[bold underline]STEGA Verdict[/bold underline]')
    print(f"Status: [bold {style}]{result.status.value.upper()}[/bold {style}]")
    print(f"[{style}]{escape(result.message)}[/{style}]")
    if result.signature is not None:
        print(f"Signature: {escape(result.signature)}")
        print(f"Timestamp: {escape(result.timestamp or '-')}")
        print(f"Verdict: {escape(result.verdict or '-')}")

    if show_headers:
        table = Table(title='Parsed Headers')
        table.add_column('Header', style='cyan', no_wrap=True)
        table.add_column('Value')
        for name, value in headers.items():
            table.add_row(escape(name), escape(value))
        print()
        print(table)


def main(argv=None):
    parser = argparse.ArgumentParser(description='STEGA signature header check')
    parser.add_argument('header_file', help="Path to raw header text file ('-' reads stdin)")
    parser.add_argument('--tokens-file', help='Path to JSON or simple lines file overriding verdict tokens',
                        default=None)
    parser.add_argument('--json', help='Print the verdict and header summary as JSON', action='store_true')
    parser.add_argument('--show-headers', help='Also print every parsed header', action='store_true')
    parser.add_argument('--strict', help='Exit with code 2 when the signature is flagged invalid',
                        action='store_true')
    args = parser.parse_args(argv)

    tokens = DEFAULT_TOKENS
    if args.tokens_file:
        try:
            tokens = load_tokens_from_file(args.tokens_file)
        except TokenFileError as e:
            err_console.print(f"[yellow]Warning:[/yellow] {escape(str(e))}; using default verdict tokens.")

    if not args.json:
        err_console.print(f"[{STATUS_STYLES[Status.PENDING]}]Status: {Status.PENDING.value} "
                          f"(reading headers)[/{STATUS_STYLES[Status.PENDING]}]")
    try:
        header_text = read_header_text(args.header_file)
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Unable to read headers:[/red] {escape(str(e))}")
        return 1

    headers = parse_headers(header_text)
    result = classify_signature(headers, tokens)

    if args.json:
        print_json(data={'result': result.to_dict(), 'summary': summarize_headers(headers)})
    else:
        pretty_print_result(headers, result, show_headers=args.show_headers)

    if args.strict and result.status == Status.ERROR:
        return 2
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
