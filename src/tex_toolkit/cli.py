"""
Command-line front end.

Subcommands:
    math FILE [--at LINE:COL]                   list math spans / span under a position
    search ROOT PATTERN [--regex] [--case-sensitive]
    replace ROOT PATTERN REPLACEMENT [--regex] [--case-sensitive] [--dry-run]
    spell FILE [--ignore-file PATH]             misspellings, minus ignored words
    suggest WORD                                corrections for one word
    ignore WORD --ignore-file PATH              add a word to the persisted ignore list

--json prints machine-readable output and may appear before or after the
subcommand.

Exit codes: 0 success, 1 issues found (spell), 2 usage or I/O error.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, Tuple

from tex_toolkit import __version__
from tex_toolkit.math_scan import find_span_at_position, scan_math_spans
from tex_toolkit.search import replace_all, search_with_outcome
from tex_toolkit.spellcheck import IgnoreList, check_spelling, filter_ignored, suggest
from tex_toolkit.utils.logging_utils import configure_logging
from tex_toolkit.workspace import IgnoreListStore, load_corpus, load_file, write_back

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_ERROR = 2


def _parse_position(text: str) -> Tuple[int, int]:
    """Parse a 1-based "LINE:COL" string."""
    try:
        line_text, col_text = text.split(":", 1)
        line, col = int(line_text), int(col_text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected LINE:COL, got {text!r}") from None
    if line < 1 or col < 1:
        raise argparse.ArgumentTypeError("LINE and COL are 1-based")
    return line, col


def _emit_json(payload) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _cmd_math(args: argparse.Namespace) -> int:
    source = load_file(args.file)
    spans = scan_math_spans(source.content)

    if args.at is not None:
        line, col = args.at
        span = find_span_at_position(spans, line - 1, col - 1)
        if args.json:
            _emit_json(span.to_dict() if span else None)
        elif span is None:
            print("No math at that position")
        else:
            print(span.content)
        return EXIT_OK

    if args.json:
        _emit_json([s.to_dict() for s in spans])
        return EXIT_OK
    for span in spans:
        kind = "display" if span.is_display else "inline"
        print(f"{span.start.line + 1}:{span.start.column + 1}  {kind:<7}  {span.content}")
    return EXIT_OK


def _search(args: argparse.Namespace):
    corpus = load_corpus(args.root)
    outcome = search_with_outcome(corpus, args.pattern, args.regex, args.case_sensitive)
    return corpus, outcome


def _cmd_search(args: argparse.Namespace) -> int:
    _, outcome = _search(args)
    if not outcome.ok:
        print(f"Invalid pattern: {outcome.error}", file=sys.stderr)
        return EXIT_ERROR

    if args.json:
        _emit_json([m.to_dict() for m in outcome.matches])
        return EXIT_OK
    for m in outcome.matches:
        print(f"{m.file_id}:{m.line}:{m.column}: {m.line_content}")
    print(f"{outcome.total_matches} matches in {len(outcome.files_matched)} files")
    return EXIT_OK


def _cmd_replace(args: argparse.Namespace) -> int:
    corpus, outcome = _search(args)
    if not outcome.ok:
        print(f"Invalid pattern: {outcome.error}", file=sys.stderr)
        return EXIT_ERROR

    new_contents = replace_all(corpus, outcome.matches, args.replacement)
    if args.dry_run:
        for file_id in sorted(new_contents):
            count = sum(1 for m in outcome.matches if m.file_id == file_id)
            print(f"{file_id}: {count} replacements")
        return EXIT_OK

    written = write_back(args.root, new_contents)
    print(f"Replaced {outcome.total_matches} matches in {len(written)} files")
    return EXIT_OK


def _load_ignore_list(path: Optional[Path]) -> IgnoreList:
    if path is None:
        return IgnoreList()
    return IgnoreListStore(path).load()


def _cmd_spell(args: argparse.Namespace) -> int:
    source = load_file(args.file)
    issues = filter_ignored(check_spelling(source.content), _load_ignore_list(args.ignore_file))

    if args.json:
        _emit_json([i.to_dict() for i in issues])
    else:
        for issue in issues:
            hint = ", ".join(issue.suggestions) or "no suggestions"
            print(f"{source.file_name}:{issue.line}:{issue.start_column}: {issue.word} -> {hint}")
    return EXIT_ISSUES if issues else EXIT_OK


def _cmd_suggest(args: argparse.Namespace) -> int:
    suggestions = suggest(args.word)
    if args.json:
        _emit_json(suggestions)
    elif suggestions:
        print("\n".join(suggestions))
    else:
        print("No suggestions")
    return EXIT_OK


def _cmd_ignore(args: argparse.Namespace) -> int:
    ignored = IgnoreListStore(args.ignore_file).add(args.word)
    if args.json:
        _emit_json(ignored.to_list())
    else:
        print(f"Ignoring {args.word.lower()!r} ({len(ignored)} words ignored)")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tex-toolkit",
        description="Math-region scanning, search/replace and spell checking for LaTeX sources",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")

    # Also accepted after the subcommand; SUPPRESS keeps the top-level value
    output = argparse.ArgumentParser(add_help=False)
    output.add_argument("--json", action="store_true", default=argparse.SUPPRESS,
                        help="Print results as JSON")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("math", parents=[output], help="List math spans in a file")
    p.add_argument("file", type=Path)
    p.add_argument("--at", type=_parse_position, metavar="LINE:COL",
                   help="Show only the span under this 1-based position")
    p.set_defaults(func=_cmd_math)

    for name, func, help_text in (
        ("search", _cmd_search, "Search a project directory"),
        ("replace", _cmd_replace, "Replace every match in a project directory"),
    ):
        p = sub.add_parser(name, parents=[output], help=help_text)
        p.add_argument("root", type=Path, help="Project directory")
        p.add_argument("pattern")
        if name == "replace":
            p.add_argument("replacement")
            p.add_argument("--dry-run", action="store_true", help="Report changes without writing")
        p.add_argument("--regex", action="store_true", help="Treat pattern as a regular expression")
        p.add_argument("--case-sensitive", action="store_true", help="Match case exactly")
        p.set_defaults(func=func)

    p = sub.add_parser("spell", parents=[output], help="Spell check a file")
    p.add_argument("file", type=Path)
    p.add_argument("--ignore-file", type=Path, help="JSON ignore list to filter with")
    p.set_defaults(func=_cmd_spell)

    p = sub.add_parser("suggest", parents=[output], help="Suggest corrections for a word")
    p.add_argument("word")
    p.set_defaults(func=_cmd_suggest)

    p = sub.add_parser("ignore", parents=[output], help="Add a word to a persisted ignore list")
    p.add_argument("word")
    p.add_argument("--ignore-file", type=Path, required=True)
    p.set_defaults(func=_cmd_ignore)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        return args.func(args)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
