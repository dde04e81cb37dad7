"""
CLI interface for universal-tagger.

Usage:
    universal-tagger "Colorless green ideas sleep furiously."
    universal-tagger --json "Mr.  Fox  jumped."
    universal-tagger detect "There is no reason not to learn Esperanto."
    universal-tagger tag --language eng "The cat sat on the mat."
    universal-tagger interactive
    universal-tagger build-stop-words data/stop_words --language eng --language deu
"""

import argparse
import json
import logging
import sys
from typing import Iterable, List, Optional

from universal_tagger import __version__
from universal_tagger.config import Config, load_config
from universal_tagger.exceptions import UniversalTaggerError
from universal_tagger.language import Language
from universal_tagger.language_detection import LanguageDetector
from universal_tagger.raw_types import Token
from universal_tagger.stop_words import build_stop_words
from universal_tagger.tagger import TaggedToken, Tagger
from universal_tagger.tokenizer import tokenize_text

logger = logging.getLogger(__name__)

COMMANDS = ("tokenize", "detect", "tag", "interactive", "build-stop-words")
PROMPT = "> "
QUIT = "quit"


# ============================================================================
# Output Formatting
# ============================================================================

def token_record(token: Token) -> dict:
    return {
        "text": token.text,
        "category": token.category.value,
        "position": token.position.value,
        "start": token.start,
        "end": token.end,
    }


def format_default(tokens: Iterable[Token]) -> str:
    """One token per line: position, category, quoted text."""
    lines = []
    for t in tokens:
        lines.append(f"{t.position.value:<6}  {t.category.value:<22}  {t.text!r}")
    return "\n".join(lines)


def format_simple(tokens: Iterable[Token]) -> str:
    """Tab-separated: text, category, position, start, end."""
    lines = []
    for t in tokens:
        lines.append(f"{t.text}\t{t.category.value}\t{t.position.value}\t{t.start}\t{t.end}")
    return "\n".join(lines)


def format_json(tokens: Iterable[Token]) -> str:
    """Format tokens as a JSON array."""
    return json.dumps([token_record(t) for t in tokens], ensure_ascii=False, indent=2)


def format_tagged(tagged: Iterable[TaggedToken], as_json: bool = False) -> str:
    """Format tagged tokens; the tag column is empty for untagged tokens."""
    if as_json:
        data = []
        for _, token, tag in tagged:
            record = token_record(token)
            record["tag"] = tag.value if tag else None
            data.append(record)
        return json.dumps(data, ensure_ascii=False, indent=2)

    lines = []
    for position, token, tag in tagged:
        tag_name = tag.value if tag else ""
        lines.append(f"{position.value:<6}  {token.category.value:<22}  {token.text!r:<20}  {tag_name}".rstrip())
    return "\n".join(lines)


# ============================================================================
# Commands
# ============================================================================

def read_text(args: argparse.Namespace) -> str:
    """Text from the positional argument, or stdin when it is omitted."""
    if args.text is not None:
        return args.text
    return sys.stdin.read().strip()


def cmd_tokenize(args: argparse.Namespace, config: Config) -> int:
    text = read_text(args)
    tokens = tokenize_text(text)

    if args.json:
        print(format_json(tokens))
    elif args.simple:
        print(format_simple(tokens))
    else:
        print(format_default(tokens))
    return 0


def cmd_detect(args: argparse.Namespace, config: Config) -> int:
    text = read_text(args)
    lang = LanguageDetector.all(config).detect(text)
    print(lang.value if lang else "unknown")
    return 0 if lang else 1


def cmd_tag(args: argparse.Namespace, config: Config) -> int:
    text = read_text(args)

    if args.language:
        lang = Language.parse(args.language)
    else:
        lang = LanguageDetector.all(config).detect(text)
        if lang is None:
            print("Unknown language", file=sys.stderr)
            return 1

    tagger = Tagger(lang, config=config)
    print(format_tagged(tagger.tag(text), as_json=args.json))
    return 0


def cmd_interactive(args: argparse.Namespace, config: Config) -> int:
    """Read lines until 'quit' or EOF; print the language and tagged tokens of each."""
    try:
        import readline  # noqa: F401  (line editing and history for input())
    except ImportError:
        logger.debug("readline unavailable, line editing disabled")

    detector = LanguageDetector.all(config)
    taggers = {}

    while True:
        try:
            text = input(PROMPT)
        except EOFError:
            print()
            break
        if text == QUIT:
            break
        if not text.strip():
            continue

        lang = detector.detect(text)
        if lang is None:
            print("Unknown language")
            continue
        print(f"Language is {lang.english_name} ({lang.value})")

        if lang not in taggers:
            taggers[lang] = Tagger(lang, config=config)
        print(format_tagged(taggers[lang].tag(text), as_json=args.json))

    return 0


def cmd_build_stop_words(args: argparse.Namespace, config: Config) -> int:
    if args.language:
        languages = [Language.parse(code) for code in args.language]
    else:
        languages = config.detection.languages

    for lang in languages:
        path = build_stop_words(lang, args.output_dir)
        print(path)
    return 0


HANDLERS = {
    "tokenize": cmd_tokenize,
    "detect": cmd_detect,
    "tag": cmd_tag,
    "interactive": cmd_interactive,
    "build-stop-words": cmd_build_stop_words,
}


# ============================================================================
# Main
# ============================================================================

def setup_logging(level: str, verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level),
        format='%(asctime)s - %(levelname)s - %(message)s',
    )


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config", "-c",
        help="YAML configuration file (default: $UNIVERSAL_TAGGER_CONFIG)",
    )
    common.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser = argparse.ArgumentParser(
        prog="universal-tagger",
        description="Language-agnostic natural-language tagger",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"universal-tagger {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command")

    tokenize_parser = subparsers.add_parser("tokenize", parents=[common], help="Tokenize text (default)")
    tokenize_parser.add_argument("text", nargs="?", help="Text to tokenize (default: stdin)")
    tokenize_parser.add_argument("--json", "-j", action="store_true", help="Output as JSON")
    tokenize_parser.add_argument(
        "--simple", "-s",
        action="store_true",
        help="Simple output format (text, category, position, start, end)",
    )

    detect_parser = subparsers.add_parser("detect", parents=[common], help="Detect the language of text")
    detect_parser.add_argument("text", nargs="?", help="Text to inspect (default: stdin)")

    tag_parser = subparsers.add_parser("tag", parents=[common], help="Tag stop words in text")
    tag_parser.add_argument("text", nargs="?", help="Text to tag (default: stdin)")
    tag_parser.add_argument("--language", "-l", help="Language code; detected when omitted")
    tag_parser.add_argument("--json", "-j", action="store_true", help="Output as JSON")

    interactive_parser = subparsers.add_parser("interactive", parents=[common], help="Tag lines read from a prompt")
    interactive_parser.add_argument("--json", "-j", action="store_true", help="Output as JSON")

    build_parser_ = subparsers.add_parser(
        "build-stop-words",
        parents=[common],
        help="Prebuild stop-word tries for fast loading",
    )
    build_parser_.add_argument("output_dir", help="Directory to write the .trie files to")
    build_parser_.add_argument(
        "--language", "-l",
        action="append",
        help="Language code (repeatable; default: configured languages)",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Bare text means "tokenize"
    if not argv or (argv[0] not in COMMANDS and argv[0] not in ("-h", "--help", "-v", "--version")):
        argv.insert(0, "tokenize")

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        setup_logging(config.log_level, args.verbose)

        if args.command in ("tokenize", "detect", "tag") and args.text is None and sys.stdin.isatty():
            parser.print_help()
            return 1

        return HANDLERS[args.command](args, config)
    except (UniversalTaggerError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
