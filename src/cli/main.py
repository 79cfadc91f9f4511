"""Command line entry point.

Usage:
  python -m cli.main add -l german -w Haus -m "House; Home" -t noun
  python -m cli.main update -l german -w Haus -m House -e "Mein Haus ist blau"
  python -m cli.main import -l german -f words.txt
  python -m cli.main quiz -l german -t noun -t pronoun
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from dotenv import load_dotenv

# Must run before importing modules that read env vars at import time
load_dotenv()

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from adapter.word_store import create_word_repo
from cli.dependencies import get_quiz_size
from domain.model.errors import DomainError
from port.word_repository import WordRepository
from services.quiz_service import start_quiz
from services.summary_report import render_summary
from services.word_service import add_word, import_words, update_word
from utils.logging import setup_structured_logging
from utils.word_file import read_word_file

logger = logging.getLogger(__name__)


def _add_word_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('-l', '--lang', required=True, help='foreign language')
    parser.add_argument('-w', '--word', required=True, help='foreign word')
    parser.add_argument('-m', '--meaning', required=True, help='translation, several separated by ";"')
    parser.add_argument('-t', '--tags', action='append', default=[], help='topic of the word (repeatable)')
    parser.add_argument('-p', '--pronunciation', default='', help='how to pronounce the word')
    parser.add_argument('-e', '--example', default='', help='example sentence')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='lexiquiz', description='Vocabulary trainer')
    subparsers = parser.add_subparsers(dest='command', required=True)

    _add_word_arguments(subparsers.add_parser('add', help='add new word'))
    _add_word_arguments(subparsers.add_parser('update', help='update word'))

    import_parser = subparsers.add_parser('import', help='import words from a file')
    import_parser.add_argument('-l', '--lang', required=True, help='foreign language')
    import_parser.add_argument('-f', '--file', required=True, help='file containing words to import')

    quiz_parser = subparsers.add_parser('quiz', help='start quiz')
    quiz_parser.add_argument('-l', '--lang', required=True, help='foreign language')
    quiz_parser.add_argument('-t', '--tags', action='append', default=[], help='topic of the quiz (repeatable)')
    quiz_parser.add_argument('-n', '--limit', type=int, default=None, help='maximum number of questions')

    return parser


def execute(args: argparse.Namespace, repo: WordRepository, stdin: TextIO, stdout: TextIO) -> None:
    """Run one parsed command against ``repo``. Domain errors propagate."""
    if args.command == 'add':
        add_word(repo, args.lang, args.word, args.meaning, args.pronunciation, args.example, args.tags)
    elif args.command == 'update':
        update_word(repo, args.lang, args.word, args.meaning, args.pronunciation, args.example, args.tags)
    elif args.command == 'import':
        failed = import_words(repo, read_word_file(args.file, args.lang))
        if failed:
            stdout.write("could not import words:\n")
            for word, reason in failed:
                stdout.write(f"{word.word}: {reason}\n")
    elif args.command == 'quiz':
        limit = args.limit if args.limit is not None else get_quiz_size()
        summary = start_quiz(repo, args.lang, args.tags, stdin, stdout, limit=limit)
        stdout.write(render_summary(summary))


def main(
    argv: list[str] | None = None,
    repo: WordRepository | None = None,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
    stderr: TextIO = sys.stderr,
) -> int:
    args = build_parser().parse_args(argv)

    try:
        if repo is None:
            repo = create_word_repo()
        execute(args, repo, stdin, stdout)
    except (DomainError, OSError, ValueError) as e:
        logger.debug("Command failed", extra={"command": args.command, "error": str(e)})
        stderr.write(f"{e}\n")
        return 1
    return 0


def run():
    """Console script entry point."""
    setup_structured_logging(default_level="WARNING")
    sys.exit(main())


if __name__ == "__main__":
    run()
