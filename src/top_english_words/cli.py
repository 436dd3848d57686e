#!/usr/bin/env python3
"""Command-line interface for the top English words list."""

import argparse
import json
import sys
from pathlib import Path

from .bounds import Bound, WordRange
from .catalog import WordCatalog, default_catalog


def load_catalog(args):
    """Catalog from --words-file, or the embedded one."""
    if args.words_file is None:
        return default_catalog()
    return WordCatalog.from_file(args.words_file)


def print_words(words, as_json=False):
    if as_json:
        print(json.dumps(words, indent=2))
    else:
        for word in words:
            print(word)


def parse_range(args):
    """Build a WordRange from the range command's START/END/--inclusive."""
    start = Bound.unbounded() if args.start is None else Bound.included(args.start)
    if args.end is None:
        end = Bound.unbounded()
    elif args.inclusive:
        end = Bound.included(args.end)
    else:
        end = Bound.excluded(args.end)
    return WordRange(start, end)


def cmd_info(catalog, args):
    """Show catalog information."""
    print(f"Words: {len(catalog)}")
    print(f"First: {catalog.word(0)}")
    print(f"Last: {catalog.word(len(catalog) - 1)}")
    return 0


def cmd_all(catalog, args):
    """List every word."""
    if args.alphabetical:
        words = catalog.words_alphabetical()
    else:
        words = catalog.words()
    print_words(words, args.json)
    return 0


def cmd_range(catalog, args):
    """List the words in a rank range."""
    word_range = parse_range(args)
    if args.alphabetical:
        words = catalog.words_range_alphabetical(word_range)
    else:
        words = catalog.words_range(word_range)

    if words is None:
        print(f"Invalid range {word_range!r} for {len(catalog)} words", file=sys.stderr)
        return 1

    print_words(words, args.json)
    return 0


def cmd_word(catalog, args):
    """Print the word at a rank."""
    word = catalog.word(args.rank)
    if word is None:
        print(f"No word at rank {args.rank} (catalog has {len(catalog)} words)", file=sys.stderr)
        return 1
    print(word)
    return 0


def cmd_rank(catalog, args):
    """Print the rank of each word."""
    missing = 0
    for word in args.words:
        rank = catalog.rank(word)
        if rank is None:
            print(f"Not a top word: {word}", file=sys.stderr)
            missing += 1
        else:
            print(f"{rank}\t{word}")
    return 1 if missing else 0


COMMANDS = {
    'info': cmd_info,
    'all': cmd_all,
    'range': cmd_range,
    'word': cmd_word,
    'rank': cmd_rank,
}


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Query the most common English words by rank',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  top-english-words word 0               # Most common word
  top-english-words rank the and         # Ranks of words
  top-english-words range 995 1000       # Ranks 995-999
  top-english-words range 0 4 --inclusive -a
  top-english-words --words-file my.txt all --json
"""
    )
    parser.add_argument('--words-file', type=Path,
                        help='Word list to query, one word per line (default: built-in list)')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # info command
    subparsers.add_parser('info', help='Show word list information')

    # all command
    all_parser = subparsers.add_parser('all', help='List all words')
    all_parser.add_argument('-a', '--alphabetical', action='store_true',
                            help='Sort alphabetically instead of by rank')
    all_parser.add_argument('--json', action='store_true', help='Output a JSON array')

    # range command
    range_parser = subparsers.add_parser('range', help='List words in a rank range')
    range_parser.add_argument('start', type=int, nargs='?',
                              help='First rank (default: 0)')
    range_parser.add_argument('end', type=int, nargs='?',
                              help='End rank, exclusive unless --inclusive (default: last rank)')
    range_parser.add_argument('-i', '--inclusive', action='store_true',
                              help='Include the END rank')
    range_parser.add_argument('-a', '--alphabetical', action='store_true',
                              help='Sort alphabetically instead of by rank')
    range_parser.add_argument('--json', action='store_true', help='Output a JSON array')

    # word command
    word_parser = subparsers.add_parser('word', help='Show the word at a rank')
    word_parser.add_argument('rank', type=int, help='Rank (0 = most common)')

    # rank command
    rank_parser = subparsers.add_parser('rank', help='Show the rank of words')
    rank_parser.add_argument('words', nargs='+', help='Words to look up (case-sensitive)')

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        catalog = load_catalog(args)
    except (OSError, ValueError) as e:
        print(f"Error reading word list: {e}", file=sys.stderr)
        return 1

    return COMMANDS[args.command](catalog, args)


if __name__ == '__main__':
    sys.exit(main() or 0)
