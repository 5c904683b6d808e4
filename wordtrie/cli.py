"""CLI / terminal mode for wordtrie."""

from __future__ import annotations

from collections.abc import Iterable

from wordtrie.constants import MAX_SUGGESTIONS, PROMPT
from wordtrie.dictionary import Dictionary
from wordtrie.session import CompletionSession


def _print_help() -> None:
    print("Commands:")
    print("  TEXT                  -- suggest completions for the last word")
    print("  :add                  -- add the last word to the dictionary")
    print("  :add WORD [WORD ...]  -- add the given words")
    print("  :words                -- list every stored word")
    print("  :count                -- number of stored words")
    print("  :help                 -- show this list")
    print("  :quit                 -- leave")
    print()


def _cap(suggestions: list[str], limit: int) -> tuple[list[str], int]:
    """Split *suggestions* into the shown part and the hidden count (0 = no cap)."""
    shown = suggestions if limit <= 0 else suggestions[:limit]
    return shown, len(suggestions) - len(shown)


def format_suggestions(suggestions: list[str], limit: int = MAX_SUGGESTIONS) -> str:
    """One-line rendering of *suggestions*, capped at *limit* (0 = no cap)."""
    if not suggestions:
        return "(no suggestions)"
    shown, hidden = _cap(suggestions, limit)
    line = ", ".join(repr(s) if s == "" else s for s in shown)
    if hidden:
        line += f"  (+{hidden} more)"
    return line


def run_cli(dictionary: Dictionary, max_suggestions: int = MAX_SUGGESTIONS) -> None:
    """Interactive completion loop on stdin."""
    session = CompletionSession(dictionary)

    print("\n" + "=" * 60)
    print("  WORDTRIE -- Autocomplete")
    print("=" * 60)
    print()
    _print_help()

    while True:
        try:
            inp = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not inp.startswith(":"):
            suggestions = session.update(inp)
            print(f"  [{session.word}] {format_suggestions(suggestions, max_suggestions)}")
            continue

        parts = inp[1:].split()
        cmd = parts[0].lower() if parts else ""
        args = parts[1:]

        if cmd in ("quit", "exit"):
            break
        if cmd == "help":
            _print_help()
        elif cmd == "add" and args:
            added = dictionary.add_words(args)
            print(f"  Added {added} new word(s); {len(dictionary)} stored.")
        elif cmd == "add":
            word = session.word
            suggestions = session.commit()
            print(f"  Added {word!r}.  {format_suggestions(suggestions, max_suggestions)}")
        elif cmd == "words":
            print(f"  {format_suggestions(dictionary.search(''), 0)}")
        elif cmd == "count":
            print(f"  {len(dictionary)} word(s) stored.")
        else:
            print(f"  Unknown command ':{cmd}'.  Type :help for the list.")


def print_completions(
    dictionary: Dictionary,
    prefixes: Iterable[str],
    max_suggestions: int = MAX_SUGGESTIONS,
) -> None:
    """Print the completions of each prefix, one block per prefix."""
    for prefix in prefixes:
        matches = dictionary.search(prefix)
        print(f"{prefix}: {len(matches)} match(es)")
        shown, hidden = _cap(matches, max_suggestions)
        for word in shown:
            print(f"  {word}")
        if hidden:
            print(f"  ... +{hidden} more")
