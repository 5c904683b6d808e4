"""Defaults shared by the session and terminal front end."""

# How many suggestions the terminal shows per prefix (0 = all).
MAX_SUGGESTIONS = 10

PROMPT = "  word> "

# Any run of whitespace ends the in-progress word.
TOKEN_SEPARATOR = r"\s+"
