"""
Console Tokenizer

Splits a raw console line into tokens, respecting quoted strings.
"""

from typing import Callable, List


Tokenizer = Callable[[str], List[str]]

QUOTE_CHARS = ('"', "'")


def tokenize(text: str) -> List[str]:
    """
    Tokenize input, respecting quoted strings.

    A quote only opens a quoted token at the start of a token, so
    apostrophes inside words are kept. Empty quoted strings are dropped.

    Examples:
        'echo hello' -> ['echo', 'hello']
        'echo "hello world"' -> ['echo', 'hello world']
        "echo don't" -> ['echo', "don't"]
    """
    tokens = []
    current = ""
    quote_char = None

    for char in text:
        if quote_char is not None:
            if char == quote_char:
                quote_char = None
                if current:
                    tokens.append(current)
                    current = ""
            else:
                current += char
        elif char in QUOTE_CHARS and not current:
            quote_char = char
        elif char.isspace():
            if current:
                tokens.append(current)
                current = ""
        else:
            current += char

    # Unterminated quote: keep what was read
    if current:
        tokens.append(current)

    return tokens
