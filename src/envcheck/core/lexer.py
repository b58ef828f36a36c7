"""
Line-oriented .env lexer.

Splits an environment file into comment, blank and assignment tokens while
keeping each line's raw text, so callers can read names and values without
losing the file's original layout.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional
from enum import Enum


WHITESPACE_RE = re.compile(r"\s")


class TokenType(Enum):
    """Token types for .env file parsing."""
    COMMENT = "comment"
    BLANK_LINE = "blank_line"
    KEY_VALUE = "key_value"


@dataclass
class Token:
    """A single line of the .env file."""
    type: TokenType
    raw: str  # Original text, newline included
    key: Optional[str] = None
    value: Optional[str] = None
    has_export: bool = False


class Lexer:
    """
    Tokenizes .env content one line at a time.

    Blank lines and lines starting with '#' are kept as non-assignment
    tokens. Everything before the first '=' of any other line is the key.
    """

    def __init__(self, content: str):
        self.content = content
        self.lines = content.splitlines(keepends=True)

    def tokenize(self) -> List[Token]:
        return [self._parse_line(line) for line in self.lines]

    def _parse_line(self, line: str) -> Token:
        """Parse a single line into a token."""
        stripped = line.strip()

        if not stripped:
            return Token(type=TokenType.BLANK_LINE, raw=line)

        if stripped.startswith('#'):
            return Token(type=TokenType.COMMENT, raw=line)

        # Not an assignment, keep it but never report a key for it
        if '=' not in stripped:
            return Token(type=TokenType.COMMENT, raw=line)

        has_export = False
        working_line = stripped
        if stripped.startswith('export '):
            has_export = True
            working_line = stripped[7:].lstrip()

        key, _, value = working_line.partition('=')
        key = key.strip()
        value = value.strip()

        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            value = value[1:-1]

        return Token(
            type=TokenType.KEY_VALUE,
            raw=line,
            key=key,
            value=value,
            has_export=has_export
        )


def parse(content: str) -> List[Token]:
    """
    Parse .env file content into tokens.

    Args:
        content: String content of .env file

    Returns:
        List of Token objects, one per line
    """
    return Lexer(content).tokenize()


def get_names(tokens: List[Token]) -> List[str]:
    """
    List assignment names in file order.

    Duplicates are kept; callers that need a unique set dedupe themselves.
    """
    return [
        token.key
        for token in tokens
        if token.type == TokenType.KEY_VALUE and token.key
    ]


def get_keys(tokens: List[Token]) -> Dict[str, str]:
    """
    Extract key-value pairs from tokens.

    When a key is assigned more than once the last assignment wins.
    """
    return {
        token.key: token.value
        for token in tokens
        if token.type == TokenType.KEY_VALUE and token.key
    }


def format_assignment(key: str, value: str) -> str:
    """
    Render a NAME=VALUE line (without newline).

    The value is double-quoted when it contains any whitespace character.
    """
    if WHITESPACE_RE.search(value):
        return f'{key}="{value}"'
    return f"{key}={value}"
