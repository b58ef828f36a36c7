"""
envcheck core modules.

Includes:
- lexer: Line-oriented .env parsing
- manifest: envCheck list storage in the JSON manifest
- envfile: .env reading and appending
- prompter: Interactive value collection
- checker: Missing-variable detection and check flow
- errors: Error types
"""

from . import errors
from . import lexer
from . import manifest
from . import envfile
from . import prompter
from . import checker

__all__ = [
    "errors",
    "lexer",
    "manifest",
    "envfile",
    "prompter",
    "checker",
]
