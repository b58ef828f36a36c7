"""
envcheck - Required environment variable checker

Tracks the environment variables a project needs in its JSON manifest and
prompts for any that are missing, saving the answers to the local .env.
"""

__version__ = "0.1.0"

from .core import lexer, manifest, envfile, checker

__all__ = [
    "lexer",
    "manifest",
    "envfile",
    "checker",
]
