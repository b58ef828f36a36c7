"""
Local environment file access (.env by default).
"""

from pathlib import Path
from typing import Dict, List, Mapping

from .errors import EnvFileNotFound, EnvFileParseError
from .lexer import parse, get_names, get_keys, format_assignment


DEFAULT_ENV_FILE_NAME = ".env"
AUTO_GEN_MARKER = "#Auto GEN by envCheck"


class EnvFile:
    """
    Reads names and values from the environment file and appends new entries.

    Appends never rewrite or dedupe existing lines: a name answered twice
    ends up assigned twice.
    """

    def __init__(self, project_root: str = ".", filename: str = DEFAULT_ENV_FILE_NAME):
        self.project_root = Path(project_root)
        self.path = self.project_root / filename

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> str:
        """
        Read the raw file content.

        Raises:
            EnvFileNotFound: file does not exist
            EnvFileParseError: file is not valid UTF-8
        """
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                return f.read()
        except FileNotFoundError:
            raise EnvFileNotFound(self.path)
        except UnicodeDecodeError as e:
            raise EnvFileParseError(self.path, str(e))

    def read_names(self) -> List[str]:
        """
        List variable names assigned in the file, in order, duplicates kept.

        Raises:
            EnvFileNotFound: file does not exist
        """
        return get_names(parse(self.read()))

    def read_values(self) -> Dict[str, str]:
        """Name -> value mapping; an absent file yields an empty mapping."""
        if not self.exists():
            return {}
        return get_keys(parse(self.read()))

    def append_entries(self, entries: Mapping[str, str]):
        """
        Append answered variables as one marked block.

        Args:
            entries: Name -> value, written in mapping order
        """
        if not entries:
            return

        lines = [format_assignment(name, value) for name, value in entries.items()]
        block = f"\n{AUTO_GEN_MARKER}\n" + "\n".join(lines) + "\n"

        with open(self.path, 'a', encoding='utf-8') as f:
            f.write(block)
