"""
Project manifest storage.

The manifest is a JSON document (package.json by default) that carries an
"envCheck" list of required variable names next to whatever else the project
keeps there. Everything except "envCheck" is passed through untouched.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .errors import ManifestNotFound, ManifestParseError, NoEnvCheckConfigured


ENV_CHECK_FIELD = "envCheck"
DEFAULT_MANIFEST_NAME = "package.json"


def _is_name_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


@dataclass
class Manifest:
    """Parsed manifest document."""
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_env_check(self) -> bool:
        # null counts as absent
        return self.data.get(ENV_CHECK_FIELD) is not None

    @property
    def env_check(self) -> Optional[List[str]]:
        """Tracked names, or None when the field is absent or malformed."""
        value = self.data.get(ENV_CHECK_FIELD)
        if _is_name_list(value):
            return value
        return None

    @env_check.setter
    def env_check(self, names: List[str]):
        self.data[ENV_CHECK_FIELD] = list(names)


class ManifestStore:
    """
    Reads and rewrites the manifest file.

    Each write serializes the whole document with 2-space indentation,
    overwriting the previous content.
    """

    def __init__(self, project_root: str = ".", filename: str = DEFAULT_MANIFEST_NAME):
        """
        Initialize manifest store.

        Args:
            project_root: Root directory of the project
            filename: Manifest path, relative to project_root
        """
        self.project_root = Path(project_root)
        self.path = self.project_root / filename

    def load(self) -> Manifest:
        """
        Load the manifest from disk.

        Raises:
            ManifestNotFound: file does not exist
            ManifestParseError: invalid JSON or not a JSON object
        """
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            raise ManifestNotFound(self.path)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ManifestParseError(self.path, str(e))

        if not isinstance(data, dict):
            raise ManifestParseError(self.path, "top-level value is not a JSON object")

        return Manifest(data=data)

    def save(self, manifest: Manifest):
        """Write the manifest back to disk."""
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(manifest.data, f, indent=2, ensure_ascii=False)
            f.write('\n')

    def get_tracked_variables(self) -> List[str]:
        """
        Return the names listed in envCheck.

        Raises:
            NoEnvCheckConfigured: field is absent or not a list of strings
        """
        names = self.load().env_check
        if names is None:
            raise NoEnvCheckConfigured(self.path)
        return list(names)

    def add_variables(self, names: Iterable[str]) -> List[str]:
        """
        Merge names into envCheck and save the manifest.

        Names already tracked are skipped (case-sensitive), as are repeats
        within names itself. The field is created when absent.

        Args:
            names: Variable names to track

        Returns:
            The names that were actually appended
        """
        manifest = self.load()

        if manifest.has_env_check and manifest.env_check is None:
            raise NoEnvCheckConfigured(
                self.path,
                reason="\"envCheck\" is not a list of strings"
            )

        tracked = list(manifest.env_check or [])
        seen = set(tracked)
        added = []

        for name in names:
            if name in seen:
                continue
            seen.add(name)
            tracked.append(name)
            added.append(name)

        manifest.env_check = tracked
        self.save(manifest)

        return added
