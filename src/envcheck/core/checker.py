"""
Check that every tracked variable is set, prompting for the ones that aren't.

The decision is made against an explicit environment snapshot rather than
os.environ, so find_missing() is a pure function of its inputs.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from .envfile import EnvFile
from .manifest import ManifestStore
from .prompter import Prompter


def load_environment(env_file: EnvFile, environ: Mapping[str, str]) -> Dict[str, str]:
    """
    Build the environment snapshot used for checking.

    Values from the env file seed the snapshot; variables already present in
    environ win, even when they are empty.

    Args:
        env_file: Project environment file (may not exist)
        environ: Ambient process environment, usually os.environ

    Returns:
        Merged name -> value mapping
    """
    snapshot = env_file.read_values()
    snapshot.update(environ)
    return snapshot


def find_missing(tracked: List[str], snapshot: Mapping[str, str]) -> List[str]:
    """Return tracked names that are absent or empty in snapshot, in order."""
    return [name for name in tracked if not snapshot.get(name)]


@dataclass
class CheckResult:
    """Outcome of a single check run."""
    tracked: List[str]
    missing: List[str] = field(default_factory=list)
    answers: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """True when nothing was missing."""
        return not self.missing


class Checker:
    """Runs the check flow for one invocation."""

    def __init__(
        self,
        store: ManifestStore,
        env_file: EnvFile,
        prompter: Prompter,
        snapshot: Optional[Mapping[str, str]] = None
    ):
        self.store = store
        self.env_file = env_file
        self.prompter = prompter
        self.snapshot = dict(snapshot or {})

    def run(self) -> CheckResult:
        """
        Load tracked names, prompt for missing ones, append answers.

        Raises:
            ManifestNotFound, ManifestParseError, NoEnvCheckConfigured
        """
        tracked = self.store.get_tracked_variables()
        missing = find_missing(tracked, self.snapshot)

        if not missing:
            return CheckResult(tracked=tracked)

        replies = self.prompter.prompt_for_values(missing)
        # Written in manifest order whatever order the prompter replied in
        answers = {name: replies[name] for name in missing}
        self.env_file.append_entries(answers)

        return CheckResult(tracked=tracked, missing=missing, answers=answers)
