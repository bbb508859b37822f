"""Data types for Project Status Line."""

import os

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class SessionInput:
    """Session metadata piped in on stdin."""

    model: Union[dict[str, Any], str, None] = None
    model_name: Optional[str] = None
    current_dir: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "SessionInput":
        """Build from a decoded JSON object, ignoring values of the wrong type."""
        model = payload.get("model")
        if not isinstance(model, (dict, str)):
            model = None

        model_name = payload.get("modelName")
        if not isinstance(model_name, str):
            model_name = None

        workspace = payload.get("workspace")
        current_dir = None
        if isinstance(workspace, dict):
            value = workspace.get("current_dir")
            if isinstance(value, str):
                current_dir = value

        return cls(model=model, model_name=model_name, current_dir=current_dir)


@dataclass(frozen=True)
class RepositoryInfo:
    """Version-control repository located for the working directory."""

    root: str
    branch: str
    is_multi_repo: bool = False
    active_repo_name: Optional[str] = None
    active_repo_path: Optional[str] = None

    @property
    def display_branch(self) -> str:
        """Branch as displayed, prefixed by the active repo in multi-repo mode."""
        if self.is_multi_repo and self.active_repo_name:
            return f"{self.active_repo_name}/{self.branch}"
        return self.branch

    @property
    def project_name(self) -> str:
        return os.path.basename(os.path.normpath(self.root)) or self.root


@dataclass
class RecentFileResult:
    """Most recently modified file found under the project root."""

    display_path: Optional[str] = None
    has_deep_content: bool = False


@dataclass(frozen=True)
class StatusData:
    """Resolved values consumed by the line composer."""

    project_name: str = ""
    branch: str = ""
    accessed_file: str = ""
    model_name: str = ""
