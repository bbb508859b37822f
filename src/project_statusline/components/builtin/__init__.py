"""Built-in status line components.

Importing this module registers all built-in components with the registry.
"""

from .accessed import AccessedFileComponent
from .branch import BranchComponent
from .model import ModelComponent
from .project import ProjectComponent

__all__ = [
    "ProjectComponent",
    "BranchComponent",
    "AccessedFileComponent",
    "ModelComponent",
]
