# src/pyzypper/models/package.py

"""Package records returned by zypper searches."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from pyzypper.models.repository import Repository


class PackageStatus(str, Enum):
    """Installation status of a solvable as reported by zypper."""

    INSTALLED = "installed"
    NOT_INSTALLED = "not-installed"


class PackageKind(str, Enum):
    """Kind of solvable as reported by zypper."""

    PACKAGE = "package"
    PATCH = "patch"
    PATTERN = "pattern"
    PRODUCT = "product"


class Package(BaseModel):
    """An installable unit found in one of the configured repositories."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    """Package name (e.g., 'vim')."""

    status: PackageStatus | str = Field(union_mode="left_to_right")
    """Installation status. Values zypper adds beyond PackageStatus, such as
    'other-version', are kept as plain strings."""

    kind: PackageKind | str = Field(union_mode="left_to_right")
    """Kind of solvable. Values zypper adds beyond PackageKind, such as
    'srcpackage', are kept as plain strings."""

    version: str
    """Version and release string, taken verbatim from zypper's edition."""

    arch: str
    """Architecture identifier (e.g., 'x86_64', 'noarch')."""

    repository: Repository
    """Repository the package comes from. Only its name is known."""
