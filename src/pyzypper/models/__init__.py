"""Data models for zypper search results and repositories."""

from pyzypper.models.package import Package, PackageKind, PackageStatus
from pyzypper.models.repository import Repository

__all__ = ["Package", "PackageKind", "PackageStatus", "Repository"]
