"""Operations exposed by the zypper client."""

from pyzypper.services.package import PackageService
from pyzypper.services.repository import RepositoryService

__all__ = ["PackageService", "RepositoryService"]
