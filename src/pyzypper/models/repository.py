# src/pyzypper/models/repository.py

"""Repository records describing configured package sources."""

from pydantic import BaseModel, ConfigDict


class Repository(BaseModel):
    """A package source configured in zypper.

    Fields that zypper did not report are None, meaning unknown. A search
    result only carries the repository name, so a repository attached to a
    Package never has authoritative flags.
    """

    model_config = ConfigDict(frozen=True)

    alias: str | None = None
    """Short alias used to refer to the repository on the command line."""

    name: str | None = None
    """Display name of the repository."""

    type: str | None = None
    """Repository metadata type (e.g., 'rpm-md')."""

    url: str | None = None
    """Base URL of the repository."""

    gpg_key: str | None = None
    """URL of the GPG key used to sign the repository."""

    priority: int | None = None
    """Priority of the repository; lower values win."""

    enabled: bool | None = None
    autorefresh: bool | None = None
    gpg_check: bool | None = None
    repo_gpg_check: bool | None = None
    pkg_gpg_check: bool | None = None
    raw_gpg_check: bool | None = None
