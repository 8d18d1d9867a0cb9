"""Repository operations."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyzypper.client import Client


class RepositoryService:
    """Handles all operations related to repositories.

    No repository sub-commands are wrapped yet. The service is bound to the
    client so that they can be added without changing how callers reach them.
    """

    def __init__(self, client: "Client"):
        self.client = client
