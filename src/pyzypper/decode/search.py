"""Decoding of ``zypper search`` XML output into Package records."""

from xml.etree import ElementTree as ET

from pydantic import ValidationError

from pyzypper.decode.schemas import Solvable, Stream
from pyzypper.errors import DecodeError
from pyzypper.models import Package, Repository


def decode_search_results(output: bytes) -> list[Package]:
    """Decode the XML produced by ``zypper --xmlout search``.

    Args:
        output: Raw standard output of the search sub-command.

    Returns:
        One Package per <solvable>, in document order. An empty
        <solvable-list> yields an empty list.

    Raises:
        DecodeError: If the output is not well-formed XML, does not have the
            stream/search-result/solvable-list shape, or holds a solvable
            that cannot be turned into a Package. No partial result is
            returned in that case.
    """
    try:
        root = ET.fromstring(output)
    except ET.ParseError as e:
        raise DecodeError(str(e)) from e

    try:
        stream = Stream.from_element(root)
    except ValueError as e:
        raise DecodeError(str(e)) from e

    packages = []
    for solvable in stream.search_result.solvable_list.solvables:
        packages.append(_to_package(solvable))
    return packages


def _to_package(solvable: Solvable) -> Package:
    try:
        return Package(
            name=solvable.name,
            status=solvable.status,
            kind=solvable.kind,
            version=solvable.edition,
            arch=solvable.arch,
            repository=Repository(name=solvable.repository),
        )
    except ValidationError as e:
        raise DecodeError(f"invalid solvable {solvable.name!r}: {e}") from e
