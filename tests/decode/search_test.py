"""Tests for decoding zypper search output."""

import pytest

from pyzypper.decode import decode_search_results
from pyzypper.errors import DecodeError
from pyzypper.models import Package, PackageKind, PackageStatus


class TestDecodeSearchResults:
    """Tests for decode_search_results."""

    def test_decodes_all_solvables_in_order(self, search_xml):
        """Test that every solvable becomes a Package, in document order."""
        packages = decode_search_results(search_xml)

        assert len(packages) == 3
        assert all(isinstance(p, Package) for p in packages)
        assert [p.arch for p in packages] == ["x86_64", "i586", "x86_64"]
        assert packages[2].name == "patterns-base-enhanced_base"

    def test_maps_attributes(self, search_xml):
        """Test the mapping of solvable attributes onto Package fields."""
        package = decode_search_results(search_xml)[0]

        assert package.name == "vim"
        assert package.status == PackageStatus.INSTALLED
        assert package.kind == PackageKind.PACKAGE
        assert package.version == "9.1.0836-1.1"
        assert package.arch == "x86_64"

    def test_attribute_values_equal_literal_strings(self, search_xml):
        """Test that enum fields compare equal to the raw attribute strings."""
        package = decode_search_results(search_xml)[2]

        assert package.status == "not-installed"
        assert package.kind == "pattern"
        assert package.version == "20200505-57.1"

    def test_repository_only_has_name(self, search_xml):
        """Test that the repository carries the name and nothing else."""
        packages = decode_search_results(search_xml)

        assert [p.repository.name for p in packages] == [
            "repo-oss",
            "repo-oss",
            "repo-update",
        ]
        repository = packages[0].repository
        assert repository.alias is None
        assert repository.url is None
        assert repository.priority is None
        assert repository.enabled is None
        assert repository.gpg_check is None

    def test_empty_solvable_list(self, empty_search_xml):
        """Test that an empty solvable list decodes to an empty list."""
        assert decode_search_results(empty_search_xml) == []

    def test_self_closing_solvable_list(self):
        """Test that <solvable-list/> decodes to an empty list."""
        output = b"<stream><search-result><solvable-list/></search-result></stream>"
        assert decode_search_results(output) == []

    def test_truncated_document_raises(self, search_xml):
        """Test that truncated XML is a decode error, not a partial result."""
        with pytest.raises(DecodeError):
            decode_search_results(search_xml[: len(search_xml) // 2])

    def test_empty_output_raises(self):
        """Test that empty output is a decode error."""
        with pytest.raises(DecodeError):
            decode_search_results(b"")

    def test_wrong_root_element_raises(self):
        """Test that a document not rooted at <stream> is rejected."""
        output = b"<search-result><solvable-list/></search-result>"
        with pytest.raises(DecodeError, match="stream"):
            decode_search_results(output)

    def test_missing_search_result_raises(self):
        """Test that a stream without <search-result> is rejected."""
        with pytest.raises(DecodeError, match="search-result"):
            decode_search_results(b"<stream><message type='info'/></stream>")

    def test_missing_solvable_list_raises(self):
        """Test that a search result without <solvable-list> is rejected."""
        with pytest.raises(DecodeError, match="solvable-list"):
            decode_search_results(b"<stream><search-result/></stream>")

    def test_solvable_without_name_raises(self):
        """Test that a nameless solvable fails the whole decode."""
        output = (
            b"<stream><search-result><solvable-list>"
            b'<solvable name="vim" status="installed" kind="package" '
            b'edition="1" arch="x86_64" repository="oss"/>'
            b'<solvable status="installed" kind="package" edition="1" '
            b'arch="x86_64" repository="oss"/>'
            b"</solvable-list></search-result></stream>"
        )
        with pytest.raises(DecodeError):
            decode_search_results(output)

    def test_other_version_status_kept_as_string(self):
        """Test that statuses outside the known set decode as plain strings."""
        output = (
            b"<stream><search-result><solvable-list>"
            b'<solvable name="vim" status="other-version" kind="package" '
            b'edition="9.0.1-1.1" arch="x86_64" repository="repo-oss"/>'
            b'<solvable name="vim" status="installed" kind="package" '
            b'edition="9.1.0836-1.1" arch="x86_64" repository="repo-oss"/>'
            b"</solvable-list></search-result></stream>"
        )
        packages = decode_search_results(output)

        assert len(packages) == 2
        assert packages[0].status == "other-version"
        assert not isinstance(packages[0].status, PackageStatus)
        assert packages[1].status is PackageStatus.INSTALLED

    def test_srcpackage_kind_kept_as_string(self):
        """Test that kinds outside the known set decode as plain strings."""
        output = (
            b"<stream><search-result><solvable-list>"
            b'<solvable name="vim" status="not-installed" kind="srcpackage" '
            b'edition="9.1.0836-1.1" arch="noarch" repository="repo-source"/>'
            b"</solvable-list></search-result></stream>"
        )
        package = decode_search_results(output)[0]

        assert package.kind == "srcpackage"
        assert package.status is PackageStatus.NOT_INSTALLED
        assert package.repository.name == "repo-source"

    def test_ignores_unknown_attributes(self):
        """Test that extra solvable attributes are ignored."""
        output = (
            b"<stream><search-result><solvable-list>"
            b'<solvable name="vim" status="installed" kind="package" '
            b'edition="1" arch="x86_64" repository="oss" summary="Vi IMproved"/>'
            b"</solvable-list></search-result></stream>"
        )
        packages = decode_search_results(output)
        assert packages[0].name == "vim"
