"""Wire schema of zypper's XML search output.

These models mirror the nesting zypper emits with ``--xmlout search``:

    <stream>
      <search-result>
        <solvable-list>
          <solvable name=".." status=".." kind=".." edition=".." arch=".."
                    repository=".."/>
        </solvable-list>
      </search-result>
    </stream>

They are internal to the decoder. Callers receive Package records instead.
"""

from xml.etree import ElementTree as ET

from pydantic import BaseModel


class Solvable(BaseModel):
    """A <solvable> element, attributes kept as raw strings."""

    name: str = ""
    status: str = ""
    kind: str = ""
    edition: str = ""
    arch: str = ""
    repository: str = ""

    @classmethod
    def from_element(cls, element: ET.Element) -> "Solvable":
        return cls(**{k: v for k, v in element.attrib.items() if k in cls.model_fields})


class SolvableList(BaseModel):
    """A <solvable-list> element."""

    solvables: list[Solvable] = []

    @classmethod
    def from_element(cls, element: ET.Element) -> "SolvableList":
        return cls(
            solvables=[Solvable.from_element(e) for e in element.findall("solvable")]
        )


class SearchResult(BaseModel):
    """A <search-result> element."""

    solvable_list: SolvableList

    @classmethod
    def from_element(cls, element: ET.Element) -> "SearchResult":
        solvable_list = element.find("solvable-list")
        if solvable_list is None:
            raise ValueError("missing <solvable-list> in <search-result>")
        return cls(solvable_list=SolvableList.from_element(solvable_list))


class Stream(BaseModel):
    """The <stream> root element of zypper's XML output."""

    search_result: SearchResult

    @classmethod
    def from_element(cls, element: ET.Element) -> "Stream":
        if element.tag != "stream":
            raise ValueError(f"expected <stream> root element, got <{element.tag}>")
        search_result = element.find("search-result")
        if search_result is None:
            raise ValueError("missing <search-result> in <stream>")
        return cls(search_result=SearchResult.from_element(search_result))
