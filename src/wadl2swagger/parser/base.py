"""Data models for a parsed WADL document.

The XML parser turns every element into a WadlNode. Namespace prefixes are
already stripped from tag and attribute names, and child elements are always
kept as lists, even when a tag occurs only once.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from wadl2swagger.errors import UnsupportedConstructError


class PlainText(BaseModel):
    """A ``<doc>`` element with text only."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["plain"] = "plain"
    text: str


class LinkedDoc(BaseModel):
    """A ``<doc>`` element with attributes (title, Apigee-style url)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["linked"] = "linked"
    text: str | None = None
    url: str | None = None
    title: str | None = None


DocNode = Annotated[PlainText | LinkedDoc, Field(discriminator="kind")]


class WadlNode(BaseModel):
    """A single XML element of a WADL document."""

    model_config = ConfigDict(frozen=True)

    tag: str
    attributes: dict[str, str] = {}
    text: str | None = None
    children: dict[str, list["WadlNode"]] = {}

    def attr(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)

    def has(self, tag: str) -> bool:
        return bool(self.children.get(tag))

    def all(self, tag: str) -> list["WadlNode"]:
        """Return child elements with the given tag, in document order."""
        return self.children.get(tag, [])

    def one(self, tag: str) -> "WadlNode | None":
        """Return the only child with the given tag, or None if absent.

        More than one such child is outside the supported subset.
        """
        nodes = self.all(tag)
        if not nodes:
            return None
        if len(nodes) > 1:
            raise UnsupportedConstructError(
                f"multiple <{tag}> elements", f"inside <{self.tag}>"
            )
        return nodes[0]

    def docs(self) -> list[DocNode]:
        """Return the ``<doc>`` children as tagged documentation nodes."""
        result: list[DocNode] = []
        for doc in self.all("doc"):
            if doc.attributes:
                result.append(
                    LinkedDoc(
                        text=doc.text,
                        url=doc.attr("url"),
                        title=doc.attr("title"),
                    )
                )
            else:
                result.append(PlainText(text=doc.text or ""))
        return result
