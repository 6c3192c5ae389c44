"""Minimal XHTML fragment builder for documentation content.

Fragments are attached to WADL ``doc`` nodes next to plain text, e.g. the
labeled "Example" block built for request and response representations.
"""

from pydantic import BaseModel


class Elements(BaseModel):
    """A single XHTML element with optional text and child elements."""

    name: str
    value: str | None = None
    children: list["Elements"] = []

    @classmethod
    def el(cls, name: str) -> "Elements":
        return cls(name=name)

    @classmethod
    def val(cls, name: str, value: str) -> "Elements":
        return cls(name=name, value=value)

    def add(self, child: "Elements") -> "Elements":
        """Append a child element and return self so calls can be chained."""
        self.children.append(child)
        return self


def example_block(example: str) -> Elements:
    """Build ``<p><h6>Example</h6><pre><code>example</code></pre></p>``."""
    return (
        Elements.el("p")
        .add(Elements.val("h6", "Example"))
        .add(Elements.el("pre").add(Elements.val("code", example)))
    )
