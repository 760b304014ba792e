"""
Shape templates: raw SVG markup parsed once into a root tag, a body, and named slots.
Slots use ${color}, ${width}, ${height}. Malformed templates fail when parsed, not when rendered.
"""
import re
from dataclasses import dataclass, field
from string import Template

from .errors import TemplateError

SLOTS = frozenset({"color", "width", "height"})
DEFAULT_VIEWBOX = "0 0 200 200"

_ROOT_TAG = re.compile(r"<svg\b([^>]*)>")
_VIEWBOX_ATTR = re.compile(r"\sviewBox\s*=")


@dataclass(frozen=True)
class ShapeTemplate:
    """
    One catalogue entry.
    prefix: anything before the root tag (XML declaration, comments).
    root_attrs: attribute text of the root <svg> opening tag.
    body: everything after the root opening tag.
    """
    text: str
    prefix: str
    root_attrs: str
    body: str
    key: int | None = None
    slots: frozenset[str] = frozenset()
    _head: Template = field(default=None, repr=False, compare=False)
    _tail: Template = field(default=None, repr=False, compare=False)

    @classmethod
    def parse(cls, text: str, key: int | None = None) -> "ShapeTemplate":
        if not isinstance(text, str):
            raise TemplateError(f"expected markup text, got {type(text).__name__}", key=key)
        m = _ROOT_TAG.search(text)
        if m is None:
            raise TemplateError("no root <svg> element", key=key)
        root_attrs = m.group(1)
        if root_attrs.rstrip().endswith("/"):
            raise TemplateError("root <svg> element is self-closing", key=key)
        prefix = text[: m.start()]
        body = text[m.end():]

        head = Template(prefix + "<svg" + root_attrs)
        tail = Template(body)
        slots: set[str] = set()
        for part in (head, tail):
            if not part.is_valid():
                raise TemplateError("malformed placeholder (use ${name}, or $$ for a literal $)", key=key)
            slots.update(part.get_identifiers())
        unknown = slots - SLOTS
        if unknown:
            raise TemplateError(f"unknown placeholder(s): {', '.join(sorted(unknown))}", key=key)

        return cls(
            text=text,
            prefix=prefix,
            root_attrs=root_attrs,
            body=body,
            key=key,
            slots=frozenset(slots),
            _head=head,
            _tail=tail,
        )

    @property
    def has_viewbox(self) -> bool:
        return _VIEWBOX_ATTR.search(self.root_attrs) is not None

    def render(self, fill: str, size: str, defs: str = "", viewbox: str = DEFAULT_VIEWBOX) -> str:
        """
        Fill every slot and return finished markup.
        A viewBox is added to the root tag only if it has none; defs become its first child.
        """
        values = {"color": fill, "width": size, "height": size}
        head = self._head.substitute(values)
        if not self.has_viewbox:
            head += f' viewBox="{viewbox}"'
        return f"{head}>{defs}{self._tail.substitute(values)}"
