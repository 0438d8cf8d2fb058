"""
Minimal node tree used as the rendering surface for a page.

Screens build a Document per request, append nodes (or pre-rendered Jinja
fragments) to its body and serialise it to HTML once composition is done.
"""

from typing import Dict, Iterator, List, Optional

from markupsafe import Markup, escape

VOID_TAGS = {"br", "hr", "img", "input", "meta", "link"}


class Node:
    """An element, text run or raw markup fragment in the node tree."""

    def __init__(self, tag: Optional[str] = None, attrs: Optional[Dict[str, str]] = None,
                 text: Optional[str] = None, markup: Optional[Markup] = None):
        self.tag = tag
        self.attrs: Dict[str, str] = dict(attrs or {})
        self.text = text
        self.markup = markup
        self.children: List["Node"] = []
        self.parent: Optional["Node"] = None

    @classmethod
    def raw(cls, markup) -> "Node":
        """Wrap already-rendered HTML (e.g. a template fragment)."""
        return cls(markup=Markup(markup))

    @classmethod
    def text_node(cls, text: str) -> "Node":
        return cls(text=text)

    @property
    def id(self) -> Optional[str]:
        return self.attrs.get("id")

    @property
    def is_attached(self) -> bool:
        return self.parent is not None

    def set_attribute(self, name: str, value: str) -> None:
        self.attrs[name] = value

    def append_child(self, child: "Node") -> "Node":
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)
        return child

    def remove_child(self, child: "Node") -> "Node":
        if child.parent is not self:
            raise ValueError("Node is not a child of this node")
        self.children.remove(child)
        child.parent = None
        return child

    def iter(self) -> Iterator["Node"]:
        """Depth-first walk over this node and its descendants."""
        yield self
        for child in self.children:
            yield from child.iter()

    def find_by_id(self, element_id: str) -> Optional["Node"]:
        for node in self.iter():
            if node.id == element_id:
                return node
        return None

    def render(self) -> Markup:
        if self.markup is not None:
            return self.markup
        if self.tag is None:
            return escape(self.text or "")

        attrs = "".join(
            Markup(' {}="{}"').format(name, value)
            for name, value in self.attrs.items()
        )
        if self.tag in VOID_TAGS:
            return Markup("<{}{}>").format(Markup(self.tag), Markup(attrs))

        inner = Markup("").join(child.render() for child in self.children)
        if self.text:
            inner = escape(self.text) + inner
        return Markup("<{0}{1}>{2}</{0}>").format(Markup(self.tag), Markup(attrs), inner)

    def __repr__(self):
        return f"<Node {self.tag or '#text'} id={self.id!r} children={len(self.children)}>"


class Document:
    """Rendering surface: a body node plus element lookup and creation."""

    def __init__(self, title: str = ""):
        self.title = title
        self.body = Node("body")

    def create_element(self, tag: str, **attrs) -> Node:
        # Python keywords like ``class`` arrive as ``class_``
        return Node(tag, {name.rstrip("_").replace("_", "-"): value for name, value in attrs.items()})

    def get_element_by_id(self, element_id: str) -> Optional[Node]:
        return self.body.find_by_id(element_id)

    def contains(self, node: Node) -> bool:
        return any(candidate is node for candidate in self.body.iter())

    def render_body(self) -> Markup:
        """Render the body's children (the <body> tag itself lives in the layout template)."""
        return Markup("").join(child.render() for child in self.body.children)
