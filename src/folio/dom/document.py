"""BeautifulSoup-backed document for the headless page.

Single Responsibility: own the parsed shell and the markup mutations that
renderers perform on it (inner HTML, text, classes, inline styles).
"""

from importlib import resources
from pathlib import Path

from bs4 import BeautifulSoup, Tag

from .events import EventRegistry


def load_shell(path: Path | None = None) -> str:
    """Read the HTML shell, defaulting to the packaged template."""
    if path is not None:
        return path.read_text(encoding="utf-8")
    return resources.files("folio").joinpath("templates/index.html").read_text(encoding="utf-8")


def _class_list(element: Tag) -> list[str]:
    value = element.get("class")
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    return list(value)


def has_class(element: Tag, name: str) -> bool:
    return name in _class_list(element)


def add_class(element: Tag, *names: str) -> None:
    classes = _class_list(element)
    for name in names:
        if name not in classes:
            classes.append(name)
    element["class"] = classes


def remove_class(element: Tag, *names: str) -> None:
    classes = [c for c in _class_list(element) if c not in names]
    if classes:
        element["class"] = classes
    elif element.has_attr("class"):
        del element["class"]


def _parse_style(element: Tag) -> dict[str, str]:
    styles: dict[str, str] = {}
    for declaration in str(element.get("style", "")).split(";"):
        prop, sep, value = declaration.partition(":")
        if sep and prop.strip():
            styles[prop.strip().lower()] = value.strip()
    return styles


def get_style(element: Tag, prop: str) -> str:
    return _parse_style(element).get(prop.lower(), "")


def set_style(element: Tag, prop: str, value: str) -> None:
    """Set (or with an empty value, remove) one inline style property."""
    styles = _parse_style(element)
    if value:
        styles[prop.lower()] = value
    else:
        styles.pop(prop.lower(), None)
    if styles:
        element["style"] = "; ".join(f"{k}: {v}" for k, v in styles.items())
    elif element.has_attr("style"):
        del element["style"]


def is_displayed(element: Tag) -> bool:
    """False if the element or any ancestor is hidden."""
    node: Tag | None = element
    while node is not None and not isinstance(node, BeautifulSoup):
        if node.has_attr("hidden") or get_style(node, "display") == "none":
            return False
        node = node.parent
    return True


class Document:
    """The page's DOM tree plus its event registry."""

    def __init__(self, html: str, events: EventRegistry | None = None) -> None:
        self.soup = BeautifulSoup(html, "html.parser")
        self.events = events or EventRegistry()

    @property
    def root(self) -> Tag:
        """The <html> element (or the soup itself for fragments)."""
        return self.soup.find("html") or self.soup

    @property
    def head(self) -> Tag:
        head = self.soup.find("head")
        if head is None:
            head = self.soup.new_tag("head")
            self.root.insert(0, head)
        return head

    @property
    def body(self) -> Tag:
        return self.soup.find("body") or self.root

    def get_element_by_id(self, element_id: str, root: Tag | None = None) -> Tag | None:
        return (root or self.soup).find(id=element_id)

    def select(self, selector: str, root: Tag | None = None) -> list[Tag]:
        return list((root or self.soup).select(selector))

    def select_one(self, selector: str, root: Tag | None = None) -> Tag | None:
        return (root or self.soup).select_one(selector)

    def create_element(self, tag: str, /, **attrs: str) -> Tag:
        return self.soup.new_tag(tag, attrs=attrs)

    def set_inner_html(self, element: Tag, markup: str) -> None:
        """Replace all children of ``element`` with parsed ``markup``.

        Listeners attached anywhere in the replaced subtree are dropped.
        """
        self.events.discard_subtree(element)
        element.clear()
        fragment = BeautifulSoup(markup, "html.parser")
        for child in list(fragment.contents):
            element.append(child.extract())

    def set_text(self, element: Tag, text: str) -> None:
        self.events.discard_subtree(element)
        element.clear()
        if text:
            element.append(self.soup.new_string(text))

    def serialize(self) -> str:
        return str(self.soup)
