"""Flow layout for the headless page.

Every displayed element gets a box in document order. Leaf elements take one
row; a container spans its displayed descendants. Hidden subtrees take no
space, so filtering cards really does move later sections up.
"""

from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from .document import get_style

NON_RENDERED = frozenset({"head", "script", "style", "template", "meta", "link", "title"})


@dataclass(frozen=True)
class Box:
    top: float
    height: float

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def intersects(self, top: float, bottom: float) -> bool:
        return self.height > 0 and self.top < bottom and self.bottom > top


@dataclass
class Viewport:
    scroll_top: float = 0.0
    height: float = 900.0

    @property
    def bottom(self) -> float:
        return self.scroll_top + self.height


class FlowLayout:
    """Computes document-absolute boxes."""

    def __init__(self, row_height: float = 40.0) -> None:
        self.row_height = row_height

    def compute(self, root: Tag) -> dict[int, Box]:
        boxes: dict[int, Box] = {}
        self._place(root, 0.0, boxes)
        return boxes

    def box_for(self, root: Tag, element: Tag) -> Box:
        """Box of ``element``; a zero-height box if it is not displayed."""
        return self.compute(root).get(id(element), Box(0.0, 0.0))

    def _place(self, element: Tag, cursor: float, boxes: dict[int, Box]) -> float:
        top = cursor
        children = [
            child
            for child in element.children
            if isinstance(child, Tag) and child.name not in NON_RENDERED
        ]
        for child in children:
            if child.has_attr("hidden") or get_style(child, "display") == "none":
                continue
            cursor = self._place(child, cursor, boxes)
        if cursor == top and not isinstance(element, BeautifulSoup):
            cursor += self.row_height
        boxes[id(element)] = Box(top, cursor - top)
        return cursor
