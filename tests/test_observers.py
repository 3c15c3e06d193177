"""Tests for layout, intersection observers, storage and resource loading."""

from pathlib import Path

import httpx

from folio.dom import (
    Box,
    FlowLayout,
    IntersectionRegistry,
    LocalStorage,
    Page,
    ResourceLoader,
    Viewport,
    set_style,
)

ROWS = "<html><body>" + "".join(f"<p id='r{i}'>row {i}</p>" for i in range(50)) + "</body></html>"


class TestFlowLayout:
    """Test box placement."""

    def test_leaves_stack_in_order(self) -> None:
        page = Page.from_html(ROWS)
        doc = page.document
        assert page.absolute_box(doc.get_element_by_id("r0")) == Box(0.0, 40.0)
        assert page.absolute_box(doc.get_element_by_id("r3")) == Box(120.0, 40.0)
        assert page.absolute_box(doc.body).height == 50 * 40.0

    def test_hidden_elements_take_no_space(self) -> None:
        page = Page.from_html(ROWS)
        doc = page.document
        set_style(doc.get_element_by_id("r0"), "display", "none")
        assert page.absolute_box(doc.get_element_by_id("r0")).height == 0
        assert page.absolute_box(doc.get_element_by_id("r1")).top == 0

    def test_head_is_not_rendered(self) -> None:
        layout = FlowLayout(row_height=10)
        page = Page.from_html("<html><head><title>x</title></head><body><p>a</p></body></html>")
        boxes = layout.compute(page.document.soup)
        assert id(page.document.head) not in boxes
        assert boxes[id(page.document.body)] == Box(0.0, 10.0)

    def test_bounding_box_is_viewport_relative(self) -> None:
        page = Page.from_html(ROWS)
        page.scroll_to(200)
        assert page.bounding_box(page.document.get_element_by_id("r10")).top == 200.0

    def test_is_visible(self) -> None:
        page = Page.from_html(ROWS, viewport_height=400)
        doc = page.document
        assert page.is_visible(doc.get_element_by_id("r0"))
        assert not page.is_visible(doc.get_element_by_id("r20"))
        page.scroll_to(800)
        assert page.is_visible(doc.get_element_by_id("r20"))


class TestIntersectionRegistry:
    """Test one-shot viewport subscriptions."""

    def test_fires_once_when_in_view(self) -> None:
        page = Page.from_html(ROWS, viewport_height=400, lazy_load_margin=0)
        near = page.document.get_element_by_id("r2")
        far = page.document.get_element_by_id("r40")
        fired: list[str] = []
        page.lazy_load.observe(near, lambda el: fired.append(el["id"]))
        page.lazy_load.observe(far, lambda el: fired.append(el["id"]))

        page.check_observers()
        assert fired == ["r2"]
        assert not page.lazy_load.is_observing(near)

        page.scroll_to(1500)
        page.scroll_to(0)
        page.scroll_to(1500)
        assert fired == ["r2", "r40"]
        assert len(page.lazy_load) == 0

    def test_root_margin_extends_viewport(self) -> None:
        registry = IntersectionRegistry("test", root_margin=100)
        page = Page.from_html(ROWS)
        target = page.document.get_element_by_id("r1")
        registry.observe(target, lambda el: None)
        box_for = {id(target): Box(950.0, 40.0)}.get
        assert registry.check(lambda el: box_for(id(el)), Viewport(0, 900)) == [target]

    def test_detached_elements_are_pruned(self) -> None:
        page = Page.from_html(ROWS)
        target = page.document.get_element_by_id("r1")
        page.scroll_reveal.observe(target, lambda el: None)
        target.extract()
        assert page.scroll_reveal.prune() == 1
        assert len(page.scroll_reveal) == 0


class TestLocalStorage:
    """Test persisted key/value storage."""

    def test_memory_storage(self) -> None:
        storage = LocalStorage()
        storage.set_item("portfolio-theme", "light")
        assert storage.get_item("portfolio-theme") == "light"
        storage.remove_item("portfolio-theme")
        assert storage.get_item("portfolio-theme") is None

    def test_persists_to_file(self, tmp_path: Path) -> None:
        path = tmp_path / "state" / "storage.json"
        LocalStorage(path).set_item("portfolio-theme", "dark")
        assert LocalStorage(path).get_item("portfolio-theme") == "dark"

    def test_unreadable_file_starts_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "storage.json"
        path.write_text("{not json", encoding="utf-8")
        assert len(LocalStorage(path)) == 0


class TestResourceLoader:
    """Test image source probing."""

    def test_data_uri(self, tmp_path: Path) -> None:
        assert ResourceLoader(tmp_path).can_load("data:image/svg+xml;base64,AAAA")

    def test_local_files(self, tmp_path: Path) -> None:
        (tmp_path / "images").mkdir()
        (tmp_path / "images" / "me.jpg").write_bytes(b"jpg")
        loader = ResourceLoader(tmp_path)
        assert loader.can_load("images/me.jpg")
        assert loader.can_load("/images/me.jpg")
        assert not loader.can_load("images/missing.jpg")
        assert not loader.can_load("")

    def test_remote_probe(self, tmp_path: Path) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "HEAD"
            status = 200 if request.url.path == "/ok.png" else 404
            return httpx.Response(status)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        loader = ResourceLoader(tmp_path, client=client)
        assert loader.can_load("https://cdn.example.com/ok.png")
        assert not loader.can_load("https://cdn.example.com/gone.png")

    def test_remote_transport_error(self, tmp_path: Path) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        assert not ResourceLoader(tmp_path, client=client).can_load("https://x.io/a.png")
