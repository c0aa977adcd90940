"""Integration tests for kitro.app — startup, page requests and APIs."""

from pathlib import Path

import anyio
import pytest

from kitro.app import App
from kitro.blocks.marketplace import Blockpack
from kitro.blocks.types import BlockInstance, PageDocument, define_block
from kitro.config import KitroConfig
from kitro.errors import PageLoadError, RouteDiscoveryError
from kitro.nodes import h

_SITE = {
    "index.py": (
        "from kitro.nodes import h\n"
        "\n"
        "def page():\n"
        "    return h('h1', None, 'Home')\n"
    ),
    "about.py": (
        "from kitro.nodes import h\n"
        "\n"
        "layout = 'docs'\n"
        "\n"
        "def page():\n"
        "    return h('p', None, 'About')\n"
    ),
    "users/list.py": "def page():\n    return 'all users'\n",
    "users/[id].py": "def page():\n    return 'one user'\n",
    "nopage.py": "title = 'nothing to render'\n",
    "_helpers.py": "raise RuntimeError('private files are never loaded')\n",
    "api/hello.py": "def handler(ctx):\n    return {'hello': 'world'}\n",
    "api/users/[id].py": (
        "async def handler(ctx):\n"
        "    return {'id': ctx.params['id'], 'request': ctx.request}\n"
    ),
    "api/empty.py": "value = 1\n",
}


def _write(root: Path, files: dict[str, str]) -> None:
    for relative, source in files.items():
        file = root / relative
        file.parent.mkdir(parents=True, exist_ok=True)
        file.write_text(source, encoding="utf-8")


@pytest.fixture
def app(tmp_path: Path, pages_dir: Path) -> App:
    _write(pages_dir, _SITE)
    layouts = tmp_path / "layouts"
    layouts.mkdir()
    (layouts / "docs.html").write_text('<div class="docs">{{ content }}</div>', encoding="utf-8")
    return App(KitroConfig(title="Site", pages_dir=pages_dir, layouts_dir=layouts))


@define_block("heading", schema={"text": "string"}, category="content")
def heading(props: dict) -> object:
    return h("h2", None, props.get("text", ""))


# ---------------------------------------------------------------------------
# Startup
# ---------------------------------------------------------------------------


class TestStartup:
    @pytest.mark.anyio
    async def test_route_table(self, app: App) -> None:
        routes = await app.startup()

        assert [r.path for r in routes] == ["/", "/about", "/nopage", "/users/list", "/users/:id"]
        assert app.routes == tuple(routes)

    @pytest.mark.anyio
    async def test_layout_read_from_module(self, app: App) -> None:
        await app.startup()
        layouts = {r.path: r.layout for r in app.routes}
        assert layouts["/about"] == "docs"
        assert layouts["/"] == "default"

    @pytest.mark.anyio
    async def test_api_table(self, app: App) -> None:
        await app.startup()
        assert [r.path for r in app.api_routes] == ["/api/empty", "/api/hello", "/api/users/:id"]

    @pytest.mark.anyio
    async def test_missing_pages_dir(self, tmp_path: Path) -> None:
        app = App(KitroConfig(pages_dir=tmp_path / "nope"))
        with pytest.raises(RouteDiscoveryError):
            await app.startup()

    @pytest.mark.anyio
    async def test_pages_dir_argument_overrides_config(self, pages_dir: Path) -> None:
        _write(pages_dir, {"index.py": "def page():\n    return 'x'\n"})
        app = App()
        routes = await app.startup(pages_dir)
        assert [r.path for r in routes] == ["/"]

    @pytest.mark.anyio
    async def test_route_tables_built_off_the_event_loop(
        self, app: App, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        offloaded: list[str] = []
        run_sync = anyio.to_thread.run_sync

        async def recording_run_sync(func, *args, **kwargs):
            offloaded.append(getattr(func, "__name__", ""))
            return await run_sync(func, *args, **kwargs)

        monkeypatch.setattr(anyio.to_thread, "run_sync", recording_run_sync)
        await app.startup()

        assert "_list_page_files" in offloaded
        assert "build_api_routes" in offloaded

    def test_match_before_startup(self, app: App) -> None:
        with pytest.raises(RuntimeError, match="startup"):
            app.match("/")


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------


class TestRenderPath:
    @pytest.mark.anyio
    async def test_index(self, app: App) -> None:
        await app.startup()
        result = await app.render_path("/")

        assert result.status == 200
        assert result.route is not None
        assert result.route.name == "index"
        assert '<div id="root"><h1>Home</h1></div>' in result.html
        assert "<title>index | Site</title>" in result.html

    @pytest.mark.anyio
    async def test_custom_layout(self, app: App) -> None:
        await app.startup()
        result = await app.render_path("/about")
        assert result.html == '<div class="docs"><p>About</p></div>'

    @pytest.mark.anyio
    async def test_static_beats_dynamic(self, app: App) -> None:
        await app.startup()
        assert "all users" in (await app.render_path("/users/list")).html
        assert "one user" in (await app.render_path("/users/42")).html

    @pytest.mark.anyio
    async def test_not_found(self, app: App) -> None:
        await app.startup()
        result = await app.render_path("/nowhere")

        assert result.status == 404
        assert result.route is None
        assert "<code>/nowhere</code>" in result.html

    @pytest.mark.anyio
    async def test_private_file_not_routed(self, app: App) -> None:
        await app.startup()
        assert (await app.render_path("/_helpers")).status == 404

    @pytest.mark.anyio
    async def test_module_without_page(self, app: App) -> None:
        await app.startup()
        with pytest.raises(PageLoadError):
            await app.render_path("/nopage")

    @pytest.mark.anyio
    async def test_api_paths_are_not_pages(self, app: App) -> None:
        await app.startup()
        assert (await app.render_path("/api/hello")).status == 404


# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------


class TestCallApi:
    @pytest.mark.anyio
    async def test_sync_handler(self, app: App) -> None:
        await app.startup()
        result = await app.call_api("/api/hello")
        assert result.status == 200
        assert result.body == {"hello": "world"}

    @pytest.mark.anyio
    async def test_async_handler_with_params(self, app: App) -> None:
        await app.startup()
        result = await app.call_api("/api/users/7", request="req")
        assert result.body == {"id": "7", "request": "req"}

    @pytest.mark.anyio
    async def test_not_found(self, app: App) -> None:
        await app.startup()
        result = await app.call_api("/api/missing")
        assert result.status == 404
        assert result.body == {"error": "Not Found"}

    @pytest.mark.anyio
    async def test_module_without_handler(self, app: App) -> None:
        await app.startup()
        with pytest.raises(PageLoadError, match="handler"):
            await app.call_api("/api/empty")

    @pytest.mark.anyio
    async def test_before_startup(self, app: App) -> None:
        with pytest.raises(RuntimeError):
            await app.call_api("/api/hello")


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------


class TestBlocks:
    def test_register_and_render(self) -> None:
        app = App()
        assert app.register_block(heading) is heading

        html = app.render_blocks([BlockInstance("heading", {"text": "Hello"}), BlockInstance("ghost")])
        assert html.startswith("<h2>Hello</h2>")
        assert 'data-block-type="ghost"' in html

    def test_render_document(self) -> None:
        app = App()
        app.register_block(heading)
        document = PageDocument.from_dict({"path": "/", "blocks": [{"type": "heading", "props": {"text": "A"}}]})
        assert app.render_blocks(document) == "<h2>A</h2>"

    def test_blockpack_shares_registry(self) -> None:
        app = App()
        admitted = app.register_blockpack(Blockpack(name="basics", version="1.0.0", blocks=(heading,)))

        assert admitted == ("heading",)
        assert "heading" in app.registry
        assert app.marketplace.get_blockpack("basics") is not None
