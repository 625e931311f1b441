import pytest

from dashboard import app as dashboard_app
from dashboard.data.schemas import PaginatedResponse
from dashboard.pages import overview, resources


def _find(component, predicate):
    """Depth-first search through a Dash component tree."""
    if predicate(component):
        return component
    children = getattr(component, "children", None)
    if children is None or isinstance(children, str):
        return None
    if not isinstance(children, (list, tuple)):
        children = [children]
    for child in children:
        found = _find(child, predicate)
        if found is not None:
            return found
    return None


@pytest.mark.parametrize("pathname", ["/", "/overview", None])
def test_routes_to_overview(pathname):
    layout = dashboard_app.display_page(pathname)

    assert _find(layout, lambda c: getattr(c, "id", None) == "overview-stats") is not None


@pytest.mark.parametrize("kind", ["nodes", "containers", "deployments", "services"])
def test_routes_to_resource_pages(kind):
    layout = dashboard_app.display_page(f"/{kind}")

    store = _find(layout, lambda c: getattr(c, "id", None) == "resource-kind")
    assert store.data == kind


def test_unknown_path_is_404():
    layout = dashboard_app.display_page("/pods")

    assert _find(layout, lambda c: getattr(c, "children", None) == "404 - Page Not Found") is not None


def test_overview_without_api_shows_placeholders(monkeypatch):
    monkeypatch.setattr(
        overview,
        "get_cluster_summary",
        lambda: {"nodes": None, "containers": None, "deployments": None, "services": None},
    )

    stats, note = overview.update_stats(0)

    values = [col.children.children.children[0].children[0].children[1].children for col in stats.children]
    assert values == ["--", "--", "--", "--"]
    assert note == "Dashboard will be populated once the API is connected."


def test_overview_with_totals(monkeypatch):
    monkeypatch.setattr(
        overview,
        "get_cluster_summary",
        lambda: {"nodes": 3, "containers": 1200, "deployments": None, "services": 4},
    )

    stats, note = overview.update_stats(0)

    values = [col.children.children.children[0].children[0].children[1].children for col in stats.children]
    assert values == ["3", "1,200", "--", "4"]
    assert note is None


def test_resource_listing_unavailable():
    summary, body = resources.render_listing("nodes", None)

    assert summary == "Nodes"
    assert body.color == "warning"


def test_resource_listing(monkeypatch):
    page = PaginatedResponse(items=[{"name": "web"}], total=7, page=1, per_page=50)
    monkeypatch.setattr(resources, "list_resources", lambda kind, per_page: page)

    summary, table = resources.update_listing(0, "deployments")

    assert summary == "Deployments - showing 1 of 7"
    assert table.striped is True
