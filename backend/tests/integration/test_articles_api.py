"""Endpoint tests for the article API, with the service wired to an in-memory repository."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.application.services import ArticleService
from app.infrastructure.dependencies import get_article_service
from app.main import app


@pytest.fixture
def client_app(service: ArticleService):
    app.dependency_overrides[get_article_service] = lambda: service
    yield app
    app.dependency_overrides.clear()


async def _request(client_app, method: str, url: str, **kwargs):
    transport = ASGITransport(app=client_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.request(method, url, **kwargs)


@pytest.mark.asyncio
async def test_create_and_get_article(client_app):
    response = await _request(
        client_app, "POST", "/api/v1/articles", json={"title": "Hello World", "content": "# Hi"}
    )
    assert response.status_code == 201
    created = response.json()
    assert created["slug"] == "hello-world"
    assert created["parent_id"] is None

    response = await _request(client_app, "GET", f"/api/v1/articles/{created['id']}")
    assert response.status_code == 200
    assert response.json()["title"] == "Hello World"

    response = await _request(client_app, "GET", "/api/v1/articles/by-slug/hello-world")
    assert response.status_code == 200
    assert response.json()["id"] == created["id"]


@pytest.mark.asyncio
async def test_create_duplicate_slug_returns_409(client_app, tech_tree):
    response = await _request(
        client_app, "POST", "/api/v1/articles", json={"title": "Tech", "content": "dup"}
    )
    assert response.status_code == 409
    assert "tech" in response.json()["detail"]


@pytest.mark.asyncio
async def test_create_validation_errors(client_app, tech_tree):
    response = await _request(client_app, "POST", "/api/v1/articles", json={"title": "Only title"})
    assert response.status_code == 422

    response = await _request(
        client_app, "POST", "/api/v1/articles", json={"title": "???", "content": "x"}
    )
    assert response.status_code == 422

    response = await _request(
        client_app,
        "POST",
        "/api/v1/articles",
        json={"title": "Child", "content": "x", "parent_id": "missing"},
    )
    assert response.status_code == 422
    assert "missing" in response.json()["detail"]


@pytest.mark.asyncio
async def test_get_missing_article_returns_404(client_app):
    response = await _request(client_app, "GET", "/api/v1/articles/does-not-exist")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_articles_with_parent_and_search(client_app, tech_tree):
    response = await _request(client_app, "GET", "/api/v1/articles")
    assert response.status_code == 200
    items = response.json()
    assert [i["id"] for i in items] == ["4", "3", "2", "1"]
    assert items[1]["parent"] == {"id": "2", "title": "Programming", "slug": "programming"}
    assert items[0]["parent"] is None

    response = await _request(client_app, "GET", "/api/v1/articles", params={"search": "programming"})
    assert {i["id"] for i in response.json()} == {"2", "3"}


@pytest.mark.asyncio
async def test_update_article_and_cycle_rejection(client_app, tech_tree):
    response = await _request(
        client_app, "PUT", "/api/v1/articles/4", json={"title": "Cooking 101", "parent_id": "1"}
    )
    assert response.status_code == 200
    assert response.json()["parent_id"] == "1"
    assert response.json()["slug"] == "cooking"

    response = await _request(client_app, "PUT", "/api/v1/articles/1", json={"parent_id": "3"})
    assert response.status_code == 422

    response = await _request(client_app, "PUT", "/api/v1/articles/4", json={"slug": "tech"})
    assert response.status_code == 409

    response = await _request(client_app, "PUT", "/api/v1/articles/4", json={"parent_id": None})
    assert response.status_code == 200
    assert response.json()["parent_id"] is None


@pytest.mark.asyncio
async def test_empty_parent_selection_means_root(client_app, tech_tree):
    response = await _request(
        client_app, "POST", "/api/v1/articles", json={"title": "Gardening", "content": "x", "parent_id": ""}
    )
    assert response.status_code == 201
    assert response.json()["parent_id"] is None

    response = await _request(client_app, "PUT", "/api/v1/articles/3", json={"parent_id": ""})
    assert response.status_code == 200
    assert response.json()["parent_id"] is None


@pytest.mark.asyncio
async def test_delete_article(client_app, tech_tree):
    response = await _request(client_app, "DELETE", "/api/v1/articles/1")
    assert response.status_code == 409

    response = await _request(client_app, "DELETE", "/api/v1/articles/4")
    assert response.status_code == 204

    response = await _request(client_app, "DELETE", "/api/v1/articles/4")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_tree_is_nested(client_app, tech_tree):
    response = await _request(client_app, "GET", "/api/v1/articles/tree")
    assert response.status_code == 200
    forest = response.json()

    assert [n["id"] for n in forest] == ["1", "4"]
    programming = forest[0]["children"][0]
    assert programming["id"] == "2"
    assert programming["children"][0]["id"] == "3"
    assert programming["children"][0]["children"] == []

    response = await _request(client_app, "GET", "/api/v1/articles/tree", params={"order": "title"})
    assert [n["title"] for n in response.json()] == ["Cooking", "Tech"]


@pytest.mark.asyncio
async def test_tree_view_collapse_and_select(client_app, tech_tree):
    response = await _request(
        client_app,
        "GET",
        "/api/v1/articles/tree/view",
        params=[("collapsed", "2"), ("selected", "4")],
    )
    assert response.status_code == 200
    rows = response.json()

    assert [(r["id"], r["depth"]) for r in rows] == [("1", 0), ("2", 1), ("4", 0)]
    assert rows[1]["expanded"] is False
    assert rows[1]["has_children"] is True
    assert [r["id"] for r in rows if r["selected"]] == ["4"]


@pytest.mark.asyncio
async def test_article_view_has_breadcrumbs_and_html(client_app, tech_tree):
    response = await _request(client_app, "GET", "/api/v1/articles/3/view")
    assert response.status_code == 200
    view = response.json()

    assert view["article"]["id"] == "3"
    assert view["parent"]["slug"] == "programming"
    assert [b["slug"] for b in view["breadcrumbs"]] == ["tech", "programming"]
    assert view["content_html"] == "<h1>Web Dev</h1>"


@pytest.mark.asyncio
async def test_slug_and_markdown_previews(client_app):
    response = await _request(
        client_app, "GET", "/api/v1/articles/slug-preview", params={"title": "My  New Article!"}
    )
    assert response.json() == {"title": "My  New Article!", "slug": "my-new-article"}

    response = await _request(
        client_app, "POST", "/api/v1/articles/preview", json={"content": "## Sub\n*em*"}
    )
    assert response.json() == {"html": "<h2>Sub</h2><br><em>em</em>"}


@pytest.mark.asyncio
async def test_parent_options(client_app, tech_tree):
    response = await _request(client_app, "GET", "/api/v1/articles/parent-options", params={"exclude": "2"})
    assert response.status_code == 200
    assert [o["id"] for o in response.json()] == ["4", "1"]

    response = await _request(client_app, "GET", "/api/v1/articles/parent-options", params={"exclude": "nope"})
    assert response.status_code == 404
