from __future__ import annotations

from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from catalog_api.api.posts import get_posts_client
from catalog_api.api.products import get_product_repository
from catalog_api.clients.posts import PostsClient
from catalog_api.db.products import ProductRepository
from catalog_api.db.schema import metadata
from catalog_api.main import app

SAMPLE_POSTS = [
    {
        "userId": 1,
        "id": 1,
        "title": "sunt aut facere repellat provident",
        "body": "quia et suscipit\nsuscipit recusandae consequuntur",
    },
    {
        "userId": 1,
        "id": 2,
        "title": "qui est esse",
        "body": "est rerum tempore vitae\nsequi sint nihil",
    },
    {
        "userId": 2,
        "id": 11,
        "title": "et ea vero quia laudantium autem",
        "body": "delectus reiciendis molestiae occaecati",
    },
]


@pytest.fixture()
def sample_posts() -> list:
    return SAMPLE_POSTS


@pytest.fixture()
def engine(tmp_path: Path) -> Engine:
    db_path = tmp_path / "catalog.sqlite3"
    engine = create_engine(f"sqlite+pysqlite:///{db_path}", future=True)
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def upstream_requests() -> list:
    return []


@pytest.fixture()
def posts_client(upstream_requests: list) -> PostsClient:
    def handler(request: httpx.Request) -> httpx.Response:
        upstream_requests.append(request)
        if request.url.path == "/posts":
            return httpx.Response(200, json=SAMPLE_POSTS)
        return httpx.Response(404, json={})

    client = PostsClient(transport=httpx.MockTransport(handler))
    yield client
    client.close()


@pytest.fixture()
def client(engine: Engine, posts_client: PostsClient) -> TestClient:
    app.dependency_overrides[get_product_repository] = lambda: ProductRepository(engine)
    app.dependency_overrides[get_posts_client] = lambda: posts_client
    yield TestClient(app)
    app.dependency_overrides.clear()
