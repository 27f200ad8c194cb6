import asyncio
from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient

from casekit.core.comment_store import MemoryCommentStore
from casekit.core.schema import Comment, ServiceConfig
from casekit.core.service import HttpService


class BrokenCommentStore(MemoryCommentStore):

    async def list(self, limit: int | None = None):
        raise RuntimeError("database is down")

    async def delete(self, comment_id: str) -> bool:
        raise RuntimeError("database is down")


def create_client(comment_store=None) -> TestClient:
    if comment_store is None:
        comment_store = MemoryCommentStore()
    service = HttpService(service_config=ServiceConfig(), comment_store=comment_store)
    return TestClient(service.app)


def create_populated_store() -> MemoryCommentStore:
    store = MemoryCommentStore()
    base_time = datetime(2024, 5, 1, 12, 0, 0)
    asyncio.run(store.insert([
        Comment(comment_id="old", content="older", created_at=base_time),
        Comment(comment_id="new", content="newer", created_at=base_time + timedelta(minutes=5)),
    ]))
    return store


def test_health():
    response = create_client().get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_list_comments_newest_first():
    response = create_client(create_populated_store()).get("/api/comments")

    assert response.status_code == 200
    body = response.json()
    assert [c["comment_id"] for c in body] == ["new", "old"]
    assert body[0]["content"] == "newer"
    assert body[0]["created_at"].startswith("2024-05-01T12:05:00")


def test_list_comments_empty():
    response = create_client().get("/api/comments")
    assert response.status_code == 200
    assert response.json() == []


def test_delete_comment():
    store = create_populated_store()
    client = create_client(store)

    response = client.delete("/api/comments/old")
    assert response.status_code == 200
    assert response.json() == {"message": "Comment deleted successfully"}
    assert [c.comment_id for c in asyncio.run(store.list())] == ["new"]


def test_delete_missing_comment():
    response = create_client().delete("/api/comments/nope")
    assert response.status_code == 404
    assert response.json() == {"message": "Comment not found"}


def test_store_failure_returns_500():
    client = create_client(BrokenCommentStore())

    response = client.get("/api/comments")
    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}

    response = client.delete("/api/comments/any")
    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}


def test_convert():
    client = create_client()

    response = client.post("/convert", json={"style": "kebab", "text": "  Hello__World--again  "})
    assert response.status_code == 200
    body = response.json()
    assert body["answer"] == "hello-world-again"
    assert body["success"] is True
    assert body["metadata"] == {"style": "kebab"}

    response = client.post("/convert", json={"text": " multiple words_here-now "})
    assert response.json()["answer"] == "multipleWordsHereNow"

    response = client.post("/convert", json={"style": "dot", "text": "hello world"})
    assert response.json()["answer"] == "hello.world"


def test_convert_invalid_text():
    client = create_client()

    response = client.post("/convert", json={"style": "camel", "text": 42})
    assert response.status_code == 400
    assert response.json()["detail"] == "Input must be a string. Received type: int"

    response = client.post("/convert", json={"style": "camel"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Input cannot be None."


def test_convert_unknown_style():
    response = create_client().post("/convert", json={"style": "snake", "text": "hello world"})
    assert response.status_code == 422


def test_list_comments_with_mixed_timezones():
    store = MemoryCommentStore()
    asyncio.run(store.insert([
        Comment(comment_id="naive", created_at=datetime(2024, 5, 1, 9, 0, 0)),
        Comment(comment_id="aware", created_at=datetime(2024, 5, 1, 10, 0, 0, tzinfo=timezone.utc)),
    ]))

    response = create_client(store).get("/api/comments")
    assert response.status_code == 200
    assert [c["comment_id"] for c in response.json()] == ["aware", "naive"]
