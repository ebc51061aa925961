"""Tests for the review drill endpoints."""

from fastapi.testclient import TestClient
from starlette import status

from wordvault.utils import local_midnight_after


class TestReviewFlow:
    """Tests for /api/v1/review/*."""

    def test_start_with_nothing_due(self, client: TestClient) -> None:
        response = client.post("/api/v1/review/start")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["state"] == "empty"
        assert data["card"] is None
        assert data["message"] == "No words due for review"

    def test_full_drill(self, client: TestClient) -> None:
        """Should present, reveal and answer the only due word."""
        created = client.post(
            "/api/v1/words", json={"word": "ubiquitous", "meaning": "present everywhere"}
        ).json()

        data = client.post("/api/v1/review/start").json()
        assert data["state"] == "presenting"
        assert data["remaining"] == 1
        card = data["card"]
        assert card["record_id"] == created["id"]
        assert card["answer"] is None
        assert card["prompt"] in ("ubiquitous", "present everywhere")

        data = client.post("/api/v1/review/reveal").json()
        assert data["state"] == "revealed"
        assert {data["card"]["prompt"], data["card"]["answer"]} == {
            "ubiquitous",
            "present everywhere",
        }

        response = client.post("/api/v1/review/answer", json={"known": True})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["state"] == "empty"
        assert data["remaining"] == 0
        assert data["due_count"] == 0
        assert data["message"] == "Marked known."

        [word] = client.get("/api/v1/words").json()["items"]
        assert word["interval"] == 2
        assert word["review_count"] == 1
        assert word["next_review_at"] == local_midnight_after(word["last_reviewed_at"], 2)

    def test_answer_without_card(self, client: TestClient) -> None:
        response = client.post("/api/v1/review/answer", json={"known": False})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"detail": "No word is being reviewed right now"}

    def test_exit_discards_pool(self, client: TestClient) -> None:
        client.post("/api/v1/words", json={"word": "cat", "meaning": "animal"})
        client.post("/api/v1/review/start")

        data = client.post("/api/v1/review/exit").json()

        assert data["state"] == "empty"
        assert data["remaining"] == 0
        assert data["due_count"] == 1
        assert client.get("/api/v1/review/card").json()["card"] is None
