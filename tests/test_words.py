"""Tests for the word list endpoints."""

from fastapi.testclient import TestClient
from starlette import status


def add_word(client: TestClient, word: str, meaning: str, example: str = "") -> dict:
    response = client.post(
        "/api/v1/words", json={"word": word, "meaning": meaning, "example": example}
    )
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


class TestCreateWord:
    """Tests for POST /api/v1/words."""

    def test_create_word(self, client: TestClient) -> None:
        """Should store a trimmed word that is due immediately."""
        data = add_word(client, "  ubiquitous ", "present everywhere", " It was ubiquitous. ")

        assert data["id"] == 1
        assert data["word"] == "ubiquitous"
        assert data["example"] == "It was ubiquitous."
        assert data["review_count"] == 0
        assert data["interval"] == 1
        assert data["last_reviewed_at"] == 0
        assert data["next_review_at"] == data["created_at"]

        listing = client.get("/api/v1/words").json()
        assert listing["total_count"] == 1
        assert listing["due_count"] == 1

    def test_create_word_blank_meaning(self, client: TestClient) -> None:
        response = client.post("/api/v1/words", json={"word": "cat", "meaning": "   "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"detail": "Word and meaning are required."}
        assert client.get("/api/v1/words").json()["total_count"] == 0

    def test_create_word_missing_field(self, client: TestClient) -> None:
        response = client.post("/api/v1/words", json={"word": "cat"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_ids_are_not_reused(self, client: TestClient) -> None:
        first = add_word(client, "cat", "animal")
        client.delete(f"/api/v1/words/{first['id']}")

        second = add_word(client, "dog", "animal")

        assert second["id"] == first["id"] + 1


class TestListWords:
    """Tests for GET /api/v1/words."""

    def test_sort_and_search(self, client: TestClient) -> None:
        add_word(client, "zebra", "striped animal")
        add_word(client, "Apple", "a fruit")
        add_word(client, "école", "school")

        response = client.get("/api/v1/words", params={"sort": "alphabetical"})

        assert response.status_code == status.HTTP_200_OK
        assert [item["word"] for item in response.json()["items"]] == ["Apple", "école", "zebra"]

        response = client.get("/api/v1/words", params={"search": "  ANIMAL "})

        data = response.json()
        assert [item["word"] for item in data["items"]] == ["zebra"]
        assert data["total"] == 1
        assert data["total_count"] == 3

    def test_view_state_is_remembered(self, client: TestClient) -> None:
        add_word(client, "cat", "animal")
        add_word(client, "dog", "animal")

        client.get("/api/v1/words", params={"sort": "oldest"})
        data = client.get("/api/v1/words").json()

        assert [item["word"] for item in data["items"]] == ["cat", "dog"]

    def test_page_is_clamped(self, client: TestClient) -> None:
        for i in range(3):
            add_word(client, f"word{i}", "meaning")

        data = client.get("/api/v1/words", params={"page_size": 2, "page": 9}).json()

        assert data["page"] == 2
        assert data["total_pages"] == 2
        assert len(data["items"]) == 1
        assert data["has_previous"] is True
        assert data["has_next"] is False

    def test_page_size_is_capped(self, client: TestClient) -> None:
        data = client.get("/api/v1/words", params={"page_size": 5000}).json()

        assert data["page_size"] == 200

    def test_invalid_sort(self, client: TestClient) -> None:
        response = client.get("/api/v1/words", params={"sort": "random"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


class TestDeleteWord:
    """Tests for DELETE /api/v1/words/{word_id}."""

    def test_delete_word(self, client: TestClient) -> None:
        word = add_word(client, "cat", "animal")

        response = client.delete(f"/api/v1/words/{word['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"success": True, "message": "Word deleted."}
        assert client.get("/api/v1/words").json()["total_count"] == 0

    def test_delete_missing_word(self, client: TestClient) -> None:
        response = client.delete("/api/v1/words/999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"detail": "Word with id 999 not found"}
