"""Tests for the study endpoints: bundles, due sets and attempts."""

from datetime import datetime, timedelta

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from cardwise import models

from tests.fakes import FakeClock


def _create_flashcard(
    client: TestClient,
    topic_id: int,
    question: str = "What is ATP?",
    answer: str = "The energy currency of the cell",
    language: str = "pt",
    summary_id: int | None = None,
) -> dict:
    response = client.post(
        f"/api/v1/topics/{topic_id}/flashcards",
        json={
            "question": question,
            "answer": answer,
            "language": language,
            "summary_id": summary_id,
        },
    )
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()["flashcard"]


def _translate(client: TestClient, flashcard_id: int, language: str) -> dict:
    response = client.post(
        f"/api/v1/flashcards/{flashcard_id}/translations",
        json={"question": f"Question ({language})", "answer": f"Answer ({language})", "language": language},
    )
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()["flashcard"]


def _rate(client: TestClient, flashcard_id: int, rating: int) -> dict:
    response = client.post(f"/api/v1/flashcards/{flashcard_id}/attempt", json={"rating": rating})
    assert response.status_code == status.HTTP_200_OK
    return response.json()


def _parse(value: str) -> datetime:
    return datetime.fromisoformat(value)


class TestCreateFlashcardForTopic:
    """Test suite for POST /topics/:id/flashcards endpoint."""

    def test_create_flashcard_success(
        self, client: TestClient, db_session: Session, test_topic: models.Topic
    ) -> None:
        flashcard = _create_flashcard(client, test_topic.id)

        assert flashcard["topic_id"] == test_topic.id
        assert flashcard["summary_id"] is None
        assert flashcard["language"] == "pt"
        assert flashcard["is_manual"] is True

        db_flashcard = db_session.query(models.Flashcard).filter_by(id=flashcard["id"]).first()
        assert db_flashcard is not None
        assert db_flashcard.question == "What is ATP?"

    def test_create_flashcard_regional_language_is_collapsed(
        self, client: TestClient, test_topic: models.Topic
    ) -> None:
        flashcard = _create_flashcard(client, test_topic.id, language="pt-BR")
        assert flashcard["language"] == "pt"

    def test_create_flashcard_topic_not_found(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/topics/99999/flashcards",
            json={"question": "Q", "answer": "A", "language": "pt"},
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_create_flashcard_unsupported_language(
        self, client: TestClient, test_topic: models.Topic
    ) -> None:
        response = client.post(
            f"/api/v1/topics/{test_topic.id}/flashcards",
            json={"question": "Q", "answer": "A", "language": "xx"},
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_flashcard_empty_question(
        self, client: TestClient, test_topic: models.Topic
    ) -> None:
        response = client.post(
            f"/api/v1/topics/{test_topic.id}/flashcards",
            json={"question": "", "answer": "A", "language": "pt"},
        )
        assert response.status_code == 422

    def test_create_flashcard_summary_of_other_topic(
        self, client: TestClient, db_session: Session, test_summary: models.Summary
    ) -> None:
        other = models.Topic(user_id=1, name="Other")
        db_session.add(other)
        db_session.commit()

        response = client.post(
            f"/api/v1/topics/{other.id}/flashcards",
            json={"question": "Q", "answer": "A", "language": "pt", "summary_id": test_summary.id},
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_store_generated_flashcards(
        self, client: TestClient, test_topic: models.Topic, test_summary: models.Summary
    ) -> None:
        response = client.post(
            f"/api/v1/topics/{test_topic.id}/flashcards/generated",
            json={
                "language": "en",
                "summary_id": test_summary.id,
                "flashcards": [
                    {"question": "Q1", "answer": "A1"},
                    {"question": "Q2", "answer": "A2"},
                ],
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        created = response.json()["flashcards"]
        assert [fc["question"] for fc in created] == ["Q1", "Q2"]
        assert all(fc["is_manual"] is False for fc in created)
        assert all(fc["summary_id"] == test_summary.id for fc in created)


class TestTopicBundle:
    """Test suite for GET /topics/:id/flashcards/bundle endpoint."""

    def test_bundle_includes_summary_flashcards(
        self, client: TestClient, test_topic: models.Topic, test_summary: models.Summary
    ) -> None:
        direct = _create_flashcard(client, test_topic.id, question="Direct")
        via_summary = _create_flashcard(
            client, test_topic.id, question="From summary", summary_id=test_summary.id
        )

        response = client.get(f"/api/v1/topics/{test_topic.id}/flashcards/bundle")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [card["flashcard"]["id"] for card in data["cards"]] == [
            direct["id"],
            via_summary["id"],
        ]
        assert data["has_completed_any"] is False
        assert all(card["state"]["is_new"] for card in data["cards"])

    def test_bundle_empty_topic(self, client: TestClient, test_topic: models.Topic) -> None:
        response = client.get(f"/api/v1/topics/{test_topic.id}/flashcards/bundle")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["cards"] == []
        assert response.json()["has_completed_any"] is False

    def test_bundle_topic_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/topics/99999/flashcards/bundle")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"detail": "Topic with id 99999 not found"}

    def test_bundle_requires_user_header(
        self, client: TestClient, test_topic: models.Topic
    ) -> None:
        response = client.get(
            f"/api/v1/topics/{test_topic.id}/flashcards/bundle", headers={"X-User-Id": ""}
        )
        assert response.status_code == 422

    def test_bundle_is_cached_until_a_write(
        self, client: TestClient, db_session: Session, test_topic: models.Topic
    ) -> None:
        _create_flashcard(client, test_topic.id, question="First")
        first = client.get(f"/api/v1/topics/{test_topic.id}/flashcards/bundle").json()

        # Bypasses the API, so nothing invalidates the cached bundle
        db_session.add(models.Flashcard(topic_id=test_topic.id, question="Q", answer="A"))
        db_session.commit()
        cached = client.get(f"/api/v1/topics/{test_topic.id}/flashcards/bundle").json()
        assert len(cached["cards"]) == len(first["cards"]) == 1

        # A write through the API invalidates the topic
        _create_flashcard(client, test_topic.id, question="Third")
        fresh = client.get(f"/api/v1/topics/{test_topic.id}/flashcards/bundle").json()
        assert len(fresh["cards"]) == 3

    def test_bundle_expires_after_ttl(
        self,
        client: TestClient,
        db_session: Session,
        test_topic: models.Topic,
        clock: FakeClock,
    ) -> None:
        _create_flashcard(client, test_topic.id)
        client.get(f"/api/v1/topics/{test_topic.id}/flashcards/bundle")

        db_session.add(models.Flashcard(topic_id=test_topic.id, question="Q", answer="A"))
        db_session.commit()

        clock.advance(seconds=59)
        assert len(client.get(f"/api/v1/topics/{test_topic.id}/flashcards/bundle").json()["cards"]) == 1

        clock.advance(seconds=2)
        assert len(client.get(f"/api/v1/topics/{test_topic.id}/flashcards/bundle").json()["cards"]) == 2


class TestRecordAttempt:
    """Test suite for POST /flashcards/:id/attempt endpoint."""

    def test_record_attempt_new_card(
        self, client: TestClient, test_topic: models.Topic, clock: FakeClock
    ) -> None:
        flashcard = _create_flashcard(client, test_topic.id)

        data = _rate(client, flashcard["id"], 3)

        assert data["flashcard_id"] == flashcard["id"]
        assert data["base_flashcard_id"] == flashcard["id"]
        assert data["ease_factor"] == 250
        assert data["interval_days"] == 1
        assert data["repetitions"] == 1
        assert _parse(data["next_review_date"]) == clock.now + timedelta(days=1)

    def test_record_attempt_persists_history(
        self, client: TestClient, db_session: Session, test_topic: models.Topic
    ) -> None:
        flashcard = _create_flashcard(client, test_topic.id)

        _rate(client, flashcard["id"], 4)

        attempts = db_session.query(models.FlashcardAttempt).all()
        assert len(attempts) == 1
        assert attempts[0].flashcard_id == flashcard["id"]
        assert attempts[0].user_id == 1
        assert attempts[0].rating == 4

    def test_record_attempt_flashcard_not_found(
        self, client: TestClient, db_session: Session
    ) -> None:
        response = client.post("/api/v1/flashcards/99999/attempt", json={"rating": 3})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert db_session.query(models.FlashcardAttempt).count() == 0

    def test_record_attempt_rating_out_of_range(
        self, client: TestClient, db_session: Session, test_topic: models.Topic
    ) -> None:
        flashcard = _create_flashcard(client, test_topic.id)

        for rating in (0, 5):
            response = client.post(
                f"/api/v1/flashcards/{flashcard['id']}/attempt", json={"rating": rating}
            )
            assert response.status_code == 422

        assert db_session.query(models.FlashcardAttempt).count() == 0

    def test_progress_is_per_user(
        self, client: TestClient, test_topic: models.Topic
    ) -> None:
        flashcard = _create_flashcard(client, test_topic.id)
        _rate(client, flashcard["id"], 4)

        response = client.get(
            f"/api/v1/topics/{test_topic.id}/flashcards/due", headers={"X-User-Id": "2"}
        )

        data = response.json()
        assert [card["flashcard"]["id"] for card in data["due"]] == [flashcard["id"]]
        assert data["has_completed_any"] is False


class TestDueFlashcards:
    """Test suite for GET /topics/:id/flashcards/due endpoint."""

    def test_review_scenario(
        self, client: TestClient, test_topic: models.Topic, clock: FakeClock
    ) -> None:
        """A new card is rated 'again', then 'easy' twice through its translation."""
        due_url = f"/api/v1/topics/{test_topic.id}/flashcards/due"
        flashcard = _create_flashcard(client, test_topic.id)
        translation = _translate(client, flashcard["id"], "en")

        data = client.get(due_url, params={"language": "pt"}).json()
        assert [card["flashcard"]["id"] for card in data["due"]] == [flashcard["id"]]
        assert data["next_available_at"] is None
        assert data["has_completed_any"] is False

        again = _rate(client, flashcard["id"], 1)
        assert again["interval_days"] == 1
        assert again["repetitions"] == 0

        data = client.get(due_url).json()
        assert data["due"] == []
        assert _parse(data["next_available_at"]) == clock.now + timedelta(days=1)
        assert data["has_completed_any"] is True
        assert data["total_cards"] == 2

        clock.advance(days=1)
        first = _rate(client, translation["id"], 4)
        assert first["base_flashcard_id"] == flashcard["id"]
        assert first["repetitions"] == 1
        assert first["interval_days"] == 1

        clock.advance(days=1)
        second = _rate(client, translation["id"], 4)
        assert second["repetitions"] == 2
        assert second["interval_days"] == 6
        assert _parse(second["next_review_date"]) == clock.now + timedelta(days=6)

    def test_due_boundary_is_inclusive(
        self, client: TestClient, test_topic: models.Topic, clock: FakeClock
    ) -> None:
        due_url = f"/api/v1/topics/{test_topic.id}/flashcards/due"
        flashcard = _create_flashcard(client, test_topic.id)
        _rate(client, flashcard["id"], 3)

        clock.advance(days=1, seconds=-1)
        assert client.get(due_url).json()["due"] == []

        clock.advance(seconds=1)
        due = client.get(due_url).json()["due"]
        assert [card["flashcard"]["id"] for card in due] == [flashcard["id"]]

    def test_variants_share_progress(
        self, client: TestClient, test_topic: models.Topic
    ) -> None:
        flashcard = _create_flashcard(client, test_topic.id)
        translation = _translate(client, flashcard["id"], "en")

        _rate(client, translation["id"], 4)

        bundle = client.get(f"/api/v1/topics/{test_topic.id}/flashcards/bundle").json()
        states = {card["flashcard"]["id"]: card["state"] for card in bundle["cards"]}
        assert states[flashcard["id"]] == states[translation["id"]]
        assert states[flashcard["id"]]["is_new"] is False
        assert states[flashcard["id"]]["repetitions"] == 1

    def test_language_view_prefers_requested_language(
        self, client: TestClient, test_topic: models.Topic
    ) -> None:
        due_url = f"/api/v1/topics/{test_topic.id}/flashcards/due"
        translated_base = _create_flashcard(client, test_topic.id, question="Translated")
        translation = _translate(client, translated_base["id"], "en")
        untranslated = _create_flashcard(client, test_topic.id, question="Untranslated")

        due = client.get(due_url, params={"language": "en"}).json()["due"]

        assert [card["flashcard"]["id"] for card in due] == [translation["id"], untranslated["id"]]
        assert due[0]["is_translation"] is True
        assert due[0]["base_flashcard_id"] == translated_base["id"]

    def test_unsupported_language_falls_back_to_default(
        self, client: TestClient, test_topic: models.Topic
    ) -> None:
        flashcard = _create_flashcard(client, test_topic.id)
        _translate(client, flashcard["id"], "en")

        due = client.get(
            f"/api/v1/topics/{test_topic.id}/flashcards/due", params={"language": "klingon"}
        ).json()["due"]

        assert [card["flashcard"]["id"] for card in due] == [flashcard["id"]]

    def test_due_without_language_returns_every_variant(
        self, client: TestClient, test_topic: models.Topic
    ) -> None:
        flashcard = _create_flashcard(client, test_topic.id)
        translation = _translate(client, flashcard["id"], "es")

        due = client.get(f"/api/v1/topics/{test_topic.id}/flashcards/due").json()["due"]

        assert [card["flashcard"]["id"] for card in due] == [flashcard["id"], translation["id"]]

    def test_new_flashcard_after_deleting_a_studied_one_is_due(
        self, client: TestClient, test_topic: models.Topic
    ) -> None:
        due_url = f"/api/v1/topics/{test_topic.id}/flashcards/due"
        studied = _create_flashcard(client, test_topic.id)
        _rate(client, studied["id"], 4)
        assert client.delete(f"/api/v1/flashcards/{studied['id']}").status_code == status.HTTP_200_OK

        fresh = _create_flashcard(client, test_topic.id, question="What is NADH?")

        data = client.get(due_url).json()
        assert fresh["id"] != studied["id"]
        assert [card["flashcard"]["id"] for card in data["due"]] == [fresh["id"]]
        assert data["due"][0]["state"]["is_new"] is True
        assert data["next_available_at"] is None
        assert data["has_completed_any"] is False
