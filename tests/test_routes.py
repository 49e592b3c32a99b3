"""
HTTP surface tests through FastAPI's TestClient with the mock store.
"""

from unittest.mock import AsyncMock

from bson import ObjectId
from pymongo.errors import OperationFailure

from tests.factories import delete_result, insert_result, update_result

VALID_ID = "64b7f0c2a1b2c3d4e5f60718"


def test_home_banner(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "TourNext is travelling with streamlined guide" in response.text


def test_cors_allows_frontend_origin(client):
    response = client.get("/", headers={"Origin": "http://localhost:5173"})
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
    assert response.headers["access-control-allow-credentials"] == "true"


class TestUsers:

    def test_list_passes_filters(self, client, store):
        oid = ObjectId()
        store.users.find.return_value.to_list.return_value = [{"_id": oid, "email": "ana@example.com"}]

        response = client.get("/users", params={"role": "admin", "search": "ana"})

        assert response.status_code == 200
        assert response.json() == [{"_id": str(oid), "email": "ana@example.com"}]
        query = store.users.find.call_args.args[0]
        assert query["role"] == "admin"
        assert "$or" in query

    def test_list_empty(self, client):
        response = client.get("/users", params={"email": "nobody@example.com"})
        assert response.status_code == 200
        assert response.json() == []

    def test_create_returns_201(self, client, store):
        oid = ObjectId()
        store.users.insert_one.return_value = insert_result(oid)

        response = client.post("/users", json={"email": "ana@example.com", "role": "Tourist"})

        assert response.status_code == 201
        assert response.json() == {"acknowledged": True, "insertedId": str(oid)}

    def test_duplicate_email_is_not_an_error(self, client, store):
        store.users.find_one.return_value = {"_id": ObjectId(), "email": "ana@example.com"}

        response = client.post("/users", json={"email": "ana@example.com"})

        assert response.status_code == 200
        assert response.json() == {"inserted": False}
        store.users.insert_one.assert_not_awaited()

    def test_create_without_email(self, client):
        response = client.post("/users", json={"full_name": "Ana"})
        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_create_with_operator_email(self, client, store):
        store.users.find_one.return_value = {"_id": "x", "email": "ana@example.com"}

        response = client.post("/users", json={"email": {"$ne": None}})

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"
        store.users.find_one.assert_not_awaited()

    def test_delete_returns_204(self, client, store):
        response = client.delete(f"/users/{VALID_ID}")

        assert response.status_code == 204
        assert response.content == b""
        store.users.delete_one.assert_awaited_once_with({"_id": ObjectId(VALID_ID)})

    def test_delete_malformed_id_is_400(self, client):
        response = client.delete("/users/not-an-id")
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ID"


class TestGuideTransitions:

    def test_accept(self, client, store):
        store.users.find_one.return_value = {"email": "g@example.com", "role": "Tourist"}
        store.tour_guides.find_one.return_value = {"guide_id": "G1"}

        response = client.patch(
            "/accept-tour-guide",
            json={"user_email": "g@example.com", "guide_id": "G1", "status": "accepted"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["updateUser"]["modifiedCount"] == 1
        assert body["updateGuide"]["matchedCount"] == 1

    def test_accept_requires_both_ids(self, client):
        response = client.patch("/accept-tour-guide", json={"user_email": "g@example.com"})
        assert response.status_code == 422

    def test_accept_failure_is_explicit(self, client, store):
        store.users.find_one.return_value = {"email": "g@example.com", "role": "Tourist"}
        store.tour_guides.find_one.return_value = {"guide_id": "G1"}
        store.tour_guides.update_one = AsyncMock(side_effect=OperationFailure("write failed"))

        response = client.patch(
            "/accept-tour-guide", json={"user_email": "g@example.com", "guide_id": "G1"}
        )

        assert response.status_code == 500
        body = response.json()
        assert body["code"] == "GUIDE_ACCEPTANCE_FAILED"
        assert body["details"]["compensated"] is True

    def test_reject(self, client, store):
        response = client.patch("/reject-tour-guide/G1")

        assert response.status_code == 200
        assert response.json()["modifiedCount"] == 1
        store.tour_guides.update_one.assert_awaited_once_with(
            {"guide_id": "G1"}, {"$set": {"status": "rejected"}}
        )

    def test_reject_unknown_guide(self, client, store):
        store.tour_guides.update_one.return_value = update_result(matched=0, modified=0)
        response = client.patch("/reject-tour-guide/G404")
        assert response.status_code == 404


class TestTours:

    def test_random_sample(self, client, store):
        store.tours.aggregate.return_value.to_list.return_value = [
            {"_id": ObjectId(), "tour_id": f"T{i}"} for i in range(3)
        ]

        response = client.get("/tours", params={"random": "3"})

        assert response.status_code == 200
        assert len(response.json()) == 3

    def test_bad_sort_is_400(self, client):
        response = client.get("/tours", params={"sort": "cheap"})
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_QUERY"

    def test_get_by_tour_id(self, client, store):
        oid = ObjectId()
        store.tours.find_one.return_value = {"_id": oid, "tour_id": "T100", "tour": {"price": 80}}

        response = client.get("/tours/T100")

        assert response.status_code == 200
        assert response.json() == {"_id": str(oid), "tour_id": "T100", "tour": {"price": 80}}

    def test_get_missing_is_404(self, client):
        response = client.get("/tours/T404")
        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    def test_get_missing_lenient_is_null(self, lenient_client):
        response = lenient_client.get("/tours/T404")
        assert response.status_code == 200
        assert response.json() is None

    def test_create(self, client, store):
        response = client.post("/tours", json={"tour_id": "T1", "tour": {"price": 10}})
        assert response.status_code == 201
        assert response.json()["acknowledged"] is True

    def test_delete_missing_is_404(self, client, store):
        store.tours.delete_one.return_value = delete_result(deleted=0)
        response = client.delete(f"/tours/{VALID_ID}")
        assert response.status_code == 404


def test_lenient_delete_status_is_same_for_missing_and_existing(lenient_client, lenient_store):
    existing = lenient_client.delete(f"/stories/{VALID_ID}")

    lenient_store.stories.delete_one.return_value = delete_result(deleted=0)
    missing = lenient_client.delete(f"/stories/{VALID_ID}")

    assert existing.status_code == missing.status_code == 204


class TestBookingsAndGuides:

    def test_list_bookings(self, client, store):
        response = client.get("/bookings", params={"tourist_email": "t@example.com"})
        assert response.status_code == 200
        store.bookings.find.assert_called_once_with({"tourist_email": "t@example.com"})

    def test_create_booking(self, client, store):
        oid = ObjectId()
        store.bookings.insert_one.return_value = insert_result(oid)

        response = client.post("/bookings", json={"tourist_email": "t@example.com"})

        assert response.status_code == 201
        assert response.json() == {"acknowledged": True, "insertedId": str(oid)}

    def test_list_tour_guides_by_status(self, client, store):
        response = client.get("/tour-guides", params={"status": "accepted"})
        assert response.status_code == 200
        store.tour_guides.find.assert_called_once_with({"status": "accepted"})

    def test_create_tour_guide(self, client):
        response = client.post("/tour-guides", json={"guide_id": "G1", "country": "BD"})
        assert response.status_code == 201


class TestStories:

    def test_list_by_poster(self, client, store):
        response = client.get("/stories", params={"poster": "p@example.com"})
        assert response.status_code == 200
        store.stories.find.assert_called_once_with({"poster_email": "p@example.com"})

    def test_create(self, client, store):
        response = client.post("/stories", json={"story_id": "S1"})
        assert response.status_code == 201
        store.stories.insert_one.assert_awaited_once()


class TestHealth:

    def test_health_ok(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["checks"]["database"] == "healthy"

    def test_health_degraded(self, client, store):
        store.ping = AsyncMock(return_value=False)
        response = client.get("/health")
        assert response.status_code == 503

    def test_ready_and_live(self, client):
        assert client.get("/ready").json() == {"status": "ready"}
        assert client.get("/live").json() == {"status": "alive"}
