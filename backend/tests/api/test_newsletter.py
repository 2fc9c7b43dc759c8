"""Tests for the /api/newsletter endpoints."""


class TestNewsletter:
    def test_subscribe(self, client):
        response = client.post("/api/newsletter/subscribe", json={"email": "Reader@Example.com"})

        assert response.status_code == 201
        assert response.json()["data"]["subscriber"]["email"] == "reader@example.com"

    def test_subscribe_twice(self, client):
        client.post("/api/newsletter/subscribe", json={"email": "reader@example.com"})

        response = client.post("/api/newsletter/subscribe", json={"email": "READER@example.com"})

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Email already subscribed"}

    def test_unsubscribe(self, client):
        client.post("/api/newsletter/subscribe", json={"email": "reader@example.com"})

        response = client.post("/api/newsletter/unsubscribe", json={"email": "reader@example.com"})

        assert response.status_code == 200
        assert response.json()["message"] == "Unsubscribed successfully"

    def test_unsubscribe_unknown(self, client):
        response = client.post("/api/newsletter/unsubscribe", json={"email": "reader@example.com"})
        assert response.status_code == 404

    def test_invalid_email(self, client):
        response = client.post("/api/newsletter/subscribe", json={"email": "reader"})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "email"
