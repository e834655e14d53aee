import pytest

pytestmark = pytest.mark.django_db


def test_me_returns_current_user(auth_client, user):
    response = auth_client.get("/api/users/me")

    assert response.status_code == 200
    assert response.data["data"] == {
        "id": user.id,
        "username": "alex",
        "email": "alex@example.com",
        "role": "user",
        "isActive": True,
        "dmConsent": False,
        "dateJoined": response.data["data"]["dateJoined"],
    }


def test_me_requires_authentication(api_client):
    assert api_client.get("/api/users/me").status_code == 401


def test_jwt_token_grants_access_to_mood_api(api_client, user):
    response = api_client.post(
        "/api/auth/token",
        {"username": "alex", "password": "s3cret-pass!"},
        format="json",
    )
    assert response.status_code == 200

    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['access']}")
    stats = api_client.get("/api/mood/stats")

    assert stats.status_code == 200
    assert stats.data["data"]["totalEntries"] == 0


def test_inactive_user_cannot_obtain_token(api_client, user):
    user.is_active = False
    user.save()

    response = api_client.post(
        "/api/auth/token",
        {"username": "alex", "password": "s3cret-pass!"},
        format="json",
    )

    assert response.status_code == 401


def test_invalid_token_is_rejected(api_client):
    api_client.credentials(HTTP_AUTHORIZATION="Bearer not-a-token")

    response = api_client.get("/api/mood/history")

    assert response.status_code == 401
    assert response.data["success"] is False
