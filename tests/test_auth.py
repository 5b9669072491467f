"""Access boundary tests"""
from datetime import timedelta

from app.core.security import create_access_token, decode_access_token


def test_health_endpoint(client):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_root_endpoint(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["version"] == "1.0.0"


def test_list_campaigns_without_token(client):
    """Missing bearer token is 401, not 403"""
    response = client.get("/campaigns")
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_register_without_token(client):
    response = client.post("/campaigns/abc/customers", json={"phone": "8130626713"})
    assert response.status_code == 401


def test_invalid_token(client):
    response = client.get("/campaigns", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid authentication credentials"}


def test_expired_token(client):
    token = create_access_token("user_operator_a", expires_delta=timedelta(minutes=-1))
    response = client.get("/campaigns", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_token_signed_with_other_key(client):
    import jwt

    token = jwt.encode({"sub": "user_operator_a"}, "some-other-secret-key-of-enough-length", algorithm="HS256")
    response = client.get("/campaigns", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_decode_round_trip_keeps_operator_and_email():
    token = create_access_token("user_operator_a", email="ops@example.com")
    payload = decode_access_token(token)
    assert payload["sub"] == "user_operator_a"
    assert payload["email"] == "ops@example.com"


def test_valid_token_reaches_handler(client, headers_a):
    response = client.get("/campaigns", headers=headers_a)
    assert response.status_code == 200
    assert response.json() == []
