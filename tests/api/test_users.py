def test_read_me(client, auth_headers, registered_user):
    response = client.get("/api/users/me", headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == registered_user["user"]["id"]
    assert body["email"] == "test@example.com"
    assert "password" not in body


def test_update_profile(client, auth_headers):
    response = client.put(
        "/api/users/me",
        json={"fullName": "Renamed", "picture": "https://img.example.com/me.png"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["full_name"] == "Renamed"
    assert body["picture"] == "https://img.example.com/me.png"


def test_email_cannot_be_changed(client, auth_headers):
    response = client.put(
        "/api/users/me", json={"email": "changed@example.com"}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["email"] == "test@example.com"


def test_password_change_is_rehashed(client, auth_headers):
    client.put("/api/users/me", json={"password": "new-password"}, headers=auth_headers)

    old = client.post(
        "/api/auth/login", json={"email": "test@example.com", "password": "secret123"}
    )
    assert old.status_code == 401

    new = client.post(
        "/api/auth/login", json={"email": "test@example.com", "password": "new-password"}
    )
    assert new.status_code == 200
