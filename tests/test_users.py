from beanie import PydanticObjectId
from bson import ObjectId

from catalog_api.core.security import verify_password
from catalog_api.models.schema import User


def test_create_user_returns_document_without_password(client, user_payload):
    response = client.post("/users", json=user_payload)

    assert response.status_code == 201
    body = response.json()
    assert ObjectId.is_valid(body["id"])
    assert body["name"] == "Alice"
    assert body["age"] == 30
    assert body["nickname"] == "alice"
    assert "password" not in body


def test_create_user_legacy_path(client, user_payload):
    response = client.post("/user", json=user_payload)
    assert response.status_code == 201


def test_created_user_is_retrievable(client, created_user):
    response = client.get(f"/user/{created_user['id']}")

    assert response.status_code == 200
    assert response.json() == created_user


def test_password_is_stored_hashed(client, created_user, user_payload):
    stored = client.portal.call(User.get, PydanticObjectId(created_user["id"]))

    assert stored.password != user_payload["password"]
    assert verify_password(user_payload["password"], stored.password)


def test_list_users(client, created_user):
    response = client.get("/users")

    assert response.status_code == 200
    assert response.json() == [created_user]


def test_create_user_missing_field_is_rejected(client, user_payload):
    del user_payload["name"]

    response = client.post("/users", json=user_payload)

    assert response.status_code == 400
    fields = [violation["field"] for violation in response.json()["detail"]]
    assert fields == ["name"]

    # Nothing was persisted
    assert client.get("/users").json() == []


def test_create_user_short_password_is_rejected(client, user_payload):
    user_payload["password"] = "short"

    response = client.post("/users", json=user_payload)

    assert response.status_code == 400
    assert response.json()["detail"][0]["field"] == "password"


def test_create_user_empty_and_mistyped_fields(client, user_payload):
    user_payload["nickname"] = ""
    user_payload["age"] = "thirty"

    response = client.post("/users", json=user_payload)

    assert response.status_code == 400
    fields = {violation["field"] for violation in response.json()["detail"]}
    assert fields == {"nickname", "age"}


def test_create_user_invalid_json(client):
    response = client.post(
        "/users",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400


def test_duplicate_nickname_is_rejected(client, created_user, user_payload):
    response = client.post("/users", json={**user_payload, "name": "Other Alice"})

    assert response.status_code == 400
    assert len(client.get("/users").json()) == 1


def test_rename_to_taken_nickname_is_rejected(client, created_user, user_payload):
    other = client.post(
        "/users", json={**user_payload, "name": "Bob", "nickname": "bob"}
    ).json()

    response = client.put(f"/user/{other['id']}", json={"nickname": "alice"})

    assert response.status_code == 400
    assert client.get(f"/user/{other['id']}").json() == other


def test_create_user_boolean_age_is_rejected(client, user_payload):
    user_payload["age"] = True

    response = client.post("/users", json=user_payload)

    assert response.status_code == 400
    assert [violation["field"] for violation in response.json()["detail"]] == ["age"]
    assert client.get("/users").json() == []


def test_update_user_boolean_age_is_rejected(client, created_user):
    response = client.put(f"/user/{created_user['id']}", json={"age": False})

    assert response.status_code == 400
    assert client.get(f"/user/{created_user['id']}").json() == created_user


def test_get_missing_user(client):
    response = client.get(f"/user/{ObjectId()}")
    assert response.status_code == 404


def test_get_malformed_user_id(client):
    response = client.get("/user/not-an-object-id")
    assert response.status_code == 404


def test_update_user_is_partial_merge(client, created_user):
    response = client.put(f"/user/{created_user['id']}", json={"age": 31})

    assert response.status_code == 200
    body = response.json()
    assert body["age"] == 31
    assert body["name"] == created_user["name"]
    assert body["nickname"] == created_user["nickname"]

    # Persisted, not just echoed
    assert client.get(f"/user/{created_user['id']}").json() == body


def test_update_user_null_keeps_value(client, created_user):
    response = client.put(
        f"/user/{created_user['id']}", json={"name": None, "nickname": "ally"}
    )

    assert response.status_code == 200
    assert response.json()["name"] == created_user["name"]
    assert response.json()["nickname"] == "ally"


def test_update_user_password_is_rehashed(client, created_user):
    new_password = "a-much-better-secret"

    response = client.put(
        f"/user/{created_user['id']}", json={"password": new_password}
    )
    assert response.status_code == 200

    login = client.post(
        "/login", json={"nickname": created_user["nickname"], "password": new_password}
    )
    assert login.status_code == 200


def test_update_user_invalid_field(client, created_user):
    response = client.put(f"/user/{created_user['id']}", json={"password": "short"})
    assert response.status_code == 400


def test_update_missing_user(client):
    response = client.put(f"/user/{ObjectId()}", json={"age": 1})
    assert response.status_code == 404


def test_delete_user(client, created_user):
    response = client.delete(f"/user/{created_user['id']}")

    assert response.status_code == 200
    assert response.json() == {"message": "User deleted"}
    assert client.get(f"/user/{created_user['id']}").status_code == 404


def test_delete_missing_user(client):
    response = client.delete(f"/user/{ObjectId()}")
    assert response.status_code == 404
