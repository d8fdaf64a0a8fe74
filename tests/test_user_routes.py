from course_catalog.models.user import Role, User
from course_catalog.utils.security import decode_token, verify_password

from conftest import TEST_SECRET, signup_payload


def test_signup_creates_user_and_sets_session_cookie(client, db) -> None:
    response = client.post("/api/user/signup", json=signup_payload())

    assert response.status_code == 201
    assert response.json() == {"message": "user successfully register"}
    assert "httponly" in response.headers["set-cookie"].lower()

    user = db.query(User).filter(User.email == "ada@example.com").one()
    assert user.role is Role.admin
    assert verify_password("s3cret-pass", user.password_hash)
    assert decode_token(client.cookies["jwt"], TEST_SECRET)["sub"] == user.id


def test_signup_defaults_role_to_user(client, db) -> None:
    payload = signup_payload()
    del payload["role"]

    response = client.post("/api/user/signup", json=payload)

    assert response.status_code == 201
    assert db.query(User).one().role is Role.user


def test_signup_rejects_password_mismatch(client, db) -> None:
    response = client.post("/api/user/signup", json=signup_payload(confirmPassword="different"))

    assert response.status_code == 400
    assert response.json() == {"message": "password does not match"}
    assert db.query(User).count() == 0


def test_signup_rejects_duplicate_email(client, db) -> None:
    first = client.post("/api/user/signup", json=signup_payload())
    second = client.post("/api/user/signup", json=signup_payload(name="Someone Else"))

    assert first.status_code == 201
    assert second.status_code == 400
    assert second.json() == {"message": "user already exists"}
    assert db.query(User).count() == 1


def test_signup_does_not_store_confirmation_hash(client, db) -> None:
    client.post("/api/user/signup", json=signup_payload())

    columns = set(User.__table__.columns.keys())
    assert db.query(User).count() == 1
    assert "password_hash" in columns
    assert not any("confirm" in column for column in columns)


def test_signup_rejects_unknown_role(client, db) -> None:
    response = client.post("/api/user/signup", json=signup_payload(role="superuser"))

    assert response.status_code == 400
    assert response.json()["message"] == "invalid request body"
    assert db.query(User).count() == 0


def test_signup_requires_all_fields(client) -> None:
    response = client.post("/api/user/signup", json={"email": "ada@example.com"})

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert {"name", "password", "confirmPassword"} <= fields


def test_login_succeeds_with_matching_credentials(client) -> None:
    client.post("/api/user/signup", json=signup_payload())
    client.cookies.clear()

    response = client.post("/api/user/login", json={"email": "ada@example.com", "password": "s3cret-pass"})

    assert response.status_code == 201
    assert response.json() == {"message": "user login successfully"}
    assert "jwt" in client.cookies


def test_login_rejects_unknown_email(client) -> None:
    response = client.post("/api/user/login", json={"email": "nobody@example.com", "password": "whatever"})

    assert response.status_code == 400
    assert response.json() == {"message": "user does not exists"}
    assert "jwt" not in client.cookies


def test_login_rejects_wrong_password(client) -> None:
    client.post("/api/user/signup", json=signup_payload())
    client.cookies.clear()

    response = client.post("/api/user/login", json={"email": "ada@example.com", "password": "wrong-pass"})

    assert response.status_code == 400
    assert response.json() == {"message": "password does not match"}
    assert "jwt" not in client.cookies


def test_logout_clears_cookie(client) -> None:
    client.post("/api/user/signup", json=signup_payload())
    assert "jwt" in client.cookies

    response = client.post("/api/user/logout")

    assert response.status_code == 200
    assert response.json() == {"message": "user logout succesfully"}
    assert "jwt" not in client.cookies


def test_logout_without_session_still_succeeds(client) -> None:
    response = client.post("/api/user/logout")

    assert response.status_code == 200


def test_signup_accepts_any_non_empty_email(client, db) -> None:
    response = client.post("/api/user/signup", json=signup_payload(email="bob"))

    assert response.status_code == 201
    assert db.query(User).one().email == "bob"

    client.cookies.clear()
    login = client.post("/api/user/login", json={"email": "bob", "password": "s3cret-pass"})
    assert login.status_code == 201


def test_signup_rejects_empty_email(client, db) -> None:
    response = client.post("/api/user/signup", json=signup_payload(email=""))

    assert response.status_code == 400
    assert db.query(User).count() == 0
