import re
from datetime import datetime, timedelta
from conftest import SIGNUP_PAYLOAD
from src.extensions import db, mail
from user.models import PasswordResetToken
from user.password_reset_routes import GENERIC_RESET_MESSAGE
from user.user import User


def request_reset(client, email="owner@example.com"):
    with mail.record_messages() as outbox:
        response = client.post("/api/auth/forgot-password", json={"email": email})
    return response, outbox


def token_from(message):
    return re.search(r"token=([0-9a-f]+)", message.body).group(1)


def test_reset_flow(client):
    client.post("/api/auth/signup", json=SIGNUP_PAYLOAD)
    response, outbox = request_reset(client)

    assert response.status_code == 200
    assert response.get_json() == {"message": GENERIC_RESET_MESSAGE}
    assert len(outbox) == 1
    assert outbox[0].recipients == ["owner@example.com"]
    assert "http://billing.test/reset-password?token=" in outbox[0].body

    token = token_from(outbox[0])
    stored = PasswordResetToken.query.one()
    assert stored.token_hash != token

    reset = client.post("/api/auth/reset-password", json={"email": "owner@example.com", "token": token, "password": "brandnew"})
    assert reset.status_code == 200
    assert PasswordResetToken.query.count() == 0
    assert User.query.one().check_password("brandnew")

    login = client.post("/api/auth/login", json={"email": "owner@example.com", "password": "brandnew"})
    assert login.status_code == 200


def test_unknown_email_gets_same_answer(client):
    response, outbox = request_reset(client, "nobody@example.com")

    assert response.status_code == 200
    assert response.get_json() == {"message": GENERIC_RESET_MESSAGE}
    assert outbox == []


def test_token_is_single_use(client):
    client.post("/api/auth/signup", json=SIGNUP_PAYLOAD)
    _, outbox = request_reset(client)
    token = token_from(outbox[0])
    payload = {"email": "owner@example.com", "token": token, "password": "brandnew"}

    assert client.post("/api/auth/reset-password", json=payload).status_code == 200
    assert client.post("/api/auth/reset-password", json=payload).status_code == 400


def test_expired_token_is_rejected(client):
    client.post("/api/auth/signup", json=SIGNUP_PAYLOAD)
    _, outbox = request_reset(client)
    token = token_from(outbox[0])

    stored = PasswordResetToken.query.one()
    stored.expiry_date = datetime.utcnow() - timedelta(minutes=1)
    db.session.commit()

    response = client.post("/api/auth/reset-password", json={"email": "owner@example.com", "token": token, "password": "brandnew"})
    assert response.status_code == 400
    assert response.get_json()["error"] == "Reset link has expired"
    assert PasswordResetToken.query.count() == 0
    assert User.query.one().check_password(SIGNUP_PAYLOAD["password"])


def test_reset_validation(client):
    client.post("/api/auth/signup", json=SIGNUP_PAYLOAD)

    assert client.post("/api/auth/forgot-password", json={}).status_code == 400
    assert client.post("/api/auth/reset-password", json={"email": "owner@example.com"}).status_code == 400
    short = client.post("/api/auth/reset-password", json={"email": "owner@example.com", "token": "abc", "password": "123"})
    assert short.status_code == 400
    wrong = client.post("/api/auth/reset-password", json={"email": "owner@example.com", "token": "abc", "password": "123456"})
    assert wrong.status_code == 400


def test_contact_form(client):
    with mail.record_messages() as outbox:
        response = client.post("/api/contact", json={
            "name": "Asha", "email": "asha@example.com", "subject": "Pricing", "message": "Hello <b>there</b>",
        })

    assert response.status_code == 200
    assert response.get_json()["success"] is True
    assert outbox[0].recipients == ["support@example.com"]
    assert outbox[0].reply_to == "asha@example.com"
    assert "&lt;b&gt;there&lt;/b&gt;" in outbox[0].html


def test_contact_form_requires_fields(client):
    response = client.post("/api/contact", json={"name": "Asha"})

    assert response.status_code == 400
    assert "email, subject, message" in response.get_json()["error"]


def test_non_string_reset_fields_are_rejected(client):
    client.post("/api/auth/signup", json=SIGNUP_PAYLOAD)

    forgot = client.post("/api/auth/forgot-password", json={"email": 123})
    assert forgot.status_code == 400
    reset = client.post("/api/auth/reset-password", json={"email": "owner@example.com", "token": 123, "password": "brandnew"})
    assert reset.status_code == 400
    assert User.query.one().check_password(SIGNUP_PAYLOAD["password"])
