import pytest
from src.main import create_app
from src.extensions import db

TEST_CONFIG = {
    "TESTING": True,
    "DEBUG": False,
    "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
    "MAIL_SUPPRESS_SEND": True,
    "MAIL_DEFAULT_SENDER": "no-reply@example.com",
    "CONTACT_RECIPIENT": "support@example.com",
    "BCRYPT_ROUNDS": 4,
    "AUTH_COOKIE_SECURE": False,
    "JWT_SECRET_KEY": "test-jwt-secret-key-with-enough-length",
    "SECRET_KEY": "test-secret",
    "GST_API_KEY": None,
    "BASE_URL": "http://billing.test",
}

SIGNUP_PAYLOAD = {
    "email": "owner@example.com",
    "password": "secret123",
    "company_name": "Kishan Textiles",
    "company_type": "WHOLESALER CLOTH MERCHANT",
    "company_address": "Subhash Bazaar, Agra",
    "gstin": "09aadfs1992c1z6",
    "phone1": "9411924901",
    "num_bank_accounts": 1,
    "bank1_name": "STATE BANK OF INDIA",
    "bank1_account": "1234567890",
    "bank1_ifsc": "SBIN0000001",
}


@pytest.fixture
def app():
    app = create_app(TEST_CONFIG)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def signup_and_login(client, **overrides):
    payload = dict(SIGNUP_PAYLOAD, **overrides)
    response = client.post("/api/auth/signup", json=payload)
    assert response.status_code == 201, response.get_json()
    response = client.post("/api/auth/login", json={"email": payload["email"], "password": payload["password"]})
    assert response.status_code == 200, response.get_json()
    return payload


@pytest.fixture
def auth_client(client):
    signup_and_login(client)
    return client


@pytest.fixture
def customer(auth_client):
    response = auth_client.post("/api/customers/", json={
        "business_name": "Ram Garments",
        "contact_person": "Ram Prasad",
        "address": "12 Raja Mandi",
        "city": "Agra",
        "state": "Uttar Pradesh",
        "gst_number": "09ABCDE1234F1Z5",
    })
    assert response.status_code == 201
    return response.get_json()["customer"]


def invoice_payload(customer_id, **overrides):
    payload = {
        "invoice_number": "INV-2024-0001",
        "invoice_date": "2024-03-15",
        "customer_id": customer_id,
        "broker_name": "Mohan Lal",
        "discount_rate": 0,
        "is_same_state": True,
        "items": [
            {"product_name": "Cotton Shirting", "hsn_code": "5208", "unit": "Mtr", "quantity": 10, "rate": 100, "gst_rate": 5},
        ],
    }
    payload.update(overrides)
    return payload
