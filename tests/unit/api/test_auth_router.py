import pytest
from fastapi.testclient import TestClient

from hotel_booking_api.domain.entities import Customer
from tests.conftest import SIGNING_SECRET

SIGN_UP_URL = "/api/sign-up"
LOGIN_URL = "/api/login-with-email-and-password"


def _sign_up_payload(**overrides: str) -> dict[str, str]:
    payload = {"name": "John Doe", "email": "john.doe@gmail.com", "password": "123456"}
    payload.update(overrides)
    return payload


def test_sign_up_returns_created(client: TestClient, customers_gateway) -> None:
    response = client.post(SIGN_UP_URL, json=_sign_up_payload())

    assert response.status_code == 201
    assert response.json() == {
        "statusCode": 201,
        "statusText": "CREATED",
        "data": "customer sign up successfully",
    }
    assert customers_gateway.customers[0].email == "john.doe@gmail.com"


@pytest.mark.parametrize(
    ("overrides", "expected_error"),
    [
        ({"name": "J"}, "name must be at least 3 characters long"),
        ({"email": "jjgmail.com"}, "email address is invalid. Please enter a valid email address"),
        ({"password": "123"}, "password must be at least 6 characters long"),
    ],
)
def test_sign_up_returns_bad_request_on_business_rule(
    client: TestClient,
    overrides: dict[str, str],
    expected_error: str,
) -> None:
    response = client.post(SIGN_UP_URL, json=_sign_up_payload(**overrides))

    assert response.status_code == 400
    assert response.json() == {
        "statusCode": 400,
        "statusText": "BAD_REQUEST",
        "error": expected_error,
    }


def test_sign_up_returns_conflict_on_email_in_use(client: TestClient) -> None:
    client.post(SIGN_UP_URL, json=_sign_up_payload())

    response = client.post(SIGN_UP_URL, json=_sign_up_payload(name="Jane Doe"))

    assert response.status_code == 409
    assert response.json() == {
        "statusCode": 409,
        "statusText": "CONFLICT",
        "error": (
            "this email address is already in use. "
            "Please use a different email or login to your existing account"
        ),
    }


def test_sign_up_returns_validation_errors_for_empty_body(client: TestClient) -> None:
    response = client.post(SIGN_UP_URL, json={})

    assert response.status_code == 400
    assert response.json() == {
        "statusCode": 400,
        "statusText": "BAD_REQUEST",
        "errors": ["name is required", "email is required", "password is required"],
    }


def test_sign_up_rejects_non_json_content_type(client: TestClient) -> None:
    response = client.post(
        SIGN_UP_URL,
        content="name=John",
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )

    assert response.status_code == 400
    assert response.json()["errors"] == ["content-type must be application/json"]


@pytest.mark.parametrize("body", ["{not json", "[1, 2]"])
def test_sign_up_rejects_body_that_is_not_a_json_object(client: TestClient, body: str) -> None:
    response = client.post(SIGN_UP_URL, content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json()["errors"] == ["content-type must be application/json"]


def test_login_returns_access_token(client: TestClient, customers_gateway, token_codec) -> None:
    client.post(SIGN_UP_URL, json=_sign_up_payload())
    customer: Customer = customers_gateway.customers[0]

    response = client.post(
        LOGIN_URL,
        json={"email": "john.doe@gmail.com", "password": "123456"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["statusCode"] == 200
    assert body["statusText"] == "OK"
    assert body["data"]["customerId"] == str(customer.id)
    assert body["data"]["customerName"] == "John Doe"
    claims = token_codec.decode(body["data"]["accessToken"], SIGNING_SECRET)
    assert claims["customerId"] == str(customer.id)


@pytest.mark.parametrize(
    "credentials",
    [
        {"email": "unknown@gmail.com", "password": "123456"},
        {"email": "john.doe@gmail.com", "password": "1234567"},
    ],
)
def test_login_returns_unauthorized_on_wrong_credentials(
    client: TestClient,
    credentials: dict[str, str],
) -> None:
    client.post(SIGN_UP_URL, json=_sign_up_payload())

    response = client.post(LOGIN_URL, json=credentials)

    assert response.status_code == 401
    assert response.json() == {
        "statusCode": 401,
        "statusText": "UNAUTHORIZED",
        "error": "email or password is incorrect",
    }


def test_login_returns_validation_errors(client: TestClient) -> None:
    response = client.post(LOGIN_URL, json={"email": "", "password": 123456})

    assert response.status_code == 400
    assert response.json()["errors"] == ["email must not be empty", "password must be string"]


def test_login_returns_internal_error_when_signing_secret_is_missing(
    client: TestClient,
    secrets_gateway,
) -> None:
    client.post(SIGN_UP_URL, json=_sign_up_payload())
    secrets_gateway.values.clear()

    response = client.post(LOGIN_URL, json={"email": "john.doe@gmail.com", "password": "123456"})

    assert response.status_code == 500
    assert response.json() == {
        "statusCode": 500,
        "statusText": "INTERNAL_SERVER_ERROR",
        "error": "something went wrong. Please try again later",
    }
