"""Tests for the role, policy, subscriber and pricing endpoints."""

from __future__ import annotations

ADMIN = "admin-alice"
USER = "user-bob"
OUTSIDER = "mallory"
DUE_DATE = "2027-03-01T12:00:00Z"


def as_caller(identity: str) -> dict:
    return {"X-Caller-Identity": identity}


def create_policy(client, payload, caller=ADMIN):
    return client.post("/api/v1/policies", json=payload, headers=as_caller(caller))


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "policies": 0}


def test_get_roles(client):
    response = client.get(f"/api/v1/roles/{ADMIN}")

    assert response.status_code == 200
    assert response.json() == {"identity": ADMIN, "is_admin": True, "is_user": False}


def test_admin_grants_roles(client):
    response = client.post("/api/v1/roles/admins", json={"identity": "carol"}, headers=as_caller(ADMIN))
    assert response.status_code == 201
    assert response.json()["is_admin"] is True

    response = client.post("/api/v1/roles/users", json={"identity": "dave"}, headers=as_caller("carol"))
    assert response.status_code == 201
    assert response.json() == {"identity": "dave", "is_admin": False, "is_user": True}


def test_non_admin_grant_is_forbidden(client):
    response = client.post("/api/v1/roles/admins", json={"identity": OUTSIDER}, headers=as_caller(OUTSIDER))

    assert response.status_code == 403
    body = response.json()
    assert body["status"] == "error"
    assert body["code"] == "FORBIDDEN"
    assert body["details"] == {"identity": OUTSIDER, "required_role": "administrator"}

    roles = client.get(f"/api/v1/roles/{OUTSIDER}").json()
    assert roles["is_admin"] is False


def test_missing_caller_header_is_unauthorized(client, sample_policy):
    response = client.post("/api/v1/policies", json=sample_policy)

    assert response.status_code == 401
    assert response.json()["code"] == "HTTP_401"


def test_create_and_read_policies(client, sample_policy):
    first = create_policy(client, sample_policy)
    second = create_policy(client, {**sample_policy, "plan": "Third Party Only"})

    assert first.status_code == 201
    assert first.json() == {"policy_id": 1}
    assert second.json() == {"policy_id": 2}

    policy = client.get("/api/v1/policies/1").json()
    assert policy == {"id": 1, **sample_policy}

    listed = client.get("/api/v1/policies").json()
    assert [item["plan"] for item in listed] == ["Comprehensive Motor", "Third Party Only"]


def test_list_policies_empty(client):
    response = client.get("/api/v1/policies")

    assert response.status_code == 200
    assert response.json() == []


def test_create_policy_requires_admin(client, sample_policy):
    response = create_policy(client, sample_policy, caller=USER)

    assert response.status_code == 403
    assert client.get("/api/v1/policies").json() == []


def test_create_policy_rejects_negative_amounts(client, sample_policy):
    response = create_policy(client, {**sample_policy, "deductible": -10})

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_unknown_policy_is_not_found(client):
    for policy_id in (0, 1):
        response = client.get(f"/api/v1/policies/{policy_id}")
        assert response.status_code == 404
        assert response.json()["message"] == "policy does not exist"


def test_select_policy_end_to_end(client, sample_policy):
    create_policy(client, sample_policy)

    response = client.post(
        "/api/v1/policies/1/selections",
        json={"subscriber": USER, "nominal_premium": 1000},
        headers=as_caller(USER),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["subscriber"] == USER
    assert body["policy_id"] == 1
    assert body["premium"] == 500
    assert body["due_date"] == DUE_DATE

    history = client.get(f"/api/v1/subscribers/{USER}/selections").json()
    assert history == {
        "subscriber": USER,
        "policy_ids": [1],
        "premiums": [500],
        "due_dates": [DUE_DATE],
    }


def test_any_caller_may_select_for_a_user(client, sample_policy):
    create_policy(client, sample_policy)

    response = client.post(
        "/api/v1/policies/1/selections",
        json={"subscriber": USER, "nominal_premium": 1000},
        headers=as_caller(OUTSIDER),
    )

    assert response.status_code == 201


def test_select_for_non_user_is_forbidden(client, sample_policy):
    create_policy(client, sample_policy)

    response = client.post(
        "/api/v1/policies/1/selections",
        json={"subscriber": OUTSIDER, "nominal_premium": 1000},
        headers=as_caller(ADMIN),
    )

    assert response.status_code == 403


def test_select_unknown_policy_is_not_found(client):
    response = client.post(
        "/api/v1/policies/3/selections",
        json={"subscriber": USER, "nominal_premium": 1000},
        headers=as_caller(USER),
    )

    assert response.status_code == 404
    assert response.json()["details"] == {"resource_type": "policy", "resource_id": 3}


def test_select_with_invalid_reference_price(client, sample_policy, price_feed):
    create_policy(client, sample_policy)
    price_feed.set_price(-1)

    response = client.post(
        "/api/v1/policies/1/selections",
        json={"subscriber": USER, "nominal_premium": 1000},
        headers=as_caller(USER),
    )

    assert response.status_code == 422
    assert response.json()["code"] == "INVALID_REFERENCE_PRICE"
    assert client.get(f"/api/v1/subscribers/{USER}/selections").status_code == 404


def test_history_without_selections_is_not_found(client):
    response = client.get(f"/api/v1/subscribers/{USER}/selections")

    assert response.status_code == 404
    assert response.json()["message"] == "no selections"


def test_pricing_quote_and_convert(client):
    quote = client.get("/api/v1/pricing/quote")
    assert quote.status_code == 200
    assert quote.json() == {"value": 200_000_000, "decimals": 8}

    converted = client.get("/api/v1/pricing/convert", params={"amount": 1000})
    assert converted.json() == {"nominal_amount": 1000, "converted_amount": 500}
