"""
Tests for the profile endpoints and the completion wizard.
"""


def test_get_profile(client, signed_in, auth_headers):
    response = client.get("/api/v1/profile", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Jane Doe"
    assert data["initials"] == "JD"
    assert data["completion_percentage"] == 100


def test_get_profile_requires_session(client):
    response = client.get("/api/v1/profile")

    assert response.status_code == 401


def test_update_profile(client, signed_in, auth_headers):
    response = client.put("/api/v1/profile", json={"phone": "08129999999"}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["phone"] == "08129999999"


def test_complete_profile_rejects_missing_fields_before_saving(client, signed_in, auth_headers):
    signed_in.calls.clear()

    response = client.post("/api/v1/profile/complete", json={"name": "Jane", "phone": ""}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "Please complete all required fields"
    assert signed_in.calls == []


def test_complete_profile_as_company(client, signed_in, auth_headers):
    signed_in.tables["client"][0].update({"contact_person_address": "", "entity_type": ""})

    response = client.post(
        "/api/v1/profile/complete",
        json={
            "name": "Jane Doe",
            "phone": "0803",
            "address": "3 Broad St, Lagos",
            "client_type": "company",
            "company_name": "Acme Ltd",
        },
        headers=auth_headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["redirect"] == "/clients/dashboard"
    assert data["profile"]["profile_completed"] is True
    assert data["profile"]["company_name"] == "Acme Ltd"


def test_complete_profile_requires_session(client):
    response = client.post(
        "/api/v1/profile/complete",
        json={"name": "Jane", "phone": "0803", "address": "1 Rd"},
    )

    assert response.status_code == 401
