"""Auth API tests."""

import uuid


def _patient_payload(email, **overrides):
    payload = {
        "first_name": "Amaka",
        "last_name": "Eze",
        "email": email,
        "phone_number": "+234-803-0000000",
        "password": "Patient1234!",
        "kin_name": "Chidi Eze",
        "kin_phone": "+234-803-1111111",
        "kin_email": "",
        "consent_health": True,
        "consent_terms": True,
    }
    payload.update(overrides)
    return payload


def _email(prefix="auth"):
    return f"{prefix}_{uuid.uuid4().hex[:8]}@test.com"


def test_register_patient_returns_profile(client):
    email = _email()
    r = client.post("/auth/register", json=_patient_payload(email))
    assert r.status_code == 201
    data = r.json()
    assert data["email"] == email
    assert data["full_name"] == "Amaka Eze"
    assert data["role"] == "patient"
    assert data["patient_id"] is not None
    assert data["admin_id"] is None
    assert data["hospital_id"] is None


def test_register_duplicate_email_conflicts(client):
    email = _email()
    client.post("/auth/register", json=_patient_payload(email))
    r = client.post("/auth/register", json=_patient_payload(email.upper()))
    assert r.status_code == 409


def test_register_requires_consent(client):
    r = client.post("/auth/register", json=_patient_payload(_email(), consent_terms=False))
    assert r.status_code == 422


def test_register_rejects_short_password(client):
    r = client.post("/auth/register", json=_patient_payload(_email(), password="short"))
    assert r.status_code == 422


def test_register_unknown_hospital(client):
    r = client.post("/auth/register", json=_patient_payload(_email(), hospital_id=987654))
    assert r.status_code == 400
    assert r.json()["detail"] == "Hospital not found"


def test_login_and_me(client):
    email = _email()
    client.post("/auth/register", json=_patient_payload(email))

    r = client.post("/auth/login", json={"email": email, "password": "Patient1234!"})
    assert r.status_code == 200
    assert r.json()["token_type"] == "bearer"
    token = r.json()["access_token"]

    r = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200
    assert r.json()["email"] == email
    assert r.json()["role"] == "patient"


def test_login_wrong_password(client):
    email = _email()
    client.post("/auth/register", json=_patient_payload(email))
    r = client.post("/auth/login", json={"email": email, "password": "wrong-password"})
    assert r.status_code == 401


def test_me_rejects_bad_token(client):
    assert client.get("/auth/me").status_code == 401
    r = client.get("/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401


def test_admin_register_reuses_hospital_by_registration_no(client, register_admin):
    reg_no = f"REG-SHARED-{uuid.uuid4().hex[:6]}"
    _, first = register_admin(registration_no=reg_no)
    _, second = register_admin(registration_no=reg_no)
    assert first["role"] == "admin"
    assert first["admin_id"] is not None
    assert first["patient_id"] is None
    assert first["hospital_id"] == second["hospital_id"]
    assert first["admin_id"] != second["admin_id"]


def test_patient_can_join_admin_hospital(client, register_admin):
    _, admin = register_admin()
    r = client.post("/auth/register", json=_patient_payload(_email(), hospital_id=admin["hospital_id"]))
    assert r.status_code == 201
    assert r.json()["hospital_id"] == admin["hospital_id"]
