"""Patient profile API tests."""


def test_get_profile(client, register_patient):
    p_token, patient = register_patient()
    r = client.get("/patient/profile", headers={"Authorization": f"Bearer {p_token}"})
    assert r.status_code == 200
    data = r.json()
    assert data["id"] == patient["patient_id"]
    assert data["caregiver_name"] == "John Doe"
    assert data["caregiver_phone"] == "+1-555-0100"
    assert data["smoking_status"] == "never"
    assert data["allergies"] == []


def test_update_profile_partial(client, register_patient):
    p_token, _ = register_patient()
    r = client.put(
        "/patient/profile",
        headers={"Authorization": f"Bearer {p_token}"},
        json={"blood_group": "O+", "allergies": ["penicillin"], "diabetic": True},
    )
    assert r.status_code == 200
    data = r.json()
    assert data["blood_group"] == "O+"
    assert data["allergies"] == ["penicillin"]
    assert data["diabetic"] is True
    assert data["caregiver_name"] == "John Doe"


def test_update_profile_ignores_null_for_required_fields(client, register_patient):
    p_token, _ = register_patient()
    r = client.put(
        "/patient/profile",
        headers={"Authorization": f"Bearer {p_token}"},
        json={"smoking_status": None, "diabetic": None},
    )
    assert r.status_code == 200
    assert r.json()["smoking_status"] == "never"
    assert r.json()["diabetic"] is False


def test_update_profile_links_hospital(client, register_admin, register_patient):
    _, admin = register_admin()
    p_token, _ = register_patient()
    r = client.put(
        "/patient/profile",
        headers={"Authorization": f"Bearer {p_token}"},
        json={"hospital_id": admin["hospital_id"]},
    )
    assert r.status_code == 200
    assert r.json()["hospital_id"] == admin["hospital_id"]


def test_update_profile_unknown_hospital(client, register_patient):
    p_token, _ = register_patient()
    r = client.put(
        "/patient/profile",
        headers={"Authorization": f"Bearer {p_token}"},
        json={"hospital_id": 424242},
    )
    assert r.status_code == 400


def test_profile_is_patient_only(client, register_admin):
    a_token, _ = register_admin()
    r = client.get("/patient/profile", headers={"Authorization": f"Bearer {a_token}"})
    assert r.status_code == 403
