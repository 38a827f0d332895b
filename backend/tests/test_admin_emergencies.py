"""Hospital-scoped open emergencies for admins."""

import uuid

from aegis.core.security import hash_password
from aegis.models.admin import Admin
from aegis.models.user import User


def _trigger(client, token, patient_id):
    r = client.post(
        "/emergency/trigger",
        headers={"Authorization": f"Bearer {token}"},
        json={"patient_id": patient_id, "symptoms": ["facial droop"]},
    )
    assert r.status_code == 201
    return r.json()["emergency_id"]


def test_open_emergencies_scoped_to_admin_hospital(client, register_admin, register_patient):
    """Only PENDING emergencies of the admin's own hospital are listed."""
    a_token, admin = register_admin()
    _, other_admin = register_admin()
    p1_token, p1 = register_patient(hospital_id=admin["hospital_id"])
    p2_token, p2 = register_patient(hospital_id=admin["hospital_id"])
    other_token, other = register_patient(hospital_id=other_admin["hospital_id"])
    unlinked_token, unlinked = register_patient()

    older = _trigger(client, p1_token, p1["patient_id"])
    acknowledged = _trigger(client, p2_token, p2["patient_id"])
    _trigger(client, other_token, other["patient_id"])
    _trigger(client, unlinked_token, unlinked["patient_id"])
    newer = _trigger(client, p2_token, p2["patient_id"])
    client.post(f"/emergency/{acknowledged}/acknowledge", headers={"Authorization": f"Bearer {a_token}"})

    r = client.get("/admin/emergencies/open", headers={"Authorization": f"Bearer {a_token}"})
    assert r.status_code == 200
    data = r.json()
    assert [e["id"] for e in data["emergencies"]] == [newer, older]
    assert data["total"] == 2
    assert all(e["status"] == "PENDING" for e in data["emergencies"])


def test_open_emergencies_empty_for_hospital_without_patients(client, register_admin, register_patient):
    a_token, _ = register_admin()
    p_token, patient = register_patient()
    _trigger(client, p_token, patient["patient_id"])

    r = client.get("/admin/emergencies/open", headers={"Authorization": f"Bearer {a_token}"})
    assert r.status_code == 200
    assert r.json() == {"emergencies": [], "total": 0}


def test_open_emergencies_is_admin_only(client, register_patient):
    p_token, _ = register_patient()
    r = client.get("/admin/emergencies/open", headers={"Authorization": f"Bearer {p_token}"})
    assert r.status_code == 403


def test_open_emergencies_requires_linked_hospital(client, register_admin, db_session):
    a_token, admin = register_admin()
    profile = db_session.get(Admin, admin["admin_id"])
    profile.hospital_id = None
    db_session.commit()

    r = client.get("/admin/emergencies/open", headers={"Authorization": f"Bearer {a_token}"})
    assert r.status_code == 422
    assert r.json()["detail"] == "Your admin account is not linked to a hospital."


def test_admin_role_without_profile_is_not_treated_as_admin(client, register_patient, db_session, emergency_store):
    """An admin-role user lacking an admin profile gets no cross-patient access."""
    email = f"orphan_admin_{uuid.uuid4().hex[:8]}@test.com"
    db_session.add(
        User(
            first_name="No",
            last_name="Profile",
            email=email,
            hashed_password=hash_password("Admin1234!"),
            role="admin",
        )
    )
    db_session.commit()
    token = client.post("/auth/login", json={"email": email, "password": "Admin1234!"}).json()["access_token"]

    p_token, patient = register_patient()
    emergency_id = _trigger(client, p_token, patient["patient_id"])

    r = client.get(f"/emergency/{emergency_id}", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 403
    r = client.post(f"/emergency/{emergency_id}/acknowledge", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 403
    r = client.post(
        "/emergency/trigger",
        headers={"Authorization": f"Bearer {token}"},
        json={"patient_id": patient["patient_id"]},
    )
    assert r.status_code == 403
    assert emergency_store.get_by_id(emergency_id).acknowledged_by is None
