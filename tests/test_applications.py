from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

from sqlalchemy import update

from conftest import PROPOSAL, auth, create_tender, register, run_sql
from tenderhub.models.tenders import Tender
from tenderhub.services import application_service


def apply(client, token, tender_id, **overrides):
    payload = {"tenderId": tender_id, "proposal": PROPOSAL, "quotedPrice": 19500}
    payload.update(overrides)
    return client.post("/v1/applications/", json=payload, headers=auth(token))


def set_status(client, token, application_id, status):
    return client.patch(f"/v1/applications/{application_id}/status", json={"status": status}, headers=auth(token))


def test_marketplace_scenario(client):
    a = register(client, "a@x.com", company="Alpha Corp")
    tender = create_tender(client, a["token"], status="published")
    b = register(client, "b@y.com", company="Beta Ltd")

    r = apply(client, b["token"], tender["id"])
    assert r.status_code == 201
    application = r.json()["data"]["application"]
    assert application["status"] == "submitted"

    r = apply(client, b["token"], tender["id"])
    assert r.status_code == 409

    r = set_status(client, a["token"], application["id"], "accepted")
    assert r.status_code == 200
    assert r.json()["data"]["application"]["status"] == "accepted"

    r = set_status(client, b["token"], application["id"], "rejected")
    assert r.status_code == 404


def test_concurrent_duplicate_is_caught_by_unique_constraint(client, monkeypatch):
    a = register(client, "a@x.com")
    tender = create_tender(client, a["token"])
    b = register(client, "b@y.com", company="Beta Ltd")
    assert apply(client, b["token"], tender["id"]).status_code == 201

    async def no_existing_application(db, tender_id, company_id):
        return None

    # the second request loses the race: the lookup misses and the insert hits the constraint
    monkeypatch.setattr(application_service, "find_application", no_existing_application)

    r = apply(client, b["token"], tender["id"])
    assert r.status_code == 409
    assert r.json() == {"success": False, "error": {"message": "Company has already applied to this tender"}}

    r = client.get(f"/v1/applications/tender/{tender['id']}", headers=auth(a["token"]))
    assert len(r.json()["data"]["applications"]) == 1


def test_apply_to_unknown_tender_is_404(client):
    b = register(client, "b@y.com")
    r = apply(client, b["token"], str(uuid.uuid4()))
    assert r.status_code == 404
    assert r.json()["error"]["message"] == "Tender not found"


def test_apply_after_deadline_fails_even_with_valid_payload(client, engine):
    a = register(client, "a@x.com")
    tender = create_tender(client, a["token"])
    run_sql(
        engine,
        update(Tender)
        .where(Tender.id == uuid.UUID(tender["id"]))
        .values(deadline=datetime.now(timezone.utc) - timedelta(hours=1)),
    )
    b = register(client, "b@y.com", company="Beta Ltd")

    r = apply(client, b["token"], tender["id"])
    assert r.status_code == 400
    assert r.json()["error"]["message"] == "Tender deadline has passed"


def test_apply_to_tender_that_is_not_open_fails(client):
    a = register(client, "a@x.com")
    draft = create_tender(client, a["token"], status="draft")
    b = register(client, "b@y.com", company="Beta Ltd")

    r = apply(client, b["token"], draft["id"])
    assert r.status_code == 400
    assert r.json()["error"]["message"] == "Tender is not open for applications"


def test_apply_to_closed_tender_fails(client):
    a = register(client, "a@x.com")
    tender = create_tender(client, a["token"])
    client.put(f"/v1/tenders/{tender['id']}", json={"status": "closed"}, headers=auth(a["token"]))
    b = register(client, "b@y.com", company="Beta Ltd")

    assert apply(client, b["token"], tender["id"]).status_code == 400


def test_proposal_minimum_length(client):
    a = register(client, "a@x.com")
    tender = create_tender(client, a["token"])
    b = register(client, "b@y.com", company="Beta Ltd")

    r = apply(client, b["token"], tender["id"], proposal="Too short to be a proposal")
    assert r.status_code == 400
    assert "proposal" in r.json()["error"]["message"]


def test_quoted_price_must_be_positive(client):
    a = register(client, "a@x.com")
    tender = create_tender(client, a["token"])
    b = register(client, "b@y.com", company="Beta Ltd")

    assert apply(client, b["token"], tender["id"], quotedPrice=0).status_code == 400
    assert apply(client, b["token"], tender["id"], quotedPrice=None).status_code == 201


def test_application_count_is_embedded_in_tender(client):
    a = register(client, "a@x.com")
    tender = create_tender(client, a["token"])
    for email, name in (("b@y.com", "Beta Ltd"), ("c@z.com", "Gamma Inc")):
        bidder = register(client, email, company=name)
        assert apply(client, bidder["token"], tender["id"]).status_code == 201

    r = client.get(f"/v1/tenders/{tender['id']}")
    assert r.json()["data"]["tender"]["application_count"] == 2


def test_illegal_status_transitions_are_rejected(client):
    a = register(client, "a@x.com")
    tender = create_tender(client, a["token"])
    b = register(client, "b@y.com", company="Beta Ltd")
    application = apply(client, b["token"], tender["id"]).json()["data"]["application"]

    assert set_status(client, a["token"], application["id"], "shortlisted").status_code == 400

    assert set_status(client, a["token"], application["id"], "under_review").status_code == 200
    assert set_status(client, a["token"], application["id"], "shortlisted").status_code == 200
    assert set_status(client, a["token"], application["id"], "rejected").status_code == 200

    # rejected is terminal
    r = set_status(client, a["token"], application["id"], "accepted")
    assert r.status_code == 400
    assert r.json()["error"]["message"] == "Cannot change application status from rejected to accepted"


def test_unknown_status_value_is_400(client):
    a = register(client, "a@x.com")
    tender = create_tender(client, a["token"])
    b = register(client, "b@y.com", company="Beta Ltd")
    application = apply(client, b["token"], tender["id"]).json()["data"]["application"]

    assert set_status(client, a["token"], application["id"], "won").status_code == 400


def test_application_visible_to_applicant_and_owner_only(client):
    a = register(client, "a@x.com")
    tender = create_tender(client, a["token"])
    b = register(client, "b@y.com", company="Beta Ltd")
    outsider = register(client, "c@z.com", company="Gamma Inc")
    application = apply(client, b["token"], tender["id"]).json()["data"]["application"]
    url = f"/v1/applications/{application['id']}"

    r = client.get(url, headers=auth(b["token"]))
    assert r.status_code == 200
    detail = r.json()["data"]["application"]
    assert detail["tender"]["title"] == tender["title"]
    assert detail["company"]["name"] == "Beta Ltd"

    assert client.get(url, headers=auth(a["token"])).status_code == 200

    forbidden = client.get(url, headers=auth(outsider["token"]))
    missing = client.get(f"/v1/applications/{uuid.uuid4()}", headers=auth(outsider["token"]))
    assert forbidden.status_code == missing.status_code == 404
    assert forbidden.json() == missing.json()


def test_tender_applications_for_owner_only(client):
    a = register(client, "a@x.com")
    tender = create_tender(client, a["token"])
    b = register(client, "b@y.com", company="Beta Ltd")
    apply(client, b["token"], tender["id"])

    r = client.get(f"/v1/applications/tender/{tender['id']}", headers=auth(a["token"]))
    assert r.status_code == 200
    applications = r.json()["data"]["applications"]
    assert len(applications) == 1
    assert applications[0]["company"]["name"] == "Beta Ltd"

    r = client.get(f"/v1/applications/tender/{tender['id']}", headers=auth(b["token"]))
    assert r.status_code == 404


def test_my_applications(client):
    a = register(client, "a@x.com", company="Alpha Corp")
    first = create_tender(client, a["token"], title="First roofing job")
    second = create_tender(client, a["token"], title="Second paving job")
    b = register(client, "b@y.com", company="Beta Ltd")
    apply(client, b["token"], first["id"])
    apply(client, b["token"], second["id"])

    r = client.get("/v1/applications/company/mine", headers=auth(b["token"]))
    assert r.status_code == 200
    applications = r.json()["data"]["applications"]
    assert {app["tender"]["title"] for app in applications} == {"First roofing job", "Second paving job"}
    assert all(app["tender"]["company"]["name"] == "Alpha Corp" for app in applications)

    r = client.get("/v1/applications/company/mine", headers=auth(a["token"]))
    assert r.json()["data"]["applications"] == []
