from __future__ import annotations

from conftest import auth, create_tender, future, register


def add_goods(client, token, **payload):
    r = client.post("/v1/companies/goods-services", json=payload, headers=auth(token))
    assert r.status_code == 201, r.text


def test_company_search_needs_a_criterion(client):
    r = client.get("/v1/search/companies")
    assert r.status_code == 400
    assert r.json()["error"]["message"] == "Search query or industry filter is required"


def test_company_search_matches_goods_and_services(client):
    a = register(client, "a@x.com", company="Alpha Builders", industry="Construction")
    register(client, "b@y.com", company="Beta Logistics", industry="Transport")
    add_goods(client, a["token"], name="Scaffolding hire", category="Equipment")
    add_goods(client, a["token"], name="Scaffold inspection", category="Services")

    r = client.get("/v1/search/companies", params={"q": "scaffold"})
    assert r.status_code == 200
    companies = r.json()["data"]["companies"]
    # two matching goods must not duplicate the company
    assert [c["name"] for c in companies] == ["Alpha Builders"]
    assert len(companies[0]["goods_services"]) == 2

    r = client.get("/v1/search/companies", params={"q": "logistics"})
    assert [c["name"] for c in r.json()["data"]["companies"]] == ["Beta Logistics"]

    r = client.get("/v1/search/companies", params={"industry": "trans"})
    assert [c["name"] for c in r.json()["data"]["companies"]] == ["Beta Logistics"]


def test_goods_preview_is_capped(client):
    a = register(client, "a@x.com", company="Alpha Builders")
    for n in range(7):
        add_goods(client, a["token"], name=f"Item {n}")

    r = client.get("/v1/search/companies", params={"q": "alpha"})
    assert len(r.json()["data"]["companies"][0]["goods_services"]) == 5


def test_has_more_is_exact_on_page_boundary(client):
    for n in range(4):
        register(client, f"user{n}@x.com", company=f"Builder {n}", industry="Construction")

    r = client.get("/v1/search/companies", params={"industry": "construction", "limit": 2})
    assert r.json()["data"]["pagination"] == {"page": 1, "limit": 2, "has_more": True}

    r = client.get("/v1/search/companies", params={"industry": "construction", "limit": 2, "page": 2})
    assert len(r.json()["data"]["companies"]) == 2
    assert r.json()["data"]["pagination"]["has_more"] is False


def test_tender_search_by_text_industry_and_status(client):
    a = register(client, "a@x.com", company="Alpha Builders", industry="Construction")
    b = register(client, "b@y.com", company="Beta Logistics", industry="Transport")
    create_tender(client, a["token"], title="Warehouse roofing", deadline=future(3))
    create_tender(client, b["token"], title="Fleet maintenance", deadline=future(5))
    create_tender(client, a["token"], title="Roofing draft plan", status="draft")

    r = client.get("/v1/search/tenders")
    titles = [t["title"] for t in r.json()["data"]["tenders"]]
    assert titles == ["Warehouse roofing", "Fleet maintenance"]

    r = client.get("/v1/search/tenders", params={"q": "ROOF"})
    assert [t["title"] for t in r.json()["data"]["tenders"]] == ["Warehouse roofing"]

    r = client.get("/v1/search/tenders", params={"industry": "transport"})
    tenders = r.json()["data"]["tenders"]
    assert [t["title"] for t in tenders] == ["Fleet maintenance"]
    assert tenders[0]["company"]["name"] == "Beta Logistics"

    r = client.get("/v1/search/tenders", params={"status": "draft"})
    assert [t["title"] for t in r.json()["data"]["tenders"]] == ["Roofing draft plan"]


def test_industries_are_distinct_and_sorted(client):
    register(client, "a@x.com", company="Alpha", industry="Transport")
    register(client, "b@y.com", company="Beta", industry="Construction")
    register(client, "c@z.com", company="Gamma", industry="Construction")

    r = client.get("/v1/search/industries")
    assert r.json()["data"]["industries"] == ["Construction", "Transport"]


def test_suggestions(client):
    a = register(client, "a@x.com", company="Alpha Builders")
    add_goods(client, a["token"], name="Crane rental", category="Equipment")
    add_goods(client, a["token"], name="Forklift rental", category="Equipment")
    add_goods(client, a["token"], name="Site survey", category="Services")
    create_tender(client, a["token"], title="Warehouse roofing")
    create_tender(client, a["token"], title="Hidden draft tender", status="draft")

    r = client.get("/v1/search/suggestions", params={"type": "companies"})
    assert r.json()["data"]["suggestions"] == ["Equipment", "Services"]

    r = client.get("/v1/search/suggestions", params={"type": "tenders"})
    assert r.json()["data"]["suggestions"] == ["Warehouse roofing"]
