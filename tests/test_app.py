import logging

import pytest

from awareness_portal import create_app, insights
from awareness_portal.models import db, KnowledgeArticle
from awareness_portal.seed import STARTER_ARTICLES, STARTER_CASES, STARTER_TIPS, seed_content


class FakeResponse:
    status_code = 200
    ok = True
    text = ""

    def __init__(self, content):
        self.content = content

    def json(self):
        return {"choices": [{"message": {"content": self.content}}]}


@pytest.fixture
def ai_client(monkeypatch):
    calls = []

    def fake_post(url, json=None, headers=None, timeout=None):
        calls.append(json)
        return FakeResponse("AI says hi")

    monkeypatch.setattr(insights.requests, "post", fake_post)
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "AI_GATEWAY_API_KEY": "test-key",
    })
    client = app.test_client()
    client.calls = calls
    return client


def test_index_page(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"Password Strength Simulator" in resp.data
    assert b"Estimated Crack Times" not in resp.data


def test_index_post_renders_analysis(client, caplog):
    with caplog.at_level(logging.DEBUG):
        resp = client.post("/", data={"password": "password123"})
    assert resp.status_code == 200
    assert b"Strength: Moderate" in resp.data
    assert b"36 possible chars" in resp.data
    assert b"208.7M years" in resp.data
    assert b"1.0B guesses/sec" in resp.data
    assert "password123" not in caplog.text


def test_api_analyze(client):
    resp = client.post("/api/analyze", json={"password": "12345"})
    assert resp.status_code == 200
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
    analysis = resp.get_json()["analysis"]
    assert analysis["charset_size"] == 10
    assert analysis["strength"] == "very-weak"
    assert "Don't use only numbers - add letters and symbols" in analysis["suggestions"]


def test_api_analyze_empty_password(client):
    resp = client.post("/api/analyze", json={"password": ""})
    assert resp.status_code == 200
    assert resp.get_json() == {"analysis": None}


@pytest.mark.parametrize("kwargs", [
    {"data": "not json", "content_type": "application/json"},
    {"json": ["password"]},
    {"json": {"password": 123}},
])
def test_api_analyze_rejects_bad_bodies(client, kwargs):
    resp = client.post("/api/analyze", **kwargs)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_api_preflight(client):
    resp = client.options("/api/analyze")
    assert resp.status_code == 200
    assert "content-type" in resp.headers["Access-Control-Allow-Headers"]


def test_api_tiers(client):
    tiers = client.get("/api/tiers").get_json()["tiers"]
    assert [t["key"] for t in tiers] == ["online_throttled", "consumer_gpu", "cloud_cluster", "massive_botnet"]
    assert tiers[0]["speed"] == 10


def test_content_listings(client):
    assert len(client.get("/api/tips").get_json()["tips"]) == len(STARTER_TIPS)
    assert len(client.get("/api/crime-cases").get_json()["cases"]) == len(STARTER_CASES)
    data = client.get("/api/knowledge").get_json()
    assert data["category"] == "All"
    assert len(data["articles"]) == len(STARTER_ARTICLES)


def test_knowledge_category_filter(client):
    data = client.get("/api/knowledge?category=Phishing").get_json()
    assert [a["title"] for a in data["articles"]] == ["Recognising phishing emails"]
    assert client.get("/api/knowledge?category=Nope").get_json()["articles"] == []


def test_seed_is_idempotent(app):
    with app.app_context():
        assert seed_content() == 0
        db.session.add(KnowledgeArticle(title="Extra", content="x", category="Misc"))
        db.session.commit()
        assert KnowledgeArticle.query.count() == len(STARTER_ARTICLES) + 1


def test_ai_routes_fall_back_without_key(client):
    tip = client.get("/api/cyber-tip").get_json()
    assert tip == {"tip": insights.CYBER_TIP_FALLBACK, "generated_by": "fallback"}

    advice = client.post("/api/password-advice", json={"length": 8}).get_json()
    assert advice["generated_by"] == "fallback"

    resp = client.post("/api/knowledge-insight", json={"topic": "Phishing"})
    assert resp.status_code == 500
    assert resp.get_json()["insight"] == insights.KNOWLEDGE_ERROR

    resp = client.post("/api/crime-insight", json={"caseTitle": "x", "caseDetails": "y"})
    assert resp.status_code == 500
    assert resp.get_json()["generated_by"] == "error"


def test_password_advice_from_password_sends_profile_only(ai_client):
    resp = ai_client.post("/api/password-advice", json={"password": "password123"})
    assert resp.get_json() == {"advice": "AI says hi", "generated_by": "AI"}
    prompt = ai_client.calls[0]["messages"][1]["content"]
    assert "password123" not in prompt
    assert "Length: 11 characters" in prompt


def test_password_advice_empty_password_rejected(ai_client):
    resp = ai_client.post("/api/password-advice", json={"password": ""})
    assert resp.status_code == 400
    assert ai_client.calls == []


def test_password_advice_from_profile_fields(ai_client):
    resp = ai_client.post("/api/password-advice", json={
        "entropy": 42.5, "length": 9, "hasUppercase": True, "hasLowercase": True,
        "hasNumbers": False, "hasSymbols": False, "crackTime": "3.0 days",
    })
    assert resp.get_json()["generated_by"] == "AI"
    prompt = ai_client.calls[0]["messages"][1]["content"]
    assert "Entropy: 42.5 bits" in prompt
    assert "Numbers: No" in prompt
    assert "3.0 days" in prompt


def test_ai_routes_with_gateway(ai_client):
    assert ai_client.post("/api/cyber-tip").get_json() == {"tip": "AI says hi", "generated_by": "AI"}

    resp = ai_client.post("/api/knowledge-insight", json={"type": "surprise"})
    assert resp.status_code == 200
    assert resp.get_json()["insight"] == "AI says hi"

    resp = ai_client.post("/api/crime-insight", json={"type": "qa", "question": "Was I hacked?"})
    assert resp.status_code == 200
    assert ai_client.calls[-1]["messages"][1]["content"] == "Was I hacked?"


@pytest.mark.parametrize("entropy", ["high", None])
def test_password_advice_bad_profile_fields_fall_back(ai_client, entropy):
    resp = ai_client.post("/api/password-advice", json={"entropy": entropy, "length": 8})
    assert resp.status_code == 200
    assert resp.get_json() == {"advice": insights.PASSWORD_ADVICE_FALLBACK, "generated_by": "fallback"}
    assert ai_client.calls == []
