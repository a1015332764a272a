"""Starter content for a fresh database."""
from .models import db, CyberTip, KnowledgeArticle, CrimeCase

STARTER_TIPS = [
    {
        "title": "Turn on two-factor authentication",
        "description": "A second factor stops most account takeovers even when a password leaks.",
        "category": "Accounts",
        "severity": "high",
    },
    {
        "title": "Use a password manager",
        "description": "Let a manager generate and remember a unique 16+ character password per site.",
        "category": "Passwords",
        "severity": "high",
    },
    {
        "title": "Check links before you click",
        "description": "Hover over links to see the real destination. Phishing pages copy real logos.",
        "category": "Phishing",
        "severity": "medium",
    },
]

STARTER_ARTICLES = [
    {
        "title": "What password entropy means",
        "content": (
            "Entropy measures how unpredictable a password is, in bits. Every extra bit doubles "
            "the number of guesses an attacker needs. Length adds entropy faster than swapping "
            "letters for symbols."
        ),
        "category": "Passwords",
        "reading_time": 3,
    },
    {
        "title": "Recognising phishing emails",
        "content": (
            "Urgent requests, mismatched sender domains and unexpected attachments are the usual "
            "signs. Verify through a channel you already trust before acting."
        ),
        "category": "Phishing",
        "reading_time": 4,
    },
]

STARTER_CASES = [
    {
        "title": "Credential stuffing against a streaming service",
        "description": (
            "Attackers replayed username and password pairs leaked from other sites and took over "
            "thousands of accounts that reused passwords."
        ),
        "date": "2019-11",
        "impact": "Accounts resold on underground forums.",
        "lessons": "Never reuse passwords; enable two-factor authentication.",
    },
]


def seed_content():
    """Insert starter rows into empty tables. Returns the number of rows added."""
    added = 0
    for model, rows in ((CyberTip, STARTER_TIPS),
                        (KnowledgeArticle, STARTER_ARTICLES),
                        (CrimeCase, STARTER_CASES)):
        if model.query.first() is not None:
            continue
        for row in rows:
            db.session.add(model(**row))
            added += 1
    db.session.commit()
    return added
