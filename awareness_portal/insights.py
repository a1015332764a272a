"""
Thin client for an OpenAI-compatible chat-completions gateway.

Every generator makes a single request and falls back to a static string
when the gateway is unreachable, misconfigured or returns an error. No raw
passwords are ever part of a prompt, only their analysed profile.
"""
import logging

import requests

logger = logging.getLogger(__name__)

DEFAULT_GATEWAY_URL = "https://ai.gateway.lovable.dev/v1/chat/completions"
DEFAULT_MODEL = "google/gemini-2.5-flash"
DEFAULT_TIMEOUT = 15

PASSWORD_ADVICE_SYSTEM = (
    "You are a password security expert. Analyze the password characteristics and provide "
    "2-3 specific, actionable suggestions to improve its strength. Be encouraging but honest. "
    "Keep response under 100 words."
)
PASSWORD_ADVICE_DEFAULT = (
    "Increase length to 16+ characters and include uppercase, lowercase, numbers, and symbols."
)
PASSWORD_ADVICE_FALLBACK = (
    "Aim for 16+ characters with a mix of uppercase, lowercase, numbers, and symbols. "
    "Consider using a passphrase."
)

CYBER_TIP_SYSTEM = (
    "You are a cybersecurity expert. Provide one practical, actionable security tip in 2-3 "
    "sentences. Focus on real-world protection. Be clear and beginner-friendly."
)
CYBER_TIP_PROMPT = "Give me one important cybersecurity tip for today."
CYBER_TIP_DEFAULT = "Enable two-factor authentication on all your accounts."
CYBER_TIP_FALLBACK = (
    "Use unique, strong passwords for each account and enable two-factor authentication "
    "wherever possible."
)

KNOWLEDGE_SURPRISE_SYSTEM = (
    "You are a cybersecurity educator. Share one fascinating, lesser-known cybersecurity fact "
    "in 2-3 sentences. Make it engaging and educational."
)
KNOWLEDGE_SURPRISE_PROMPT = "Give me a surprising cybersecurity fact that most people don't know."
KNOWLEDGE_INSIGHT_SYSTEM = (
    "You are a cybersecurity expert. Provide 2-3 additional insights, tips, or prevention "
    "strategies related to the topic. Keep it under 200 words. Be practical and actionable."
)
KNOWLEDGE_DEFAULT = "Always verify the authenticity of emails and links before clicking."
KNOWLEDGE_ERROR = "Unable to generate AI insights at this time. Please try again later."

CRIME_QA_SYSTEM = (
    "You are a cybersecurity advisor. Answer the user's question about cybercrime prevention "
    "in 2-3 clear sentences. Be practical and reassuring. Always add: "
    "\"For official guidance, visit https://cybercrime.gov.in\""
)
CRIME_INSIGHT_SYSTEM = (
    "You are a cybersecurity analyst. Provide 2-3 key insights or global context about this "
    "cybercrime case. Keep it under 150 words. Focus on lessons learned and broader implications."
)
CRIME_DEFAULT = "Stay vigilant and report suspicious activity to https://cybercrime.gov.in"
CRIME_ERROR = (
    "Unable to generate AI insights. For cybercrime reporting, visit https://cybercrime.gov.in"
)


class InsightError(Exception):
    """The AI gateway could not produce a completion."""


def chat_completion(system_prompt, user_prompt, *, api_key=None, url=DEFAULT_GATEWAY_URL,
                    model=DEFAULT_MODEL, timeout=DEFAULT_TIMEOUT, session=None) -> str:
    """Send one system+user exchange and return the reply text ("" if none)."""
    if not api_key:
        raise InsightError("AI gateway API key not configured")

    http = session or requests
    payload = {
        "model": model,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ],
    }
    headers = {"Authorization": f"Bearer {api_key}", "Content-Type": "application/json"}
    try:
        resp = http.post(url, json=payload, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        raise InsightError(f"AI gateway request failed: {e}") from e

    if not resp.ok:
        logger.error("AI API error: %s %s", resp.status_code, resp.text[:200])
        raise InsightError(f"AI API failed: {resp.status_code}")

    try:
        data = resp.json()
    except ValueError as e:
        raise InsightError("AI gateway returned invalid JSON") from e

    try:
        return data["choices"][0]["message"]["content"] or ""
    except (KeyError, IndexError, TypeError):
        return ""


def password_profile_text(profile) -> str:
    def yes_no(flag):
        return "Yes" if flag else "No"

    return (
        f"Length: {profile.get('length', 0)} characters\n"
        f"Uppercase: {yes_no(profile.get('has_uppercase'))}\n"
        f"Lowercase: {yes_no(profile.get('has_lowercase'))}\n"
        f"Numbers: {yes_no(profile.get('has_numbers'))}\n"
        f"Symbols: {yes_no(profile.get('has_symbols'))}\n"
        f"Entropy: {float(profile.get('entropy', 0)):.1f} bits\n"
        f"Est. crack time (GPU cluster): {profile.get('crack_time', 'unknown')}"
    )


def profile_from_analysis(analysis) -> dict:
    """Build the advice profile from a passwordstrength Analysis."""
    return {
        "entropy": analysis.entropy_bits,
        "length": analysis.length,
        "has_uppercase": analysis.charset.uppercase,
        "has_lowercase": analysis.charset.lowercase,
        "has_numbers": analysis.charset.digits,
        "has_symbols": analysis.charset.symbols,
        "crack_time": analysis.crack_times.get("Cloud GPU Cluster"),
    }


def generate_password_advice(profile, **client) -> dict:
    logger.info("Generating password strength advice...")
    try:
        prompt = "Analyze this password profile and suggest improvements:\n" + password_profile_text(profile)
        advice = chat_completion(PASSWORD_ADVICE_SYSTEM, prompt, **client)
    except (InsightError, TypeError, ValueError) as e:
        logger.warning("Error in password advice: %s", e)
        return {"advice": PASSWORD_ADVICE_FALLBACK, "generated_by": "fallback"}
    logger.info("Password advice generated successfully")
    return {"advice": advice or PASSWORD_ADVICE_DEFAULT, "generated_by": "AI"}


def generate_cyber_tip(**client) -> dict:
    logger.info("Generating AI cyber security tip...")
    try:
        tip = chat_completion(CYBER_TIP_SYSTEM, CYBER_TIP_PROMPT, **client)
    except InsightError as e:
        logger.warning("Error in cyber tip: %s", e)
        return {"tip": CYBER_TIP_FALLBACK, "generated_by": "fallback"}
    logger.info("AI tip generated successfully")
    return {"tip": tip or CYBER_TIP_DEFAULT, "generated_by": "AI"}


def generate_knowledge_insight(topic, kind="insight", **client) -> dict:
    logger.info("Generating AI %s for topic: %s", kind, topic)
    if kind == "surprise":
        system, prompt = KNOWLEDGE_SURPRISE_SYSTEM, KNOWLEDGE_SURPRISE_PROMPT
    else:
        system = KNOWLEDGE_INSIGHT_SYSTEM
        prompt = f"Provide extra insights and prevention tips about: {topic}"
    try:
        insight = chat_completion(system, prompt, **client)
    except InsightError as e:
        logger.error("Error in knowledge insight: %s", e)
        return {"error": str(e), "insight": KNOWLEDGE_ERROR, "generated_by": "error"}
    return {"insight": insight or KNOWLEDGE_DEFAULT, "generated_by": "AI"}


def generate_crime_insight(case_title, case_details, kind="insight", question=None, **client) -> dict:
    logger.info("Generating AI %s for case: %s", kind, case_title)
    if kind == "qa":
        system, prompt = CRIME_QA_SYSTEM, question or ""
    else:
        system = CRIME_INSIGHT_SYSTEM
        prompt = f"Provide insights about this cybercrime case:\n\nTitle: {case_title}\n\nSummary: {case_details}"
    try:
        if not prompt.strip():
            raise InsightError("No question supplied")
        insight = chat_completion(system, prompt, **client)
    except InsightError as e:
        logger.error("Error in crime insight: %s", e)
        return {"error": str(e), "insight": CRIME_ERROR, "generated_by": "error"}
    return {"insight": insight or CRIME_DEFAULT, "generated_by": "AI"}
