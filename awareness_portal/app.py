#!/usr/bin/env python3
import logging
import os

import click
from flask import Blueprint, Flask, abort, current_app, jsonify, render_template, request
from flask.cli import with_appcontext
from werkzeug.exceptions import HTTPException

from passwordstrength import ATTACKER_TIERS, analyze, sanitized_report
from passwordstrength.passwordchecker import format_large_number

from . import insights
from .models import db, CyberTip, KnowledgeArticle, CrimeCase
from .seed import seed_content

logger = logging.getLogger(__name__)

bp = Blueprint("portal", __name__)

EXAMPLE_PASSWORDS = [
    ("password123", "password123"),
    ("P@ssw0rd!", "P@ssw0rd!"),
    ("MyDog'sName2024", "MyDog'sName2024"),
    ("c0rrect-h0rse-battery-staple!", "passphrase"),
]

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def _ai_client():
    cfg = current_app.config
    return {
        "api_key": cfg["AI_GATEWAY_API_KEY"],
        "url": cfg["AI_GATEWAY_URL"],
        "model": cfg["AI_GATEWAY_MODEL"],
        "timeout": cfg["AI_REQUEST_TIMEOUT"],
    }


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, description="Request body must be a JSON object")
    return data


@bp.after_app_request
def add_cors_headers(response):
    if request.path.startswith("/api/"):
        response.headers.update(CORS_HEADERS)
    return response


@bp.route("/", methods=["GET", "POST"])
def index():
    analysis = None
    if request.method == "POST":
        # rendered once, never stored or logged
        analysis = analyze(request.form.get("password", ""))

    return render_template("index.html",
                           analysis=analysis,
                           tiers=ATTACKER_TIERS,
                           examples=EXAMPLE_PASSWORDS)


@bp.route("/api/analyze", methods=["POST"])
def api_analyze():
    password = _json_body().get("password", "")
    if not isinstance(password, str):
        abort(400, description="'password' must be a string")
    return jsonify(analysis=sanitized_report(password))


@bp.route("/api/tiers")
def api_tiers():
    return jsonify(tiers=[tier._asdict() for tier in ATTACKER_TIERS])


@bp.route("/api/tips")
def api_tips():
    tips = CyberTip.query.order_by(CyberTip.created_at.desc(), CyberTip.id.desc()).all()
    return jsonify(tips=[t.to_dict() for t in tips])


@bp.route("/api/knowledge")
def api_knowledge():
    category_filter = request.args.get("category", "All")

    articles = KnowledgeArticle.query

    if category_filter != "All":
        articles = articles.filter_by(category=category_filter)

    articles = articles.order_by(KnowledgeArticle.created_at.desc(), KnowledgeArticle.id.desc()).all()
    return jsonify(articles=[a.to_dict() for a in articles], category=category_filter)


@bp.route("/api/crime-cases")
def api_crime_cases():
    cases = CrimeCase.query.order_by(CrimeCase.created_at.desc(), CrimeCase.id.desc()).all()
    return jsonify(cases=[c.to_dict() for c in cases])


@bp.route("/api/cyber-tip", methods=["GET", "POST"])
def api_cyber_tip():
    return jsonify(insights.generate_cyber_tip(**_ai_client()))


@bp.route("/api/password-advice", methods=["POST"])
def api_password_advice():
    data = _json_body()
    if "password" in data:
        # analysed here; only the profile goes to the AI gateway
        result = analyze(data["password"]) if isinstance(data["password"], str) else None
        if result is None:
            abort(400, description="'password' must be a non-empty string")
        profile = insights.profile_from_analysis(result)
    else:
        profile = {
            "entropy": data.get("entropy", 0),
            "length": data.get("length", 0),
            "has_uppercase": data.get("hasUppercase", False),
            "has_lowercase": data.get("hasLowercase", False),
            "has_numbers": data.get("hasNumbers", False),
            "has_symbols": data.get("hasSymbols", False),
            "crack_time": data.get("crackTime", "unknown"),
        }
    return jsonify(insights.generate_password_advice(profile, **_ai_client()))


@bp.route("/api/knowledge-insight", methods=["POST"])
def api_knowledge_insight():
    data = _json_body()
    result = insights.generate_knowledge_insight(data.get("topic", ""),
                                                 kind=data.get("type", "insight"),
                                                 **_ai_client())
    status = 500 if result["generated_by"] == "error" else 200
    return jsonify(result), status


@bp.route("/api/crime-insight", methods=["POST"])
def api_crime_insight():
    data = _json_body()
    result = insights.generate_crime_insight(data.get("caseTitle", ""),
                                             data.get("caseDetails", ""),
                                             kind=data.get("type", "insight"),
                                             question=data.get("question"),
                                             **_ai_client())
    status = 500 if result["generated_by"] == "error" else 200
    return jsonify(result), status


@bp.app_errorhandler(HTTPException)
def handle_http_error(e):
    if request.path.startswith("/api/"):
        return jsonify(error=e.description), e.code
    return e


@click.command("init-db")
@with_appcontext
@click.option("--no-seed", is_flag=True, help="Create tables without starter content.")
def init_db_command(no_seed):
    """Create the content tables and load starter content."""
    db.create_all()
    if not no_seed:
        added = seed_content()
        click.echo(f"Seeded {added} records.")
    click.echo("Initialized the database.")


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_mapping(
        SQLALCHEMY_DATABASE_URI="sqlite:///awareness.db",
        SQLALCHEMY_TRACK_MODIFICATIONS=False,
        AI_GATEWAY_URL=insights.DEFAULT_GATEWAY_URL,
        AI_GATEWAY_MODEL=insights.DEFAULT_MODEL,
        AI_GATEWAY_API_KEY=os.environ.get("LOVABLE_API_KEY"),
        AI_REQUEST_TIMEOUT=insights.DEFAULT_TIMEOUT,
    )
    app.config.from_prefixed_env()
    if test_config is not None:
        app.config.update(test_config)

    db.init_app(app)

    with app.app_context():
        db.create_all()

    app.jinja_env.filters["large_number"] = format_large_number
    app.register_blueprint(bp)
    app.cli.add_command(init_db_command)

    if not app.config["AI_GATEWAY_API_KEY"]:
        logger.warning("AI gateway key not configured; AI endpoints will serve fallback text")

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    create_app().run(debug=True)
