# app.py - application factory
from flask import Flask, render_template, request, redirect, url_for, flash
from flask_migrate import Migrate
from flask_wtf import CSRFProtect
from flask_session import Session
from flask_wtf.csrf import CSRFError, generate_csrf
from dotenv import load_dotenv
from config import Config
from errors import AttemptComplete, InvalidInput, NoActiveAttempt, NotFound
from models import db
from sqlalchemy import text, inspect
import logging
import os
import time

# Import blueprints
from routes.main_routes import main_bp
from routes.quiz_routes import quiz_bp
from routes.result_routes import result_bp

REQUIRED_TABLES = ("quiz", "question")


def create_app(test_config: dict | None = None):
    # Load environment variables from .env when running via python wsgi.py
    load_dotenv()
    app = Flask(__name__, static_folder="static", template_folder="templates",
                instance_path=Config.INSTANCE_PATH)
    app.config.from_object(Config)

    # Allow overriding config for testing
    if test_config:
        app.config.update(test_config)
        # Disable CSRF in tests to simplify form posting
        if app.config.get('TESTING'):
            app.config['WTF_CSRF_ENABLED'] = False

    # SQLite in-memory (used by tests) doesn't support certain pool options; prune them
    uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
    if uri.startswith('sqlite') and (':memory:' in uri):
        engine_opts = dict(app.config.get('SQLALCHEMY_ENGINE_OPTIONS', {}))
        # These options are for QueuePool and not meaningful for StaticPool used by memory SQLite
        for k in ('pool_timeout', 'pool_recycle'):
            engine_opts.pop(k, None)
        app.config['SQLALCHEMY_ENGINE_OPTIONS'] = engine_opts

    # Initialize extensions
    db.init_app(app)
    Migrate(app, db)
    CSRFProtect(app)
    # Server-side sessions hold the attempt state between requests
    Session(app)

    # Migration / schema safety:
    #  - For local SQLite: auto-create tables if missing.
    #  - For Postgres/other: if tables missing, attempt alembic upgrade once.
    with app.app_context():
        inspector = inspect(db.engine)
        uri = app.config['SQLALCHEMY_DATABASE_URI']
        missing = [t for t in REQUIRED_TABLES if not inspector.has_table(t)]

        if uri.startswith('sqlite:///'):
            if missing:
                db.create_all()
                app.logger.info("(Local) SQLite database initialized.")
        elif missing:
            from flask_migrate import upgrade
            app.logger.info("[migration-check] Missing tables %s; running alembic upgrade...", missing)
            try:
                upgrade()
            except Exception as e:
                # Fail fast so 500 errors don't occur mid-request later
                raise RuntimeError(f"Database schema incomplete and automatic migration failed: {e}")
            inspector = inspect(db.engine)
            if not all(inspector.has_table(t) for t in REQUIRED_TABLES):
                raise RuntimeError("Migration upgrade ran but required tables still missing.")
            app.logger.info("[migration-check] Tables present after upgrade.")

    # Register blueprints
    app.register_blueprint(main_bp)
    app.register_blueprint(quiz_bp)
    app.register_blueprint(result_bp)

    # Inject csrf_token() helper for templates without FlaskForm
    @app.context_processor
    def inject_csrf_token():
        return dict(csrf_token=generate_csrf)

    # Error handlers
    @app.errorhandler(400)
    def bad_request(e):
        return render_template("400.html"), 400

    @app.errorhandler(404)
    def not_found(e):
        return render_template("404.html"), 404

    @app.errorhandler(500)
    def internal_error(e):
        app.logger.exception("Unhandled server error")
        return render_template("500.html"), 500

    @app.errorhandler(NotFound)
    def quiz_not_found(e):
        app.logger.info("quiz lookup failed: %s", e)
        return render_template("404.html"), 404

    @app.errorhandler(NoActiveAttempt)
    def no_active_attempt(e):
        flash('Please choose a quiz first.', 'info')
        return redirect(url_for('main.index'))

    @app.errorhandler(AttemptComplete)
    def attempt_complete(e):
        return redirect(url_for('result.end'))

    @app.errorhandler(InvalidInput)
    def invalid_input(e):
        app.logger.warning("invalid quiz data: %s", e)
        return render_template("400.html"), 400

    @app.errorhandler(CSRFError)
    def handle_csrf_error(e):
        flash('Your session expired or the form is invalid. Please try again.', 'error')
        return redirect(request.referrer or url_for('main.index'))

    # Health check endpoint for uptime monitoring
    @app.route('/healthz', methods=['GET'])
    def healthz():
        status = {"status": "ok", "db": False}
        # Try up to 2 short attempts in case of transient SSL/idle connection issues
        attempts = 2
        for i in range(attempts):
            try:
                db.session.execute(text("SELECT 1"))
                status["db"] = True
                break
            except Exception as e:
                app.logger.warning("healthz db ping failed (attempt %s/%s): %s", i+1, attempts, str(e))
                time.sleep(0.4)
                # dispose engine to force new connections in next attempt
                db.engine.dispose()
        # Set HEALTHZ_STRICT=1 to return 503 when db is unreachable
        strict = os.environ.get("HEALTHZ_STRICT", "0") == "1"
        code = 200 if (status["db"] or not strict) else 503
        return status, code

    # Basic security headers
    @app.after_request
    def set_security_headers(resp):
        resp.headers.setdefault('X-Frame-Options', 'DENY')
        resp.headers.setdefault('X-Content-Type-Options', 'nosniff')
        resp.headers.setdefault('Referrer-Policy', 'strict-origin-when-cross-origin')
        resp.headers.setdefault('Content-Security-Policy', "default-src 'self'; style-src 'self' 'unsafe-inline';")
        return resp

    # Respect X-Forwarded-Proto for HTTPS redirects behind a proxy
    @app.before_request
    def _detect_proxy_scheme():
        xf_proto = request.headers.get('X-Forwarded-Proto')
        if xf_proto:
            request.environ['wsgi.url_scheme'] = xf_proto

    # Basic logging configuration with LOG_LEVEL override
    log_level_name = os.getenv('LOG_LEVEL', 'INFO').upper()
    level = getattr(logging, log_level_name, logging.INFO)
    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s %(name)s %(message)s')
    app.logger.info("startup log_level=%s catalog=%s db_url_scheme=%s", log_level_name,
                    app.config['QUIZ_CATALOG'], app.config['SQLALCHEMY_DATABASE_URI'].split(':')[0])

    return app

"""Application factory only module.

Gunicorn / production: use `gunicorn wsgi:app` (see wsgi.py).
Local dev: `python wsgi.py` or `flask --app wsgi run`.
Tests: import create_app and instantiate explicitly; no server starts on import.
"""
