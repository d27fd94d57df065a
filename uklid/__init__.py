# -*- coding: utf-8 -*-
import logging
from collections.abc import Mapping

from flask import Flask, render_template, request, send_from_directory
from flask_wtf.csrf import CSRFError
from werkzeug.middleware.proxy_fix import ProxyFix

from .config import Config, ensure_instance
from .extensions import db, migrate, csrf
from .i18n import format_date, format_hours, format_time, get_locale
from .log import configure_logging

# blueprints
from .modules.records import bp as records_bp

log = logging.getLogger(__name__)


def create_app(config_object=None):
    app = Flask(
        __name__,
        instance_relative_config=True,
        template_folder="templates",
        static_folder="static",
    )
    app.config.from_object(Config)
    if isinstance(config_object, Mapping):
        app.config.update(config_object)
    elif config_object is not None:
        app.config.from_object(config_object)
    ensure_instance(app)
    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    if app.config.get("FORCE_HTTPS"):
        app.config["PREFERRED_URL_SCHEME"] = "https"
        app.config["SESSION_COOKIE_SECURE"] = True

    proxies = int(app.config.get("PROXY_FIX") or 0)
    if proxies:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=proxies, x_proto=proxies)

    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)

    # --- jinja filters, bound to the configured locale ---
    loc = get_locale(app.config.get("UKLID_LOCALE"))

    @app.template_filter("fmt_date")
    def fmt_date(value):
        return format_date(value, loc)

    @app.template_filter("fmt_time")
    def fmt_time(value):
        return format_time(value, loc)

    @app.template_filter("fmt_hours")
    def fmt_hours(value):
        return format_hours(value, loc)

    app.jinja_env.globals["locale_code"] = loc.code

    # --- proxy headers, logged for diagnostics only ---
    @app.before_request
    def log_request():
        log.debug(
            "%s %s scheme=%s client=%s X-Forwarded-Proto=%s X-Forwarded-For=%s",
            request.method,
            request.path,
            request.scheme,
            request.remote_addr,
            request.headers.get("X-Forwarded-Proto", "(none)"),
            request.headers.get("X-Forwarded-For", "(none)"),
        )

    @app.after_request
    def hsts(resp):
        if app.config.get("FORCE_HTTPS"):
            resp.headers.setdefault("Strict-Transport-Security", f"max-age={app.config['HSTS_MAX_AGE']}")
        return resp

    # --- errors ---
    @app.errorhandler(404)
    def not_found(e):
        return render_template("errors/404.html"), 404

    @app.errorhandler(CSRFError)
    def csrf_error(e):
        log.warning("rejected %s %s: %s", request.method, request.path, e.description)
        return render_template("errors/error.html", message=e.description), 400

    @app.errorhandler(500)
    def server_error(e):
        db.session.rollback()
        return render_template("errors/error.html", message=None), 500

    # --- PWA shell: the worker must be served from / to control the whole site ---
    @app.route("/service-worker.js")
    def service_worker():
        resp = send_from_directory(app.static_folder, "service-worker.js", mimetype="application/javascript")
        resp.headers["Cache-Control"] = "no-cache"
        return resp

    @app.route("/manifest.webmanifest")
    def manifest():
        return send_from_directory(app.static_folder, "manifest.webmanifest", mimetype="application/manifest+json")

    # --- blueprints ---
    app.register_blueprint(records_bp)

    if app.config.get("AUTO_CREATE_SCHEMA", True):
        with app.app_context():
            from . import models  # noqa: F401
            db.create_all()

    return app
