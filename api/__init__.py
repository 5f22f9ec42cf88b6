import logging
import os

from flask import Flask, send_from_directory, current_app
from flasgger import Swagger
from flask_cors import CORS

from .config import get_config
from .errors import register_error_handlers
from .limits import limiter
from models import storage  # DBStorage singleton (scoped_session)

# Exposes /swagger.json and the UI at /apidocs
SWAGGER_TEMPLATE = {
    "swagger": "2.0",
    "info": {
        "title": "Growth Valley CMS API",
        "version": "2.0.0",
        "description": "Content management API for the Growth Valley marketing site: "
                       "admin auth, page content, blog, case studies, enquiries, media and settings.",
    },
    "basePath": "/",
    "schemes": ["http", "https"],
    "securityDefinitions": {
        "Bearer": {
            "type": "apiKey",
            "name": "Authorization",
            "in": "header",
            "description": "Enter the token with the `Bearer ` prefix, e.g. \"Bearer abcde12345\"."
        }
    }
}

SWAGGER_CONFIG = {
    "headers": [],
    "specs": [
        {
            "endpoint": "apispec_1",
            "route": "/swagger.json",
            "rule_filter": lambda rule: rule.rule.startswith("/api"),
            "model_filter": lambda tag: True,
        }
    ],
    "static_url_path": "/flasgger_static",
    "swagger_ui": True,
    "specs_route": "/apidocs/",
}

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'; img-src 'self' data: https:; "
                               "style-src 'self' 'unsafe-inline'; script-src 'self' 'unsafe-inline'",
    "Permissions-Policy": "camera=(), microphone=(), geolocation=()",
}


def configure_logging(level_name: str) -> None:
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    root.setLevel(level)


def create_app(config_name: str | None = None) -> Flask:
    """
    Application factory: creates and configures the Flask app.
    """
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))
    # /api/blog and /api/blog/ both resolve without a redirect
    app.url_map.strict_slashes = False
    configure_logging(app.config["LOG_LEVEL"])

    origins = app.config.get("CORS_ORIGINS") or "*"
    CORS(app, resources={r"/api/*": {"origins": origins}}, supports_credentials=origins != ["*"])

    Swagger(app, template=SWAGGER_TEMPLATE, config=SWAGGER_CONFIG)
    limiter.init_app(app)
    register_error_handlers(app)

    from .health import bp as health_bp
    from .auth import bp as auth_bp
    from .dashboard import bp as dashboard_bp
    from .content import bp as content_bp
    from .blog import bp as blog_bp
    from .case_studies import bp as case_studies_bp
    from .clients import bp as clients_bp
    from .team import bp as team_bp
    from .testimonials import bp as testimonials_bp
    from .enquiries import bp as enquiries_bp
    from .media import bp as media_bp
    from .settings import bp as settings_bp
    from .seo import bp as seo_bp

    app.register_blueprint(health_bp, url_prefix="/api")
    app.register_blueprint(auth_bp, url_prefix="/api/admin")
    app.register_blueprint(dashboard_bp, url_prefix="/api/admin")
    app.register_blueprint(content_bp, url_prefix="/api/content")
    app.register_blueprint(blog_bp, url_prefix="/api/blog")
    app.register_blueprint(case_studies_bp, url_prefix="/api/case-studies")
    app.register_blueprint(clients_bp, url_prefix="/api/clients")
    app.register_blueprint(team_bp, url_prefix="/api/team")
    app.register_blueprint(testimonials_bp, url_prefix="/api/testimonials")
    # The public form posts to /api/contact; the admin UI reads /api/enquiries
    app.register_blueprint(enquiries_bp, url_prefix="/api/contact", name="contact")
    app.register_blueprint(enquiries_bp, url_prefix="/api/enquiries", name="enquiries")
    app.register_blueprint(media_bp, url_prefix="/api/media")
    app.register_blueprint(settings_bp, url_prefix="/api/settings")
    app.register_blueprint(seo_bp, url_prefix="/api/seo")

    from .commands import register_commands
    register_commands(app)

    @app.get("/uploads/<path:filename>")
    @limiter.exempt
    def uploaded_file(filename):
        return send_from_directory(os.path.abspath(current_app.config["UPLOAD_DIR"]), filename)

    @app.after_request
    def add_security_headers(response):
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response

    # Ensure the DB session is removed at the end of each request/app context
    @app.teardown_appcontext
    def remove_session(exception=None):
        storage.close()

    @app.route("/")
    def root():
        return {
            "message": "Welcome to Growth Valley CMS API",
            "docs": "/apidocs/",
            "health": "/api/health",
        }, 200

    return app
