import logging
from flask import Flask, redirect, request, url_for
from werkzeug.exceptions import RequestEntityTooLarge
from .extensions import csrf
from . import notifications, services

TOAST_CLASSES = {"success": "toast-success", "error": "toast-error"}

def register_filters(app):
    @app.template_filter("toast_class")
    def toast_class(category):
        return TOAST_CLASSES.get(category, "toast-info")

def configure_logging(app):
    level = app.config.get("LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.logger.setLevel(level)

def create_app(config_object="config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)

    configure_logging(app)
    csrf.init_app(app)
    services.init_app(app)

    from .blueprints.admin import bp as admin_bp
    app.register_blueprint(admin_bp, url_prefix="/admin")
    register_filters(app)

    @app.get("/")
    def index():
        return redirect(url_for("admin.add_instructor"))

    @app.errorhandler(RequestEntityTooLarge)
    def too_large(e):
        notifications.error("Upload too large", "The selected file exceeds the upload limit.")
        return redirect(request.path)

    return app
