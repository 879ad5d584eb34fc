from flask import current_app
from .api import BackendClient
from .enrollment import EnrollmentClient
from .errors import ApiError, EnrollmentError

def init_app(app):
    timeout = app.config.get("HTTP_TIMEOUT", 10.0)
    app.extensions["backend_api"] = BackendClient(app.config["BACKEND_API_URL"], timeout=timeout)
    app.extensions["enrollment"] = EnrollmentClient(app.config["ENROLL_SERVICE_URL"], timeout=timeout)

def get_backend():
    return current_app.extensions["backend_api"]

def get_enrollment():
    return current_app.extensions["enrollment"]

__all__ = [
    "ApiError", "EnrollmentError", "BackendClient", "EnrollmentClient",
    "init_app", "get_backend", "get_enrollment",
]
