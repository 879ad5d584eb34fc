class ApiError(Exception):
    """A backend call that did not succeed.

    ``status_code`` is None when the request never got a response
    (connection refused, timeout, ...).
    """

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

class EnrollmentError(ApiError):
    pass

def error_message(resp):
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("detail", "message", "error"):
            if body.get(key):
                return str(body[key])
    text = (resp.text or "").strip()
    return text or f"HTTP {resp.status_code}"
