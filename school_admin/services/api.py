import logging
import requests
from .errors import ApiError, error_message
from ..models import Course

logger = logging.getLogger(__name__)

class BackendClient:
    """Thin client for the school backend's REST API."""

    def __init__(self, base_url, timeout=10.0, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, operation, method, path, **kwargs):
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.info("%s: %s %s", operation, method, url)
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise ApiError(f"{operation} failed: {e}") from e
        if not resp.ok:
            msg = error_message(resp)
            logger.warning("%s returned %s: %s", operation, resp.status_code, msg)
            raise ApiError(msg, status_code=resp.status_code)
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return resp.text

    def add_user(self, user):
        return self._request("addUser", "POST", "/users", json=user.to_payload())

    def add_instructor(self, instructor):
        return self._request("addInstructor", "POST", "/instructors",
                             json=instructor.to_payload())

    def add_student(self, student):
        return self._request("addStudent", "POST", "/students", json=student.to_payload())

    def add_instructor_course(self, link):
        return self._request("addInstructorCourse", "POST", "/instructor_courses",
                             json=link.to_payload())

    def get_courses(self):
        data = self._request("getCourses", "GET", "/courses")
        if not isinstance(data, list):
            raise ApiError("getCourses: expected a list of courses")
        try:
            return [Course.from_payload(item) for item in data]
        except (TypeError, ValueError) as e:
            raise ApiError(f"getCourses: malformed course record: {e}") from e
