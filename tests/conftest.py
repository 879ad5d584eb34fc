import threading
import pytest
from config import TestConfig
from school_admin import create_app
from school_admin.models import Course
from school_admin.services import ApiError, EnrollmentError


class FakeBackend:
    """Records calls in order; ``fail`` maps an operation name to the error it raises."""

    def __init__(self, courses=("CS101", "CS102", "MATH200")):
        self.courses = list(courses)
        self.calls = []
        self.fail = {}
        self.fail_codes = set()
        self._lock = threading.Lock()

    def _record(self, op, payload=None):
        with self._lock:
            self.calls.append((op, payload))
        if op in self.fail:
            raise self.fail[op]

    def operations(self):
        return [op for op, _ in self.calls if op != "get_courses"]

    def add_user(self, user):
        self._record("add_user", user.to_payload())
        return {"user_id": user.user_id}

    def add_instructor(self, instructor):
        self._record("add_instructor", instructor.to_payload())
        return instructor.to_payload()

    def add_student(self, student):
        self._record("add_student", student.to_payload())
        return student.to_payload()

    def add_instructor_course(self, link):
        self._record("add_instructor_course", link.to_payload())
        if link.course_code in self.fail_codes:
            raise ApiError(f"cannot link {link.course_code}", status_code=409)
        return link.to_payload()

    def get_courses(self):
        self._record("get_courses")
        return [Course(code=c) for c in self.courses]


class FakeEnrollment:
    def __init__(self, backend):
        self.backend = backend
        self.uploads = []
        self.error = None

    def enroll_student(self, image, cur_class, student_id, content_type=None):
        # shares the backend's call log so ordering across both clients is visible
        self.backend._record("enroll_student", {"cur_class": cur_class, "student_id": student_id})
        self.uploads.append((image, content_type))
        if self.error:
            raise self.error
        return "enrolled"


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def enrollment(backend):
    return FakeEnrollment(backend)


@pytest.fixture
def app(backend, enrollment):
    app = create_app(TestConfig)
    app.extensions["backend_api"] = backend
    app.extensions["enrollment"] = enrollment
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def enrollment_error():
    return EnrollmentError("Face not detected", status_code=400)
