import logging
import requests
from .errors import EnrollmentError, error_message

logger = logging.getLogger(__name__)

class EnrollmentClient:
    """Uploads a student's face image to the external enrollment service."""

    def __init__(self, url, timeout=10.0, session=None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def enroll_student(self, image, cur_class, student_id, content_type=None):
        params = {"cur_class": cur_class, "student_id": student_id}
        headers = {"Content-Type": content_type or "application/octet-stream"}
        logger.info("enrollStudent: POST %s %s", self.url, params)
        try:
            resp = self.session.post(self.url, params=params, data=image,
                                     headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise EnrollmentError(f"enrollStudent failed: {e}") from e
        if not resp.ok:
            raise EnrollmentError(error_message(resp), status_code=resp.status_code)
        logger.info("enrollStudent response: %s", resp.text)
        return resp.text
