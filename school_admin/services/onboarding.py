"""Multi-step create flows behind the admin forms.

Each flow is a straight sequence of backend calls. A failure part way
through is propagated as-is: records created by earlier steps are left
in place on the backend.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from .errors import ApiError
from ..models import Instructor, InstructorCourse, Role, Student, User

logger = logging.getLogger(__name__)

def link_courses(api, instructor_id, course_codes):
    """Link every course code to the instructor concurrently.

    All links are attempted; if any fail a single ApiError is raised
    once the batch has finished.
    """
    links = [InstructorCourse(instructor_id=instructor_id, course_code=code)
             for code in dict.fromkeys(course_codes)]
    if not links:
        return []

    with ThreadPoolExecutor(max_workers=len(links)) as pool:
        futures = [pool.submit(api.add_instructor_course, link) for link in links]

    results, failures = [], []
    for link, fut in zip(links, futures):
        err = fut.exception()
        if err is None:
            results.append(fut.result())
        else:
            logger.error("linking course %s to instructor %s failed: %s",
                         link.course_code, instructor_id, err)
            failures.append(err)

    if failures:
        first = failures[0]
        raise ApiError(f"{len(failures)} of {len(links)} course links failed: {first}",
                       status_code=getattr(first, "status_code", None)) from first
    return results

def create_instructor(api, instructor_id, name, password, course_codes=()):
    api.add_user(User(user_id=instructor_id, password=password, role=Role.INSTRUCTOR))
    instructor = Instructor(id=instructor_id, name=name)
    api.add_instructor(instructor)
    linked = link_courses(api, instructor_id, course_codes)
    logger.info("instructor %s created with %d course(s)", instructor_id, len(linked))
    return instructor

def create_student(api, enrollment, student_id, name, age, class_name, password,
                   image, content_type=None):
    enrollment.enroll_student(image, cur_class=class_name, student_id=student_id,
                              content_type=content_type)
    api.add_user(User(user_id=student_id, password=password, role=Role.STUDENT))
    student = Student(id=student_id, name=name, age=age, class_name=class_name)
    api.add_student(student)
    logger.info("student %s created in class %s", student_id, class_name)
    return student
