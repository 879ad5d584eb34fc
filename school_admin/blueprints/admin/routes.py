import logging
from flask import render_template, request, redirect, url_for
from ...forms import AddInstructorForm, AddStudentForm, describe_errors
from ...notifications import LONG, MEDIUM, error, success
from ...services import ApiError, get_backend, get_enrollment
from ...services.onboarding import create_instructor, create_student
from . import bp

logger = logging.getLogger(__name__)

def course_choices():
    try:
        courses = get_backend().get_courses()
    except ApiError:
        logger.exception("Error fetching courses")
        error("Error fetching data", duration=MEDIUM)
        return []
    return [(c.code, c.code) for c in courses]

def flash_form_errors(form):
    title, description = describe_errors(form)
    error(title, description)

# ---------- Instructors ----------
@bp.route("/instructors/new", methods=["GET", "POST"])
def add_instructor():
    form = AddInstructorForm()
    form.courses.choices = course_choices()
    if request.method == "GET":
        return render_template("admin/add_instructor.html", form=form)

    if not form.validate_on_submit():
        flash_form_errors(form)
        return render_template("admin/add_instructor.html", form=form)

    try:
        create_instructor(
            get_backend(),
            instructor_id=form.id.data,
            name=form.name.data,
            password=form.password.data,
            course_codes=form.courses.data or [],
        )
    except ApiError as e:
        logger.exception("Error adding instructor %s", form.id.data)
        error("Error adding instructor", e.message or "Failed to add instructor", LONG)
        return render_template("admin/add_instructor.html", form=form)

    success("Instructor added")
    return redirect(url_for("admin.add_instructor"))

# ---------- Students ----------
@bp.route("/students/new", methods=["GET", "POST"])
def add_student():
    form = AddStudentForm()
    if request.method == "GET":
        return render_template("admin/add_student.html", form=form)

    if not form.validate_on_submit():
        flash_form_errors(form)
        return render_template("admin/add_student.html", form=form)

    img = form.image.data
    try:
        create_student(
            get_backend(),
            get_enrollment(),
            student_id=form.id.data,
            name=form.name.data,
            age=form.age.data,
            class_name=form.class_name.data,
            password=form.password.data,
            image=img.read(),
            content_type=img.mimetype or None,
        )
    except ApiError as e:
        logger.exception("Error adding student %s", form.id.data)
        error("Error adding student", e.message or "Failed to add student", LONG)
        return render_template("admin/add_student.html", form=form)

    success("Student added")
    return redirect(url_for("admin.add_student"))
