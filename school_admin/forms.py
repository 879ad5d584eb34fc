import re
from flask_wtf import FlaskForm
from flask_wtf.file import FileAllowed, FileField, FileRequired
from wtforms import IntegerField, PasswordField, SelectMultipleField, StringField, SubmitField
from wtforms.validators import DataRequired, ValidationError

# \Z rather than $ so a trailing newline is not accepted
SAFE_PATTERN = re.compile(r"^[a-zA-Z0-9@$!_ ]+\Z")

MISSING_FIELDS = "Please fill all the fields"
INVALID_INPUT = "Invalid input"
INVALID_CHARACTERS = "Only letters, numbers, and the characters @ $ ! _ are allowed."
INVALID_IMAGE = "Only PNG and JPEG images are accepted."
IMAGE_EXTENSIONS = ["png", "jpg", "jpeg"]

def is_safe(value):
    return value is not None and SAFE_PATTERN.match(str(value)) is not None

class SafeText:
    """Allow-list check applied to the text as submitted.

    IntegerField converts with int(), which also takes non-ASCII digits
    and underscores, so the raw input is checked rather than the number.
    """

    def __init__(self, message=INVALID_CHARACTERS):
        self.message = message

    def __call__(self, form, field):
        value = field.raw_data[0] if field.raw_data else field.data
        if not is_safe(value):
            raise ValidationError(self.message)

def _strip(value):
    return value.strip() if isinstance(value, str) else value

def required():
    return DataRequired(message=MISSING_FIELDS)

class AddInstructorForm(FlaskForm):
    id = IntegerField("Id", validators=[required(), SafeText()])
    name = StringField("Name", filters=[_strip], validators=[required(), SafeText()])
    password = PasswordField("Password", validators=[required(), SafeText()])
    courses = SelectMultipleField("Courses", choices=[])
    submit = SubmitField("Add Instructor")

class AddStudentForm(FlaskForm):
    id = IntegerField("Id", validators=[required(), SafeText()])
    name = StringField("Name", filters=[_strip], validators=[required(), SafeText()])
    age = IntegerField("Age", validators=[required(), SafeText()])
    class_name = StringField("Class", filters=[_strip], validators=[required(), SafeText()])
    password = PasswordField("Password", validators=[required(), SafeText()])
    image = FileField("Upload file", validators=[
        FileRequired(message=MISSING_FIELDS),
        FileAllowed(IMAGE_EXTENSIONS, message=INVALID_IMAGE),
    ])
    submit = SubmitField("Add Student")

def describe_errors(form):
    """Collapse a failed form into one (title, description) toast.

    Missing fields win over invalid ones, so a form with both reports
    the missing fields first.
    """
    messages = [msg for field in form for msg in field.errors]
    if not messages:
        return None
    if MISSING_FIELDS in messages:
        return MISSING_FIELDS, None
    return INVALID_INPUT, messages[0]
