from dataclasses import dataclass, field
from typing import Any, Dict

@dataclass
class Course:
    code: str
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, data):
        data = dict(data)
        code = data.pop("code", None)
        if code is None:
            raise ValueError(f"course record without a code: {data!r}")
        return cls(code=str(code), extra=data)

@dataclass
class InstructorCourse:
    instructor_id: int
    course_code: str

    def to_payload(self):
        return {"instructor_id": self.instructor_id, "course_code": self.course_code}
