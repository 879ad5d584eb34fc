import enum
from dataclasses import dataclass

class Role(str, enum.Enum):
    INSTRUCTOR = "instructor"
    STUDENT = "student"

@dataclass
class User:
    user_id: int
    password: str
    role: Role

    def to_payload(self):
        return {"user_id": self.user_id, "password": self.password,
                "role": Role(self.role).value}

    def __repr__(self):
        return f"User(user_id={self.user_id!r}, role={Role(self.role).value!r})"
