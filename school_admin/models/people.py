from dataclasses import dataclass

@dataclass
class Instructor:
    id: int
    name: str

    def to_payload(self):
        return {"id": self.id, "name": self.name}

@dataclass
class Student:
    id: int
    name: str
    age: int
    class_name: str     # "class" on the wire

    def to_payload(self):
        return {"id": self.id, "name": self.name, "age": self.age,
                "class": self.class_name}
