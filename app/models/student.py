from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import List


class Grade(str, Enum):
    A_PLUS = "A+"
    A = "A"
    B = "B"
    C = "C"
    F = "F"


class StudentClass(str, Enum):
    Q1 = "Q1"
    Q2 = "Q2"
    Q3 = "Q3"
    Q4 = "Q4"


class Section(str, Enum):
    MORNING = "Morning"
    AFTERNOON = "Afternoon"


MIN_AGE = 12
MAX_AGE = 70


class StudentBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    roll_no: str = Field(alias="rollNo")
    age: int


class StudentCreate(StudentBase):
    """Record built from interactive answers; range and choices are enforced."""
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    age: int = Field(ge=MIN_AGE, le=MAX_AGE)
    grade: Grade
    student_class: StudentClass = Field(alias="studentClass")
    section: Section


class Student(StudentBase):
    """Persisted record. Only the shape is checked, values are trusted as stored."""
    grade: str
    student_class: str = Field(alias="studentClass")
    section: str

    @classmethod
    def from_create(cls, data: StudentCreate) -> "Student":
        return cls(**data.model_dump(by_alias=True))

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)

    def describe(self, position: int) -> str:
        return (
            f"{position}. Name: {self.name}, Roll No: {self.roll_no}, Age: {self.age}, "
            f"Grade: {self.grade}, Class: {self.student_class}, Section: {self.section}"
        )


class Roster(BaseModel):
    students: List[Student]
