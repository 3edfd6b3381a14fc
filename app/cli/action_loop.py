from enum import Enum
from typing import List, Optional
import logging

from app.cli.prompts import Prompter, parse_int, validate_age, validate_index
from app.models.student import Grade, Section, Student, StudentClass, StudentCreate
from app.store.roster_store import RosterStore
from app.utils.logger import ActivityLogger, activity_logger

log = logging.getLogger(__name__)


class Action(str, Enum):
    ADD = "Add Student"
    EDIT = "Edit Student"
    REMOVE = "Remove Student"
    LIST = "List Students"
    EXIT = "Exit"


GRADES = [grade.value for grade in Grade]
CLASSES = [student_class.value for student_class in StudentClass]
SECTIONS = [section.value for section in Section]


class ActionLoop:
    """
    Menu-driven controller for the roster.

    The roster is loaded once and only changed through add/replace/remove,
    each of which saves the full roster before updating memory.
    """

    def __init__(
        self,
        store: RosterStore,
        prompter: Optional[Prompter] = None,
        activity: Optional[ActivityLogger] = None
    ):
        self.store = store
        self.prompter = prompter or Prompter()
        self.activity = activity or activity_logger
        self._students: List[Student] = store.load()

    @property
    def students(self) -> List[Student]:
        return list(self._students)

    # ---------- roster mutations ----------
    def add(self, student: Student) -> int:
        """Append a student and persist; returns its 1-based position."""
        updated = self._students + [student]
        self._commit(updated)
        position = len(updated)
        self.activity.log_activity("add", position, student.to_json(), len(updated))
        return position

    def replace(self, position: int, student: Student) -> Student:
        """Replace the student at a 1-based position and persist; returns the old record."""
        index = position - 1
        previous = self._students[index]
        updated = list(self._students)
        updated[index] = student
        self._commit(updated)
        self.activity.log_activity("edit", position, student.to_json(), len(updated))
        return previous

    def remove(self, position: int) -> Student:
        """Remove the student at a 1-based position and persist; returns it."""
        index = position - 1
        updated = list(self._students)
        removed = updated.pop(index)
        self._commit(updated)
        self.activity.log_activity("remove", position, removed.to_json(), len(updated))
        return removed

    def _commit(self, updated: List[Student]) -> None:
        self.store.save(updated)
        self._students = updated

    # ---------- prompting ----------
    def _ask_student(self, current: Optional[Student] = None, qualifier: str = "") -> Student:
        p = self.prompter
        name = p.text(f"Enter the {qualifier}student name:", current.name if current else None)
        roll_no = p.text(f"Enter the {qualifier}student roll number:", current.roll_no if current else None)
        age = p.validated(
            f"Enter the {qualifier}student age (between 12 and 70):",
            validate_age,
            str(current.age) if current else None
        )
        grade = p.choice(f"Choose the {qualifier}student grade:", GRADES, current.grade if current else None)
        student_class = p.choice(
            f"Choose the {qualifier}student class:", CLASSES, current.student_class if current else None
        )
        section = p.choice(f"Choose the {qualifier}student section:", SECTIONS, current.section if current else None)

        answers = StudentCreate(
            name=name,
            roll_no=roll_no,
            age=parse_int(age),
            grade=grade,
            student_class=student_class,
            section=section
        )
        return Student.from_create(answers)

    def _ask_position(self, verb: str) -> int:
        length = len(self._students)
        answer = self.prompter.validated(
            f"Enter the index of the student to {verb}:",
            lambda value: validate_index(value, length)
        )
        return parse_int(answer)

    # ---------- actions ----------
    def add_student(self) -> None:
        student = self._ask_student()
        self.add(student)
        self.prompter.success("Student added successfully!\n")
        self.list_students()

    def edit_student(self) -> None:
        if not self._students:
            self.prompter.error("No students to edit.\n")
            return
        position = self._ask_position("edit")
        student = self._ask_student(self._students[position - 1], qualifier="new ")
        self.replace(position, student)
        self.prompter.success("Student information updated successfully!\n")
        self.list_students()

    def remove_student(self) -> None:
        if not self._students:
            self.prompter.error("No students to remove.\n")
            return
        position = self._ask_position("remove")
        removed = self.remove(position)
        self.prompter.error(f"Student {removed.name} removed successfully!\n")
        self.list_students()

    def list_students(self) -> None:
        self.prompter.banner("List of Students:\n")
        for position, student in enumerate(self._students, start=1):
            self.prompter.say(student.describe(position))
        self.prompter.say("\n")

    def choose_action(self) -> Action:
        answer = self.prompter.choice("Choose an action:", [action.value for action in Action])
        return Action(answer)

    def run(self) -> None:
        """Dispatch menu choices until Exit is chosen."""
        handlers = {
            Action.ADD: self.add_student,
            Action.EDIT: self.edit_student,
            Action.REMOVE: self.remove_student,
            Action.LIST: self.list_students,
        }

        self.prompter.banner("Student Management System\n")
        while True:
            action = self.choose_action()
            log.debug("Selected action: %s", action.value)
            if action is Action.EXIT:
                self.prompter.banner("Goodbye!")
                return
            handlers[action]()
