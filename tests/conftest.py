import json
import pytest
from app.cli.prompts import Prompter
from app.models.student import Student
from app.store.roster_store import RosterStore
from app.utils.logger import ActivityLogger


class ScriptedConsole:
    """Feeds canned answers to a Prompter and records everything it prints."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.output = []

    def input(self, message):
        self.prompts.append(message)
        if not self.answers:
            raise EOFError("script exhausted")
        return self.answers.pop(0)

    def print(self, text=""):
        self.output.append(text)

    def prompter(self):
        return Prompter(input_func=self.input, output_func=self.print, use_color=False)


def make_student(name="Alice", roll_no="R1", age=20, grade="A", student_class="Q1", section="Morning"):
    return Student(
        name=name,
        roll_no=roll_no,
        age=age,
        grade=grade,
        student_class=student_class,
        section=section
    )


def read_activity(activity):
    if not activity.log_file.exists():
        return []
    with open(activity.log_file, "r", encoding="utf-8") as f:
        return [json.loads(line) for line in f if line.strip()]


@pytest.fixture
def store(tmp_path):
    return RosterStore(str(tmp_path / "students.json"))


@pytest.fixture
def activity(tmp_path):
    return ActivityLogger(log_dir=str(tmp_path / "logs"), enabled=True)
