"""Student course progress scoring.

Progress is a weighted blend of completed lessons (capped at the lesson
target) and the latest decided result of each exam type. Exams are read in
the order given: callers pass them newest first, which is how
``SqlAlchemyStudentRecords.list_exams`` returns them.
"""

from typing import Iterable, Optional, Sequence

from drivedesk.app.schemas.progress import ProgressResult

TOTAL_LESSONS_TARGET = 10
LESSON_WEIGHT = 0.6
THEORY_WEIGHT = 0.2
PRACTICAL_WEIGHT = 0.2

NOT_TAKEN = "not taken"


def count_completed_lessons(lessons: Iterable) -> int:
    return sum(1 for lesson in lessons if lesson.status == "completed")


def latest_decided_exam(exams: Sequence, exam_type: str) -> Optional[object]:
    """Return the first exam of ``exam_type`` whose result is not pending."""
    return next(
        (exam for exam in exams if exam.exam_type == exam_type and exam.result != "pending"),
        None,
    )


def compute_progress(lessons: Sequence, exams: Sequence) -> ProgressResult:
    completed = count_completed_lessons(lessons)
    lessons_ratio = min(completed / TOTAL_LESSONS_TARGET, 1)

    theory_exam = latest_decided_exam(exams, "theory")
    practical_exam = latest_decided_exam(exams, "practical")

    theory_score = 1 if theory_exam is not None and theory_exam.result == "passed" else 0
    practical_score = 1 if practical_exam is not None and practical_exam.result == "passed" else 0

    total = lessons_ratio * LESSON_WEIGHT + theory_score * THEORY_WEIGHT + practical_score * PRACTICAL_WEIGHT

    return ProgressResult(
        percent=round(total * 100),
        completed_lessons=completed,
        theory_status=theory_exam.result if theory_exam is not None else NOT_TAKEN,
        practical_status=practical_exam.result if practical_exam is not None else NOT_TAKEN,
    )
