from types import SimpleNamespace

import pytest

from drivedesk.app.services.progress import TOTAL_LESSONS_TARGET, compute_progress


def lesson(status: str):
    return SimpleNamespace(status=status)


def exam(exam_type: str, result: str, exam_date: str = "2024-01-01"):
    return SimpleNamespace(exam_type=exam_type, result=result, exam_date=exam_date)


def test_empty_history_is_zero():
    result = compute_progress([], [])
    assert result.percent == 0
    assert result.completed_lessons == 0
    assert result.theory_status == "not taken"
    assert result.practical_status == "not taken"


@pytest.mark.parametrize("completed", range(0, TOTAL_LESSONS_TARGET + 1))
def test_lessons_only_scale_to_sixty(completed):
    lessons = [lesson("completed")] * completed + [lesson("scheduled"), lesson("cancelled")]
    result = compute_progress(lessons, [])
    assert result.percent == round(60 * completed / 10)
    assert result.completed_lessons == completed


def test_lesson_contribution_is_capped():
    result = compute_progress([lesson("completed")] * 14, [])
    assert result.percent == 60
    assert result.completed_lessons == 14


def test_both_exams_passed_adds_forty():
    lessons = [lesson("completed")] * 5
    exams = [exam("theory", "passed"), exam("practical", "passed")]
    result = compute_progress(lessons, exams)
    assert result.percent == 30 + 40
    assert result.theory_status == "passed"
    assert result.practical_status == "passed"


def test_pending_exams_are_skipped():
    exams = [
        exam("theory", "pending", "2024-03-01"),
        exam("theory", "passed", "2024-02-01"),
        exam("practical", "pending", "2024-03-02"),
    ]
    result = compute_progress([], exams)
    assert result.percent == 20
    assert result.theory_status == "passed"
    assert result.practical_status == "not taken"


def test_latest_decided_result_wins():
    exams = [
        exam("theory", "failed", "2024-02-01"),
        exam("theory", "passed", "2024-01-01"),
    ]
    result = compute_progress([], exams)
    assert result.percent == 0
    assert result.theory_status == "failed"


def test_exams_are_read_in_given_order():
    # No sorting happens inside the calculator: the first decided exam counts.
    exams = [
        exam("practical", "passed", "2024-01-01"),
        exam("practical", "failed", "2024-06-01"),
    ]
    result = compute_progress([], exams)
    assert result.practical_status == "passed"
    assert result.percent == 20
