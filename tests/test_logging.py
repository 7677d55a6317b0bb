from structlog.testing import capture_logs

from drivedesk.app.core.logging import get_logger


def test_named_logger_records_events_with_context():
    logger = get_logger("drivedesk.tests")
    with capture_logs() as captured:
        logger.info("student_archived", student_id=3, office_id=1)

    assert captured == [
        {"event": "student_archived", "student_id": 3, "office_id": 1, "log_level": "info"}
    ]
