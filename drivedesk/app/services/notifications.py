"""Notification emission for student status transitions."""

from drivedesk.app.schemas.notification import NotificationCreate


def emit_notification(store, student, message: str, notification_type: str):
    notification = NotificationCreate(
        student_id=student.id,
        student_name=student.name,
        office_id=getattr(student, "office_id", None),
        message=message,
        notification_type=notification_type,
    )
    return store.append_notification(notification)
