from drivedesk.app.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all in tests
from drivedesk.app.models.office import Office  # noqa: F401
from drivedesk.app.models.user import User  # noqa: F401
from drivedesk.app.models.student import Student  # noqa: F401
from drivedesk.app.models.lesson import Lesson  # noqa: F401
from drivedesk.app.models.exam import Exam  # noqa: F401
from drivedesk.app.models.payment import Payment  # noqa: F401
from drivedesk.app.models.license_price import LicensePrice  # noqa: F401
from drivedesk.app.models.notification import Notification  # noqa: F401
from drivedesk.app.models.vehicle import Vehicle  # noqa: F401
from drivedesk.app.models.maintenance import Maintenance  # noqa: F401
from drivedesk.app.models.inspection import Inspection  # noqa: F401
from drivedesk.app.models.trainer import Trainer  # noqa: F401
from drivedesk.app.models.staff_member import StaffMember  # noqa: F401
from drivedesk.app.models.charge import Charge  # noqa: F401
from drivedesk.app.models.attendance import AttendanceRecord  # noqa: F401
from drivedesk.app.models.office_profile import OfficeProfile  # noqa: F401
from drivedesk.app.models.subscription_plan import SubscriptionPlan  # noqa: F401
