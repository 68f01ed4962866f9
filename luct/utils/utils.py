SERVICE_NAME = "LUCT Reporting System API"

# Report fields that are not tracked in the database yet. Every reshaped
# report carries these values until the data model stores them.
UNTRACKED_REPORT_FIELDS = {
    "faculty_name": "Faculty of ICT",
    "total_registered_students": 50,
    "venue": "Room 101",
    "scheduled_time": "10:00",
    "status": "submitted",
}

UNKNOWN_CLASS = "Unknown Class"
UNKNOWN_COURSE = "Unknown Course"
UNKNOWN_COURSE_CODE = "N/A"
UNKNOWN_LECTURER = "Unknown Lecturer"


def format_week(week) -> str:
    return f"Week {week}"
