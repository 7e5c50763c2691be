"""Constants for Staff model field names"""


class StaffFields:
    """Field name constants for Staff documents"""
    AUTH_UID = "authUid"
    FULL_NAME = "fullName"
    JOB_CODE = "jobCode"
    ROLE = "role"
    TEAM_ID = "teamId"
    PHOTO_URL = "photoUrl"
    EMAIL = "email"
    IS_ACTIVE = "isActive"
    HAS_AUTH_ACCOUNT = "hasAuthAccount"
    ASSIGNED_TOOL_IDS = "assignedToolIds"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    LAST_SIGN_IN = "lastSignIn"

    # Seed records carry their document id inline
    UID = "uid"

    # MongoDB specific
    MONGO_ID = "_id"  # Document id (staff uid)
