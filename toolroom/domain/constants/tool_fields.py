"""Constants for Tool model field names"""


class ToolFields:
    """Field name constants for Tool documents"""
    UNIQUE_ID = "uniqueId"
    NAME = "name"
    BRAND = "brand"
    MODEL = "model"
    NUM = "num"
    IMAGES = "images"
    QR_PAYLOAD = "qrPayload"
    STATUS = "status"
    CURRENT_HOLDER = "currentHolder"
    LAST_ASSIGNED_TO_NAME = "lastAssignedToName"
    LAST_ASSIGNED_TO_JOB_CODE = "lastAssignedToJobCode"
    LAST_ASSIGNED_BY_NAME = "lastAssignedByName"
    LAST_ASSIGNED_AT = "lastAssignedAt"
    LAST_CHECKIN_AT = "lastCheckinAt"
    LAST_CHECKIN_BY_NAME = "lastCheckinByName"
    META = "meta"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"
