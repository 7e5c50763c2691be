"""Constants for Team model field names"""


class TeamFields:
    """Field name constants for Team documents"""
    NAME = "name"
    DESCRIPTION = "description"
    LEADER = "leader"
    MEMBERS = "members"
    IS_ACTIVE = "isActive"
    CREATED_AT = "createdAt"

    # MongoDB specific
    MONGO_ID = "_id"
