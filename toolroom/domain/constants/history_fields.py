"""Constants for ToolHistory and ToolBatch field names"""


class HistoryFields:
    """Field name constants for tool history documents"""
    TOOL_REF = "toolRef"
    ACTION = "action"
    BY = "by"
    SUPERVISOR = "supervisor"
    ASSIGNED_TO = "assignedTo"
    TIMESTAMP = "timestamp"
    NOTES = "notes"
    LOCATION = "location"
    BATCH_ID = "batchId"
    METADATA = "metadata"

    # MongoDB specific
    MONGO_ID = "_id"


class BatchFields:
    """Field name constants for batch documents"""
    CREATED_BY = "createdBy"
    CREATED_AT = "createdAt"
    TOOL_IDS = "toolIds"
    ASSIGNED_TO = "assignedTo"
    NOTES = "notes"
    ACTION = "action"
    METADATA = "metadata"

    # MongoDB specific
    MONGO_ID = "_id"
