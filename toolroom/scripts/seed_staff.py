"""
Staff seeding script
--------------------

Adds five sample staff members, skipping any uid that already exists.

How to use:
1) Ensure env vars: MONGO_URI (required), DB_NAME (optional)
2) Run:
   python -m toolroom.scripts.seed_staff
"""
from typing import Any, Dict, List, Optional

from toolroom.core.config import get_settings
from toolroom.domain.constants import StaffFields
from toolroom.infrastructure.db.mongo_connection import (
    MongoClientManager,
    get_mongo_client,
    to_mongo_datetime,
)
from toolroom.utils.datetime_utils import now


def sample_staff() -> List[Dict[str, Any]]:
    timestamp = to_mongo_datetime(now())
    staff = [
        ("staff_001", "John Smith", "ADM001", "admin", "john.smith@versfeld.com", True),
        ("staff_002", "Sarah Johnson", "SUP001", "supervisor", "sarah.johnson@versfeld.com", True),
        ("staff_003", "Mike Wilson", "WRK001", "worker", "mike.wilson@versfeld.com", True),
        ("staff_004", "Emma Davis", "WRK002", "worker", "emma.davis@versfeld.com", True),
        # Inactive for testing
        ("staff_005", "Robert Brown", "SUP002", "supervisor", "robert.brown@versfeld.com", False),
    ]
    return [
        {
            StaffFields.UID: uid,
            StaffFields.FULL_NAME: full_name,
            StaffFields.JOB_CODE: job_code,
            StaffFields.ROLE: role,
            StaffFields.EMAIL: email,
            StaffFields.IS_ACTIVE: is_active,
            StaffFields.CREATED_AT: timestamp,
            StaffFields.UPDATED_AT: timestamp,
        }
        for uid, full_name, job_code, role, email, is_active in staff
    ]


def seed_staff(client: Optional[MongoClientManager] = None) -> Dict[str, int]:
    """
    Insert each sample member whose uid is not taken yet.

    Returns:
        Summary counts: added, skipped, total, admins, supervisors, workers, inactive
    """
    client = client or get_mongo_client()
    collection = client.get_collection(get_settings().staff_collection)
    staff_data = sample_staff()

    added = skipped = 0
    for record in staff_data:
        uid = record[StaffFields.UID]

        if collection.count_documents({StaffFields.MONGO_ID: uid}, limit=1) == 0:
            # uid is the document id, not a field
            document = {k: v for k, v in record.items() if k != StaffFields.UID}
            document[StaffFields.MONGO_ID] = uid
            collection.insert_one(document)
            added += 1
            print(f"✅ Added staff: {record[StaffFields.FULL_NAME]} ({record[StaffFields.ROLE]})")
        else:
            skipped += 1
            print(f"⚠️  Staff already exists: {record[StaffFields.FULL_NAME]}")

    def count_role(role: str) -> int:
        return sum(1 for s in staff_data if s[StaffFields.ROLE] == role)

    return {
        "added": added,
        "skipped": skipped,
        "total": len(staff_data),
        "admins": count_role("admin"),
        "supervisors": count_role("supervisor"),
        "workers": count_role("worker"),
        "inactive": sum(1 for s in staff_data if s[StaffFields.IS_ACTIVE] is False),
    }


def main() -> None:
    print("🌱 Seeding staff data...")
    try:
        summary = seed_staff()
    except Exception as e:
        print(f"❌ Error seeding staff data: {e}")
        return

    print("\n🎉 Staff seeding completed successfully!")
    print(f"📊 Total staff: {summary['total']}")
    print(f"👤 Admins: {summary['admins']}")
    print(f"👥 Supervisors: {summary['supervisors']}")
    print(f"🔧 Workers: {summary['workers']}")
    print(f"❌ Inactive: {summary['inactive']}")


if __name__ == "__main__":
    main()
