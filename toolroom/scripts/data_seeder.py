"""
Data seeding script
-------------------

Purpose:
- Populate MongoDB with sample staff, tools, history, a batch and teams for
  development and manual testing.

What it creates:
- Staff: John Administrator (admin), Sarah Supervisor (supervisor),
  Mike Worker and Lisa Technician (workers), Bob Mechanic (inactive worker)
- Tools: T1001 DeWalt drill, T1002 Makita saw (checked out to Mike),
  T1003 Craftsman socket set, T1004 Lincoln welder (checked out to Lisa),
  T1005 Fluke multimeter
- History: three entries against the first three tools
- Batch: batch-001
- Teams: team-alpha (Mike, Bob) and team-beta (Lisa)

How to use:
1) Ensure env vars: MONGO_URI (required), DB_NAME (optional)
2) Run everything:
   python -m toolroom.scripts.data_seeder
3) Or pick operations:
   python -m toolroom.scripts.data_seeder --staff --tools --teams
4) Wipe every collection first (WARNING: deletes everything):
   python -m toolroom.scripts.data_seeder --clear --all
"""
import argparse
import sys
from datetime import timedelta
from typing import Any, Dict, List, Optional

from toolroom.core.config import get_settings
from toolroom.domain.constants import BatchFields, HistoryFields, StaffFields, TeamFields, ToolFields
from toolroom.domain.models.tool import ToolStatus
from toolroom.domain.references import staff_ref, tool_ref
from toolroom.infrastructure.db.mongo_connection import (
    MongoClientManager,
    get_mongo_client,
    to_mongo_datetime,
)
from toolroom.infrastructure.db.mongo_write_batch import MongoWriteBatch
from toolroom.utils.datetime_utils import now


class DataSeeder:
    """Writes the sample data set. Every method prints what it did."""

    def __init__(self, client: Optional[MongoClientManager] = None):
        self._client = client or get_mongo_client()
        self._settings = get_settings()

    def _batch(self) -> MongoWriteBatch:
        return MongoWriteBatch(self._client, use_transactions=self._settings.mongo_use_transactions)

    def seed_all_data(self) -> None:
        """Seed staff, tools and sample history."""
        print("🌱 Starting data seeding...")
        try:
            self.seed_staff()
            self.seed_tools()
            self.seed_sample_history()
            print("✅ Data seeding completed successfully!")
        except Exception as e:
            print(f"❌ Error seeding data: {e}")
            raise

    def seed_staff(self) -> int:
        """Create sample staff members (document id = uid)."""
        print("👥 Seeding staff members...")
        timestamp = to_mongo_datetime(now())

        def member(uid, full_name, job_code, role, email, is_active, team_id, tools):
            return uid, {
                StaffFields.FULL_NAME: full_name,
                StaffFields.JOB_CODE: job_code,
                StaffFields.ROLE: role,
                StaffFields.EMAIL: email,
                StaffFields.IS_ACTIVE: is_active,
                StaffFields.TEAM_ID: team_id,
                StaffFields.PHOTO_URL: None,
                StaffFields.ASSIGNED_TOOL_IDS: tools,
                StaffFields.CREATED_AT: timestamp,
                StaffFields.UPDATED_AT: timestamp,
            }

        staff_members = [
            member("admin-001", "John Administrator", "ADM001", "admin",
                   "admin@versfeld.com", True, None, []),
            member("supervisor-001", "Sarah Supervisor", "SUP001", "supervisor",
                   "supervisor@versfeld.com", True, "team-alpha", []),
            member("worker-001", "Mike Worker", "WRK001", "worker",
                   "worker1@versfeld.com", True, "team-alpha", ["T1002"]),
            member("worker-002", "Lisa Technician", "WRK002", "worker",
                   "worker2@versfeld.com", True, "team-beta", ["T1004"]),
            # Inactive user for testing
            member("worker-003", "Bob Mechanic", "WRK003", "worker",
                   "worker3@versfeld.com", False, "team-alpha", []),
        ]

        batch = self._batch()
        for uid, staff in staff_members:
            batch.set(self._settings.staff_collection, uid, staff)
        batch.commit()

        print(f"✅ Created {len(staff_members)} staff members")
        return len(staff_members)

    def seed_tools(self) -> List[str]:
        """Create sample tools under generated ids."""
        print("🔧 Seeding tools...")
        timestamp = to_mongo_datetime(now())

        def tool(unique_id, name, brand, model, num, holder, meta):
            return {
                ToolFields.UNIQUE_ID: unique_id,
                ToolFields.NAME: name,
                ToolFields.BRAND: brand,
                ToolFields.MODEL: model,
                ToolFields.NUM: num,
                ToolFields.IMAGES: [],
                ToolFields.QR_PAYLOAD: f"TOOL#{unique_id}",
                ToolFields.STATUS: ToolStatus.CHECKED_OUT if holder else ToolStatus.AVAILABLE,
                ToolFields.CURRENT_HOLDER: staff_ref(holder) if holder else None,
                ToolFields.META: meta,
                ToolFields.CREATED_AT: timestamp,
                ToolFields.UPDATED_AT: timestamp,
            }

        tools = [
            tool("T1001", "Cordless Drill", "DeWalt", "DCD771C2", "001", None, {
                "category": "Power Tools",
                "location": "Workshop A",
                "purchaseDate": "2024-01-15",
                "warranty": "3 years",
            }),
            tool("T1002", "Circular Saw", "Makita", "HS7601", "002", "worker-001", {
                "category": "Power Tools",
                "location": "Workshop A",
                "purchaseDate": "2024-02-10",
                "warranty": "2 years",
            }),
            tool("T1003", "Socket Set", "Craftsman", "CMMT12024", "003", None, {
                "category": "Hand Tools",
                "location": "Workshop B",
                "purchaseDate": "2023-11-20",
                "warranty": "1 year",
            }),
            tool("T1004", "Welding Machine", "Lincoln Electric", "K2185-1", "004", "worker-002", {
                "category": "Welding Equipment",
                "location": "Workshop C",
                "purchaseDate": "2024-03-05",
                "warranty": "5 years",
            }),
            tool("T1005", "Digital Multimeter", "Fluke", "87V", "005", None, {
                "category": "Measuring Tools",
                "location": "Electronics Lab",
                "purchaseDate": "2024-01-30",
                "warranty": "3 years",
            }),
        ]

        batch = self._batch()
        tool_ids = [batch.insert(self._settings.tools_collection, doc) for doc in tools]
        batch.commit()

        print(f"✅ Created {len(tools)} tools")
        return tool_ids

    def seed_sample_history(self) -> int:
        """Create up to three history entries, one for each of the first three tools."""
        print("📝 Seeding tool history...")

        tools = list(
            self._client.get_collection(self._settings.tools_collection)
            .find({}, {ToolFields.MONGO_ID: 1})
            .limit(3)
        )
        if not tools:
            print("⚠️  No tools found, skipping history seeding")
            return 0

        current = now()
        history_entries: List[Dict[str, Any]] = [
            {
                HistoryFields.ACTION: "checkout",
                HistoryFields.BY: staff_ref("worker-001"),
                HistoryFields.SUPERVISOR: staff_ref("supervisor-001"),
                HistoryFields.ASSIGNED_TO: staff_ref("worker-001"),
                HistoryFields.TIMESTAMP: to_mongo_datetime(current - timedelta(hours=2)),
                HistoryFields.NOTES: "Project maintenance work",
                HistoryFields.LOCATION: "Workshop A",
                HistoryFields.BATCH_ID: None,
                HistoryFields.METADATA: {
                    "deviceInfo": "Toolroom API v1.0.0",
                    "ipAddress": "192.168.1.100",
                },
            },
            {
                HistoryFields.ACTION: "checkin",
                HistoryFields.BY: staff_ref("worker-002"),
                HistoryFields.SUPERVISOR: None,
                HistoryFields.ASSIGNED_TO: None,
                HistoryFields.TIMESTAMP: to_mongo_datetime(current - timedelta(hours=4)),
                HistoryFields.NOTES: "Task completed successfully",
                HistoryFields.LOCATION: "Workshop B",
                HistoryFields.BATCH_ID: None,
                HistoryFields.METADATA: {
                    "deviceInfo": "Toolroom API v1.0.0",
                    "ipAddress": "192.168.1.101",
                },
            },
            {
                HistoryFields.ACTION: "checkout",
                HistoryFields.BY: staff_ref("supervisor-001"),
                HistoryFields.SUPERVISOR: staff_ref("supervisor-001"),
                HistoryFields.ASSIGNED_TO: staff_ref("worker-002"),
                HistoryFields.TIMESTAMP: to_mongo_datetime(current - timedelta(days=1)),
                HistoryFields.NOTES: "Batch checkout for team project",
                HistoryFields.LOCATION: "Workshop C",
                HistoryFields.BATCH_ID: "batch-001",
                HistoryFields.METADATA: {"deviceInfo": "Toolroom API v1.0.0", "batchSize": 3},
            },
        ]
        # Fewer tools than samples seeds only the first entries
        history_entries = history_entries[: len(tools)]
        for entry, tool in zip(history_entries, tools):
            entry[HistoryFields.TOOL_REF] = tool_ref(tool[ToolFields.MONGO_ID])

        batch = self._batch()
        for entry in history_entries:
            batch.insert(self._settings.history_collection, entry)
        batch.commit()

        print(f"✅ Created {len(history_entries)} history entries")
        return len(history_entries)

    def seed_sample_batch(self) -> str:
        """Create the batch-001 record referenced by the sample history."""
        print("📦 Seeding sample batch...")
        batch_id = "batch-001"
        record = {
            BatchFields.CREATED_BY: "supervisor-001",
            BatchFields.CREATED_AT: to_mongo_datetime(now()),
            BatchFields.TOOL_IDS: ["T1001", "T1003", "T1005"],
            BatchFields.ASSIGNED_TO: staff_ref("worker-001"),
            BatchFields.NOTES: "Weekly maintenance batch",
            BatchFields.ACTION: "checkout",
            BatchFields.METADATA: {
                "project": "Maintenance Week 42",
                "estimatedDuration": "4 hours",
            },
        }

        batch = self._batch()
        batch.set(self._settings.batches_collection, batch_id, record)
        batch.commit()

        print("✅ Created sample batch operation")
        return batch_id

    def seed_teams(self) -> int:
        """Create team-alpha and team-beta."""
        print("👥 Seeding teams...")
        timestamp = to_mongo_datetime(now())
        teams = {
            "team-alpha": {
                TeamFields.NAME: "Alpha Team",
                TeamFields.DESCRIPTION: "Main maintenance crew",
                TeamFields.LEADER: "supervisor-001",
                TeamFields.MEMBERS: ["worker-001", "worker-003"],
                TeamFields.CREATED_AT: timestamp,
                TeamFields.IS_ACTIVE: True,
            },
            "team-beta": {
                TeamFields.NAME: "Beta Team",
                TeamFields.DESCRIPTION: "Specialized repair team",
                TeamFields.LEADER: "supervisor-001",
                TeamFields.MEMBERS: ["worker-002"],
                TeamFields.CREATED_AT: timestamp,
                TeamFields.IS_ACTIVE: True,
            },
        }

        batch = self._batch()
        for team_id, team in teams.items():
            batch.set(self._settings.teams_collection, team_id, team)
        batch.commit()

        print(f"✅ Created {len(teams)} teams")
        return len(teams)

    def clear_all_data(self) -> Dict[str, int]:
        """Delete every document in every application collection."""
        print("🗑️  Clearing all data...")
        cleared = {}
        for collection_name in self._settings.collection_names:
            deleted = self._client.get_collection(collection_name).delete_many({}).deleted_count
            cleared[collection_name] = deleted
            if deleted:
                print(f"✅ Cleared {deleted} documents from {collection_name}")

        print("✅ All data cleared")
        return cleared


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the toolroom database with sample data")
    parser.add_argument("--all", action="store_true", help="staff, tools and sample history (default)")
    parser.add_argument("--staff", action="store_true", help="seed staff members")
    parser.add_argument("--tools", action="store_true", help="seed tools")
    parser.add_argument("--history", action="store_true", help="seed sample history")
    parser.add_argument("--batch", action="store_true", help="seed the sample batch record")
    parser.add_argument("--teams", action="store_true", help="seed teams")
    parser.add_argument("--clear", action="store_true", help="delete all data first")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        seeder = DataSeeder()

        if args.clear:
            seeder.clear_all_data()

        selected = args.staff or args.tools or args.history or args.batch or args.teams
        if args.all or not (selected or args.clear):
            seeder.seed_all_data()
        if args.staff:
            seeder.seed_staff()
        if args.tools:
            seeder.seed_tools()
        if args.history:
            seeder.seed_sample_history()
        if args.batch:
            seeder.seed_sample_batch()
        if args.teams:
            seeder.seed_teams()
    except Exception as e:
        print(f"❌ Seeding failed: {e}")
        return 1

    print("🎉 Seeding script completed!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
