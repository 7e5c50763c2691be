"""
Tool loading smoke test
-----------------------

Adds one sample tool through ToolService and lists every tool back, to
check that writes and reads reach the configured database.

How to use:
   python -m toolroom.scripts.check_tool_loading
"""
from typing import Optional

from toolroom.application.services.tool_service import ToolService
from toolroom.domain.exceptions import ConflictError
from toolroom.infrastructure.db.mongo_connection import MongoClientManager
from toolroom.infrastructure.db.mongo_tool_repository import MongoToolRepository


def main(client: Optional[MongoClientManager] = None) -> bool:
    try:
        tool_service = ToolService(MongoToolRepository(client))

        print("🔧 Creating test tool...")
        try:
            tool = tool_service.create_tool(
                unique_id="T1001",
                name="Power Drill",
                brand="DeWalt",
                model="DCD771C2",
                num="001",
                meta={
                    "category": "power_tool",
                    "condition": "excellent",
                    "notes": "New cordless drill with battery",
                },
            )
            print(f"✅ Test tool created with ID: {tool.id}")
        except ConflictError as e:
            print(f"⚠️  {e}")

        # Query tools to verify
        print("📋 Querying all tools...")
        all_tools = tool_service.search_tools("")
        print(f"📊 Found {len(all_tools)} tools in database:")
        for tool in all_tools:
            print(f"  - {tool.display_name} ({tool.unique_id}) - {tool.status}")

        print("🎉 Tool loading test completed successfully!")
        return True
    except Exception as e:
        print(f"❌ Error during test: {e}")
        return False


if __name__ == "__main__":
    main()
