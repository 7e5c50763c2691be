"""Tests for MongoWriteBatch."""
import pytest

from toolroom.infrastructure.db.mongo_write_batch import MongoWriteBatch


def test_commit_applies_every_collection(mongo):
    batch = MongoWriteBatch(mongo)
    batch.set("teams", "team-alpha", {"name": "Alpha Team", "members": ["a"]})
    new_id = batch.insert("tool_history", {"action": "checkout"})
    batch.set("staff", "a", {"fullName": "A", "assignedToolIds": []})

    assert batch.size == 3
    assert mongo.get_collection("teams").count_documents({}) == 0

    assert batch.commit() == 3
    assert mongo.get_collection("teams").find_one({"_id": "team-alpha"})["name"] == "Alpha Team"
    assert mongo.get_collection("tool_history").find_one({"_id": new_id})["action"] == "checkout"
    assert mongo.get_collection("staff").count_documents({}) == 1


def test_set_replaces_whole_document(mongo):
    mongo.get_collection("teams").insert_one({"_id": "t", "name": "Old", "legacy": True})

    batch = MongoWriteBatch(mongo)
    batch.set("teams", "t", {"_id": "ignored", "name": "New"})
    batch.commit()

    assert mongo.get_collection("teams").find_one({"_id": "t"}) == {"_id": "t", "name": "New"}


def test_update_array_union_and_remove(mongo):
    staff = mongo.get_collection("staff")
    staff.insert_one({"_id": "w", "assignedToolIds": ["T1"]})

    batch = MongoWriteBatch(mongo)
    batch.update("staff", "w", {"fullName": "W"}, array_union={"assignedToolIds": ["T1", "T2"]})
    batch.commit()
    assert staff.find_one({"_id": "w"})["assignedToolIds"] == ["T1", "T2"]

    batch = MongoWriteBatch(mongo)
    batch.update("staff", "w", array_remove={"assignedToolIds": ["T1"]})
    batch.commit()
    doc = staff.find_one({"_id": "w"})
    assert doc["assignedToolIds"] == ["T2"]
    assert doc["fullName"] == "W"


def test_update_requires_a_change(mongo):
    with pytest.raises(ValueError):
        MongoWriteBatch(mongo).update("staff", "w")


def test_delete(mongo):
    mongo.get_collection("teams").insert_one({"_id": "t"})
    batch = MongoWriteBatch(mongo)
    batch.delete("teams", "t")
    batch.commit()
    assert mongo.get_collection("teams").count_documents({}) == 0


def test_commit_only_once(mongo):
    batch = MongoWriteBatch(mongo)
    assert batch.commit() == 0
    with pytest.raises(RuntimeError):
        batch.commit()
    with pytest.raises(RuntimeError):
        batch.set("teams", "t", {})
