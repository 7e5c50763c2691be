"""End-to-end tests for the v1 REST API."""
import re

ADMIN = {"X-Staff-Id": "admin-001"}
SUPERVISOR = {"X-Staff-Id": "supervisor-001"}
WORKER = {"X-Staff-Id": "worker-001"}
OTHER_WORKER = {"X-Staff-Id": "worker-002"}


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "running"


class TestAuth:

    def test_missing_header(self, client):
        assert client.get("/api/v1/tools").status_code == 401

    def test_unknown_or_inactive_staff(self, client):
        assert client.get("/api/v1/tools", headers={"X-Staff-Id": "ghost"}).status_code == 401
        assert client.get("/api/v1/tools", headers={"X-Staff-Id": "worker-003"}).status_code == 401

    def test_me(self, client):
        resp = client.get("/api/v1/staff/me", headers=SUPERVISOR)
        assert resp.status_code == 200
        data = resp.json()
        assert data["uid"] == "supervisor-001"
        assert data["role"] == "supervisor"
        assert data["initials"] == "SS"


class TestTools:

    def test_list_and_filter(self, client):
        resp = client.get("/api/v1/tools", headers=WORKER)
        assert resp.status_code == 200
        assert len(resp.json()) == 5

        available = client.get("/api/v1/tools", params={"status": "available"}, headers=WORKER).json()
        assert {t["unique_id"] for t in available} == {"T1001", "T1003", "T1005"}

        by_brand = client.get("/api/v1/tools", params={"brand": "fluke"}, headers=WORKER).json()
        assert [t["unique_id"] for t in by_brand] == ["T1005"]

    def test_summary(self, client):
        data = client.get("/api/v1/tools/summary", headers=WORKER).json()
        assert data["counts"] == {"total": 5, "available": 3, "checked_out": 2}
        assert data["loading_state"] == "loaded"
        assert "Makita" in data["brands"]

        models = client.get("/api/v1/tools/brands/DeWalt/models", headers=WORKER).json()
        assert models == ["DCD771C2"]

    def test_get_by_unique_id_and_id(self, client):
        tool = client.get("/api/v1/tools/unique/T1002", headers=WORKER).json()
        assert tool["holder_id"] == "worker-001"
        assert tool["display_name"] == "Makita HS7601 Circular Saw"

        assert client.get(f"/api/v1/tools/{tool['id']}", headers=WORKER).json()["unique_id"] == "T1002"
        assert client.get("/api/v1/tools/unique/T9999", headers=WORKER).status_code == 404
        assert client.get("/api/v1/tools/missing", headers=WORKER).status_code == 404

    def test_create_requires_admin(self, client):
        body = {"name": "Hammer", "brand": "Stanley", "model": "STHT"}
        assert client.post("/api/v1/tools", json=body, headers=SUPERVISOR).status_code == 403

        resp = client.post("/api/v1/tools", json=body, headers=ADMIN)
        assert resp.status_code == 201
        assert re.fullmatch(r"T\d{4}", resp.json()["unique_id"])

        # The catalog sees the new tool straight away
        assert len(client.get("/api/v1/tools", headers=WORKER).json()) == 6

    def test_create_errors(self, client):
        duplicate = {"unique_id": "T1001", "name": "Drill", "brand": "DeWalt", "model": "X"}
        assert client.post("/api/v1/tools", json=duplicate, headers=ADMIN).status_code == 409

        blank = {"unique_id": "T2001", "name": " ", "brand": "DeWalt", "model": "X"}
        assert client.post("/api/v1/tools", json=blank, headers=ADMIN).status_code == 400

    def test_update_and_delete(self, client):
        tool = client.get("/api/v1/tools/unique/T1003", headers=ADMIN).json()

        resp = client.patch(f"/api/v1/tools/{tool['id']}", json={"name": "Socket Set XL"}, headers=ADMIN)
        assert resp.status_code == 200
        assert resp.json()["name"] == "Socket Set XL"

        resp = client.delete(f"/api/v1/tools/{tool['id']}", headers=ADMIN)
        assert resp.status_code == 200
        assert resp.json()["status"] == "deleted"
        assert client.delete(f"/api/v1/tools/{tool['id']}", headers=ADMIN).status_code == 404

    def test_delete_checked_out_tool(self, client):
        tool = client.get("/api/v1/tools/unique/T1002", headers=ADMIN).json()
        assert client.delete(f"/api/v1/tools/{tool['id']}", headers=ADMIN).status_code == 409

    def test_rename_checked_out_tool(self, client):
        tool = client.get("/api/v1/tools/unique/T1002", headers=ADMIN).json()
        resp = client.patch(f"/api/v1/tools/{tool['id']}", json={"unique_id": "T7777"}, headers=ADMIN)
        assert resp.status_code == 409
        assert client.get("/api/v1/tools/unique/T1002", headers=ADMIN).status_code == 200


class TestTransactions:

    def test_worker_checks_out_to_self(self, client):
        resp = client.post("/api/v1/transactions/check-out", json={"unique_id": "T1001"}, headers=WORKER)
        assert resp.status_code == 200
        data = resp.json()
        assert data["tool"]["status"] == "checked_out"
        assert data["tool"]["holder_id"] == "worker-001"
        assert data["entry"]["action"] == "checkout"
        assert data["entry"]["by_id"] == "worker-001"

        listed = client.get("/api/v1/tools", params={"status": "checked_out"}, headers=WORKER).json()
        assert "T1001" in {t["unique_id"] for t in listed}

    def test_worker_cannot_check_out_to_others(self, client):
        body = {"unique_id": "T1001", "staff_id": "worker-002"}
        assert client.post("/api/v1/transactions/check-out", json=body, headers=WORKER).status_code == 403

    def test_supervisor_checks_out_to_worker(self, client):
        body = {"unique_id": "T1001", "staff_id": "worker-002", "supervisor_id": "supervisor-001"}
        resp = client.post("/api/v1/transactions/check-out", json=body, headers=SUPERVISOR)
        assert resp.status_code == 200
        assert resp.json()["entry"]["assigned_to_ref"] == "staff/worker-002"

        tools = client.get("/api/v1/staff/worker-002/tools", headers=OTHER_WORKER).json()
        assert {t["unique_id"] for t in tools} == {"T1001", "T1004"}

    def test_check_out_errors(self, client):
        taken = {"unique_id": "T1002"}
        assert client.post("/api/v1/transactions/check-out", json=taken, headers=OTHER_WORKER).status_code == 409

        missing = {"unique_id": "T9999"}
        assert client.post("/api/v1/transactions/check-out", json=missing, headers=WORKER).status_code == 404

        inactive = {"unique_id": "T1001", "staff_id": "worker-003"}
        assert client.post("/api/v1/transactions/check-out", json=inactive, headers=SUPERVISOR).status_code == 409

    def test_check_in(self, client):
        resp = client.post("/api/v1/transactions/check-in", json={"unique_id": "T1002"}, headers=WORKER)
        assert resp.status_code == 200
        assert resp.json()["tool"]["status"] == "available"

        again = client.post("/api/v1/transactions/check-in", json={"unique_id": "T1002"}, headers=WORKER)
        assert again.status_code == 409

    def test_batch_check_out(self, client):
        body = {"unique_ids": ["T1001", "T1002", "T1005"], "staff_id": "worker-002"}
        resp = client.post("/api/v1/transactions/batch/check-out", json=body, headers=SUPERVISOR)
        assert resp.status_code == 200
        data = resp.json()
        assert data["succeeded"] == ["T1001", "T1005"]
        assert data["failed"] == {"T1002": "Tool is already checked out"}
        assert data["batch"]["tool_count"] == 2

        detail = client.get(f"/api/v1/history/batches/{data['batch']['id']}", headers=SUPERVISOR).json()
        assert len(detail["entries"]) == 2

    def test_batch_requires_tools(self, client):
        resp = client.post("/api/v1/transactions/batch/check-in", json={"unique_ids": []}, headers=WORKER)
        assert resp.status_code == 422

    def test_status(self, client):
        data = client.get("/api/v1/transactions/status/T1004", headers=WORKER).json()
        assert data["is_checked_out"] is True
        assert data["assigned_staff"]["uid"] == "worker-002"
        assert client.get("/api/v1/transactions/status/T9999", headers=WORKER).status_code == 404


class TestHistory:

    def _checkout(self, client):
        resp = client.post("/api/v1/transactions/check-out", json={"unique_id": "T1001"}, headers=WORKER)
        return resp.json()["entry"]

    def test_audit_log_needs_supervisor(self, client):
        self._checkout(client)
        assert client.get("/api/v1/history", headers=WORKER).status_code == 403

        resp = client.get("/api/v1/history", headers=SUPERVISOR)
        assert resp.status_code == 200
        assert len(resp.json()) == 1

    def test_staff_history_self_or_auditor(self, client):
        self._checkout(client)
        assert len(client.get("/api/v1/history/staff/worker-001", headers=WORKER).json()) == 1
        assert client.get("/api/v1/history/staff/worker-001", headers=OTHER_WORKER).status_code == 403
        assert client.get("/api/v1/history/staff/worker-001", headers=SUPERVISOR).status_code == 200

    def test_tool_history_open_to_all(self, client):
        entry = self._checkout(client)
        resp = client.get(f"/api/v1/history/tools/{entry['tool_id']}", headers=OTHER_WORKER)
        assert [e["id"] for e in resp.json()] == [entry["id"]]

    def test_statistics(self, client):
        self._checkout(client)
        data = client.get("/api/v1/history/statistics", headers=SUPERVISOR).json()
        assert data["statistics"] == {"checkout": 1, "checkin": 0}
        assert data["daily_count"] == 1

        ranking = client.get("/api/v1/history/most-active", headers=SUPERVISOR).json()
        assert ranking == [{"staff_id": "worker-001", "activity_count": 1}]

    def test_notes_and_delete_are_admin_only(self, client):
        entry = self._checkout(client)
        url = f"/api/v1/history/{entry['id']}"

        assert client.put(f"{url}/notes", json={"notes": "x"}, headers=SUPERVISOR).status_code == 403
        resp = client.put(f"{url}/notes", json={"notes": "Checked by admin"}, headers=ADMIN)
        assert resp.status_code == 200
        assert resp.json()["notes"] == "Checked by admin"

        assert client.delete(url, headers=ADMIN).status_code == 204
        assert client.get(url, headers=SUPERVISOR).status_code == 404


class TestStaffAndTeams:

    def test_list_staff(self, client):
        assert len(client.get("/api/v1/staff", headers=WORKER).json()) == 4
        inactive = client.get("/api/v1/staff", params={"include_inactive": True}, headers=WORKER).json()
        assert len(inactive) == 5
        found = client.get("/api/v1/staff", params={"search": "lisa"}, headers=WORKER).json()
        assert [s["uid"] for s in found] == ["worker-002"]
        counts = client.get("/api/v1/staff/counts", headers=WORKER).json()["counts"]
        assert counts["total"] == 5

    def test_create_staff(self, client):
        body = {"full_name": "Nina Welder", "email": "nina@versfeld.com", "job_code": "WRK010"}
        assert client.post("/api/v1/staff", json=body, headers=SUPERVISOR).status_code == 403

        resp = client.post("/api/v1/staff", json=body, headers=ADMIN)
        assert resp.status_code == 201
        assert resp.json()["role"] == "worker"
        assert client.post("/api/v1/staff", json=body, headers=ADMIN).status_code == 409

    def test_role_and_activation(self, client):
        resp = client.put("/api/v1/staff/worker-002/role", json={"role": "supervisor"}, headers=ADMIN)
        assert resp.json()["role"] == "supervisor"

        assert client.post("/api/v1/staff/admin-001/deactivate", headers=ADMIN).status_code == 400
        assert client.post("/api/v1/staff/worker-001/deactivate", headers=ADMIN).json()["is_active"] is False
        # A deactivated member can no longer call the API
        assert client.get("/api/v1/staff/me", headers=WORKER).status_code == 401
        assert client.post("/api/v1/staff/worker-001/activate", headers=ADMIN).json()["is_active"] is True
        assert client.post("/api/v1/staff/ghost/activate", headers=ADMIN).status_code == 404

    def test_team_assignment_keeps_team_in_sync(self, client):
        resp = client.put("/api/v1/staff/worker-001/team", json={"team_id": "team-beta"}, headers=ADMIN)
        assert resp.json()["team_id"] == "team-beta"

        beta = client.get("/api/v1/teams/team-beta", headers=WORKER).json()
        alpha = client.get("/api/v1/teams/team-alpha", headers=WORKER).json()
        assert "worker-001" in beta["members"]
        assert "worker-001" not in alpha["members"]

        resp = client.delete("/api/v1/staff/worker-001/team", headers=ADMIN)
        assert resp.json()["team_id"] is None
        assert "worker-001" not in client.get("/api/v1/teams/team-beta", headers=WORKER).json()["members"]

    def test_teams(self, client):
        assert [t["id"] for t in client.get("/api/v1/teams", headers=WORKER).json()] == ["team-alpha", "team-beta"]

        body = {"id": "team-gamma", "name": "Gamma Team", "leader": "supervisor-001"}
        assert client.post("/api/v1/teams", json=body, headers=ADMIN).status_code == 201
        assert client.post("/api/v1/teams", json=body, headers=ADMIN).status_code == 409

        resp = client.post("/api/v1/teams/team-gamma/members", json={"staff_id": "worker-002"}, headers=ADMIN)
        assert resp.json()["member_count"] == 1
        members = client.get("/api/v1/teams/team-gamma/members", headers=WORKER).json()
        assert [m["uid"] for m in members] == ["worker-002"]

        resp = client.delete("/api/v1/teams/team-gamma/members/worker-002", headers=ADMIN)
        assert resp.json()["members"] == []
        assert client.get("/api/v1/teams/team-zeta", headers=WORKER).status_code == 404
