from conftest import JOB_PAYLOAD, auth, sign_in

from app.config import settings
from app.dependencies import get_gateway
from app.main import app
from app.services.gateway import RemoteError


class _UnreachableJobs:
    def select(self, *args, **kwargs):
        raise RemoteError("connection refused")


class _UnreachableGateway:
    jobs = _UnreachableJobs()


class TestJobsListing:
    def test_empty_listing(self, client):
        r = client.get("/api/v1/jobs")
        assert r.status_code == 200
        data = r.json()
        assert data["state"] == "empty"
        assert data["jobs"] == []
        assert data["title"] == "No jobs found"
        assert data["message"] == "Check back later for new opportunities."

    def test_lists_active_jobs_newest_first(self, client):
        client.post("/api/v1/jobs", json={**JOB_PAYLOAD, "title": "First"})
        client.post("/api/v1/jobs", json={**JOB_PAYLOAD, "title": "Second"})

        r = client.get("/api/v1/jobs")
        assert r.status_code == 200
        data = r.json()
        assert data["state"] == "populated"
        assert [j["title"] for j in data["jobs"]] == ["Second", "First"]

    def test_card_links_to_apply_page(self, client):
        client.post("/api/v1/jobs", json=JOB_PAYLOAD)
        card = client.get("/api/v1/jobs").json()["jobs"][0]
        assert card["apply_url"] == f"/jobs/{card['id']}/apply"
        assert card["deadline"] == "2099-12-31"
        assert card["deadline_display"] == "31 Dec 2099"
        assert card["salary_range"] == "UGX 500,000 - 1,000,000"

    def test_inactive_jobs_hidden(self, client, gateway):
        gateway.jobs.insert([
            {**JOB_PAYLOAD, "title": "Closed role", "status": "closed"},
            {**JOB_PAYLOAD, "title": "Filled role", "status": "filled"},
            {**JOB_PAYLOAD, "title": "Open role", "status": "active"},
        ])

        data = client.get("/api/v1/jobs").json()
        assert [j["title"] for j in data["jobs"]] == ["Open role"]

    def test_only_inactive_jobs_is_empty_not_failed(self, client, gateway):
        gateway.jobs.insert({**JOB_PAYLOAD, "status": "closed"})
        r = client.get("/api/v1/jobs")
        assert r.status_code == 200
        assert r.json()["state"] == "empty"

    def test_search_filters_listing(self, client):
        client.post("/api/v1/jobs", json={**JOB_PAYLOAD, "title": "Customer Care Agent"})
        client.post("/api/v1/jobs", json={**JOB_PAYLOAD, "title": "Software Developer", "location": "Entebbe"})

        data = client.get("/api/v1/jobs?q=software").json()
        assert data["query"] == "software"
        assert [j["title"] for j in data["jobs"]] == ["Software Developer"]

        data = client.get("/api/v1/jobs?q=entebbe").json()
        assert len(data["jobs"]) == 1

    def test_search_without_matches_is_empty(self, client):
        client.post("/api/v1/jobs", json=JOB_PAYLOAD)
        data = client.get("/api/v1/jobs?q=astronaut").json()
        assert data["state"] == "empty"

    def test_store_failure_returns_503(self, client):
        app.dependency_overrides[get_gateway] = lambda: _UnreachableGateway()
        r = client.get("/api/v1/jobs")
        assert r.status_code == 503
        data = r.json()
        assert data["state"] == "failed"
        assert data["jobs"] == []
        assert data["message"] == "We couldn't load jobs right now. Please check back later."
        assert "connection refused" not in r.text

    def test_non_bearer_authorization_is_anonymous(self, client):
        client.post("/api/v1/jobs", json=JOB_PAYLOAD)
        r = client.get("/api/v1/jobs", headers={"Authorization": "Basic dXNlcjpwdw=="})
        assert r.status_code == 200
        assert r.json()["state"] == "populated"


class TestPostJob:
    def test_post_job(self, client):
        r = client.post("/api/v1/jobs", json=JOB_PAYLOAD)
        assert r.status_code == 201
        data = r.json()
        assert data["state"] == "success"
        assert data["redirect_to"] == "/jobs"
        assert data["values"] == {}

    def test_status_defaults_to_active(self, client, gateway):
        client.post("/api/v1/jobs", json=JOB_PAYLOAD)
        rows = gateway.jobs.select()
        assert len(rows) == 1
        assert rows[0]["status"] == "active"

    def test_supplied_status_is_overridden(self, client, gateway):
        client.post("/api/v1/jobs", json={**JOB_PAYLOAD, "status": "closed"})
        assert gateway.jobs.select()[0]["status"] == "active"

    def test_salary_range_is_optional(self, client, gateway):
        payload = {k: v for k, v in JOB_PAYLOAD.items() if k != "salary_range"}
        r = client.post("/api/v1/jobs", json=payload)
        assert r.status_code == 201
        assert gateway.jobs.select()[0]["salary_range"] is None

    def test_missing_fields_reported_per_field(self, client, gateway):
        r = client.post("/api/v1/jobs", json={"title": "Receptionist"})
        assert r.status_code == 422
        data = r.json()
        assert data["state"] == "invalid"
        errors = data["field_errors"]
        assert "title" not in errors
        assert errors["company"] == "Company name is required"
        assert errors["location"] == "Location is required"
        assert errors["type"] == "Employment type is required"
        assert errors["description"] == "Job description is required"
        assert errors["requirements"] == "Requirements are required"
        assert errors["deadline"] == "Deadline is required"
        assert data["values"] == {"title": "Receptionist"}
        assert gateway.jobs.select() == []

    def test_placeholder_type_rejected(self, client):
        r = client.post("/api/v1/jobs", json={**JOB_PAYLOAD, "type": ""})
        assert r.status_code == 422
        assert r.json()["field_errors"]["type"] == "Employment type is required"

    def test_unknown_type_rejected(self, client):
        r = client.post("/api/v1/jobs", json={**JOB_PAYLOAD, "type": "Volunteer"})
        assert r.status_code == 422
        assert r.json()["field_errors"]["type"].startswith("Employment type must be one of")

    def test_invalid_deadline_rejected(self, client):
        r = client.post("/api/v1/jobs", json={**JOB_PAYLOAD, "deadline": "next week"})
        assert r.status_code == 422
        assert r.json()["field_errors"]["deadline"] == "Deadline must be a valid date"

    def test_anonymous_posting_can_be_disabled(self, client, monkeypatch):
        monkeypatch.setattr(settings, "allow_anonymous_job_posts", False)
        r = client.post("/api/v1/jobs", json=JOB_PAYLOAD)
        assert r.status_code == 401
        assert r.json()["error"] == "Please sign in to post a job"

        session = sign_in(client)
        r = client.post("/api/v1/jobs", json=JOB_PAYLOAD, headers=auth(session["access_token"]))
        assert r.status_code == 201
