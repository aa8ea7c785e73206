from conftest import JOB_PAYLOAD, auth, sign_in


PROFILE = {
    "full_name": "Ada Nakato",
    "email": "ada@example.com",
    "phone": "+256 700 000000",
    "location": "Kampala",
    "bio": "Administrator with a decade in logistics.",
    "skills": "React, Node.js,  TypeScript",
}


class TestProfilePage:
    def test_anonymous_profile_is_empty(self, client):
        r = client.get("/api/v1/profile")
        assert r.status_code == 200
        data = r.json()
        assert data["state"] == "ready"
        assert data["authenticated"] is False
        assert data["form"]["full_name"] == ""
        assert data["applications"] == []
        assert data["applications_message"] == "No applications yet"

    def test_new_user_gets_empty_defaults(self, client):
        session = sign_in(client)
        data = client.get("/api/v1/profile", headers=auth(session["access_token"])).json()
        assert data["authenticated"] is True
        assert data["form"] == {
            "full_name": "", "email": "", "phone": "", "location": "", "bio": "", "skills": "",
        }

    def test_save_and_reload(self, client):
        session = sign_in(client)
        h = auth(session["access_token"])

        r = client.put("/api/v1/profile", json=PROFILE, headers=h)
        assert r.status_code == 200
        assert r.json()["state"] == "success"

        form = client.get("/api/v1/profile", headers=h).json()["form"]
        assert form["full_name"] == "Ada Nakato"
        assert form["phone"] == "+256 700 000000"
        assert form["skills"] == "React, Node.js, TypeScript"

    def test_skills_split_and_trimmed(self, client, gateway):
        session = sign_in(client)
        client.put("/api/v1/profile", json=PROFILE, headers=auth(session["access_token"]))

        row = gateway.profiles.select_one({"user_id": session["user_id"]})
        assert row["skills"] == ["React", "Node.js", "TypeScript"]

    def test_second_save_replaces_profile(self, client, gateway):
        session = sign_in(client)
        h = auth(session["access_token"])
        client.put("/api/v1/profile", json=PROFILE, headers=h)
        client.put("/api/v1/profile", json={**PROFILE, "full_name": "Ada N.", "phone": ""}, headers=h)

        rows = gateway.profiles.select()
        assert len(rows) == 1
        assert rows[0]["full_name"] == "Ada N."
        assert rows[0]["phone"] is None

    def test_stale_user_id_is_ignored(self, client, gateway):
        session = sign_in(client)
        client.put(
            "/api/v1/profile",
            json={**PROFILE, "user_id": "someone-else"},
            headers=auth(session["access_token"]),
        )
        rows = gateway.profiles.select()
        assert [r["user_id"] for r in rows] == [session["user_id"]]

    def test_save_requires_sign_in(self, client, gateway):
        r = client.put("/api/v1/profile", json=PROFILE)
        assert r.status_code == 401
        assert r.json()["error"] == "Please sign in to edit your profile"
        assert gateway.profiles.select() == []

    def test_required_fields(self, client):
        session = sign_in(client)
        r = client.put("/api/v1/profile", json={"bio": "hi"}, headers=auth(session["access_token"]))
        assert r.status_code == 422
        assert r.json()["field_errors"] == {
            "full_name": "Full name is required",
            "email": "Email is required",
        }


class TestProfileApplications:
    def _apply(self, client, token, title):
        client.post("/api/v1/jobs", json={**JOB_PAYLOAD, "title": title})
        job_id = next(j["id"] for j in client.get("/api/v1/jobs").json()["jobs"] if j["title"] == title)
        client.post(f"/api/v1/jobs/{job_id}/applications", json={
            "resume_url": "https://example.com/cv.pdf",
            "cover_letter": f"Applying for {title}",
        }, headers=auth(token))
        return job_id

    def test_applications_listed_newest_first_with_job(self, client):
        session = sign_in(client)
        self._apply(client, session["access_token"], "Receptionist")
        self._apply(client, session["access_token"], "Data Clerk")

        data = client.get("/api/v1/profile", headers=auth(session["access_token"])).json()
        apps = data["applications"]
        assert [a["job_title"] for a in apps] == ["Data Clerk", "Receptionist"]
        assert apps[0]["job_company"] == "Muto Consults"
        assert apps[0]["job_location"] == "Kampala"
        assert apps[0]["status"] == "pending"
        assert apps[0]["status_label"] == "Pending"
        assert apps[0]["badge"] == "highlight"
        assert data["applications_message"] is None

    def test_only_own_applications(self, client):
        ada = sign_in(client)
        bob = sign_in(client, email="bob@example.com")
        self._apply(client, ada["access_token"], "Receptionist")

        data = client.get("/api/v1/profile", headers=auth(bob["access_token"])).json()
        assert data["applications"] == []

    def test_status_badges(self, client, test_db):
        from app.models.application import Application

        session = sign_in(client)
        for title in ("Receptionist", "Data Clerk", "Driver", "Cashier"):
            self._apply(client, session["access_token"], title)

        db = test_db()
        apps = db.query(Application).all()
        by_title = {a.job.title: a for a in apps}
        by_title["Data Clerk"].status = "accepted"
        by_title["Driver"].status = "rejected"
        by_title["Cashier"].status = "withdrawn"
        db.commit()
        db.close()

        data = client.get("/api/v1/profile", headers=auth(session["access_token"])).json()
        badges = {a["job_title"]: (a["status_label"], a["badge"]) for a in data["applications"]}
        assert badges["Receptionist"] == ("Pending", "highlight")
        assert badges["Data Clerk"] == ("Accepted", "positive")
        assert badges["Driver"] == ("Rejected", "negative")
        assert badges["Cashier"] == ("Withdrawn", "negative")
