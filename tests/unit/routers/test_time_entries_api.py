"""
Unit tests for recording, listing and deleting time entries.
"""

from datetime import date, time

import pytest
from fastapi.testclient import TestClient

from timetrack import models


@pytest.fixture
def project(test_user, make_client, make_project):
    return make_project(test_user, make_client(test_user, "ACME Corp"), "Website")


def _entry_payload(project_id, **overrides):
    payload = {
        "project_id": project_id,
        "date": "2024-05-06",
        "start_time": "09:00",
        "end_time": "10:30",
    }
    payload.update(overrides)
    return payload


class TestValidateEndpoint:

    def test_validate_normalizes_shorthand(self, client: TestClient, auth_headers):
        response = client.post(
            "/time-entries/validate",
            json={"date": "2024-05-06", "start_time": "0900", "end_time": "1030"},
            headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json() == {
            "date": "2024-05-06",
            "start_time": "09:00",
            "end_time": "10:30",
            "duration_minutes": 90,
            "duration_display": "1h 30m",
        }

    def test_validate_rejects_end_before_start(self, client: TestClient, auth_headers):
        response = client.post(
            "/time-entries/validate",
            json={"date": "2024-05-06", "start_time": "10:00", "end_time": "09:00"},
            headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "End time must be after start time"

    @pytest.mark.parametrize("payload", [
        {"date": "2024-05-06", "start_time": "09:00", "end_time": "09:00"},
        {"date": "2024-05-06", "start_time": "900", "end_time": "10:00"},
        {"date": "06.05.2024", "start_time": "09:00", "end_time": "10:00"},
        {"date": "2024-05-06", "end_time": "10:00"},
    ])
    def test_validate_and_create_agree(self, client: TestClient, auth_headers, project, payload):
        """The check endpoint and the create endpoint reject with the same message"""
        checked = client.post("/time-entries/validate", json=payload, headers=auth_headers)
        created = client.post(
            "/time-entries",
            json={**payload, "project_id": project.id},
            headers=auth_headers
        )

        assert checked.status_code == created.status_code == 400
        assert checked.json()["detail"] == created.json()["detail"]


class TestCreateTimeEntry:

    def test_create_time_entry_success(self, client: TestClient, db_session, test_user, auth_headers, project):
        response = client.post(
            "/time-entries",
            json=_entry_payload(project.id, start_time="0900"),
            headers=auth_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert data["start_time"] == "09:00"
        assert data["end_time"] == "10:30"
        assert data["duration_minutes"] == 90
        assert data["project_name"] == "Website"
        assert data["client_name"] == "ACME Corp"

        entry = db_session.query(models.TimeEntry).one()
        assert entry.user_id == test_user.id
        assert entry.date == date(2024, 5, 6)
        assert entry.start_time == time(9, 0)

    def test_missing_project_is_missing_field(self, client: TestClient, auth_headers):
        payload = _entry_payload(None)
        del payload["project_id"]

        response = client.post("/time-entries", json=payload, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "All fields are required"

    def test_invalid_date_rejected(self, client: TestClient, auth_headers, project):
        response = client.post(
            "/time-entries",
            json=_entry_payload(project.id, date="2024-5-6"),
            headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid date format. Use YYYY-MM-DD format."

    def test_duplicate_entry_gets_friendly_message(self, client: TestClient, auth_headers, project):
        first = client.post("/time-entries", json=_entry_payload(project.id), headers=auth_headers)
        assert first.status_code == 200

        second = client.post("/time-entries", json=_entry_payload(project.id), headers=auth_headers)

        assert second.status_code == 409
        assert second.json()["detail"] == "A time entry with the same project, date, and times already exists"

    def test_other_users_project_not_found(self, client: TestClient, db_session, other_user,
                                           auth_headers, make_client, make_project):
        theirs = make_project(other_user, make_client(other_user))

        response = client.post("/time-entries", json=_entry_payload(theirs.id), headers=auth_headers)

        assert response.status_code == 404
        assert db_session.query(models.TimeEntry).count() == 0

    def test_requires_authentication(self, client: TestClient, project):
        response = client.post("/time-entries", json=_entry_payload(project.id))
        assert response.status_code == 401


class TestListAndDeleteTimeEntries:

    def _add(self, db_session, user, project, day, start, end):
        entry = models.TimeEntry(
            user_id=user.id,
            project_id=project.id,
            date=day,
            start_time=start,
            end_time=end
        )
        db_session.add(entry)
        db_session.commit()
        return entry

    def test_list_month_ordered(self, client: TestClient, db_session, test_user, auth_headers, project):
        self._add(db_session, test_user, project, date(2024, 3, 10), time(13, 0), time(14, 0))
        self._add(db_session, test_user, project, date(2024, 3, 2), time(9, 0), time(10, 0))
        self._add(db_session, test_user, project, date(2024, 3, 10), time(8, 0), time(9, 0))
        self._add(db_session, test_user, project, date(2024, 4, 1), time(8, 0), time(9, 0))

        data = client.get("/time-entries?month=3&year=2024", headers=auth_headers).json()

        assert [(e["date"], e["start_time"]) for e in data] == [
            ("2024-03-02", "09:00"),
            ("2024-03-10", "08:00"),
            ("2024-03-10", "13:00"),
        ]

    def test_list_rejects_bad_month(self, client: TestClient, auth_headers):
        response = client.get("/time-entries?month=13&year=2024", headers=auth_headers)
        assert response.status_code == 422

    def test_delete_own_entry(self, client: TestClient, db_session, test_user, auth_headers, project):
        entry = self._add(db_session, test_user, project, date(2024, 3, 2), time(9, 0), time(10, 0))
        entry_id = entry.id

        response = client.delete(f"/time-entries/{entry_id}", headers=auth_headers)

        assert response.status_code == 204
        assert db_session.query(models.TimeEntry).filter_by(id=entry_id).count() == 0

    def test_delete_other_users_entry_not_found(self, client: TestClient, db_session, other_user,
                                                auth_headers, make_client, make_project):
        theirs = make_project(other_user, make_client(other_user))
        entry = self._add(db_session, other_user, theirs, date(2024, 3, 2), time(9, 0), time(10, 0))
        entry_id = entry.id

        response = client.delete(f"/time-entries/{entry_id}", headers=auth_headers)

        assert response.status_code == 404
        assert db_session.query(models.TimeEntry).filter_by(id=entry_id).count() == 1
