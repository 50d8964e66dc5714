from datetime import date, datetime, timedelta

from medintelli.services.appointment_service import get_monday

from .conftest import create_user

def book(client, headers, patient_id, start, **extra):
    return client.post(
        "/api/v1/appointments",
        json={"patient_id": patient_id, "start_time": start, **extra},
        headers=headers
    )

class TestGetMonday:

    def test_weekdays_map_to_their_monday(self):
        # 2024-06-10 is a Monday
        for offset in range(7):
            assert get_monday(date(2024, 6, 10) + timedelta(days=offset)) == date(2024, 6, 10)

    def test_sunday_belongs_to_previous_week(self):
        assert get_monday(date(2024, 6, 9)) == date(2024, 6, 3)

    def test_crosses_month_boundary(self):
        assert get_monday(date(2024, 3, 1)) == date(2024, 2, 26)

class TestAppointments:

    def test_create_defaults_to_agendado(self, client, admin_headers, patient):
        response = book(client, admin_headers, patient["id"], "2030-03-04T10:00:00", reason="Retorno")
        assert response.status_code == 201

        data = response.json()
        assert data["status"] == "agendado"
        assert data["patient_name"] == "Maria Souza"
        assert data["reason"] == "Retorno"

    def test_timezone_is_normalized_to_utc(self, client, admin_headers, patient):
        response = book(client, admin_headers, patient["id"], "2030-03-04T10:00:00-03:00")
        assert response.json()["start_time"] == "2030-03-04T13:00:00"

    def test_unknown_patient(self, client, admin_headers):
        response = book(client, admin_headers, "nao-existe", "2030-03-04T10:00:00")
        assert response.status_code == 404

    def test_end_before_start_rejected(self, client, admin_headers, patient):
        response = book(
            client, admin_headers, patient["id"], "2030-03-04T10:00:00",
            end_time="2030-03-04T09:00:00"
        )
        assert response.status_code == 400

    def test_list_is_ordered_and_filtered(self, client, admin_headers, patient):
        book(client, admin_headers, patient["id"], "2030-03-05T09:00:00")
        book(client, admin_headers, patient["id"], "2030-03-04T15:00:00")
        book(client, admin_headers, patient["id"], "2030-04-01T08:00:00")

        response = client.get("/api/v1/appointments", headers=admin_headers)
        starts = [a["start_time"] for a in response.json()]
        assert starts == sorted(starts)

        response = client.get(
            "/api/v1/appointments",
            params={"start": "2030-03-01T00:00:00", "end": "2030-03-31T23:59:59"},
            headers=admin_headers
        )
        assert len(response.json()) == 2

    def test_blocked_holiday_needs_force(self, client, admin_headers, patient):
        client.post(
            "/api/v1/holidays",
            json={"date": "2030-04-21", "description": "Tiradentes"},
            headers=admin_headers
        )

        response = book(client, admin_headers, patient["id"], "2030-04-21T10:00:00")
        assert response.status_code == 409

        response = book(client, admin_headers, patient["id"], "2030-04-21T10:00:00", force=True)
        assert response.status_code == 201

    def test_unblocked_holiday_allows_booking(self, client, admin_headers, patient):
        client.post(
            "/api/v1/holidays",
            json={"date": "2030-04-22", "description": "Ponto facultativo", "is_blocked": False},
            headers=admin_headers
        )
        response = book(client, admin_headers, patient["id"], "2030-04-22T10:00:00")
        assert response.status_code == 201

    def test_update_status(self, client, admin_headers, patient):
        appointment = book(client, admin_headers, patient["id"], "2030-03-04T10:00:00").json()

        response = client.patch(
            f"/api/v1/appointments/{appointment['id']}/status",
            json={"status": "confirmado"},
            headers=admin_headers
        )
        assert response.status_code == 200
        assert response.json()["status"] == "confirmado"

        response = client.get(
            "/api/v1/appointments", params={"status": "confirmado"}, headers=admin_headers
        )
        assert [a["id"] for a in response.json()] == [appointment["id"]]

    def test_invalid_status_rejected(self, client, admin_headers, patient):
        appointment = book(client, admin_headers, patient["id"], "2030-03-04T10:00:00").json()

        response = client.patch(
            f"/api/v1/appointments/{appointment['id']}/status",
            json={"status": "perdido"},
            headers=admin_headers
        )
        assert response.status_code == 422

    def test_delete(self, client, admin_headers, patient):
        appointment = book(client, admin_headers, patient["id"], "2030-03-04T10:00:00").json()

        response = client.delete(f"/api/v1/appointments/{appointment['id']}", headers=admin_headers)
        assert response.status_code == 204

        response = client.get(f"/api/v1/appointments/{appointment['id']}", headers=admin_headers)
        assert response.status_code == 404

class TestDoctorPanel:

    def test_today_only(self, client, admin_headers, patient):
        today = datetime.utcnow().date()
        book(client, admin_headers, patient["id"], f"{today}T11:00:00")
        book(client, admin_headers, patient["id"], f"{today}T08:30:00")
        book(client, admin_headers, patient["id"], f"{today + timedelta(days=1)}T08:30:00")

        headers = create_user(client, admin_headers, "medico")
        response = client.get("/api/v1/appointments/today", headers=headers)
        assert response.status_code == 200
        assert [a["start_time"][11:16] for a in response.json()] == ["08:30", "11:00"]

    def test_front_desk_cannot_open_panel(self, client, admin_headers):
        headers = create_user(client, admin_headers, "recepcao")
        response = client.get("/api/v1/appointments/today", headers=headers)
        assert response.status_code == 403

class TestWeekView:

    def test_buckets_by_day(self, client, admin_headers, patient):
        client.post(
            "/api/v1/holidays",
            json={"date": "2030-03-06", "description": "Cinzas"},
            headers=admin_headers
        )
        book(client, admin_headers, patient["id"], "2030-03-04T10:00:00")
        book(client, admin_headers, patient["id"], "2030-03-04T14:00:00")
        book(client, admin_headers, patient["id"], "2030-03-10T09:00:00")
        book(client, admin_headers, patient["id"], "2030-03-11T09:00:00")

        # 2030-03-07 is a Thursday
        response = client.get(
            "/api/v1/appointments/week", params={"date": "2030-03-07"}, headers=admin_headers
        )
        assert response.status_code == 200
        week = response.json()

        assert week["week_start"] == "2030-03-04"
        assert week["week_end"] == "2030-03-10"
        assert [d["date"] for d in week["days"]][0] == "2030-03-04"
        assert len(week["days"]) == 7

        counts = [len(d["appointments"]) for d in week["days"]]
        assert counts == [2, 0, 0, 0, 0, 0, 1]

        wednesday = week["days"][2]
        assert wednesday["is_holiday"] is True
        assert wednesday["holiday_description"] == "Cinzas"

class TestCalendarEvents:

    def test_feed(self, client, admin_headers, patient):
        client.post("/api/v1/holidays", json={"date": "2030-03-06"}, headers=admin_headers)
        book(client, admin_headers, patient["id"], "2030-03-04T10:00:00")
        book(
            client, admin_headers, patient["id"], "2030-03-05T10:00:00",
            end_time="2030-03-05T11:00:00"
        )
        book(client, admin_headers, patient["id"], "2030-05-05T10:00:00")

        response = client.get(
            "/api/v1/appointments/events",
            params={"start": "2030-03-01", "end": "2030-03-31"},
            headers=admin_headers
        )
        assert response.status_code == 200
        events = response.json()

        appointments = [e for e in events if e["extendedProps"]["type"] == "appointment"]
        holidays = [e for e in events if e["extendedProps"]["type"] == "holiday"]

        assert len(appointments) == 2
        assert appointments[0]["title"] == "Maria Souza"
        assert appointments[0]["end"] == "2030-03-04T10:30:00"
        assert appointments[1]["end"] == "2030-03-05T11:00:00"

        assert len(holidays) == 1
        assert holidays[0]["allDay"] is True
        assert holidays[0]["display"] == "background"
        assert holidays[0]["title"] == "Bloqueio"

    def test_invalid_range(self, client, admin_headers):
        response = client.get(
            "/api/v1/appointments/events",
            params={"start": "2030-03-31", "end": "2030-03-01"},
            headers=admin_headers
        )
        assert response.status_code == 400
