"""
HTTP surface used by the dashboard and the controller.
"""
import os


def _image_files(image_dir):
    return sorted(os.listdir(image_dir))


class TestStartup:

    def test_ready_after_startup(self, client):
        assert client.get("/healthz").json()["ready"] is True

    def test_default_phase_seeded(self, client):
        response = client.get("/current-phase")
        assert response.status_code == 200
        assert response.json()["phase"] == "vegetative"


class TestSensorEndpoints:

    def test_update_requires_moisture_and_status(self, client):
        response = client.get("/update", params={"moisture": "40"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid data"

    def test_update_then_read(self, client):
        response = client.get("/update", params={"moisture": "40", "status": "ON", "sensor4": "39"})
        assert response.status_code == 200
        assert response.json()["message"] == "Data received"

        data = client.get("/data").json()
        assert data["averageMoisture"] == "40"
        assert data["relayStatus"] == "ON"
        assert data["sensor4"] == "39"
        assert data["sensor1"] == "N/A"

    def test_data_before_any_update(self, client):
        assert client.get("/data").json()["averageMoisture"] is None

    def test_log_uses_server_time(self, client):
        client.post("/log", json={"moisture": 33, "relayStatus": "ON", "lastSensor": "sensor2",
                                  "time": "1999-01-01T00:00:00Z"})
        client.post("/log", json={"moisture": 35, "relayStatus": "OFF", "lastSensor": "sensor5"})

        log = client.get("/today-log").json()
        assert [entry["lastSensor"] for entry in log] == ["sensor2", "sensor5"]
        assert log[0]["time"] != "1999-01-01T00:00:00Z"


class TestPhaseEndpoints:

    def test_set_phase(self, client):
        response = client.post("/set-phase", json={"phase": "flowering", "startDate": "2024-06-10"})
        assert response.status_code == 200
        assert response.json() == {"id": 2, "phase": "flowering", "startDate": "2024-06-10"}
        assert client.get("/current-phase").json() == {"phase": "flowering", "startDate": "2024-06-10"}

    def test_set_phase_missing_fields(self, client):
        response = client.post("/set-phase", json={"phase": "flowering"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Phase and startDate are required"

    def test_set_phase_numeric_date(self, client):
        response = client.post("/set-phase", json={"phase": "flowering", "startDate": 1717243200000})
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid startDate format"

    def test_set_phase_bad_date(self, client):
        response = client.post("/set-phase", json={"phase": "flowering", "startDate": "not-a-date"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid startDate format"
        assert len(client.get("/phase-logs").json()) == 1

    def test_phase_logs_sorted_by_start_date(self, client):
        client.post("/set-phase", json={"phase": "flowering", "startDate": "2000-06-10"})
        logs = client.get("/phase-logs").json()
        assert logs[-1] == {"phase": "flowering", "start_date": "2000-06-10"}


class TestReportEndpoints:

    def _upload(self, client, **fields):
        data = {"title": "Week 1", "reportDate": "2024-06-01", "description": "ok"}
        data.update(fields)
        return client.post(
            "/upload-report",
            data=data,
            files={"reportImage": ("leaf.png", b"\x89PNG leaf", "image/png")},
        )

    def test_upload_stores_image(self, client, image_dir):
        response = self._upload(client)
        assert response.status_code == 200
        report = response.json()["report"]
        assert report["id"] == 1
        assert report["image"].endswith(".png")
        assert report["image"][:-4].isdigit()
        assert _image_files(image_dir) == [report["image"]]

        served = client.get(f"/images/{report['image']}")
        assert served.status_code == 200
        assert served.content == b"\x89PNG leaf"

    def test_upload_without_image(self, client, image_dir):
        response = client.post("/upload-report", data={"title": "Week 2", "reportDate": "2024-06-08",
                                                       "description": "dry"})
        assert response.status_code == 200
        assert response.json()["report"]["image"] is None
        assert _image_files(image_dir) == []

    def test_upload_without_title_fails_in_storage(self, client, image_dir):
        # empty form values arrive as missing, tripping the NOT NULL constraint
        response = self._upload(client, title="")
        assert response.status_code == 500
        assert _image_files(image_dir) == []
        assert client.get("/weekly-reports").json() == []

    def test_get_and_list(self, client):
        self._upload(client)
        assert client.get("/report/1").json()["title"] == "Week 1"
        assert len(client.get("/weekly-reports").json()) == 1
        assert client.get("/report/2").status_code == 404

    def test_update_keeps_image_when_omitted(self, client):
        image = self._upload(client).json()["report"]["image"]

        response = client.put("/update-report/1", data={"title": "Week 1b", "reportDate": "2024-06-01",
                                                        "description": "ok"})
        assert response.status_code == 200
        assert client.get("/report/1").json()["image"] == image

    def test_update_with_new_image_leaves_old_file(self, client, image_dir):
        old_image = self._upload(client).json()["report"]["image"]

        response = client.put(
            "/update-report/1",
            data={"title": "Week 1b", "reportDate": "2024-06-01", "description": "ok"},
            files={"reportImage": ("leaf2.jpg", b"jpeg", "image/jpeg")},
        )
        new_image = response.json()["report"]["image"]
        assert new_image.endswith(".jpg")
        assert _image_files(image_dir) == sorted([old_image, new_image])

    def test_update_missing_fields(self, client, image_dir):
        self._upload(client)
        before = _image_files(image_dir)

        response = client.put(
            "/update-report/1",
            data={"title": "Week 1b"},
            files={"reportImage": ("leaf2.jpg", b"jpeg", "image/jpeg")},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Title, date, and description are required."
        assert _image_files(image_dir) == before

    def test_update_unknown_report(self, client):
        response = client.put("/update-report/5", data={"title": "x", "reportDate": "2024-06-01",
                                                        "description": "y"})
        assert response.status_code == 404

    def test_delete_removes_record_and_file(self, client, image_dir):
        self._upload(client)

        response = client.delete("/delete-report/1")
        assert response.status_code == 200
        assert response.json() == {"message": "Report deleted successfully", "id": 1}
        assert client.get("/report/1").status_code == 404
        assert _image_files(image_dir) == []


class TestStorageFailures:

    def test_phase_routes(self, client, drop_table):
        drop_table("phase_logs")

        response = client.post("/set-phase", json={"phase": "flowering", "startDate": "2024-06-10"})
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to set phase"

        response = client.get("/current-phase")
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to fetch current phase"

        response = client.get("/phase-logs")
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to fetch phase logs"

    def test_report_routes(self, client, drop_table):
        drop_table("weekly_reports")

        response = client.get("/weekly-reports")
        assert response.status_code == 500
        assert "no such table" in response.json()["detail"]

        response = client.get("/report/1")
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to retrieve the report."

        response = client.put("/update-report/1", data={"title": "Week 1b", "reportDate": "2024-06-01",
                                                        "description": "ok"})
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to retrieve the current report."

        response = client.delete("/delete-report/1")
        assert response.status_code == 500
        assert "no such table" in response.json()["detail"]

    def test_failed_update_discards_new_upload(self, client, image_dir, drop_table):
        drop_table("weekly_reports")

        response = client.put(
            "/update-report/1",
            data={"title": "Week 1b", "reportDate": "2024-06-01", "description": "ok"},
            files={"reportImage": ("leaf2.jpg", b"jpeg", "image/jpeg")},
        )
        assert response.status_code == 500
        assert _image_files(image_dir) == []
