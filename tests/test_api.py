"""End-to-end tests for the HTTP routes through the Flask test client."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from interview_bot.config import REQUEST_LIMIT_BYTES  # noqa: E402
from interview_bot.main import create_app  # noqa: E402
from interview_bot.services.job_service import NO_ACTIVE_JOB_MESSAGE  # noqa: E402
from interview_bot.storage import DEFAULT_SYSTEM_PROMPT, USERS  # noqa: E402


def _post_job(client, title="Backend Engineer", **overrides):
    payload = {"title": title, "company": "Acme", "description": f"{title} role"}
    payload.update(overrides)
    return client.post("/api/jobs", json=payload)


@pytest.fixture
def flaky_client(flaky_store):
    app = create_app(store=flaky_store)
    app.config["TESTING"] = True
    return app.test_client()


def test_index_lists_endpoints(client):
    response = client.get("/")

    assert response.status_code == 200
    body = response.get_json()
    assert body["status"] == "Running"
    assert body["endpoints"]["jobs"] == "/api/jobs"


def test_health(client):
    body = client.get("/api/health").get_json()

    assert body["status"] == "OK"
    assert body["version"] == "1.0.0"
    assert body["timestamp"].endswith("Z")


def test_unknown_route_returns_json_404(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.get_json() == {"error": "Endpoint not found"}


def test_unsupported_method_is_treated_as_unmatched(client):
    response = client.put("/api/jobs")

    assert response.status_code == 404
    assert response.get_json() == {"error": "Endpoint not found"}


def test_system_prompt_round_trip(client):
    prompt = "Interview the candidate about Flask internals."

    saved = client.post("/api/system-prompt", json={"systemPrompt": prompt})
    assert saved.status_code == 200
    assert saved.get_json() == {"message": "System prompt saved successfully"}

    assert client.get("/api/system-prompt").get_json() == {"systemPrompt": prompt}
    assert client.get("/api/user/u-1/system-prompt").get_json() == {"systemPrompt": prompt}


def test_system_prompt_requires_field(client):
    response = client.post("/api/system-prompt", json={})

    assert response.status_code == 400
    assert response.get_json() == {"error": "System prompt is required"}


def test_create_and_list_jobs(client):
    response = _post_job(client)

    assert response.status_code == 201
    job = response.get_json()
    assert job["isActive"] is False
    assert isinstance(job["id"], int)
    assert client.get("/api/jobs").get_json() == [job]


def test_create_job_missing_company_leaves_collection_unchanged(client):
    _post_job(client, "Existing")

    response = client.post("/api/jobs", json={"title": "QA", "description": "Testing"})

    assert response.status_code == 400
    assert response.get_json() == {"error": "All fields are required"}
    assert len(client.get("/api/jobs").get_json()) == 1


def test_malformed_body_is_a_client_error(client):
    response = client.post("/api/jobs", data="{broken", content_type="application/json")

    assert response.status_code == 400
    assert client.get("/api/jobs").get_json() == []


def test_activation_and_job_description(client):
    first = _post_job(client, "First").get_json()
    second = _post_job(client, "Second").get_json()

    assert client.get("/api/user/u-1/job-description").get_json() == {"jobDescription": NO_ACTIVE_JOB_MESSAGE}

    client.post(f"/api/jobs/{first['id']}/activate")
    response = client.post(f"/api/jobs/{second['id']}/activate")

    assert response.get_json() == {"message": "Job activated successfully"}
    active = [job["id"] for job in client.get("/api/jobs").get_json() if job["isActive"]]
    assert active == [second["id"]]
    assert client.get("/api/user/u-1/job-description").get_json() == {"jobDescription": "Second role"}


def test_activating_unknown_job_still_succeeds(client):
    job = _post_job(client).get_json()
    client.post(f"/api/jobs/{job['id']}/activate")

    response = client.post("/api/jobs/42/activate")

    assert response.status_code == 200
    assert not any(job["isActive"] for job in client.get("/api/jobs").get_json())


def test_delete_job(client):
    keep = _post_job(client, "Keep").get_json()
    drop = _post_job(client, "Drop").get_json()

    response = client.delete(f"/api/jobs/{drop['id']}")
    assert response.get_json() == {"message": "Job deleted successfully"}
    assert client.get("/api/jobs").get_json() == [keep]

    again = client.delete(f"/api/jobs/{drop['id']}")
    assert again.status_code == 200
    assert client.get("/api/jobs").get_json() == [keep]


def test_interview_webhooks(client):
    started = client.post("/webhook/start-interview", json={"userId": "tg-1", "userName": "Ada"})
    assert started.get_json() == {"message": "Interview started successfully", "interviewActive": True}

    state = client.get("/api/user/tg-1/interview-state").get_json()
    assert state["interviewActive"] is True
    assert state["userName"] == "Ada"

    stopped = client.post("/webhook/stop-interview", json={"userId": "tg-1"})
    assert stopped.get_json() == {"message": "Interview stopped successfully", "interviewActive": False}
    assert client.get("/api/user/tg-1/interview-state").get_json()["interviewActive"] is False


@pytest.mark.parametrize("path", ["/webhook/start-interview", "/webhook/stop-interview"])
def test_webhooks_require_user_id(client, path):
    response = client.post(path, json={"userName": "Ada"})

    assert response.status_code == 400
    assert response.get_json() == {"error": "User ID is required"}


def test_unknown_user_state(client):
    assert client.get("/api/user/ghost/interview-state").get_json() == {"interviewActive": False}


def test_complete_interview_increments_counter(client):
    client.post("/webhook/start-interview", json={"userId": "tg-2"})

    response = client.post("/api/user/tg-2/complete-interview")
    assert response.get_json() == {"message": "Interview completed successfully"}
    client.post("/api/user/tg-2/complete-interview")

    state = client.get("/api/user/tg-2/interview-state").get_json()
    assert state["interviewActive"] is False
    assert state["completedInterviews"] == 2


def test_stats(client):
    _post_job(client, "One")
    _post_job(client, "Two")
    client.post("/api/user/alice/complete-interview")
    client.post("/api/user/bob/complete-interview")

    assert client.get("/api/stats").get_json() == {"totalJobs": 2, "totalUsers": 2, "totalInterviews": 2}


@pytest.mark.parametrize(
    "method, path, body, error",
    [
        ("post", "/api/system-prompt", {"systemPrompt": "x"}, "Failed to save system prompt"),
        ("post", "/api/jobs", {"title": "t", "company": "c", "description": "d"}, "Failed to save job"),
        ("post", "/api/jobs/1/activate", None, "Failed to activate job"),
        ("delete", "/api/jobs/1", None, "Failed to delete job"),
        ("post", "/webhook/start-interview", {"userId": "u"}, "Failed to start interview"),
        ("post", "/webhook/stop-interview", {"userId": "u"}, "Failed to stop interview"),
        ("post", "/api/user/u/complete-interview", None, "Failed to complete interview"),
    ],
)
def test_write_failures_return_500(flaky_client, flaky_store, method, path, body, error):
    flaky_store.fail_writes = True

    response = getattr(flaky_client, method)(path, json=body)

    assert response.status_code == 500
    assert response.get_json() == {"error": error}


def test_cors_headers(client):
    response = client.get("/api/health", headers={"Origin": "http://admin.example"})

    assert response.headers.get("Access-Control-Allow-Origin") in ("*", "http://admin.example")


def test_whitespace_prompt_is_accepted(client):
    response = client.post("/api/system-prompt", json={"systemPrompt": "   "})

    assert response.status_code == 200
    assert client.get("/api/system-prompt").get_json() == {"systemPrompt": "   "}


def test_bad_stored_counter_does_not_break_stats(client, store):
    store.save(USERS, {"u": {"completedInterviews": "x"}})

    assert client.get("/api/stats").get_json() == {"totalJobs": 0, "totalUsers": 1, "totalInterviews": 0}

    response = client.post("/api/user/u/complete-interview")
    assert response.status_code == 200
    assert client.get("/api/user/u/interview-state").get_json()["completedInterviews"] == 1


def test_oversized_body_is_rejected_as_json(client):
    response = client.post("/api/system-prompt", json={"systemPrompt": "x" * (REQUEST_LIMIT_BYTES + 1)})

    assert response.status_code == 413
    assert isinstance(response.get_json()["error"], str)
    assert client.get("/api/system-prompt").get_json() == {"systemPrompt": DEFAULT_SYSTEM_PROMPT}
