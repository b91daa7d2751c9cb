"""Tests for the onboarding HTTP callbacks."""

from onboarding.checklist import CHECKED, UNCHECKED
from onboarding_bot.db import StoreError


def _action(context: dict, **overrides) -> dict:
    body = {
        "user_id": "user-1",
        "channel_id": "dm-user-1",
        "post_id": "post-1",
        "trigger_id": "trigger-1",
        "context": context,
    }
    body.update(overrides)
    return body


def _dialog(submission: dict, **overrides) -> dict:
    body = {
        "user_id": "user-1",
        "channel_id": "town-square",
        "callback_id": "eoto_signature",
        "submission": submission,
    }
    body.update(overrides)
    return body


class TestCompleteStepEndpoint:

    def test_marks_step_and_updates_post(self, client, store):
        response = client.post("/complete-step", json=_action({"step": "tools"}))

        assert response.status_code == 200
        data = response.json()
        assert data["update"]["id"] == "post-1"
        texts = [a["text"] for a in data["update"]["props"]["attachments"]]
        assert texts[3].startswith(CHECKED)
        assert all(t.startswith(UNCHECKED) for i, t in enumerate(texts) if i != 3)
        assert data["ephemeral_text"] == "Marked step 'tools' complete ✔️"

        assert store.load("user-1").completed_steps == {"tools": True}

    def test_repeat_click_same_response(self, client):
        first = client.post("/complete-step", json=_action({"step": "intro"})).json()
        second = client.post("/complete-step", json=_action({"step": "intro"})).json()
        assert first == second

    def test_unknown_step(self, client, store):
        response = client.post("/complete-step", json=_action({"step": "coffee"}))
        assert response.status_code == 400
        assert store.load("user-1") is None

    def test_missing_step(self, client):
        assert client.post("/complete-step", json=_action({})).status_code == 400

    def test_malformed_body(self, client):
        response = client.post("/complete-step", content=b"not json",
                               headers={"Content-Type": "application/json"})
        assert response.status_code == 400

    def test_store_failure(self, client, ctx, monkeypatch):
        def fail(user_id):
            raise StoreError("KVGet: unavailable")

        monkeypatch.setattr(ctx.store, "load", fail)
        response = client.post("/complete-step", json=_action({"step": "tools"}))
        assert response.status_code == 500

    def test_user_lookup_failure(self, client, platform, store):
        platform.failing.add("get_user")
        response = client.post("/complete-step", json=_action({"step": "tools"}))
        assert response.status_code == 500
        # the step is already persisted
        assert store.load("user-1").completed_steps == {"tools": True}

    def test_signature_button_opens_dialog(self, client, platform, store):
        response = client.post(
            "/complete-step", json=_action({"action": "open_signature_dialog"})
        )
        assert response.status_code == 200
        assert response.json() == {"ephemeral_text": "Opening EOTO signature generator..."}
        assert platform.dialogs[0]["trigger_id"] == "trigger-1"
        assert store.load("user-1") is None

    def test_dialog_open_failure(self, client, platform):
        platform.failing.add("open_interactive_dialog")
        response = client.post(
            "/complete-step", json=_action({"action": "open_signature_dialog"})
        )
        assert response.status_code == 500


class TestSubmitSignatureEndpoint:

    def test_success(self, client, platform, signature_submission):
        response = client.post("/submit-signature", json=_dialog(signature_submission))

        assert response.status_code == 200
        assert response.json() == {}

        upload = platform.uploads[0]
        assert upload["channel_id"] == "town-square"
        assert upload["filename"] == "Ada_Lovelace_cuz_Signatur.html"
        html = upload["content"].decode("utf-8")
        assert "Tel.: 030 555<br>" in html
        assert "Pronomen sie/ihr - pronouns she/her" in html

        post = platform.posts[0]
        assert post["channel_id"] == "dm-user-1"
        assert post["file_ids"] == ["file-1"]

    def test_missing_email(self, client, platform, signature_submission):
        signature_submission["email"] = ""
        response = client.post("/submit-signature", json=_dialog(signature_submission))

        assert response.status_code == 200
        assert response.json() == {"errors": {"email": "Email is required"}}
        assert platform.uploads == []
        assert platform.posts == []

    def test_invalid_project(self, client, signature_submission):
        signature_submission["project"] = "marketing"
        response = client.post("/submit-signature", json=_dialog(signature_submission))
        assert response.json() == {"errors": {"project": "Please select a valid project"}}

    def test_upload_failure(self, client, platform, signature_submission):
        platform.failing.add("upload_file")
        response = client.post("/submit-signature", json=_dialog(signature_submission))
        assert response.json() == {
            "error": "Failed to upload signature file. Please try again."
        }
        assert platform.posts == []

    def test_post_failure_still_closes_dialog(self, client, platform, signature_submission):
        platform.failing.add("create_post")
        response = client.post("/submit-signature", json=_dialog(signature_submission))
        assert response.json() == {}
        assert len(platform.uploads) == 1

    def test_cancelled(self, client, platform):
        response = client.post("/submit-signature", json=_dialog({}, cancelled=True))
        assert response.json() == {}
        assert platform.uploads == []


class TestUserCreatedEndpoint:

    def test_starts_onboarding(self, client, platform):
        response = client.post("/events/user-created", json={"user_id": "user-1"})
        assert response.json() == {"user_id": "user-1", "started": True}
        assert platform.posts[0]["channel_id"] == "dm-user-1"

    def test_idempotent(self, client, platform):
        client.post("/events/user-created", json={"user_id": "user-1"})
        response = client.post("/events/user-created", json={"user_id": "user-1"})
        assert response.json()["started"] is False
        assert len(platform.posts) == 1

    def test_unknown_user(self, client, platform):
        response = client.post("/events/user-created", json={"user_id": "ghost"})
        assert response.status_code == 200
        assert response.json() == {"user_id": "ghost", "started": False}
        assert platform.posts == []
