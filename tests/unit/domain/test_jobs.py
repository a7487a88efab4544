"""
Unit tests for background job messages.
"""

from files_manager.domain.jobs import ThumbnailJob, WelcomeEmailJob


class TestThumbnailJob:

    def test_payload(self):
        job = ThumbnailJob(user_id="u1", file_id="f1")

        assert job.task_name == "thumbnails.generate"
        assert job.to_payload() == {"userId": "u1", "fileId": "f1"}

    def test_describe(self):
        assert ThumbnailJob(user_id="u1", file_id="f1").describe() == "Image thumbnail [u1-f1]"


class TestWelcomeEmailJob:

    def test_payload(self):
        job = WelcomeEmailJob(user_id="u1")

        assert job.task_name == "users.send_welcome_email"
        assert job.to_payload() == {"userId": "u1"}
