import re
from pathlib import Path

import pytest
from django.core.files.storage import FileSystemStorage
from django.core.files.uploadedfile import SimpleUploadedFile

from app_projects.models import ProjectFile

URL = "/api/v1/project-files/"


def text_file(name="notes.txt", content=b"inspection notes", content_type="text/plain"):
    return SimpleUploadedFile(name, content, content_type=content_type)


def upload(client, project, **file_kwargs):
    return client.post(
        URL,
        {"projectId": project.id, "title": " Site notes ", "file": text_file(**file_kwargs)},
        format="multipart",
    )


def stored_path(media_root, record):
    path = Path(record.file.path)
    assert path.parent == Path(media_root) / "projects" / str(record.project_id) / "files"
    return path


@pytest.mark.django_db
class TestUpload:
    def test_upload_stores_file(self, api, project, media_root):
        response = upload(api, project)

        assert response.status_code == 201
        body = response.json()
        assert body["title"] == "Site notes"
        assert body["originalName"] == "notes.txt"
        assert body["mimeType"] == "text/plain"
        assert re.fullmatch(r"\d+-[0-9a-f-]{36}\.txt", body["filename"])
        record = ProjectFile.objects.get(pk=body["id"])
        assert stored_path(media_root, record).read_bytes() == b"inspection notes"

    def test_storage_failure(self, api, project, monkeypatch):
        def fail(*args, **kwargs):
            raise OSError("disk full")

        monkeypatch.setattr(FileSystemStorage, "_save", fail)

        response = upload(api, project)

        assert response.status_code == 500
        assert response.json()["message"] == "Failed to save file"
        assert not ProjectFile.objects.exists()

    def test_too_large(self, api, project, settings):
        settings.PROJECT_FILE_MAX_SIZE = 5
        response = upload(api, project)
        assert response.status_code == 413
        assert not ProjectFile.objects.exists()

    def test_unsupported_type(self, api, project):
        response = upload(api, project, name="tool.exe", content_type="application/x-msdownload")
        assert response.status_code == 415
        assert response.json()["message"] == "File type not allowed"

    def test_title_required(self, api, project):
        response = api.post(URL, {"projectId": project.id, "file": text_file()}, format="multipart")
        assert response.status_code == 400

    def test_unknown_project(self, api, project):
        response = api.post(
            URL, {"projectId": 999, "title": "x", "file": text_file()}, format="multipart"
        )
        assert response.status_code == 404


@pytest.mark.django_db
class TestDownloadAndDelete:
    def test_download(self, api, project):
        file_id = upload(api, project).json()["id"]

        response = api.get(f"{URL}{file_id}/download/")

        assert response.status_code == 200
        assert b"".join(response.streaming_content) == b"inspection notes"
        assert "attachment" in response["Content-Disposition"]

    def test_missing_on_disk(self, api, project, media_root):
        record = ProjectFile.objects.get(pk=upload(api, project).json()["id"])
        stored_path(media_root, record).unlink()

        response = api.get(f"{URL}{record.id}/download/")

        assert response.status_code == 410
        assert response.json()["message"] == "File missing on disk"

    def test_unknown_record(self, api):
        assert api.get(f"{URL}999/download/").status_code == 404

    def test_delete_removes_row_and_file(self, api, project, media_root):
        record = ProjectFile.objects.get(pk=upload(api, project).json()["id"])
        path = stored_path(media_root, record)

        response = api.delete(f"{URL}{record.id}/")

        assert response.status_code == 200
        assert response.json() == {"id": record.id, "projectId": project.id}
        assert not ProjectFile.objects.exists()
        assert not path.exists()


@pytest.mark.django_db
class TestListAccess:
    def test_list(self, api, project):
        upload(api, project)
        response = api.get(URL, {"projectId": project.id})
        assert [item["title"] for item in response.json()] == ["Site notes"]

    def test_project_user_member(self, api, client_for, member, project):
        upload(api, project)
        response = client_for(member).get(URL, {"projectId": project.id})
        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_project_user_outside_project(self, api, client_for, project_user, project):
        upload(api, project)
        response = client_for(project_user).get(URL, {"projectId": project.id})
        assert response.status_code == 403

    def test_project_user_cannot_upload(self, client_for, member, project):
        assert upload(client_for(member), project).status_code == 403
