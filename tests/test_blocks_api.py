import pytest

from app_projects.models import Block

URL = "/api/v1/blocks/"


@pytest.mark.django_db
class TestBlocks:
    def test_list_ordered_by_name(self, api, project, other_project):
        for name in ("C3", "A1", "B2"):
            Block.objects.create(project=project, name=name)
        Block.objects.create(project=other_project, name="Z")

        response = api.get(URL, {"projectId": project.id})

        assert [item["name"] for item in response.json()] == ["A1", "B2", "C3"]

    def test_list_requires_project(self, api):
        response = api.get(URL)
        assert response.status_code == 400
        assert response.json()["message"] == "projectId required"

    def test_create(self, api, project):
        response = api.post(URL, {"projectId": project.id, "name": "  North   wing "}, format="json")

        assert response.status_code == 201
        assert response.json()["name"] == "North wing"
        assert response.json()["projectId"] == project.id

    def test_duplicate_name(self, api, project):
        Block.objects.create(project=project, name="A1")
        response = api.post(URL, {"projectId": project.id, "name": "A1"}, format="json")
        assert response.status_code == 409
        assert response.json()["message"] == "Block name already exists in project"

    def test_same_name_in_other_project(self, api, project, other_project):
        Block.objects.create(project=other_project, name="A1")
        response = api.post(URL, {"projectId": project.id, "name": "A1"}, format="json")
        assert response.status_code == 201

    def test_unknown_project(self, api):
        response = api.post(URL, {"projectId": 999, "name": "A1"}, format="json")
        assert response.status_code == 404

    def test_blank_name(self, api, project):
        response = api.post(URL, {"projectId": project.id, "name": "   "}, format="json")
        assert response.status_code == 400
