import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from app_cracks.models import CrackIdentification
from app_design_maps.models import DesignMap

URL = "/api/v1/cracks/"


@pytest.mark.django_db
class TestCrackImportAPI:
    def test_import_workbook(self, api, project, make_workbook, data_row):
        upload = make_workbook([data_row(), data_row(block="B1", start="0:01:00", end="0:03:00")])

        response = api.post(f"{URL}?projectId={project.id}", {"file": upload}, format="multipart")

        assert response.status_code == 200
        body = response.json()
        assert body["imported"] == 2
        assert body["deleted"] == 0
        assert body["errors"] == []
        assert body["processedRows"] == 2
        assert body["totalRows"] == 2
        assert CrackIdentification.objects.filter(project=project).count() == 2

    def test_file_required(self, api, project):
        response = api.post(f"{URL}?projectId={project.id}", {}, format="multipart")
        assert response.status_code == 400
        assert response.json()["message"] == "file required"

    def test_project_required(self, api, make_workbook, data_row):
        response = api.post(URL, {"file": make_workbook([data_row()])}, format="multipart")
        assert response.status_code == 400
        assert response.json()["message"] == "projectId required"

    def test_unknown_project(self, api, make_workbook, data_row):
        response = api.post(f"{URL}?projectId=999", {"file": make_workbook([data_row()])}, format="multipart")
        assert response.status_code == 404

    def test_no_valid_rows(self, api, project, make_workbook, data_row):
        upload = make_workbook([data_row(end=None)])

        response = api.post(f"{URL}?projectId={project.id}", {"file": upload}, format="multipart")

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "No valid data rows"
        assert body["errors"][0]["row"] == 2

    def test_unreadable_workbook(self, api, project):
        upload = SimpleUploadedFile("survey.xlsx", b"not a workbook")
        response = api.post(f"{URL}?projectId={project.id}", {"file": upload}, format="multipart")
        assert response.status_code == 400

    def test_narrow_sheet(self, api, project, make_workbook):
        upload = make_workbook([["A1", "1", "2"]], header=["Block", "From", "To"])
        response = api.post(f"{URL}?projectId={project.id}", {"file": upload}, format="multipart")
        assert response.status_code == 400
        assert response.json()["message"] == "unexpected header format"


@pytest.mark.django_db
class TestCrackListAPI:
    def test_filters_and_block(self, api, project, other_project, make_crack):
        first = make_crack(project, block_name="A1", defect_type="Crack")
        make_crack(project, block_name="B1", defect_type="Spall")
        make_crack(other_project)

        response = api.get(URL, {"projectId": project.id, "blockId": first.block_id})

        body = response.json()
        assert response.status_code == 200
        assert body["total"] == 1
        assert body["items"][0]["id"] == first.id
        assert body["items"][0]["block"] == {"id": first.block_id, "name": "A1"}

        response = api.get(URL, {"projectId": project.id, "defectType": "Spall"})
        assert [item["defectType"] for item in response.json()["items"]] == ["Spall"]

    def test_exclude_mapped(self, api, project, make_crack):
        mapped = make_crack(project)
        free = make_crack(project)
        DesignMap.objects.create(project=project, crack=mapped, x=0, y=0, width=1, height=1)

        for flag in ("1", "true"):
            response = api.get(URL, {"projectId": project.id, "excludeMapped": flag})
            assert [item["id"] for item in response.json()["items"]] == [free.id]

    def test_pagination(self, api, project, make_crack):
        for _ in range(3):
            make_crack(project)

        response = api.get(URL, {"projectId": project.id, "page": 2, "pageSize": 2})
        body = response.json()
        assert body["total"] == 3
        assert body["page"] == 2
        assert body["pageSize"] == 2
        assert len(body["items"]) == 1

        response = api.get(URL, {"projectId": project.id, "pageSize": 1000, "page": 0})
        body = response.json()
        assert body["pageSize"] == 100
        assert body["page"] == 1

    def test_project_required(self, api):
        assert api.get(URL).status_code == 400


@pytest.mark.django_db
class TestCrackDeleteAPI:
    def test_delete_all_for_project(self, api, project, other_project, make_crack):
        make_crack(project, block_name="A1")
        make_crack(project, block_name="B1")
        make_crack(other_project)

        response = api.delete(f"{URL}?projectId={project.id}")

        assert response.status_code == 200
        assert response.json() == {"deleted": 2}
        assert CrackIdentification.objects.filter(project=project).count() == 0
        assert CrackIdentification.objects.filter(project=other_project).count() == 1

    def test_delete_by_block(self, api, project, make_crack):
        keep = make_crack(project, block_name="A1")
        drop = make_crack(project, block_name="B1")

        response = api.delete(f"{URL}?projectId={project.id}&blockId={drop.block_id}")

        assert response.json() == {"deleted": 1}
        assert list(CrackIdentification.objects.values_list("id", flat=True)) == [keep.id]
