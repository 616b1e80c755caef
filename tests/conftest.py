import io

import openpyxl
import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from rest_framework.test import APIClient

from app_cracks.models import CrackIdentification
from app_projects.models import Block, Project, ProjectMember
from app_users.models import User
from app_users.roles import Role

HEADER = [
    "Block",
    "Chainage From",
    "Chainage To",
    "RL",
    "Defect Type",
    "L (mm)",
    "W (mm)",
    "H (mm)",
    "Video",
    "Start",
    "End",
]


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path / "media"
    return settings.MEDIA_ROOT


@pytest.fixture
def make_user(db):
    def factory(role: str, username: str = None) -> User:
        return User.objects.create_user(
            username=username or f"{role}-user",
            password="secret",
            role=role,
        )

    return factory


@pytest.fixture
def admin_user(make_user):
    return make_user(Role.ADMIN)


@pytest.fixture
def plain_user(make_user):
    return make_user(Role.USER)


@pytest.fixture
def project_user(make_user):
    return make_user(Role.PROJECT_USER)


@pytest.fixture
def project(db):
    return Project.objects.create(name="Bridge 7")


@pytest.fixture
def other_project(db):
    return Project.objects.create(name="Tunnel 2")


@pytest.fixture
def member(project_user, project):
    ProjectMember.objects.create(project=project, user=project_user)
    return project_user


@pytest.fixture
def client_for():
    def factory(user) -> APIClient:
        client = APIClient()
        client.force_authenticate(user=user)
        return client

    return factory


@pytest.fixture
def api(client_for, admin_user) -> APIClient:
    return client_for(admin_user)


@pytest.fixture
def make_crack(db):
    def factory(project: Project, block_name: str = "A1", **fields) -> CrackIdentification:
        block, _ = Block.objects.get_or_create(project=project, name=block_name)
        fields.setdefault("defect_type", "Crack")
        return CrackIdentification.objects.create(project=project, block=block, **fields)

    return factory


@pytest.fixture
def data_row():
    def factory(block="A1", defect="Crack", start="00:01:00", end="00:02:00"):
        return [block, "10+100", "10+120", 12.5, defect, 150, 2, 0, "survey.mp4", start, end]

    return factory


@pytest.fixture
def make_workbook():
    """Excel-файл в памяти: первая строка — заголовок, дальше переданные строки."""

    def factory(rows, header=HEADER, name="survey.xlsx") -> SimpleUploadedFile:
        workbook = openpyxl.Workbook()
        sheet = workbook.active
        sheet.append(header)
        for row in rows:
            sheet.append(row)
        buffer = io.BytesIO()
        workbook.save(buffer)
        return SimpleUploadedFile(
            name,
            buffer.getvalue(),
            content_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )

    return factory
