import pytest
from django.core.management import call_command
from rest_framework.test import APIClient

from app_projects.models import Block, Project, ProjectMember
from app_users.models import User
from app_users.roles import Permissions, Role, has_permission, permissions_for


@pytest.mark.django_db
class TestRoles:
    def test_admin_has_everything(self, admin_user):
        assert permissions_for(admin_user) == set(Permissions.all())

    def test_superuser_counts_as_admin(self):
        user = User.objects.create_superuser("root", password="secret", role=Role.USER)
        assert has_permission(user, Permissions.IMPORT_CRACKS)

    def test_user_reads_only(self, plain_user):
        assert has_permission(plain_user, Permissions.READ_USERS)
        assert has_permission(plain_user, Permissions.READ_DESIGN_MAP)
        assert not has_permission(plain_user, Permissions.WRITE_DESIGN_MAP)
        assert not has_permission(plain_user, Permissions.IMPORT_CRACKS)

    def test_project_management_is_admin_only(self, plain_user, project_user, admin_user):
        for perm in (
            Permissions.CREATE_PROJECT,
            Permissions.EDIT_PROJECT,
            Permissions.DELETE_PROJECT,
            Permissions.MANAGE_PROJECT_USERS,
            Permissions.EDIT_USERS,
        ):
            assert has_permission(admin_user, perm)
            assert not has_permission(plain_user, perm)
            assert not has_permission(project_user, perm)

    def test_project_user_cannot_read_users(self, project_user):
        assert not has_permission(project_user, Permissions.READ_USERS)
        assert has_permission(project_user, Permissions.READ_CRACKS)


@pytest.mark.django_db
class TestEndpointAccess:
    def test_user_cannot_import(self, client_for, plain_user, project, make_workbook, data_row):
        response = client_for(plain_user).post(
            f"/api/v1/cracks/?projectId={project.id}",
            {"file": make_workbook([data_row()])},
            format="multipart",
        )
        assert response.status_code == 403
        assert response.json() == {"message": "Forbidden"}

    def test_user_can_list_cracks(self, client_for, plain_user, project):
        response = client_for(plain_user).get("/api/v1/cracks/", {"projectId": project.id})
        assert response.status_code == 200

    def test_user_cannot_write_design_maps(self, client_for, plain_user, project, make_crack):
        crack = make_crack(project)
        response = client_for(plain_user).post(
            "/api/v1/design-maps/",
            {"projectId": project.id, "crackIdentificationId": crack.id, "x": 0, "y": 0, "width": 1, "height": 1},
            format="json",
        )
        assert response.status_code == 403

    def test_user_cannot_delete_cracks(self, client_for, plain_user, project):
        response = client_for(plain_user).delete(f"/api/v1/cracks/?projectId={project.id}")
        assert response.status_code == 403

    def test_anonymous_is_rejected(self, project):
        response = APIClient().get("/api/v1/cracks/", {"projectId": project.id})
        assert response.status_code in (401, 403)
        assert "message" in response.json()


@pytest.mark.django_db
class TestProjects:
    def test_project_user_sees_own_projects(self, client_for, member, project, other_project):
        response = client_for(member).get("/api/v1/projects/")
        assert [item["id"] for item in response.json()] == [project.id]

    def test_user_sees_all(self, client_for, plain_user, project, other_project):
        response = client_for(plain_user).get("/api/v1/projects/")
        assert len(response.json()) == 2

    def test_detail_forbidden_for_non_member(self, client_for, member, other_project):
        response = client_for(member).get(f"/api/v1/projects/{other_project.id}/")
        assert response.status_code == 403

    def test_detail_not_found(self, api):
        assert api.get("/api/v1/projects/999/").status_code == 404


@pytest.mark.django_db
def test_seed_demo_is_repeatable():
    call_command("seed_demo", "--skip-migrate", "--password", "pass12345")
    call_command("seed_demo", "--skip-migrate")

    assert set(User.objects.values_list("role", flat=True)) == {r.value for r in Role}
    project = Project.objects.get(name="Demo project")
    assert project.client_name == "Demo client"
    assert ProjectMember.objects.filter(project=project, user__username="project_user").exists()
    assert Block.objects.filter(project=project).count() == 3
    assert User.objects.get(username="user").check_password("pass12345")
