import pytest

from app_projects.models import ProjectMember


def url(project):
    return f"/api/v1/projects/{project.id}/users/"


@pytest.mark.django_db
class TestMembers:
    def test_add_member(self, api, project, project_user):
        response = api.post(url(project), {"userId": project_user.id}, format="json")

        assert response.status_code == 201
        body = response.json()
        assert body["projectId"] == project.id
        assert body["userId"] == project_user.id
        assert ProjectMember.objects.filter(project=project, user=project_user).exists()

    def test_add_requires_user_id(self, api, project):
        response = api.post(url(project), {}, format="json")
        assert response.status_code == 400
        assert response.json()["message"] == "userId required"

    def test_add_twice(self, api, project, member):
        response = api.post(url(project), {"userId": member.id}, format="json")
        assert response.status_code == 409
        assert response.json()["message"] == "User already a member"

    def test_add_unknown_user(self, api, project):
        response = api.post(url(project), {"userId": 999}, format="json")
        assert response.status_code == 404
        assert response.json()["message"] == "Project or user not found"

    def test_list_members(self, api, project, member):
        response = api.get(url(project))

        assert response.status_code == 200
        [item] = response.json()
        assert item["userId"] == member.id
        assert item["user"]["role"] == "project_user"

    def test_member_lists_own_project(self, client_for, member, project):
        assert client_for(member).get(url(project)).status_code == 200

    def test_non_member_forbidden(self, client_for, member, other_project):
        assert client_for(member).get(url(other_project)).status_code == 403

    def test_remove_member(self, api, project, member):
        response = api.delete(url(project), {"userId": member.id}, format="json")

        assert response.status_code == 200
        assert response.json() == {"projectId": project.id, "userId": member.id}
        assert not ProjectMember.objects.exists()

    def test_remove_by_query_param(self, api, project, member):
        response = api.delete(f"{url(project)}?userId={member.id}")
        assert response.status_code == 200

    def test_remove_missing_membership(self, api, project, plain_user):
        response = api.delete(url(project), {"userId": plain_user.id}, format="json")
        assert response.status_code == 404
        assert response.json()["message"] == "Membership not found"

    def test_user_cannot_manage_members(self, client_for, plain_user, project, project_user):
        response = client_for(plain_user).post(
            url(project), {"userId": project_user.id}, format="json"
        )
        assert response.status_code == 403
