import pytest

from app_users.models import User
from app_users.roles import Permissions, Role

URL = "/api/v1/users/"


@pytest.mark.django_db
class TestUserList:
    def test_paginated_list(self, api, plain_user, project_user):
        response = api.get(URL, {"pageSize": 2})

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 3
        assert body["pageSize"] == 2
        assert len(body["items"]) == 2
        assert set(body["items"][0]) == {
            "id", "name", "email", "role", "status", "lastLogin", "createdAt",
        }

    def test_filters(self, api, make_user):
        inactive = make_user(Role.PROJECT_USER, username="contractor")
        inactive.email = "site@contractor.test"
        inactive.is_active = False
        inactive.save()

        by_role = api.get(URL, {"role": "project_user"}).json()
        by_status = api.get(URL, {"status": "false"}).json()
        by_search = api.get(URL, {"search": "CONTRACTOR.test"}).json()

        assert [u["id"] for u in by_role["items"]] == [inactive.id]
        assert [u["id"] for u in by_status["items"]] == [inactive.id]
        assert [u["id"] for u in by_search["items"]] == [inactive.id]

    def test_project_user_cannot_list(self, client_for, project_user):
        assert client_for(project_user).get(URL).status_code == 403


@pytest.mark.django_db
class TestUserCreate:
    def test_create(self, api):
        response = api.post(
            URL,
            {"name": "Ann", "email": "Ann@Example.com", "password": "pw12345", "role": "project_user"},
            format="json",
        )

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "ann@example.com"
        assert body["role"] == "project_user"
        assert body["status"] is True
        assert "password" not in body
        user = User.objects.get(pk=body["id"])
        assert user.username == "ann@example.com"
        assert user.check_password("pw12345")

    def test_email_and_password_required(self, api):
        response = api.post(URL, {"email": "a@b.test"}, format="json")
        assert response.status_code == 400
        assert response.json()["message"] == "Email & password required"

    def test_duplicate_email(self, api):
        payload = {"email": "a@b.test", "password": "x"}
        api.post(URL, payload, format="json")
        response = api.post(URL, {**payload, "email": "A@B.test"}, format="json")
        assert response.status_code == 409
        assert response.json()["message"] == "Email already exists"

    def test_unknown_role(self, api):
        response = api.post(
            URL, {"email": "a@b.test", "password": "x", "role": "owner"}, format="json"
        )
        assert response.status_code == 400

    def test_user_cannot_create(self, client_for, plain_user):
        response = client_for(plain_user).post(
            URL, {"email": "a@b.test", "password": "x"}, format="json"
        )
        assert response.status_code == 403


@pytest.mark.django_db
class TestUserUpdate:
    def test_patch(self, api, plain_user):
        response = api.patch(
            f"{URL}{plain_user.id}/", {"role": "admin", "status": False}, format="json"
        )

        assert response.status_code == 200
        plain_user.refresh_from_db()
        assert plain_user.role == Role.ADMIN
        assert plain_user.is_active is False

    def test_nothing_to_update(self, api, plain_user):
        response = api.patch(f"{URL}{plain_user.id}/", {}, format="json")
        assert response.status_code == 400
        assert response.json()["message"] == "Nothing to update"

    def test_not_found(self, api):
        response = api.patch(f"{URL}999/", {"name": "X"}, format="json")
        assert response.status_code == 404
        assert response.json()["message"] == "User not found"

    def test_user_can_read_but_not_edit(self, client_for, plain_user, project_user):
        client = client_for(plain_user)
        assert client.get(f"{URL}{project_user.id}/").status_code == 200
        response = client.patch(f"{URL}{project_user.id}/", {"name": "X"}, format="json")
        assert response.status_code == 403


@pytest.mark.django_db
class TestCurrentUser:
    def test_me_lists_permissions(self, client_for, project_user):
        response = client_for(project_user).get(f"{URL}me/")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == project_user.id
        assert Permissions.VIEW_DASHBOARD in body["permissions"]
        assert Permissions.READ_USERS not in body["permissions"]

    def test_me_requires_dashboard_permission(self, client_for, make_user):
        # Пользователь без роли из таблицы не получает ни одного права
        stranger = make_user("guest")
        assert client_for(stranger).get(f"{URL}me/").status_code == 403
