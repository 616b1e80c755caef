from django.urls import path

from app_users.views.users_view import views as users_view

app_name = "app_users"

urlpatterns = [
    path(
        "users/",
        users_view.UserListCreateAPIView.as_view(),
        name="user-list",
    ),
    path(
        "users/me/",
        users_view.CurrentUserAPIView.as_view(),
        name="user-me",
    ),
    path(
        "users/<int:user_id>/",
        users_view.UserDetailAPIView.as_view(),
        name="user-detail",
    ),
]
