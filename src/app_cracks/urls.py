from django.urls import path

from app_cracks.views.views import CrackCollectionAPIView

app_name = "app_cracks"

urlpatterns = [
    path(
        "cracks/",
        CrackCollectionAPIView.as_view(),
        name="crack-collection",
    ),
]
