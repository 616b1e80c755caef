from django.urls import path

from app_design_maps.views import views as design_maps_view

app_name = "app_design_maps"

urlpatterns = [
    path(
        "design-maps/",
        design_maps_view.DesignMapCollectionAPIView.as_view(),
        name="design-map-collection",
    ),
    path(
        "design-maps/<int:map_id>/",
        design_maps_view.DesignMapDetailAPIView.as_view(),
        name="design-map-detail",
    ),
]
