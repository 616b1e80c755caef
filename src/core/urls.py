from django.conf.urls.i18n import i18n_patterns
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path("i18n/", include("django.conf.urls.i18n")),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="docs"),
    path("api/v1/", include("app_users.urls")),
    path("api/v1/", include("app_projects.urls")),
    path("api/v1/", include("app_cracks.urls")),
    path("api/v1/", include("app_design_maps.urls")),
]

urlpatterns += i18n_patterns(
    path("admin/", admin.site.urls),
)

admin.site.site_header = "Crack Survey"
admin.site.site_title = "Crack Survey"
admin.site.index_title = "Администрирование"
