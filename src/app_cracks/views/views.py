from app_cracks.views.import_view.views import CrackImportAPIView
from app_cracks.views.list_view.views import CrackListAPIView


class CrackCollectionAPIView(CrackListAPIView, CrackImportAPIView):
    """/api/v1/cracks/: GET — список, POST — импорт, DELETE — удаление"""

    required_permissions = {
        **CrackListAPIView.required_permissions,
        **CrackImportAPIView.required_permissions,
    }
