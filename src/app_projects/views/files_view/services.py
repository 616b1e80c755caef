# path: src/app_projects/views/files_view/services.py
import logging

from django.conf import settings
from django.core.files.uploadedfile import UploadedFile
from django.db import transaction
from django.db.models.fields.files import FieldFile

from app_projects.models import Project, ProjectFile

from .exceptions import (
    FileStorageException,
    FileTooLargeException,
    ProjectFileNotFoundError,
    StoredFileMissingException,
    UnsupportedFileTypeException,
)

logger = logging.getLogger(__name__)


class ProjectFileService:
    """Загрузка, выдача и удаление вложений проекта"""

    ALLOWED_MIME_PREFIXES = (
        "image/",
        "application/pdf",
        "text/plain",
        "text/csv",
        "application/vnd.ms-excel",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )

    def upload(self, project: Project, upload: UploadedFile, title: str, user) -> ProjectFile:
        if upload.size > settings.PROJECT_FILE_MAX_SIZE:
            raise FileTooLargeException()

        mime_type = upload.content_type or "application/octet-stream"
        if not mime_type.startswith(self.ALLOWED_MIME_PREFIXES):
            raise UnsupportedFileTypeException()

        record = ProjectFile(
            project=project,
            title=title.strip(),
            original_name=upload.name,
            mime_type=mime_type,
            size=upload.size,
            uploaded_by=user if user.is_authenticated else None,
        )

        # Файл пишется в хранилище до создания строки в БД
        try:
            record.file.save(upload.name, upload, save=False)
        except OSError:
            logger.exception("Failed to store upload %s for project %s", upload.name, project.id)
            raise FileStorageException()

        with transaction.atomic():
            record.save()

        logger.info(
            "Stored file %s (%s bytes) for project %s", record.file.name, upload.size, project.id
        )
        return record

    def get(self, file_id: int) -> ProjectFile:
        record = ProjectFile.objects.filter(pk=file_id).first()
        if record is None:
            raise ProjectFileNotFoundError()
        return record

    def open_for_download(self, record: ProjectFile) -> FieldFile:
        if not record.file or not record.file.storage.exists(record.file.name):
            logger.warning("File %s missing in storage (record %s)", record.file.name, record.id)
            raise StoredFileMissingException()
        return record.file.open("rb")

    def delete(self, file_id: int) -> dict:
        record = self.get(file_id)
        deleted = {"id": record.id, "projectId": record.project_id}
        record.delete()
        try:
            record.file.delete(save=False)
        except OSError:
            logger.warning("Could not remove %s for project %s", record.file.name, deleted["projectId"])
        return deleted
