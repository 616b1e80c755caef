import logging
from typing import Any, Dict, Optional

from django.conf import settings
from django.core.files.uploadedfile import UploadedFile
from django.db import IntegrityError, transaction

from app_projects.models import Project

from .exceptions import (
    DesignImageStorageException,
    DesignImageTooLargeException,
    DesignImageTypeException,
    ProjectNameTakenException,
    ProjectValidationException,
)

logger = logging.getLogger(__name__)

# Поле JSON → поле модели
FIELD_MAP = {
    "name": "name",
    "clientName": "client_name",
    "location": "location",
    "description": "description",
}


class ProjectService:
    """Создание, изменение и удаление проектов вместе с чертежом"""

    def _check_image(self, image: Optional[UploadedFile]) -> None:
        if image is None:
            return
        if not (image.content_type or "").startswith("image/"):
            raise DesignImageTypeException()
        if image.size > settings.PROJECT_FILE_MAX_SIZE:
            raise DesignImageTooLargeException()

    def _clean(self, data: Dict[str, Any]) -> Dict[str, str]:
        fields = {
            FIELD_MAP[key]: value.strip()
            for key, value in data.items()
            if key in FIELD_MAP and value is not None
        }
        if "name" in fields and not fields["name"]:
            raise ProjectValidationException("Name required")
        if "client_name" in fields and not fields["client_name"]:
            raise ProjectValidationException("Client name required")
        return fields

    def _store_image(self, project: Project, image: UploadedFile) -> None:
        try:
            project.design_image.save(image.name, image, save=False)
        except OSError:
            logger.exception("Failed to store design image for project %s", project.id)
            raise DesignImageStorageException()

    def _remove_stored(self, names, project_id: int) -> None:
        storage = Project._meta.get_field("design_image").storage
        for name in names:
            try:
                storage.delete(name)
            except OSError:
                logger.warning("Could not remove %s for project %s", name, project_id)

    def create(self, data: Dict[str, Any], image: Optional[UploadedFile] = None) -> Project:
        fields = self._clean(data)
        if "name" not in fields:
            raise ProjectValidationException("Name required")
        if "client_name" not in fields:
            raise ProjectValidationException("Client name required")
        self._check_image(image)

        try:
            with transaction.atomic():
                project = Project.objects.create(**fields)
                # Путь чертежа строится от id, поэтому файл пишется после create()
                if image is not None:
                    self._store_image(project, image)
                    project.save(update_fields=["design_image", "updated_at"])
        except IntegrityError:
            raise ProjectNameTakenException()

        logger.info("Created project %s (%s)", project.id, project.name)
        return project

    def update(
        self, project: Project, data: Dict[str, Any], image: Optional[UploadedFile] = None
    ) -> Project:
        fields = self._clean(data)
        if not fields and image is None:
            raise ProjectValidationException("Nothing to update")
        self._check_image(image)

        old_image = project.design_image.name if project.design_image else None
        for attr, value in fields.items():
            setattr(project, attr, value)

        try:
            with transaction.atomic():
                if image is not None:
                    self._store_image(project, image)
                project.save()
        except IntegrityError:
            raise ProjectNameTakenException()

        if image is not None and old_image:
            self._remove_stored([old_image], project.id)
        return project

    def delete(self, project: Project) -> Dict[str, int]:
        project_id = project.id
        stored = [f.file.name for f in project.files.all() if f.file]
        if project.design_image:
            stored.append(project.design_image.name)

        project.delete()
        self._remove_stored(stored, project_id)
        logger.info("Deleted project %s with %s stored files", project_id, len(stored))
        return {"id": project_id}
