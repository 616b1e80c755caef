# path: src/app_cracks/views/import_view/services.py
import logging
import zipfile
from typing import Any, Dict, List, Tuple

import openpyxl
from django.conf import settings
from django.core.files.uploadedfile import UploadedFile
from django.db import transaction
from openpyxl.utils.exceptions import InvalidFileException

from app_cracks.models import CrackIdentification
from app_cracks.repositories import CrackRepository
from app_cracks.services.block_resolver import BlockResolver
from app_cracks.utils.row_classifier import (
    EXPECTED_COLUMNS,
    CrackRowData,
    RowClassifier,
    RowKind,
)
from app_projects.models import Project

from .exceptions import (
    FileProcessingException,
    InvalidFileFormatException,
    InvalidFileStructureException,
    NoValidRowsException,
)

logger = logging.getLogger(__name__)


class CrackImportResult:
    """DTO для результата импорта"""

    def __init__(
        self,
        deleted: int = 0,
        imported: int = 0,
        errors: List[Dict[str, Any]] = None,
        processed_rows: int = 0,
        total_rows: int = 0,
    ):
        self.deleted = deleted
        self.imported = imported
        self.errors = errors or []
        self.processed_rows = processed_rows
        self.total_rows = total_rows

    def to_dict(self) -> Dict[str, Any]:
        return {
            "deleted": self.deleted,
            "imported": self.imported,
            "errors": self.errors,
            "processedRows": self.processed_rows,
            "totalRows": self.total_rows,
        }


class FileValidator:
    """Валидатор файлов импорта"""

    ALLOWED_EXTENSIONS = [".xlsx", ".xlsm"]

    @classmethod
    def validate(cls, file: UploadedFile) -> None:
        cls._validate_extension(file)
        cls._validate_size(file)

    @classmethod
    def _validate_extension(cls, file: UploadedFile) -> None:
        file_name = (file.name or "").lower()
        if not any(file_name.endswith(ext) for ext in cls.ALLOWED_EXTENSIONS):
            raise InvalidFileFormatException(
                "Invalid file format. Allowed: {extensions}".format(
                    extensions=", ".join(cls.ALLOWED_EXTENSIONS)
                )
            )

    @classmethod
    def _validate_size(cls, file: UploadedFile) -> None:
        max_size = settings.CRACK_IMPORT_MAX_FILE_SIZE
        if file.size > max_size:
            raise InvalidFileFormatException(
                "File exceeds {max_size}MB".format(max_size=max_size // (1024 * 1024))
            )


class WorkbookReader:
    """Первый лист книги как список строк (каждая — список сырых значений)"""

    def read(self, file) -> List[List[Any]]:
        try:
            workbook = openpyxl.load_workbook(file, read_only=True, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError):
            raise InvalidFileFormatException(
                "Unable to read workbook. Make sure it is a valid Excel file."
            )

        try:
            if not workbook.worksheets:
                raise InvalidFileStructureException("no sheet")
            sheet = workbook.worksheets[0]
            rows = [list(row) for row in sheet.iter_rows(values_only=True)]
            # Ширина листа: короткие строки добиваются None до самой длинной
            width = max((len(row) for row in rows), default=0)
            return [row + [None] * (width - len(row)) for row in rows]
        except InvalidFileStructureException:
            raise
        except Exception as e:
            raise FileProcessingException(
                "Error while reading file: {error}".format(error=str(e))
            )
        finally:
            workbook.close()


class CrackImportProcessor:
    """Проход по строкам листа: классификация, нормализация, сбор ошибок"""

    def __init__(self, project: Project):
        self.project = project
        self.block_resolver = BlockResolver(project)
        self.classifier = RowClassifier(self.block_resolver.resolve)

    def process(
        self, rows: List[List[Any]]
    ) -> Tuple[List[CrackRowData], List[Dict[str, Any]], int]:
        candidates: List[CrackRowData] = []
        errors: List[Dict[str, Any]] = []
        processed_rows = 0

        for row_number, row in enumerate(rows[1:], start=2):
            processed_rows += 1
            decision = self.classifier.classify(row)

            if decision.kind is RowKind.STOP:
                logger.info(
                    "Project %s: blank run reached at row %s, stopping scan",
                    self.project.id,
                    row_number,
                )
                break
            if decision.kind is RowKind.ERROR:
                errors.append({"row": row_number, "error": decision.error})
            elif decision.kind is RowKind.DATA:
                candidates.append(decision.data)

        return candidates, errors, processed_rows


class CrackImportService:
    """Импорт листа обследования: полная замена трещин проекта"""

    def __init__(self):
        self.file_validator = FileValidator()
        self.reader = WorkbookReader()
        self.repository = CrackRepository()

    def import_cracks(self, project: Project, file: UploadedFile) -> CrackImportResult:
        self.file_validator.validate(file)
        rows = self.reader.read(file)
        return self.import_rows(project, rows)

    def import_rows(self, project: Project, rows: List[List[Any]]) -> CrackImportResult:
        if len(rows) < 2:
            raise InvalidFileStructureException("empty sheet")
        if len(rows[0]) < EXPECTED_COLUMNS:
            raise InvalidFileStructureException("unexpected header format")

        logger.info("Project %s: importing crack sheet with %s rows", project.id, len(rows) - 1)

        # Блоки, созданные при проходе, откатываются вместе с заменой
        with transaction.atomic():
            processor = CrackImportProcessor(project)
            candidates, errors, processed_rows = processor.process(rows)

            if not candidates:
                raise NoValidRowsException(errors)

            deleted = self.repository.delete_where(project=project)
            created = self.repository.bulk_create(
                [
                    CrackIdentification(project=project, **candidate.as_model_kwargs())
                    for candidate in candidates
                ]
            )

        logger.info(
            "Project %s: replaced %s cracks with %s (%s row errors, %s new blocks)",
            project.id,
            deleted,
            len(created),
            len(errors),
            processor.block_resolver.created,
        )

        return CrackImportResult(
            deleted=deleted,
            imported=len(created),
            errors=errors,
            processed_rows=processed_rows,
            total_rows=len(rows) - 1,
        )
