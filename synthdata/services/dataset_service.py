# services/dataset_service.py
from typing import List, Optional, Tuple
from loguru import logger
from sqlalchemy.orm import Session

from synthdata.config import settings
from synthdata.enums.dataset import DatasetSource, DatasetStatus, DataType
from synthdata.models.dataset import Dataset
from synthdata.models.project import Project
from synthdata.models.template import Template
from synthdata.utils.metrics import metrics_manager

CSV_CONTENT_TYPE = "text/csv"
SENSITIVE_MARKERS = ("id", "name", "phone")


def is_sensitive(column_name: str) -> bool:
    """Flags a column whose header mentions an identifier, a name or a phone number."""
    lowered = column_name.lower()
    return any(marker in lowered for marker in SENSITIVE_MARKERS)


def derive_schema(text: str) -> Tuple[List[dict], int]:
    """
    Builds a naive schema from the header row of a comma-delimited file.

    Every column is typed "string"; the row count is the number of non-blank
    lines minus the header. Quoting, embedded delimiters and ragged rows are
    not inspected.
    """
    rows = [row for row in text.split("\n") if row.strip()]
    if not rows:
        raise ValueError("The CSV file is empty")

    schema = [
        {"name": header.strip(), "type": "string", "sensitive": is_sensitive(header)}
        for header in rows[0].split(",")
    ]
    return schema, len(rows) - 1


def default_dataset_name(filename: Optional[str]) -> str:
    return (filename or "dataset").replace(".csv", "")


class DatasetService:

    def __init__(self, db: Session):
        self.db = db

    def get_project(self, user_id: str, project_id: str) -> Optional[Project]:
        return (
            self.db.query(Project)
            .filter(Project.id == project_id, Project.user_id == user_id)
            .first()
        )

    def get_dataset(self, user_id: str, dataset_id: str) -> Optional[Dataset]:
        return (
            self.db.query(Dataset)
            .join(Project, Dataset.project_id == Project.id)
            .filter(Dataset.id == dataset_id, Project.user_id == user_id)
            .first()
        )

    def list_datasets(self, user_id: str, project_id: Optional[str] = None) -> List[Dataset]:
        query = (
            self.db.query(Dataset)
            .join(Project, Dataset.project_id == Project.id)
            .filter(Project.user_id == user_id)
        )
        if project_id:
            query = query.filter(Dataset.project_id == project_id)
        return query.order_by(Dataset.created_at.desc()).all()

    def create_from_upload(
        self,
        project: Project,
        filename: Optional[str],
        content: bytes,
        name: Optional[str] = None,
        description: str = "",
    ) -> Dataset:
        text = content.decode("utf-8", errors="replace")
        schema, row_count = derive_schema(text)
        logger.info(f"Derived {len(schema)} columns and {row_count} rows from '{filename}'")

        return self._insert(
            project=project,
            name=name or default_dataset_name(filename),
            description=description,
            schema=schema,
            row_count=row_count,
            source=DatasetSource.file,
        )

    def create_from_template(self, project: Project, template: Template) -> Dataset:
        return self._insert(
            project=project,
            name=f"{template.name} Template",
            description=template.description,
            schema=list(template.schema_json or []),
            row_count=settings.TEMPLATE_ROW_COUNT,
            source=DatasetSource.template,
        )

    def _insert(self, project, name, description, schema, row_count, source) -> Dataset:
        dataset = Dataset(
            project_id=project.id,
            name=name,
            description=description or "",
            schema_json=schema,
            row_count=row_count,
            data_type=DataType.tabular.value,
            status=DatasetStatus.uploaded.value,
            source=source.value,
        )
        self.db.add(dataset)
        self.db.commit()
        self.db.refresh(dataset)
        metrics_manager.DATASETS_CREATED.inc()
        logger.info(f"Dataset '{dataset.name}' ({dataset.id}) created in project {project.id}")
        return dataset
