"""Project domain service."""

from datetime import date, datetime
from typing import Optional, Union

from bizdash.database.gateway import PendingWrite, RecordGateway
from bizdash.domain.entities import EntityKind, Project
from bizdash.domain.validation import (
    optional_text,
    parse_timestamp,
    require_text,
    validate_fields,
)

NAME_REQUIRED = "Project name is required."


class ProjectService:
    """Service for managing projects.

    The start date is stamped by the store when the project is created and
    cannot be edited. The end date is the delivery date shown on the calendar.
    """

    def __init__(self, gateway: RecordGateway):
        self.gateway = gateway

    def create_project(
        self,
        name: str,
        description: Optional[str] = None,
        end_date: Union[None, str, date, datetime] = None,
    ) -> PendingWrite:
        """Create a project.

        Args:
            name: Project name (required)
            description: Optional description
            end_date: Optional delivery date

        Raises:
            ValidationError: If the name is blank or the end date is invalid
        """
        checks = {"name": lambda: require_text("name", name, NAME_REQUIRED)}
        if end_date is not None:
            checks["end_date"] = lambda: parse_timestamp("end_date", end_date, "End date is invalid.")
        values = validate_fields(checks)

        fields = {"name": values["name"], "description": optional_text(description)}
        if "end_date" in values:
            fields["end_date"] = values["end_date"]
        pending = self.gateway.create(EntityKind.PROJECT, fields)
        self.gateway.notify("Project added", f"{values['name']} was added.")
        return pending

    def get_project(self, project_id: str) -> Optional[Project]:
        """Get project by ID."""
        return self.gateway.get(EntityKind.PROJECT, project_id)

    def list_projects(self) -> list[Project]:
        """List all projects of the user."""
        return self.gateway.list(EntityKind.PROJECT)

    def update_project(
        self,
        project_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> PendingWrite:
        """Update name and/or description. Fields left as None are unchanged.

        Raises:
            ValidationError: If a given name is blank
            StoreWriteFailure: From ``result()``, if the project does not exist
        """
        fields = {}
        if name is not None:
            fields.update(validate_fields({"name": lambda: require_text("name", name, NAME_REQUIRED)}))
        if description is not None:
            fields["description"] = optional_text(description)

        pending = self.gateway.update(EntityKind.PROJECT, project_id, fields)
        self.gateway.notify("Project updated", f"{fields.get('name', 'The project')} was updated.")
        return pending

    def set_end_date(
        self, project_id: str, end_date: Union[None, str, date, datetime]
    ) -> PendingWrite:
        """Set the delivery date, or clear it with None.

        Raises:
            ValidationError: If the date is invalid
            StoreWriteFailure: From ``result()``, if the project does not exist
        """
        value = None
        if end_date is not None:
            value = parse_timestamp("end_date", end_date, "End date is invalid.")

        pending = self.gateway.update(EntityKind.PROJECT, project_id, {"end_date": value})
        self.gateway.notify("Project updated", "The delivery date was updated.")
        return pending

    def delete_project(self, project_id: str) -> PendingWrite:
        """Delete a project.

        Raises:
            StoreWriteFailure: From ``result()``, if the project does not exist
        """
        pending = self.gateway.delete(EntityKind.PROJECT, project_id)
        self.gateway.notify("Project deleted", "The project was removed.")
        return pending
