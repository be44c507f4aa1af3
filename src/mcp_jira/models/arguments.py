"""
Tool argument models.

Each tool decodes its loosely typed argument bag into one of these models
before any backend call is made. Validation is presence based: numbers and
strings are coerced where pydantic's lax mode allows it, and a ``null`` value
for a field is treated as if the field had not been sent at all.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from typing_extensions import Self

from ..exceptions import InvalidArgumentError, MissingArgumentError


class ToolArguments(BaseModel):
    """Base model for tool arguments."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    # Fields whose explicit ``null`` is meaningful and must survive decoding
    keep_null: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def drop_null_values(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {
                key: value
                for key, value in data.items()
                if value is not None or key in cls.keep_null
            }
        return data

    @classmethod
    def from_arguments(cls, tool_name: str, arguments: Any) -> Self:
        """
        Decode a raw argument bag for ``tool_name``.

        Args:
            tool_name: Name of the tool being invoked, used in error messages
            arguments: The arguments as delivered by the caller

        Returns:
            The validated model

        Raises:
            MissingArgumentError: If required fields are absent
            InvalidArgumentError: If a field is present but malformed
        """
        try:
            return cls.model_validate(arguments if arguments is not None else {})
        except ValidationError as e:
            errors = e.errors()
            missing = [
                ".".join(str(part) for part in error["loc"])
                for error in errors
                if error["type"] == "missing"
            ]
            if missing:
                raise MissingArgumentError(tool_name, missing) from e

            details = "; ".join(
                f"{'.'.join(str(part) for part in error['loc']) or 'arguments'}: {error['msg']}"
                for error in errors
            )
            raise InvalidArgumentError(
                f"Invalid arguments for {tool_name}: {details}", tool_name=tool_name
            ) from e


class ProjectRef(ToolArguments):
    key: str = Field(description="The project key")


class IssueTypeRef(ToolArguments):
    name: str = Field(description="The name of the issue type")


class ComponentRef(ToolArguments):
    name: str

    @model_validator(mode="before")
    @classmethod
    def accept_plain_name(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"name": data}
        return data


class JqlSearchArguments(ToolArguments):
    """Arguments of the JQL search tools."""

    jql: str
    number_of_results: int = 1


class CreateTicketArguments(ToolArguments):
    """Arguments of ``create_ticket``.

    ``description`` is required: omitting the key raises
    ``MissingArgumentError``. Sending an empty string is the only way to
    create an issue without a description; the field is then left out of
    the request.
    """

    project: ProjectRef
    summary: str
    description: str
    issuetype: IssueTypeRef
    parent: str | None = None


class ListProjectsArguments(ToolArguments):
    number_of_results: int = 1


class StatusListArguments(ToolArguments):
    number_of_results: int = 50


class DeleteTicketArguments(ToolArguments):
    issue_id_or_key: str = Field(alias="issueIdOrKey")


class EditTicketArguments(ToolArguments):
    """Arguments of ``edit_ticket``.

    Only fields present in ``model_fields_set`` are sent to Jira, except for
    ``description``, which falls back to a default text when omitted and is
    left untouched only when explicitly ``null``.
    """

    keep_null: ClassVar[frozenset[str]] = frozenset({"description"})

    issue_id_or_key: str = Field(alias="issueIdOrKey")
    summary: str | None = None
    description: str | None = None
    labels: list[str] | None = None
    parent: str | None = None
    priority: str | None = None
    components: list[ComponentRef] | None = None

    @model_validator(mode="before")
    @classmethod
    def accept_priority_object(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("priority"), dict):
            data = {**data, "priority": data["priority"].get("name")}
        return data


class AssignTicketArguments(ToolArguments):
    account_id: str = Field(alias="accountId")
    issue_id_or_key: str = Field(alias="issueIdOrKey")


class AssignableUsersArguments(ToolArguments):
    project_key: str
