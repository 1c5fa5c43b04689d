"""Pydantic models for Cloud Print API responses.

This module defines the data structures used by the client to parse
API responses into typed objects. Wire quirks (camelCase names, the string
``"1"`` success marker, nullable lists) are absorbed here so callers only see
plain Python types.
"""

import typing
from enum import StrEnum

import pydantic
from pydantic import AliasPath


class JobStatus(StrEnum):
    """Job states reported by Cloud Print."""

    QUEUED = "QUEUED"
    SUBMITTED = "SUBMITTED"
    HELD = "HELD"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"
    ERROR = "ERROR"
    ABORTED = "ABORTED"
    # Returned when a job id is not in the listed jobs
    UNKNOWN = "UNKNOWN"


UNKNOWN_JOB_STATUS = JobStatus.UNKNOWN


def _none_as_empty_list(v: typing.Any) -> typing.Any:
    return [] if v is None else v


class CloudPrintModel(pydantic.BaseModel):
    """Base model accepting both wire aliases and Python field names."""

    model_config = pydantic.ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class Printer(CloudPrintModel):
    """A printer registered with the account.

    `owner_name` is optional; shared printers frequently omit it.
    """

    id: str
    name: str
    display_name: str | None = pydantic.Field(None, alias="displayName")
    owner_name: str | None = pydantic.Field(None, alias="ownerName")
    connection_status: str | None = pydantic.Field(None, alias="connectionStatus")


class PrinterSearchResponse(CloudPrintModel):
    """Body of the printer search endpoint."""

    printers: typing.Annotated[list[Printer], pydantic.BeforeValidator(_none_as_empty_list)] = pydantic.Field(
        default_factory=list
    )


class Job(CloudPrintModel):
    """A submitted print job.

    Ids are compared as strings; a record without a status reads as ``""``.
    """

    id: str
    status: str = ""
    title: str | None = None
    printer_id: str | None = pydantic.Field(None, alias="printerid")
    printer_name: str | None = pydantic.Field(None, alias="printerName")
    create_time: str | None = pydantic.Field(None, alias="createTime")

    @pydantic.field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: typing.Any) -> typing.Any:
        """Job ids sometimes arrive as numbers."""
        return str(v) if isinstance(v, int) else v

    @pydantic.field_validator("status", mode="before")
    @classmethod
    def missing_status(cls, v: typing.Any) -> typing.Any:
        return "" if v is None else v


def _identified_jobs(v: typing.Any) -> typing.Any:
    # Records without an id can never match a lookup
    if v is None:
        return []
    if isinstance(v, list):
        return [j for j in v if not isinstance(j, dict) or j.get("id") is not None]
    return v


class JobListResponse(CloudPrintModel):
    """Body of the jobs endpoint. Only the first page is represented."""

    jobs: typing.Annotated[list[Job], pydantic.BeforeValidator(_identified_jobs)] = pydantic.Field(
        default_factory=list
    )


class SubmitResponse(CloudPrintModel):
    """Result of a print job submission.

    The service reports success as the string ``"1"``; it is exposed as a bool.
    """

    success: bool = False
    job_id: str | None = pydantic.Field(None, validation_alias=AliasPath("job", "id"))
    error_code: str | None = pydantic.Field(None, alias="errorCode")
    message: str | None = None

    @pydantic.field_validator("success", mode="before")
    @classmethod
    def parse_success_marker(cls, v: typing.Any) -> bool:
        """Only ``"1"``, ``1`` and ``True`` count as success."""
        if isinstance(v, bool):
            return v
        return str(v) == "1"

    @pydantic.field_validator("error_code", "job_id", mode="before")
    @classmethod
    def stringify(cls, v: typing.Any) -> typing.Any:
        """Error codes and job ids sometimes arrive as numbers."""
        return str(v) if isinstance(v, int) else v


def _split_scope(v: typing.Any) -> typing.Any:
    return v.split() if isinstance(v, str) else v


class TokenResponse(CloudPrintModel):
    """OAuth token endpoint response.

    Only `access_token` is required. Optional fields the provider sends in an
    unexpected shape are dropped rather than failing the exchange.
    """

    access_token: str
    expires_in: int | None = None
    token_type: str | None = None
    refresh_token: str | None = None
    scope: typing.Annotated[list[str], pydantic.BeforeValidator(_split_scope)] = pydantic.Field(
        default_factory=list
    )

    @pydantic.field_validator("expires_in", mode="before")
    @classmethod
    def parse_expires_in(cls, v: typing.Any) -> int | None:
        """Accepts ``3599``, ``"3599"`` and ``"3599.5"``."""
        if v is None or isinstance(v, bool):
            return None
        try:
            return int(float(v))
        except (TypeError, ValueError, OverflowError):
            return None

    @pydantic.field_validator("token_type", "refresh_token", "scope", mode="wrap")
    @classmethod
    def drop_unexpected(
        cls, v: typing.Any, handler: pydantic.ValidatorFunctionWrapHandler, info: pydantic.ValidationInfo
    ) -> typing.Any:
        try:
            return handler(v)
        except pydantic.ValidationError:
            return [] if info.field_name == "scope" else None
