from enum import Enum
from typing import Annotated, Any, Dict, Iterable, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import ErrorCode


class ColumnKind(str, Enum):
    """Column types understood by the reporting host."""

    NUMBER = "number"
    STRING = "string"


class TypeFidelity(str, Enum):
    """How a column type was determined."""

    INFERRED = "inferred"


class ColumnType(BaseModel):
    """Type descriptor for one result column."""

    name: str
    kind: ColumnKind = Field(..., alias="evidenceType")
    fidelity: TypeFidelity = Field(default=TypeFidelity.INFERRED, alias="typeFidelity")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class QueryResult(BaseModel):
    """Normalized result envelope handed back to the host.

    Row values are carried exactly as the driver decoded them; the column
    types are informational and never used to coerce values.
    """

    rows: List[Dict[str, Any]] = Field(default_factory=list)
    column_types: List[ColumnType] = Field(default_factory=list, alias="columnTypes")
    expected_row_count: int = Field(default=0, alias="expectedRowCount")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_rows(cls, rows: Iterable[Dict[str, Any]]) -> "QueryResult":
        """Create a QueryResult from list-of-dict rows, inferring column types."""
        from .inference import infer_column_types

        rows = list(rows)
        return cls(
            rows=rows,
            column_types=infer_column_types(rows),
            expected_row_count=len(rows),
        )

    def to_host(self) -> Dict[str, Any]:
        """Dump using the host's camelCase field names."""
        return self.model_dump(by_alias=True, mode="json")


class OptionSpec(BaseModel):
    """One field of the configuration schema a connector exposes to the host."""

    title: str
    description: Optional[str] = None
    type: Literal["string", "number", "boolean"] = "string"
    secret: bool = Field(default=False, description="Masked in every configuration surface.")
    required: bool = False

    model_config = ConfigDict(frozen=True)


class Reachable(BaseModel):
    """The datasource answered a health-check round-trip."""

    status: Literal["reachable"] = "reachable"
    server_version: Optional[str] = None

    def __bool__(self) -> bool:
        return True


class Unreachable(BaseModel):
    """The datasource could not be reached or rejected the health check."""

    status: Literal["unreachable"] = "unreachable"
    reason: str
    error_code: ErrorCode

    def __bool__(self) -> bool:
        return False


ConnectionStatus = Annotated[Union[Reachable, Unreachable], Field(discriminator="status")]
