"""Pydantic models for table and column metadata."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DataType(str, Enum):
    """Semantic type tags for column data."""

    BOOL = "bool"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    DATE_TIME = "dateTime"
    TIME_SPAN = "timeSpan"
    BYTE_ARRAY = "byteArray"
    STRING = "string"
    # No short name in the emitted language
    DECIMAL = "decimal"
    GUID = "guid"
    OBJECT = "object"

    def __str__(self) -> str:
        return self.value


INTEGER_TYPES = frozenset(
    {DataType.INT8, DataType.INT16, DataType.INT32, DataType.INT64}
)
VALUE_TYPES = INTEGER_TYPES | {
    DataType.BOOL,
    DataType.FLOAT32,
    DataType.FLOAT64,
    DataType.DATE_TIME,
    DataType.TIME_SPAN,
    DataType.DECIMAL,
    DataType.GUID,
}
SIZED_TYPES = frozenset({DataType.STRING, DataType.BYTE_ARRAY})

# Size of unbounded text and binary columns
UNBOUNDED_SIZE = 2**31 - 1


class ColumnDescriptor(BaseModel):
    """Metadata of a single table column.

    Instances are immutable once obtained from a metadata source.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Column name")
    data_type: DataType | str = Field(..., description="Semantic type tag")
    is_key: bool = False
    is_auto_increment: bool = False
    is_unique: bool = False
    allow_null: bool = False
    size: int = Field(default=0, ge=0, description="Declared column size")

    @field_validator("data_type", mode="before")
    @classmethod
    def validate_data_type(cls, v: object) -> DataType | str:
        """Normalize known tags to DataType, keep unknown tags as text."""
        if isinstance(v, DataType):
            return v
        if not isinstance(v, str) or not v:
            raise ValueError("Data type must be a non-empty string tag")
        try:
            return DataType(v)
        except ValueError:
            return v

    @property
    def is_value_type(self) -> bool:
        """Whether the column maps to a value type (can take a '?' suffix)."""
        return self.data_type in VALUE_TYPES

    @property
    def is_reference_type(self) -> bool:
        return not self.is_value_type

    @property
    def is_identity(self) -> bool:
        """Whether this column is an auto-increment key named 'id'."""
        return self.is_key and self.is_auto_increment and self.name.lower() == "id"

    def __str__(self) -> str:
        return f"{self.name} {self.data_type}"


class TableSchema(BaseModel):
    """A table name with its columns in declaration order."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Table name")
    columns: tuple[ColumnDescriptor, ...] = Field(default_factory=tuple)

    @property
    def identity_column(self) -> ColumnDescriptor | None:
        """Return the first identity column, if the table has one."""
        for column in self.columns:
            if column.is_identity:
                return column
        return None

    @property
    def has_identity_column(self) -> bool:
        return self.identity_column is not None
