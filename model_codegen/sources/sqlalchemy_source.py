"""Column metadata reflected from a live database with SQLAlchemy."""

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine, inspect, types
from sqlalchemy.engine import Engine
from sqlalchemy.exc import NoSuchTableError, SQLAlchemyError

from model_codegen.core.exceptions import MetadataSourceError, TableNotFoundError
from model_codegen.core.schemas import UNBOUNDED_SIZE, ColumnDescriptor, DataType
from model_codegen.logger import logger

BINARY_TYPES = (types.LargeBinary, types.BINARY, types.VARBINARY)

# Checked in order, subclasses before their bases
_TYPE_RULES: list[tuple[type[types.TypeEngine[Any]], DataType]] = [
    (types.Boolean, DataType.BOOL),
    (types.SmallInteger, DataType.INT16),
    (types.BigInteger, DataType.INT64),
    (types.Integer, DataType.INT32),
    (types.REAL, DataType.FLOAT32),
    (types.Float, DataType.FLOAT64),
    (types.Numeric, DataType.DECIMAL),
    (types.DateTime, DataType.DATE_TIME),
    (types.Date, DataType.DATE_TIME),
    (types.Interval, DataType.TIME_SPAN),
    (types.Time, DataType.TIME_SPAN),
    (types.LargeBinary, DataType.BYTE_ARRAY),
    (types.BINARY, DataType.BYTE_ARRAY),
    (types.VARBINARY, DataType.BYTE_ARRAY),
    (types.Uuid, DataType.GUID),
    (types.String, DataType.STRING),
]


def map_column_type(column_type: types.TypeEngine[Any]) -> DataType | str:
    """Map a reflected SQLAlchemy type to a semantic type tag.

    Args:
        column_type: Type instance reported by the inspector

    Returns:
        The matching DataType, or the type's own name when nothing matches
    """
    if type(column_type).__name__.upper() == "TINYINT":
        return DataType.INT8
    for sa_type, data_type in _TYPE_RULES:
        if isinstance(column_type, sa_type):
            return data_type
    return type(column_type).__name__


def column_size(column_type: types.TypeEngine[Any]) -> int:
    if isinstance(column_type, BINARY_TYPES + (types.String,)):
        length = getattr(column_type, "length", None)
        return length if length is not None else UNBOUNDED_SIZE
    return 0


class SQLAlchemyColumnSource:
    """Reflects tables and columns through ``sqlalchemy.inspect``.

    Works with any database SQLAlchemy has a dialect for. Key, auto-increment
    and uniqueness flags come from the primary key constraint, the column
    ``autoincrement`` reflection and single-column unique constraints/indexes.
    """

    def __init__(self, database_url: str | None = None, engine: Engine | None = None):
        """Initialize with a database URL or an existing engine.

        Args:
            database_url: SQLAlchemy URL of the database to inspect
            engine: Engine to use instead of creating one from the URL
        """
        if engine is None:
            if not database_url:
                raise ValueError("Either database_url or engine is required")
            engine = create_engine(database_url, echo=False)
        self.engine = engine
        self.inspector = inspect(engine)

    def get_table_names(self) -> list[str]:
        try:
            return self.inspector.get_table_names()
        except SQLAlchemyError as e:
            raise MetadataSourceError(str(self.engine.url), [str(e)]) from e

    def get_columns(self, table_name: str) -> list[ColumnDescriptor]:
        """Reflect the columns of a table in declaration order.

        Raises:
            TableNotFoundError: If the table does not exist
            MetadataSourceError: If reflection fails
        """
        try:
            reflected = self.inspector.get_columns(table_name)
            pk_columns = self.inspector.get_pk_constraint(table_name).get(
                "constrained_columns", []
            )
            unique_columns = self._get_unique_columns(table_name)
        except NoSuchTableError as e:
            raise TableNotFoundError(table_name) from e
        except SQLAlchemyError as e:
            raise MetadataSourceError(str(self.engine.url), [str(e)]) from e

        columns: list[ColumnDescriptor] = []
        for col in reflected:
            data_type = map_column_type(col["type"])
            is_key = col["name"] in pk_columns
            columns.append(
                ColumnDescriptor(
                    name=col["name"],
                    data_type=data_type,
                    is_key=is_key,
                    is_auto_increment=is_key
                    and self._is_auto_increment(col, data_type, pk_columns),
                    is_unique=col["name"] in unique_columns,
                    allow_null=not is_key and bool(col.get("nullable", True)),
                    size=column_size(col["type"]),
                )
            )

        logger.debug("Reflected %d column(s) for %s", len(columns), table_name)
        return columns

    def _get_unique_columns(self, table_name: str) -> set[str]:
        unique: set[str] = set()
        for constraint in self.inspector.get_unique_constraints(table_name):
            if len(constraint["column_names"]) == 1:
                unique.add(constraint["column_names"][0])
        for index in self.inspector.get_indexes(table_name):
            names = index["column_names"]
            if index.get("unique") and len(names) == 1 and names[0] is not None:
                unique.add(names[0])
        return unique

    def _is_auto_increment(
        self, col: dict[str, Any], data_type: DataType | str, pk_columns: list[str]
    ) -> bool:
        """Decide auto-increment the way SQLAlchemy's ``"auto"`` setting does.

        An explicit reflected flag wins; otherwise a single-column integer
        primary key is auto-incrementing.
        """
        flag = col.get("autoincrement", "auto")
        if isinstance(flag, bool):
            return flag
        return len(pk_columns) == 1 and data_type in (
            DataType.INT16,
            DataType.INT32,
            DataType.INT64,
        )
