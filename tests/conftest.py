"""Shared test fixtures and helpers."""

import shutil
import tempfile
from pathlib import Path
from unittest.mock import Mock

import pytest

from model_codegen.core.config import FileNamesConfig, TemplateConfig
from model_codegen.core.schemas import ColumnDescriptor, DataType, TableSchema
from model_codegen.sources.interfaces import ColumnMetadataSource


def column(name: str, data_type: DataType | str, **flags) -> ColumnDescriptor:
    """Create a column descriptor with keyword flags."""
    return ColumnDescriptor(name=name, data_type=data_type, **flags)


USER_COLUMNS = [
    column("id", DataType.INT64, is_key=True, is_auto_increment=True),
    column("name", DataType.STRING, size=50),
    column("active", DataType.BOOL),
    column("created", DataType.DATE_TIME),
]

STOCK_COLUMNS = [
    column("code", DataType.STRING, is_key=True, size=20),
    column("qty", DataType.INT32),
]


@pytest.fixture
def template():
    """Template settings independent of the environment."""
    return TemplateConfig()


@pytest.fixture
def file_names():
    return FileNamesConfig()


@pytest.fixture
def user_table():
    """Table with an auto-increment 'id' key."""
    return TableSchema(name="User", columns=tuple(USER_COLUMNS))


@pytest.fixture
def stock_table():
    """Table keyed by a non-generated string code."""
    return TableSchema(name="Stock", columns=tuple(STOCK_COLUMNS))


@pytest.fixture
def mock_source():
    """Mock column metadata source serving the User and Stock tables."""
    tables = {"User": USER_COLUMNS, "Stock": STOCK_COLUMNS}
    mock = Mock(spec=ColumnMetadataSource)
    mock.get_table_names.return_value = list(tables)
    mock.get_columns.side_effect = lambda name: list(tables[name])
    return mock


@pytest.fixture
def temp_output_dir():
    """Create a temporary output directory."""
    temp_dir = Path(tempfile.mkdtemp())
    yield temp_dir
    shutil.rmtree(temp_dir)


@pytest.fixture
def make_column():
    """Provide the column factory for tests."""
    return column
