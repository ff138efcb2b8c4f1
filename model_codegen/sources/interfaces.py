from typing import Protocol

from model_codegen.core.schemas import ColumnDescriptor


class ColumnMetadataSource(Protocol):
    def get_table_names(self) -> list[str]: ...

    def get_columns(self, table_name: str) -> list[ColumnDescriptor]: ...
