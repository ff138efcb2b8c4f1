"""Builders for the legacy emission flavour.

The legacy flavour predates the attribute-rich output: classes carry no
``using`` preamble or namespace, the identity variant is an abstract class
over ``LinqObjectModel<T>`` with abstract properties and an abstract
``Initialize``, and no constructor is emitted.
"""

from __future__ import annotations

from model_codegen.builders.model_builder import ModelBuilder
from model_codegen.core.schemas import ColumnDescriptor, DataType

LEGACY_TYPE_NAMES: dict[DataType, str] = {
    DataType.STRING: "string",
    DataType.INT32: "int",
    DataType.INT16: "short",
    DataType.INT64: "long",
    DataType.FLOAT32: "float",
    DataType.FLOAT64: "double",
    DataType.DATE_TIME: "DateTime",
    DataType.BOOL: "bool",
}

LEGACY_RUNTIME_NAMES: dict[DataType, str] = {
    DataType.INT8: "System.Byte",
    DataType.TIME_SPAN: "System.TimeSpan",
    DataType.BYTE_ARRAY: "System.Byte[]",
    DataType.DECIMAL: "System.Decimal",
    DataType.GUID: "System.Guid",
    DataType.OBJECT: "System.Object",
}


def get_legacy_type_name(data_type: DataType | str) -> str:
    if data_type in LEGACY_TYPE_NAMES:
        return LEGACY_TYPE_NAMES[data_type]  # type: ignore[index]
    return LEGACY_RUNTIME_NAMES.get(data_type, str(data_type))  # type: ignore[arg-type]


class LegacyModelBuilder(ModelBuilder):
    """Abstract identity class with abstract members.

    Key columns are inherited from the base model and are not declared.
    """

    class_level = 0

    def append_header(self) -> None:
        pass

    def append_footer(self) -> None:
        self.append_line(self.class_level, "}")

    def get_abstract(self) -> str:
        return " abstract "

    def append_base_type(self) -> None:
        self.append_line(
            self.class_level,
            f"public{self.get_abstract()}class {self.table_name}"
            f" : {self.template.legacy_base_type}<{self.table_name}>",
        )

    def build_key_column(self, column: ColumnDescriptor) -> None:
        pass

    def build_column(self, column: ColumnDescriptor) -> None:
        self.append_line(
            self.class_level + 1,
            f"public{self.get_abstract()}{get_legacy_type_name(column.data_type)}"
            f" {column.name}{self.get_column_body()}",
        )

    def process_column(self, column: ColumnDescriptor) -> None:
        self.init_params.append(
            f"{get_legacy_type_name(column.data_type)} {column.name}"
        )

    def append_init_method(self) -> None:
        if not self.init_params:
            return
        self.append_line(
            self.class_level + 1,
            f"public{self.get_abstract()}{self.table_name}"
            f" Initialize({', '.join(self.init_params)}){self.get_init_terminator()}",
        )
        self.append_init_method_body()

    def get_init_terminator(self) -> str:
        return ";"

    def append_init_method_body(self) -> None:
        pass

    def append_constructor(self) -> None:
        pass


class LegacyObjectModelBuilder(LegacyModelBuilder):
    """Concrete plain class with fields and a fluent ``Initialize``."""

    def get_abstract(self) -> str:
        return " "

    def append_base_type(self) -> None:
        self.append_line(
            self.class_level,
            f"public class {self.table_name} : {self.template.plain_base_type}",
        )

    def build_key_column(self, column: ColumnDescriptor) -> None:
        self.append_line(self.class_level + 1, self.key_marker(column))
        self.build_column(column)

    def process_key_column(self, column: ColumnDescriptor) -> None:
        if not column.is_auto_increment:
            self.process_column(column)

    def process_column(self, column: ColumnDescriptor) -> None:
        super().process_column(column)
        self.init_body.append(f"this.{column.name} = {column.name};")

    def get_column_body(self) -> str:
        return ";"

    def get_init_terminator(self) -> str:
        return ""

    def append_init_method_body(self) -> None:
        self.append_line(self.class_level + 1, "{")
        for line in self.init_body:
            self.append_line(self.class_level + 2, line)
        self.append_line(self.class_level + 2, "return this;")
        self.append_line(self.class_level + 1, "}")
