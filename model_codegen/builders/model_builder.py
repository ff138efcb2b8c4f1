"""Model class builder for tables with an auto-increment 'id' key."""

from __future__ import annotations

from model_codegen.core.config import TemplateConfig, config
from model_codegen.core.exceptions import BuilderStateError
from model_codegen.core.schemas import (
    INTEGER_TYPES,
    SIZED_TYPES,
    ColumnDescriptor,
    DataType,
    TableSchema,
)
from model_codegen.logger import logger

TYPE_NAMES: dict[DataType, str] = {
    DataType.BOOL: "bool",
    DataType.INT8: "byte",
    DataType.INT16: "short",
    DataType.INT32: "int",
    DataType.INT64: "long",
    DataType.FLOAT32: "float",
    DataType.FLOAT64: "double",
    DataType.DATE_TIME: "DateTime",
    DataType.TIME_SPAN: "Time",
    DataType.BYTE_ARRAY: "byte[]",
    DataType.STRING: "string",
}

# Fully-qualified runtime names for tags without a short name
RUNTIME_TYPE_NAMES: dict[DataType, str] = {
    DataType.DECIMAL: "System.Decimal",
    DataType.GUID: "System.Guid",
    DataType.OBJECT: "System.Object",
}


def get_type_name(data_type: DataType | str) -> str:
    """Resolve the declared type name for a column data type.

    Unmapped types fall back to their runtime name. The result may not
    compile, which is accepted.

    Args:
        data_type: Semantic type tag of the column

    Returns:
        Type name to emit
    """
    if data_type in TYPE_NAMES:
        return TYPE_NAMES[data_type]  # type: ignore[index]
    fallback = RUNTIME_TYPE_NAMES.get(data_type, str(data_type))  # type: ignore[arg-type]
    logger.warning("No short type name for '%s', emitting '%s'", data_type, fallback)
    return fallback


class ModelBuilder:
    """Renders the class text for one table.

    This builder emits the identity representation: the class derives from
    the self-referential generic base (``DbObjectModel<Table>``) and columns
    are declared as get/set properties. Subclasses override the hook methods
    to change the base type, key handling and column bodies.

    A builder accumulates state for a single table and renders once.
    """

    # Indentation level of the class declaration
    class_level = 1

    def __init__(
        self, table: TableSchema, template: TemplateConfig | None = None
    ) -> None:
        """Initialize the builder.

        Args:
            table: Table to render
            template: Template settings (defaults to the loaded configuration)
        """
        self.table = table
        self.template = template or config.template
        self.result: list[str] = []
        self.init_params: list[str] = []
        self.init_body: list[str] = []
        self._built = False

    @property
    def table_name(self) -> str:
        return self.table.name

    def indent(self, level: int) -> str:
        return self.template.indent * level

    def append_line(self, level: int, content: str) -> None:
        """Append one line of output at the given indentation level."""
        self.result.append(f"{self.indent(level)}{content}" if content else "")

    def build(self) -> str:
        """Render the class declaration for the table.

        Returns:
            The generated source text

        Raises:
            BuilderStateError: If the builder has already rendered
        """
        if self._built:
            raise BuilderStateError(
                f"Builder for table '{self.table_name}' has already been used"
            )
        self._built = True

        self.append_header()
        self.append_base_type()
        self.append_line(self.class_level, "{")
        for column in self.table.columns:
            if column.is_key:
                self.build_key_column(column)
                self.process_key_column(column)
            else:
                self.build_column(column)
                self.process_column(column)
        self.append_init_method()
        self.append_constructor()
        self.append_footer()
        return "\n".join(self.result) + "\n"

    def append_header(self) -> None:
        """Append the using block and open the namespace."""
        for using in self.template.usings:
            self.append_line(0, f"using {using};")
        self.append_line(0, "")
        self.append_line(0, f"namespace {self.template.namespace}")
        self.append_line(0, "{")

    def append_footer(self) -> None:
        """Close the class and the namespace."""
        self.append_line(self.class_level, "}")
        self.append_line(0, "}")

    def append_base_type(self) -> None:
        self.append_line(
            self.class_level,
            f"public partial class {self.table_name}"
            f" : {self.template.identity_base_type}<{self.table_name}>",
        )

    def key_marker(self, column: ColumnDescriptor) -> str:
        return "[DbKey]" if column.is_auto_increment else "[DbKey(IsDbGenerate = false)]"

    def build_key_column(self, column: ColumnDescriptor) -> None:
        self.append_line(self.class_level + 1, self.key_marker(column))
        self.build_column(column)

    def build_column(self, column: ColumnDescriptor) -> None:
        """Append the attribute markers and declaration of a column."""
        if column.allow_null and column.is_reference_type:
            self.append_line(self.class_level + 1, "[AllowNull]")
        if column.data_type in SIZED_TYPES and column.size < self.template.length_limit:
            self.append_line(self.class_level + 1, f"[Length({column.size})]")
        if column.is_unique:
            self.append_line(self.class_level + 1, "[Index(UNIQUE = true)]")

        type_name = self.get_nullable_type_name(column)
        self.append_line(
            self.class_level + 1,
            f"public {type_name} {column.name}{self.get_column_body()}",
        )

    def get_nullable_type_name(self, column: ColumnDescriptor) -> str:
        type_name = get_type_name(column.data_type)
        if column.allow_null and column.is_value_type:
            type_name += "?"
        return type_name

    def get_column_body(self) -> str:
        return " { get; set; }"

    def process_key_column(self, column: ColumnDescriptor) -> None:
        pass

    def process_column(self, column: ColumnDescriptor) -> None:
        pass

    def append_init_method(self) -> None:
        pass

    def default_value(self, column: ColumnDescriptor) -> str:
        """Return the constructor default literal for a column, or ''."""
        if column.data_type == DataType.STRING:
            return '""'
        if column.data_type in INTEGER_TYPES:
            return "0"
        if column.data_type == DataType.BOOL:
            return "true"
        if column.data_type == DataType.DATE_TIME:
            return self.template.now_sentinel
        return ""

    def append_constructor(self) -> None:
        """Append the zero-argument constructor setting column defaults.

        Only a column literally named 'id' is skipped, whatever its key flags.
        """
        self.append_line(0, "")
        self.append_line(self.class_level + 1, f"public {self.table_name}()")
        self.append_line(self.class_level + 1, "{")
        for column in self.table.columns:
            if column.name.lower() == "id":
                continue
            value = self.default_value(column)
            if value:
                self.append_line(self.class_level + 2, f"this.{column.name} = {value};")
        self.append_line(self.class_level + 1, "}")
