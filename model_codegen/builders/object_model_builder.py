"""Model class builder for tables without an auto-increment 'id' key."""

from __future__ import annotations

from model_codegen.builders.model_builder import ModelBuilder
from model_codegen.core.schemas import ColumnDescriptor


class ObjectModelBuilder(ModelBuilder):
    """Renders the plain object representation of a table.

    The class implements ``IDbObject`` and declares plain fields. Instead of
    a multi-argument constructor it gets a fluent ``Initialize`` method that
    assigns every non-generated column and returns the instance.
    """

    def append_base_type(self) -> None:
        self.append_line(
            self.class_level,
            f"public partial class {self.table_name} : {self.template.plain_base_type}"
        )

    def process_key_column(self, column: ColumnDescriptor) -> None:
        self.process_column(column)

    def process_column(self, column: ColumnDescriptor) -> None:
        self.init_params.append(f"{self.get_nullable_type_name(column)} {column.name}")
        if not column.is_auto_increment:
            self.init_body.append(f"this.{column.name} = {column.name};")

    def get_column_body(self) -> str:
        return ";"

    def append_init_method(self) -> None:
        """Append the Initialize method once all columns are processed.

        Without assignable columns only the terminated declaration is emitted.
        """
        signature = (
            f"public {self.table_name} Initialize({', '.join(self.init_params)})"
        )
        self.append_line(0, "")
        if not self.init_body:
            self.append_line(self.class_level + 1, f"{signature};")
            return
        self.append_line(self.class_level + 1, signature)
        self.append_line(self.class_level + 1, "{")
        for line in self.init_body:
            self.append_line(self.class_level + 2, line)
        self.append_line(self.class_level + 2, "return this;")
        self.append_line(self.class_level + 1, "}")
