"""Tests for the identity model builder."""

import pytest

from model_codegen.builders.model_builder import ModelBuilder, get_type_name
from model_codegen.core.config import TemplateConfig
from model_codegen.core.exceptions import BuilderStateError
from model_codegen.core.schemas import DataType, TableSchema

EXPECTED_USER = """\
using Leafing.Data.Definition;
using System;
using System.Collections.Generic;
using System.Linq;
using System.Web;

namespace Models
{
    public partial class User : DbObjectModel<User>
    {
        [DbKey]
        public long id { get; set; }
        [Length(50)]
        public string name { get; set; }
        public bool active { get; set; }
        public DateTime created { get; set; }

        public User()
        {
            this.name = "";
            this.active = true;
            this.created = DateTime.Now;
        }
    }
}
"""


def build(table, template):
    return ModelBuilder(table, template).build()


class TestModelBuilder:
    """Test suite for ModelBuilder."""

    def test_build_user_table(self, user_table, template):
        """Test the full text generated for an identity table."""
        assert build(user_table, template) == EXPECTED_USER

    def test_constructor_skips_id_only(self, user_table, template):
        """Test that the constructor defaults every column except 'id'."""
        result = build(user_table, template)
        constructor = result.split("public User()")[1]

        assert 'this.name = "";' in constructor
        assert "this.active = true;" in constructor
        assert "this.created = DateTime.Now;" in constructor
        assert "this.id" not in constructor

    def test_constructor_defaults_non_id_key(self, make_column, template):
        """Test that a key not literally named 'id' still gets a default."""
        table = TableSchema(
            name="Order",
            columns=(
                make_column("id", DataType.INT32, is_key=True, is_auto_increment=True),
                make_column("number", DataType.INT32, is_key=True),
            ),
        )

        result = build(table, template)

        assert "this.number = 0;" in result
        assert "[DbKey(IsDbGenerate = false)]" in result

    def test_id_name_check_is_case_insensitive(self, make_column, template):
        table = TableSchema(
            name="Tag",
            columns=(
                make_column("ID", DataType.INT32, is_key=True, is_auto_increment=True),
                make_column("label", DataType.STRING, size=10),
            ),
        )

        result = build(table, template)

        assert "this.ID" not in result
        assert 'this.label = "";' in result

    @pytest.mark.parametrize(
        "data_type,expected",
        [
            (DataType.INT8, "0"),
            (DataType.INT16, "0"),
            (DataType.INT64, "0"),
            (DataType.STRING, '""'),
            (DataType.BOOL, "true"),
        ],
    )
    def test_constructor_default_values(self, make_column, template, data_type, expected):
        table = TableSchema(name="T", columns=(make_column("value", data_type, size=10),))

        assert f"this.value = {expected};" in build(table, template)

    @pytest.mark.parametrize(
        "data_type",
        [DataType.FLOAT64, DataType.TIME_SPAN, DataType.BYTE_ARRAY, DataType.GUID],
    )
    def test_no_default_for_other_types(self, make_column, template, data_type):
        table = TableSchema(name="T", columns=(make_column("value", data_type, size=10),))

        assert "this.value" not in build(table, template)

    def test_nullable_value_type_gets_question_mark(self, make_column, template):
        table = TableSchema(
            name="T",
            columns=(make_column("amount", DataType.FLOAT64, allow_null=True),),
        )

        result = build(table, template)

        assert "public double? amount { get; set; }" in result
        assert "[AllowNull]" not in result

    def test_nullable_reference_type_gets_allow_null(self, make_column, template):
        table = TableSchema(
            name="T",
            columns=(make_column("note", DataType.STRING, allow_null=True, size=200),),
        )

        lines = build(table, template).splitlines()
        index = lines.index("        [AllowNull]")

        assert lines[index + 1] == "        [Length(200)]"
        assert lines[index + 2] == "        public string note { get; set; }"

    @pytest.mark.parametrize("data_type", [DataType.STRING, DataType.BYTE_ARRAY])
    def test_length_marker_below_limit(self, make_column, template, data_type):
        table = TableSchema(name="T", columns=(make_column("v", data_type, size=32767),))

        result = build(table, template)

        assert result.count("[Length(") == 1
        assert "[Length(32767)]" in result

    @pytest.mark.parametrize("size", [32768, 2**31 - 1])
    @pytest.mark.parametrize("data_type", [DataType.STRING, DataType.BYTE_ARRAY])
    def test_no_length_marker_at_or_above_limit(
        self, make_column, template, data_type, size
    ):
        table = TableSchema(name="T", columns=(make_column("v", data_type, size=size),))

        assert "[Length(" not in build(table, template)

    def test_no_length_marker_for_non_sized_types(self, make_column, template):
        table = TableSchema(name="T", columns=(make_column("v", DataType.INT32, size=4),))

        assert "[Length(" not in build(table, template)

    def test_unique_marker(self, make_column, template):
        table = TableSchema(
            name="T",
            columns=(make_column("email", DataType.STRING, is_unique=True, size=100),),
        )

        assert "        [Index(UNIQUE = true)]\n" in build(table, template)

    def test_configured_template(self, user_table):
        """Test namespace, usings and base type come from the template."""
        template = TemplateConfig(
            namespace="Shop.Models", usings=["System"], identity_base_type="Entity"
        )

        result = build(user_table, template)

        assert result.startswith("using System;\n\nnamespace Shop.Models\n{\n")
        assert "public partial class User : Entity<User>" in result

    def test_builder_cannot_be_reused(self, user_table, template):
        builder = ModelBuilder(user_table, template)
        builder.build()

        with pytest.raises(BuilderStateError, match="already been used"):
            builder.build()


class TestGetTypeName:
    """Test suite for the type lookup table."""

    @pytest.mark.parametrize(
        "data_type,expected",
        [
            (DataType.BOOL, "bool"),
            (DataType.INT8, "byte"),
            (DataType.INT16, "short"),
            (DataType.INT32, "int"),
            (DataType.INT64, "long"),
            (DataType.FLOAT32, "float"),
            (DataType.FLOAT64, "double"),
            (DataType.DATE_TIME, "DateTime"),
            (DataType.TIME_SPAN, "Time"),
            (DataType.BYTE_ARRAY, "byte[]"),
            (DataType.STRING, "string"),
        ],
    )
    def test_mapped_types(self, data_type, expected):
        assert get_type_name(data_type) == expected

    def test_unmapped_types_fall_back_to_runtime_name(self):
        assert get_type_name(DataType.DECIMAL) == "System.Decimal"
        assert get_type_name(DataType.GUID) == "System.Guid"

    def test_unknown_tag_is_emitted_as_is(self, make_column, template):
        table = TableSchema(
            name="T", columns=(make_column("shape", "Geometry", allow_null=True),)
        )

        result = build(table, template)

        assert "public Geometry shape { get; set; }" in result
        assert "[AllowNull]" in result
