"""File system operations for output generation."""

from __future__ import annotations

from pathlib import Path

from model_codegen.core.config import FileNamesConfig, TemplateConfig, config


class OutputManager:
    """Manages file system operations for output generation.

    This class handles creating the output directory and writing the model
    file and its companion partial file for each generated table.
    """

    def __init__(
        self,
        output_dir: Path = config.output_dir,
        file_names: FileNamesConfig | None = None,
        template: TemplateConfig | None = None,
    ) -> None:
        """Initialize the output manager.

        Args:
            output_dir: Directory for generated model files
            file_names: File name settings (defaults to the loaded configuration)
            template: Template settings used for the companion file
        """
        self.output_dir = Path(output_dir)
        self.file_names = file_names or config.file_names
        self.template = template or config.template

    def create_output_structure(self) -> None:
        """Create the output directory if it doesn't exist.

        Raises:
            PermissionError: If unable to create directories
        """
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except Exception as e:
            raise PermissionError(
                f"Failed to create output directory {self.output_dir}: {e}"
            ) from e

    def write_model(self, table_name: str, contents: str) -> Path:
        """Write the generated model text, replacing any previous file.

        Args:
            table_name: Table the model was generated for
            contents: Generated source text

        Returns:
            Path where the file was written

        Raises:
            PermissionError: If unable to write file
        """
        output_path = self.get_model_path(table_name)
        self.create_output_structure()

        try:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(contents)
            return output_path

        except Exception as e:
            raise PermissionError(
                f"Failed to write model to {output_path}: {e}"
            ) from e

    def write_partial(self, table_name: str) -> Path | None:
        """Create the empty partial class file for user extensions.

        The file is only written when it does not exist yet, so edits made to
        it survive regeneration.

        Args:
            table_name: Table the model was generated for

        Returns:
            Path of the new file, or None if it already existed

        Raises:
            PermissionError: If unable to write file
        """
        output_path = self.get_partial_path(table_name)
        if output_path.exists():
            return None

        self.create_output_structure()
        try:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(self.render_partial(table_name))
            return output_path

        except Exception as e:
            raise PermissionError(
                f"Failed to write partial class to {output_path}: {e}"
            ) from e

    def render_partial(self, table_name: str) -> str:
        """Render the empty partial declaration for a table."""
        indent = self.template.indent
        lines = [f"using {using};" for using in self.template.usings]
        lines += [
            "",
            f"namespace {self.template.namespace}",
            "{",
            f"{indent}public partial class {table_name}",
            f"{indent}{{",
            f"{indent}}}",
            "}",
        ]
        return "\n".join(lines) + "\n"

    def get_model_path(self, table_name: str) -> Path:
        return self.output_dir / f"{table_name}{self.file_names.model_suffix}"

    def get_partial_path(self, table_name: str) -> Path:
        return self.output_dir / f"{table_name}{self.file_names.partial_suffix}"
