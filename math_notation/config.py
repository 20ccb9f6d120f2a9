"""
Configuration classes for the math notation core
"""

from dataclasses import dataclass
from typing import Optional
from pathlib import Path


@dataclass
class NotesConfig:
    """Main configuration."""
    # General settings
    verbose: bool = False
    debug: bool = False

    # Builder defaults
    default_matrix_rows: int = 2
    default_matrix_cols: int = 2
    default_vector_size: int = 3
    default_vector_orientation: str = "col"  # col, row
    default_integral_variable: str = "x"

    # Output options
    sanitize_output: bool = True

    # Paths
    symbol_config_path: Optional[Path] = None

    def __post_init__(self):
        """Initialize paths."""
        if self.symbol_config_path:
            self.symbol_config_path = Path(self.symbol_config_path)


@dataclass
class ExportConfig:
    """Note export configuration."""
    # JSON settings
    indent: int = 2
    ensure_ascii: bool = False

    # LaTeX settings
    document_class: str = "article"
    latex_packages: tuple = ("amsmath", "amssymb")
