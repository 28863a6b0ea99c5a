"""Configuration management for listing-stats."""

from dataclasses import dataclass, field
from pathlib import Path

from listing_stats.exceptions import ConfigurationError

DEFAULT_SHEET_NAME = "Imoveis"


@dataclass
class ColumnLayout:
    """Zero-based worksheet column indices of the fields the report reads."""

    id_column: int = 0  # A
    sale_price_column: int = 11  # L
    rent_price_column: int = 12  # M
    status_column: int = 31  # AF

    @property
    def width(self) -> int:
        """Minimum row width that holds every configured column."""
        return max(
            self.id_column,
            self.sale_price_column,
            self.rent_price_column,
            self.status_column,
        ) + 1

    def validate(self) -> None:
        """Raise ConfigurationError if any index is negative."""
        for name, value in vars(self).items():
            if value < 0:
                raise ConfigurationError(f"Column index {name} must be >= 0, got {value}")


@dataclass
class ReportConfig:
    """Main configuration for a report run."""

    file_path: Path | None = None
    sheet_name: str = DEFAULT_SHEET_NAME
    short_output: bool = False
    quote_short: bool = True
    output_path: Path | None = None
    header_rows: int = 1
    layout: ColumnLayout = field(default_factory=ColumnLayout)
    log_level: str = "INFO"
    log_format: str = "standard"

    def validate(self) -> None:
        """Check the configuration before a run."""
        if self.file_path is None:
            raise ConfigurationError("No workbook given (use --file-path or LISTING_FILE)")
        if self.header_rows < 0:
            raise ConfigurationError(f"header_rows must be >= 0, got {self.header_rows}")
        if self.log_format not in ("standard", "json"):
            raise ConfigurationError(f"Unknown log format: {self.log_format}")
        self.layout.validate()

    @classmethod
    def from_env(cls) -> "ReportConfig":
        """Create config from environment variables."""
        import os

        defaults = ColumnLayout()
        layout = ColumnLayout(
            id_column=_env_int("LISTING_ID_COLUMN", defaults.id_column),
            sale_price_column=_env_int("LISTING_SALE_COLUMN", defaults.sale_price_column),
            rent_price_column=_env_int("LISTING_RENT_COLUMN", defaults.rent_price_column),
            status_column=_env_int("LISTING_STATUS_COLUMN", defaults.status_column),
        )

        file_path = os.getenv("LISTING_FILE")

        return cls(
            file_path=Path(file_path) if file_path else None,
            sheet_name=os.getenv("LISTING_SHEET", DEFAULT_SHEET_NAME),
            short_output=os.getenv("LISTING_SHORT_OUTPUT", "false").lower() == "true",
            header_rows=_env_int("LISTING_HEADER_ROWS", 1),
            layout=layout,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _env_int(name: str, default: int) -> int:
    import os

    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
