"""User configuration dataclass and validation."""

# region imports
from __future__ import annotations

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    # Python 3.10
    import tomli as tomllib  # type: ignore[no-redef]

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

import tomli_w  # For writing (no stdlib equivalent yet)

from comments2csv.internals import constants
from comments2csv.internals.paths import resolve_path, user_output_dir
from comments2csv.models import PackageFamily
from comments2csv.processing.format_detector import validate_batch

# endregion

log = logging.getLogger("comments2csv")


# region class UserConfig
@dataclass
class UserConfig:
    """All user-configurable settings for comments2csv."""

    # region class fields

    # region Input/Output
    # Files to extract from, in selection order. Either .docx files, or a single .pptx.
    input_files: list[Path] = field(default_factory=list)

    output_csv: Optional[Path] = None  # Exact destination; overwritten if it exists
    output_folder: Optional[Path] = None  # Where timestamped output goes when output_csv is unset
    # endregion

    # region Processing options
    normalize_dates: bool = True  # Reformat parseable timestamps; off = raw attribute values
    date_format: str = constants.DEFAULT_DATE_FORMAT
    # endregion

    # endregion

    # region post_init
    def __post_init__(self) -> None:
        """Convert string inputs of path fields into Path objects."""
        if isinstance(self.input_files, (str, Path)):
            self.input_files = [self.input_files]
        self.input_files = [Path(p) for p in self.input_files]
        if self.output_csv is not None:
            self.output_csv = Path(self.output_csv)
        if self.output_folder is not None:
            self.output_folder = Path(self.output_folder)

    # endregion

    # region from_toml
    @classmethod
    def from_toml(cls, path: Path) -> UserConfig:
        """
        Load configuration from a TOML file.

        The TOML file should have flat key-value pairs matching the UserConfig field names.

        Example TOML:
            input_files = ["~/reviews/chapter1.docx", "~/reviews/chapter2.docx"]
            output_csv = "~/reviews/comments.csv"
            normalize_dates = true

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If TOML is invalid or the path is a folder
        """
        path = Path(path)
        if not path.exists():
            error_msg = f"Config file not found: {path}"
            log.error(error_msg)
            raise FileNotFoundError(error_msg)
        if path.is_dir():
            error_msg = f"This is a directory (folder), not a toml file: {path}"
            log.error(error_msg)
            raise ValueError(error_msg)

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            error_msg = f"Invalid TOML syntax in {path}. Check for missing or mismatched quote marks."
            log.error(error_msg)
            raise ValueError(error_msg) from e
        except PermissionError as e:
            error_msg = f"We hit a permission error when trying to access {path}"
            log.error(error_msg)
            raise ValueError(error_msg) from e

        if not data:
            log.warning(
                f"Config toml file loaded as empty, so no UserConfig fields were set from: {path}."
            )

        valid_fields = {f.name for f in fields(cls)}
        unexpected = set(data.keys()) - valid_fields

        if unexpected:
            log.warning(
                f"Ignoring unexpected fields in TOML config: {', '.join(sorted(unexpected))}. "
                f"Check for typos. Valid fields: {', '.join(sorted(valid_fields))}"
            )
            data = {k: v for k, v in data.items() if k in valid_fields}

        # A single path is a common hand-edited mistake; accept it.
        if isinstance(data.get("input_files"), str):
            data["input_files"] = [data["input_files"]]

        return cls(**data)

    # endregion

    # region instance getters/helpers

    # region family property
    @property
    def family(self) -> PackageFamily:
        """Package family inferred from the inputs; raises if the batch is invalid."""
        return validate_batch(self.input_files)

    # endregion

    # region get real Path objects from stored cfg values
    def get_input_files(self) -> list[Path]:
        """Resolved input paths, in selection order."""
        return [resolve_path(p) for p in self.input_files]

    def get_output_csv(self) -> Path | None:
        """Explicit destination CSV, or None when a timestamped name should be generated."""
        if self.output_csv:
            return resolve_path(self.output_csv)
        return None

    def get_output_folder(self) -> Path:
        """Folder for generated output names, with fallback to the user output dir."""
        if self.output_folder:
            return resolve_path(self.output_folder)
        return user_output_dir()

    # endregion

    # region save_toml
    def save_toml(self, path: Path) -> None:
        """Save configuration to a TOML file."""
        path = Path(path)

        if path.exists() and path.is_dir():
            error_msg = f"Cannot save config: path is a directory, not a file: {path}."
            log.error(error_msg)
            raise ValueError(error_msg)

        path.parent.mkdir(parents=True, exist_ok=True)

        # TOML can't serialize None
        data: dict[str, Any] = {
            k: v for k, v in self.config_to_dict().items() if v is not None
        }

        try:
            log.info(f"Attempting to save to {path}")
            with open(path, "wb") as f:
                tomli_w.dump(data, f)
            log.info(f"Saved toml config file at {path}")
        except PermissionError as e:
            error_msg = f"Permission denied writing to: {path}"
            log.error(error_msg)
            raise PermissionError(error_msg) from e
        except OSError as e:
            error_msg = f"Failed to write config file to {path}"
            log.error(error_msg)
            raise OSError(error_msg) from e

    # endregion

    # region config_to_dict
    def config_to_dict(self) -> dict[str, Any]:
        """Convert config to a TOML-serializable dict with forward-slash paths."""
        data: dict[str, Any] = {
            "input_files": [p.as_posix() for p in self.input_files],
            "output_csv": self.output_csv.as_posix() if self.output_csv else None,
            "output_folder": (
                self.output_folder.as_posix() if self.output_folder else None
            ),
            "normalize_dates": self.normalize_dates,
            "date_format": self.date_format,
        }

        log.debug(f"Config as dict: \n{data}")

        return data

    # endregion

    # endregion

    # region instance validation methods
    def pre_run_check(self) -> None:
        """
        Validate everything needed for an extraction run.
        Combines intrinsic and external validation in one place.
        """
        self.validate()
        self._validate_input_files()
        self._validate_output_location()

    def validate(self) -> None:
        """
        Validate intrinsic config values (no filesystem access).

        Enforces the batch rule, so a bad selection is rejected before any input is opened.
        """
        if not isinstance(self.normalize_dates, bool):
            log.error(
                f"normalize_dates must be a boolean, got {type(self.normalize_dates).__name__}"
            )
            raise ValueError(
                f"normalize_dates must be a boolean, got {type(self.normalize_dates).__name__}"
            )

        if not isinstance(self.date_format, str) or not self.date_format.strip():
            log.error(f"date_format must be a non-empty string, got {self.date_format!r}")
            raise ValueError(
                f"date_format must be a non-empty strftime string, got {self.date_format!r}"
            )

        # Raises InvalidBatchError / ValueError with a user-facing message
        validate_batch(self.input_files)

        if self.output_csv is not None and self.output_csv.suffix.lower() != ".csv":
            log.warning(
                f"Output file {self.output_csv} does not end in .csv; writing CSV content anyway."
            )

    def _validate_input_files(self) -> None:
        """Helper: every input must exist and be a file."""
        for input_path in self.get_input_files():
            if not input_path.exists():
                error_msg = f"Input file not found: {input_path}"
                log.error(error_msg)
                raise FileNotFoundError(error_msg)
            if not input_path.is_file():
                error_msg = f"Input path is not a file: {input_path}"
                log.error(error_msg)
                raise ValueError(error_msg)

    def _validate_output_location(self) -> None:
        """Helper: output destination must be a file path, output folder must be a folder."""
        output_csv = self.get_output_csv()
        if output_csv is not None:
            if output_csv.is_dir():
                error_msg = f"Output path is a directory, not a file: {output_csv}"
                log.error(error_msg)
                raise ValueError(error_msg)
            return

        output_folder = self.get_output_folder()
        if output_folder.exists() and not output_folder.is_dir():
            error_msg = f"Output path exists but is not a directory: {output_folder}"
            log.error(error_msg)
            raise ValueError(error_msg)

    # endregion


# endregion
