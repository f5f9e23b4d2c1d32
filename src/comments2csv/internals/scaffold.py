"""User directory structure creation and initialization.
Auto-creates ~/Documents/comments2csv/ with a README and a sample config.

On first run, this creates:
- ~/Documents/comments2csv/
  ├── README.md           (explains what each folder is for)
  ├── output/             (extracted CSV files land here by default)
  ├── logs/               (comments2csv.log lives here)
  ├── configs/            (sample_config.toml, plus any you save)
  └── manifests/          (one JSON record per extraction run)

Safe to call repeatedly - won't overwrite existing user files.
"""

import logging
from pathlib import Path

from comments2csv.internals.config.define_config import UserConfig
from comments2csv.internals.paths import (
    user_base_dir,
    user_configs_dir,
    user_log_dir_path,
    user_manifests_dir,
    user_output_dir,
)

log = logging.getLogger("comments2csv")

README_TEXT = """# comments2csv

This folder was created automatically.

- `output/`    CSV files written when you don't pass `--output`.
- `logs/`      `comments2csv.log`; attach it when reporting a problem.
- `configs/`   TOML settings files. `sample_config.toml` shows every option;
               use one with `comments2csv --config configs/my_settings.toml`.
- `manifests/` One JSON file per run recording inputs, output and outcome.
"""


def ensure_user_scaffold() -> None:
    """
    Create folder structure, README and sample config on first run.

    Safe to call every time - won't overwrite existing user files.
    """

    base = user_base_dir()

    # The paths.py helpers do the mkdir
    user_output_dir()
    user_log_dir_path()
    user_manifests_dir()
    configs = user_configs_dir()

    readme_path = base / "README.md"
    if not readme_path.exists():
        readme_path.write_text(README_TEXT, encoding="utf-8")
        log.info(f"Created new README at {readme_path}")

    _write_sample_config_if_missing(configs / "sample_config.toml")

    log.debug(f"User scaffold ready at {base}")


def _write_sample_config_if_missing(target: Path) -> None:
    """Save a config with placeholder inputs so users can copy and edit it."""
    if target.exists():
        log.debug(f"Sample config already exists (not overwriting): {target}")
        return

    sample = UserConfig(
        input_files=[Path("~/Documents/review/chapter1.docx"), Path("~/Documents/review/chapter2.docx")],
        output_csv=Path("~/Documents/review/comments.csv"),
    )
    sample.save_toml(target)
    log.info(f"Copied sample config: {target.name}")
