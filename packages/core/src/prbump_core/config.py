import os
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_CONFIG: dict = {
    "page_size": 100,  # commits requested per API page
    "commit_threshold": 250,  # commits analysed; the comment warns when a PR has more
    "tag_prefix": "",  # stripped from tags before parsing, e.g. "release-"; "v" is always tolerated
    "classifier": {
        "minor_types": ["feat"],
        "major_types": [],
    },
}


def load_config(config_path: str = ".prbump.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .prbump.yml in the current directory
      3. CLI argument overrides
    """
    config = {
        **DEFAULT_CONFIG,
        "classifier": {key: list(value) for key, value in DEFAULT_CONFIG["classifier"].items()},
    }

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        config.update(file_config)

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    # Resolve credentials from environment variables
    config["github_token"] = os.environ.get("GITHUB_TOKEN")

    return config
