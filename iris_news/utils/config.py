import os
import logging
from pathlib import Path
from typing import Optional, Dict, Any

import yaml
from dotenv import load_dotenv

DOTENV_PATH = Path(__file__).resolve().parent.parent.parent / ".env"
load_dotenv(DOTENV_PATH)

CONFIG_PATH = Path(__file__).parent.parent / "config.yaml"
CONFIG_ENV_VAR = "IRIS_NEWS_CONFIG"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/91.0.4472.124 Safari/537.36"
)

DEFAULT_CONFIG: Dict[str, Any] = {
    "debug": False,
    "listing_url": "https://iris.dive2ent.com/news/",
    "base_url": "https://iris.dive2ent.com",
    "user_agent": DEFAULT_USER_AGENT,
    "max_links": 5,
    "max_content_length": 1000,
    "min_fallback_title_length": 10,
    "listing_max_age": 1800,
    "article_max_age": 3600,
    "fetch_timeout": None,
    "timezone": None,
}


def setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # httpx logs every request at INFO
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(
            logging.DEBUG if debug else logging.WARNING
        )


def resolve_config_path(config_path: Optional[str] = None) -> Path:
    """Explicit path first, then $IRIS_NEWS_CONFIG, then the bundled file."""
    if config_path:
        return Path(config_path)
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return CONFIG_PATH


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the YAML config on top of the built-in defaults.

    Unknown keys are kept so callers can extend the file; keys missing
    from the file keep their default value.
    """
    path = resolve_config_path(config_path)
    with open(path, "r", encoding="utf-8") as f:
        yaml_config = yaml.safe_load(f) or {}

    if not isinstance(yaml_config, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    config = dict(DEFAULT_CONFIG)
    config.update(yaml_config)
    return config
