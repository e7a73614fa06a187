import os
from datetime import date, datetime
from typing import Any, Optional

import yaml

from .models import AggregationConfig

TOKEN_ENV_KEY = "token_env"


def _resolve_token(section: dict[str, Any]) -> dict[str, Any]:
    """Read the token from the environment variable named by ``token_env``."""
    resolved = dict(section)
    env_name = resolved.pop(TOKEN_ENV_KEY, None)
    if not resolved.get("token") and env_name:
        token = (os.getenv(env_name) or "").strip()
        resolved["token"] = token or None
    return resolved


def build_config(raw: Optional[dict[str, Any]]) -> AggregationConfig:
    raw = dict(raw or {})
    for platform in ("github", "gitlab", "bitbucket"):
        if raw.get(platform):
            raw[platform] = _resolve_token(raw[platform])
    return AggregationConfig.model_validate(raw)


def load_config(config_path: str = "config/settings.yaml") -> AggregationConfig:
    with open(config_path, "r") as f:
        config = yaml.safe_load(f)
    return build_config(config)


def parse_date(date_str: str) -> date:
    return datetime.strptime(date_str, "%Y-%m-%d").date()
