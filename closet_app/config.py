"""Configuration helpers for the Virtual Closet service."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_SERVICE_NAME = "virtual-closet"
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class ClosetConfig:
    """Configuration values for the Virtual Closet service.

    Only runtime concerns live here. Matching thresholds and the named-color
    palette are fixed constants of the engine and are deliberately absent.
    """

    service_name: str = DEFAULT_SERVICE_NAME
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080
    json_logs: bool = True
    environment: str | None = None

    @classmethod
    def from_env(cls) -> "ClosetConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and is merged with environment variables, which take precedence.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("CLOSET_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        service_name = get_value("service_name", DEFAULT_SERVICE_NAME)
        log_level = get_value("log_level", "INFO")
        host = get_value("host", "0.0.0.0")
        json_logs = str(get_value("json_logs", "true")).strip().lower() not in _FALSE_VALUES
        raw_port = get_value("port", "8080")
        try:
            port = int(raw_port or 8080)
        except ValueError as exc:
            raise ValueError(f"Invalid port '{raw_port}' in configuration") from exc

        return cls(
            service_name=str(service_name or DEFAULT_SERVICE_NAME),
            log_level=str(log_level or "INFO").upper(),
            host=str(host or "0.0.0.0"),
            port=port,
            json_logs=json_logs,
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal flat ``key: value`` YAML file."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config


__all__ = ["ClosetConfig", "DEFAULT_SERVICE_NAME"]
