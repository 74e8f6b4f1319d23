"""
Configuration loading with validation.

Supports YAML and JSON formats with JSON Schema validation.
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, TextIO, Type

import jsonschema
import yaml

from process_flow.config.network_config import DeviceConfig, NetworkConfig, StreamConfig
from process_flow.core.enums import DeviceType
from process_flow.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    Configuration loader with schema validation.

    Example:
        loader = ConfigLoader()
        config = loader.load_yaml("examples/configs/demo_network.yaml")
        network = NetworkBuilder(config).build()
    """

    def __init__(self, schema_path: Path = None):
        """
        Initialize configuration loader.

        Args:
            schema_path: Path to JSON schema file (uses default if None)
        """
        if schema_path is None:
            schema_path = Path(__file__).parent / "schemas" / "network_schema_v1.json"

        self.schema_path = schema_path
        self.schema = self._load_schema()

    def _load_schema(self) -> Dict[str, Any]:
        """Load JSON schema from file."""
        try:
            with open(self.schema_path, 'r') as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not load schema from {self.schema_path}: {e}")
            return {}

    def load_yaml(self, config_path: Path | str) -> NetworkConfig:
        """
        Load configuration from YAML file.

        Raises:
            ConfigurationError: If file not found, unparsable or invalid
        """
        return self.from_dict(self._read(config_path, yaml.safe_load, yaml.YAMLError, "YAML"))

    def load_json(self, config_path: Path | str) -> NetworkConfig:
        """Load configuration from JSON file."""
        return self.from_dict(self._read(config_path, json.load, json.JSONDecodeError, "JSON"))

    @staticmethod
    def _read(
        config_path: Path | str,
        parser: Callable[[TextIO], Any],
        parse_error: Type[Exception],
        label: str
    ) -> Any:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            try:
                return parser(f)
            except parse_error as e:
                raise ConfigurationError(f"Failed to parse {label}: {e}") from e

    def from_dict(self, config_dict: Dict[str, Any]) -> NetworkConfig:
        """
        Convert dictionary to NetworkConfig with validation.

        Args:
            config_dict: Configuration dictionary from YAML/JSON

        Returns:
            NetworkConfig instance

        Raises:
            ConfigurationError: If validation fails
        """
        if not isinstance(config_dict, dict):
            raise ConfigurationError(
                f"Configuration must be a mapping, got {type(config_dict).__name__}"
            )

        # JSON Schema validation
        if self.schema:
            try:
                jsonschema.validate(instance=config_dict, schema=self.schema)
                logger.debug("JSON schema validation passed")
            except jsonschema.ValidationError as e:
                raise ConfigurationError(f"Schema validation failed: {e.message}") from e

        try:
            config = self._build_network_config(config_dict)
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigurationError(f"Failed to build NetworkConfig: {e}") from e

        # Dataclass validation
        try:
            config.validate()
        except ValueError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

        logger.info(
            f"Loaded configuration: {config.name} v{config.version} "
            f"({len(config.streams)} streams, {len(config.devices)} devices)"
        )
        return config

    def _build_network_config(self, d: Dict[str, Any]) -> NetworkConfig:
        """Build NetworkConfig from dictionary (manual construction)."""
        streams = [StreamConfig(**s) for s in d.get('streams', [])]

        devices = []
        for dev in d.get('devices', []):
            devices.append(DeviceConfig(
                id=dev['id'],
                type=DeviceType(dev['type']),
                inputs_count=dev.get('inputs_count'),
                double=dev.get('double'),
                inputs=list(dev.get('inputs', [])),
                outputs=list(dev.get('outputs', [])),
            ))

        return NetworkConfig(
            name=d.get('name', "Flow Network"),
            version=str(d.get('version', "1.0")),
            streams=streams,
            devices=devices,
        )


def load_network_config(config_path: Path | str) -> NetworkConfig:
    """
    Load network configuration, picking the format from the file suffix.

    Args:
        config_path: Path to a .yaml, .yml or .json file

    Returns:
        Validated NetworkConfig

    Raises:
        ConfigurationError: If the file is missing, unsupported or invalid
    """
    config_path = Path(config_path)
    loader = ConfigLoader()

    suffix = config_path.suffix.lower()
    if suffix in ('.yaml', '.yml'):
        return loader.load_yaml(config_path)
    if suffix == '.json':
        return loader.load_json(config_path)

    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")
    raise ConfigurationError(f"Unsupported configuration format: {config_path.suffix}")
