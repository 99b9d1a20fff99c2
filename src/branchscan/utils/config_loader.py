"""
Configuration loader for BranchScan.

This module provides functionality for loading and managing
configuration settings.

"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, TypeVar, cast

import yaml
from xdg.BaseDirectory import xdg_config_home

from branchscan.config import DEFAULT_CONFIG, OUTPUT_FORMATS

logger = logging.getLogger(__name__)

T = TypeVar("T")

ENV_PREFIX = "BRANCHSCAN_"

# Minimum number of parts in an environment variable name after the prefix
MIN_ENV_VAR_PARTS = 2

LOCAL_CONFIG_NAME = ".branchscan.yml"


class ConfigError(Exception):
	"""Exception raised for configuration errors."""


class ConfigLoader:
	"""
	Loads configuration for BranchScan.

	Values are layered: built-in defaults, then a YAML file, then
	``BRANCHSCAN_<SECTION>_<KEY>`` environment variables.

	"""

	def __init__(self, config_file: str | None = None) -> None:
		"""
		Initialize the configuration loader.

		Args:
		        config_file: Path to configuration file (optional)

		"""
		self.config: dict[str, Any] = {}
		self.config_file = self._resolve_config_file(config_file)
		self.load_config()

	def _resolve_config_file(self, config_file: str | None = None) -> Path | None:
		"""
		Resolve the configuration file path.

		If a config file is specified, use that. Otherwise, look in standard locations:
		1. ./.branchscan.yml in the current directory
		2. $XDG_CONFIG_HOME/branchscan/config.yml

		Args:
		        config_file: Explicitly provided config file path (optional)

		Returns:
		        Optional[Path]: Resolved config file path or None if no suitable file found

		"""
		if config_file:
			path = Path(config_file).expanduser().resolve()
			if not path.exists():
				msg = f"Config file not found: {path}"
				raise ConfigError(msg)
			return path

		local_config = Path(LOCAL_CONFIG_NAME)
		if local_config.exists():
			return local_config

		xdg_config_file = Path(xdg_config_home) / "branchscan" / "config.yml"
		if xdg_config_file.exists():
			return xdg_config_file

		return None

	def load_config(self) -> dict[str, Any]:
		"""
		Load configuration from file and apply environment variable overrides.

		Returns:
		        Dict[str, Any]: Loaded configuration

		Raises:
		        ConfigError: If configuration file exists but cannot be loaded

		"""
		self.config = copy.deepcopy(DEFAULT_CONFIG)

		if self.config_file:
			try:
				with self.config_file.open(encoding="utf-8") as f:
					file_config = yaml.safe_load(f)
			except (OSError, yaml.YAMLError) as e:
				error_msg = f"Error loading configuration from {self.config_file}: {e}"
				logger.exception(error_msg)
				raise ConfigError(error_msg) from e
			if file_config:
				if not isinstance(file_config, dict):
					error_msg = f"Configuration in {self.config_file} must be a mapping"
					raise ConfigError(error_msg)
				self._merge_configs(self.config, file_config)
			logger.info("Loaded configuration from %s", self.config_file)

		self._apply_env_overrides()
		self._validate()

		return self.config

	def _merge_configs(self, base: dict[str, Any], override: dict[str, Any]) -> None:
		"""
		Recursively merge two configuration dictionaries.

		Args:
		        base: Base configuration dictionary to merge into
		        override: Override configuration to apply

		"""
		for key, value in override.items():
			if isinstance(value, dict) and key in base and isinstance(base[key], dict):
				self._merge_configs(base[key], value)
			else:
				base[key] = value

	def _apply_env_overrides(self) -> None:
		"""Apply environment variable overrides to configuration."""
		for env_var, value in os.environ.items():
			if not env_var.startswith(ENV_PREFIX):
				continue
			parts = env_var[len(ENV_PREFIX) :].lower().split("_")
			if len(parts) < MIN_ENV_VAR_PARTS:
				continue
			section, key = parts[0], "_".join(parts[1:])

			typed_value: Any
			if value.lower() in ("true", "yes", "1"):
				typed_value = True
			elif value.lower() in ("false", "no", "0"):
				typed_value = False
			else:
				try:
					typed_value = int(value)
				except ValueError:
					try:
						typed_value = float(value)
					except ValueError:
						typed_value = value

			self.config.setdefault(section, {})[key] = typed_value
			logger.debug("Applied environment override %s: %s", env_var, typed_value)

	def _validate(self) -> None:
		"""
		Check the types of known configuration values.

		Raises:
		        ConfigError: If a value has the wrong type

		"""
		line_prefix = self.get("scan.line_prefix")
		if line_prefix is not None and not isinstance(line_prefix, str):
			msg = "scan.line_prefix must be a string"
			raise ConfigError(msg)

		for key in ("scan.strict", "scan.gone_only"):
			if not isinstance(self.get(key), bool):
				msg = f"{key} must be a boolean"
				raise ConfigError(msg)

		output_format = self.get("output.format")
		if output_format not in OUTPUT_FORMATS:
			msg = f"output.format must be one of {', '.join(OUTPUT_FORMATS)}"
			raise ConfigError(msg)

		branch_args = self.get("git.branch_args")
		if not isinstance(branch_args, list) or not all(isinstance(arg, str) for arg in branch_args):
			msg = "git.branch_args must be a list of strings"
			raise ConfigError(msg)

	def get(self, key: str, default: T = None) -> T:
		"""
		Get a configuration value using dot notation.

		Examples:
		        config.get("scan.line_prefix")

		Args:
		        key: Configuration key, can include dots for nested access
		        default: Default value if key not found

		Returns:
		        T: Configuration value or default

		"""
		current: Any = self.config
		for part in key.split("."):
			if isinstance(current, dict) and part in current:
				current = current[part]
			else:
				return default
		return cast("T", current)
