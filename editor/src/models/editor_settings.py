"""User-tunable editor settings, persisted as JSON in the config directory."""

import os
import json
import logging
from dataclasses import dataclass, asdict, fields

from constants import (
	CONFIG_DIR_NAME, CONFIG_FILE_NAME, DEFAULT_GRID_SIZE, DEFAULT_SNAP_TO_GRID,
	ZOOM_IN_FACTOR, ZOOM_OUT_FACTOR,
)
from utils.logger import loggerRaise

_logger = logging.getLogger('EditorSettings')


def default_config_path():
	"""~/.seating_builder/config.json"""
	return os.path.join(os.path.expanduser('~'), CONFIG_DIR_NAME, CONFIG_FILE_NAME)


@dataclass
class EditorSettings:
	grid_size: float = DEFAULT_GRID_SIZE
	snap_to_grid: bool = DEFAULT_SNAP_TO_GRID
	zoom_in_factor: float = ZOOM_IN_FACTOR
	zoom_out_factor: float = ZOOM_OUT_FACTOR

	@classmethod
	def from_dict(cls, data):
		"""Build settings from a config dict, ignoring keys it does not know.

		Raises:
			ValueError: If the config is not an object or a value is invalid
		"""
		if not isinstance(data, dict):
			raise ValueError(f"Config must be a JSON object, got {type(data).__name__}")

		known = {f.name for f in fields(cls)}
		unknown = set(data) - known
		if unknown:
			_logger.debug(f"Ignoring unknown config keys: {sorted(unknown)}")

		settings = cls(**{k: v for k, v in data.items() if k in known})
		settings.grid_size = float(settings.grid_size)
		settings.snap_to_grid = bool(settings.snap_to_grid)
		settings.zoom_in_factor = float(settings.zoom_in_factor)
		settings.zoom_out_factor = float(settings.zoom_out_factor)

		if settings.grid_size <= 0:
			raise ValueError(f"grid_size must be positive, got {settings.grid_size}")
		if not 0 < settings.zoom_in_factor < 1:
			raise ValueError(f"zoom_in_factor must be in (0, 1), got {settings.zoom_in_factor}")
		if settings.zoom_out_factor <= 1:
			raise ValueError(f"zoom_out_factor must be > 1, got {settings.zoom_out_factor}")
		return settings

	def to_dict(self):
		return asdict(self)


def load_settings(path=None):
	"""Load settings from the config file

	Missing file returns defaults. A file that cannot be read or parsed goes
	through loggerRaise.
	"""
	config_file = path or default_config_path()
	try:
		if not os.path.exists(config_file):
			_logger.debug(f"No config at {config_file}, using defaults")
			return EditorSettings()
		with open(config_file, 'r', encoding='utf-8') as f:
			config = json.load(f)
		return EditorSettings.from_dict(config)
	except (OSError, ValueError, TypeError) as e:
		loggerRaise(e, "Error loading config")


def save_settings(settings, path=None):
	"""Write settings to the config file, creating its directory"""
	config_file = path or default_config_path()
	try:
		config_dir = os.path.dirname(config_file)
		if config_dir:
			os.makedirs(config_dir, exist_ok=True)
		with open(config_file, 'w', encoding='utf-8') as f:
			json.dump(settings.to_dict(), f, indent=2)
	except OSError as e:
		loggerRaise(e, "Error saving config")
