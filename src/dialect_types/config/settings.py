"""
Configuration for data type rendering and parsing defaults.
"""
import dataclasses
import json
import logging
import pathlib

from dialect_types.options import DataTypeOptions

logger = logging.getLogger(__name__)

DEFAULT_LOCATIONS = (
    '~/.config/dialect_types/settings.json',
    '/etc/dialect_types/settings.json',
    'dialect_types.json',  # Current directory
    )


class Settings:
    """Process-wide settings for the dialect_types package"""

    _instance = None

    @classmethod
    def get_instance(cls) -> 'Settings':
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls, config_file=None) -> 'Settings':
        """Replace the singleton, optionally from an explicit config file.
        """
        cls._instance = cls(config_file=config_file)
        return cls._instance

    def __init__(self, config_file=None):
        self.options = DataTypeOptions()

        if config_file:
            self.load_config(config_file)
        else:
            for location in DEFAULT_LOCATIONS:
                path = pathlib.Path(location).expanduser()
                if path.exists():
                    self.load_config(path)
                    break

    def load_config(self, config_file) -> None:
        """Load configuration from file"""
        try:
            with pathlib.Path(config_file).open() as f:
                config = json.load(f)
            if not isinstance(config, dict):
                raise ValueError('top level must be an object')

            # Merge with current options rather than replace entirely
            known = {field.name for field in dataclasses.fields(DataTypeOptions)}
            unknown = set(config) - known
            if unknown:
                logger.warning(f'Ignoring unknown settings in {config_file}: {sorted(unknown)}')
            self.update(**{k: v for k, v in config.items() if k in known})

            logger.info(f'Loaded data type settings from {config_file}')
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f'Failed to load data type settings: {e}')

    def update(self, **kwargs) -> DataTypeOptions:
        """Replace options with the given fields changed.

        Validation happens on the new options before they are installed.
        """
        self.options = dataclasses.replace(self.options, **kwargs)
        return self.options

    @property
    def dialect(self) -> str:
        return self.options.dialect

    @property
    def timezone(self) -> str:
        return self.options.timezone

    @property
    def string_length(self) -> int:
        return self.options.string_length


def get_settings() -> Settings:
    """Get the settings singleton."""
    return Settings.get_instance()
