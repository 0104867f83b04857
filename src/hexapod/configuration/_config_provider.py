import json
import shutil
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jmespath  # http://jmespath.org/tutorial.html

from hexapod import labels
from hexapod.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_RESOURCE,
    DEFAULT_OSC_HOST,
    DEFAULT_OSC_PORT,
    DEFAULT_PHASE_DELAY,
    OSC_DUTY_CYCLE_ADDRESS,
)
from hexapod.exceptions import ConfigurationError
from hexapod.logger import Logger

log = Logger().setup_logger('Configuration')


@dataclass
class OscSenderConfig:
    """Where servo commands are sent."""

    host: str
    port: int
    address_pattern: str


class ConfigProvider:
    """
    Loads the JSON configuration and answers jmespath queries against it.

    Usage examples:
        config_provider = ConfigProvider()

        host = config_provider.get(ConfigProvider.OSC_SENDER_HOST)
        osc = config_provider.get_osc_sender_config()
        rows = config_provider.get_position_table()
    """

    OSC_SENDER_HOST = 'osc_sender.host'
    OSC_SENDER_PORT = 'osc_sender.port'
    OSC_SENDER_ADDRESS_PATTERN = 'osc_sender.address_pattern'

    GAIT_SEQUENCER_PHASE_DELAY = 'gait_sequencer.phase_delay'

    POSITION_TABLE = 'position_table'

    LOGGING_LEVEL = 'logging.level'

    values: Dict[str, Any]

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        log.debug(labels.CONFIG_LOADING)

        self.config_path = Path(config_path) if config_path else self._user_config_path()
        self.values = self.load_config(self.config_path)
        self.list_modules()

    @staticmethod
    def _user_config_path() -> Path:
        """Return ~/hexapod.json, seeding it from the packaged defaults on first run."""
        config_path = Path.home() / CONFIG_FILE_NAME

        if not config_path.exists():
            default_config = resources.files('hexapod.configuration').joinpath(DEFAULT_CONFIG_RESOURCE)
            with resources.as_file(default_config) as default_path:
                shutil.copyfile(default_path, config_path)
            log.info(labels.CONFIG_COPIED_DEFAULT.format(config_path))

        return config_path

    @staticmethod
    def load_config(config_path: Path) -> Dict[str, Any]:
        try:
            with open(config_path, encoding='utf-8') as json_file:
                values = json.load(json_file)
        except FileNotFoundError as e:
            raise ConfigurationError(labels.CONFIG_NOT_EXIST.format(config_path)) from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(labels.CONFIG_INVALID_JSON.format(config_path, e)) from e

        if not isinstance(values, dict):
            raise ConfigurationError(labels.CONFIG_INVALID_JSON.format(config_path, 'top level is not an object'))

        log.info(labels.CONFIG_LOADED_FROM.format(config_path))
        return values

    def list_modules(self) -> None:
        log.info(labels.CONFIG_MODULES.format(', '.join(self.values.keys())))

    def get(self, search_pattern: str, default: Any = None) -> Any:
        value = jmespath.search(search_pattern, self.values)
        log.debug(search_pattern + ': ' + str(value))
        return default if value is None else value

    def require(self, search_pattern: str) -> Any:
        value = jmespath.search(search_pattern, self.values)
        if value is None:
            raise ConfigurationError(labels.CONFIG_MISSING_KEY.format(search_pattern))
        return value

    def get_osc_sender_config(self) -> OscSenderConfig:
        return OscSenderConfig(
            host=str(self.get(self.OSC_SENDER_HOST, DEFAULT_OSC_HOST)),
            port=int(self.get(self.OSC_SENDER_PORT, DEFAULT_OSC_PORT)),
            address_pattern=str(self.get(self.OSC_SENDER_ADDRESS_PATTERN, OSC_DUTY_CYCLE_ADDRESS)),
        )

    def get_phase_delay(self) -> float:
        return float(self.get(self.GAIT_SEQUENCER_PHASE_DELAY, DEFAULT_PHASE_DELAY))

    def get_position_table(self) -> Dict[str, List[Optional[float]]]:
        """Raw duty-cycle rows keyed by position name; ``None`` marks an unreachable cell."""
        return self.require(self.POSITION_TABLE)

    def get_logging_level(self) -> str:
        return str(self.get(self.LOGGING_LEVEL, 'INFO'))
