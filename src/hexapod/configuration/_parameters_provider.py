import os
from pathlib import Path
from typing import Optional

import hexapod.constants as constants
from hexapod import labels
from hexapod.configuration._hexapod_parameters import HexapodParameters
from hexapod.logger import Logger
from hexapod.singleton import Singleton

log = Logger().setup_logger('Configuration')


class ParametersProvider(metaclass=Singleton):
    """
    Process-wide access to the hexapod parameters.

    The file is looked up in ``$HEXAPOD_CONFIG`` first, then in
    ``~/hexapod/configuration/hexapod.json``. When neither exists the built-in
    defaults are used.
    """

    def __init__(self, path: Optional[Path] = None):
        config_path = Path(path) if path else self.default_path()

        if config_path.exists():
            self._parameters = HexapodParameters.from_json(config_path)
            log.info(labels.CONFIG_LOADED.format(config_path))
        else:
            self._parameters = HexapodParameters()
            log.info(labels.CONFIG_DEFAULTS.format(config_path))

    @staticmethod
    def default_path() -> Path:
        env_path = os.environ.get(constants.CONFIG_ENV)
        if env_path:
            return Path(env_path)
        return Path.home() / constants.CONFIG_FOLDER / 'configuration' / constants.CONFIG_FILE_NAME

    @property
    def parameters(self) -> HexapodParameters:
        return self._parameters
