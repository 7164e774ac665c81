from ._hexapod_parameters import ConfigurationError, HexapodParameters
from ._parameters_provider import ParametersProvider

__all__ = ["ConfigurationError", "HexapodParameters", "ParametersProvider"]
