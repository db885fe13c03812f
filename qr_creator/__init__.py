from .capacity import SUPPORTED_VERSIONS, lookup
from .config import RenderConfig
from .exceptions import ConfigurationError, QRCreatorError
from .grid import Grid, Module
from .qr_code import QRcode

__all__ = ['QRcode', 'Grid', 'Module', 'RenderConfig', 'ConfigurationError', 'QRCreatorError',
           'SUPPORTED_VERSIONS', 'lookup']

__version__ = '1.2.0'
