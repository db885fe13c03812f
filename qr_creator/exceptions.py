class QRCreatorError(Exception):
    '''
    Base class for everything this package raises on purpose
    '''


class ConfigurationError(QRCreatorError, ValueError):
    '''
    Unsupported version or mask id
    '''
