from dataclasses import dataclass


DEFAULT_TEXT = 'google.com'
DEFAULT_VERSION = 5


@dataclass(frozen=True)
class RenderConfig:
    '''
    How a finished grid is turned into a picture

    scale - pixels per module
    border - light modules around the code (quiet zone)
    dark, light - RGBA colours
    output - default file name for QRcode.save
    '''

    scale: int = 15
    border: int = 2
    dark: tuple = (0, 0, 0, 255)
    light: tuple = (255, 255, 255, 255)
    output: str = 'QR.png'
