class WatermarkError(Exception):
    """Base class for every error raised while watermarking an image."""


class InvalidOptionError(WatermarkError, ValueError):
    pass


class InvalidRatioError(InvalidOptionError):
    def __init__(self, message='Scale Ratio must be less than one!'):
        super().__init__(message)


class InvalidOpacityError(InvalidOptionError):
    def __init__(self, message='Opacity must be less than one!'):
        super().__init__(message)


class InvalidRotationError(InvalidOptionError):
    def __init__(self, message='Rotation must be range from 1 - 360'):
        super().__init__(message)


class InvalidTextSizeError(InvalidOptionError):
    def __init__(self, message='Text size must range from 1 - 8'):
        super().__init__(message)


class InvalidColWidthError(InvalidOptionError):
    def __init__(self, message='ColWidth must be greater than 0'):
        super().__init__(message)


class InvalidRowHeightError(InvalidOptionError):
    def __init__(self, message='RowHeight must be greater than 0'):
        super().__init__(message)


class InvalidTileSizeError(WatermarkError, ValueError):
    def __init__(self, message='Tile width and height must be greater than 0'):
        super().__init__(message)


class ImageLoadError(WatermarkError, OSError):
    pass


class FontLoadError(WatermarkError, OSError):
    pass


class ImageWriteError(WatermarkError, OSError):
    pass
