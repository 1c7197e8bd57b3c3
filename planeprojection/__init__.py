
from planeprojection._version import __version__  # noqa: F401
from planeprojection.utils.logging import LOGGER
from planeprojection.projection import PlaneProjection, lon_diff

__all__ = [
    'PlaneProjection',
    'lon_diff',
    'LOGGER',
]
