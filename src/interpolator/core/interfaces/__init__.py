from .filters import FilterFn, FilterRegistryProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .templating import Fixtures, TemplateEngineProtocol

__all__ = [
    'FilterFn',
    'FilterRegistryProtocol',
    'Fixtures',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'TemplateEngineProtocol',
]
