"""
유틸리티 모듈

설정, 난수 소스, 콘솔 입력 관련 기능을 제공합니다.
"""

from .config import Config, GameConfig, LoggingConfig
from .console import TokenReader
from .exceptions import LuckyDrawError, RecordAllocationError, NameInputError, ConfigError
from .number_source import NumberSource, RandomNumberSource, FixedNumberSource

__all__ = [
    'Config', 'GameConfig', 'LoggingConfig', 'TokenReader',
    'LuckyDrawError', 'RecordAllocationError', 'NameInputError', 'ConfigError',
    'NumberSource', 'RandomNumberSource', 'FixedNumberSource'
]
