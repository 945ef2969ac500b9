"""
설정 관리 모듈

이 모듈은 게임 및 로깅 설정을 관리하는 Config 클래스를 제공합니다.
설정 딕셔너리는 marshmallow 스키마로 검증한 뒤 데이터클래스로 변환합니다.
"""

from typing import Any, Dict, Optional
from dataclasses import dataclass, asdict
from pathlib import Path
import logging
import yaml
from marshmallow import Schema, fields, validate, ValidationError, RAISE

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

# 기본 게임 상수
MAX_NAMES = 3
MAX_LUCKY = 10

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class GameConfig:
    """게임 설정"""
    max_names: int = MAX_NAMES
    max_lucky: int = MAX_LUCKY
    seed: Optional[int] = None


@dataclass
class LoggingConfig:
    """로깅 설정"""
    level: str = 'WARNING'
    log_file: Optional[str] = None
    colored: bool = True


class GameConfigSchema(Schema):
    class Meta:
        unknown = RAISE

    max_names = fields.Integer(strict=True, validate=validate.Range(min=1), load_default=MAX_NAMES)
    max_lucky = fields.Integer(strict=True, validate=validate.Range(min=1), load_default=MAX_LUCKY)
    seed = fields.Integer(strict=True, allow_none=True, validate=validate.Range(min=0), load_default=None)


class LoggingConfigSchema(Schema):
    class Meta:
        unknown = RAISE

    level = fields.String(validate=validate.OneOf(LOG_LEVELS), load_default='WARNING')
    log_file = fields.String(allow_none=True, load_default=None)
    colored = fields.Boolean(load_default=True)


class ConfigSchema(Schema):
    """전체 설정 스키마"""

    class Meta:
        unknown = RAISE

    game = fields.Nested(GameConfigSchema, load_default=dict)
    logging = fields.Nested(LoggingConfigSchema, load_default=dict)


def validate_config(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    """
    설정 딕셔너리 검증

    Args:
        config_dict: 검증할 설정 딕셔너리

    Returns:
        기본값이 채워진 설정 딕셔너리

    Raises:
        ConfigError: 유효하지 않은 설정
    """
    if not isinstance(config_dict, dict):
        raise ConfigError(f'설정은 딕셔너리여야 합니다: {type(config_dict).__name__}')

    # 레벨 이름은 대소문자를 구분하지 않음
    logging_section = config_dict.get('logging')
    if isinstance(logging_section, dict) and isinstance(logging_section.get('level'), str):
        config_dict = dict(config_dict)
        config_dict['logging'] = dict(logging_section, level=logging_section['level'].upper())

    try:
        loaded = ConfigSchema().load(config_dict)
    except ValidationError as e:
        raise ConfigError(f'설정 검증 실패: {e.messages}') from e

    # 빈 섹션도 기본값이 채워지도록 다시 로드
    return {
        'game': GameConfigSchema().load(loaded['game']),
        'logging': LoggingConfigSchema().load(loaded['logging'])
    }


class Config:
    """설정 관리 클래스"""

    def __init__(self, config_dict: Optional[Dict[str, Any]] = None):
        """
        설정 객체 초기화

        Args:
            config_dict: 설정 딕셔너리
        """
        self._config = validate_config(config_dict or {})
        self.game = GameConfig(**self._config['game'])
        self.logging = LoggingConfig(**self._config['logging'])

    @classmethod
    def from_file(cls, filepath: str) -> 'Config':
        """YAML 파일에서 설정 생성"""
        config = cls()
        config.load(filepath)
        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        설정값 조회

        Args:
            key: 설정 키 ('game.seed'처럼 점으로 구분 가능)
            default: 기본값

        Returns:
            설정값
        """
        value: Any = self.to_dict()
        for part in key.split('.'):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def set(self, key: str, value: Any) -> None:
        """
        설정값 설정

        Args:
            key: 설정 키 ('game.seed' 형식)
            value: 설정값
        """
        section, _, name = key.partition('.')
        if not name:
            raise ConfigError(f'설정 키는 "섹션.이름" 형식이어야 합니다: {key}')
        self.update({section: {name: value}})

    def update(self, config_dict: Dict[str, Any]) -> None:
        """
        설정 업데이트

        섹션 단위로 병합한 뒤 다시 검증합니다. 검증에 실패하면 기존 설정이 유지됩니다.

        Args:
            config_dict: 업데이트할 설정 딕셔너리
        """
        merged = self.to_dict()
        for section, values in config_dict.items():
            if isinstance(values, dict) and isinstance(merged.get(section), dict):
                merged[section].update(values)
            else:
                merged[section] = values
        self.__init__(merged)

    def save(self, filepath: str) -> None:
        """
        설정 저장

        Args:
            filepath: 저장할 파일 경로
        """
        try:
            save_dir = Path(filepath).parent
            save_dir.mkdir(parents=True, exist_ok=True)

            # YAML 형식으로 저장
            with open(filepath, 'w', encoding='utf-8') as f:
                yaml.safe_dump(self.to_dict(), f, allow_unicode=True, default_flow_style=False, sort_keys=False)
            logger.info(f'설정 저장 완료: {filepath}')
        except OSError as e:
            logger.error(f'설정 저장 실패: {str(e)}')
            raise

    def load(self, filepath: str) -> None:
        """
        설정 로드

        Args:
            filepath: 로드할 파일 경로

        Raises:
            ConfigError: 파일이 없거나 YAML/설정 내용이 잘못된 경우
        """
        try:
            if not Path(filepath).exists():
                raise ConfigError(f'설정 파일을 찾을 수 없습니다: {filepath}')

            # YAML 형식으로 로드
            with open(filepath, 'r', encoding='utf-8') as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f'설정 로드 실패: {str(e)}')
            raise ConfigError(f'YAML 파싱 실패: {filepath}') from e
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f'설정 로드 실패: {str(e)}')
            raise ConfigError(f'설정 파일을 읽을 수 없습니다: {filepath}') from e
        except ConfigError as e:
            logger.error(f'설정 로드 실패: {str(e)}')
            raise

        # 설정 객체 재초기화 (빈 파일은 기본값)
        self.__init__(config_dict or {})
        logger.info(f'설정 로드 완료: {filepath}')

    def to_dict(self) -> Dict[str, Any]:
        """
        설정을 딕셔너리로 변환

        Returns:
            설정 딕셔너리
        """
        return {
            'game': asdict(self.game),
            'logging': asdict(self.logging)
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Config):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        """문자열 표현"""
        return str(self.to_dict())

    def __repr__(self) -> str:
        """표현식 문자열"""
        return f'Config({self.to_dict()})'
