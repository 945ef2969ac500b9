"""
명령행 진입점

예시:
  lucky-draw
  lucky-draw --players 5 --max-lucky 20 --seed 42
  lucky-draw --write-config config/game_config.yaml
"""

from typing import List, Optional
import argparse
import logging

from shared.error_handler import setup_logger
from .src.game import run_game, ERR_ALL_OK, ERR_BAD_CONFIG
from .src.utils.config import Config, LOG_LEVELS
from .src.utils.create_config import write_default_config
from .src.utils.exceptions import ConfigError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='lucky-draw',
        description='플레이어에게 행운 번호를 나눠 주고 당첨자를 추첨합니다.'
    )
    parser.add_argument("--config", default=None, help="YAML 설정 파일 경로")
    parser.add_argument("--players", type=int, default=None, help="플레이어 수 (game.max_names)")
    parser.add_argument("--max-lucky", type=int, default=None, help="최대 행운 번호 (game.max_lucky)")
    parser.add_argument("--seed", type=int, default=None, help="재현 가능한 실행을 위한 난수 시드")
    parser.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS, help="로그 레벨")
    parser.add_argument("--write-config", default=None, metavar="PATH", help="기본 설정 파일을 생성하고 종료")
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """설정 파일과 명령행 옵션을 합쳐 Config 생성"""
    config = Config.from_file(args.config) if args.config else Config()

    overrides = {}
    if args.players is not None:
        overrides.setdefault('game', {})['max_names'] = args.players
    if args.max_lucky is not None:
        overrides.setdefault('game', {})['max_lucky'] = args.max_lucky
    if args.seed is not None:
        overrides.setdefault('game', {})['seed'] = args.seed
    if args.log_level is not None:
        overrides.setdefault('logging', {})['level'] = args.log_level

    if overrides:
        config.update(overrides)
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.write_config:
        try:
            path = write_default_config(args.write_config)
        except OSError:
            # 오류 내용은 safe_execute가 기록
            return ERR_BAD_CONFIG
        print(f"Default configuration written to {path}")
        return ERR_ALL_OK

    try:
        config = load_config(args)
    except ConfigError as e:
        setup_logger('lucky_draw')
        logger.error(f"설정 오류: {e}")
        return ERR_BAD_CONFIG

    try:
        setup_logger(
            'lucky_draw',
            level=config.logging.level,
            log_file=config.logging.log_file,
            colored=config.logging.colored
        )
    except OSError as e:
        setup_logger('lucky_draw')
        logger.error(f"로그 파일을 열 수 없습니다: {config.logging.log_file} ({e})")
        return ERR_BAD_CONFIG
    logger.debug(f"설정: {config}")

    return run_game(config)
