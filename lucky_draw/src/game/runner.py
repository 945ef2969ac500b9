"""
게임 실행 모듈

빌더 → 추첨 및 검색 → 결과 출력 순서로 파이프라인을 실행하고
결과를 종료 코드로 변환합니다.
"""

from dataclasses import dataclass
from typing import Optional, TextIO
import logging
import sys

from shared.error_handler import log_performance
from ..linked_list.player_list import PlayerList, Record
from ..utils.config import Config
from ..utils.console import TokenReader
from ..utils.exceptions import NameInputError, RecordAllocationError
from ..utils.number_source import NumberSource, RandomNumberSource
from .list_builder import build_list
from .draw import draw_winning_number, find_winner
from .reporter import report_result, ERR_BAD_ALLOC, ERR_BAD_INPUT

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """한 판의 결과"""
    players: PlayerList
    winning_number: int
    winner: Optional[Record]
    exit_code: int


@log_performance
def play(
    config: Config,
    reader: TokenReader,
    numbers: Optional[NumberSource] = None,
    out: Optional[TextIO] = None
) -> GameResult:
    """
    게임 한 판 실행

    Args:
        config: 설정 객체
        reader: 이름 토큰 리더
        numbers: 행운 번호 소스 (None이면 설정의 seed로 RandomNumberSource 생성)
        out: 출력 스트림 (기본값 sys.stdout)

    Returns:
        GameResult

    Raises:
        NameInputError, RecordAllocationError
    """
    out = out if out is not None else sys.stdout
    if numbers is None:
        numbers = RandomNumberSource(config.game.max_lucky, seed=config.game.seed)

    players = build_list(config.game.max_names, reader, numbers, out=out)

    winning_number = draw_winning_number(numbers, out=out)
    winner = find_winner(players, winning_number, out=out)

    exit_code = report_result(winner, winning_number, out=out)
    return GameResult(players, winning_number, winner, exit_code)


def run_game(
    config: Config,
    reader: Optional[TokenReader] = None,
    numbers: Optional[NumberSource] = None,
    out: Optional[TextIO] = None
) -> int:
    """
    게임을 실행하고 종료 코드 반환

    Returns:
        ERR_ALL_OK, ERR_BAD_ALLOC, ERR_NO_WINNER 또는 ERR_BAD_INPUT
    """
    out = out if out is not None else sys.stdout
    if reader is None:
        reader = TokenReader()

    try:
        result = play(config, reader, numbers, out=out)
    except RecordAllocationError as e:
        logger.error(f"플레이어 {e.player_number} 레코드 생성 실패: {e.detail}")
        print(f"Record allocation failed: {e.detail}", file=out)
        return ERR_BAD_ALLOC
    except NameInputError as e:
        logger.error(str(e))
        print("\nInput ended before all player names were entered.", file=out)
        return ERR_BAD_INPUT

    logger.info(f"게임 종료: 당첨 번호={result.winning_number}, 종료 코드={result.exit_code}")
    return result.exit_code
