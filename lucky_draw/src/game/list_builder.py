"""
플레이어 리스트 빌더

플레이어 수만큼 이름을 입력받아 행운 번호를 붙이고 리스트 head에 추가합니다.
"""

from typing import Optional, TextIO
import logging
import sys

from shared.error_handler import log_performance
from ..linked_list.player_list import PlayerList
from ..utils.console import TokenReader
from ..utils.exceptions import NameInputError, RecordAllocationError
from ..utils.number_source import NumberSource

logger = logging.getLogger(__name__)


@log_performance
def build_list(
    count: int,
    reader: TokenReader,
    numbers: NumberSource,
    player_list: Optional[PlayerList] = None,
    out: Optional[TextIO] = None
) -> PlayerList:
    """
    플레이어 리스트 생성

    Args:
        count: 입력받을 플레이어 수
        reader: 이름 토큰 리더
        numbers: 행운 번호 소스
        player_list: 레코드를 추가할 리스트 (None이면 새로 생성)
        out: 출력 스트림 (기본값 sys.stdout)

    Returns:
        완성된 플레이어 리스트

    Raises:
        NameInputError: 모든 이름을 읽기 전에 입력이 끝난 경우
        RecordAllocationError: 레코드 생성 중 메모리 부족
    """
    if count < 0:
        raise ValueError(f"플레이어 수는 0 이상이어야 합니다: {count}")

    out = out if out is not None else sys.stdout
    if player_list is None:
        player_list = PlayerList()

    print(f"\nEnter names for {count} players.", file=out)

    for player_number in range(1, count + 1):
        print(f"\nName for player {player_number}: ", end='', file=out)
        out.flush()

        name = reader.read_token()
        if name is None:
            raise NameInputError(player_number)

        lucky_number = numbers.draw()

        try:
            player_list.push_front(name, lucky_number)
        except MemoryError as e:
            raise RecordAllocationError(str(e) or type(e).__name__, player_number) from e

        logger.debug(f"플레이어 {player_number} 추가: {name} (행운 번호 {lucky_number})")

    logger.info(f"플레이어 리스트 생성 완료: {len(player_list)}명")
    return player_list
