"""
당첨 번호 추첨 및 당첨자 검색
"""

from typing import Optional, TextIO
import logging
import sys

from ..linked_list.player_list import PlayerList, Record
from ..utils.number_source import NumberSource

logger = logging.getLogger(__name__)


def draw_winning_number(numbers: NumberSource, out: Optional[TextIO] = None) -> int:
    """당첨 번호를 뽑아 출력하고 반환"""
    out = out if out is not None else sys.stdout
    winning_number = numbers.draw()
    print(f"\nThe winning number is {winning_number}!", file=out)
    logger.debug(f"당첨 번호 추첨: {winning_number}")
    return winning_number


def find_winner(
    player_list: PlayerList,
    winning_number: int,
    out: Optional[TextIO] = None
) -> Optional[Record]:
    """
    당첨자 검색

    head부터 순회하며 방문한 레코드를 모두 출력하고, 첫 번째로 일치하는
    레코드에서 멈춥니다. 같은 번호가 여럿이면 가장 나중에 추가된 플레이어가 당첨됩니다.

    Args:
        player_list: 플레이어 리스트
        winning_number: 당첨 번호
        out: 출력 스트림 (기본값 sys.stdout)

    Returns:
        당첨 레코드, 없으면 None
    """
    out = out if out is not None else sys.stdout
    winner = None
    visited = 0

    for record in player_list:
        visited += 1
        print(f"\n{record.name} has lucky number {record.lucky_number}", file=out)

        if record.lucky_number == winning_number:
            winner = record
            break

    print(file=out)

    logger.debug(f"검색 완료: {visited}명 확인, 당첨자={winner.name if winner else None}")
    return winner
