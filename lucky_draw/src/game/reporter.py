"""
결과 출력 모듈
"""

from typing import Optional, TextIO
import sys

from ..linked_list.player_list import Record

# 운영체제에 보고할 종료 코드
ERR_ALL_OK = 0
ERR_BAD_ALLOC = 1
ERR_NO_WINNER = 2
ERR_BAD_INPUT = 3
ERR_BAD_CONFIG = 4


def report_result(winner: Optional[Record], winning_number: int, out: Optional[TextIO] = None) -> int:
    """
    결과 출력

    Args:
        winner: 당첨 레코드 또는 None
        winning_number: 당첨 번호
        out: 출력 스트림 (기본값 sys.stdout)

    Returns:
        종료 코드 (당첨자 있음 ERR_ALL_OK, 없음 ERR_NO_WINNER)
    """
    out = out if out is not None else sys.stdout

    if winner is None:
        print(f"\nSorry, there's no winner for lucky number {winning_number}", file=out)
        return ERR_NO_WINNER

    print(f"\nThe winner is {winner.name} with lucky number {winner.lucky_number}", file=out)
    return ERR_ALL_OK
