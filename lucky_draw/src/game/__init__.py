"""
게임 모듈

리스트 빌더, 추첨 및 검색, 결과 출력, 실행 파이프라인을 제공합니다.
"""

from .list_builder import build_list
from .draw import draw_winning_number, find_winner
from .reporter import (
    report_result, ERR_ALL_OK, ERR_BAD_ALLOC, ERR_NO_WINNER, ERR_BAD_INPUT, ERR_BAD_CONFIG
)
from .runner import GameResult, play, run_game

__all__ = [
    'build_list', 'draw_winning_number', 'find_winner', 'report_result',
    'GameResult', 'play', 'run_game',
    'ERR_ALL_OK', 'ERR_BAD_ALLOC', 'ERR_NO_WINNER', 'ERR_BAD_INPUT', 'ERR_BAD_CONFIG'
]
