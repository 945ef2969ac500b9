"""
행운 번호 추첨 게임 - 소스 코드

이 패키지는 연결 리스트 기반 추첨 게임의 핵심 기능을 구현합니다.
"""

from .linked_list import Record, PlayerList
from .game import build_list, draw_winning_number, find_winner, report_result, play, run_game

__all__ = [
    'Record', 'PlayerList', 'build_list', 'draw_winning_number',
    'find_winner', 'report_result', 'play', 'run_game'
]
