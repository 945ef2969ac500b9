"""
행운 번호 추첨 게임

플레이어 이름을 입력받아 연결 리스트로 관리하고, 당첨 번호를 뽑아 당첨자를 찾습니다.
"""

from .src.utils.config import Config
from .src.linked_list import Record, PlayerList
from .src.game import play, run_game

# 버전
__version__ = "1.0.0"

__all__ = ['Config', 'Record', 'PlayerList', 'play', 'run_game']
