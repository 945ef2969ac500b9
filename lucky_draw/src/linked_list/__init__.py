"""
연결 리스트 모듈
"""

from .player_list import Record, PlayerList

__all__ = ['Record', 'PlayerList']
