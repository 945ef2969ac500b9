"""
예외 정의 모듈
"""

from typing import Optional


class LuckyDrawError(Exception):
    """lucky_draw 기본 예외"""


class RecordAllocationError(LuckyDrawError):
    """플레이어 레코드 생성(메모리 할당) 실패"""

    def __init__(self, detail: str, player_number: Optional[int] = None):
        super().__init__(detail)
        self.detail = detail
        self.player_number = player_number


class NameInputError(LuckyDrawError):
    """플레이어 이름 입력이 끝나기 전에 입력 스트림이 종료됨"""

    def __init__(self, player_number: int):
        super().__init__(f"플레이어 {player_number}의 이름을 읽기 전에 입력이 종료되었습니다")
        self.player_number = player_number


class ConfigError(LuckyDrawError):
    """설정 파일 누락 또는 유효성 검사 실패"""
