"""
콘솔 입력 모듈

입력 스트림에서 공백으로 구분된 토큰을 하나씩 읽습니다.
한 줄에 여러 토큰이 있으면 다음 요청에서 이어서 사용하고, 빈 줄은 건너뜁니다.
"""

from collections import deque
from typing import Deque, Optional, TextIO
import sys


class TokenReader:
    """공백 구분 토큰 리더"""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self._pending: Deque[str] = deque()

    def read_token(self) -> Optional[str]:
        """
        다음 토큰 읽기

        Returns:
            토큰 문자열, 스트림이 끝났으면 None
        """
        while not self._pending:
            line = self.stream.readline()
            if not line:
                return None
            self._pending.extend(line.split())
        return self._pending.popleft()
