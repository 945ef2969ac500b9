"""
행운 번호 난수 소스

빌더와 당첨 번호 추첨은 같은 NumberSource 하나를 순서대로 사용합니다.
(이름마다 한 번, 그다음 당첨 번호 한 번)
"""

from typing import Iterable, List, Optional, Protocol
import logging

import numpy as np

logger = logging.getLogger(__name__)


class NumberSource(Protocol):
    """[1, max_lucky] 범위의 정수를 하나씩 반환하는 소스"""

    max_lucky: int

    def draw(self) -> int:
        ...


class RandomNumberSource:
    """numpy Generator 기반 난수 소스"""

    def __init__(self, max_lucky: int, seed: Optional[int] = None):
        """
        Args:
            max_lucky: 최대 행운 번호 (1 이상)
            seed: 난수 시드 (None이면 OS 엔트로피 사용)
        """
        if max_lucky < 1:
            raise ValueError(f"max_lucky는 1 이상이어야 합니다: {max_lucky}")
        self.max_lucky = max_lucky
        self.seed = seed
        self._rng = np.random.default_rng(seed)
        logger.debug(f"난수 소스 초기화: max_lucky={max_lucky}, seed={seed}")

    def draw(self) -> int:
        # integers()의 상한은 배타적
        return int(self._rng.integers(1, self.max_lucky + 1))


class FixedNumberSource:
    """미리 정한 번호를 순서대로 돌려주는 소스"""

    def __init__(self, values: Iterable[int], max_lucky: int):
        self.max_lucky = max_lucky
        self._values: List[int] = list(values)
        for value in self._values:
            if not 1 <= value <= max_lucky:
                raise ValueError(f"번호가 범위를 벗어났습니다: {value} (1~{max_lucky})")
        self._position = 0

    @property
    def remaining(self) -> int:
        return len(self._values) - self._position

    def draw(self) -> int:
        if self._position >= len(self._values):
            raise IndexError("더 이상 꺼낼 번호가 없습니다")
        value = self._values[self._position]
        self._position += 1
        return value
