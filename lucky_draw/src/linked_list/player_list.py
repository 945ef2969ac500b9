"""
플레이어 연결 리스트

레코드는 PlayerList가 소유한 배열(arena)에 저장되고, 각 레코드의 next는
다음 레코드의 배열 인덱스입니다. 새 레코드는 항상 head에 삽입되므로
순회 순서는 삽입 순서의 역순입니다.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class Record:
    """플레이어 한 명의 이름과 행운 번호, 다음 레코드 링크"""
    name: str
    lucky_number: int
    next: Optional[int] = None


class PlayerList:
    """배열 기반 단일 연결 리스트

    리스트는 행운 번호 범위를 알지 못하므로 push_front는 어떤 정수든 받습니다.
    [1, max_lucky] 범위는 번호를 만드는 NumberSource가 보장합니다.
    """

    def __init__(self):
        self._records: List[Record] = []
        self._head: Optional[int] = None

    def push_front(self, name: str, lucky_number: int) -> Record:
        """
        head에 레코드 추가

        Args:
            name: 플레이어 이름
            lucky_number: 행운 번호

        Returns:
            추가된 레코드 (새 head)
        """
        record = Record(name=name, lucky_number=lucky_number, next=self._head)
        self._records.append(record)
        self._head = len(self._records) - 1
        return record

    @property
    def head(self) -> Optional[Record]:
        if self._head is None:
            return None
        return self._records[self._head]

    def next_of(self, record: Record) -> Optional[Record]:
        if record.next is None:
            return None
        return self._records[record.next]

    def __iter__(self) -> Iterator[Record]:
        record = self.head
        while record is not None:
            yield record
            record = self.next_of(record)

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return self._head is not None

    def to_list(self) -> List[Tuple[str, int]]:
        """head부터 tail까지 (이름, 행운 번호) 목록"""
        return [(record.name, record.lucky_number) for record in self]

    def __repr__(self) -> str:
        items = ', '.join(f'{name}:{lucky}' for name, lucky in self.to_list())
        return f'PlayerList([{items}])'
