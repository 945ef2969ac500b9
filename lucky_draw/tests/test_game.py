"""
게임 파이프라인 테스트 모듈

이 모듈은 리스트 빌더, 추첨 및 검색, 결과 출력, 실행 파이프라인을 테스트합니다.
"""

import unittest
import io
from pathlib import Path
import sys
from unittest import mock

# 프로젝트 루트 디렉토리를 Python 경로에 추가
project_root = str(Path(__file__).parent.parent.parent)
if project_root not in sys.path:
    sys.path.append(project_root)

from lucky_draw.src.linked_list.player_list import PlayerList
from lucky_draw.src.game import (
    build_list, draw_winning_number, find_winner, report_result, play, run_game,
    ERR_ALL_OK, ERR_BAD_ALLOC, ERR_NO_WINNER, ERR_BAD_INPUT
)
from lucky_draw.src.utils.config import Config
from lucky_draw.src.utils.console import TokenReader
from lucky_draw.src.utils.exceptions import NameInputError, RecordAllocationError
from lucky_draw.src.utils.number_source import FixedNumberSource


def make_reader(text):
    return TokenReader(io.StringIO(text))


class TestBuildList(unittest.TestCase):
    """리스트 빌더 테스트"""

    def setUp(self):
        self.out = io.StringIO()

    def test_builds_in_reverse_order(self):
        """입력 역순으로 리스트가 만들어지는지 테스트"""
        numbers = FixedNumberSource([3, 7, 5], max_lucky=10)
        players = build_list(3, make_reader("Ann\nBo\nCy\n"), numbers, out=self.out)

        self.assertEqual(len(players), 3)
        self.assertEqual(players.to_list(), [('Cy', 5), ('Bo', 7), ('Ann', 3)])
        self.assertEqual(numbers.remaining, 0)

    def test_prompts(self):
        """헤더와 이름 요청 출력 테스트"""
        numbers = FixedNumberSource([1, 2], max_lucky=10)
        build_list(2, make_reader("Ann Bo\n"), numbers, out=self.out)

        self.assertEqual(
            self.out.getvalue(),
            "\nEnter names for 2 players.\n"
            "\nName for player 1: "
            "\nName for player 2: "
        )

    def test_fewer_names_than_max(self):
        """N명 입력 시 정확히 N개의 레코드"""
        for count in range(0, 4):
            numbers = FixedNumberSource([1] * count, max_lucky=10)
            players = build_list(count, make_reader("a b c\n"), numbers, out=io.StringIO())
            self.assertEqual(len(players), count)

    def test_appends_to_given_list(self):
        existing = PlayerList()
        existing.push_front('Zed', 4)
        numbers = FixedNumberSource([2], max_lucky=10)

        players = build_list(1, make_reader("Ann\n"), numbers, player_list=existing, out=self.out)

        self.assertIs(players, existing)
        self.assertEqual(players.to_list(), [('Ann', 2), ('Zed', 4)])

    def test_end_of_input(self):
        """입력이 끝나면 NameInputError"""
        numbers = FixedNumberSource([3, 7, 5], max_lucky=10)
        with self.assertRaises(NameInputError) as ctx:
            build_list(3, make_reader("Ann\n\n"), numbers, out=self.out)
        self.assertEqual(ctx.exception.player_number, 2)

    def test_allocation_failure(self):
        """레코드 생성 실패 시 RecordAllocationError"""
        numbers = FixedNumberSource([3, 7, 5], max_lucky=10)
        with mock.patch.object(PlayerList, 'push_front', side_effect=MemoryError('out of memory')):
            with self.assertRaises(RecordAllocationError) as ctx:
                build_list(3, make_reader("Ann Bo Cy\n"), numbers, out=self.out)

        self.assertEqual(ctx.exception.detail, 'out of memory')
        self.assertEqual(ctx.exception.player_number, 1)
        self.assertIsInstance(ctx.exception.__cause__, MemoryError)

    def test_negative_count(self):
        with self.assertRaises(ValueError):
            build_list(-1, make_reader(""), FixedNumberSource([], max_lucky=10), out=self.out)


class TestDrawAndSearch(unittest.TestCase):
    """추첨 및 검색 테스트"""

    def setUp(self):
        self.out = io.StringIO()
        self.players = PlayerList()
        for name, lucky in [('Ann', 3), ('Bo', 7), ('Cy', 5)]:
            self.players.push_front(name, lucky)

    def test_draw_winning_number(self):
        numbers = FixedNumberSource([9], max_lucky=10)
        self.assertEqual(draw_winning_number(numbers, out=self.out), 9)
        self.assertEqual(self.out.getvalue(), "\nThe winning number is 9!\n")

    def test_find_single_winner(self):
        """일치하는 레코드에서 검색 중단"""
        winner = find_winner(self.players, 7, out=self.out)

        self.assertEqual((winner.name, winner.lucky_number), ('Bo', 7))
        self.assertEqual(
            self.out.getvalue(),
            "\nCy has lucky number 5\n"
            "\nBo has lucky number 7\n"
            "\n"
        )

    def test_no_winner_prints_every_record(self):
        winner = find_winner(self.players, 9, out=self.out)

        self.assertIsNone(winner)
        output = self.out.getvalue()
        self.assertEqual(output.count("has lucky number"), 3)
        self.assertLess(output.index("Cy"), output.index("Bo"))
        self.assertLess(output.index("Bo"), output.index("Ann"))

    def test_tie_goes_to_most_recent_player(self):
        """같은 번호가 여럿이면 head에 가까운(마지막으로 추가된) 플레이어"""
        players = PlayerList()
        for name, lucky in [('Ann', 4), ('Bo', 2), ('Cy', 4)]:
            players.push_front(name, lucky)

        winner = find_winner(players, 4, out=self.out)
        self.assertEqual(winner.name, 'Cy')

    def test_empty_list(self):
        self.assertIsNone(find_winner(PlayerList(), 1, out=self.out))
        self.assertEqual(self.out.getvalue(), "\n")


class TestReporter(unittest.TestCase):
    """결과 출력 테스트"""

    def test_winner(self):
        out = io.StringIO()
        winner = PlayerList().push_front('Bo', 7)

        self.assertEqual(report_result(winner, 7, out=out), ERR_ALL_OK)
        self.assertEqual(out.getvalue(), "\nThe winner is Bo with lucky number 7\n")

    def test_no_winner(self):
        out = io.StringIO()

        self.assertEqual(report_result(None, 9, out=out), ERR_NO_WINNER)
        self.assertEqual(out.getvalue(), "\nSorry, there's no winner for lucky number 9\n")


class TestRunGame(unittest.TestCase):
    """전체 파이프라인 테스트"""

    def setUp(self):
        self.config = Config()
        self.out = io.StringIO()

    def test_scenario_winner(self):
        """Ann, Bo, Cy / [3, 7, 5] / 당첨 번호 7 → Bo 당첨, 종료 코드 0"""
        numbers = FixedNumberSource([3, 7, 5, 7], max_lucky=10)
        result = play(self.config, make_reader("Ann\nBo\nCy\n"), numbers, out=self.out)

        self.assertEqual(result.players.to_list(), [('Cy', 5), ('Bo', 7), ('Ann', 3)])
        self.assertEqual(result.winning_number, 7)
        self.assertEqual(result.winner.name, 'Bo')
        self.assertEqual(result.exit_code, ERR_ALL_OK)
        self.assertEqual(
            self.out.getvalue(),
            "\nEnter names for 3 players.\n"
            "\nName for player 1: "
            "\nName for player 2: "
            "\nName for player 3: "
            "\nThe winning number is 7!\n"
            "\nCy has lucky number 5\n"
            "\nBo has lucky number 7\n"
            "\n"
            "\nThe winner is Bo with lucky number 7\n"
        )

    def test_scenario_no_winner(self):
        """같은 리스트 / 당첨 번호 9 → 세 명 모두 출력, 종료 코드 2"""
        numbers = FixedNumberSource([3, 7, 5, 9], max_lucky=10)
        code = run_game(self.config, make_reader("Ann Bo Cy"), numbers, out=self.out)

        self.assertEqual(code, ERR_NO_WINNER)
        output = self.out.getvalue()
        for line in ("Cy has lucky number 5", "Bo has lucky number 7", "Ann has lucky number 3"):
            self.assertIn(line, output)
        self.assertTrue(output.endswith("\nSorry, there's no winner for lucky number 9\n"))

    def test_bad_input_exit_code(self):
        numbers = FixedNumberSource([3, 7, 5, 9], max_lucky=10)
        with self.assertLogs('lucky_draw.src.game.runner', level='ERROR'):
            code = run_game(self.config, make_reader("Ann\n"), numbers, out=self.out)

        self.assertEqual(code, ERR_BAD_INPUT)
        self.assertIn("Input ended before all player names were entered.", self.out.getvalue())

    def test_allocation_failure_exit_code(self):
        numbers = FixedNumberSource([3, 7, 5, 9], max_lucky=10)
        with mock.patch.object(PlayerList, 'push_front', side_effect=MemoryError('no memory')):
            with self.assertLogs('lucky_draw.src.game.runner', level='ERROR'):
                code = run_game(self.config, make_reader("Ann Bo Cy"), numbers, out=self.out)

        self.assertEqual(code, ERR_BAD_ALLOC)
        self.assertIn("Record allocation failed: no memory", self.out.getvalue())
        self.assertNotIn("winning number", self.out.getvalue())

    def test_seeded_run_uses_config(self):
        """시드가 같으면 같은 결과"""
        config = Config({'game': {'max_names': 2, 'max_lucky': 5, 'seed': 11}})

        first = play(config, make_reader("Ann Bo"), out=io.StringIO())
        second = play(config, make_reader("Ann Bo"), out=io.StringIO())

        self.assertEqual(len(first.players), 2)
        self.assertEqual(first.players.to_list(), second.players.to_list())
        self.assertEqual(first.winning_number, second.winning_number)
        for _, lucky in first.players.to_list():
            self.assertTrue(1 <= lucky <= 5)
        self.assertIn(first.exit_code, (ERR_ALL_OK, ERR_NO_WINNER))
        self.assertEqual(first.exit_code == ERR_ALL_OK, first.winner is not None)


if __name__ == '__main__':
    unittest.main()
