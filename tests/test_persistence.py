import tempfile
import unittest
from datetime import datetime
from pathlib import Path

from chipdrop.core.movelog import Move, MoveLog
from chipdrop.core.persistence import (
    decode_move_lines,
    encode_move_log,
    parse_move_line,
    save_path_for,
)
from chipdrop.game.actions import load_session, new_session, place_chip, save_session
from chipdrop.types import Difficulty

NOW = datetime(2026, 10, 19, 13, 5, 9)


class TestCodec(unittest.TestCase):
    def test_given_log_when_encoding_then_one_line_per_move(self):
        log = MoveLog()
        log.record(1, 3)
        log.record(2, 0)
        self.assertEqual(encode_move_log(log), "Player 1, Column 3\nPlayer 2, Column 0\n")

    def test_given_lines_when_parsing_then_only_two_field_shape_accepted(self):
        self.assertEqual(parse_move_line("Player 2, Column 6"), Move(2, 6))
        self.assertEqual(parse_move_line("  Player 1 ,Column 0  "), Move(1, 0))
        self.assertIsNone(parse_move_line("Player 1"))
        self.assertIsNone(parse_move_line("Player 1, Column 2, extra"))
        self.assertIsNone(parse_move_line("Column 2, Player 1"))
        self.assertIsNone(parse_move_line("Player one, Column 2"))
        self.assertIsNone(parse_move_line("Player -1, Column 2"))

    def test_given_mixed_lines_when_decoding_then_malformed_counted_blank_ignored(self):
        moves, skipped = decode_move_lines(["Player 1, Column 3", "", "garbage", "Player 2, Column 4"])
        self.assertEqual(moves, [Move(1, 3), Move(2, 4)])
        self.assertEqual(skipped, 1)

    def test_given_base_when_building_save_path_then_timestamp_suffix(self):
        self.assertEqual(save_path_for("saves/game", NOW), Path("saves/game_20261019130509.txt"))


class TestSaveLoad(unittest.TestCase):
    def test_given_played_session_when_saved_and_loaded_then_identical(self):
        s = new_session(Difficulty.EASY)
        for col, player in [(3, 1), (3, 2), (2, 1), (4, 2), (6, 1), (3, 2)]:
            place_chip(s, col, player)

        with tempfile.TemporaryDirectory() as td:
            path = save_session(s, Path(td) / "C4Save", now=NOW)
            self.assertEqual(path.name, "C4Save_20261019130509.txt")
            self.assertEqual(
                path.read_text(encoding="utf-8").splitlines()[0],
                "Player 1, Column 3",
            )

            fresh = new_session(Difficulty.HARD)
            report = load_session(fresh, path)

        self.assertEqual(report.applied, 6)
        self.assertEqual(report.skipped, 0)
        self.assertEqual(fresh.board.stacks, s.board.stacks)
        self.assertEqual(list(fresh.move_log), list(s.move_log))
        self.assertFalse(fresh.game_won)

    def test_given_bad_lines_when_loading_then_skipped_and_counted(self):
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "odd.txt"
            path.write_text(
                "Player 1, Column 3\n"
                "not a move\n"
                "Player 2, Column 9\n"
                "Player 3, Column 1\n"
                "\n"
                "Player 2 , Column 4\n",
                encoding="utf-8",
            )
            s = new_session()
            report = load_session(s, path)

        self.assertEqual(report.applied, 2)
        self.assertEqual(report.skipped, 3)
        self.assertEqual(s.board.chip_at(3, 0), 1)
        self.assertEqual(s.board.chip_at(4, 0), 2)
        self.assertEqual(len(s.move_log), s.board.chip_count())

    def test_given_undecodable_bytes_when_loading_then_line_skipped(self):
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "binary.txt"
            path.write_bytes(b"Player 1, Column 3\n\xff\xfe junk\nPlayer 2, Column 4\n")
            s = new_session()
            report = load_session(s, path)

        self.assertEqual(report.applied, 2)
        self.assertEqual(report.skipped, 1)
        self.assertEqual(s.board.chip_at(3, 0), 1)
        self.assertEqual(s.board.chip_at(4, 0), 2)

    def test_given_overfull_column_in_file_when_loading_then_extra_moves_skipped(self):
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "full.txt"
            path.write_text("".join(f"Player {1 + i % 2}, Column 0\n" for i in range(8)), encoding="utf-8")
            s = new_session()
            report = load_session(s, path)

        self.assertEqual(report.applied, 6)
        self.assertEqual(report.skipped, 2)

    def test_given_missing_file_when_loading_then_error_and_session_untouched(self):
        s = new_session()
        place_chip(s, 0, 1)
        place_chip(s, 1, 1)
        place_chip(s, 2, 1)
        place_chip(s, 3, 1)
        before = [m for m in s.move_log]

        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(OSError):
                load_session(s, Path(td) / "nope.txt")

        self.assertEqual(list(s.move_log), before)
        self.assertEqual(s.board.chip_count(), 4)
        self.assertTrue(s.game_won)

    def test_given_won_session_when_loading_then_flag_cleared(self):
        s = new_session()
        for col in range(4):
            place_chip(s, col, 1)
        self.assertTrue(s.game_won)

        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "one.txt"
            path.write_text("Player 1, Column 3\n", encoding="utf-8")
            load_session(s, path)

        self.assertFalse(s.game_won)
        self.assertEqual(s.board.chip_count(), 1)

    def test_given_missing_directory_when_saving_then_error(self):
        s = new_session()
        place_chip(s, 0, 1)
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(OSError):
                save_session(s, Path(td) / "missing" / "game", now=NOW)


if __name__ == "__main__":
    unittest.main()
