"""Tests for the command-line interface."""

import json

import pytest

from top_english_words.cli import main


class TestInfo:

    def test_builtin(self, capsys):
        assert main(['info']) == 0
        out = capsys.readouterr().out
        assert "Words: 1000" in out
        assert "First: the" in out
        assert "Last: fellow" in out

    def test_words_file(self, capsys, words_file):
        assert main(['--words-file', str(words_file), 'info']) == 0
        out = capsys.readouterr().out
        assert "Words: 10" in out
        assert "Last: it" in out

    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out


class TestWordsFileErrors:

    def test_missing_file(self, capsys, tmp_path):
        assert main(['--words-file', str(tmp_path / 'nope.txt'), 'info']) == 1
        assert "Error reading word list" in capsys.readouterr().err

    def test_duplicate_words(self, capsys, tmp_path):
        path = tmp_path / "dup.txt"
        path.write_text("alpha\nalpha\n", encoding='utf-8')
        assert main(['--words-file', str(path), 'info']) == 1
        assert "Duplicate word 'alpha'" in capsys.readouterr().err


class TestAll:

    def test_rank_order(self, capsys, words_file, small_words):
        assert main(['--words-file', str(words_file), 'all']) == 0
        assert capsys.readouterr().out.split() == small_words

    def test_alphabetical_json(self, capsys, words_file, small_words):
        assert main(['--words-file', str(words_file), 'all', '-a', '--json']) == 0
        assert json.loads(capsys.readouterr().out) == sorted(small_words)

    def test_builtin_count(self, capsys):
        assert main(['all']) == 0
        assert len(capsys.readouterr().out.split()) == 1000


class TestRange:

    def test_half_open(self, capsys):
        assert main(['range', '995', '1000']) == 0
        assert capsys.readouterr().out.split() == ['scene', 'thread', 'dinner', 'bridge', 'fellow']

    def test_inclusive_alphabetical(self, capsys):
        assert main(['range', '0', '4', '--inclusive', '-a']) == 0
        assert capsys.readouterr().out.split() == ['a', 'and', 'of', 'the', 'to']

    def test_open_end(self, capsys, words_file):
        assert main(['--words-file', str(words_file), 'range', '8']) == 0
        assert capsys.readouterr().out.split() == ['that', 'it']

    def test_json(self, capsys):
        assert main(['range', '0', '2', '--json']) == 0
        assert json.loads(capsys.readouterr().out) == ['the', 'of']

    @pytest.mark.parametrize("argv", [
        ['range', '995', '1001'],
        ['range', '5', '5'],
        ['range', '0', '0'],
        ['range', '6', '4', '--inclusive'],
    ])
    def test_invalid(self, capsys, argv):
        assert main(argv) == 1
        captured = capsys.readouterr()
        assert captured.out == ''
        assert "Invalid range" in captured.err


class TestWord:

    def test_first(self, capsys):
        assert main(['word', '0']) == 0
        assert capsys.readouterr().out.strip() == 'the'

    def test_out_of_range(self, capsys):
        assert main(['word', '1000']) == 1
        assert "No word at rank 1000" in capsys.readouterr().err

    def test_negative(self, capsys):
        assert main(['word', '-1']) == 1
        assert "No word at rank -1" in capsys.readouterr().err


class TestRank:

    def test_found(self, capsys):
        assert main(['rank', 'the', 'and']) == 0
        assert capsys.readouterr().out.splitlines() == ['0\tthe', '3\tand']

    def test_missing(self, capsys):
        assert main(['rank', 'the', 'The']) == 1
        captured = capsys.readouterr()
        assert captured.out.splitlines() == ['0\tthe']
        assert "Not a top word: The" in captured.err
