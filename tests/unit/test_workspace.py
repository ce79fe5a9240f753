"""Tests for tutor.workspace."""

from __future__ import annotations

from tutor.lesson_types import Language
from tutor.workspace import create_exercise_file, exercise_file_name


class TestCreateExerciseFile:
    def test_file_name(self):
        assert exercise_file_name(Language.RUST, 2) == "exercise_2.rs"
        assert exercise_file_name(Language.JAVASCRIPT, 1) == "exercise_1.js"

    def test_writes_scaffold_under_root(self, tmp_path):
        root = tmp_path / "nested" / "work"
        path = create_exercise_file(Language.CPP, 4, root)
        assert path == root / "exercise_4.cpp"
        text = path.read_text()
        assert text.startswith("// Exercise 4\n")
        assert "#include <iostream>" in text

    def test_overwrites_existing_file(self, tmp_path):
        path = create_exercise_file(Language.JAVASCRIPT, 1, tmp_path)
        path.write_text("old attempt")
        create_exercise_file(Language.JAVASCRIPT, 1, tmp_path)
        assert path.read_text() == "// Exercise 1\n// Write your solution here\n\n"
