"""Tests for the YAML task file format."""

import pytest

from taskpad import fileformat
from taskpad.exceptions import TaskFileFormatError, TaskpadError
from taskpad.task import Task


class TestDumps:

    def test_layout(self):
        text = fileformat.dumps([Task(0, "buy milk", True)], 1)
        assert text == (
            "tasks:\n"
            "- id: 0\n"
            "  description: buy milk\n"
            "  completed: true\n"
            "next_id: 1\n"
        )

    def test_empty(self):
        assert fileformat.dumps([], 0) == "tasks: []\nnext_id: 0\n"

    def test_awkward_descriptions_survive(self):
        tasks = [
            Task(0, "yes"),
            Task(1, "  padded  "),
            Task(2, "line one\nline two"),
            Task(3, "- [ ] looks like markdown: #1"),
            Task(4, "123"),
            Task(5, ""),
        ]
        parsed, next_id = fileformat.loads(fileformat.dumps(tasks, 6))
        assert parsed == tasks
        assert next_id == 6


class TestLoads:

    def test_ignores_unknown_keys(self):
        text = (
            "version: 9\n"
            "tasks:\n"
            "- id: 4\n"
            "  description: keep\n"
            "  completed: false\n"
            "  colour: blue\n"
            "next_id: 5\n"
        )
        tasks, next_id = fileformat.loads(text)
        assert tasks == [Task(4, "keep", False)]
        assert next_id == 5

    def test_repairs_stale_next_id(self, caplog):
        text = (
            "tasks:\n"
            "- id: 3\n"
            "  description: a\n"
            "  completed: false\n"
            "next_id: 2\n"
        )
        with caplog.at_level("WARNING", logger="taskpad.fileformat"):
            _, next_id = fileformat.loads(text)
        assert next_id == 4
        assert "does not exceed" in caplog.text

    def test_rejects_duplicate_ids(self):
        text = (
            "tasks:\n"
            "- {id: 1, description: a, completed: false}\n"
            "- {id: 1, description: b, completed: true}\n"
            "next_id: 2\n"
        )
        with pytest.raises(TaskFileFormatError, match="Duplicate task id 1"):
            fileformat.loads(text)

    @pytest.mark.parametrize(
        "entry, field_name",
        [
            ("{id: true, description: a, completed: false}", "id"),
            ("{id: -1, description: a, completed: false}", "id"),
            ("{id: 0, description: 5, completed: false}", "description"),
            ("{id: 0, description: a, completed: 'yes please'}", "completed"),
            ("{id: 0, completed: false}", "description"),
        ],
    )
    def test_rejects_bad_fields(self, entry, field_name):
        text = f"tasks:\n- {entry}\nnext_id: 1\n"
        with pytest.raises(TaskFileFormatError) as excinfo:
            fileformat.loads(text)
        assert excinfo.value.field_name == field_name

    @pytest.mark.parametrize("next_id", ["-1", "true", "'3'"])
    def test_rejects_bad_next_id(self, next_id):
        with pytest.raises(TaskFileFormatError):
            fileformat.loads(f"tasks: []\nnext_id: {next_id}\n")

    def test_rejects_non_mapping_task(self):
        with pytest.raises(TaskFileFormatError, match="not a mapping"):
            fileformat.loads("tasks:\n- just text\nnext_id: 1\n")

    @pytest.mark.parametrize(
        "text",
        [
            "tasks: []\nnext_id: 2024-02-30\n",
            "tasks:\n- {id: 0, description: 2024-13-45, completed: false}\nnext_id: 1\n",
            "[" * 5000 + "]" * 5000,
        ],
    )
    def test_unparseable_values_become_format_errors(self, text):
        with pytest.raises(TaskFileFormatError, match="Invalid YAML"):
            fileformat.loads(text)

    def test_errors_share_base_class(self):
        with pytest.raises(TaskpadError):
            fileformat.loads("{{{")
