"""
Tests for reading task descriptors from a tasks file.
"""

import json

import pytest

from wtree.core.worktree import TaskDescriptor, TaskFileError, load_tasks, parse_tasks


class TestParseTasks:
    def test_preserves_order_and_fields(self):
        content = json.dumps(
            [
                {"name": "backend-api", "prompt": "Create POST /api/auth/login endpoint"},
                {"name": "frontend-ui", "prompt": "Build login form", "baseBranch": "develop"},
            ]
        )

        tasks = parse_tasks(content)

        assert [t.name for t in tasks] == ["backend-api", "frontend-ui"]
        assert tasks[0].prompt == "Create POST /api/auth/login endpoint"
        assert tasks[0].base_branch is None
        assert tasks[1].base_branch == "develop"

    def test_prompt_optional_and_extra_keys_ignored(self):
        tasks = parse_tasks('[{"name": "docs", "owner": "someone"}]')

        assert tasks == [TaskDescriptor(name="docs")]
        assert tasks[0].prompt is None

    def test_prompt_is_opaque(self):
        tasks = parse_tasks(
            json.dumps(
                [
                    {"name": "a", "prompt": None},
                    {"name": "b", "prompt": {"text": "do it", "files": ["api.py"]}},
                    {"name": "c", "prompt": ["step one", "step two"]},
                ]
            )
        )

        assert [t.prompt for t in tasks] == [
            None,
            {"text": "do it", "files": ["api.py"]},
            ["step one", "step two"],
        ]

    def test_empty_list(self):
        assert parse_tasks("[]") == []

    @pytest.mark.parametrize(
        "content",
        [
            "not json",
            '{"name": "x"}',
            '[{"prompt": "no name"}]',
            '[{"name": ""}]',
            '[{"name": 3}]',
        ],
    )
    def test_invalid_content(self, content):
        with pytest.raises(TaskFileError, match="Invalid tasks file"):
            parse_tasks(content)


class TestLoadTasks:
    def test_reads_file(self, tmp_path):
        tasks_file = tmp_path / "tasks.json"
        tasks_file.write_text(json.dumps([{"name": "a"}, {"name": "b", "baseBranch": "dev"}]))

        tasks = load_tasks(tasks_file)

        assert [(t.name, t.base_branch) for t in tasks] == [("a", None), ("b", "dev")]

    def test_missing_file(self, tmp_path):
        with pytest.raises(TaskFileError, match="Cannot read tasks file"):
            load_tasks(tmp_path / "missing.json")
