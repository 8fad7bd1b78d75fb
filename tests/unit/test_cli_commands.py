"""Tests for the CLI command groups."""

import gzip

from typer.testing import CliRunner

from dfsaccess.cli import app

runner = CliRunner()


class TestCLIStructure:
    """Test the CLI command group structure."""

    def test_cli_help(self):
        """Test that main CLI help shows command groups."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "fs" in result.stdout
        assert "plan" in result.stdout
        assert "admin" in result.stdout

    def test_fs_group_help(self):
        """Test that the fs group shows available commands."""
        result = runner.invoke(app, ["fs", "--help"])
        assert result.exit_code == 0
        assert "ls" in result.stdout
        assert "rm" in result.stdout
        assert "sniff" in result.stdout


class TestFsCommands:
    """Test fs command invocation against a local tree."""

    def test_ls(self, lake):
        result = runner.invoke(app, ["fs", "ls", f"file://{lake}"])

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert len(lines) == 5
        assert lines[0].endswith("_SUCCESS")

    def test_ls_glob(self, lake):
        result = runner.invoke(app, ["fs", "ls", f"file://{lake}/part-000*", "--glob"])

        assert result.exit_code == 0
        assert [line.rsplit("/", 1)[-1] for line in result.stdout.splitlines()] == [
            "part-00000",
            "part-00001",
            "part-00002.gz",
        ]

    def test_ls_missing_is_empty_unless_strict(self, lake):
        missing = f"file://{lake}/missing"

        assert runner.invoke(app, ["fs", "ls", missing]).stdout == ""
        assert runner.invoke(app, ["fs", "ls", missing, "--strict"]).exit_code == 1

    def test_ls_invalid_locator(self):
        result = runner.invoke(app, ["fs", "ls", "hdfs://node A/x"])

        assert result.exit_code == 1

    def test_rm_reports_failures(self, tmp_path):
        """Test rm keeps going past a failure and exits 1."""
        target = tmp_path / "cleanup"
        target.mkdir()
        (target / "empty.txt").write_bytes(b"")
        (target / "full").mkdir()
        (target / "full" / "data").write_text("x")

        result = runner.invoke(app, ["fs", "rm", f"file://{target}"])

        assert result.exit_code == 1
        assert "deleted" in result.stdout
        assert "failed" in result.stdout
        assert not (target / "empty.txt").exists()
        assert (target / "full").exists()

    def test_rm_recursive(self, lake):
        result = runner.invoke(app, ["fs", "rm", f"file://{lake}", "--recursive"])

        assert result.exit_code == 0
        assert list(lake.iterdir()) == []

    def test_sniff(self, tmp_path):
        (tmp_path / "a.gz").write_bytes(gzip.compress(b"x\n"))
        (tmp_path / "b.seq").write_bytes(b"SEQ\x06")
        (tmp_path / "c.txt").write_text("plain\n")

        result = runner.invoke(
            app,
            ["fs", "sniff", f"file://{tmp_path}/a.gz", f"file://{tmp_path}/b.seq", f"file://{tmp_path}/c.txt"],
        )

        assert result.exit_code == 0
        kinds = [line.split("\t")[0] for line in result.stdout.splitlines()]
        assert kinds == ["CompressedText", "SequenceContainer", "PlainText"]

    def test_sniff_missing_file(self, tmp_path):
        result = runner.invoke(app, ["fs", "sniff", f"file://{tmp_path}/missing"])

        assert result.exit_code == 1


class TestPlanAndAdminCommands:
    """Test plan and admin commands."""

    def test_plan_tables(self):
        result = runner.invoke(app, ["plan", "tables", "tbl[0-2],users"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["tbl0", "tbl1", "tbl2", "users"]

    def test_admin_config(self):
        result = runner.invoke(app, ["admin", "config", "storage://nodeA:9000/data/in", "--ugi", "user1"])

        assert result.exit_code == 0
        assert "Scheme: storage" in result.stdout
        assert "fs.default.name" in result.stdout
        assert "storage://nodeA:9000" in result.stdout
        assert "user1" in result.stdout

    def test_admin_settings(self, isolated_home):
        result = runner.invoke(app, ["admin", "settings"])

        assert result.exit_code == 0
        assert "hadoop-site.xml" in result.stdout
        assert "fs.default.name" in result.stdout
