"""Tests for verify_docs module."""

from cli_markdown import Command, help_markdown
from cli_markdown.verify_docs import DocVerifier


def write_doc(temp_dir, text):
    path = temp_dir / "cli.md"
    path.write_text(text, encoding="utf-8")
    return DocVerifier(str(path))


class TestDocVerifier:
    """Test DocVerifier class."""

    def test_generated_document_passes(self, temp_dir, tool_command):
        verifier = write_doc(temp_dir, help_markdown(tool_command))

        assert verifier.verify_all()
        assert verifier.issues == []

    def test_broken_link(self, temp_dir, tool_command):
        text = help_markdown(tool_command).replace("## `tool run`", "## `tool start`")
        verifier = write_doc(temp_dir, text)

        assert not verifier.verify_all()
        assert any(severity == "ERROR" and "#tool-run" in message for _, severity, message in verifier.issues)

    def test_anchor_collision_warning(self, temp_dir):
        root = Command(name="a", subcommands=(
            Command(name="b-c"),
            Command(name="b", subcommands=(Command(name="c"),)),
        ))
        verifier = write_doc(temp_dir, help_markdown(root))

        assert verifier.verify_all()
        assert [severity for _, severity, _ in verifier.issues] == ["WARNING"]
        assert "#a-b-c" in verifier.issues[0][2]

    def test_unclosed_code_block(self, temp_dir, capsys):
        verifier = write_doc(temp_dir, help_markdown(Command(name="t", about="```\nexample")))

        assert not verifier.verify_all()
        assert "Unclosed code block" in capsys.readouterr().out
