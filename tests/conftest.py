import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import tex_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from tex_toolkit.core.models import SourceFile
from tex_toolkit.spellcheck import clear_ignore_list


# Common test fixtures
@pytest.fixture
def sample_corpus():
    """Two small LaTeX buffers."""
    return [
        SourceFile(
            file_id="main.tex",
            file_name="main.tex",
            content="\\section{Intro}\nThe fox and the dog.\nTHE end",
        ),
        SourceFile(
            file_id="chapters/proof.tex",
            file_name="proof.tex",
            content="By the theorem, $x = y$.",
        ),
    ]


@pytest.fixture
def sample_project(tmp_path: Path):
    """Project directory with nested .tex files and a non-LaTeX file."""
    root = tmp_path / "thesis"
    (root / "chapters").mkdir(parents=True)
    (root / "main.tex").write_text(
        "\\documentclass{article}\n\\begin{document}\nThis is teh document.\n\\end{document}\n",
        encoding="utf-8",
    )
    (root / "chapters" / "intro.tex").write_text(
        "We derive teh result with $a+b$.\n", encoding="utf-8"
    )
    (root / "notes.txt").write_text("teh notes", encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def reset_session_ignore_list():
    """Keep the process-wide ignore list isolated between tests."""
    clear_ignore_list()
    yield
    clear_ignore_list()
