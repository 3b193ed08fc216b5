import sys
from pathlib import Path

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


EXAMPLE_CODEOWNERS = """\
# Example ownership rules
*.js    @js-team
/docs/  @docs-team
/docs/internal/  @secops
"""


@pytest.fixture
def example_text() -> str:
    return EXAMPLE_CODEOWNERS


@pytest.fixture
def write_codeowners(tmp_path: Path):
    def _write(text: str, relative: str = "CODEOWNERS") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def codeowners_file(write_codeowners) -> Path:
    return write_codeowners(EXAMPLE_CODEOWNERS)


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
