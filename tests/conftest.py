"""
Pytest fixtures for PathBoost tests.
"""

import logging
import sys
import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest

# Add project root to path for pathboost imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathboost.documents import Chunk, SearchResult  # noqa: E402


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def data_path(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point PATHBOOST_DATA_PATH at a temporary directory."""
    path = temp_dir / "pathboost"
    monkeypatch.setenv("PATHBOOST_DATA_PATH", str(path))
    monkeypatch.delenv("PATHBOOST_BOOST_ENABLED", raising=False)
    monkeypatch.delenv("PATHBOOST_DEBUG", raising=False)
    monkeypatch.delenv("PATHBOOST_LOG_FILE", raising=False)
    return path


@pytest.fixture
def make_results() -> Callable[..., list[SearchResult]]:
    """Build SearchResults from (file_path, score) pairs."""

    def _make(*pairs: tuple[str, float]) -> list[SearchResult]:
        return [
            SearchResult(chunk=Chunk(file_path=path, id=f"chunk-{i}"), score=score)
            for i, (path, score) in enumerate(pairs)
        ]

    return _make


@pytest.fixture(autouse=True)
def reset_pathboost_logger() -> Generator[None, None, None]:
    """Drop handlers added by setup_logging() so tests stay isolated."""
    yield
    logger = logging.getLogger("pathboost")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
