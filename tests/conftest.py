"""Session-wide cleanup of files a default-configured run may leave in the repo root"""

import shutil
from pathlib import Path

import pytest

from blogpub.config import Settings


_REPO_ROOT = Path(__file__).parent.parent


@pytest.fixture(scope="session", autouse=True)
def remove_default_outputs():
    """Delete the default ledger database and the default bundle directory after the run."""
    yield
    defaults = Settings()
    db_file = _REPO_ROOT / defaults.db_url.removeprefix("sqlite:///")
    if db_file.is_file():
        db_file.unlink()
    out_dir = _REPO_ROOT / defaults.output_dir
    if out_dir.is_dir():
        shutil.rmtree(out_dir)
        # drop the emptied content/ parent as well
        if not any(out_dir.parent.iterdir()):
            out_dir.parent.rmdir()
