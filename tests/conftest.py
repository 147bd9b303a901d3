#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import pathlib

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

PREFIXES_TOML = """
[prefixes.millimetre]
labels = ["m", "", "k"]
multiplier = 1000

[prefixes.decimal]
labels = ["", "da", "h"]
multiplier = 10
"""


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def prefix_file(tmp_path: pathlib.Path):
    """Fixture to write a TOML prefix systems file, with default or given content."""

    def _create_file(content: str = PREFIXES_TOML) -> pathlib.Path:
        file_path = tmp_path / "prefixes.toml"
        file_path.write_text(content, encoding="utf-8")
        return file_path

    return _create_file
