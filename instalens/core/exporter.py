"""Export utilities for lookup results."""

from pathlib import Path
from typing import TYPE_CHECKING

from instalens.models.result import LookupResult

if TYPE_CHECKING:
    import pandas as pd

try:
    import pandas as pd
    PANDAS_AVAILABLE = True
except ImportError:
    PANDAS_AVAILABLE = False


def to_json(result: LookupResult, indent: int = 2) -> str:
    """
    Convert LookupResult to a camelCase JSON string.

    Args:
        result: LookupResult to serialize
        indent: JSON indentation level

    Returns:
        JSON string
    """
    return result.model_dump_json(indent=indent, by_alias=True)


def to_dict(result: LookupResult) -> dict:
    """Convert LookupResult to the response dictionary."""
    return result.model_dump(mode="json", by_alias=True)


def save_json(
    result: LookupResult,
    filepath: str | Path,
    indent: int = 2,
) -> Path:
    """
    Save LookupResult to JSON file.

    Args:
        result: LookupResult to save
        filepath: Output file path
        indent: JSON indentation level

    Returns:
        Path to saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(result, indent=indent), encoding="utf-8")
    return path


def load_json(filepath: str | Path) -> LookupResult:
    """
    Load LookupResult from JSON file.

    Args:
        filepath: Path to JSON file

    Returns:
        LookupResult instance
    """
    path = Path(filepath)
    return LookupResult.model_validate_json(path.read_text(encoding="utf-8"))


def _check_pandas():
    """Raise ImportError if pandas is not available."""
    if not PANDAS_AVAILABLE:
        raise ImportError(
            "pandas is required for DataFrame export. Install with: pip install pandas"
        )


def to_posts_df(result: LookupResult) -> "pd.DataFrame":
    """
    Convert posts from a LookupResult to a pandas DataFrame.

    Hashtags are joined into a single space-separated column.

    Raises:
        ImportError: If pandas is not installed
    """
    _check_pandas()

    rows = []
    for post in result.posts:
        row = post.model_dump(mode="json", by_alias=True)
        row["hashtags"] = " ".join(post.hashtags)
        row["username"] = result.profile.username
        rows.append(row)

    return pd.DataFrame(rows)


def save_csv(result: LookupResult, filepath: str | Path) -> Path:
    """
    Save the posts of a LookupResult to CSV file.

    Raises:
        ImportError: If pandas is not installed
    """
    _check_pandas()

    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    to_posts_df(result).to_csv(path, index=False)
    return path
