from pathlib import Path
from typing import List, Union

from sorare_cards.exceptions import InputFileError

DEFAULT_USERS_PATH = Path("users.txt")


def load_user_slugs(path: Union[str, Path] = DEFAULT_USERS_PATH) -> List[str]:
    """
    Read user slugs from a newline-delimited text file.

    Lines are stripped and blank lines dropped; order and duplicates are
    kept. Any open, read or decode failure raises InputFileError.
    """
    path = Path(path)
    try:
        # utf-8-sig drops a leading BOM written by some editors
        with open(path, "r", encoding="utf-8-sig") as f:
            return [line.strip() for line in f if line.strip()]
    except FileNotFoundError as e:
        raise InputFileError(f"Cannot open user list {path}: file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileError(f"Error reading user list {path}: {e}") from e
