"""Write infrastructure files without ever overwriting existing ones."""

import shutil
from pathlib import Path

from pkg_infra.core.errors import TargetAlreadyExists


def ensure_directory(path: Path) -> bool:
    """Create ``path`` and its parents.

    Returns:
        True if the directory was created, False if it already existed.

    Raises:
        TargetAlreadyExists: If ``path`` or one of its parents is a file.
    """
    if path.is_dir():
        return False
    try:
        path.mkdir(parents=True, exist_ok=True)
    except (FileExistsError, NotADirectoryError) as e:
        raise TargetAlreadyExists(
            f"Can't create directory {path.name}: a file is in the way",
            path=path,
        ) from e
    return True


def _open_exclusive(target: Path, mode: str, **kwargs: str):
    try:
        return target.open(mode, **kwargs)
    except FileExistsError as e:
        raise TargetAlreadyExists(f"{target.name} already exists", path=target) from e


def materialize(target: Path, content: str) -> None:
    """Write ``content`` to a new file at ``target``.

    Raises:
        TargetAlreadyExists: If anything already exists at ``target``,
            whatever its content.
    """
    if target.exists():
        raise TargetAlreadyExists(f"{target.name} already exists", path=target)
    ensure_directory(target.parent)
    with _open_exclusive(target, "x", encoding="utf-8") as f:
        f.write(content)


def copy_file(source: Path, target: Path) -> None:
    """Copy ``source`` to a new file at ``target``, keeping its metadata.

    Raises:
        TargetAlreadyExists: If anything already exists at ``target``.
    """
    if target.exists():
        raise TargetAlreadyExists(f"{target.name} already exists", path=target)
    ensure_directory(target.parent)
    with source.open("rb") as src, _open_exclusive(target, "xb") as dst:
        shutil.copyfileobj(src, dst)
    shutil.copystat(source, target)
