"""Directory listing that keeps whatever was read before an error."""

import os


def scan_directory(path: str) -> tuple[list[os.DirEntry], OSError | None]:
    """List the direct entries of a directory.

    A read error part way through stops the listing, but the entries read so
    far are kept and the error is returned next to them.

    Args:
        path: Directory to list.

    Returns:
        Entries in listing order, and the error that cut the listing short, if any.

    Raises:
        OSError: If the directory cannot be opened at all.
    """
    entries: list[os.DirEntry] = []
    with os.scandir(path) as it:
        while True:
            try:
                entry = next(it)
            except StopIteration:
                break
            except OSError as e:
                return entries, e
            entries.append(entry)

    return entries, None
