"""Progress bar helper for batch operations."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from tqdm import tqdm


class Progress:
    """
    Thin tqdm wrapper that closes the bar on completion or interruption.

    Bars render on stderr so command output on stdout stays clean.
    """

    def __init__(
        self,
        iterable: Iterable[Any],
        desc: str = "Processing",
        total: Optional[int] = None,
        disable: bool = False,
    ):
        self._tqdm = tqdm(
            iterable,
            desc=desc,
            total=total,
            leave=False,
            dynamic_ncols=True,
            disable=disable,
        )

    def __iter__(self) -> Iterator[Any]:
        try:
            yield from self._tqdm
        finally:
            self._tqdm.close()

    def write(self, message: str) -> None:
        """Print a message above the progress bar on its own line."""
        self._tqdm.write(message)
