"""Append-only order log file.

One line per committed order::

    [ORDER #1] Paid with Cash

The file is opened on the first write and kept open until ``close()``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

import structlog

from pos.domain.exceptions import SinkUnavailableError
from pos.domain.repository.order_log_sink import OrderLogSink

logger = structlog.get_logger(__name__)


class FileOrderLogSink(OrderLogSink):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._handle: TextIO | None = None

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    # --- OrderLogSink interface -----------------------------------------------

    def record(self, order_id: int, payment_method: str) -> None:
        handle = self._open()
        try:
            handle.write(f"[ORDER #{order_id}] Paid with {payment_method}\n")
            handle.flush()
        except OSError as exc:
            raise SinkUnavailableError(
                f"Failed to write order log {self._file_path}: {exc}"
            ) from exc

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None
            logger.debug("Order log closed", path=str(self._file_path))

    def __enter__(self) -> FileOrderLogSink:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # --- File helpers ---------------------------------------------------------

    def _open(self) -> TextIO:
        if self._handle is None:
            try:
                self._handle = self._file_path.open("a", encoding="utf-8")
            except OSError as exc:
                logger.error("Cannot open order log", path=str(self._file_path), error=str(exc))
                raise SinkUnavailableError(
                    f"Failed to open order log {self._file_path}: {exc}"
                ) from exc
            logger.debug("Order log opened", path=str(self._file_path))
        return self._handle
