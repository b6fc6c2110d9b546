"""Backlight information from /sys/class/backlight."""

from __future__ import annotations

import glob
import os
import queue
import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from sysstat.lib import PathLike, path_read_int, path_read_str

BACKLIGHT_PATH = "/sys/class/backlight"

_INT_ATTRS = ("bl_power", "brightness", "actual_brightness", "max_brightness")
_WATCHED_ATTRS = frozenset((*_INT_ATTRS, "type"))


@dataclass(frozen=True)
class BacklightInfo:
    """State of one backlight.

    ``bl_power`` is 0 for power on and 4 for power off; ``brightness`` is the
    level stored in the driver and ``actual_brightness`` the level reported by
    the hardware, both between 0 and ``max_brightness``. ``type`` is one of
    "firmware", "platform" or "raw".
    """

    name: str
    type: str
    bl_power: int
    brightness: int
    actual_brightness: int
    max_brightness: int


def _glob_names(root: PathLike, pattern: str) -> list[str]:
    return [
        os.path.basename(path)
        for path in sorted(glob.glob(os.path.join(os.fspath(root), pattern)))
    ]


def _read_attr(directory: str, attr: str) -> int | str:
    path = os.path.join(directory, attr)
    return path_read_str(path) if attr == "type" else path_read_int(path)


def backlight(basepath: str, root: PathLike = BACKLIGHT_PATH) -> BacklightInfo:
    """Read the backlight at ``root``/``basepath``."""
    directory = os.path.join(os.fspath(root), basepath)
    values = {attr: path_read_int(os.path.join(directory, attr)) for attr in _INT_ATTRS}
    return BacklightInfo(
        name=basepath,
        type=path_read_str(os.path.join(directory, "type")),
        **values,
    )


def backlights(pattern: str = "*", root: PathLike = BACKLIGHT_PATH) -> list[BacklightInfo]:
    """Read every backlight under ``root`` whose name matches ``pattern``."""
    return [backlight(name, root) for name in _glob_names(root, pattern)]


class _BacklightHandler(FileSystemEventHandler):
    """Re-reads a changed attribute file and emits the updated state."""

    def __init__(
        self, directory: str, info: BacklightInfo, emit: Callable[[object], None]
    ) -> None:
        super().__init__()
        self._directory = directory
        self._info = info
        self._emit = emit
        self._failed = False
        self._lock = threading.Lock()

    def on_modified(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        attr = os.path.basename(os.fsdecode(event.src_path))
        if attr not in _WATCHED_ATTRS:
            return
        with self._lock:
            if self._failed:
                return
            try:
                value = _read_attr(self._directory, attr)
            except Exception as exc:  # reported to the consumer
                self._failed = True
                self._emit(exc)
                return
            self._info = replace(self._info, **{attr: value})
            self._emit(self._info)


_CLOSED = object()


class BacklightWatcher:
    """Streams backlight states as their attribute files are written.

    Iterating yields the current state of every matching backlight first, then
    a fresh BacklightInfo each time one of its attribute files changes. An
    error while re-reading a backlight is raised from the iteration. Iteration
    ends once the watcher is closed and the pending states are consumed.
    """

    def __init__(self, pattern: str = "*", root: PathLike = BACKLIGHT_PATH) -> None:
        self._queue: queue.Queue[object] = queue.Queue()
        self._closed = False
        self._observer = Observer()
        root = os.fspath(root)
        infos = [backlight(name, root) for name in _glob_names(root, pattern)]
        for info in infos:
            directory = os.path.join(root, info.name)
            handler = _BacklightHandler(directory, info, self._queue.put)
            self._observer.schedule(handler, directory, recursive=False)
            self._queue.put(info)
        self._observer.start()

    def __enter__(self) -> BacklightWatcher:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __iter__(self) -> Iterator[BacklightInfo]:
        while True:
            item = self._queue.get()
            if item is _CLOSED:
                self._queue.put(_CLOSED)
                return
            if isinstance(item, BaseException):
                raise item
            yield item

    def close(self) -> None:
        """Stop watching; iteration ends after the pending states."""
        if self._closed:
            return
        self._closed = True
        self._observer.stop()
        if self._observer.is_alive():
            self._observer.join()
        self._queue.put(_CLOSED)