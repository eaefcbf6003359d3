#!filepath: tabular_trainer/utils/filesystem.py
from pathlib import Path
from typing import List, Optional

from tabular_trainer import logs


class FileSystem:
    """
    Filesystem helpers used by input discovery and the artifact store.
    """

    @staticmethod
    def ensure_dir(path: str | Path) -> Path:
        p = Path(path)
        if not p.is_dir():
            p.mkdir(parents=True, exist_ok=True)
            logs.debug(f"[FS] created dir: {p}")
        return p

    @staticmethod
    def safe_write(path: str | Path, data: bytes) -> Path:
        """
        Write `data` to <path>.tmp next to the target, then rename over it.
        A reader never observes a half-written artifact.
        """
        path = Path(path)
        FileSystem.ensure_dir(path.parent)

        tmp_path = path.with_name(path.name + ".tmp")
        try:
            tmp_path.write_bytes(data)
            tmp_path.replace(path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise

        logs.debug(f"[FS] wrote {len(data)} bytes -> {path}")
        return path

    @staticmethod
    def scan_dir(path: str | Path, suffix: Optional[str] = None) -> List[Path]:
        """
        Regular files directly under `path`, sorted by name.
        `suffix` matches case-insensitively (".csv" finds "TRAIN.CSV").
        """
        p = Path(path)
        if not p.is_dir():
            return []

        wanted = suffix.lower() if suffix else None
        return sorted(
            f for f in p.iterdir()
            if f.is_file() and (wanted is None or f.suffix.lower() == wanted)
        )
