from pathlib import Path
import os
import shutil
import tempfile

from plotly_typegen.adapters.errors import WorkspaceCommitError


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class FilesystemWorkspace:
    def __init__(self, root: Path) -> None:
        self.root = root

    def _resolve(self, rel_path: Path) -> Path:
        return rel_path if rel_path.is_absolute() else self.root / rel_path

    def _replace(self, src: Path, dest: Path) -> None:
        os.replace(src, dest)

    def read_text(self, rel_path: Path) -> str | None:
        path = self._resolve(rel_path)
        if not path.is_file():
            return None
        return path.read_text(encoding="utf-8")

    def write_text(self, rel_path: Path, content: str) -> Path:
        dest = self._resolve(rel_path)
        created_dirs: list[Path] = []
        for parent in reversed(dest.parents):
            if not parent.exists():
                created_dirs.append(parent)
        dest.parent.mkdir(parents=True, exist_ok=True)

        stage_fd, stage_name = tempfile.mkstemp(
            prefix=".plotly-typegen-stage-", dir=dest.parent
        )
        stage = Path(stage_name)
        backup: Path | None = None
        try:
            with os.fdopen(stage_fd, "w", encoding="utf-8", newline="") as handle:
                handle.write(content)
            if dest.exists():
                shutil.copymode(dest, stage)
                backup_fd, backup_name = tempfile.mkstemp(
                    prefix=".plotly-typegen-backup-", dir=dest.parent
                )
                os.close(backup_fd)
                backup = Path(backup_name)
                shutil.copy2(dest, backup)
            else:
                os.chmod(stage, _default_file_mode())
            self._replace(stage, dest)
        except Exception as e:
            if stage.exists():
                stage.unlink()
            if backup is not None and backup.exists():
                shutil.copy2(backup, dest)
                backup.unlink()
            for directory in reversed(created_dirs):
                if directory.exists():
                    try:
                        directory.rmdir()
                    except OSError:
                        pass
            raise WorkspaceCommitError(
                f"Could not write {dest}", details={"path": str(dest)}, cause=e
            )
        finally:
            if stage.exists():
                stage.unlink()
            if backup is not None and backup.exists():
                backup.unlink()
        return dest
