from __future__ import annotations
from pathlib import Path
import logging
import time
from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler

from struct_agent.commands.convert import run_convert, console
from struct_agent.config import settings
from struct_agent.errors import SQLParseError
from struct_agent.model import GenerationConfig

logger = logging.getLogger(__name__)


class Handler(FileSystemEventHandler):
    def __init__(
        self,
        sql_file: Path,
        out_dir: Path | None,
        out_file: str | None,
        config: GenerationConfig,
        package: str | None,
        debounce: float | None = None,
    ):
        self.sql_file = sql_file.resolve()
        self.out_dir = out_dir
        self.out_file = out_file
        self.config = config
        self.package = package
        self.debounce = settings.watch_debounce if debounce is None else debounce
        self._last = 0.0

    def regenerate(self) -> Path | None:
        try:
            return run_convert(
                self.sql_file,
                out_dir=self.out_dir,
                out_file=self.out_file,
                config=self.config,
                package=self.package,
            )
        except SQLParseError as e:
            # 편집 중인 파일은 일시적으로 깨져 있을 수 있으니 계속 감시
            console.print(f"[red]SQL parsing error:[/red] {e}")
            return None

    def on_any_event(self, event):
        if event.is_directory:
            return
        if Path(event.src_path).resolve() != self.sql_file:
            return

        # 너무 잦은 재실행 방지(간단 debounce)
        now = time.time()
        if now - self._last < self.debounce:
            return
        self._last = now

        logger.info("change detected: %s", event.src_path)
        self.regenerate()


def watch(
    sql_file: Path,
    out_dir: Path | None = None,
    out_file: str | None = None,
    config: GenerationConfig | None = None,
    package: str | None = None,
) -> None:
    handler = Handler(sql_file, out_dir, out_file, config or GenerationConfig(), package)
    handler.regenerate()

    obs = Observer()
    # 파일 단위 감시는 플랫폼마다 달라서 부모 디렉터리를 감시하고 경로로 거른다
    obs.schedule(handler, str(handler.sql_file.parent), recursive=False)
    obs.start()
    console.print(f"[yellow]Watching[/yellow] {handler.sql_file} (Ctrl+C to stop)")
    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        pass
    finally:
        obs.stop()
        obs.join()
