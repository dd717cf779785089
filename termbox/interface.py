# interface.py

import asyncio
import signal
import sys
from typing import Optional, TextIO

from prompt_toolkit.input import create_input

from .commands import CommandDispatcher
from .config import TermboxConfig
from .display import Display, FrameDefinitions
from .keys import ESCAPE_TIMEOUT, KeyDecoder
from .logger import Logger
from .scheduler import EventScheduler
from .state import InputState, Resize, Shutdown

class Interface:
    """
    Main entry point that assembles the Display, InputState and scheduler.
    """

    def __init__(self, config: Optional[TermboxConfig] = None,
                 stream: Optional[TextIO] = None):
        """
        Initialize components from a config.

        Args:
            config: Runtime settings; defaults plus TERMBOX_* environment.
            stream: Where terminal output goes. Defaults to stdout.
        """
        self.config = config or TermboxConfig.from_env()
        self._init_components(stream)

    def _init_components(self, stream: Optional[TextIO]) -> None:
        try:
            self.logger = Logger(__name__, self.config.logging_enabled, self.config.log_file)

            self.display = Display(
                definitions=FrameDefinitions.named(self.config.glyphs),
                stream=stream,
                logger=self.logger
            )
            size = self.display.terminal.get_size()
            self.dispatcher = CommandDispatcher()
            self.state = InputState(size.columns, size.lines, dispatcher=self.dispatcher)
            self.scheduler = EventScheduler(
                self.state,
                self.display,
                logger=self.logger,
                tick_interval=self.config.tick_interval,
                max_write_failures=self.config.max_write_failures
            )
            self.logger.debug(
                f"Initialized at {size.columns}x{size.lines}, "
                f"commands: {', '.join(self.dispatcher.list_commands())}"
            )
            if self.config.banner:
                self.preface(self.config.banner)

        except Exception as e:
            if hasattr(self, 'logger'):
                self.logger.error(f"Init error: {e}")
            raise

    def preface(self, text: str, title: Optional[str] = None,
                border_color: Optional[str] = None) -> None:
        """Show a banner panel above the frame when the interface starts."""
        self.display.preface.add_content(text, title=title, border_color=border_color)

    def start(self) -> None:
        """Run until the user exits; the terminal is restored either way."""
        self.scheduler.preface_lines = self.display.preface.render(self.state.cols)
        try:
            asyncio.run(self._run())
        except KeyboardInterrupt:
            self.logger.debug("Interrupted")

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        inp = create_input(sys.stdin)
        decoder = KeyDecoder()
        flush_handle = None

        def feed(key_presses) -> None:
            for event in decoder.decode(key_presses):
                self.scheduler.post(event)

        def flush_pending() -> None:
            feed(inp.flush_keys())

        def on_input() -> None:
            nonlocal flush_handle
            feed(inp.read_keys())
            if flush_handle is not None:
                flush_handle.cancel()
            # A lone Escape stays in the parser until flushed
            flush_handle = loop.call_later(ESCAPE_TIMEOUT, flush_pending)

        def on_resize() -> None:
            size = self.display.terminal.get_size()
            self.scheduler.post(Resize(size.columns, size.lines))

        loop.add_signal_handler(signal.SIGWINCH, on_resize)
        loop.add_signal_handler(signal.SIGTERM, self.scheduler.post, Shutdown())
        try:
            with inp.raw_mode(), inp.attach(on_input):
                await self.scheduler.run()
        finally:
            if flush_handle is not None:
                flush_handle.cancel()
            loop.remove_signal_handler(signal.SIGWINCH)
            loop.remove_signal_handler(signal.SIGTERM)
            inp.close()
