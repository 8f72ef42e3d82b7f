"""Running coroutines off the Tk main thread."""

import asyncio
import threading
from concurrent.futures import Future
from typing import Any, Callable, Coroutine, Optional
import logging

logger = logging.getLogger(__name__)

# Signature of tkinter's ``after``: (delay_ms, callback)
Scheduler = Callable[[int, Callable[[], None]], Any]


class AsyncBridge:
    """Owns an asyncio event loop running in a daemon thread.

    Coroutines are submitted from the GUI thread with ``run``; results and
    errors can be routed back through a scheduler such as ``widget.after``.
    """

    def __init__(self):
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        """Start the loop thread (no-op if already started)."""
        if self._thread is not None:
            return

        self._loop = asyncio.new_event_loop()
        started = threading.Event()
        self._thread = threading.Thread(
            target=self._run_loop, args=(started,), daemon=True, name="AsyncBridge"
        )
        self._thread.start()
        started.wait(timeout=5)
        logger.info("AsyncBridge started")

    def _run_loop(self, started: threading.Event) -> None:
        asyncio.set_event_loop(self._loop)
        self._loop.call_soon(started.set)
        try:
            self._loop.run_forever()
        finally:
            self._loop.close()
            logger.info("AsyncBridge event loop closed")

    def run(
        self,
        coro: Coroutine[Any, Any, Any],
        on_result: Optional[Callable[[Any], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
        schedule: Optional[Scheduler] = None,
    ) -> Optional[Future]:
        """Schedule a coroutine on the loop.

        Args:
            coro: The coroutine to run
            on_result: Called with the result
            on_error: Called with the exception if the coroutine fails
            schedule: Where to call the callbacks (e.g. ``root.after``);
                without it they run on the loop thread

        Returns:
            A Future for the result, or None if the bridge is not running
        """
        if self._loop is None or self._thread is None:
            logger.warning("AsyncBridge not running, cannot schedule coroutine")
            coro.close()
            return None

        future = asyncio.run_coroutine_threadsafe(coro, self._loop)

        def dispatch(callback: Callable[[], None]) -> None:
            if schedule is not None:
                schedule(0, callback)
            else:
                callback()

        def handle_result(f: Future) -> None:
            try:
                result = f.result()
            except Exception as e:
                logger.error(f"Error in async operation: {e}")
                if on_error:
                    dispatch(lambda: on_error(e))
                return
            if on_result:
                dispatch(lambda: on_result(result))

        future.add_done_callback(handle_result)
        return future

    def stop(self) -> None:
        """Stop the loop and wait for its thread."""
        if self._loop is None or self._thread is None:
            return

        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout=5)
        self._thread = None
        self._loop = None
        logger.info("AsyncBridge stopped")

    def __enter__(self) -> "AsyncBridge":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()
