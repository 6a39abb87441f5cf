"""
HashBench Engine
=================

Execution coordinator for the hashing benchmark.  The engine owns the
pipeline

    SaltResolver -> AlgorithmDispatcher -> TimingHarness -> ResultAggregator

and runs it on a dedicated worker thread, so the caller's event loop
stays free while a slow derivation (Argon2id with a large memory cost)
is in progress.

State model::

    IDLE --submit(request)--> BUSY --completed(result)--> IDLE

The result is handed to the sink from the coroutine that awaited the
worker, i.e. on the event-loop thread.  That thread is the single writer
of the result log; the worker never touches it.  The busy flag is also
only read and written on the loop thread.  A submission that arrives
while BUSY is rejected with :class:`EngineBusyError`; callers that want
several runs await them one after another (see :meth:`submit_many`).

There is no cancellation or timeout: once submitted, a computation runs
to completion.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
from typing import Callable, Iterable, Optional

from shared.config import AppConfig
from shared.logger import BenchLogger

from hashbench.algorithms.dispatcher import AlgorithmDispatcher
from hashbench.core.aggregator import ResultAggregator, algorithm_label
from hashbench.core.errors import EngineBusyError, HashValidationError
from hashbench.core.models import (
    EngineState,
    HashRequest,
    HashResult,
    ResultLog,
)
from hashbench.core.timing import TimingHarness, TimingMeasurement
from hashbench.parsers.salt import SaltResolver

ResultSink = Callable[[HashResult], None]
StateListener = Callable[[EngineState], None]


class HashBenchEngine:
    """Coordinates one benchmark submission at a time.

    Usage::

        engine = HashBenchEngine()
        result = await engine.submit(HashRequest(input_text="hello"))
        engine.results.latest.output
        # 'LPJNul+wow4m6DsqxbninhsWHlwfp0JecwQzYpOLmCQ='

    Args:
        config: Application configuration; defaults are used when omitted.
        sink: Receives each result on the loop thread. Defaults to
            appending to :attr:`results`.
        on_state_change: Called with the new state on every transition.
        on_validation_error: Called with the error result when a request
            is refused (e.g. Argon2id without salt), after it reached the sink.
        logger: Logger instance; built from ``config.global_settings`` if omitted.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        *,
        sink: Optional[ResultSink] = None,
        on_state_change: Optional[StateListener] = None,
        on_validation_error: Optional[ResultSink] = None,
        logger: Optional[BenchLogger] = None,
    ) -> None:
        self.config = config or AppConfig()
        settings = self.config.hashbench
        self.logger = logger or BenchLogger.from_config(
            "engine", self.config.global_settings
        )

        self.results = ResultLog()
        self._sink: ResultSink = sink or self.results.append
        self._on_state_change = on_state_change
        self._on_validation_error = on_validation_error

        self._salt_resolver = SaltResolver(settings.salt_placeholder)
        self._dispatcher = AlgorithmDispatcher(hash_len=settings.argon2_hash_len)
        self._harness = TimingHarness(
            iterations=settings.timing_iterations,
            decimals=settings.result_decimals,
            logger=self.logger,
        )
        self._aggregator = ResultAggregator(error_token=settings.error_token)

        self._executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="hashbench-worker"
        )
        self._state = EngineState.IDLE
        self.last_measurement: Optional[TimingMeasurement] = None

    # ------------------------------------------------------------------ #
    #  State
    # ------------------------------------------------------------------ #

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def is_busy(self) -> bool:
        return self._state is EngineState.BUSY

    def _set_state(self, state: EngineState) -> None:
        self._state = state
        if self._on_state_change is not None:
            self._on_state_change(state)

    # ------------------------------------------------------------------ #
    #  Submission
    # ------------------------------------------------------------------ #

    async def submit(self, request: HashRequest) -> Optional[HashResult]:
        """Run *request* off the loop thread and deliver its result.

        Returns:
            The delivered result, or ``None`` for blank input (no-op).

        Raises:
            EngineBusyError: Another submission is still running.
        """
        if request.is_blank:
            self.logger.debug("Blank input ignored")
            return None
        if self.is_busy:
            raise EngineBusyError(
                "A hash computation is already running; wait for it to finish."
            )

        self._set_state(EngineState.BUSY)
        try:
            loop = asyncio.get_running_loop()
            result, measurement = await loop.run_in_executor(
                self._executor, self._execute, request
            )
            self.last_measurement = measurement
            self._deliver(result)
        finally:
            self._set_state(EngineState.IDLE)
        return result

    async def submit_many(self, requests: Iterable[HashRequest]) -> list[HashResult]:
        """Submit *requests* sequentially, in order, skipping blank ones."""
        delivered: list[HashResult] = []
        for request in requests:
            result = await self.submit(request)
            if result is not None:
                delivered.append(result)
        return delivered

    def submit_sync(self, request: HashRequest) -> Optional[HashResult]:
        """Synchronous wrapper around :meth:`submit` for code without a loop.

        Raises:
            RuntimeError: Called from inside a running event loop; results
                are delivered on that loop, so await :meth:`submit` instead.
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.submit(request))
        raise RuntimeError(
            "submit_sync() cannot run inside an event loop; "
            "use \"await engine.submit(request)\" instead."
        )

    def _deliver(self, result: HashResult) -> None:
        self._sink(result)
        if result.is_error:
            self.logger.warning(
                "%s refused: %s", result.algorithm, result.message,
                reason=result.error.value if result.error else None,
            )
            if self._on_validation_error is not None:
                self._on_validation_error(result)
        else:
            self.logger.info(
                "%s completed in %s", result.algorithm, result.time_display
            )

    # ------------------------------------------------------------------ #
    #  Pipeline (worker thread)
    # ------------------------------------------------------------------ #

    def run_pipeline(self, request: HashRequest) -> HashResult:
        """Resolve salt, dispatch, time and aggregate one request.

        Runs synchronously on the calling thread and does not touch the
        result log or the busy state.  Validation failures become error
        results and are not raised.
        """
        return self._execute(request)[0]

    def _execute(
        self, request: HashRequest
    ) -> tuple[HashResult, Optional[TimingMeasurement]]:
        variant = request.variant
        with self.logger.operation(variant.kind.value):
            self.logger.debug("Pipeline started: %s", algorithm_label(variant))
            salt = self._salt_resolver.resolve(request.salt_text)

            started = self._harness.start()
            try:
                computation = self._dispatcher.prepare(
                    variant, request.input_text, salt, request.input_bytes
                )
            except HashValidationError as exc:
                elapsed = self._harness.elapsed_ms(started)
                return self._aggregator.build_error(variant, exc, elapsed), None

            try:
                measurement = self._harness.measure(computation)
            except HashValidationError as exc:
                elapsed = self._harness.elapsed_ms(started)
                return self._aggregator.build_error(variant, exc, elapsed), None
            return self._aggregator.build(variant, measurement), measurement

    # ------------------------------------------------------------------ #
    #  Lifecycle
    # ------------------------------------------------------------------ #

    def close(self) -> None:
        """Release the worker thread; waits for a running computation."""
        self._executor.shutdown(wait=True)

    def __enter__(self) -> HashBenchEngine:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    async def __aenter__(self) -> HashBenchEngine:
        return self

    async def __aexit__(self, *exc: object) -> None:
        self.close()
