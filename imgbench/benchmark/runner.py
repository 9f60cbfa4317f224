"""
Benchmark runner for executing encode benchmarks.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..codecs.base import BaseCodec, EncodeError, EncodeOptions, EncodeResult, ImageFormat
from ..config import Config
from ..data.loader import SampleImage

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkConfig:
    """Configuration for a benchmark run."""
    formats: List[ImageFormat] = field(default_factory=lambda: list(ImageFormat))
    options: Dict[ImageFormat, EncodeOptions] = field(default_factory=dict)
    max_concurrency: int = 0  # 0 = unbounded


@dataclass(frozen=True)
class EncodeRun:
    """
    Result of encoding every sample image into every format.

    Each format's results are in completion order, not input order.
    """
    image_count: int
    original_total_size: int
    results: Dict[ImageFormat, Tuple[EncodeResult, ...]]

    def to_dict(self) -> Dict[str, List[Dict[str, int]]]:
        """Convert to dictionary keyed by format name."""
        return {
            fmt.value: [r.to_dict() for r in format_results]
            for fmt, format_results in self.results.items()
        }


class BenchmarkRunner:
    """
    Encodes every sample image into every target format.

    Features:
        - All encodes launched concurrently on one event loop
        - Optional cap on in-flight encodes
        - Progress callbacks

    Example:
        runner = BenchmarkRunner(codec)
        run = runner.run(images)
    """

    def __init__(
        self,
        codec: BaseCodec,
        config: Optional[BenchmarkConfig] = None,
    ):
        """
        Initialize benchmark runner.

        Args:
            codec: Codec used for every encode
            config: Benchmark configuration
        """
        self.codec = codec
        self.config = config or BenchmarkConfig(
            options=Config.get_encode_options(),
            max_concurrency=Config.MAX_CONCURRENCY,
        )

        # Callbacks
        self._on_progress: Optional[Callable[[int, int], None]] = None

        self._semaphore: Optional[asyncio.Semaphore] = None
        self._completed = 0
        self._total = 0

    def on_progress(self, callback: Callable[[int, int], None]) -> "BenchmarkRunner":
        """
        Set progress callback.

        Args:
            callback: Function(completed, total) called after every encode
        """
        self._on_progress = callback
        return self

    def run(self, images: Sequence[SampleImage]) -> EncodeRun:
        """
        Run the benchmark to completion.

        Args:
            images: Loaded sample images

        Returns:
            EncodeRun with every format's results

        Raises:
            EncodeError: If any single encode fails
        """
        return asyncio.run(self.run_async(images))

    async def run_async(self, images: Sequence[SampleImage]) -> EncodeRun:
        """Async form of ``run``; all format batches run concurrently."""
        formats = list(self.config.formats)
        original_total_size = sum(image.size for image in images)

        self._completed = 0
        self._total = len(images) * len(formats)
        if self.config.max_concurrency > 0:
            self._semaphore = asyncio.Semaphore(self.config.max_concurrency)
        else:
            self._semaphore = None

        logger.info(
            f"Starting benchmark: {len(images)} images x {len(formats)} formats "
            f"({original_total_size} bytes original)"
        )

        batch_tasks = [asyncio.ensure_future(self._run_format(images, fmt)) for fmt in formats]
        try:
            batches = await asyncio.gather(*batch_tasks)
        except BaseException:
            await _cancel_and_drain(batch_tasks)
            raise
        results = dict(zip(formats, batches))

        for fmt, format_results in results.items():
            if len(format_results) != len(images):
                raise RuntimeError(
                    f"{fmt.value}: expected {len(images)} results, got {len(format_results)}"
                )

        logger.info("Benchmark complete")
        return EncodeRun(
            image_count=len(images),
            original_total_size=original_total_size,
            results=results,
        )

    async def _run_format(
        self,
        images: Sequence[SampleImage],
        fmt: ImageFormat,
    ) -> Tuple[EncodeResult, ...]:
        """
        Encode every image into one format.

        Args:
            images: Sample images
            fmt: Target format

        Returns:
            Tuple of EncodeResult in completion order
        """
        logger.info(f"Starting {fmt.value} batch: {len(images)} images")

        tasks = [asyncio.ensure_future(self._encode_single(image, fmt)) for image in images]
        collected: List[EncodeResult] = []

        try:
            for next_done in asyncio.as_completed(tasks):
                collected.append(await next_done)
        except BaseException:
            await _cancel_and_drain(tasks)
            raise

        total_size = sum(r.size for r in collected)
        logger.info(f"{fmt.value} batch complete: {total_size} bytes")
        return tuple(collected)

    async def _encode_single(self, image: SampleImage, fmt: ImageFormat) -> EncodeResult:
        """Encode one image off the event loop thread."""
        options = self.config.options.get(fmt)

        try:
            if self._semaphore is not None:
                async with self._semaphore:
                    result = await asyncio.to_thread(self.codec.encode, image.content, fmt, options)
            else:
                result = await asyncio.to_thread(self.codec.encode, image.content, fmt, options)
        except EncodeError as e:
            logger.error(f"Error encoding {image.name} to {fmt.value}: {e}")
            raise

        logger.debug(f"{image.name} -> {fmt.value}: {result.size} bytes in {result.duration}ms")

        self._completed += 1
        if self._on_progress:
            self._on_progress(self._completed, self._total)

        return result


async def _cancel_and_drain(tasks: Sequence["asyncio.Future"]) -> None:
    """Cancel unfinished tasks and retrieve every outcome, including exceptions."""
    for task in tasks:
        task.cancel()
    # Encodes already running in worker threads finish on their own
    await asyncio.gather(*tasks, return_exceptions=True)
