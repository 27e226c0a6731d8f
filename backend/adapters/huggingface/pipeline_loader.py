"""LazyPipeline — loads a transformers pipeline once, on first use.

Concurrent callers during the first load await the same in-flight task, so
the model is only downloaded/instantiated once per process. A failed load is
kept and re-raised as ModelUnavailableError on every later call; a load that
was itself cancelled is started again by the next caller. Inference calls are
serialized because pipelines and their tokenizers are not re-entrant.
"""

import asyncio
import logging
from typing import Any, Callable, Optional

from exceptions import ModelResponseError, ModelUnavailableError

logger = logging.getLogger(__name__)

PipelineFactory = Callable[[str, str, str], Any]


def resolve_device(device: str) -> int:
    """Map "cuda"/"cpu" to the transformers device index."""
    if device == "cpu":
        return -1
    import torch

    if torch.cuda.is_available():
        return 0
    logger.warning("CUDA requested but not available, running models on CPU")
    return -1


def transformers_pipeline(task: str, model_id: str, device: str) -> Any:
    from transformers import pipeline

    return pipeline(task, model=model_id, device=resolve_device(device))


class LazyPipeline:
    def __init__(
        self,
        capability: str,
        task: str,
        model_id: str,
        device: str = "cpu",
        factory: Optional[PipelineFactory] = None,
    ):
        self.capability = capability
        self.task = task
        self.model_id = model_id
        self.device = device
        self._factory = factory or transformers_pipeline
        self._pipeline: Any = None
        self._loading: Optional[asyncio.Task] = None
        self._lock = asyncio.Lock()

    def is_loaded(self) -> bool:
        return self._pipeline is not None

    async def get(self) -> Any:
        if self._pipeline is not None:
            return self._pipeline
        if self._loading is None or self._loading.cancelled():
            self._loading = asyncio.ensure_future(self._load())
        # shield so one cancelled caller does not cancel the shared load
        return await asyncio.shield(self._loading)

    async def _load(self) -> Any:
        logger.info(f"Loading {self.capability} model {self.model_id} ({self.task}, device={self.device})")
        try:
            pipe = await asyncio.to_thread(self._factory, self.task, self.model_id, self.device)
        except Exception as e:
            logger.error(f"Failed to load {self.capability} model {self.model_id}: {e}", exc_info=True)
            raise ModelUnavailableError(self.capability, e) from e
        self._pipeline = pipe
        logger.info(f"{self.capability} model ready: {self.model_id}")
        return pipe

    async def __call__(self, *args, **kwargs) -> Any:
        """Run the pipeline in a worker thread, one call at a time."""
        pipe = await self.get()
        async with self._lock:
            return await asyncio.to_thread(pipe, *args, **kwargs)


def top_prediction(output: Any, capability: str) -> tuple[str, float]:
    """Extract (label, score) from a text-classification pipeline result."""
    prediction = output[0] if isinstance(output, list) and output else output
    if isinstance(prediction, list) and prediction:
        # top_k style output: [[{...}, {...}]]
        prediction = prediction[0]
    if not isinstance(prediction, dict) or "label" not in prediction:
        raise ModelResponseError(capability, f"unexpected output {output!r:.200}")
    try:
        score = float(prediction.get("score", 0.0))
    except (TypeError, ValueError) as e:
        raise ModelResponseError(capability, f"non-numeric score {prediction.get('score')!r}", e) from e
    return str(prediction["label"]), score
