"""HuggingFaceGrammarClassifier — CoLA acceptability classifier via transformers."""

import logging
from typing import Optional

from adapters.huggingface.pipeline_loader import LazyPipeline, PipelineFactory, top_prediction
from domain.models import AcceptabilityVerdict
from exceptions import ModelResponseError, SpeechAnalysisError
from ports.grammar import GrammarClassifierPort

logger = logging.getLogger(__name__)

DEFAULT_GRAMMAR_MODEL = "textattack/roberta-base-CoLA"

# CoLA fine-tunes report either named labels or the raw class index.
ACCEPTABLE_LABELS = {"acceptable", "label_1"}
UNACCEPTABLE_LABELS = {"unacceptable", "label_0"}


class HuggingFaceGrammarClassifier(GrammarClassifierPort):
    def __init__(
        self,
        model_id: str = DEFAULT_GRAMMAR_MODEL,
        device: str = "cpu",
        factory: Optional[PipelineFactory] = None,
    ):
        self._pipeline = LazyPipeline("grammar", "text-classification", model_id, device, factory)

    async def load(self) -> None:
        await self._pipeline.get()

    async def classify(self, sentence: str) -> AcceptabilityVerdict:
        try:
            output = await self._pipeline(sentence, truncation=True)
        except SpeechAnalysisError:
            raise
        except Exception as e:
            raise ModelResponseError("grammar", str(e), e) from e

        label, score = top_prediction(output, "grammar")
        normalized = label.lower()
        if normalized in ACCEPTABLE_LABELS:
            return AcceptabilityVerdict(acceptable=True, score=score)
        if normalized in UNACCEPTABLE_LABELS:
            return AcceptabilityVerdict(acceptable=False, score=score)
        raise ModelResponseError("grammar", f"unknown label {label!r}")

    def is_loaded(self) -> bool:
        return self._pipeline.is_loaded()

    def model_name(self) -> str:
        return self._pipeline.model_id
