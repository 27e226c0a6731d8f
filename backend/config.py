import os
import logging
from typing import Dict, Any

from ports.capabilities import ModelCapabilities

logger = logging.getLogger(__name__)

try:
    from dotenv import load_dotenv
    load_dotenv()
except ImportError:
    pass

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8002
DEFAULT_GRAMMAR_MODEL_ID = "textattack/roberta-base-CoLA"
DEFAULT_SENTIMENT_MODEL_ID = "cardiffnlp/twitter-roberta-base-sentiment-latest"
DEFAULT_EMBEDDING_MODEL_ID = "sentence-transformers/all-MiniLM-L6-v2"
DEFAULT_MAX_GRAMMAR_SENTENCES = 5


class Config:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self.host = os.environ.get("HOST", DEFAULT_HOST)
        self.port = int(os.environ.get("PORT", DEFAULT_PORT))
        self.debug = os.environ.get("DEBUG", "0") == "1"
        self.enable_models = os.environ.get("ENABLE_MODELS", "true").lower() == "true"
        self.device = os.environ.get("MODEL_DEVICE", "cpu").lower()
        self.grammar_model_id = os.environ.get("GRAMMAR_MODEL_ID", DEFAULT_GRAMMAR_MODEL_ID)
        self.sentiment_model_id = os.environ.get("SENTIMENT_MODEL_ID", DEFAULT_SENTIMENT_MODEL_ID)
        self.embedding_model_id = os.environ.get("EMBEDDING_MODEL_ID", DEFAULT_EMBEDDING_MODEL_ID)
        self.max_grammar_sentences = int(
            os.environ.get("MAX_GRAMMAR_SENTENCES", DEFAULT_MAX_GRAMMAR_SENTENCES)
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "host": self.host,
            "port": self.port,
            "debug": self.debug,
            "enable_models": self.enable_models,
            "device": self.device,
            "grammar_model_id": self.grammar_model_id,
            "sentiment_model_id": self.sentiment_model_id,
            "embedding_model_id": self.embedding_model_id,
            "max_grammar_sentences": self.max_grammar_sentences,
        }


config = Config()


def get_config() -> Config:
    return config


def create_model_adapters(cfg: Config) -> ModelCapabilities:
    """Create the optional model adapters based on ENABLE_MODELS.

    Uses lazy imports so transformers is never loaded when models are off.
    """
    if not cfg.enable_models:
        logger.info("ML models disabled, using rule-based scoring only")
        return ModelCapabilities.absent()

    from adapters.huggingface import (
        HuggingFaceEmbedding, HuggingFaceGrammarClassifier, HuggingFaceSentimentClassifier,
    )
    models = ModelCapabilities(
        grammar=HuggingFaceGrammarClassifier(cfg.grammar_model_id, device=cfg.device),
        sentiment=HuggingFaceSentimentClassifier(cfg.sentiment_model_id, device=cfg.device),
        embedding=HuggingFaceEmbedding(cfg.embedding_model_id, device=cfg.device),
    )
    logger.info(
        f"ML adapters: grammar={cfg.grammar_model_id}, sentiment={cfg.sentiment_model_id}, "
        f"embedding={cfg.embedding_model_id}, device={cfg.device}"
    )
    return models
