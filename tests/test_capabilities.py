import asyncio

from ports.capabilities import ModelCapabilities

from fakes import FakeGrammarClassifier, capabilities


def test_absent_capabilities_warm_up_without_raising():
    models = ModelCapabilities.absent()
    assert asyncio.run(models.warm_up()) == {"grammar": False, "sentiment": False, "embedding": False}


def test_warm_up_reports_loaded_models():
    models = capabilities(grammar=FakeGrammarClassifier())
    assert asyncio.run(models.warm_up()) == {"grammar": True, "sentiment": False, "embedding": False}
