import pytest

@pytest.fixture(autouse=True)
def pin_environment(monkeypatch):
    monkeypatch.setenv("SCORING_VARIANT", "standard")
    monkeypatch.setenv("CLASSIFIER_PROVIDER", "mock")
    monkeypatch.setenv("DISPLAY_DELAY_SECONDS", "0")


@pytest.fixture
def make_record():
    from health_assess.schema import IntakeRecord

    def _make(**overrides):
        data = {
            "name": "Alex Doe",
            "age": 30,
            "gender": "prefer-not-to-say",
            "symptoms": "sore back",
            "duration": "hours",
            "severity": "mild",
            "medical_history": "",
        }
        data.update(overrides)
        return IntakeRecord.model_validate(data)

    return _make
