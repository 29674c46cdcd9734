import pytest

from summary_tool.core.config import settings

# Sätze (Split an ". " und "\n") und ihre Rank-Scores:
#   "The cat sat"    -> 132      "Lone line"  -> 0
#   "The cat ran"    -> 165      "The dog ran" -> 165
#   "The dog slept." -> 132      "Birds sing"  -> 0
#   "Xx yy", "Zz ww" -> 0
CATS_AND_DOGS = (
    "The cat sat. The cat ran. The dog slept.\n\n"
    "Lone line\n\n"
    "The dog ran. Birds sing\n\n"
    "Xx yy. Zz ww"
)


@pytest.fixture(autouse=True)
def _default_policies(monkeypatch):
    # unabhängig von einer lokalen .env immer mit den Default-Policies testen
    monkeypatch.setattr(settings, "collision_policy", "overwrite")
    monkeypatch.setattr(settings, "missing_key_policy", "skip")


@pytest.fixture
def cats_and_dogs_text() -> str:
    return CATS_AND_DOGS
