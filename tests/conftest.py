"""Shared fixtures for inventory manager tests."""

from pathlib import Path
from typing import Callable, Iterable, List, Tuple

import pytest

from inventory_manager.store import InventoryStore

FIXED_TIMESTAMP = "2026-01-01 12:00:00"


@pytest.fixture
def store() -> InventoryStore:
    """An empty store whose sales are stamped with a fixed timestamp."""
    return InventoryStore(clock=lambda: FIXED_TIMESTAMP)


@pytest.fixture
def seeded_store(store: InventoryStore) -> InventoryStore:
    """A store holding the three default sample items."""
    store.seed()
    return store


@pytest.fixture
def data_paths(tmp_path: Path) -> Tuple[Path, Path]:
    """Item and sale file locations inside a temporary data directory."""
    data_dir = tmp_path / "data"
    return data_dir / "items.csv", data_dir / "sales.csv"


@pytest.fixture
def scripted_input() -> Callable[[Iterable[str]], Callable[[str], str]]:
    """Builds an input function that replays answers, then raises EOFError."""

    def factory(answers: Iterable[str]) -> Callable[[str], str]:
        remaining = iter(answers)

        def fake_input(prompt: str) -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        return fake_input

    return factory


@pytest.fixture
def output_lines() -> List[str]:
    return []
