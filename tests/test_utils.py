from pathlib import Path
import pytest

from gridlogic.loopy import LOOPY_STEPS
from gridlogic.net import NET_STEPS
from gridlogic.registry import (
    default_log_level,
    default_loopy_max_passes,
    default_loopy_steps,
    default_net_seed_steps,
    load_solver_defaults,
)
from gridlogic.utils import count_where, ensure_list, load_yaml, only, only_two


def test_only_requires_a_single_match() -> None:
    assert only([1, 2, 3], lambda x: x > 2) == 3
    assert only([1, 2, 3], lambda x: x > 1) is None
    assert only([], lambda x: True) is None


def test_only_two_requires_exactly_two_matches() -> None:
    assert only_two([1, 2, 3, 4], lambda x: x % 2 == 0) == (2, 4)
    assert only_two([1, 2, 3], lambda x: x % 2 == 0) is None
    assert only_two([2, 4, 6], lambda x: x % 2 == 0) is None


def test_count_where() -> None:
    assert count_where("loopy", lambda ch: ch == "o") == 2


def test_load_yaml_handles_empty_files(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert load_yaml(path) == {}


def test_ensure_list() -> None:
    assert ensure_list(None, name="edges", item_desc="ids") == []
    assert ensure_list([1], name="edges", item_desc="ids") == [1]
    with pytest.raises(TypeError):
        ensure_list("1", name="edges", item_desc="ids")


def test_packaged_defaults_name_registered_steps() -> None:
    defaults = load_solver_defaults()

    assert set(defaults) >= {"loopy", "net", "logging"}
    assert default_loopy_steps()
    assert set(default_loopy_steps()) <= set(LOOPY_STEPS)
    assert set(default_net_seed_steps()) <= set(NET_STEPS)
    assert default_loopy_max_passes() is None
    assert default_log_level() == "WARNING"
