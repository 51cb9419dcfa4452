from __future__ import annotations

import json

import pytest
import yaml

from hello_world import render_fixture
from hello_world.mock import export


def test_render_json_round_trips() -> None:
    assert json.loads(render_fixture("json")) == export()


def test_render_yaml_round_trips_and_keeps_order() -> None:
    text = render_fixture("yaml")

    assert yaml.safe_load(text) == export()
    assert text.index("users:") < text.index("profiles:")


def test_render_rejects_unknown_format() -> None:
    with pytest.raises(ValueError):
        render_fixture("xml")


def test_render_fixture_is_documented() -> None:
    from hello_world import formatting

    assert formatting.render_fixture.__doc__
