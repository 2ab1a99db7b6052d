"""
Test module for `SanjuaBlock`.
"""

from concurrent.futures import ThreadPoolExecutor

from sanjua.models import RenderDescriptor
from sanjua.plugins import SanjuaBlock, BlockPlugin, PluginInterface


EXPECTED = RenderDescriptor(
    title="Block title",
    markup="This is a block custom per test drpal 8.",
)


def test_metadata():
    """Test block metadata of `SanjuaBlock`."""
    assert SanjuaBlock.id == "sanjua_block"
    assert SanjuaBlock.admin_label == "Sanjua block"
    assert SanjuaBlock.category == "Custom sanjua block example"
    assert SanjuaBlock.description == "Provides a 'sanjua' block."
    assert issubclass(SanjuaBlock, BlockPlugin)
    assert issubclass(SanjuaBlock, PluginInterface)


def test_json():
    """Test property `json` of `SanjuaBlock`."""
    json = SanjuaBlock.json
    assert json["name"] == "sanjua_block"
    assert json["context"] == "Custom sanjua block example"
    assert json["admin_label"] == "Sanjua block"
    assert "sanjua" in json["dependencies"]


def test_build(sanjua_block):
    """Test method `build` of `SanjuaBlock`."""
    descriptor = sanjua_block.build()

    assert descriptor == EXPECTED
    assert descriptor.json == {
        "#title": "Block title",
        "#markup": "This is a block custom per test drpal 8.",
    }


def test_build_idempotent(sanjua_block):
    """Test that repeated calls of `build` yield identical results."""
    results = [sanjua_block.build() for _ in range(10)]

    assert all(result == EXPECTED for result in results)
    assert results[0] is not results[1]
    assert SanjuaBlock().build() == sanjua_block.build()


def test_build_concurrent(sanjua_block):
    """Test that concurrent calls of `build` yield identical results."""
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(
            pool.map(lambda _: sanjua_block.build(), range(100))
        )

    assert len(results) == 100
    assert all(result == EXPECTED for result in results)


def test_get(sanjua_block):
    """Test method `get` of `SanjuaBlock`."""
    result = sanjua_block.get(None, theme="olivero")

    assert result.content == EXPECTED
    assert result.log.default_origin == "Sanjua block"


def test_build_has_no_side_effects(sanjua_block):
    """Test that `build` leaves block, class, and results untouched."""
    result = sanjua_block.get(None)
    json_before = SanjuaBlock.json
    attributes_before = dict(vars(SanjuaBlock))
    instance_before = dict(vars(sanjua_block))
    log_before = result.log.json

    for _ in range(5):
        sanjua_block.build()

    assert SanjuaBlock.json == json_before
    assert dict(vars(SanjuaBlock)) == attributes_before
    assert dict(vars(sanjua_block)) == instance_before
    assert result.log.json == log_before
    assert result.content == EXPECTED


def test_build_does_not_log(sanjua_block):
    """Test that `build` on its own writes no log entries."""
    context = sanjua_block.create_context()
    sanjua_block.build()

    assert len(context.result.log) == 0
    assert context.result.content is None
