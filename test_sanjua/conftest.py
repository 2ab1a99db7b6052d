""" Configure the tests """

import pytest

from sanjua.plugins import SanjuaBlock


@pytest.fixture(name="sanjua_block")
def _sanjua_block():
    """
    Return a fresh instance of the sanjua block.
    """
    return SanjuaBlock()
