from __future__ import annotations

import doctest

import pytest

import aocutils.config.defaults
import aocutils.engine.discovery
import aocutils.execution
import aocutils.foundation.keys
import aocutils.io.loader
import aocutils.io.paths


@pytest.mark.parametrize(
    "module",
    [
        aocutils.config.defaults,
        aocutils.engine.discovery,
        aocutils.execution,
        aocutils.foundation.keys,
        aocutils.io.loader,
        aocutils.io.paths,
    ],
    ids=lambda module: module.__name__,
)
def test_module_examples(module):
    result = doctest.testmod(module, optionflags=doctest.ELLIPSIS)
    assert result.attempted > 0
    assert result.failed == 0
