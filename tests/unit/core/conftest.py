"""Shared fixtures for core unit tests"""

import pytest

from docblock.core.compiler import Compiler


SAMPLE_BLOCK = """\
---
title: Button
slug: button
---
Buttons trigger actions.

@## Usage
Use the `intent` prop for color.

@param {"type": "string", "default": "none"} intent visual intent of the button
@example ...
@Component({selector: "app-button"})
class ButtonExample {}
...

@Decorator usage stays inline
@deprecated
"""


@pytest.fixture(name="compiler")
def compiler_fixture():
    return Compiler(reserved_tags=["Decorator"])


@pytest.fixture(name="sample_block")
def sample_block_fixture():
    return SAMPLE_BLOCK
