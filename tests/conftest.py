import pytest

import legc.codegen.base as b


@pytest.fixture
def labels():
    yield b.LabelFactory()
