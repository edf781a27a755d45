from sentinelconf.config import MappingPropertySource

import pytest


@pytest.fixture
def property_source():
    return MappingPropertySource()
