"""
Screengen kernel test configuration.

Shared fixtures for the two built-in displays. Kernel tests are pure:
no IO except the assembly tests, which write into pytest's tmp_path.
"""

import pytest

from screengen.kernel.profiles import SHARP_MIP_2IN7, WAVESHARE_2IN9


@pytest.fixture
def waveshare():
    return WAVESHARE_2IN9


@pytest.fixture
def sharp():
    return SHARP_MIP_2IN7
