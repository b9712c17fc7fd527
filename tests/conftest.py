from collections.abc import Generator

import pytest

from codepage_strings import Coding, clear_table_cache, resolve


@pytest.fixture(autouse=True)
def fresh_oem_tables() -> Generator[None, None, None]:
    """Build the OEM tables from scratch for every test."""
    clear_table_cache()
    yield
    clear_table_cache()


@pytest.fixture
def greek_oem() -> Coding:
    """Code page 869 (alternate Greek), served by the OEM tables."""
    return resolve(869)


@pytest.fixture
def baltic() -> Coding:
    """Code page 1257 (Baltic), served by a Python codec."""
    return resolve(1257)


@pytest.fixture
def utf8() -> Coding:
    """Code page 65001, identity transformation."""
    return resolve(65001)
