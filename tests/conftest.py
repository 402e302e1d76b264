"""Shared test fixtures."""

import pytest

from pytarde import KINDS, Unit

U64_MAX = 2**64 - 1

ALL_UNITS = list(Unit)
ALL_KINDS = list(KINDS.values())
SIGNED_KINDS = [k for k in ALL_KINDS if k.signed]
NARROW_KINDS = [k for k in ALL_KINDS if k.bits <= 32]


@pytest.fixture(params=ALL_UNITS, ids=str)
def unit(request):
    return request.param


@pytest.fixture(params=ALL_KINDS, ids=str)
def kind(request):
    return request.param
