"""
Tests for group setup, sampling and the CRS.
"""

import random
import secrets

import pytest
from charm.toolbox.pairinggroup import ZR, G1, G2, GT

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from rcca_ecash.groups import setup, default_rng, identity, neg, random_g1, random_g2, random_scalar
from rcca_ecash.crs import keygen_crs, validate_crs
from rcca_ecash.utils import multiexp, pair_elems, pair_prod


@pytest.fixture(scope="module")
def pairing_params():
    return setup('MNT224')


@pytest.fixture(scope="module")
def group(pairing_params):
    return pairing_params['group']


def test_setup_returns_group_constants(pairing_params):
    for key in ('group', 'group_name', 'G1', 'G2', 'GT', 'ZR', 'pair'):
        assert key in pairing_params
    assert pairing_params['group_name'] in ('MNT224', 'BN254', 'SS512')


def test_default_rng_is_system_random():
    assert isinstance(default_rng(), secrets.SystemRandom)


def test_sampling_is_seeded(group):
    a = random.Random(5)
    b = random.Random(5)
    assert random_scalar(group, a) == random_scalar(group, b)
    assert random_g1(group, a) == random_g1(group, b)
    assert random_g2(group, a) == random_g2(group, b)


def test_random_scalar_is_nonzero(group):
    rng = random.Random(11)
    zero = group.init(ZR, 0)
    assert all(random_scalar(group, rng) != zero for _ in range(20))


def test_neg(group):
    rng = random.Random(12)
    s = random_scalar(group, rng)
    assert s + neg(group, s) == group.init(ZR, 0)


def test_identity_pairing(group):
    rng = random.Random(13)
    p = random_g1(group, rng)
    q = random_g2(group, rng)
    assert pair_elems(identity(group, G1), q, group) == identity(group, GT)
    assert pair_elems(p, identity(group, G2), group) == identity(group, GT)


def test_pair_prod_bilinear(group):
    rng = random.Random(14)
    p = random_g1(group, rng)
    q = random_g2(group, rng)
    a = random_scalar(group, rng)
    b = random_scalar(group, rng)
    assert pair_prod([p ** a, p], [q ** b, q], group) == pair_elems(p, q, group) ** (a * b + group.init(ZR, 1))


def test_multiexp_length_mismatch(group):
    rng = random.Random(15)
    with pytest.raises(ValueError):
        multiexp([random_g1(group, rng)], [], group, G1)


def test_crs_is_valid(group):
    crs = keygen_crs(random.Random(16), group)
    assert validate_crs(crs)
    assert crs['gt_gen'] == pair_elems(crs['g1_gen'], crs['g2_gen'], group)


def test_crs_keys_are_distinct(group):
    """Both commitment keys are distinct on each side of the pairing."""
    crs = keygen_crs(random.Random(17), group)
    for side in ('u', 'v'):
        (p, q), (tp, tq) = crs[side]
        assert p != q
        assert p != tp and q != tq


def test_crs_missing_key_is_invalid(group):
    crs = dict(keygen_crs(random.Random(18), group))
    del crs['v']
    assert not validate_crs(crs)


def test_crs_wrong_key_count_is_invalid(group):
    crs = dict(keygen_crs(random.Random(19), group))
    crs['u'] = crs['u'][:1]
    assert not validate_crs(crs)
