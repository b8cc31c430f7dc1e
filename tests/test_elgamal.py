"""
Tests for the two-slot ElGamal vector encryption.
"""

import random

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from rcca_ecash import elgamal
from rcca_ecash.groups import setup, random_g1, random_scalar


@pytest.fixture(scope="module")
def group():
    return setup('MNT224')['group']


@pytest.fixture(scope="module")
def rng():
    return random.Random(31337)


@pytest.fixture(scope="module")
def keys(group, rng):
    return elgamal.key_gen(rng, group)


@pytest.fixture(scope="module")
def message(group, rng):
    return random_g1(group, rng), random_g1(group, rng)


def test_encrypt_decrypt(rng, keys, message):
    dk, ek = keys
    m1, m2 = message
    assert dk.decrypt(ek.encrypt(rng, m1, m2)) == (m1, m2)


def test_encrypt_with_is_deterministic(group, rng, keys, message):
    _, ek = keys
    m1, m2 = message
    v = random_scalar(group, rng)
    assert ek.encrypt_with(m1, m2, v) == ek.encrypt_with(m1, m2, v)


def test_rerandomize(rng, keys, message):
    dk, ek = keys
    m1, m2 = message
    c = ek.encrypt(rng, m1, m2)
    c_new = ek.rerandomize(rng, c)
    assert c_new != c
    assert c_new.c0 != c.c0
    assert dk.decrypt(c_new) == (m1, m2)


def test_verify(group, rng, keys, message):
    _, ek = keys
    m1, m2 = message
    v = random_scalar(group, rng)
    c = ek.encrypt_with(m1, m2, v)
    assert ek.verify(m1, m2, c, v)
    assert not ek.verify(m2, m1, c, v)
    assert not ek.verify(m1, m2, c, random_scalar(group, rng))


def test_slots_share_generator(keys):
    dk, ek = keys
    assert ek.pk1 == ek.g ** dk.dk1
    assert ek.pk2 == ek.g ** dk.dk2
