"""
Group Initialization and Sampling
=================================

This module handles the initialization of Type-3 asymmetric pairing groups
and the sampling of scalars and group elements from an injected generator.

According to charm-crypto documentation (https://jhuisi.github.io/charm/tutorial.html):
- PairingGroup('MNT224') provides asymmetric Type-3 pairings with 224-bit base field
- Alternative curves: 'BN254', 'SS512' (symmetric, but can be used)
- G1, G2 are the source groups; GT is the target group
- Pairing operation: pair(g1_elem, g2_elem) -> GT element

Randomness:
-----------
Nothing in this package calls group.random(). Every randomized algorithm takes
an explicit generator `rng` exposing the random.Random API (randrange,
getrandbits). Use default_rng() in production and random.Random(seed) in tests.
"""

import logging
import secrets

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1, G2, GT, pair

from .config import config

logger = logging.getLogger(__name__)

# Bytes of fresh randomness hashed into G1/G2 per sampled element
_HASH_INPUT_BYTES = 32


def setup(group_name: str = None) -> dict:
    """
    Initialize the pairing group used by every scheme in this package.

    Sets up the Type-3 asymmetric bilinear pairing groups:
    - G1, G2 source groups (messages and ciphertexts live in G1)
    - GT target group
    - Bilinear map e: G1 × G2 → GT (implemented as pair function)

    Parameters
    ----------
    group_name : str, optional
        The pairing curve identifier. Defaults to config.pairing_curve
        ('MNT224' unless RCCA_PAIRING_CURVE is set). If the curve is not
        available, 'BN254' and then 'SS512' are tried.

    Returns
    -------
    dict
        A dictionary containing:
        - 'group': The PairingGroup object
        - 'group_name': The name of the curve used
        - 'G1', 'G2', 'GT', 'ZR': The group type constants
        - 'pair': The pairing function

    Examples
    --------
    >>> params = setup('MNT224')
    >>> group = params['group']
    """
    candidates = config.curve_candidates
    if group_name is not None:
        candidates = [group_name] + [c for c in candidates if c != group_name]

    group = None
    last_error = None
    for name in candidates:
        try:
            group = PairingGroup(name)
            group_name = name
            break
        except Exception as e:
            last_error = e
            logger.warning("Pairing curve %s not available (%s), trying next candidate", name, e)

    if group is None:
        raise RuntimeError(f"No pairing curve available from {candidates}: {last_error}")

    return {
        'group': group,
        'group_name': group_name,
        'G1': G1,
        'G2': G2,
        'GT': GT,
        'ZR': ZR,
        'pair': pair,
    }


def default_rng():
    """Cryptographically secure generator for production use."""
    return secrets.SystemRandom()


def random_scalar(group: PairingGroup, rng) -> ZR:
    """
    Sample a uniform non-zero scalar in Z_p.

    Parameters
    ----------
    group : PairingGroup
        The pairing group
    rng : random.Random-like
        The injected randomness source

    Returns
    -------
    ZR
        A scalar in [1, p-1]
    """
    return group.init(ZR, rng.randrange(1, int(group.order())))


def random_g1(group: PairingGroup, rng) -> G1:
    """
    Sample a uniform element of G1.

    Fresh random bytes are hashed into the group, so nobody (including the
    caller) learns the discrete logarithm of the result with respect to any
    other element.
    """
    return group.hash(_random_bytes(rng), G1)


def random_g2(group: PairingGroup, rng) -> G2:
    """Sample a uniform element of G2 (see random_g1)."""
    return group.hash(_random_bytes(rng), G2)


def identity(group: PairingGroup, kind):
    """Identity element of G1, G2 or GT."""
    return group.init(kind, 1)


def neg(group: PairingGroup, s: ZR) -> ZR:
    """Additive inverse -s in Z_p."""
    return group.init(ZR, 0) - s


def _random_bytes(rng) -> bytes:
    return rng.getrandbits(8 * _HASH_INPUT_BYTES).to_bytes(_HASH_INPUT_BYTES, 'big')
