"""
RCCA Encryption for Transferable E-cash
=======================================

The cryptographic core of a pairing-based transferable e-cash construction:
a malleable, replayable-CCA secure public-key encryption whose ciphertexts
carry publicly verifiable proofs of well-formedness.

This package implements the scheme using charm-crypto with Type-3
asymmetric pairing curves.

Modules:
--------
- groups: Group initialization and sampling from an injected generator
- crs: Groth–Sahai common reference string (SXDH, binding)
- commit: Commitment pairs and the bilinear map F
- statement: Pairing-product equations and the two fixed shapes
- proofs: Groth–Sahai commit-and-prove
- verify: Groth–Sahai verification
- lhsps: One-time linearly homomorphic structure-preserving signatures
- rcca: RCCA key generation, encryption, decryption, ciphertext checking
- elgamal: Two-slot ElGamal vector encryption
- errors: DimensionMismatch, ProofRejected, InternalEncodingFault
- config: Environment-driven defaults

Usage:
------
    import random
    from rcca_ecash import setup, key_gen
    from rcca_ecash.groups import random_g1

    params = setup('MNT224')
    group = params['group']
    rng = random.Random(7)          # use groups.default_rng() outside tests

    dk, ek = key_gen(rng, group, 2)
    m = [random_g1(group, rng), random_g1(group, rng)]
    ct = ek.encrypt(rng, m)
    assert dk.decrypt(ct) == m
"""

__version__ = "0.1.0"

from .groups import setup, default_rng
from .crs import keygen_crs
from .rcca import key_gen
from .errors import DimensionMismatch, InternalEncodingFault, ProofRejected

__all__ = [
    'setup',
    'default_rng',
    'keygen_crs',
    'key_gen',
    'DimensionMismatch',
    'InternalEncodingFault',
    'ProofRejected',
]
