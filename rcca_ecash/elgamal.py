"""
ElGamal Vector Encryption "E"
=============================

Two-slot ElGamal encryption over G1 with a shared generator and shared
randomness, used next to the RCCA scheme for values that only need
re-randomizable (not CCA) encryption.

    pk_i = g^{dk_i}
    Enc(m_1, m_2; v) = (g^v, m_1 · pk_1^v, m_2 · pk_2^v)
    Dec(c) = (c_1 / c_0^{dk_1}, c_2 / c_0^{dk_2})
"""

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1
from typing import Tuple

from .groups import random_g1, random_scalar


class Ciphertext:
    """(c0, c1, c2) = (g^v, m_1 · pk_1^v, m_2 · pk_2^v)"""

    def __init__(self, c0: G1, c1: G1, c2: G1):
        self.c0 = c0
        self.c1 = c1
        self.c2 = c2

    def __eq__(self, other):
        if not isinstance(other, Ciphertext):
            return NotImplemented
        return self.c0 == other.c0 and self.c1 == other.c1 and self.c2 == other.c2


class EncryptKey:

    def __init__(self, group: PairingGroup, g: G1, pk1: G1, pk2: G1):
        self.group = group
        self.g = g
        self.pk1 = pk1
        self.pk2 = pk2

    def encrypt(self, rng, m1: G1, m2: G1) -> Ciphertext:
        """Encrypt (m1, m2) with fresh randomness."""
        v = random_scalar(self.group, rng)
        return self.encrypt_with(m1, m2, v)

    def encrypt_with(self, m1: G1, m2: G1, v: ZR) -> Ciphertext:
        """Encrypt (m1, m2) with the given randomness v."""
        return Ciphertext(self.g ** v, m1 * (self.pk1 ** v), m2 * (self.pk2 ** v))

    def rerandomize(self, rng, c: Ciphertext) -> Ciphertext:
        """
        Return a fresh encryption of the same pair.

        Formula:
        --------
        (c0 · g^v, c1 · pk_1^v, c2 · pk_2^v),   v ←$ Z_p
        """
        v = random_scalar(self.group, rng)
        return Ciphertext(c.c0 * (self.g ** v), c.c1 * (self.pk1 ** v), c.c2 * (self.pk2 ** v))

    def verify(self, m1: G1, m2: G1, c: Ciphertext, v: ZR) -> bool:
        """True if c is the encryption of (m1, m2) under randomness v."""
        return self.encrypt_with(m1, m2, v) == c


class DecryptKey:

    def __init__(self, enc_key: EncryptKey, dk1: ZR, dk2: ZR):
        self.enc_key = enc_key
        self.dk1 = dk1
        self.dk2 = dk2

    def decrypt(self, c: Ciphertext) -> Tuple[G1, G1]:
        m1 = c.c1 * ((c.c0 ** self.dk1) ** -1)
        m2 = c.c2 * ((c.c0 ** self.dk2) ** -1)
        return m1, m2


def key_gen(rng, group: PairingGroup) -> Tuple[DecryptKey, EncryptKey]:
    """
    Generate a key pair. Both slots share the generator g.

    Returns
    -------
    Tuple[DecryptKey, EncryptKey]
        (dk, ek)
    """
    g = random_g1(group, rng)
    dk1 = random_scalar(group, rng)
    dk2 = random_scalar(group, rng)

    enc_key = EncryptKey(group, g, g ** dk1, g ** dk2)
    return DecryptKey(enc_key, dk1, dk2), enc_key
