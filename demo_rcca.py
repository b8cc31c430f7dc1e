#!/usr/bin/env python3
"""
RCCA Encryption Demo
====================

Walks through key generation, encryption, the public ciphertext check and
decryption, then shows that a modified ciphertext is rejected.

Set RCCA_DEMO_SEED for a reproducible run and RCCA_VECTOR_DIM to change the
number of message slots.
"""

import logging
import random

from rcca_ecash import setup, key_gen, default_rng, ProofRejected
from rcca_ecash.config import config
from rcca_ecash.groups import random_g1
from rcca_ecash.rcca import Ciphertext


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("RCCA encryption demo")
    print("=" * 60)

    # 1. Setup
    print("\n[1] Initializing pairing group...")
    params = setup()
    group = params['group']
    n = config.vector_dim
    rng = random.Random(config.demo_seed) if config.demo_seed is not None else default_rng()
    print(f"✅ Curve {params['group_name']}, n={n}")

    # 2. Key generation
    print("\n[2] Generating keys...")
    dk, ek = key_gen(rng, group, n)
    print(f"✅ Keys generated (LHSPS dimension {ek.lhsps_vk.n})")

    # 3. Encryption
    print("\n[3] Encrypting a random message vector...")
    m = [random_g1(group, rng) for _ in range(n)]
    ct = ek.encrypt(rng, m)
    print(f"    - ciphertext vector length: {len(ct.c)}")
    print(f"    - selector proofs: {len(ct.cpf_ps)}")
    print(f"    - key-consistency proofs: {len(ct.cpf_fgh)}")

    # 4. Public check
    print("\n[4] Checking ciphertext proofs...")
    status = "✅ valid" if ct.is_valid(ek) else "❌ invalid"
    print(f"    {status}")

    # 5. Decryption
    print("\n[5] Decrypting...")
    recovered = dk.decrypt(ct)
    print(f"    Round trip: {'✅ match' if recovered == m else '❌ mismatch'}")

    # 6. Tampering
    print("\n[6] Tampering with c[2]...")
    tampered = Ciphertext(list(ct.c), ct.cpf_b, list(ct.cpf_ps), ct.cpf_v, list(ct.cpf_fgh), ct.cpf_w)
    tampered.c[2] = tampered.c[2] * random_g1(group, rng)
    try:
        dk.decrypt(tampered)
        print("    ❌ tampered ciphertext accepted")
    except ProofRejected as e:
        print(f"    ✅ {e}")

    print("\n" + "=" * 60)
    print("Demo complete")
    print("=" * 60)


if __name__ == "__main__":
    main()
