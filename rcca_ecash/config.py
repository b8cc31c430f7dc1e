"""
RCCA e-cash configuration
Pairing curve and demo parameters, overridable through environment variables.
"""

import os

# Pairing parameters
DEFAULT_PAIRING_CURVE = os.getenv('RCCA_PAIRING_CURVE', 'MNT224')
FALLBACK_CURVES = ('BN254', 'SS512')

# Message dimension used by the demo script
DEFAULT_VECTOR_DIM = int(os.getenv('RCCA_VECTOR_DIM', 2))

# Seed for reproducible demo runs; unset means system randomness
DEMO_SEED = os.getenv('RCCA_DEMO_SEED')


class Config:
    """Runtime configuration."""

    def __init__(self):
        self.pairing_curve = DEFAULT_PAIRING_CURVE
        self.fallback_curves = FALLBACK_CURVES
        self.vector_dim = DEFAULT_VECTOR_DIM
        self.demo_seed = int(DEMO_SEED) if DEMO_SEED is not None else None

    @property
    def curve_candidates(self):
        candidates = [self.pairing_curve]
        candidates.extend(c for c in self.fallback_curves if c != self.pairing_curve)
        return candidates


# Global configuration instance
config = Config()
