"""Proof domain services: verification and leaderboard persistence.

Routes and socket handlers import from here, keeping transport concerns
separated from the verifier contract and the score tables.
"""

from .errors import ProofError, InvalidProofError, DuplicateProofError, VerifierError

__all__ = ['ProofError', 'InvalidProofError', 'DuplicateProofError', 'VerifierError']
