class ProofError(Exception):
    """Base class for proof submission failures."""


class InvalidProofError(ProofError):
    """Verifier rejected the proof or returned an unusable result."""


class DuplicateProofError(ProofError):
    def __init__(self, proof_id):
        super().__init__(f'proof {proof_id!r} already submitted')
        self.proof_id = proof_id


class VerifierError(ProofError):
    """The external verifier could not be loaded or failed to run."""
