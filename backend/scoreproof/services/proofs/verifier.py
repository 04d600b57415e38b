"""Bridge to the external proof verifier.

A verifier is any callable taking the parsed proof object and returning a
``(proof_id, score)`` pair. The verifier signals an invalid proof with a
missing id or the ``INVALID_SCORE`` sentinel. The zero-knowledge check itself
lives outside this service; by default it is an external program configured
through ``VERIFIER_COMMAND``.
"""

import importlib
import json
import math
import shlex
import subprocess
from typing import Any, Callable, Tuple

from flask import current_app

from .errors import InvalidProofError, VerifierError

INVALID_SCORE = -1

Verifier = Callable[[Any], Tuple[Any, Any]]


def resolve_verifier(target) -> Verifier:
    """Return a verifier callable from a callable or a 'module:attribute' string."""
    if callable(target):
        return target
    if not target or not isinstance(target, str):
        raise VerifierError('No proof verifier configured')
    module_name, _, attr = target.partition(':')
    if not module_name or not attr:
        raise VerifierError(f"PROOF_VERIFIER must look like 'module:attribute', got {target!r}")
    try:
        module = importlib.import_module(module_name)
        fn = getattr(module, attr)
    except (ImportError, AttributeError) as exc:
        raise VerifierError(f'Cannot load verifier {target!r}: {exc}') from exc
    if not callable(fn):
        raise VerifierError(f'Verifier {target!r} is not callable')
    return fn


def get_verifier() -> Verifier:
    return resolve_verifier(current_app.config.get('PROOF_VERIFIER'))


def _coerce_score(raw) -> int:
    if isinstance(raw, bool):
        raise InvalidProofError('score is not a number')
    if isinstance(raw, int):
        return raw
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise InvalidProofError(f'score {raw!r} is not a number')
    if math.isnan(value) or math.isinf(value) or not value.is_integer():
        raise InvalidProofError(f'score {raw!r} is not an integer')
    return int(value)


def normalize_result(result) -> Tuple[str, int]:
    """Validate a raw verifier result, raising InvalidProofError if unusable."""
    try:
        proof_id, raw_score = result
    except (TypeError, ValueError):
        raise InvalidProofError('verifier returned a malformed result')
    if not proof_id:
        raise InvalidProofError('verifier returned no proof id')
    score = _coerce_score(raw_score)
    if score == INVALID_SCORE:
        raise InvalidProofError('verifier rejected the proof')
    return str(proof_id), score


def parse_verifier_output(output: str) -> Tuple[Any, Any]:
    """Read the verifier's answer from the last non-empty line of its stdout.

    Accepts ``{"proofId": ..., "score": ...}`` or ``[proofId, score]``.
    """
    lines = [line for line in (output or '').splitlines() if line.strip()]
    if not lines:
        raise VerifierError('verifier produced no output')
    try:
        data = json.loads(lines[-1])
    except ValueError as exc:
        raise VerifierError(f'verifier output is not JSON: {lines[-1][:200]!r}') from exc
    if isinstance(data, dict):
        return data.get('proofId'), data.get('score')
    if isinstance(data, list) and len(data) == 2:
        return data[0], data[1]
    raise VerifierError(f'unexpected verifier output: {data!r}')


def command_verifier(proof) -> Tuple[Any, Any]:
    """Run VERIFIER_COMMAND with the proof JSON on stdin."""
    cfg = current_app.config
    command = cfg.get('VERIFIER_COMMAND')
    if not command:
        raise VerifierError('VERIFIER_COMMAND is not set')
    argv = shlex.split(command) if isinstance(command, str) else list(command)
    timeout = int(cfg.get('VERIFIER_TIMEOUT_SEC', 120))
    try:
        completed = subprocess.run(
            argv,
            input=json.dumps(proof),
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        raise VerifierError(f'verifier timed out after {timeout}s') from exc
    except OSError as exc:
        raise VerifierError(f'cannot run verifier {argv[0]!r}: {exc}') from exc
    if completed.returncode != 0:
        stderr = (completed.stderr or '').strip()
        raise VerifierError(f'verifier exited with status {completed.returncode}: {stderr[:500]}')
    return parse_verifier_output(completed.stdout)
