from flask import Blueprint, jsonify, request, current_app
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge
from scoreproof import db
from scoreproof.services.proofs import InvalidProofError, DuplicateProofError, VerifierError
from scoreproof.services.proofs.verifier import get_verifier, normalize_result
from scoreproof.services.proofs.leaderboard import list_proofs, record_proof, scores_snapshot
from scoreproof.socketio_events import broadcast_scores
import json


leaderboard = Blueprint('leaderboard', __name__)


@leaderboard.errorhandler(RequestEntityTooLarge)
def proof_too_large(exc):
    current_app.logger.info(f"[proof-too-large] limit={current_app.config.get('MAX_CONTENT_LENGTH')}")
    return jsonify({'error': 'Proof file too large'}), 413


@leaderboard.route('/scores', methods=['GET'])
def get_scores():
    try:
        return jsonify(scores_snapshot())
    except Exception:
        current_app.logger.exception('[scores-fetch-fail]')
        return jsonify({'error': 'Failed to fetch scores'}), 500


@leaderboard.route('/proofs', methods=['GET'])
def get_proofs():
    try:
        return jsonify([p.to_dict() for p in list_proofs()])
    except Exception:
        current_app.logger.exception('[proofs-fetch-fail]')
        return jsonify({'error': 'Failed to fetch proofs'}), 500


@leaderboard.route('/scores/proof', methods=['POST'])
def submit_proof():
    # Expects multipart form-data with the proof JSON as file field "proof"
    try:
        upload = request.files.get('proof')
        if upload is None or not upload.filename:
            return jsonify({'error': 'No proof file uploaded'}), 400

        content = upload.read().decode('utf-8').strip()
        proof = json.loads(content)

        verifier = get_verifier()
        try:
            proof_id, score = normalize_result(verifier(proof))
        except InvalidProofError as exc:
            current_app.logger.info(f"[proof-invalid] {exc}")
            return jsonify({'error': 'Invalid proof data'}), 400

        try:
            record_proof(proof_id, content, score)
        except DuplicateProofError:
            current_app.logger.info(f"[proof-duplicate] proof={proof_id} score={score}")
            return jsonify({'error': 'Proof already submitted'}), 400

        current_app.logger.info(f"[proof-accepted] proof={proof_id} score={score}")
        broadcast_scores(score)
        return jsonify({'message': 'Proof verified and score updated', 'score': score}), 201
    except HTTPException:
        # e.g. upload larger than MAX_CONTENT_LENGTH, answered by proof_too_large
        raise
    except VerifierError as exc:
        db.session.rollback()
        current_app.logger.error(f"[verifier-fail] {exc}")
        return jsonify({'error': 'Failed to process proof'}), 500
    except Exception:
        db.session.rollback()
        current_app.logger.exception('[proof-fail]')
        return jsonify({'error': 'Failed to process proof'}), 500
