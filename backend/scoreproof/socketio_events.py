from flask_socketio import emit
from flask import current_app
from scoreproof import socketio
from scoreproof.services.proofs.leaderboard import scores_snapshot


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_ping(data=None):
    emit('pong', data or {})


def handle_get_scores(data=None):
    emit('scores', {'scores': scores_snapshot()})


def broadcast_scores(score: int) -> None:
    """Push the refreshed leaderboard to every client on /ws."""
    try:
        socketio.emit('scores_update', {'score': score, 'scores': scores_snapshot()}, namespace='/ws')
    except Exception as exc:
        # The proof is already committed; a failed push must not fail the request
        current_app.logger.warning(f"[ws-broadcast-fail] score={score} error={exc}")


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    socketio.on_event('connect', handle_connect, namespace='/ws')
    socketio.on_event('ping', handle_ping, namespace='/ws')
    socketio.on_event('get_scores', handle_get_scores, namespace='/ws')

    if testing:
        socketio.on_event('connect', handle_connect, namespace='/')
        socketio.on_event('ping', handle_ping, namespace='/')
        socketio.on_event('get_scores', handle_get_scores, namespace='/')
