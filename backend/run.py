from scoreproof import create_app, socketio

app = create_app()

if __name__ == '__main__':
    # Use SocketIO server so /ws live updates work in dev
    socketio.run(app, host='0.0.0.0', port=app.config.get('PORT', 3939), debug=True)
