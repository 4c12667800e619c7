from shapegrid import create_app, socketio, db

app = create_app()

if __name__ == '__main__':
    with app.app_context():
        import shapegrid.models  # noqa: F401
        db.create_all()
    # Use SocketIO server to enable websockets in dev
    socketio.run(app, debug=True)
