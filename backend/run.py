import click

from courtside import create_app, socketio

app = create_app()


@click.command()
@click.option('--host', default='0.0.0.0', show_default=True, help='Interface to bind.')
@click.option('--port', type=int, default=None, help='Port to listen on; defaults to the PORT setting.')
@click.option('--debug/--no-debug', default=False, show_default=True)
def serve(host, port, debug):
    """Serve the scoring API and the Socket.IO scoreboard stream."""
    port = port or app.config['PORT']
    app.logger.info(f"[startup] listening on http://{host}:{port}")
    # Use SocketIO server to enable websockets
    socketio.run(app, host=host, port=port, debug=debug, allow_unsafe_werkzeug=debug)


if __name__ == '__main__':
    serve()
