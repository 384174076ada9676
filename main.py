"""
Wordle Game Server - Main Entry Point

This is the main entry point for the Wordle game server.
It validates the word lists, initializes the session service and starts the
Flask-SocketIO application.
"""

from wordle import create_app
from wordle.config import get_config, validate_word_list_integrity
from wordle.services.session_service import initialize_session_service
from wordle.services.word_source import WordSource
from wordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        app_config = get_config()
        print(f"Initializing services ({app_config.__name__})...")

        validate_word_list_integrity()
        print("✓ Word lists validated")

        word_source = WordSource(strict=app_config.STRICT_WORD_CHECK)
        initialize_session_service(word_source)
        print(f"✓ Session service initialized ({len(word_source.answer_words)} answer words, "
              f"strict word check: {word_source.strict})")

        print("Creating Flask application...")
        app, socketio = create_app(app_config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordle Server Starting")

        print(f"\nStarting Wordle Game Server on {app_config.HOST}:{app_config.PORT}")
        print(f"Debug mode: {app_config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=app_config.HOST, port=app_config.PORT, debug=app_config.DEBUG,
                     allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
