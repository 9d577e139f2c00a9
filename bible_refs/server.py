import logging
import os

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from bible_refs.routes.references_api import references_bp

load_dotenv()


def create_app() -> Flask:
    app = Flask(__name__)

    CORS(app)

    # Register blueprints
    app.register_blueprint(references_bp)

    return app


app = create_app()


def main():
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO"),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "5055")))


if __name__ == "__main__":
    main()
