import sys
import logging

from sqlalchemy.exc import SQLAlchemyError

from gallery import create_app

logger = logging.getLogger(__name__)


def main():
    try:
        app = create_app()
    except (ValueError, SQLAlchemyError, ImportError) as e:
        # Without the region store nothing can be served
        logger.error(f"Could not open region store: {e}")
        sys.exit(1)

    host, port = app.config['HOST'], app.config['PORT']
    logger.info(f"Server running on {host}:{port}")
    app.run(host=host, port=port, threaded=True)


if __name__ == "__main__":
    main()
